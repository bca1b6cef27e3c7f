"""Attachment schemas."""

import uuid
from datetime import datetime

from pydantic import BaseModel


class AttachmentResponse(BaseModel):
    id: uuid.UUID
    filename: str
    size: int
    mime_type: str
    url: str
    uploaded_at: datetime


class AttachmentPayload(BaseModel):
    attachment: AttachmentResponse

"""Initial schema: users, categories, notes, attachments

Revision ID: 4f1c2a9b7d10
Revises:
Create Date: 2026-10-19 09:12:05.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from notesapi.core.models.types import GUID, StringListType


# revision identifiers, used by Alembic.
revision: str = '4f1c2a9b7d10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False, unique=True),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('length(name) <= 100', name='ck_users_name_len'),
        sa.CheckConstraint('length(email) <= 255', name='ck_users_email_len'),
    )
    op.create_index('idx_users_email', 'users', ['email'])

    op.create_table(
        'categories',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('user_id', GUID(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(length=50), nullable=False),
        sa.Column('color', sa.String(length=7), nullable=True),
        *_timestamps(),
        sa.CheckConstraint('length(name) <= 50', name='ck_categories_name_len'),
        sa.CheckConstraint('color IS NULL OR length(color) <= 7', name='ck_categories_color_len'),
    )
    op.create_index('idx_categories_user_id', 'categories', ['user_id'])

    op.create_table(
        'notes',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('user_id', GUID(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('category', sa.String(length=50), nullable=True),
        sa.Column('tags', StringListType(), nullable=False),
        sa.Column('archived', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.CheckConstraint('length(title) <= 200', name='ck_notes_title_len'),
        sa.CheckConstraint('category IS NULL OR length(category) <= 50', name='ck_notes_category_len'),
    )
    op.create_index('idx_notes_user_id', 'notes', ['user_id'])
    op.create_index('idx_notes_user_updated', 'notes', ['user_id', 'updated_at'])
    op.create_index('idx_notes_deleted_at', 'notes', ['deleted_at'])

    op.create_table(
        'attachments',
        sa.Column('id', GUID(), primary_key=True),
        sa.Column('note_id', GUID(), sa.ForeignKey('notes.id', ondelete='CASCADE'), nullable=False),
        sa.Column('file_name', sa.String(length=255), nullable=False),
        sa.Column('mime_type', sa.String(length=100), nullable=False),
        sa.Column('size', sa.BigInteger(), nullable=False),
        sa.Column('storage_path', sa.String(length=512), nullable=False),
        *_timestamps(),
    )
    op.create_index('idx_attachments_note_id', 'attachments', ['note_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('idx_attachments_note_id', table_name='attachments')
    op.drop_table('attachments')
    op.drop_index('idx_notes_deleted_at', table_name='notes')
    op.drop_index('idx_notes_user_updated', table_name='notes')
    op.drop_index('idx_notes_user_id', table_name='notes')
    op.drop_table('notes')
    op.drop_index('idx_categories_user_id', table_name='categories')
    op.drop_table('categories')
    op.drop_index('idx_users_email', table_name='users')
    op.drop_table('users')

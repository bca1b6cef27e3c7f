"""
Notes API Backend - personal note taking with offline sync

Accounts, notes, categories, attachments and a simple pull/push sync
protocol for offline-first clients.
"""

__version__ = "1.0.0"

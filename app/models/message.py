"""
Chat message models for the per-alert conversation thread.
"""

from pydantic import BaseModel, Field
from datetime import datetime
from enum import Enum


class SenderRole(str, Enum):
    USER = "user"
    ADMIN = "admin"


class MessageCreate(BaseModel):
    """Model for sending a message."""
    alert_id: str = Field(..., min_length=1)
    sender_id: str = Field(..., min_length=1)
    sender_role: SenderRole
    content: str = Field(..., min_length=1, max_length=2000)


class MessageResponse(BaseModel):
    id: str
    alert_id: str
    sender_id: str
    sender_role: SenderRole
    content: str
    created_at: datetime
    is_read: bool = False

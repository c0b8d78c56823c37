"""
Notification models and the domain events that produce them.
"""

from pydantic import BaseModel, Field
from datetime import datetime
from typing import Generic, List, TypeVar

T = TypeVar("T")


class NotificationCreate(BaseModel):
    """Model for creating a notification directly (POST /api/notifications)."""
    user_id: str = Field(..., min_length=1, description="Recipient")
    title: str = Field(..., min_length=1, max_length=200)
    body: str = Field(default="", max_length=1000)


class NotificationResponse(BaseModel):
    id: str
    user_id: str
    title: str
    body: str
    is_read: bool = False
    created_at: datetime


class MarkAllReadRequest(BaseModel):
    user_id: str = Field(..., min_length=1)


class NotificationEvent(BaseModel):
    """
    A notification that a state transition asks to be delivered.
    Produced by the fan-out rules, written by the notification service.
    """
    recipient_id: str
    title: str
    body: str


class MutationResult(BaseModel, Generic[T]):
    """Result of a mutating service call: the updated entity plus derived events."""
    entity: T
    events: List[NotificationEvent] = Field(default_factory=list)

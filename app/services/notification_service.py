"""
Notification Service - Store and deliver in-app notifications.

Notifications are created either directly or by dispatching the events
returned from the alert, form and message services. Read state only moves
from unread to read.
"""

from app.config.seed import NOTIFICATIONS
from app.config.store import Store, get_store
from app.models.notification import NotificationEvent, NotificationResponse
from app.utils.clock import generate_id, parse_timestamp, to_iso, utc_now
from datetime import datetime
from typing import Callable, Iterable, List, Optional
import logging

logger = logging.getLogger(__name__)


class NotificationService:
    """Service for the notifications record."""

    def __init__(self, store: Store, clock: Callable[[], datetime] = utc_now):
        self.store = store
        self.clock = clock

    def list_notifications(self, user_id: Optional[str] = None) -> List[NotificationResponse]:
        """
        All notifications, optionally for a single recipient, newest first.
        """
        items = self.store.list(NOTIFICATIONS)
        if user_id:
            items = [n for n in items if n.get("user_id") == user_id]
        items.sort(key=lambda n: parse_timestamp(n["created_at"]), reverse=True)
        return [NotificationResponse(**n) for n in items]

    def create_notification(self, user_id: str, title: str, body: str) -> NotificationResponse:
        return self.dispatch([NotificationEvent(recipient_id=user_id, title=title, body=body)])[0]

    def dispatch(self, events: Iterable[NotificationEvent]) -> List[NotificationResponse]:
        """
        Write one notification per event, newest first, in a single record write.
        """
        events = list(events)
        if not events:
            return []

        created_at = to_iso(self.clock())
        records = [
            {
                "id": generate_id("notif"),
                "user_id": event.recipient_id,
                "title": event.title,
                "body": event.body,
                "is_read": False,
                "created_at": created_at,
            }
            for event in events
        ]
        # Prepended as a block in reverse so the last event ends up on top
        self.store.insert(NOTIFICATIONS, list(reversed(records)), prepend=True)

        for record in records:
            logger.info(f"Notification {record['id']} -> {record['user_id']}: {record['title']}")
        return [NotificationResponse(**r) for r in records]

    def mark_read(self, notification_id: str) -> bool:
        """Mark one notification read. Unknown ids are ignored."""
        matched = self.store.update_where(
            NOTIFICATIONS,
            lambda n: n.get("id") == notification_id and not n.get("is_read"),
            {"is_read": True},
        )
        return matched > 0

    def mark_all_read(self, user_id: str) -> int:
        """Mark every unread notification of a recipient read. Returns how many changed."""
        matched = self.store.update_where(
            NOTIFICATIONS,
            lambda n: n.get("user_id") == user_id and not n.get("is_read"),
            {"is_read": True},
        )
        if matched:
            logger.info(f"Marked {matched} notification(s) read for {user_id}")
        return matched

    def unread_count(self, user_id: str) -> int:
        return sum(1 for n in self.store.list(NOTIFICATIONS) if n.get("user_id") == user_id and not n.get("is_read"))


# Global service instance
_notification_service = None


def get_notification_service() -> NotificationService:
    """Get or create NotificationService singleton."""
    global _notification_service
    if _notification_service is None:
        _notification_service = NotificationService(get_store())
    return _notification_service

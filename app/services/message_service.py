"""
Message Service - Chat thread between an alert's owner and the administrators.
"""

from app.config.seed import ALERTS, MESSAGES
from app.config.store import Store, get_store
from app.core.errors import ValidationFailure
from app.models.message import MessageResponse, SenderRole
from app.models.notification import MutationResult
from app.services import fanout
from app.services.notification_service import NotificationService, get_notification_service
from app.utils.clock import generate_id, parse_timestamp, to_iso, utc_now
from datetime import datetime
from typing import Callable, List, Optional, Union
import logging

logger = logging.getLogger(__name__)


class MessageService:
    """Service for messages attached to alerts."""

    def __init__(
        self,
        store: Store,
        notifications: Optional[NotificationService] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.store = store
        self.notifications = notifications
        self.clock = clock

    def list_messages(self, alert_id: str) -> List[MessageResponse]:
        """Messages of one alert, oldest first."""
        items = [m for m in self.store.list(MESSAGES) if m.get("alert_id") == alert_id]
        items.sort(key=lambda m: parse_timestamp(m["created_at"]))
        return [MessageResponse(**m) for m in items]

    def send_message(
        self,
        alert_id: str,
        sender_id: str,
        sender_role: Union[SenderRole, str],
        content: str,
    ) -> MutationResult[MessageResponse]:
        """
        Append a message and notify the other party.

        A message for an unknown alert is still recorded, but there is no
        owner to notify so no notification is created.

        Raises:
            ValidationFailure: Missing ids, unknown role or empty content
        """
        if not alert_id or not sender_id:
            raise ValidationFailure("alert_id and sender_id are required")
        if not content or not content.strip():
            raise ValidationFailure("Message content cannot be empty")
        try:
            role = SenderRole(getattr(sender_role, "value", sender_role))
        except ValueError:
            raise ValidationFailure(f"Invalid sender_role '{sender_role}'")

        message = {
            "id": generate_id("msg"),
            "alert_id": alert_id,
            "sender_id": sender_id,
            "sender_role": role.value,
            "content": content,
            "created_at": to_iso(self.clock()),
            "is_read": False,
        }

        with self.store.transaction():
            self.store.insert(MESSAGES, [message])
            alert = self.store.get(ALERTS, alert_id)
            if alert is None:
                logger.warning(f"Message {message['id']} sent for unknown alert {alert_id}, no notification created")
            event = fanout.message_sent(alert, message)
            events = [event] if event else []
            if self.notifications is not None and events:
                self.notifications.dispatch(events)

        return MutationResult[MessageResponse](entity=MessageResponse(**message), events=events)


# Global service instance
_message_service = None


def get_message_service() -> MessageService:
    """Get or create MessageService singleton."""
    global _message_service
    if _message_service is None:
        _message_service = MessageService(get_store(), get_notification_service())
    return _message_service

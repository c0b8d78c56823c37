"""
Alert service - Business logic for waste alert handling.

DESIGN NOTE:
- Alerts are created by citizens with status "pending"
- Administrators move alerts between statuses; any status may follow any other
- Every mutation refreshes updated_at
- Only creation and a real status change produce notifications
"""

from app.config.seed import ALERTS
from app.config.store import Store, get_store
from app.core.errors import NotFoundError, ValidationFailure
from app.models.alert import AlertCreate, AlertResponse, AlertStatus, AlertUpdate
from app.models.notification import MutationResult
from app.services import fanout
from app.services.notification_service import NotificationService, get_notification_service
from app.utils.clock import advance_timestamp, generate_id, parse_timestamp, to_iso, utc_now
from datetime import datetime
from typing import Callable, Dict, List, Optional, Union
import logging

logger = logging.getLogger(__name__)

# Filter value meaning "do not filter on this field"
ALL = "all"


def _is_filter(value: Optional[str]) -> bool:
    return bool(value) and value != ALL


def _enum_value(value: Union[str, object]) -> str:
    return getattr(value, "value", value)


class AlertService:
    """Service for the alert lifecycle."""

    def __init__(
        self,
        store: Store,
        notifications: Optional[NotificationService] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.store = store
        self.notifications = notifications
        self.clock = clock

    def list_alerts(
        self,
        user_id: Optional[str] = None,
        status: Optional[str] = None,
        garbage_type: Optional[str] = None,
    ) -> List[AlertResponse]:
        """
        Alerts matching every given filter, newest first.

        "all" for status or garbage_type is the same as not filtering.
        """
        status = _enum_value(status)
        garbage_type = _enum_value(garbage_type)

        items = self.store.list(ALERTS)
        if user_id:
            items = [a for a in items if a.get("user_id") == user_id]
        if _is_filter(status):
            items = [a for a in items if a.get("status") == status]
        if _is_filter(garbage_type):
            items = [a for a in items if a.get("garbage_type") == garbage_type]

        items.sort(key=lambda a: parse_timestamp(a["created_at"]), reverse=True)
        return [AlertResponse(**a) for a in items]

    def get_alert(self, alert_id: str) -> AlertResponse:
        return AlertResponse(**self._require(alert_id))

    def create_alert(self, alert_data: AlertCreate) -> MutationResult[AlertResponse]:
        """
        Store a new alert and tell the administrators about it.

        Args:
            alert_data: Validated alert data

        Returns:
            MutationResult with the created alert and its "New Alert" event
        """
        if not alert_data.user_id or not alert_data.user_id.strip():
            raise ValidationFailure("user_id is required")

        now = to_iso(self.clock())
        alert = {
            "id": generate_id("alert"),
            "user_id": alert_data.user_id,
            "latitude": alert_data.latitude,
            "longitude": alert_data.longitude,
            "garbage_type": alert_data.garbage_type.value,
            "quantity": alert_data.quantity.value,
            "image": alert_data.image or None,
            "description": alert_data.description or "",
            "status": AlertStatus.PENDING.value,
            "created_at": now,
            "updated_at": now,
            "is_form_sent": False,
            "form_type_id": None,
            "form_response": None,
        }

        with self.store.transaction():
            self.store.insert(ALERTS, [alert], prepend=True)
            logger.info(f"Alert created: {alert['id']} ({alert['garbage_type']}, {alert['quantity']}) by {alert['user_id']}")
            events = [fanout.alert_created(alert)]
            self._dispatch(events)

        return MutationResult[AlertResponse](entity=AlertResponse(**alert), events=events)

    def update_alert(self, alert_id: str, changes: AlertUpdate) -> MutationResult[AlertResponse]:
        """
        Apply a partial update. Any update refreshes updated_at; the owner is
        notified only when the status actually changes.

        Raises:
            NotFoundError: Alert does not exist
        """
        fields = {
            name: _enum_value(value)
            for name, value in changes.model_dump(exclude_unset=True).items()
        }
        # image may be cleared, every other field needs a value
        nulls = sorted(name for name, value in fields.items() if value is None and name != "image")
        if nulls:
            raise ValidationFailure(f"Fields cannot be null: {nulls}")

        with self.store.transaction():
            before = self._require(alert_id)
            after = {**before, **fields}
            after["updated_at"] = to_iso(advance_timestamp(self.clock(), before.get("updated_at")))
            self.store.replace(ALERTS, after)

            event = fanout.status_changed(before, after)
            events = [event] if event else []
            self._dispatch(events)

        if event:
            logger.info(f"Alert {alert_id} status {before['status']} -> {after['status']}")
        return MutationResult[AlertResponse](entity=AlertResponse(**after), events=events)

    def update_status(self, alert_id: str, status: Union[AlertStatus, str]) -> MutationResult[AlertResponse]:
        try:
            status = AlertStatus(_enum_value(status))
        except ValueError:
            raise ValidationFailure(
                f"Invalid status '{status}'. Allowed: {[s.value for s in AlertStatus]}"
            )
        return self.update_alert(alert_id, AlertUpdate(status=status))

    def _require(self, alert_id: str) -> Dict:
        alert = self.store.get(ALERTS, alert_id)
        if alert is None:
            raise NotFoundError("Alert", alert_id)
        return alert

    def _dispatch(self, events) -> None:
        if self.notifications is not None and events:
            self.notifications.dispatch(events)


# Global service instance
_alert_service = None


def get_alert_service() -> AlertService:
    """Get or create AlertService singleton."""
    global _alert_service
    if _alert_service is None:
        _alert_service = AlertService(get_store(), get_notification_service())
    return _alert_service

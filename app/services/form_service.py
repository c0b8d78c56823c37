"""
Form Workflow Service - Attach follow-up forms to alerts and record answers.

Form types are read-only reference data owned by the store. Answer
validation (required fields, select options) happens in the form renderer;
this service stores whatever mapping it is given.
"""

from app.config.seed import ALERTS
from app.config.store import Store, get_store
from app.core.errors import NotFoundError, ValidationFailure
from app.models.alert import AlertResponse, FormResponseMap
from app.models.form import FormType
from app.models.notification import MutationResult
from app.services import fanout
from app.services.notification_service import NotificationService, get_notification_service
from app.utils.clock import advance_timestamp, to_iso, utc_now
from datetime import datetime
from typing import Callable, List, Optional
import copy
import logging

logger = logging.getLogger(__name__)


class FormService:
    """Service for the alert follow-up form workflow."""

    def __init__(
        self,
        store: Store,
        notifications: Optional[NotificationService] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.store = store
        self.notifications = notifications
        self.clock = clock

    def list_form_types(self) -> List[FormType]:
        return self.store.form_types()

    def get_form_type(self, form_type_id: str) -> FormType:
        form_type = self.store.form_type(form_type_id)
        if form_type is None:
            raise NotFoundError("Form type", form_type_id)
        return form_type

    def send_form(self, alert_id: str, form_type_id: str) -> MutationResult[AlertResponse]:
        """
        Ask the alert owner to fill in a form.

        Sending again replaces the previously attached form type.

        Raises:
            NotFoundError: Alert or form type does not exist
        """
        self.get_form_type(form_type_id)

        with self.store.transaction():
            alert = self._require(alert_id)
            alert["is_form_sent"] = True
            alert["form_type_id"] = form_type_id
            alert["updated_at"] = to_iso(advance_timestamp(self.clock(), alert.get("updated_at")))
            self.store.replace(ALERTS, alert)

            events = [fanout.form_sent(alert)]
            self._dispatch(events)

        logger.info(f"Form {form_type_id} sent for alert {alert_id}")
        return MutationResult[AlertResponse](entity=AlertResponse(**alert), events=events)

    def submit_response(self, alert_id: str, response: FormResponseMap) -> MutationResult[AlertResponse]:
        """
        Store the owner's answers verbatim and tell the administrators.

        Raises:
            NotFoundError: Alert does not exist
            ValidationFailure: No form has been sent for this alert
        """
        with self.store.transaction():
            alert = self._require(alert_id)
            if not alert.get("is_form_sent") or not alert.get("form_type_id"):
                raise ValidationFailure(f"No form has been sent for alert {alert_id}")

            alert["form_response"] = copy.deepcopy(dict(response))
            alert["updated_at"] = to_iso(advance_timestamp(self.clock(), alert.get("updated_at")))
            self.store.replace(ALERTS, alert)

            events = [fanout.form_response_received(alert)]
            self._dispatch(events)

        logger.info(f"Form response stored for alert {alert_id} ({len(response)} field(s))")
        return MutationResult[AlertResponse](entity=AlertResponse(**alert), events=events)

    def _require(self, alert_id: str):
        alert = self.store.get(ALERTS, alert_id)
        if alert is None:
            raise NotFoundError("Alert", alert_id)
        return alert

    def _dispatch(self, events) -> None:
        if self.notifications is not None and events:
            self.notifications.dispatch(events)


# Global service instance
_form_service = None


def get_form_service() -> FormService:
    """Get or create FormService singleton."""
    global _form_service
    if _form_service is None:
        _form_service = FormService(get_store(), get_notification_service())
    return _form_service

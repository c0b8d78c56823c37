"""
Notification fan-out rules.

Each function maps one state transition to zero or one NotificationEvent.
They decide who is told what; writing the notification is the job of
NotificationService.dispatch.
"""

from typing import Dict, Optional

from app.core.settings import settings
from app.models.notification import NotificationEvent


def admin_recipient() -> str:
    return settings.ADMIN_RECIPIENT_ID


def alert_created(alert: Dict) -> NotificationEvent:
    return NotificationEvent(
        recipient_id=admin_recipient(),
        title="New Alert",
        body=f"New {alert['garbage_type']} waste report.",
    )


def status_changed(before: Dict, after: Dict) -> Optional[NotificationEvent]:
    """Only an actual change of status notifies the owner."""
    if before.get("status") == after.get("status"):
        return None
    return NotificationEvent(
        recipient_id=after["user_id"],
        title="Alert Status Updated",
        body=f'Your alert has been updated to "{after["status"]}".',
    )


def form_sent(alert: Dict) -> NotificationEvent:
    return NotificationEvent(
        recipient_id=alert["user_id"],
        title="Form Request",
        body="Admin has requested additional information for your alert.",
    )


def form_response_received(alert: Dict) -> NotificationEvent:
    return NotificationEvent(
        recipient_id=admin_recipient(),
        title="Form Response Received",
        body=f"User has submitted form response for alert #{alert['id']}.",
    )


def message_sent(alert: Optional[Dict], message: Dict) -> Optional[NotificationEvent]:
    """
    Notify the other party of the conversation.
    Admin messages go to the alert owner, user messages to the admin.
    Without a known alert there is no owner to resolve, so nothing is sent.
    """
    if alert is None:
        return None
    if message["sender_role"] == "admin":
        recipient_id = alert["user_id"]
    else:
        recipient_id = admin_recipient()
    return NotificationEvent(
        recipient_id=recipient_id,
        title="New Message",
        body=f"You have a new message regarding alert #{message['alert_id']}.",
    )

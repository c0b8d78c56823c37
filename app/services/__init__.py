"""
Services layer - Business logic goes here.
Keep services focused on one record each (alerts, forms, messages, notifications).

DESIGN PRINCIPLE:
- Services contain business logic, NOT routes
- Mutations return their notification events alongside the updated entity
- The fan-out rules (who gets notified) live in fanout.py
"""


def reset_services() -> None:
    """Drop the service singletons so they are rebuilt around the current store."""
    from app.services import alert_service, auth_service, form_service, message_service, notification_service

    alert_service._alert_service = None
    auth_service._auth_service = None
    form_service._form_service = None
    message_service._message_service = None
    notification_service._notification_service = None

"""
Demo seed data: accounts, form templates and the initial record set.

Alerts, messages and notifications are only used when the store has no
persisted copy of the record. Timestamps are relative to the moment the
seed is built so the demo always looks fresh.
"""

from datetime import datetime, timedelta
from typing import Dict, List, Optional

from app.utils.clock import to_iso, utc_now

ALERTS = "alerts"
MESSAGES = "messages"
NOTIFICATIONS = "notifications"

# Records persisted independently, in this order
RECORD_KEYS = (ALERTS, MESSAGES, NOTIFICATIONS)


USERS: List[Dict] = [
    {
        "id": "user-1",
        "name": "John Doe",
        "email": "user@demo.com",
        "password": "demo123",
        "role": "user",
    },
    {
        "id": "admin-1",
        "name": "Admin User",
        "email": "admin@demo.com",
        "password": "demo123",
        "role": "admin",
    },
]


FORM_TYPES: List[Dict] = [
    {
        "id": "form-1",
        "name": "Overflow Details",
        "description": "Detailed information about garbage overflow",
        "fields_json": [
            {"name": "overflow_level", "type": "select", "label": "Overflow Level",
             "options": ["25%", "50%", "75%", "100%"], "required": True},
            {"name": "smell_intensity", "type": "select", "label": "Smell Intensity",
             "options": ["None", "Mild", "Moderate", "Strong"], "required": True},
            {"name": "blocking_path", "type": "checkbox", "label": "Is it blocking any pathway?", "required": False},
            {"name": "additional_notes", "type": "textarea", "label": "Additional Notes", "required": False},
        ],
    },
    {
        "id": "form-2",
        "name": "Hazardous Waste Form",
        "description": "Report hazardous waste materials",
        "fields_json": [
            {"name": "waste_type", "type": "select", "label": "Type of Hazardous Waste",
             "options": ["Chemical", "Medical", "Electronic", "Industrial", "Other"], "required": True},
            {"name": "quantity_estimate", "type": "text", "label": "Estimated Quantity (kg/liters)", "required": True},
            {"name": "container_condition", "type": "select", "label": "Container Condition",
             "options": ["Intact", "Leaking", "Damaged", "No Container"], "required": True},
            {"name": "immediate_danger", "type": "checkbox", "label": "Immediate danger to public?", "required": False},
            {"name": "description", "type": "textarea", "label": "Detailed Description", "required": True},
        ],
    },
    {
        "id": "form-3",
        "name": "Large Item Disposal",
        "description": "Report large items needing special disposal",
        "fields_json": [
            {"name": "item_type", "type": "select", "label": "Item Type",
             "options": ["Furniture", "Appliance", "Mattress", "Construction Debris", "Other"], "required": True},
            {"name": "item_count", "type": "text", "label": "Number of Items", "required": True},
            {"name": "needs_equipment", "type": "checkbox", "label": "Needs special equipment for removal?", "required": False},
            {"name": "access_notes", "type": "textarea", "label": "Access/Location Notes", "required": False},
        ],
    },
]


def build_seed_records(now: Optional[datetime] = None) -> Dict[str, List[Dict]]:
    """
    Build the initial alerts, messages and notifications.

    Sample alerts are placed around San Francisco and all belong to user-1.
    """
    now = now or utc_now()

    def ago(**delta) -> str:
        return to_iso(now - timedelta(**delta))

    alerts = [
        {
            "id": "alert-1",
            "user_id": "user-1",
            "latitude": 37.7749,
            "longitude": -122.4194,
            "garbage_type": "household",
            "quantity": "large",
            "image": None,
            "description": "Overflowing garbage bin near the park entrance",
            "status": "pending",
            "created_at": ago(hours=2),
            "updated_at": ago(hours=2),
            "is_form_sent": False,
            "form_type_id": None,
            "form_response": None,
        },
        {
            "id": "alert-2",
            "user_id": "user-1",
            "latitude": 37.7849,
            "longitude": -122.4094,
            "garbage_type": "hazardous",
            "quantity": "medium",
            "image": None,
            "description": "Leaking chemical containers found behind warehouse",
            "status": "processing",
            "created_at": ago(days=1),
            "updated_at": ago(hours=6),
            "is_form_sent": True,
            "form_type_id": "form-2",
            "form_response": None,
        },
        {
            "id": "alert-3",
            "user_id": "user-1",
            "latitude": 37.7649,
            "longitude": -122.4294,
            "garbage_type": "construction",
            "quantity": "small",
            "image": None,
            "description": "Construction debris left on sidewalk",
            "status": "completed",
            "created_at": ago(days=3),
            "updated_at": ago(days=1),
            "is_form_sent": False,
            "form_type_id": None,
            "form_response": None,
        },
    ]

    messages = [
        {
            "id": "msg-1",
            "alert_id": "alert-2",
            "sender_id": "admin-1",
            "sender_role": "admin",
            "content": "We have received your report about hazardous waste. Our team is investigating.",
            "created_at": ago(hours=5),
            "is_read": True,
        },
        {
            "id": "msg-2",
            "alert_id": "alert-2",
            "sender_id": "user-1",
            "sender_role": "user",
            "content": "Thank you for the quick response. Please let me know if you need more details.",
            "created_at": ago(hours=4),
            "is_read": True,
        },
    ]

    notifications = [
        {
            "id": "notif-1",
            "user_id": "user-1",
            "title": "Alert Status Updated",
            "body": 'Your alert has been updated to "processing".',
            "is_read": False,
            "created_at": ago(hours=6),
        },
        {
            "id": "notif-2",
            "user_id": "admin-1",
            "title": "New Alert Received",
            "body": "A new waste report has been submitted.",
            "is_read": False,
            "created_at": ago(minutes=30),
        },
    ]

    return {ALERTS: alerts, MESSAGES: messages, NOTIFICATIONS: notifications}

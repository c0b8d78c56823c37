"""
Pydantic models for waste alerts.
These models handle validation for alert submission, updates and responses.
"""

from pydantic import BaseModel, Field
from datetime import datetime
from typing import Any, Optional, Dict
from enum import Enum


class GarbageType(str, Enum):
    """Kind of waste being reported."""
    HOUSEHOLD = "household"
    HAZARDOUS = "hazardous"
    CONSTRUCTION = "construction"
    ELECTRONIC = "electronic"
    ORGANIC = "organic"
    RECYCLABLE = "recyclable"
    OTHER = "other"


class Quantity(str, Enum):
    """Rough size of the pile."""
    SMALL = "small"      # fits in a bag
    MEDIUM = "medium"    # 1-3 bins
    LARGE = "large"      # needs truck


class AlertStatus(str, Enum):
    """
    Triage status set by administrators.
    PENDING is the initial state. Any status may follow any other.
    """
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"


# Form answers are kept exactly as submitted (checkbox booleans, text, numbers, null)
FormResponseMap = Dict[str, Any]


class AlertCreate(BaseModel):
    """
    Model for creating a new alert (incoming POST request).
    These are the fields citizens provide when submitting a report.
    """
    user_id: str = Field(..., min_length=1, description="Owner of the alert")
    latitude: float = Field(..., ge=-90, le=90, description="Latitude coordinate")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude coordinate")
    garbage_type: GarbageType
    quantity: Quantity
    description: str = Field(default="", max_length=2000, description="What the citizen observed")
    image: Optional[str] = Field(None, description="Opaque image reference (URL or data URI)")

    class Config:
        json_schema_extra = {
            "example": {
                "user_id": "user-1",
                "latitude": 37.7749,
                "longitude": -122.4194,
                "garbage_type": "household",
                "quantity": "large",
                "description": "Overflowing garbage bin near the park entrance",
                "image": None,
            }
        }
        extra = "ignore"


class AlertUpdate(BaseModel):
    """
    Partial update of an alert (PUT /api/alerts/{id}).
    Form workflow fields are owned by the form endpoints and are not accepted here.
    """
    status: Optional[AlertStatus] = None
    description: Optional[str] = Field(None, max_length=2000)
    garbage_type: Optional[GarbageType] = None
    quantity: Optional[Quantity] = None
    image: Optional[str] = None

    class Config:
        extra = "ignore"


class AlertResponse(BaseModel):
    """Model for alert responses (what the API returns)."""
    id: str
    user_id: str
    latitude: float
    longitude: float
    garbage_type: GarbageType
    quantity: Quantity
    image: Optional[str] = None
    description: str = ""
    status: AlertStatus = AlertStatus.PENDING
    created_at: datetime
    updated_at: datetime
    is_form_sent: bool = False
    form_type_id: Optional[str] = None
    form_response: Optional[FormResponseMap] = None

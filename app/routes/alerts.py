"""
Alert endpoints - API routes for waste alert submission, retrieval and triage.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status

from app.models.alert import AlertCreate, AlertResponse, AlertUpdate
from app.routes.deps import simulate_latency
from app.services.alert_service import AlertService, get_alert_service

router = APIRouter(prefix="/api/alerts", tags=["Alerts"], dependencies=[Depends(simulate_latency)])


@router.get("", response_model=List[AlertResponse])
async def list_alerts(
    user_id: Optional[str] = Query(None, description="Only alerts owned by this user"),
    status: Optional[str] = Query(None, description="pending | processing | completed | all"),
    garbage_type: Optional[str] = Query(None, description="Garbage type or 'all'"),
    service: AlertService = Depends(get_alert_service),
):
    """List alerts, newest first."""
    return service.list_alerts(user_id=user_id, status=status, garbage_type=garbage_type)


@router.post("", response_model=AlertResponse, status_code=status.HTTP_201_CREATED)
async def create_alert(alert: AlertCreate, service: AlertService = Depends(get_alert_service)):
    """
    Submit a new waste alert.

    The alert starts as "pending" and the administrators get a "New Alert"
    notification.
    """
    return service.create_alert(alert).entity


@router.get("/{alert_id}", response_model=AlertResponse)
async def get_alert(alert_id: str, service: AlertService = Depends(get_alert_service)):
    return service.get_alert(alert_id)


@router.put("/{alert_id}", response_model=AlertResponse)
async def update_alert(alert_id: str, changes: AlertUpdate, service: AlertService = Depends(get_alert_service)):
    """
    Update alert fields (admin triage).

    Changing the status notifies the alert owner; setting the same status
    again only refreshes updated_at.
    """
    return service.update_alert(alert_id, changes).entity

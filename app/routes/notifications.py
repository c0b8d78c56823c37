"""
Notification endpoints - In-app notifications and their read state.
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status

from app.models.notification import MarkAllReadRequest, NotificationCreate, NotificationResponse
from app.routes.deps import simulate_latency
from app.services.notification_service import NotificationService, get_notification_service

router = APIRouter(prefix="/api/notifications", tags=["Notifications"], dependencies=[Depends(simulate_latency)])


@router.get("", response_model=List[NotificationResponse])
async def list_notifications(
    user_id: Optional[str] = Query(None, description="Recipient; omit for all notifications"),
    service: NotificationService = Depends(get_notification_service),
):
    """Notifications, newest first."""
    return service.list_notifications(user_id)


@router.get("/unread-count")
async def unread_count(
    user_id: str = Query(..., min_length=1),
    service: NotificationService = Depends(get_notification_service),
):
    return {"user_id": user_id, "unread_count": service.unread_count(user_id)}


@router.post("", response_model=NotificationResponse, status_code=status.HTTP_201_CREATED)
async def create_notification(
    notification: NotificationCreate,
    service: NotificationService = Depends(get_notification_service),
):
    return service.create_notification(notification.user_id, notification.title, notification.body)


@router.put("/read-all")
async def mark_all_read(request: MarkAllReadRequest, service: NotificationService = Depends(get_notification_service)):
    """Mark every notification of a user read. No-op when there are none."""
    updated = service.mark_all_read(request.user_id)
    return {"success": True, "updated": updated}


@router.put("/{notification_id}/read")
async def mark_read(notification_id: str, service: NotificationService = Depends(get_notification_service)):
    """Mark one notification read. Unknown ids are not an error."""
    updated = service.mark_read(notification_id)
    return {"success": True, "updated": updated}

"""
Message endpoints - Per-alert chat between citizen and administrators.
"""

from typing import List
from fastapi import APIRouter, Depends, Query, status

from app.models.message import MessageCreate, MessageResponse
from app.routes.deps import simulate_latency
from app.services.message_service import MessageService, get_message_service

router = APIRouter(prefix="/api/messages", tags=["Messages"], dependencies=[Depends(simulate_latency)])


@router.get("", response_model=List[MessageResponse])
async def list_messages(
    alert_id: str = Query(..., min_length=1),
    service: MessageService = Depends(get_message_service),
):
    """Messages of an alert, oldest first."""
    return service.list_messages(alert_id)


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def send_message(message: MessageCreate, service: MessageService = Depends(get_message_service)):
    """
    Send a message. The other party (owner or admin) is notified.
    """
    result = service.send_message(
        alert_id=message.alert_id,
        sender_id=message.sender_id,
        sender_role=message.sender_role,
        content=message.content,
    )
    return result.entity

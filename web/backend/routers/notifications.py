#!/usr/bin/env python3
"""
Notification endpoints - in-app inbox.
"""

from fastapi import APIRouter, Depends, Query

from core.app_context import MarketplaceServices
from core.context import ActorContext
from ..dependencies import get_services, get_actor
from ..models.responses import (
    NotificationOut,
    NotificationResponse,
    NotificationsResponse,
    MarkReadResponse
)

router = APIRouter(prefix="/api/notifications", tags=["notifications"])


@router.get("", response_model=NotificationsResponse)
def list_notifications(
    unread_only: bool = Query(default=False),
    actor: ActorContext = Depends(get_actor),
    services: MarketplaceServices = Depends(get_services)
):
    """Notifications for the acting user, newest first."""
    notifications = services.notifications.list_for_user(actor.user_id, unread_only=unread_only)
    return NotificationsResponse(
        success=True,
        count=len(notifications),
        unread_count=services.notifications.unread_count(actor.user_id),
        notifications=[NotificationOut.model_validate(n) for n in notifications]
    )


@router.post("/{notification_id}/read", response_model=NotificationResponse)
def mark_notification_read(
    notification_id: str,
    actor: ActorContext = Depends(get_actor),
    services: MarketplaceServices = Depends(get_services)
):
    notification = services.notifications.mark_notification_read(actor, notification_id)
    return NotificationResponse(success=True, notification=NotificationOut.model_validate(notification))


@router.post("/read-all", response_model=MarkReadResponse)
def mark_all_read(
    actor: ActorContext = Depends(get_actor),
    services: MarketplaceServices = Depends(get_services)
):
    updated = services.notifications.mark_all_read(actor.user_id)
    return MarkReadResponse(success=True, updated=updated)

#!/usr/bin/env python3
"""
Message endpoints - direct messages between users.
"""

import logging
from fastapi import APIRouter, Depends

from core.app_context import MarketplaceServices
from core.context import ActorContext
from ..dependencies import get_services, get_actor
from ..models.requests import MessageRequest
from ..models.responses import (
    MessageOut,
    MessageResponse,
    MessagesResponse,
    MarkReadResponse,
    UnreadCountResponse
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/messages", tags=["messages"])


@router.post("", response_model=MessageResponse, status_code=201)
def send_message(
    request: MessageRequest,
    actor: ActorContext = Depends(get_actor),
    services: MarketplaceServices = Depends(get_services)
):
    message = services.messaging.send_message(
        actor, request.receiver_id, request.content, session_id=request.session_id
    )
    return MessageResponse(success=True, message=MessageOut.model_validate(message))


@router.get("", response_model=MessagesResponse)
def list_messages(
    actor: ActorContext = Depends(get_actor),
    services: MarketplaceServices = Depends(get_services)
):
    """Every message the acting user sent or received."""
    messages = services.messaging.messages_for_user(actor.user_id)
    return MessagesResponse(
        success=True,
        count=len(messages),
        messages=[MessageOut.model_validate(m) for m in messages]
    )


@router.get("/conversation/{other_user_id}", response_model=MessagesResponse)
def get_conversation(
    other_user_id: str,
    actor: ActorContext = Depends(get_actor),
    services: MarketplaceServices = Depends(get_services)
):
    """Messages between the acting user and another user, oldest first."""
    messages = services.messaging.conversation(actor.user_id, other_user_id)
    return MessagesResponse(
        success=True,
        count=len(messages),
        messages=[MessageOut.model_validate(m) for m in messages]
    )


@router.post("/conversation/{other_user_id}/read", response_model=MarkReadResponse)
def mark_conversation_read(
    other_user_id: str,
    actor: ActorContext = Depends(get_actor),
    services: MarketplaceServices = Depends(get_services)
):
    updated = services.messaging.mark_conversation_read(actor, other_user_id)
    return MarkReadResponse(success=True, updated=updated)


@router.get("/conversation/{other_user_id}/unread", response_model=UnreadCountResponse)
def get_conversation_unread(
    other_user_id: str,
    actor: ActorContext = Depends(get_actor),
    services: MarketplaceServices = Depends(get_services)
):
    unread = services.messaging.unread_count(actor, other_user_id)
    return UnreadCountResponse(success=True, unread_count=unread)

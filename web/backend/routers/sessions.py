#!/usr/bin/env python3
"""
Session endpoints - booking and the session state machine.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query

from core.app_context import MarketplaceServices
from core.context import ActorContext
from ..dependencies import get_services, get_actor
from ..models.requests import SessionRequest
from ..models.responses import SessionOut, SessionResponse, SessionsResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


def _session_response(session) -> SessionResponse:
    return SessionResponse(success=True, session=SessionOut.model_validate(session))


@router.post("", response_model=SessionResponse, status_code=201)
def request_session(
    request: SessionRequest,
    actor: ActorContext = Depends(get_actor),
    services: MarketplaceServices = Depends(get_services)
):
    """Book a session with a tutor; the acting user is the learner."""
    session = services.sessions.request_session(
        tutor_id=request.tutor_id,
        learner_id=actor.user_id,
        subject_id=request.subject_id,
        scheduled_at=request.scheduled_at,
        duration=request.duration,
        mode=request.mode,
        location=request.location,
        notes=request.notes,
        message=request.message
    )
    return _session_response(session)


@router.get("", response_model=SessionsResponse)
def list_sessions(
    view: Optional[str] = Query(default=None, pattern="^(upcoming|pending|history)$"),
    actor: ActorContext = Depends(get_actor),
    services: MarketplaceServices = Depends(get_services)
):
    """Sessions where the acting user is tutor or learner."""
    sessions = services.sessions.sessions_for_user(actor.user_id, view=view, now=actor.now)
    return SessionsResponse(
        success=True,
        count=len(sessions),
        sessions=[SessionOut.model_validate(s) for s in sessions]
    )


@router.get("/{session_id}", response_model=SessionResponse)
def get_session(
    session_id: str,
    services: MarketplaceServices = Depends(get_services)
):
    return _session_response(services.sessions.get_session(session_id))


@router.post("/{session_id}/accept", response_model=SessionResponse)
def accept_session(
    session_id: str,
    actor: ActorContext = Depends(get_actor),
    services: MarketplaceServices = Depends(get_services)
):
    """Tutor confirms a pending request."""
    return _session_response(services.sessions.accept_session(actor, session_id))


@router.post("/{session_id}/cancel", response_model=SessionResponse)
def cancel_session(
    session_id: str,
    actor: ActorContext = Depends(get_actor),
    services: MarketplaceServices = Depends(get_services)
):
    """Decline a pending request or cancel a confirmed session."""
    return _session_response(services.sessions.decline_or_cancel_session(actor, session_id))


@router.post("/{session_id}/complete", response_model=SessionResponse)
def complete_session(
    session_id: str,
    actor: ActorContext = Depends(get_actor),
    services: MarketplaceServices = Depends(get_services)
):
    """Mark a past, confirmed session as completed and credit the acting user."""
    return _session_response(services.sessions.complete_session(actor, session_id))

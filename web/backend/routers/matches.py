#!/usr/bin/env python3
"""
Match endpoints - suggested study partners and the discovery browse list.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query

from core.app_context import MarketplaceServices
from core.context import ActorContext
from core.matcher import DiscoveryFilters
from ..dependencies import get_services, get_actor
from ..models.responses import MatchOut, MatchesResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/matches", tags=["matches"])


@router.get("/suggested", response_model=MatchesResponse)
def get_suggested_matches(
    actor: ActorContext = Depends(get_actor),
    services: MarketplaceServices = Depends(get_services)
):
    """
    Top study partners for the acting user (dashboard).

    Scores both teaching directions, same-department bonus and rating;
    returns at most 10 candidates with a positive score.
    """
    matches = services.matches.suggested_matches(actor.user_id)
    return MatchesResponse(
        success=True,
        count=len(matches),
        matches=[MatchOut.model_validate(m) for m in matches]
    )


@router.get("/discover", response_model=MatchesResponse)
def discover(
    search: Optional[str] = Query(default=None, description="Match name, bio or department"),
    department: Optional[str] = Query(default=None),
    subject_id: Optional[str] = Query(default=None, description="Only users who teach this subject"),
    mode: Optional[str] = Query(default=None, pattern="^(in-person|video)$"),
    max_rate: Optional[float] = Query(default=None, ge=0),
    actor: ActorContext = Depends(get_actor),
    services: MarketplaceServices = Depends(get_services)
):
    """
    Browse every other user, ranked by what they can teach you plus rating.
    """
    filters = DiscoveryFilters(
        search=search,
        department=department,
        subject_id=subject_id,
        mode=mode,
        max_rate=max_rate
    )
    matches = services.matches.discover(actor.user_id, filters)
    return MatchesResponse(
        success=True,
        count=len(matches),
        matches=[MatchOut.model_validate(m) for m in matches]
    )

#!/usr/bin/env python3
"""
User endpoints - registration, profiles, points and received reviews.
"""

import logging
from fastapi import APIRouter, Depends

from core.app_context import MarketplaceServices
from core.context import ActorContext
from ..dependencies import get_services, get_actor
from ..models.requests import RegistrationRequest, ProfileUpdateRequest
from ..models.responses import (
    UserOut,
    UserResponse,
    PointsResponse,
    ReviewOut,
    ReviewsResponse
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=201)
def register_user(
    request: RegistrationRequest,
    services: MarketplaceServices = Depends(get_services)
):
    """Register a new student. Starts with the welcome bonus."""
    user = services.accounts.register_user(request)
    return UserResponse(success=True, user=UserOut.model_validate(user))


@router.patch("/me", response_model=UserResponse)
def update_profile(
    request: ProfileUpdateRequest,
    actor: ActorContext = Depends(get_actor),
    services: MarketplaceServices = Depends(get_services)
):
    """Edit the acting user's profile, subjects and availability."""
    user = services.accounts.update_profile(actor, request)
    return UserResponse(success=True, user=UserOut.model_validate(user))


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: str,
    services: MarketplaceServices = Depends(get_services)
):
    user = services.accounts.get_user(user_id)
    return UserResponse(success=True, user=UserOut.model_validate(user))


@router.get("/{user_id}/points", response_model=PointsResponse)
def get_points(
    user_id: str,
    services: MarketplaceServices = Depends(get_services)
):
    """Current balance and distance to the next milestone."""
    user = services.accounts.get_user(user_id)
    return PointsResponse(
        success=True,
        user_id=user.id,
        points=user.points,
        points_to_next_milestone=services.ledger.points_to_next_milestone(user),
        milestone=services.ledger.config.milestone
    )


@router.get("/{user_id}/reviews", response_model=ReviewsResponse)
def get_reviews(
    user_id: str,
    services: MarketplaceServices = Depends(get_services)
):
    """Reviews the user has received."""
    services.accounts.get_user(user_id)
    reviews = services.ratings.reviews_for_user(user_id)
    return ReviewsResponse(
        success=True,
        count=len(reviews),
        reviews=[ReviewOut.model_validate(r) for r in reviews]
    )

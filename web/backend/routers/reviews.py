#!/usr/bin/env python3
"""
Review endpoints.
"""

import logging
from fastapi import APIRouter, Depends

from core.app_context import MarketplaceServices
from core.context import ActorContext
from core.errors import ValidationError
from ..dependencies import get_services, get_actor
from ..models.requests import ReviewRequest
from ..models.responses import ReviewOut, ReviewResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/reviews", tags=["reviews"])


@router.post("", response_model=ReviewResponse, status_code=201)
def create_review(
    request: ReviewRequest,
    actor: ActorContext = Depends(get_actor),
    services: MarketplaceServices = Depends(get_services)
):
    """
    Review a completed session. The reviewee defaults to the other participant.

    Submitting twice creates two reviews; clients must guard against double submission.
    """
    reviewee_id = request.reviewee_id
    if reviewee_id is None:
        session = services.repo.get_session(request.session_id)
        if session is None:
            raise ValidationError(f"Unknown session: {request.session_id}")
        reviewee_id = session.other_party(actor.user_id)

    review = services.ratings.record_review(
        session_id=request.session_id,
        reviewer_id=actor.user_id,
        reviewee_id=reviewee_id,
        rating=request.rating,
        comment=request.comment
    )
    return ReviewResponse(success=True, review=ReviewOut.model_validate(review))

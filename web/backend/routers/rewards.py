#!/usr/bin/env python3
"""
Reward endpoints - catalog and redemption.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query

from core.app_context import MarketplaceServices
from core.context import ActorContext
from core.rewards import list_rewards
from ..dependencies import get_services, get_actor
from ..models.responses import RewardOut, RewardsResponse, RedeemResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/rewards", tags=["rewards"])


@router.get("", response_model=RewardsResponse)
def get_rewards(
    category: Optional[str] = Query(default=None, description="canteen, library, bookstore, events or merch")
):
    items = list_rewards(category)
    return RewardsResponse(
        success=True,
        count=len(items),
        rewards=[RewardOut.model_validate(item) for item in items]
    )


@router.post("/{reward_id}/redeem", response_model=RedeemResponse)
def redeem_reward(
    reward_id: str,
    actor: ActorContext = Depends(get_actor),
    services: MarketplaceServices = Depends(get_services)
):
    user = services.rewards.redeem_reward(actor, reward_id)
    return RedeemResponse(
        success=True,
        reward_id=reward_id,
        points=user.points,
        points_to_next_milestone=services.ledger.points_to_next_milestone(user)
    )

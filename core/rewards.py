#!/usr/bin/env python3
"""
Rewards - campus perks redeemable with points.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from core.context import ActorContext
from core.errors import NotFoundError, InsufficientPointsError, ValidationError
from core.points_ledger import PointsLedger
from database.models import User
from database.repository import StudyMatchRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RewardItem:
    id: str
    name: str
    description: str
    points_cost: int
    category: str  # canteen | library | bookstore | events | merch
    available: bool = True
    discount: Optional[str] = None


REWARD_CATALOG: List[RewardItem] = [
    RewardItem("r1", "Free Coffee", "Redeem for a free coffee at the college canteen", 50, "canteen"),
    RewardItem("r2", "Lunch Voucher ₹50", "Get ₹50 off on your lunch at the canteen", 100, "canteen"),
    RewardItem("r3", "Snack Combo", "Free snack combo (samosa + tea/coffee)", 75, "canteen"),
    RewardItem("r4", "Extended Book Loan", "Extend library book loan period by 1 week", 40, "library"),
    RewardItem("r5", "Priority Book Reservation", "Get priority access to reserve high-demand books", 150, "library"),
    RewardItem("r6", "Late Fee Waiver", "Waive library late fees up to ₹100", 80, "library"),
    RewardItem("r7", "10% Book Discount", "Get 10% off on any textbook purchase", 200, "bookstore", discount="10% OFF"),
    RewardItem("r8", "Stationery Voucher ₹100", "₹100 voucher for stationery items", 150, "bookstore"),
    RewardItem("r9", "Free Notebook Set", "Get a set of 5 college notebooks free", 120, "bookstore"),
    RewardItem("r10", "Tech Fest Entry", "Free entry to the annual tech fest", 300, "events", available=False),
    RewardItem("r11", "Workshop Priority", "Priority registration for any workshop", 250, "events"),
    RewardItem("r12", "College T-Shirt", "Alliance University branded t-shirt", 500, "merch"),
    RewardItem("r13", "Study Match Badge", "Exclusive Study Match achiever badge", 100, "merch"),
]


def list_rewards(category: Optional[str] = None) -> List[RewardItem]:
    if category is None:
        return list(REWARD_CATALOG)
    return [item for item in REWARD_CATALOG if item.category == category]


def get_reward(reward_id: str) -> Optional[RewardItem]:
    return next((item for item in REWARD_CATALOG if item.id == reward_id), None)


class RewardService:
    def __init__(self, repo: StudyMatchRepository, ledger: PointsLedger):
        self.repo = repo
        self.ledger = ledger

    def redeem_reward(self, actor: ActorContext, reward_id: str) -> User:
        """Spend the actor's points on a catalog item."""
        item = get_reward(reward_id)
        if item is None:
            raise NotFoundError("Reward", reward_id)

        user = self.repo.get_user(actor.user_id)
        if user is None:
            raise NotFoundError("User", actor.user_id)

        if not item.available:
            raise ValidationError(f"Reward {reward_id} is not currently available")
        if user.points < item.points_cost:
            raise InsufficientPointsError(user.id, user.points, item.points_cost)

        user = self.ledger.spend_points(user.id, item.points_cost)
        logger.info(f"User {user.id} redeemed {item.name} ({item.id}) for {item.points_cost} points")
        return user

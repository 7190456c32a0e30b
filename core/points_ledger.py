#!/usr/bin/env python3
"""
Points Ledger - credits gamification points and reports milestone progress.

Award rules used by the rest of the core:
- Completing a tutoring session (acting tutor): 50
- Completing a learning session (acting learner): 30
- Leaving a review (reviewer): 10
"""

import logging
from typing import Union

from core.config_loader import PointsConfig
from core.errors import NotFoundError, ValidationError
from database.models import User
from database.repository import StudyMatchRepository
from notification import NotificationEmitter, NotificationType

logger = logging.getLogger(__name__)

REASON_TUTORING = "completing a tutoring session"
REASON_LEARNING = "completing a learning session"
REASON_REVIEW = "leaving a review"


def points_to_next_milestone(user_or_points: Union[User, int], milestone: int = 1000) -> int:
    """Points left until the next multiple of ``milestone``.

    Pure function of the current balance; a balance sitting exactly on a
    milestone reports a full ``milestone`` to go.
    """
    points = user_or_points.points if isinstance(user_or_points, User) else int(user_or_points)
    return milestone - (points % milestone)


class PointsLedger:
    def __init__(
        self,
        repo: StudyMatchRepository,
        emitter: NotificationEmitter,
        config: PointsConfig
    ):
        self.repo = repo
        self.emitter = emitter
        self.config = config

    def award_points(self, user_id: str, amount: int, reason: str) -> User:
        """Add ``amount`` to the user's balance and emit a points_earned notification."""
        if not isinstance(amount, int) or isinstance(amount, bool) or amount < 0:
            raise ValidationError(f"Point awards must be a non-negative integer, got {amount!r}")

        user = self.repo.get_user(user_id)
        if user is None:
            raise NotFoundError("User", user_id)

        user.points = (user.points or 0) + amount
        self.repo.save_user(user)

        self.emitter.emit(user.id, NotificationType.POINTS_EARNED, points=amount, reason=reason)

        logger.info(f"Awarded {amount} points to user {user_id} for {reason} (balance={user.points})")
        return user

    def award_session_completion(self, user_id: str, acted_as_tutor: bool) -> int:
        """Award the completion bonus for the acting user's role. Returns the amount."""
        if acted_as_tutor:
            amount, reason = self.config.tutor_completion, REASON_TUTORING
        else:
            amount, reason = self.config.learner_completion, REASON_LEARNING

        self.award_points(user_id, amount, reason)
        return amount

    def award_review(self, reviewer_id: str) -> int:
        self.award_points(reviewer_id, self.config.review, REASON_REVIEW)
        return self.config.review

    def spend_points(self, user_id: str, amount: int) -> User:
        """Deduct points for a redemption. Callers check the balance first."""
        user = self.repo.get_user(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        if amount < 0 or user.points < amount:
            raise ValidationError(f"Cannot spend {amount} points from a balance of {user.points}")

        user.points -= amount
        self.repo.save_user(user)
        logger.info(f"Deducted {amount} points from user {user_id} (balance={user.points})")
        return user

    def points_to_next_milestone(self, user_or_points: Union[User, int]) -> int:
        return points_to_next_milestone(user_or_points, self.config.milestone)

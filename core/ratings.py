#!/usr/bin/env python3
"""
Rating Aggregator - records reviews and keeps user ratings consistent.

A user's ``rating`` is always the arithmetic mean of every review they have
received and ``total_reviews`` the count of those reviews. Both are
recomputed from a full re-scan of the review set on each new review.

Re-submitting a review is not idempotent: nothing prevents a reviewer from
reviewing the same session (or reviewee) more than once, and each
submission counts.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from core.errors import ValidationError
from core.points_ledger import PointsLedger
from database.models import Review, User
from database.repository import StudyMatchRepository
from notification import NotificationEmitter, NotificationType

logger = logging.getLogger(__name__)


def aggregate_ratings(ratings: Sequence[int]) -> Tuple[float, int]:
    """Return (mean, count) for a set of ratings; (0.0, 0) when empty."""
    count = len(ratings)
    if count == 0:
        return 0.0, 0
    return sum(ratings) / count, count


class RatingAggregator:
    def __init__(
        self,
        repo: StudyMatchRepository,
        emitter: NotificationEmitter,
        ledger: PointsLedger
    ):
        self.repo = repo
        self.emitter = emitter
        self.ledger = ledger

    def record_review(
        self,
        session_id: str,
        reviewer_id: str,
        reviewee_id: str,
        rating: int,
        comment: Optional[str] = None
    ) -> Review:
        """Persist a review, recompute the reviewee's rating, notify, and reward the reviewer."""
        if not isinstance(rating, int) or isinstance(rating, bool) or not 1 <= rating <= 5:
            raise ValidationError(f"Rating must be an integer between 1 and 5, got {rating!r}")

        session = self.repo.get_session(session_id)
        if session is None:
            raise ValidationError(f"Unknown session: {session_id}")
        if session.status != 'completed':
            raise ValidationError(
                f"Session {session_id} is '{session.status}'; only completed sessions can be reviewed"
            )

        reviewer = self.repo.get_user(reviewer_id)
        if reviewer is None:
            raise ValidationError(f"Unknown reviewer: {reviewer_id}")
        reviewee = self.repo.get_user(reviewee_id)
        if reviewee is None:
            raise ValidationError(f"Unknown reviewee: {reviewee_id}")

        review = Review(
            session_id=session_id,
            reviewer_id=reviewer_id,
            reviewee_id=reviewee_id,
            rating=rating,
            comment=comment
        )
        self.repo.save_review(review)

        self.recompute_rating(reviewee)

        self.emitter.emit(reviewee_id, NotificationType.NEW_REVIEW, rating=rating)
        self.ledger.award_review(reviewer_id)

        return review

    def recompute_rating(self, user: User) -> User:
        """Rebuild rating/total_reviews from every review the user has received."""
        reviews = self.repo.list_reviews_for_user(user.id)
        user.rating, user.total_reviews = aggregate_ratings([r.rating for r in reviews])
        self.repo.save_user(user)

        logger.info(
            f"Recomputed rating for user {user.id}: {user.rating:.2f} over {user.total_reviews} review(s)"
        )
        return user

    def reviews_for_user(self, user_id: str) -> List[Review]:
        return self.repo.list_reviews_for_user(user_id)

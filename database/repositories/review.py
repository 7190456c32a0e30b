import logging
from typing import List

from sqlalchemy import select

from database.models import Review
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class ReviewRepository(BaseRepository):
    def list_for_reviewee(self, reviewee_id: str) -> List[Review]:
        stmt = select(Review).where(
            Review.reviewee_id == reviewee_id
        ).order_by(Review.created_at)
        return list(self.db.execute(stmt).scalars().all())

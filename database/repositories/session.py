import logging
from typing import List, Optional

from sqlalchemy import select, or_

from database.models import TutoringSession
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class SessionRepository(BaseRepository):
    def get_by_id(self, session_id: str) -> Optional[TutoringSession]:
        return self.db.get(TutoringSession, session_id)

    def list_for_user(self, user_id: str) -> List[TutoringSession]:
        stmt = select(TutoringSession).where(
            or_(
                TutoringSession.tutor_id == user_id,
                TutoringSession.learner_id == user_id
            )
        ).order_by(TutoringSession.scheduled_at)
        return list(self.db.execute(stmt).scalars().all())

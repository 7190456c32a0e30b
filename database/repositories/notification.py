import logging
from typing import List, Optional

from sqlalchemy import select, update, func

from database.models import Notification
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class NotificationRepository(BaseRepository):
    def get_by_id(self, notification_id: str) -> Optional[Notification]:
        return self.db.get(Notification, notification_id)

    def list_for_user(self, user_id: str, unread_only: bool = False) -> List[Notification]:
        stmt = select(Notification).where(Notification.user_id == user_id)
        if unread_only:
            stmt = stmt.where(Notification.is_read.is_(False))

        stmt = stmt.order_by(Notification.created_at.desc())
        return list(self.db.execute(stmt).scalars().all())

    def count_unread(self, user_id: str) -> int:
        stmt = select(func.count(Notification.id)).where(
            Notification.user_id == user_id,
            Notification.is_read.is_(False)
        )
        return self.db.execute(stmt).scalar_one()

    def mark_all_read(self, user_id: str) -> int:
        stmt = (
            update(Notification)
            .where(
                Notification.user_id == user_id,
                Notification.is_read.is_(False)
            )
            .values(is_read=True)
            .execution_options(synchronize_session="fetch")
        )
        result = self.db.execute(stmt)
        count = result.rowcount or 0
        if count > 0:
            logger.info(f"Marked {count} notifications read for user {user_id}")
        return count

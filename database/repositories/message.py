import logging
from typing import List

from sqlalchemy import select, or_, and_, update, func

from database.models import Message
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class MessageRepository(BaseRepository):
    def list_for_user(self, user_id: str) -> List[Message]:
        stmt = select(Message).where(
            or_(Message.sender_id == user_id, Message.receiver_id == user_id)
        ).order_by(Message.created_at)
        return list(self.db.execute(stmt).scalars().all())

    def conversation(self, user_a: str, user_b: str) -> List[Message]:
        stmt = select(Message).where(
            or_(
                and_(Message.sender_id == user_a, Message.receiver_id == user_b),
                and_(Message.sender_id == user_b, Message.receiver_id == user_a)
            )
        ).order_by(Message.created_at)
        return list(self.db.execute(stmt).scalars().all())

    def count_unread_from(self, receiver_id: str, sender_id: str) -> int:
        stmt = select(func.count(Message.id)).where(
            Message.receiver_id == receiver_id,
            Message.sender_id == sender_id,
            Message.is_read.is_(False)
        )
        return self.db.execute(stmt).scalar_one()

    def mark_read_from(self, receiver_id: str, sender_id: str) -> int:
        """Mark every unread message from sender to receiver as read."""
        stmt = (
            update(Message)
            .where(
                Message.receiver_id == receiver_id,
                Message.sender_id == sender_id,
                Message.is_read.is_(False)
            )
            .values(is_read=True)
            .execution_options(synchronize_session="fetch")
        )
        result = self.db.execute(stmt)
        return result.rowcount or 0

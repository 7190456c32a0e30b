from sqlalchemy import Column, Text, Boolean, TIMESTAMP, Index, CheckConstraint, ForeignKey

from core.utils import new_id, utcnow
from .base import Base

NOTIFICATION_TYPES = (
    'session_request',
    'session_confirmed',
    'session_cancelled',
    'session_reminder',
    'new_message',
    'new_review',
    'points_earned',
    'match_found',
)


class Notification(Base):
    """
    User-scoped event record created as a side effect of other operations.

    ``is_read`` only ever flips from False to True.
    """
    __tablename__ = 'notifications'

    id = Column(Text, primary_key=True, default=new_id)
    user_id = Column(Text, ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    type = Column(Text, nullable=False)
    title = Column(Text, nullable=False)
    message = Column(Text, nullable=False)
    link = Column(Text)
    is_read = Column(Boolean, nullable=False, default=False)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (
        CheckConstraint(
            "type IN ('session_request', 'session_confirmed', 'session_cancelled', "
            "'session_reminder', 'new_message', 'new_review', 'points_earned', 'match_found')",
            name='ck_notification_type'
        ),
        Index('idx_notification_user', 'user_id', 'created_at'),
    )

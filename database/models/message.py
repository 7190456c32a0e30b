from sqlalchemy import Column, Text, Boolean, TIMESTAMP, ForeignKey, Index

from core.utils import new_id, utcnow
from .base import Base


class Message(Base):
    """Directed text between two users, optionally tagged with a session."""
    __tablename__ = 'messages'

    id = Column(Text, primary_key=True, default=new_id)
    sender_id = Column(Text, ForeignKey('users.id'), nullable=False)
    receiver_id = Column(Text, ForeignKey('users.id'), nullable=False)
    session_id = Column(Text, ForeignKey('tutoring_sessions.id'), nullable=True)
    content = Column(Text, nullable=False)
    is_read = Column(Boolean, nullable=False, default=False)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (
        Index('idx_messages_sender', 'sender_id'),
        Index('idx_messages_receiver', 'receiver_id'),
        Index('idx_messages_created', 'created_at'),
    )

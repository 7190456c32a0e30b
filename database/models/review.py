from sqlalchemy import Column, Text, Integer, TIMESTAMP, ForeignKey, Index, CheckConstraint

from core.utils import new_id, utcnow
from .base import Base


class Review(Base):
    """
    One-way rating from reviewer to reviewee for a completed session.

    There is deliberately no uniqueness constraint on
    (session_id, reviewer_id, reviewee_id).
    """
    __tablename__ = 'reviews'

    id = Column(Text, primary_key=True, default=new_id)
    session_id = Column(Text, ForeignKey('tutoring_sessions.id'), nullable=False)
    reviewer_id = Column(Text, ForeignKey('users.id'), nullable=False)
    reviewee_id = Column(Text, ForeignKey('users.id'), nullable=False)
    rating = Column(Integer, nullable=False)
    comment = Column(Text)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (
        CheckConstraint('rating BETWEEN 1 AND 5', name='ck_review_rating'),
        Index('idx_reviews_reviewee', 'reviewee_id'),
        Index('idx_reviews_session', 'session_id'),
    )

from sqlalchemy import Column, Text, Integer, Float, TIMESTAMP, ForeignKey, Index, CheckConstraint

from core.utils import new_id, utcnow
from .base import Base

SESSION_STATUSES = ('pending', 'confirmed', 'completed', 'cancelled')
SESSION_MODES = ('in-person', 'video')


class TutoringSession(Base):
    """
    A scheduled tutor-learner meeting around one subject.

    Status moves pending -> confirmed -> completed, with cancellation allowed
    from pending or confirmed. Transitions are owned by the session lifecycle.
    """
    __tablename__ = 'tutoring_sessions'

    id = Column(Text, primary_key=True, default=new_id)
    tutor_id = Column(Text, ForeignKey('users.id'), nullable=False)
    learner_id = Column(Text, ForeignKey('users.id'), nullable=False)
    subject_id = Column(Text, ForeignKey('subjects.id'), nullable=False)

    scheduled_at = Column(TIMESTAMP(timezone=True), nullable=False)
    duration = Column(Integer, nullable=False)  # minutes
    mode = Column(Text, nullable=False)  # in-person | video
    location = Column(Text)
    meeting_link = Column(Text)
    notes = Column(Text)

    status = Column(Text, nullable=False, default='pending')
    amount = Column(Float, nullable=False, default=0.0)
    points_awarded = Column(Integer, nullable=False, default=0)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (
        CheckConstraint(
            "status IN ('pending', 'confirmed', 'completed', 'cancelled')",
            name='ck_session_status'
        ),
        CheckConstraint('duration > 0', name='ck_session_duration'),
        Index('idx_sessions_tutor', 'tutor_id'),
        Index('idx_sessions_learner', 'learner_id'),
        Index('idx_sessions_status', 'status'),
        Index('idx_sessions_scheduled', 'scheduled_at'),
    )

    def is_participant(self, user_id: str) -> bool:
        return user_id in (self.tutor_id, self.learner_id)

    def other_party(self, user_id: str) -> str:
        return self.learner_id if user_id == self.tutor_id else self.tutor_id

    def __repr__(self):
        return f"<TutoringSession(id={self.id}, status={self.status}, tutor={self.tutor_id}, learner={self.learner_id})>"

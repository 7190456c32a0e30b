from typing import Dict

from sqlalchemy import Column, Text, Integer, Float, TIMESTAMP, ForeignKey, Index, CheckConstraint
from sqlalchemy.orm import relationship

from core.utils import new_id, utcnow
from .base import Base


class User(Base):
    """
    Student account with profile, subject lists, weekly availability and
    the derived points/rating aggregates.

    ``rating`` and ``total_reviews`` are owned by the rating aggregator and
    ``points`` by the points ledger; profile edits never touch them.
    """
    __tablename__ = 'users'

    id = Column(Text, primary_key=True, default=new_id)
    email = Column(Text, nullable=False, unique=True)
    name = Column(Text, nullable=False)
    university_id = Column(Text)
    department = Column(Text, nullable=False, default='')
    year = Column(Integer, nullable=False, default=1)
    bio = Column(Text)
    profile_image = Column(Text)

    preferred_mode = Column(Text, nullable=False, default='both')  # in-person | video | both
    min_rate = Column(Float, nullable=False, default=0.0)  # 0 = free

    points = Column(Integer, nullable=False, default=0)
    rating = Column(Float, nullable=False, default=0.0)
    total_reviews = Column(Integer, nullable=False, default=0)

    joined_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    subjects_to_teach = relationship(
        "SubjectExpertise", back_populates="user", cascade="all, delete-orphan",
        lazy="selectin", order_by="SubjectExpertise.id"
    )
    subjects_to_learn = relationship(
        "SubjectNeed", back_populates="user", cascade="all, delete-orphan",
        lazy="selectin", order_by="SubjectNeed.id"
    )
    availability = relationship(
        "Availability", back_populates="user", cascade="all, delete-orphan",
        lazy="selectin", order_by="Availability.id"
    )

    __table_args__ = (
        CheckConstraint('points >= 0', name='ck_users_points_non_negative'),
        Index('idx_users_department', 'department'),
    )

    def expertise_by_subject(self) -> Dict[str, "SubjectExpertise"]:
        """Subjects this user can teach, keyed by subject id."""
        return {e.subject_id: e for e in self.subjects_to_teach}

    def needs_by_subject(self) -> Dict[str, "SubjectNeed"]:
        """Subjects this user wants to learn, keyed by subject id."""
        return {n.subject_id: n for n in self.subjects_to_learn}

    def __repr__(self):
        return f"<User(id={self.id}, name={self.name}, department={self.department})>"


class SubjectExpertise(Base):
    """A subject the user can teach, with self-declared proficiency (1-5)."""
    __tablename__ = 'subject_expertise'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Text, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    subject_id = Column(Text, ForeignKey('subjects.id'), nullable=False)
    proficiency = Column(Integer, nullable=False)
    description = Column(Text)

    user = relationship("User", back_populates="subjects_to_teach")

    __table_args__ = (
        CheckConstraint('proficiency BETWEEN 1 AND 5', name='ck_expertise_proficiency'),
        Index('idx_expertise_user', 'user_id'),
        Index('idx_expertise_subject', 'subject_id'),
    )


class SubjectNeed(Base):
    """A subject the user wants to learn, with self-declared urgency (1-5)."""
    __tablename__ = 'subject_need'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Text, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    subject_id = Column(Text, ForeignKey('subjects.id'), nullable=False)
    urgency = Column(Integer, nullable=False)
    description = Column(Text)

    user = relationship("User", back_populates="subjects_to_learn")

    __table_args__ = (
        CheckConstraint('urgency BETWEEN 1 AND 5', name='ck_need_urgency'),
        Index('idx_need_user', 'user_id'),
        Index('idx_need_subject', 'subject_id'),
    )


class Availability(Base):
    """Weekly availability slot. day_of_week: 0-6 (Sunday-Saturday), times as HH:MM."""
    __tablename__ = 'availability'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Text, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    day_of_week = Column(Integer, nullable=False)
    start_time = Column(Text, nullable=False)
    end_time = Column(Text, nullable=False)

    user = relationship("User", back_populates="availability")

    __table_args__ = (
        CheckConstraint('day_of_week BETWEEN 0 AND 6', name='ck_availability_day'),
        Index('idx_availability_user', 'user_id'),
    )

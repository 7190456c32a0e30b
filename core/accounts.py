#!/usr/bin/env python3
"""
Accounts - registration and profile editing.

New users start with the welcome bonus and a zero rating. Profile edits can
replace subject lists and availability but never touch points, rating or
total_reviews.
"""

import logging
from typing import List, Optional, Literal

from pydantic import BaseModel, Field

from core.config_loader import PointsConfig
from core.context import ActorContext
from core.errors import NotFoundError, ValidationError
from core.utils import utcnow
from database.models import User, SubjectExpertise, SubjectNeed, Availability
from database.repository import StudyMatchRepository

logger = logging.getLogger(__name__)

HHMM_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class ExpertiseData(BaseModel):
    subject_id: str
    proficiency: int = Field(ge=1, le=5)
    description: Optional[str] = None


class NeedData(BaseModel):
    subject_id: str
    urgency: int = Field(ge=1, le=5)
    description: Optional[str] = None


class AvailabilityData(BaseModel):
    day_of_week: int = Field(ge=0, le=6, description="0 = Sunday")
    start_time: str = Field(pattern=HHMM_PATTERN)
    end_time: str = Field(pattern=HHMM_PATTERN)


class ProfileUpdate(BaseModel):
    """Editable profile attributes. Unset fields are left unchanged."""
    name: Optional[str] = None
    department: Optional[str] = None
    year: Optional[int] = Field(None, ge=1)
    bio: Optional[str] = None
    profile_image: Optional[str] = None
    preferred_mode: Optional[Literal["in-person", "video", "both"]] = None
    min_rate: Optional[float] = Field(None, ge=0)
    subjects_to_teach: Optional[List[ExpertiseData]] = None
    subjects_to_learn: Optional[List[NeedData]] = None
    availability: Optional[List[AvailabilityData]] = None


class RegistrationData(ProfileUpdate):
    email: str
    name: str
    department: str
    university_id: Optional[str] = None
    year: int = Field(1, ge=1)
    preferred_mode: Literal["in-person", "video", "both"] = "both"
    min_rate: float = Field(0.0, ge=0)


class AccountService:
    def __init__(self, repo: StudyMatchRepository, config: PointsConfig):
        self.repo = repo
        self.config = config

    def _check_subjects(self, subject_ids: List[str]):
        for subject_id in subject_ids:
            if self.repo.get_subject(subject_id) is None:
                raise ValidationError(f"Unknown subject: {subject_id}")

    def _apply_lists(self, user: User, data: ProfileUpdate):
        if data.subjects_to_teach is not None:
            self._check_subjects([e.subject_id for e in data.subjects_to_teach])
            user.subjects_to_teach = [SubjectExpertise(**e.model_dump()) for e in data.subjects_to_teach]

        if data.subjects_to_learn is not None:
            self._check_subjects([n.subject_id for n in data.subjects_to_learn])
            user.subjects_to_learn = [SubjectNeed(**n.model_dump()) for n in data.subjects_to_learn]

        if data.availability is not None:
            for slot in data.availability:
                if slot.start_time >= slot.end_time:
                    raise ValidationError(
                        f"Availability slot must end after it starts: {slot.start_time}-{slot.end_time}"
                    )
            user.availability = [Availability(**a.model_dump()) for a in data.availability]

    def register_user(self, data: RegistrationData) -> User:
        """Create a user with the welcome bonus."""
        email = data.email.strip().lower()
        if self.repo.users.get_by_email(email) is not None:
            raise ValidationError(f"Email already registered: {email}")

        user = User(
            email=email,
            name=data.name,
            university_id=data.university_id,
            department=data.department,
            year=data.year,
            bio=data.bio,
            profile_image=data.profile_image,
            preferred_mode=data.preferred_mode,
            min_rate=data.min_rate,
            points=self.config.welcome_bonus,
            rating=0.0,
            total_reviews=0,
            joined_at=utcnow()
        )
        self._apply_lists(user, data)
        self.repo.save_user(user)

        logger.info(f"Registered user {user.id} ({user.department}) with {user.points} welcome points")
        return user

    def get_user(self, user_id: str) -> User:
        user = self.repo.get_user(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    def update_profile(self, actor: ActorContext, data: ProfileUpdate) -> User:
        user = self.get_user(actor.user_id)

        scalar_fields = data.model_dump(
            exclude_unset=True,
            exclude={'subjects_to_teach', 'subjects_to_learn', 'availability'}
        )
        for name, value in scalar_fields.items():
            if value is None and name in ('name', 'department', 'year', 'preferred_mode', 'min_rate'):
                continue
            setattr(user, name, value)

        self._apply_lists(user, data)
        self.repo.save_user(user)

        logger.info(f"Updated profile for user {user.id}: {sorted(data.model_fields_set)}")
        return user

#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class ORMModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class ExpertiseOut(ORMModel):
    subject_id: str
    proficiency: int
    description: Optional[str] = None


class NeedOut(ORMModel):
    subject_id: str
    urgency: int
    description: Optional[str] = None


class AvailabilityOut(ORMModel):
    day_of_week: int
    start_time: str
    end_time: str


class UserOut(ORMModel):
    """Public profile of a user."""
    id: str
    name: str
    email: str
    university_id: Optional[str] = None
    department: str
    year: int
    bio: Optional[str] = None
    profile_image: Optional[str] = None
    preferred_mode: str
    min_rate: float
    points: int
    rating: float
    total_reviews: int
    subjects_to_teach: List[ExpertiseOut] = []
    subjects_to_learn: List[NeedOut] = []
    availability: List[AvailabilityOut] = []
    joined_at: Optional[datetime] = None


class UserResponse(BaseModel):
    success: bool
    user: UserOut


class PointsResponse(BaseModel):
    success: bool
    user_id: str
    points: int
    points_to_next_milestone: int
    milestone: int


class CommonSubjectOut(ORMModel):
    subject_id: str
    kind: str
    points: int


class MatchOut(ORMModel):
    """A ranked study partner."""
    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "user": {"id": "u2", "name": "Priya", "department": "Computer Science"},
                "score": 25.0,
                "common_subjects": [{"subject_id": "s1", "kind": "learn", "points": 20}],
                "shares_availability": True
            }
        }
    )

    user: UserOut
    score: float
    common_subjects: List[CommonSubjectOut] = []
    shares_availability: bool = False


class MatchesResponse(BaseModel):
    success: bool
    count: int
    matches: List[MatchOut]


class SessionOut(ORMModel):
    id: str
    tutor_id: str
    learner_id: str
    subject_id: str
    scheduled_at: datetime
    duration: int
    mode: str
    location: Optional[str] = None
    meeting_link: Optional[str] = None
    notes: Optional[str] = None
    status: str
    amount: float
    points_awarded: int
    created_at: Optional[datetime] = None


class SessionResponse(BaseModel):
    success: bool
    session: SessionOut


class SessionsResponse(BaseModel):
    success: bool
    count: int
    sessions: List[SessionOut]


class ReviewOut(ORMModel):
    id: str
    session_id: str
    reviewer_id: str
    reviewee_id: str
    rating: int = Field(ge=1, le=5)
    comment: Optional[str] = None
    created_at: Optional[datetime] = None


class ReviewResponse(BaseModel):
    success: bool
    review: ReviewOut


class ReviewsResponse(BaseModel):
    success: bool
    count: int
    reviews: List[ReviewOut]


class MessageOut(ORMModel):
    id: str
    sender_id: str
    receiver_id: str
    session_id: Optional[str] = None
    content: str
    is_read: bool
    created_at: Optional[datetime] = None


class MessageResponse(BaseModel):
    success: bool
    message: MessageOut


class MessagesResponse(BaseModel):
    success: bool
    count: int
    messages: List[MessageOut]


class MarkReadResponse(BaseModel):
    success: bool
    updated: int


class UnreadCountResponse(BaseModel):
    success: bool
    unread_count: int


class NotificationOut(ORMModel):
    id: str
    user_id: str
    type: str
    title: str
    message: str
    link: Optional[str] = None
    is_read: bool
    created_at: Optional[datetime] = None


class NotificationResponse(BaseModel):
    success: bool
    notification: NotificationOut


class NotificationsResponse(BaseModel):
    success: bool
    count: int
    unread_count: int
    notifications: List[NotificationOut]


class RewardOut(ORMModel):
    id: str
    name: str
    description: str
    points_cost: int
    category: str
    available: bool
    discount: Optional[str] = None


class RewardsResponse(BaseModel):
    success: bool
    count: int
    rewards: List[RewardOut]


class RedeemResponse(BaseModel):
    success: bool
    reward_id: str
    points: int
    points_to_next_milestone: int

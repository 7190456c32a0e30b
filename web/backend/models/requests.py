#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from datetime import datetime
from pydantic import BaseModel, Field
from typing import Literal, Optional, Union

from core.accounts import RegistrationData, ProfileUpdate

RegistrationRequest = RegistrationData
ProfileUpdateRequest = ProfileUpdate


class SessionRequest(BaseModel):
    """Book a session with a tutor. The acting user is the learner."""
    tutor_id: str
    subject_id: str
    scheduled_at: Union[datetime, str] = Field(..., description="ISO-8601 timestamp")
    duration: int = Field(60, description="Duration in minutes")
    mode: Literal["in-person", "video"] = "video"
    location: Optional[str] = None
    notes: Optional[str] = None
    message: Optional[str] = Field(None, description="Optional note sent to the tutor")


class ReviewRequest(BaseModel):
    """Review the other participant of a completed session."""
    session_id: str
    rating: int = Field(..., description="1-5 stars")
    reviewee_id: Optional[str] = Field(
        None, description="Defaults to the other participant of the session"
    )
    comment: Optional[str] = None


class MessageRequest(BaseModel):
    receiver_id: str
    content: str
    session_id: Optional[str] = None

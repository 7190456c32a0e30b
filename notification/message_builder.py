from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class NotificationType(str, Enum):
    SESSION_REQUEST = "session_request"
    SESSION_CONFIRMED = "session_confirmed"
    SESSION_CANCELLED = "session_cancelled"
    SESSION_REMINDER = "session_reminder"
    NEW_MESSAGE = "new_message"
    NEW_REVIEW = "new_review"
    POINTS_EARNED = "points_earned"
    MATCH_FOUND = "match_found"


class NotificationContent(BaseModel):
    title: str
    message: str
    link: Optional[str] = None


class NotificationMessageBuilder:
    @staticmethod
    def format_when(scheduled_at: Optional[datetime]) -> str:
        """Format a session timestamp for display."""
        if scheduled_at is None:
            return ""
        return scheduled_at.strftime("%b %d, %Y %H:%M")

    @staticmethod
    def _subject_suffix(subject_name: Optional[str]) -> str:
        return f" for {subject_name}" if subject_name else ""

    @classmethod
    def build(cls, notification_type: NotificationType, **context) -> NotificationContent:
        """Build title/message/link for a notification type.

        Unknown context keys are ignored; missing ones fall back to generic text.
        """
        notification_type = NotificationType(notification_type)
        subject = cls._subject_suffix(context.get('subject_name'))
        when = cls.format_when(context.get('scheduled_at'))
        when_text = f" on {when}" if when else ""

        if notification_type == NotificationType.SESSION_REQUEST:
            return NotificationContent(
                title="New Session Request",
                message=f"You have a new tutoring request{subject}{when_text}",
                link="/sessions"
            )

        if notification_type == NotificationType.SESSION_CONFIRMED:
            return NotificationContent(
                title="Session Confirmed",
                message=f"Your session{subject}{when_text} has been confirmed",
                link="/sessions"
            )

        if notification_type == NotificationType.SESSION_CANCELLED:
            return NotificationContent(
                title="Session Cancelled",
                message=f"Your session{subject}{when_text} has been cancelled",
                link="/sessions"
            )

        if notification_type == NotificationType.SESSION_REMINDER:
            return NotificationContent(
                title="Session Reminder",
                message=f"Reminder: you have a session{subject}{when_text}",
                link="/sessions"
            )

        if notification_type == NotificationType.NEW_MESSAGE:
            sender = context.get('sender_name')
            return NotificationContent(
                title="New Message",
                message=f"You have a new message from {sender}" if sender else "You have a new message",
                link="/messages"
            )

        if notification_type == NotificationType.NEW_REVIEW:
            return NotificationContent(
                title="New Review",
                message=f"You received a {context.get('rating')}-star review",
                link="/profile"
            )

        if notification_type == NotificationType.POINTS_EARNED:
            return NotificationContent(
                title="Points Earned!",
                message=f"You earned {context.get('points')} points for {context.get('reason')}",
                link="/rewards"
            )

        # MATCH_FOUND
        partner = context.get('partner_name')
        return NotificationContent(
            title="New Match",
            message=f"{partner} looks like a great study partner" if partner else "We found a new study partner for you",
            link="/discover"
        )

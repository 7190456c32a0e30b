import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from database.models import (
    User, Subject, TutoringSession, Review, Message, Notification
)
from database.repositories import (
    UserRepository, SubjectRepository, SessionRepository,
    ReviewRepository, MessageRepository, NotificationRepository
)

logger = logging.getLogger(__name__)


class StudyMatchRepository:
    """
    Data store used by the core services.

    Exposes the get/list/save contract the core depends on and keeps the
    entity-specific query helpers on the sub-repositories
    (``repo.users``, ``repo.sessions``, ...).
    """

    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)
        self.subjects = SubjectRepository(db)
        self.sessions = SessionRepository(db)
        self.reviews = ReviewRepository(db)
        self.messages = MessageRepository(db)
        self.notifications = NotificationRepository(db)

    # --- Users ---

    def get_user(self, user_id: str) -> Optional[User]:
        return self.users.get_by_id(user_id)

    def list_users(self) -> List[User]:
        return self.users.list_all()

    def save_user(self, user: User) -> None:
        self.users.add(user)

    # --- Subjects ---

    def get_subject(self, subject_id: str) -> Optional[Subject]:
        return self.subjects.get_by_id(subject_id)

    def list_subjects(self) -> List[Subject]:
        return self.subjects.list_all()

    # --- Sessions ---

    def get_session(self, session_id: str) -> Optional[TutoringSession]:
        return self.sessions.get_by_id(session_id)

    def list_sessions_for_user(self, user_id: str) -> List[TutoringSession]:
        return self.sessions.list_for_user(user_id)

    def save_session(self, session: TutoringSession) -> None:
        self.sessions.add(session)

    # --- Reviews ---

    def list_reviews_for_user(self, reviewee_id: str) -> List[Review]:
        return self.reviews.list_for_reviewee(reviewee_id)

    def save_review(self, review: Review) -> None:
        self.reviews.add(review)

    # --- Messages ---

    def save_message(self, message: Message) -> None:
        self.messages.add(message)

    def list_messages_for_user(self, user_id: str) -> List[Message]:
        return self.messages.list_for_user(user_id)

    # --- Notifications ---

    def save_notification(self, notification: Notification) -> None:
        self.notifications.add(notification)

    def list_notifications_for_user(self, user_id: str) -> List[Notification]:
        return self.notifications.list_for_user(user_id)

    def mark_notification_read(self, notification_id: str) -> Optional[Notification]:
        """Flip is_read to True. Returns None when the id is unknown."""
        notification = self.notifications.get_by_id(notification_id)
        if notification is None:
            return None
        if not notification.is_read:
            notification.is_read = True
            self.db.flush()
        return notification

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()

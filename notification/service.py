#!/usr/bin/env python3
"""
Notification Service - read side of the in-app inbox.
"""

import logging
from typing import List

from core.context import ActorContext
from core.errors import NotFoundError
from database.models import Notification
from database.repository import StudyMatchRepository

logger = logging.getLogger(__name__)


class NotificationService:
    def __init__(self, repo: StudyMatchRepository):
        self.repo = repo

    def list_for_user(self, user_id: str, unread_only: bool = False) -> List[Notification]:
        """Notifications for a user, newest first."""
        if unread_only:
            return self.repo.notifications.list_for_user(user_id, unread_only=True)
        return self.repo.list_notifications_for_user(user_id)

    def unread_count(self, user_id: str) -> int:
        return self.repo.notifications.count_unread(user_id)

    def mark_notification_read(self, actor: ActorContext, notification_id: str) -> Notification:
        """Mark one of the actor's notifications read.

        Another user's notification is reported as not found. Already-read
        notifications stay read.
        """
        notification = self.repo.notifications.get_by_id(notification_id)
        if notification is None or notification.user_id != actor.user_id:
            raise NotFoundError("Notification", notification_id)
        return self.repo.mark_notification_read(notification.id)

    def mark_all_read(self, user_id: str) -> int:
        return self.repo.notifications.mark_all_read(user_id)

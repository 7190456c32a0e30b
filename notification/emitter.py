#!/usr/bin/env python3
"""
Notification Emitter - records user-facing events.

Invoked by state-changing operations (session lifecycle, reviews, points,
messaging) to append an unread Notification for the affected user.
"""

import logging

from database.models import Notification
from database.repository import StudyMatchRepository
from notification.message_builder import NotificationMessageBuilder, NotificationType

logger = logging.getLogger(__name__)


class NotificationEmitter:
    """Builds and persists in-app notifications."""

    def __init__(self, repo: StudyMatchRepository):
        self.repo = repo

    def emit(self, user_id: str, notification_type: NotificationType, **context) -> Notification:
        notification_type = NotificationType(notification_type)
        content = NotificationMessageBuilder.build(notification_type, **context)

        notification = Notification(
            user_id=user_id,
            type=notification_type.value,
            title=content.title,
            message=content.message,
            link=content.link,
            is_read=False
        )
        self.repo.save_notification(notification)

        logger.info(f"[IN_APP] User: {user_id}, Type: {notification_type.value}, Title: {content.title}")
        return notification

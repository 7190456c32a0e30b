"""
Notification Module

In-app notifications created as side effects of marketplace operations.

Usage:
    from notification import NotificationEmitter, NotificationType

    emitter = NotificationEmitter(repo)
    emitter.emit(tutor_id, NotificationType.SESSION_REQUEST, subject_name="Calculus I")
"""

from notification.message_builder import (
    NotificationType,
    NotificationContent,
    NotificationMessageBuilder,
)
from notification.emitter import NotificationEmitter
from notification.service import NotificationService

__all__ = [
    'NotificationType',
    'NotificationContent',
    'NotificationMessageBuilder',
    'NotificationEmitter',
    'NotificationService',
]

#!/usr/bin/env python3
"""
Messaging - direct messages between users.

Delivery is store-and-read: messages are persisted and the receiver is
notified; there are no real-time delivery guarantees.
"""

import logging
from typing import List, Optional

from core.context import ActorContext
from core.errors import ValidationError
from database.models import Message
from database.repository import StudyMatchRepository
from notification import NotificationEmitter, NotificationType

logger = logging.getLogger(__name__)


class MessagingService:
    def __init__(self, repo: StudyMatchRepository, emitter: NotificationEmitter):
        self.repo = repo
        self.emitter = emitter

    def send_message(
        self,
        actor: ActorContext,
        receiver_id: str,
        content: str,
        session_id: Optional[str] = None
    ) -> Message:
        if not content or not content.strip():
            raise ValidationError("Message content cannot be empty")

        sender = self.repo.get_user(actor.user_id)
        if sender is None:
            raise ValidationError(f"Unknown sender: {actor.user_id}")
        if self.repo.get_user(receiver_id) is None:
            raise ValidationError(f"Unknown receiver: {receiver_id}")
        if session_id is not None and self.repo.get_session(session_id) is None:
            raise ValidationError(f"Unknown session: {session_id}")

        message = Message(
            sender_id=sender.id,
            receiver_id=receiver_id,
            session_id=session_id,
            content=content,
            is_read=False
        )
        self.repo.save_message(message)

        self.emitter.emit(receiver_id, NotificationType.NEW_MESSAGE, sender_name=sender.name)
        return message

    def conversation(self, user_a: str, user_b: str) -> List[Message]:
        """Messages exchanged between two users, oldest first."""
        return self.repo.messages.conversation(user_a, user_b)

    def messages_for_user(self, user_id: str) -> List[Message]:
        return self.repo.list_messages_for_user(user_id)

    def unread_count(self, actor: ActorContext, other_user_id: str) -> int:
        """Unread messages the actor received from ``other_user_id``."""
        return self.repo.messages.count_unread_from(actor.user_id, other_user_id)

    def mark_conversation_read(self, actor: ActorContext, other_user_id: str) -> int:
        """Mark messages the actor received from ``other_user_id`` as read.

        Messages the actor sent are never touched.
        """
        count = self.repo.messages.mark_read_from(actor.user_id, other_user_id)
        if count:
            logger.info(f"User {actor.user_id} read {count} message(s) from {other_user_id}")
        return count

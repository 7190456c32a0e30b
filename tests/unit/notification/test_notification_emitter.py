#!/usr/bin/env python3
"""
Tests for the in-app notification system.

Tests cover:
1. Message builder text per notification type
2. Emitter persistence
3. Inbox service (listing, unread counts, marking read)
"""

import unittest
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from core.errors import NotFoundError
from notification import NotificationEmitter, NotificationMessageBuilder, NotificationType
from tests.fixtures.marketplace_fixtures import MarketplaceFixture


class TestNotificationMessageBuilder(unittest.TestCase):

    def test_every_type_builds(self):
        for notification_type in NotificationType:
            content = NotificationMessageBuilder.build(notification_type)
            self.assertTrue(content.title)
            self.assertTrue(content.message)

    def test_session_request_mentions_subject_and_time(self):
        content = NotificationMessageBuilder.build(
            NotificationType.SESSION_REQUEST,
            subject_name="Calculus",
            scheduled_at=datetime(2026, 3, 4, 15, 30, tzinfo=timezone.utc)
        )
        self.assertEqual(content.title, "New Session Request")
        self.assertEqual(content.message, "You have a new tutoring request for Calculus on Mar 04, 2026 15:30")
        self.assertEqual(content.link, "/sessions")

    def test_points_and_review_text(self):
        points = NotificationMessageBuilder.build("points_earned", points=10, reason="leaving a review")
        review = NotificationMessageBuilder.build(NotificationType.NEW_REVIEW, rating=4)

        self.assertEqual(points.message, "You earned 10 points for leaving a review")
        self.assertEqual(review.message, "You received a 4-star review")

    def test_unknown_type(self):
        with self.assertRaises(ValueError):
            NotificationMessageBuilder.build("carrier_pigeon")


class TestNotificationEmitterUnit(unittest.TestCase):

    def test_emit_saves_unread_notification(self):
        repo = MagicMock()
        emitter = NotificationEmitter(repo)

        notification = emitter.emit("u1", NotificationType.NEW_MESSAGE, sender_name="Ana")

        repo.save_notification.assert_called_once_with(notification)
        self.assertEqual(notification.user_id, "u1")
        self.assertEqual(notification.type, "new_message")
        self.assertFalse(notification.is_read)
        self.assertEqual(notification.link, "/messages")


@pytest.mark.db
class TestNotificationService(unittest.TestCase):

    def setUp(self):
        self.m = MarketplaceFixture()
        self.m.add_user("u1")
        self.m.add_user("u2")
        self.emitter = self.m.services.emitter
        self.service = self.m.services.notifications

        self.first = self.emitter.emit("u1", NotificationType.NEW_REVIEW, rating=5)
        self.second = self.emitter.emit("u1", NotificationType.POINTS_EARNED, points=10, reason="x")
        self.emitter.emit("u2", NotificationType.MATCH_FOUND, partner_name="U1")

    def tearDown(self):
        self.m.close()

    def test_list_is_scoped_to_user(self):
        notes = self.service.list_for_user("u1")
        self.assertEqual({n.id for n in notes}, {self.first.id, self.second.id})
        self.assertEqual(self.service.unread_count("u1"), 2)

    def test_mark_one_read_is_idempotent(self):
        u1 = self.m.actor("u1")
        self.service.mark_notification_read(u1, self.first.id)
        again = self.service.mark_notification_read(u1, self.first.id)

        self.assertTrue(again.is_read)
        self.assertEqual(self.service.unread_count("u1"), 1)
        unread = self.service.list_for_user("u1", unread_only=True)
        self.assertEqual([n.id for n in unread], [self.second.id])

    def test_mark_unknown(self):
        with self.assertRaises(NotFoundError):
            self.service.mark_notification_read(self.m.actor("u1"), "missing")

    def test_cannot_mark_another_users_notification(self):
        with self.assertRaises(NotFoundError):
            self.service.mark_notification_read(self.m.actor("u2"), self.first.id)

        self.m.db.expire_all()
        self.assertFalse(self.m.repo.notifications.get_by_id(self.first.id).is_read)
        self.assertEqual(self.service.unread_count("u1"), 2)

    def test_mark_all_read(self):
        self.assertEqual(self.service.mark_all_read("u1"), 2)
        self.assertEqual(self.service.unread_count("u1"), 0)
        self.assertEqual(self.service.unread_count("u2"), 1)
        self.assertEqual(self.service.mark_all_read("u1"), 0)


if __name__ == '__main__':
    unittest.main()

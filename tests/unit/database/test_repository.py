#!/usr/bin/env python3
"""
Tests for the data store contract (StudyMatchRepository) on SQLite.
"""

import unittest

import pytest
from sqlalchemy.exc import IntegrityError

from database.init_db import seed_subjects
from database.models import Message, Notification, Review
from database.uow import marketplace_uow
from tests.fixtures.marketplace_fixtures import MarketplaceFixture, SUBJECTS


@pytest.mark.db
class TestStudyMatchRepository(unittest.TestCase):

    def setUp(self):
        self.m = MarketplaceFixture()
        self.repo = self.m.repo

    def tearDown(self):
        self.m.close()

    def test_users_round_trip_with_subject_lists(self):
        self.m.add_user("a", teaches=[("s1", 4)], learns=[("s2", 3)], availability=[(0, "08:00", "10:00")])
        self.m.add_user("b")
        self.m.db.expire_all()

        user = self.repo.get_user("a")
        self.assertEqual(user.expertise_by_subject()["s1"].proficiency, 4)
        self.assertEqual(user.needs_by_subject()["s2"].urgency, 3)
        self.assertEqual(user.availability[0].start_time, "08:00")
        self.assertEqual({u.id for u in self.repo.list_users()}, {"a", "b"})
        self.assertIsNone(self.repo.get_user("missing"))
        self.assertEqual(self.repo.users.get_by_email("b@uni.test").id, "b")

    def test_subjects(self):
        self.assertEqual([s.id for s in self.repo.list_subjects()], [s["id"] for s in SUBJECTS])
        self.assertEqual(self.repo.get_subject("s2").name, "Calculus")
        self.assertIsNone(self.repo.get_subject("s99"))

    def test_seed_subjects_refreshes_existing(self):
        count = seed_subjects(self.repo, [{"id": "s2", "name": "Calculus I", "category": "Mathematics"}])

        self.assertEqual(count, 1)
        self.assertEqual(self.repo.get_subject("s2").name, "Calculus I")
        self.assertEqual(len(self.repo.list_subjects()), len(SUBJECTS))
        self.assertEqual(seed_subjects(self.repo, []), 0)

    def test_sessions_for_user_cover_both_roles(self):
        for uid in ("a", "b", "c"):
            self.m.add_user(uid)
        s1 = self.m.add_session("a", "b")
        s2 = self.m.add_session("b", "c")
        self.m.add_session("a", "c")

        self.assertEqual({s.id for s in self.repo.list_sessions_for_user("b")}, {s1.id, s2.id})
        self.assertEqual(self.repo.get_session(s1.id).tutor_id, "a")
        self.assertEqual([s.tutor_id for s in self.repo.sessions.list_for_user("a")], ["a", "a"])

    def test_reviews_messages_notifications(self):
        self.m.add_user("a")
        self.m.add_user("b")
        session = self.m.add_session("a", "b", status="completed", hours_from_now=-1)

        self.repo.save_review(Review(session_id=session.id, reviewer_id="b", reviewee_id="a", rating=5))
        self.repo.save_message(Message(sender_id="a", receiver_id="b", content="hi"))
        self.repo.save_notification(Notification(user_id="b", type="new_message", title="t", message="m"))

        self.assertEqual(len(self.repo.list_reviews_for_user("a")), 1)
        self.assertEqual(self.repo.list_reviews_for_user("a")[0].session_id, session.id)
        self.assertEqual(len(self.repo.list_messages_for_user("a")), 1)
        self.assertEqual(len(self.repo.list_messages_for_user("b")), 1)

        notification = self.repo.list_notifications_for_user("b")[0]
        self.assertFalse(notification.is_read)
        self.assertTrue(self.repo.mark_notification_read(notification.id).is_read)
        self.assertIsNone(self.repo.mark_notification_read("missing"))

    def test_points_cannot_go_negative(self):
        user = self.m.add_user("a")
        user.points = -5
        with self.assertRaises(IntegrityError):
            self.repo.save_user(user)
        self.repo.rollback()

    def test_rating_check_constraint(self):
        self.m.add_user("a")
        self.m.add_user("b")
        session = self.m.add_session("a", "b", status="completed", hours_from_now=-1)
        with self.assertRaises(IntegrityError):
            self.repo.save_review(Review(session_id=session.id, reviewer_id="b", reviewee_id="a", rating=9))
        self.repo.rollback()

    def test_notification_requires_existing_user(self):
        with self.assertRaises(IntegrityError):
            self.repo.save_notification(Notification(user_id="ghost", type="new_message", title="t", message="m"))
        self.repo.rollback()

    def test_unit_of_work_commits_and_rolls_back(self):
        with marketplace_uow(self.m.session_factory) as repo:
            repo.subjects.upsert({"id": "s50", "name": "Statistics", "category": "Mathematics"})

        with self.assertRaises(RuntimeError):
            with marketplace_uow(self.m.session_factory) as repo:
                repo.subjects.upsert({"id": "s51", "name": "Topology", "category": "Mathematics"})
                raise RuntimeError("boom")

        self.m.db.expire_all()
        self.assertIsNotNone(self.repo.get_subject("s50"))
        self.assertIsNone(self.repo.get_subject("s51"))


@pytest.mark.db
def test_data_store_contract_on_fresh_marketplace(marketplace):
    repo = marketplace.repo
    assert repo.list_users() == []
    assert repo.list_sessions_for_user("nobody") == []
    assert repo.list_notifications_for_user("nobody") == []

    marketplace.add_user("solo")
    assert [u.id for u in repo.list_users()] == ["solo"]
    assert repo.get_user("solo").points == 0


if __name__ == '__main__':
    unittest.main()

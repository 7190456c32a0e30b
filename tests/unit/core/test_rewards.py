#!/usr/bin/env python3
"""
Tests for the reward catalog and redemption.
"""

import unittest

import pytest

from core.errors import InsufficientPointsError, NotFoundError, ValidationError
from core.rewards import REWARD_CATALOG, list_rewards, get_reward
from tests.fixtures.marketplace_fixtures import MarketplaceFixture


class TestCatalog(unittest.TestCase):

    def test_ids_are_unique(self):
        ids = [item.id for item in REWARD_CATALOG]
        self.assertEqual(len(ids), len(set(ids)))

    def test_filter_by_category(self):
        canteen = list_rewards("canteen")
        self.assertTrue(canteen)
        self.assertTrue(all(item.category == "canteen" for item in canteen))
        self.assertEqual(len(list_rewards()), len(REWARD_CATALOG))
        self.assertEqual(list_rewards("spaceships"), [])

    def test_get_reward(self):
        self.assertEqual(get_reward("r1").name, "Free Coffee")
        self.assertIsNone(get_reward("r404"))

    def test_campus_catalog_contents(self):
        self.assertEqual([item.id for item in REWARD_CATALOG], [f"r{i}" for i in range(1, 14)])
        self.assertEqual(
            {c: len(list_rewards(c)) for c in ("canteen", "library", "bookstore", "events", "merch")},
            {"canteen": 3, "library": 3, "bookstore": 3, "events": 2, "merch": 2}
        )

        tech_fest = get_reward("r10")
        self.assertEqual((tech_fest.name, tech_fest.points_cost), ("Tech Fest Entry", 300))
        self.assertFalse(tech_fest.available)
        self.assertEqual([item.id for item in REWARD_CATALOG if not item.available], ["r10"])

        self.assertEqual(get_reward("r7").discount, "10% OFF")
        self.assertEqual(get_reward("r12").points_cost, 500)
        self.assertEqual(get_reward("r13").name, "Study Match Badge")


@pytest.mark.db
class TestRedeemReward(unittest.TestCase):

    def setUp(self):
        self.m = MarketplaceFixture()
        self.m.add_user("rich", points=600)
        self.m.add_user("poor", points=20)
        self.rewards = self.m.services.rewards

    def tearDown(self):
        self.m.close()

    def test_redeem_deducts_cost(self):
        user = self.rewards.redeem_reward(self.m.actor("rich"), "r1")
        self.assertEqual(user.points, 550)

        user = self.rewards.redeem_reward(self.m.actor("rich"), "r12")
        self.assertEqual(user.points, 50)

    def test_insufficient_points(self):
        with self.assertRaises(InsufficientPointsError) as ctx:
            self.rewards.redeem_reward(self.m.actor("poor"), "r1")

        self.assertEqual(ctx.exception.balance, 20)
        self.assertEqual(ctx.exception.cost, 50)
        self.assertEqual(self.m.repo.get_user("poor").points, 20)

    def test_unavailable_item(self):
        with self.assertRaises(ValidationError):
            self.rewards.redeem_reward(self.m.actor("rich"), "r10")
        self.assertEqual(self.m.repo.get_user("rich").points, 600)

    def test_unknown_reward_and_user(self):
        with self.assertRaises(NotFoundError):
            self.rewards.redeem_reward(self.m.actor("rich"), "r404")
        with self.assertRaises(NotFoundError):
            self.rewards.redeem_reward(self.m.actor("ghost"), "r1")


if __name__ == '__main__':
    unittest.main()

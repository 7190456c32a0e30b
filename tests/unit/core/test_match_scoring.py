#!/usr/bin/env python3
"""
Unit tests for the match scorer.

Covers both variants:
1. compute_matches (suggested matches) - both directions, department bonus,
   rating term, positive-score filter, top-10 cap
2. rank_for_discovery (browse) - learn overlap + rating only, uncapped
3. Scoring helpers and discovery filters

Pure in-memory users; no database required.
"""

import unittest

from core.config_loader import MatchingConfig
from core.matcher import (
    compute_matches,
    rank_for_discovery,
    apply_discovery_filters,
    DiscoveryFilters,
)
from core.matcher.scoring import overlap_score, shares_availability
from tests.fixtures.marketplace_fixtures import make_user


def ids(matches):
    return [m.user.id for m in matches]


class TestOverlapScore(unittest.TestCase):

    def test_sums_proficiency_times_urgency(self):
        learner = make_user("a", learns=[("s1", 5), ("s2", 2), ("s3", 4)])
        tutor = make_user("b", teaches=[("s1", 4), ("s2", 3)])

        score, common = overlap_score(learner.needs_by_subject(), tutor.expertise_by_subject(), 'learn')

        self.assertEqual(score, 4 * 5 + 3 * 2)
        self.assertEqual([c.subject_id for c in common], ["s1", "s2"])
        self.assertEqual([c.points for c in common], [20, 6])
        self.assertTrue(all(c.kind == 'learn' for c in common))

    def test_no_shared_subjects(self):
        learner = make_user("a", learns=[("s1", 5)])
        tutor = make_user("b", teaches=[("s2", 5)])

        score, common = overlap_score(learner.needs_by_subject(), tutor.expertise_by_subject(), 'learn')
        self.assertEqual(score, 0)
        self.assertEqual(common, [])


class TestComputeMatches(unittest.TestCase):

    def test_same_department_learn_match_scores_25(self):
        seeker = make_user("a", department="Computer Science", learns=[("s1", 5)])
        tutor = make_user("b", department="Computer Science", teaches=[("s1", 4)], rating=0.0)

        matches = compute_matches(seeker, [seeker, tutor])

        self.assertEqual(len(matches), 1)
        self.assertEqual(matches[0].user.id, "b")
        self.assertEqual(matches[0].score, 25)

    def test_both_directions_department_and_rating(self):
        seeker = make_user("a", department="Physics", learns=[("s1", 3)], teaches=[("s2", 5)])
        other = make_user(
            "b", department="Mathematics", teaches=[("s1", 2)], learns=[("s2", 4)], rating=4.5
        )

        matches = compute_matches(seeker, [other])

        # 2*3 (learn) + 5*4 (teach) + 0 (dept) + 4.5*2
        self.assertEqual(matches[0].score, 6 + 20 + 0 + 9.0)
        kinds = {(c.subject_id, c.kind) for c in matches[0].common_subjects}
        self.assertEqual(kinds, {("s1", "learn"), ("s2", "teach")})

    def test_never_includes_seeker(self):
        seeker = make_user("a", learns=[("s1", 5)], teaches=[("s1", 5)], rating=5.0)
        others = [seeker, make_user("b", teaches=[("s1", 1)])]

        self.assertNotIn("a", ids(compute_matches(seeker, others)))

    def test_excludes_non_positive_scores(self):
        seeker = make_user("a", department="Physics", learns=[("s1", 5)])
        unrelated = make_user("b", department="History", teaches=[("s4", 5)], rating=0.0)
        same_dept_only = make_user("c", department="Physics")

        matches = compute_matches(seeker, [unrelated, same_dept_only])

        self.assertEqual(ids(matches), ["c"])
        self.assertEqual(matches[0].score, 5)

    def test_sorted_descending(self):
        seeker = make_user("a", department="Physics", learns=[("s1", 5)])
        low = make_user("low", department="History", teaches=[("s1", 1)])
        high = make_user("high", department="History", teaches=[("s1", 5)])
        mid = make_user("mid", department="History", teaches=[("s1", 3)])

        matches = compute_matches(seeker, [low, high, mid])

        self.assertEqual(ids(matches), ["high", "mid", "low"])
        scores = [m.score for m in matches]
        self.assertEqual(scores, sorted(scores, reverse=True))

    def test_ties_keep_input_order(self):
        seeker = make_user("a", department="Physics", learns=[("s1", 2)])
        others = [
            make_user(f"u{i}", department="History", teaches=[("s1", 3)])
            for i in range(5)
        ]

        matches = compute_matches(seeker, others)

        self.assertEqual(ids(matches), ["u0", "u1", "u2", "u3", "u4"])

    def test_caps_at_top_ten(self):
        seeker = make_user("a", department="Physics", learns=[("s1", 5)])
        others = [
            make_user(f"u{i:02d}", department="History", teaches=[("s1", 1 + i % 5)])
            for i in range(15)
        ]

        matches = compute_matches(seeker, others)

        self.assertEqual(len(matches), 10)
        self.assertTrue(all(m.score >= 5 * 2 for m in matches))

    def test_config_overrides_weights_and_cap(self):
        config = MatchingConfig(department_bonus=0.0, rating_weight=10.0, suggested_top_k=1)
        seeker = make_user("a", department="Physics")
        b = make_user("b", department="Physics", rating=2.0)
        c = make_user("c", department="Physics", rating=3.0)

        matches = compute_matches(seeker, [b, c], config)

        self.assertEqual(ids(matches), ["c"])
        self.assertEqual(matches[0].score, 30.0)

    def test_reports_shared_availability(self):
        seeker = make_user("a", learns=[("s1", 5)], availability=[(1, "09:00", "11:00")])
        overlapping = make_user("b", teaches=[("s1", 5)], availability=[(1, "10:30", "12:00")])
        other_day = make_user("c", teaches=[("s1", 5)], availability=[(2, "09:00", "11:00")])

        flags = {m.user.id: m.shares_availability for m in compute_matches(seeker, [overlapping, other_day])}

        self.assertEqual(flags, {"b": True, "c": False})


class TestSharesAvailability(unittest.TestCase):

    def test_touching_slots_do_not_overlap(self):
        a = make_user("a", availability=[(3, "09:00", "10:00")])
        b = make_user("b", availability=[(3, "10:00", "11:00")])
        self.assertFalse(shares_availability(a, b))

    def test_no_slots(self):
        self.assertFalse(shares_availability(make_user("a"), make_user("b")))


class TestRankForDiscovery(unittest.TestCase):

    def test_no_department_bonus(self):
        seeker = make_user("a", department="Computer Science", learns=[("s1", 5)])
        tutor = make_user("b", department="Computer Science", teaches=[("s1", 4)])

        matches = rank_for_discovery(seeker, [tutor])

        self.assertEqual(matches[0].score, 20)

    def test_ignores_teach_direction(self):
        seeker = make_user("a", teaches=[("s2", 5)])
        wants_help = make_user("b", learns=[("s2", 5)], rating=1.0)

        matches = rank_for_discovery(seeker, [wants_help])

        self.assertEqual(matches[0].score, 2.0)
        self.assertEqual(matches[0].common_subjects, [])

    def test_keeps_zero_scores_and_is_uncapped(self):
        seeker = make_user("a", learns=[("s1", 5)])
        others = [make_user(f"u{i:02d}", department="History") for i in range(12)]
        others.append(make_user("tutor", teaches=[("s1", 2)]))

        matches = rank_for_discovery(seeker, [seeker] + others)

        self.assertEqual(len(matches), 13)
        self.assertEqual(matches[0].user.id, "tutor")
        self.assertNotIn("a", ids(matches))
        self.assertEqual(ids(matches)[1:], [f"u{i:02d}" for i in range(12)])

    def test_rating_orders_candidates(self):
        seeker = make_user("a")
        others = [make_user("b", rating=3.0), make_user("c", rating=4.8)]

        self.assertEqual(ids(rank_for_discovery(seeker, others)), ["c", "b"])


class TestDiscoveryFilters(unittest.TestCase):

    def setUp(self):
        self.users = [
            make_user("ana", name="Ana", department="Mathematics", teaches=[("s2", 4)],
                      preferred_mode="video", min_rate=0.0, bio="Loves proofs"),
            make_user("ben", name="Ben", department="Computer Science", teaches=[("s1", 5)],
                      preferred_mode="in-person", min_rate=300.0),
            make_user("cai", name="Cai", department="Computer Science", teaches=[("s2", 2)],
                      preferred_mode="both", min_rate=150.0),
        ]

    def test_search_matches_name_bio_or_department(self):
        self.assertEqual(ids_of(apply_discovery_filters(self.users, DiscoveryFilters(search="proofs"))), ["ana"])
        self.assertEqual(
            ids_of(apply_discovery_filters(self.users, DiscoveryFilters(search="computer"))), ["ben", "cai"]
        )

    def test_department(self):
        result = apply_discovery_filters(self.users, DiscoveryFilters(department="Mathematics"))
        self.assertEqual(ids_of(result), ["ana"])

    def test_subject_requires_teaching_it(self):
        result = apply_discovery_filters(self.users, DiscoveryFilters(subject_id="s2"))
        self.assertEqual(ids_of(result), ["ana", "cai"])

    def test_mode_accepts_both(self):
        result = apply_discovery_filters(self.users, DiscoveryFilters(mode="video"))
        self.assertEqual(ids_of(result), ["ana", "cai"])

    def test_max_rate(self):
        result = apply_discovery_filters(self.users, DiscoveryFilters(max_rate=150.0))
        self.assertEqual(ids_of(result), ["ana", "cai"])

    def test_filters_apply_before_ranking(self):
        seeker = make_user("me", learns=[("s2", 5)])
        matches = rank_for_discovery(seeker, self.users, DiscoveryFilters(department="Computer Science"))
        self.assertEqual(ids(matches), ["cai", "ben"])


def ids_of(users):
    return [u.id for u in users]


if __name__ == '__main__':
    unittest.main()

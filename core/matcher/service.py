#!/usr/bin/env python3
"""
Match Service - ranks candidate study partners for a user.

Two named variants over the scoring primitive in ``scoring.py``:

- compute_matches ("suggested matches", dashboard):
  both-direction subject overlap + department bonus + rating term,
  drops non-positive scores, keeps the top 10.
- rank_for_discovery ("browse", discovery page):
  what-they-can-teach-me overlap + rating term only, no department bonus,
  no score filter and no cap.

Both are pure: they read in-memory User objects, never the database, and
sort descending with ties kept in input order.
"""

from typing import Iterable, List, Optional
import logging

from core.config_loader import MatchingConfig
from core.errors import NotFoundError
from core.matcher.models import MatchCandidate, DiscoveryFilters
from core.matcher.scoring import (
    overlap_score, department_bonus, rating_score, shares_availability
)
from database.models import User
from database.repository import StudyMatchRepository

logger = logging.getLogger(__name__)


def _rank(candidates: List[MatchCandidate]) -> List[MatchCandidate]:
    # sorted() is stable with reverse=True, so equal scores keep input order
    return sorted(candidates, key=lambda m: m.score, reverse=True)


def compute_matches(
    seeker: User,
    others: Iterable[User],
    config: Optional[MatchingConfig] = None
) -> List[MatchCandidate]:
    """Suggested study partners for ``seeker``, best first (at most top_k)."""
    config = config or MatchingConfig()
    seeker_needs = seeker.needs_by_subject()
    seeker_skills = seeker.expertise_by_subject()

    scored = []
    for other in others:
        if other.id == seeker.id:
            continue

        learn_score, learn_common = overlap_score(seeker_needs, other.expertise_by_subject(), 'learn')
        teach_score, teach_common = overlap_score(other.needs_by_subject(), seeker_skills, 'teach')

        score = (
            learn_score
            + teach_score
            + department_bonus(seeker, other, config.department_bonus)
            + rating_score(other, config.rating_weight)
        )

        if score <= 0:
            continue

        scored.append(MatchCandidate(
            user=other,
            score=score,
            common_subjects=learn_common + teach_common,
            shares_availability=shares_availability(seeker, other)
        ))

    ranked = _rank(scored)[:config.suggested_top_k]
    logger.debug(f"Suggested {len(ranked)} of {len(scored)} scored candidates for user {seeker.id}")
    return ranked


def apply_discovery_filters(users: Iterable[User], filters: DiscoveryFilters) -> List[User]:
    """Narrow a candidate pool the way the browse page does."""
    filtered = list(users)

    if filters.search:
        term = filters.search.lower()
        filtered = [
            u for u in filtered
            if term in (u.name or '').lower()
            or term in (u.bio or '').lower()
            or term in (u.department or '').lower()
        ]

    if filters.department:
        filtered = [u for u in filtered if u.department == filters.department]

    if filters.subject_id:
        filtered = [u for u in filtered if filters.subject_id in u.expertise_by_subject()]

    if filters.mode:
        filtered = [u for u in filtered if u.preferred_mode in (filters.mode, 'both')]

    if filters.max_rate is not None:
        filtered = [u for u in filtered if (u.min_rate or 0) <= filters.max_rate]

    return filtered


def rank_for_discovery(
    seeker: User,
    others: Iterable[User],
    filters: Optional[DiscoveryFilters] = None,
    config: Optional[MatchingConfig] = None
) -> List[MatchCandidate]:
    """Full browse list for ``seeker``: every candidate, best first, uncapped."""
    config = config or MatchingConfig()
    pool = [u for u in others if u.id != seeker.id]
    if filters is not None:
        pool = apply_discovery_filters(pool, filters)

    seeker_needs = seeker.needs_by_subject()
    scored = []
    for other in pool:
        learn_score, learn_common = overlap_score(seeker_needs, other.expertise_by_subject(), 'learn')
        scored.append(MatchCandidate(
            user=other,
            score=learn_score + rating_score(other, config.rating_weight),
            common_subjects=learn_common,
            shares_availability=shares_availability(seeker, other)
        ))

    return _rank(scored)


class MatchService:
    """Loads users from the repository and runs the match variants."""

    def __init__(self, repo: StudyMatchRepository, config: MatchingConfig):
        self.repo = repo
        self.config = config

    def _load(self, user_id: str):
        seeker = self.repo.get_user(user_id)
        if seeker is None:
            raise NotFoundError("User", user_id)
        return seeker, self.repo.list_users()

    def suggested_matches(self, user_id: str) -> List[MatchCandidate]:
        seeker, users = self._load(user_id)
        return compute_matches(seeker, users, self.config)

    def discover(self, user_id: str, filters: Optional[DiscoveryFilters] = None) -> List[MatchCandidate]:
        seeker, users = self._load(user_id)
        return rank_for_discovery(seeker, users, filters, self.config)

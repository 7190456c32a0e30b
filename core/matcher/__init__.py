"""Matcher Module - ranks study partners from subject overlap, department and rating."""
from core.matcher.models import MatchCandidate, CommonSubject, DiscoveryFilters
from core.matcher.service import (
    MatchService, compute_matches, rank_for_discovery, apply_discovery_filters
)

__all__ = [
    'MatchService', 'compute_matches', 'rank_for_discovery', 'apply_discovery_filters',
    'MatchCandidate', 'CommonSubject', 'DiscoveryFilters',
]

#!/usr/bin/env python3
"""
Matcher Models - Data structures for match results.
"""

from typing import List, Optional
from dataclasses import dataclass, field

from database.models import User


@dataclass
class CommonSubject:
    """A subject shared between seeker and candidate.

    kind:
        'learn' - the candidate can teach the seeker this subject
        'teach' - the seeker can teach the candidate this subject
    """
    subject_id: str
    kind: str
    points: int = 0


@dataclass
class MatchCandidate:
    """A ranked study partner for a seeker."""
    user: User
    score: float = 0.0
    common_subjects: List[CommonSubject] = field(default_factory=list)
    shares_availability: bool = False


@dataclass
class DiscoveryFilters:
    """Optional filters for the discovery browse list. None means no filter."""
    search: Optional[str] = None
    department: Optional[str] = None
    subject_id: Optional[str] = None  # candidate must teach this subject
    mode: Optional[str] = None  # in-person | video
    max_rate: Optional[float] = None

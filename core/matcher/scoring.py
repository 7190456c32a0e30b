#!/usr/bin/env python3
"""
Scoring primitive shared by both match variants.

All weights are plain sums, no normalization:
- subject overlap: proficiency * urgency per shared subject
- department affinity: flat bonus
- rating: candidate.rating * rating_weight
"""

from typing import Dict, List, Tuple
import logging

from core.matcher.models import CommonSubject
from core.utils import parse_clock_time
from database.models import User, SubjectExpertise, SubjectNeed

logger = logging.getLogger(__name__)


def overlap_score(
    needs: Dict[str, SubjectNeed],
    expertise: Dict[str, SubjectExpertise],
    kind: str
) -> Tuple[int, List[CommonSubject]]:
    """
    Sum proficiency * urgency for every need that has matching expertise.

    Args:
        needs: Learner's needs keyed by subject id
        expertise: Tutor's expertise keyed by subject id
        kind: Tag for the resulting CommonSubject entries ('learn' or 'teach')

    Returns: (score, common_subjects)
    """
    score = 0
    common = []
    for subject_id, need in needs.items():
        skill = expertise.get(subject_id)
        if skill is None:
            continue
        points = skill.proficiency * need.urgency
        score += points
        common.append(CommonSubject(subject_id=subject_id, kind=kind, points=points))
    return score, common


def department_bonus(seeker: User, candidate: User, bonus: float) -> float:
    return bonus if candidate.department == seeker.department else 0.0


def rating_score(candidate: User, weight: float) -> float:
    return (candidate.rating or 0.0) * weight


def _slot_minutes(slot) -> Tuple[int, int]:
    return parse_clock_time(slot.start_time), parse_clock_time(slot.end_time)


def shares_availability(seeker: User, candidate: User) -> bool:
    """True when any weekly slot of the two users overlaps on the same day."""
    for mine in seeker.availability:
        for theirs in candidate.availability:
            if mine.day_of_week != theirs.day_of_week:
                continue
            try:
                my_start, my_end = _slot_minutes(mine)
                their_start, their_end = _slot_minutes(theirs)
            except ValueError:
                logger.warning(f"Skipping malformed availability slot for users {seeker.id}/{candidate.id}")
                continue
            if my_start < their_end and their_start < my_end:
                return True
    return False

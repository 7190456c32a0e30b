#!/usr/bin/env python3
"""
Session Lifecycle - state machine for tutoring sessions.

    pending ──accept──> confirmed ──complete──> completed
       │                    │
       └──────cancel────────┴──────────────> cancelled

- accept: tutor only, from pending
- cancel (decline): either participant, from pending or confirmed
- complete: either participant, from confirmed, once scheduled_at has passed;
  awards points to the acting user's role only (tutor 50, learner 30)

completed and cancelled are terminal. Every rejected transition raises
InvalidStateTransition and leaves the session untouched.
"""

import logging
from datetime import datetime
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

from core.context import ActorContext
from core.errors import InvalidStateTransition, NotFoundError, ValidationError
from core.messaging import MessagingService
from core.points_ledger import PointsLedger
from core.utils import ensure_utc, parse_timestamp, utcnow
from database.models import TutoringSession, SESSION_MODES
from database.repository import StudyMatchRepository
from notification import NotificationEmitter, NotificationType

logger = logging.getLogger(__name__)

PENDING = 'pending'
CONFIRMED = 'confirmed'
COMPLETED = 'completed'
CANCELLED = 'cancelled'

# action -> (allowed source states, target state)
TRANSITIONS: Dict[str, Tuple[FrozenSet[str], str]] = {
    'accept': (frozenset({PENDING}), CONFIRMED),
    'cancel': (frozenset({PENDING, CONFIRMED}), CANCELLED),
    'complete': (frozenset({CONFIRMED}), COMPLETED),
}

TERMINAL_STATES = frozenset({COMPLETED, CANCELLED})


def can_transition(current: str, action: str) -> bool:
    sources, _ = TRANSITIONS[action]
    return current in sources


def upcoming_sessions(sessions: List[TutoringSession], now: datetime) -> List[TutoringSession]:
    """Confirmed sessions still in the future, soonest first."""
    now = ensure_utc(now)
    upcoming = [
        s for s in sessions
        if s.status == CONFIRMED and ensure_utc(s.scheduled_at) > now
    ]
    return sorted(upcoming, key=lambda s: ensure_utc(s.scheduled_at))


def pending_sessions(sessions: List[TutoringSession]) -> List[TutoringSession]:
    return sorted(
        (s for s in sessions if s.status == PENDING),
        key=lambda s: ensure_utc(s.scheduled_at)
    )


def session_history(sessions: List[TutoringSession]) -> List[TutoringSession]:
    """Completed or cancelled sessions, most recent first."""
    return sorted(
        (s for s in sessions if s.status in TERMINAL_STATES),
        key=lambda s: ensure_utc(s.scheduled_at),
        reverse=True
    )


class SessionLifecycle:
    def __init__(
        self,
        repo: StudyMatchRepository,
        emitter: NotificationEmitter,
        ledger: PointsLedger,
        messaging: Optional[MessagingService] = None
    ):
        self.repo = repo
        self.emitter = emitter
        self.ledger = ledger
        self.messaging = messaging or MessagingService(repo, emitter)

    # --- Creation ---

    def request_session(
        self,
        tutor_id: str,
        learner_id: str,
        subject_id: str,
        scheduled_at: Any,
        duration: int,
        mode: str,
        location: Optional[str] = None,
        notes: Optional[str] = None,
        message: Optional[str] = None
    ) -> TutoringSession:
        """
        Book a session on behalf of the learner.

        The session starts pending with amount = tutor.min_rate * duration / 60
        and the tutor receives a session_request notification. An optional
        booking message is delivered to the tutor tagged with the session id.

        Raises:
            ValidationError: Unknown tutor/learner/subject, unparsable
                scheduled_at, non-positive duration or unknown mode.
        """
        tutor = self.repo.get_user(tutor_id)
        if tutor is None:
            raise ValidationError(f"Unknown tutor: {tutor_id}")
        learner = self.repo.get_user(learner_id)
        if learner is None:
            raise ValidationError(f"Unknown learner: {learner_id}")
        subject = self.repo.get_subject(subject_id)
        if subject is None:
            raise ValidationError(f"Unknown subject: {subject_id}")

        try:
            when = parse_timestamp(scheduled_at)
        except ValueError as e:
            raise ValidationError(str(e)) from e

        if not isinstance(duration, int) or isinstance(duration, bool) or duration <= 0:
            raise ValidationError(f"Duration must be a positive number of minutes, got {duration!r}")
        if mode not in SESSION_MODES:
            raise ValidationError(f"Mode must be one of {SESSION_MODES}, got {mode!r}")

        session = TutoringSession(
            tutor_id=tutor.id,
            learner_id=learner.id,
            subject_id=subject.id,
            scheduled_at=when,
            duration=duration,
            mode=mode,
            location=location,
            notes=notes,
            status=PENDING,
            amount=(tutor.min_rate or 0) * (duration / 60),
            points_awarded=0
        )
        self.repo.save_session(session)

        self.emitter.emit(
            tutor.id, NotificationType.SESSION_REQUEST,
            subject_name=subject.name, scheduled_at=when
        )

        if message:
            self.messaging.send_message(ActorContext(learner.id), tutor.id, message, session_id=session.id)

        logger.info(f"Session {session.id} requested: learner={learner.id} tutor={tutor.id} subject={subject.id}")
        return session

    # --- Transitions ---

    def _get_session(self, session_id: str) -> TutoringSession:
        session = self.repo.get_session(session_id)
        if session is None:
            raise NotFoundError("Session", session_id)
        return session

    def _reject(self, session: TutoringSession, action: str, reason: str = ""):
        logger.warning(f"Rejected {action} on session {session.id} (status={session.status}) {reason}".rstrip())
        raise InvalidStateTransition(session.id, session.status, action, reason)

    def _check(self, session: TutoringSession, action: str, actor: ActorContext):
        if not can_transition(session.status, action):
            self._reject(session, action)
        if not session.is_participant(actor.user_id):
            self._reject(session, action, f"user {actor.user_id} is not a participant")

    def _apply(self, session: TutoringSession, action: str) -> TutoringSession:
        _, target = TRANSITIONS[action]
        previous = session.status
        session.status = target
        self.repo.save_session(session)
        logger.info(f"Session {session.id}: {previous} -> {target}")
        return session

    def _subject_name(self, session: TutoringSession) -> Optional[str]:
        subject = self.repo.get_subject(session.subject_id)
        return subject.name if subject else None

    def accept_session(self, actor: ActorContext, session_id: str) -> TutoringSession:
        """Tutor confirms a pending request."""
        session = self._get_session(session_id)
        self._check(session, 'accept', actor)
        if actor.user_id != session.tutor_id:
            self._reject(session, 'accept', "only the tutor can accept")

        self._apply(session, 'accept')
        self.emitter.emit(
            session.learner_id, NotificationType.SESSION_CONFIRMED,
            subject_name=self._subject_name(session), scheduled_at=ensure_utc(session.scheduled_at)
        )
        return session

    def decline_or_cancel_session(self, actor: ActorContext, session_id: str) -> TutoringSession:
        """Either participant declines a pending request or cancels a confirmed session."""
        session = self._get_session(session_id)
        self._check(session, 'cancel', actor)

        self._apply(session, 'cancel')
        self.emitter.emit(
            session.other_party(actor.user_id), NotificationType.SESSION_CANCELLED,
            subject_name=self._subject_name(session), scheduled_at=ensure_utc(session.scheduled_at)
        )
        return session

    def complete_session(self, actor: ActorContext, session_id: str) -> TutoringSession:
        """
        Mark a confirmed session that has already taken place as completed.

        Only the acting user is credited: 50 points when acting as tutor,
        30 when acting as learner. ``points_awarded`` records that amount.
        """
        session = self._get_session(session_id)
        self._check(session, 'complete', actor)
        if ensure_utc(session.scheduled_at) >= ensure_utc(actor.now):
            self._reject(session, 'complete', "session has not taken place yet")

        self._apply(session, 'complete')
        acted_as_tutor = actor.user_id == session.tutor_id
        session.points_awarded = self.ledger.award_session_completion(actor.user_id, acted_as_tutor)
        self.repo.save_session(session)
        return session

    # --- Queries ---

    def get_session(self, session_id: str) -> TutoringSession:
        return self._get_session(session_id)

    def sessions_for_user(
        self,
        user_id: str,
        view: Optional[str] = None,
        now: Optional[datetime] = None
    ) -> List[TutoringSession]:
        """All sessions for a user, or one of the 'upcoming' / 'pending' / 'history' views."""
        sessions = self.repo.list_sessions_for_user(user_id)
        if view is None:
            return sessions
        if view == 'upcoming':
            return upcoming_sessions(sessions, now or utcnow())
        if view == 'pending':
            return pending_sessions(sessions)
        if view == 'history':
            return session_history(sessions)
        raise ValidationError(f"Unknown session view: {view}")

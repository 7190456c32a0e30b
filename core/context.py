from dataclasses import dataclass, field
from datetime import datetime

from core.utils import utcnow


@dataclass(frozen=True)
class ActorContext:
    """The user performing an operation and the clock they act at.

    Passed explicitly to every role-gated core operation instead of a
    process-wide "current user".
    """
    user_id: str
    now: datetime = field(default_factory=utcnow)

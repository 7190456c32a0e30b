"""
Error types raised by the core services.

All of them are reported to the immediate caller; none are fatal and the
core never retries.
"""


class StudyMatchError(Exception):
    """Base exception for core errors."""
    pass


class ValidationError(StudyMatchError):
    """Missing or unknown referenced id, or malformed input (dates, ratings, ...)."""
    pass


class NotFoundError(StudyMatchError):
    """The operation targets an entity id that does not exist."""

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found: {entity_id}")


class InvalidStateTransition(StudyMatchError):
    """A session state machine or role rule was violated."""

    def __init__(self, session_id: str, current: str, attempted: str, reason: str = ""):
        self.session_id = session_id
        self.current = current
        self.attempted = attempted
        self.reason = reason
        message = f"Cannot {attempted} session {session_id} in state '{current}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InsufficientPointsError(StudyMatchError):
    """A redemption costs more points than the user holds."""

    def __init__(self, user_id: str, balance: int, cost: int):
        self.user_id = user_id
        self.balance = balance
        self.cost = cost
        super().__init__(f"User {user_id} has {balance} points, needs {cost}")

import contextlib
import logging

from database.database import SessionLocal
from database.repository import StudyMatchRepository

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def marketplace_uow(session_factory=None):
    """One marketplace operation, one transaction.

    Yields a StudyMatchRepository over a new Session from ``session_factory``
    (default: the module-level SessionLocal). The session is committed when
    the block exits cleanly and rolled back if it raises.

    Usage:
        with marketplace_uow() as repo:
            sessions = context.services(repo).sessions
            sessions.accept_session(actor, session_id)
    """
    session = (session_factory or SessionLocal)()
    try:
        yield StudyMatchRepository(session)
        session.commit()
    except Exception:
        logger.debug("Rolling back marketplace unit of work")
        session.rollback()
        raise
    finally:
        session.close()

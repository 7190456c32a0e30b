import logging
from typing import List, Dict, Any, Optional

from tenacity import retry, stop_after_attempt, wait_fixed

from database.models import Base
from database.repository import StudyMatchRepository

logger = logging.getLogger(__name__)


@retry(stop=stop_after_attempt(5), wait=wait_fixed(2), reraise=True)
def init_db(engine):
    logger.info("Initializing database...")
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Tables created or verified.")
    except Exception as e:
        logger.error(f"Error initializing DB: {e}")
        raise


def seed_subjects(repo: StudyMatchRepository, subjects: Optional[List[Dict[str, Any]]]) -> int:
    """Load the subject catalog. Existing ids are refreshed in place."""
    if not subjects:
        logger.info("No subjects to seed")
        return 0

    for data in subjects:
        repo.subjects.upsert(data)

    logger.info(f"Seeded {len(subjects)} subjects")
    return len(subjects)

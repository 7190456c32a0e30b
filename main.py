import logging
import argparse
import json

from sqlalchemy.orm import sessionmaker

from core.app_context import AppContext
from core.config_loader import load_config
from core.errors import StudyMatchError
from database.database import build_engine
from database.init_db import init_db, seed_subjects
from database.uow import marketplace_uow

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def run_init_db(ctx: AppContext, engine, session_factory) -> int:
    init_db(engine)
    with marketplace_uow(session_factory) as repo:
        count = seed_subjects(repo, [s.model_dump() for s in ctx.config.subjects])
    logger.info(f"Database ready ({count} subjects in catalog)")
    return count


def run_matches(ctx: AppContext, session_factory, user_id: str):
    """Print suggested study partners for a user as JSON."""
    with marketplace_uow(session_factory) as repo:
        matches = ctx.services(repo).matches.suggested_matches(user_id)
        rows = [
            {
                "user_id": m.user.id,
                "name": m.user.name,
                "department": m.user.department,
                "score": m.score,
                "common_subjects": [c.subject_id for c in m.common_subjects],
                "shares_availability": m.shares_availability,
            }
            for m in matches
        ]
    print(json.dumps(rows, indent=2))
    return rows


def main():
    parser = argparse.ArgumentParser(description="StudyMatch peer tutoring marketplace")
    parser.add_argument("--config", default="config.yaml", help="Path to config.yaml")
    parser.add_argument(
        "--mode",
        choices=["init-db", "matches", "serve"],
        default="serve",
        help="init-db: create tables and seed subjects; matches: print suggestions; serve: run the API"
    )
    parser.add_argument("--user-id", help="User to compute matches for (matches mode)")
    args = parser.parse_args()

    config = load_config(args.config)
    logging.getLogger().setLevel(config.log_level.upper())
    ctx = AppContext.build(config)

    if args.mode == "serve":
        from web.backend.app import main as serve
        serve(config)
        return

    engine = build_engine(config.database.url)
    session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    if args.mode == "init-db":
        run_init_db(ctx, engine, session_factory)
        return

    if not args.user_id:
        parser.error("--user-id is required in matches mode")

    try:
        run_matches(ctx, session_factory, args.user_id)
    except StudyMatchError as e:
        logger.error(f"Could not compute matches: {e}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()

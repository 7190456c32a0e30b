#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from functools import lru_cache
from typing import Generator, Optional

from fastapi import Depends, Header
from sqlalchemy.orm import sessionmaker

from core.app_context import AppContext, MarketplaceServices
from core.config_loader import AppConfig
from core.context import ActorContext
from database.database import build_engine
from database.repository import StudyMatchRepository


class DatabaseManager:
    """Manages database connections and sessions."""

    def __init__(self, url: str):
        self.engine = build_engine(url)
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine
        )

    def get_repository(self) -> Generator[StudyMatchRepository, None, None]:
        """
        Yield a repository bound to one transaction.

        Commits when the request handler returns, rolls back on error.
        """
        session = self.SessionLocal()
        try:
            yield StudyMatchRepository(session)
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()


_app_config: Optional[AppConfig] = None


def configure(config: Optional[AppConfig]) -> None:
    """
    Use ``config`` for the app context and database of this process.

    Passing None falls back to config.yaml. Cached context and database
    manager are dropped so the next request picks the new config up.
    """
    global _app_config
    _app_config = config
    get_app_context.cache_clear()
    get_db_manager.cache_clear()


@lru_cache()
def get_app_context() -> AppContext:
    return AppContext.build(_app_config)


@lru_cache()
def get_db_manager() -> DatabaseManager:
    return DatabaseManager(get_app_context().config.database.url)


def get_repo() -> Generator[StudyMatchRepository, None, None]:
    """
    FastAPI dependency that yields a repository in a unit of work.

    Usage:
        @app.get("/endpoint")
        def my_endpoint(repo: StudyMatchRepository = Depends(get_repo)):
            ...
    """
    yield from get_db_manager().get_repository()


def get_services(
    repo: StudyMatchRepository = Depends(get_repo),
    context: AppContext = Depends(get_app_context)
) -> MarketplaceServices:
    return context.services(repo)


def get_actor(x_user_id: str = Header(..., description="Id of the acting user")) -> ActorContext:
    """The acting user, taken from the X-User-Id header."""
    return ActorContext(user_id=x_user_id)

#!/usr/bin/env python3
"""
StudyMatch Web API - FastAPI Application

Peer tutoring marketplace: profiles, partner matching, session booking,
reviews, points and in-app notifications.

Usage:
    python -m web.backend.app

Then open:
    - http://localhost:8080/docs - API Documentation (Swagger UI)
    - http://localhost:8080/redoc - Alternative API Documentation
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException

from core.config_loader import AppConfig
from core.errors import StudyMatchError
from database.init_db import init_db, seed_subjects
from database.repository import StudyMatchRepository
from .dependencies import configure, get_app_context, get_db_manager
from .exceptions import (
    service_exception_handler,
    http_exception_handler,
    general_exception_handler
)
from .routers import (
    users_router,
    matches_router,
    sessions_router,
    reviews_router,
    messages_router,
    notifications_router,
    rewards_router
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and load the subject catalog before serving."""
    config = get_app_context().config
    manager = get_db_manager()
    init_db(manager.engine)

    session = manager.SessionLocal()
    try:
        seed_subjects(
            StudyMatchRepository(session),
            [subject.model_dump() for subject in config.subjects]
        )
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()

    yield


# Create FastAPI app
app = FastAPI(
    title="StudyMatch API",
    description="API for the StudyMatch peer tutoring marketplace",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Register exception handlers
app.add_exception_handler(StudyMatchError, service_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# Include routers
app.include_router(users_router)
app.include_router(matches_router)
app.include_router(sessions_router)
app.include_router(reviews_router)
app.include_router(messages_router)
app.include_router(notifications_router)
app.include_router(rewards_router)


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "studymatch-web"}


def main(config: Optional[AppConfig] = None):
    """Run the web server, with ``config`` in place of config.yaml when given."""
    import uvicorn

    if config is not None:
        configure(config)
    config = get_app_context().config
    logger.info(f"Starting StudyMatch Web Server on {config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level=config.log_level.lower()
    )


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Error handlers mapping core exceptions onto HTTP responses.

Every error body has the same shape:
    {"success": false, "error": "<message>", "type": "<exception class>"}
"""

import logging
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse

from core.errors import (
    StudyMatchError,
    ValidationError,
    NotFoundError,
    InvalidStateTransition,
    InsufficientPointsError,
)

logger = logging.getLogger(__name__)


def status_code_for(exc: StudyMatchError) -> int:
    if isinstance(exc, NotFoundError):
        return 404
    if isinstance(exc, InvalidStateTransition):
        return 409
    if isinstance(exc, (ValidationError, InsufficientPointsError)):
        return 400
    return 500


def error_response(status_code: int, error, error_type: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error, "type": error_type}
    )


async def service_exception_handler(request: Request, exc: StudyMatchError) -> JSONResponse:
    """
    Handle core service exceptions.

    Rejections (bad input, missing entities, illegal transitions) are logged
    at INFO; anything unmapped is a 500 and logged with its traceback.
    """
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.info(f"Rejected {request.method} {request.url.path} ({status_code}): {exc}")

    return error_response(status_code, str(exc), exc.__class__.__name__)


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return error_response(exc.status_code, exc.detail, "HTTPException")


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unexpected error in {request.method} {request.url.path}")
    return error_response(500, "Internal server error", "InternalError")

"""Application-wide exception handlers.

Every error leaves the API as a JSON object with a ``detail`` key. Request
parsing problems (for example a malformed JSON body) use the same
``{"message", "issues"}`` shape as product validation failures, and
anything unhandled becomes a generic 500 after being logged.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    issues = []
    for error in exc.errors():
        # Drop the "body"/"path" prefix FastAPI puts in front of the field location
        # json_invalid puts a byte offset there instead of a field name
        if error.get("type") == "json_invalid":
            issues.append({"path": "", "message": "Request body is not valid JSON."})
            continue
        loc = [str(part) for part in error.get("loc", ())[1:]]
        issues.append({"path": ".".join(loc), "message": error.get("msg", "Invalid request")})

    logger.info(f"Rejected request {request.method} {request.url.path}: {issues}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": {"message": "Validation failed.", "issues": issues}},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An unexpected error occurred."},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

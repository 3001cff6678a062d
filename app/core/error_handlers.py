"""Global exception handlers.

FastAPI answers a malformed request body with ``422``; this API reports
every undecodable body (bad JSON, wrong field types, missing body) as
``400 Invalid input``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.constants import MSG_INVALID_INPUT

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ) -> JSONResponse:
        logger.warning(
            "request_body_invalid",
            extra={
                "path": request.url.path,
                "method": request.method,
                "errors": str(exc.errors()),
            },
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": MSG_INVALID_INPUT},
        )

"""
FastAPI error handlers.

Serializes normalized errors into JSON responses built from their
``output``. ``HttpError`` is handled by an exception handler; upgraded
foreign exceptions (a ``ValueError`` passed through ``bad_request``)
are caught by ``HttpErrorMiddleware`` since no handler can match them
by type. Any other exception is upgraded to a 500 first, so no stack
trace or internal message ever reaches the client.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from httperrors.application.boomify import boomify, is_http_error
from httperrors.application.construction import HttpError
from httperrors.application.normalization import get_message
from httperrors.core.config import settings
from httperrors.interfaces.schemas import ErrorPayload
from httperrors.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def to_response(err: BaseException) -> JSONResponse:
    """Build the JSON response for a normalized error.

    Args:
        err: An exception for which ``is_http_error`` is true.

    Returns:
        A response with the error's status code, payload and headers.
    """
    payload = ErrorPayload.model_validate(err.output.payload)
    headers = dict(err.output.headers) if settings.expose_headers else None
    return JSONResponse(
        status_code=err.output.status_code,
        content=payload.model_dump(by_alias=True, exclude_none=True),
        headers=headers,
    )


def _log_error(err: BaseException) -> None:
    if err.is_server:
        logger.error(
            "Server error %d %s: %s",
            err.output.status_code,
            err.code,
            get_message(err),
        )
    else:
        logger.warning(
            "Client error %d %s: %s",
            err.output.status_code,
            err.code,
            get_message(err),
        )


class HttpErrorMiddleware(BaseHTTPMiddleware):
    """Responds to normalized exceptions of any type.

    Exceptions that are not HTTP errors are re-raised for the
    catch-all handler.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Run the request and serialize any HTTP error it raises."""
        try:
            return await call_next(request)
        except Exception as exc:
            if not is_http_error(exc):
                raise
            _log_error(exc)
            return to_response(exc)


def register_error_handlers(app: FastAPI, log_level: Optional[str] = None) -> None:
    """Register the HTTP error handlers on a FastAPI application.

    Args:
        app: The FastAPI application instance.
        log_level: When given, the ``httperrors`` loggers are configured
            with this level.
    """
    if log_level:
        configure_logging(log_level)

    app.add_middleware(HttpErrorMiddleware)

    @app.exception_handler(HttpError)
    async def handle_http_error(_request: Request, exc: HttpError) -> JSONResponse:
        """Handle errors built by the factories."""
        _log_error(exc)
        return to_response(exc)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all. Upgrades plain exceptions to 500 before responding."""
        if not is_http_error(exc):
            logger.error("Unexpected error: %s", type(exc).__name__, exc_info=exc)
            boomify(exc)
        _log_error(exc)
        return to_response(exc)

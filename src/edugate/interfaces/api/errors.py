"""Map domain exceptions to HTTP responses."""

import logging

import falcon
import falcon.asgi

from edugate.domain.exceptions import (
    ConfigurationError,
    Conflict,
    EduGateError,
    NotFound,
    PermissionDenied,
    Unauthenticated,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS: list[tuple[type[EduGateError], str]] = [
    (Unauthenticated, falcon.HTTP_401),
    (PermissionDenied, falcon.HTTP_403),
    (NotFound, falcon.HTTP_404),
    (Conflict, falcon.HTTP_409),
    (ValidationError, falcon.HTTP_400),
]


def status_for(ex: EduGateError) -> str:
    for exc_type, status in _STATUS:
        if isinstance(ex, exc_type):
            return status
    return falcon.HTTP_500


async def handle_domain_error(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: EduGateError, params
) -> None:
    """Client-facing rejection with the exception's own message."""
    status = status_for(ex)
    if status == falcon.HTTP_500:
        await handle_configuration_error(req, resp, ex, params)
        return
    resp.status = status
    resp.media = {"error": str(ex), "type": type(ex).__name__}
    if isinstance(ex, Unauthenticated):
        resp.set_header("WWW-Authenticate", "Bearer")


async def handle_configuration_error(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: Exception, params
) -> None:
    """Integration bug: server fault, details stay in the log."""
    logger.error("Configuration error on %s %s: %s", req.method, req.path, ex)
    resp.status = falcon.HTTP_500
    resp.media = {"error": "Internal server error"}


async def handle_unexpected(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: Exception, params
) -> None:
    logger.exception("Unhandled error on %s %s", req.method, req.path)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def register_error_handlers(app: falcon.asgi.App) -> None:
    """Falcon picks the most specific handler by exception MRO."""
    app.add_error_handler(Exception, handle_unexpected)
    app.add_error_handler(EduGateError, handle_domain_error)
    app.add_error_handler(ConfigurationError, handle_configuration_error)

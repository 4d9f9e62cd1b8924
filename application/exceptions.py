"""
Application-layer exceptions.

These exceptions are raised from use cases and infrastructure adapters and
rendered by the handlers registered in backend.main.create_app() as
{"error": message, "debug": {...}} with the class's status code.
"""

from typing import Any, Dict, Optional

PREVIEW_LIMIT = 1000
STACK_LIMIT = 1200


def truncate(text: Any, limit: int = PREVIEW_LIMIT) -> str:
    """Shorten upstream bodies and traces before they go into a response."""
    value = "" if text is None else str(text)
    return value[:limit]


class ServiceError(Exception):
    """Base error carrying an HTTP status and optional diagnostics."""

    status_code = 500

    def __init__(
        self,
        message: str,
        debug: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.debug = debug or {}
        if status_code is not None:
            self.status_code = status_code


class BadRequestError(ServiceError):
    """Missing or malformed client input."""

    status_code = 400


class UnauthorizedError(ServiceError):
    """Credentials did not match."""

    status_code = 401


class NotFoundError(ServiceError):
    """A referenced customer or record does not exist."""

    status_code = 404


class ConfigurationError(ServiceError):
    """A required environment setting is missing."""

    status_code = 500


class UpstreamError(ServiceError):
    """An external service failed or returned something unusable."""

    status_code = 500


class UpstreamTimeoutError(ServiceError):
    """An external call exceeded its deadline."""

    status_code = 504

"""AI client factory with Helicone integration support."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict

from openai import AsyncOpenAI

from application.exceptions import ConfigurationError
from backend.settings import Settings


logger = logging.getLogger(__name__)

# Helicone proxy URL (private - implementation detail)
_HELICONE_OPENAI_BASE_URL = "https://oai.helicone.ai/v1"

# Header name validation pattern (RFC 7230)
_VALID_HEADER_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9\-]+$")


def _sanitize_header_value(value: str) -> str:
    """
    Sanitize a header value to prevent header injection.

    Keeps only printable ASCII characters.
    """
    return "".join(char for char in value if char.isprintable() and ord(char) < 128)


def _sanitize_header_name(name: str) -> str:
    """Title-case a property name into a header token, or "" when invalid."""
    sanitized = name.replace("_", "-").title()
    if _VALID_HEADER_NAME_PATTERN.match(sanitized):
        return sanitized
    return ""


@dataclass
class AIRequestContext:
    """Context for AI requests, used for tracking and observability."""

    feature_name: str | None = None
    user_id: str | None = None
    environment: str | None = None
    custom_properties: Dict[str, str] = field(default_factory=dict)

    def to_tracking_headers(self) -> Dict[str, str]:
        """Convert context to Helicone tracking headers, sanitized."""
        headers: Dict[str, str] = {}

        if self.user_id:
            headers["Helicone-User-Id"] = _sanitize_header_value(self.user_id)

        if self.feature_name:
            headers["Helicone-Property-Feature"] = _sanitize_header_value(self.feature_name)

        if self.environment:
            headers["Helicone-Property-Environment"] = _sanitize_header_value(self.environment)

        for key, value in self.custom_properties.items():
            header_name = _sanitize_header_name(key)
            if header_name:
                headers[f"Helicone-Property-{header_name}"] = _sanitize_header_value(str(value))

        return headers


class AIClientFactory:
    """Factory for creating OpenAI clients from explicit settings."""

    @staticmethod
    def create_openai_client(
        settings: Settings,
        context: AIRequestContext | None = None,
    ) -> AsyncOpenAI:
        """
        Create an async OpenAI client, optionally proxied through Helicone.

        Retries are disabled; a timed-out call surfaces to the caller.

        Args:
            settings: Application settings
            context: Request context for tracking and observability

        Returns:
            AsyncOpenAI client instance

        Raises:
            ConfigurationError: If OPENAI_API_KEY is not configured
        """
        if not settings.openai_api_key:
            raise ConfigurationError("Missing OPENAI_API_KEY")

        client_kwargs: Dict[str, Any] = {
            "api_key": settings.openai_api_key,
            "timeout": settings.openai_timeout_seconds,
            "max_retries": 0,
        }

        if settings.helicone_enabled:
            if not settings.helicone_api_key:
                logger.warning(
                    "helicone_enabled=true but helicone_api_key not set. "
                    "Falling back to direct OpenAI API calls."
                )
            else:
                client_kwargs["base_url"] = _HELICONE_OPENAI_BASE_URL
                default_headers = {
                    "Helicone-Auth": f"Bearer {settings.helicone_api_key}",
                }
                if context:
                    default_headers.update(context.to_tracking_headers())
                client_kwargs["default_headers"] = default_headers

                logger.debug("Creating OpenAI client with Helicone proxy")
                return AsyncOpenAI(**client_kwargs)

        logger.debug("Creating OpenAI client (direct)")
        return AsyncOpenAI(**client_kwargs)

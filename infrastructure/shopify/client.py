"""
HTTP client for the Shopify Admin GraphQL API.

One POST per query. Transport failures, HTTP errors and GraphQL "errors"
arrays are raised as ShopifyClientError subclasses; the API layer renders
them as 500 (or 504 on timeout).
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from application.exceptions import ConfigurationError, UpstreamError, UpstreamTimeoutError, truncate

logger = logging.getLogger(__name__)


class ShopifyClientError(UpstreamError):
    """Base exception for Shopify client errors."""

    pass


class ShopifyAPIUnavailable(ShopifyClientError):
    """Raised when the Admin API cannot be reached."""

    pass


class ShopifyAPITimeout(UpstreamTimeoutError):
    """Raised when an Admin API call exceeds its deadline."""

    pass


class ShopifyAPIError(ShopifyClientError):
    """Raised when the Admin API returns an HTTP or GraphQL error."""

    def __init__(self, message: str, upstream_status: Optional[int] = None, details: Any = None):
        super().__init__(
            message,
            debug={"shopify_status": upstream_status, "details": truncate(details)},
        )
        self.upstream_status = upstream_status


class ShopifyUserError(ShopifyClientError):
    """Raised when a mutation reports userErrors."""

    def __init__(self, message: str, user_errors: List[Dict[str, Any]]):
        super().__init__(message, debug={"user_errors": user_errors})
        self.user_errors = user_errors


class ShopifyAdminClient:
    """
    Minimal Admin GraphQL client.

    Credentials are checked on each call so that a missing token is reported
    as a configuration error for the request that needs it.
    """

    def __init__(
        self,
        store_domain: Optional[str],
        access_token: Optional[str],
        api_version: str = "2024-10",
        timeout: float = 15.0,
    ):
        self._store_domain = (store_domain or "").strip().rstrip("/")
        self._access_token = access_token
        self._api_version = api_version
        self._timeout = timeout

    @property
    def endpoint(self) -> str:
        return f"https://{self._store_domain}/admin/api/{self._api_version}/graphql.json"

    async def execute(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Run a GraphQL query or mutation.

        Args:
            query: GraphQL document
            variables: Query variables

        Returns:
            The response's "data" object

        Raises:
            ConfigurationError: Store domain or token missing
            ShopifyAPIUnavailable: Network failure
            ShopifyAPITimeout: Request timed out
            ShopifyAPIError: Non-2xx status, invalid JSON or GraphQL errors
        """
        if not self._store_domain or not self._access_token:
            raise ConfigurationError(
                "Missing Shopify env vars: SHOPIFY_STORE_DOMAIN / SHOPIFY_ADMIN_API_ACCESS_TOKEN"
            )

        headers = {
            "Content-Type": "application/json",
            "X-Shopify-Access-Token": self._access_token,
        }
        payload = {"query": query, "variables": variables or {}}

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(self.endpoint, json=payload, headers=headers)
        except httpx.TimeoutException as e:
            logger.error(f"Shopify Admin API timeout: {e}")
            raise ShopifyAPITimeout("Shopify request timed out") from e
        except httpx.ConnectError as e:
            logger.error(f"Shopify Admin API unavailable: {e}")
            raise ShopifyAPIUnavailable("Network error contacting Shopify") from e

        if response.status_code >= 400:
            logger.error(f"Shopify GraphQL HTTP {response.status_code}: {truncate(response.text)}")
            raise ShopifyAPIError(
                "Shopify GraphQL error", upstream_status=response.status_code, details=response.text
            )

        try:
            body = response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON from Shopify: {e}")
            raise ShopifyAPIError(
                "Invalid JSON from Shopify", upstream_status=response.status_code, details=response.text
            ) from e

        if body.get("errors"):
            logger.error(f"Shopify GraphQL errors: {body['errors']}")
            raise ShopifyAPIError(
                "Shopify GraphQL error", upstream_status=response.status_code, details=body["errors"]
            )

        return body.get("data") or {}

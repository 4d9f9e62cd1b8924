"""Shopify Admin API adapters."""

from infrastructure.shopify.client import (
    ShopifyAdminClient,
    ShopifyAPIError,
    ShopifyAPITimeout,
    ShopifyAPIUnavailable,
    ShopifyClientError,
    ShopifyUserError,
)
from infrastructure.shopify.customer_store import ShopifyCustomerStore

__all__ = [
    "ShopifyAdminClient",
    "ShopifyAPIError",
    "ShopifyAPITimeout",
    "ShopifyAPIUnavailable",
    "ShopifyClientError",
    "ShopifyCustomerStore",
    "ShopifyUserError",
]

"""
Infrastructure Layer for the PJiFitness Coach API.

This package contains concrete implementations of the application ports:
- shopify/: Admin GraphQL client and customer metafield store
- sheets/: Google Sheets row access
- usda_client: FoodData Central lookups
"""

from infrastructure.sheets import GoogleSheetTable
from infrastructure.shopify import ShopifyAdminClient, ShopifyCustomerStore
from infrastructure.usda_client import USDAFoodClient

__all__ = [
    "GoogleSheetTable",
    "ShopifyAdminClient",
    "ShopifyCustomerStore",
    "USDAFoodClient",
]

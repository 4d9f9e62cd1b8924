"""
Shopify implementation of the CustomerStore port.

Metafields live in the "custom" namespace. Reads alias each requested key so
a single query returns all of them.
"""

import logging
import re
from typing import Any, Dict, List, Optional, Sequence

from application.ports import METAFIELD_NAMESPACE
from infrastructure.shopify.client import ShopifyAdminClient, ShopifyUserError

logger = logging.getLogger(__name__)

_ALIAS_SAFE = re.compile(r"^[a-z_][a-z0-9_]*$")

METAFIELDS_SET_MUTATION = """
mutation MetafieldsSet($metafields: [MetafieldsSetInput!]!) {
  metafieldsSet(metafields: $metafields) {
    metafields { id key namespace type }
    userErrors { field message }
  }
}
"""

CUSTOMER_BY_EMAIL_QUERY = """
query CustomerByEmail($query: String!) {
  customers(first: 1, query: $query) {
    edges { node { id email } }
  }
}
"""

CUSTOMER_UPDATE_MUTATION = """
mutation UpdateCustomerMetafields($input: CustomerInput!) {
  customerUpdate(input: $input) {
    customer { id }
    userErrors { field message }
  }
}
"""

DAILY_LOG_METAOBJECTS_QUERY = """
query DailyLogs($type: String!, $first: Int!, $query: String!) {
  metaobjects(type: $type, first: $first, query: $query) {
    edges {
      node {
        id
        displayName
        fields { key value }
      }
    }
  }
}
"""

SHOP_METAFIELD_QUERY = """
query ShopMetafield($namespace: String!, $key: String!) {
  shop {
    metafield(namespace: $namespace, key: $key) { value }
  }
}
"""

DAILY_LOG_TYPE = "daily_log"
DAILY_LOG_PAGE_SIZE = 200


def build_customer_metafields_query(keys: Sequence[str]) -> str:
    """Customer query with one aliased metafield selection per key."""
    selections = []
    for key in keys:
        if not _ALIAS_SAFE.match(key):
            raise ValueError(f"Unsupported metafield key: {key!r}")
        selections.append(
            f'    {key}: metafield(namespace: "{METAFIELD_NAMESPACE}", key: "{key}") {{ value }}'
        )
    return (
        "query CustomerMetafields($id: ID!) {\n"
        "  customer(id: $id) {\n"
        "    id\n"
        + "\n".join(selections)
        + "\n  }\n}\n"
    )


class ShopifyCustomerStore:
    """CustomerStore backed by the Shopify Admin GraphQL API."""

    def __init__(self, client: ShopifyAdminClient):
        self._client = client

    async def get_customer_metafields(
        self,
        customer_gid: str,
        keys: Sequence[str],
    ) -> Optional[Dict[str, Optional[str]]]:
        data = await self._client.execute(
            build_customer_metafields_query(keys), {"id": customer_gid}
        )
        customer = data.get("customer")
        if customer is None:
            return None
        return {key: (customer.get(key) or {}).get("value") for key in keys}

    async def set_customer_metafield(
        self,
        customer_gid: str,
        key: str,
        value: str,
        type_: str = "json",
    ) -> None:
        data = await self._client.execute(
            METAFIELDS_SET_MUTATION,
            {
                "metafields": [
                    {
                        "ownerId": customer_gid,
                        "namespace": METAFIELD_NAMESPACE,
                        "key": key,
                        "type": type_,
                        "value": value,
                    }
                ]
            },
        )
        user_errors = (data.get("metafieldsSet") or {}).get("userErrors") or []
        if user_errors:
            logger.error(f"metafieldsSet userErrors for {key}: {user_errors}")
            raise ShopifyUserError(f"Failed to save {key}", user_errors)

    async def find_customer_id_by_email(self, email: str) -> Optional[str]:
        data = await self._client.execute(CUSTOMER_BY_EMAIL_QUERY, {"query": f"email:{email}"})
        edges = (data.get("customers") or {}).get("edges") or []
        if not edges:
            return None
        return (edges[0].get("node") or {}).get("id")

    async def update_customer_metafields(
        self,
        customer_gid: str,
        metafields: List[Dict[str, Any]],
    ) -> None:
        data = await self._client.execute(
            CUSTOMER_UPDATE_MUTATION,
            {"input": {"id": customer_gid, "metafields": metafields}},
        )
        user_errors = (data.get("customerUpdate") or {}).get("userErrors") or []
        if user_errors:
            logger.error(f"customerUpdate userErrors: {user_errors}")
            raise ShopifyUserError("Shopify userErrors", user_errors)

    async def list_daily_log_metaobjects(self, email: str) -> List[Dict[str, Any]]:
        data = await self._client.execute(
            DAILY_LOG_METAOBJECTS_QUERY,
            {
                "type": DAILY_LOG_TYPE,
                "first": DAILY_LOG_PAGE_SIZE,
                "query": f"customer_id:{email}",
            },
        )
        edges = (data.get("metaobjects") or {}).get("edges") or []
        return [edge["node"] for edge in edges if edge.get("node")]

    async def get_shop_metafield(self, key: str) -> Optional[str]:
        data = await self._client.execute(
            SHOP_METAFIELD_QUERY, {"namespace": METAFIELD_NAMESPACE, "key": key}
        )
        return (((data.get("shop") or {}).get("metafield")) or {}).get("value")

"""
Customer Data Store Interface (Port).

Key/value metafields scoped to a customer (or the shop), plus the few
customer lookups the coaching flows need. Values are opaque strings; callers
do their own JSON encoding.
"""

from typing import Any, Dict, List, Optional, Protocol, Sequence

METAFIELD_NAMESPACE = "custom"


class CustomerStore(Protocol):
    """Abstract interface for customer metafield persistence."""

    async def get_customer_metafields(
        self,
        customer_gid: str,
        keys: Sequence[str],
    ) -> Optional[Dict[str, Optional[str]]]:
        """
        Read metafield values for a customer.

        Returns:
            {key: value or None} for every requested key, or None when the
            customer does not exist
        """
        ...

    async def set_customer_metafield(
        self,
        customer_gid: str,
        key: str,
        value: str,
        type_: str = "json",
    ) -> None:
        """Write one metafield on a customer."""
        ...

    async def find_customer_id_by_email(self, email: str) -> Optional[str]:
        """Customer GID for an email address, or None."""
        ...

    async def update_customer_metafields(
        self,
        customer_gid: str,
        metafields: List[Dict[str, Any]],
    ) -> None:
        """Write several typed metafields in one customer update."""
        ...

    async def list_daily_log_metaobjects(self, email: str) -> List[Dict[str, Any]]:
        """daily_log metaobject nodes whose customer_id field matches email."""
        ...

    async def get_shop_metafield(self, key: str) -> Optional[str]:
        """Read a shop-level metafield value."""
        ...

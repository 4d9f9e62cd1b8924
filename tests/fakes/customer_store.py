"""
Fake Customer Store for testing.

In-memory implementation of the CustomerStore port: customers are keyed by
GID, each holding a flat {key: value} metafield map.
"""

import copy
from typing import Any, Dict, List, Optional, Sequence


class FakeCustomerStore:
    """
    In-memory fake implementation of CustomerStore for testing.

    Usage:
        store = FakeCustomerStore()
        store.seed_customer("gid://shopify/Customer/1", email="a@b.com",
                            metafields={"coach_plan": '{"plan_title": "x"}'})
    """

    def __init__(self):
        self._customers: Dict[str, Dict[str, Optional[str]]] = {}
        self._emails: Dict[str, str] = {}
        self._metaobjects: List[Dict[str, Any]] = []
        self._shop: Dict[str, str] = {}
        self.writes: List[Dict[str, Any]] = []
        self.fail_with: Optional[Exception] = None

    def reset(self) -> None:
        """Clear all stored data and recorded writes."""
        self._customers.clear()
        self._emails.clear()
        self._metaobjects.clear()
        self._shop.clear()
        self.writes.clear()
        self.fail_with = None

    def seed_customer(
        self,
        customer_gid: str,
        *,
        email: Optional[str] = None,
        metafields: Optional[Dict[str, Optional[str]]] = None,
    ) -> None:
        self._customers[customer_gid] = dict(metafields or {})
        if email:
            self._emails[email.lower()] = customer_gid

    def seed_metaobjects(self, nodes: List[Dict[str, Any]]) -> None:
        """Seed daily_log metaobject nodes (id, displayName, fields)."""
        self._metaobjects.extend(copy.deepcopy(nodes))

    def seed_shop_metafield(self, key: str, value: str) -> None:
        self._shop[key] = value

    def metafield(self, customer_gid: str, key: str) -> Optional[str]:
        """Current value of a customer metafield (test helper)."""
        return self._customers.get(customer_gid, {}).get(key)

    def _check_failure(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    # =========================================================================
    # CustomerStore Protocol Methods
    # =========================================================================

    async def get_customer_metafields(
        self,
        customer_gid: str,
        keys: Sequence[str],
    ) -> Optional[Dict[str, Optional[str]]]:
        self._check_failure()
        customer = self._customers.get(customer_gid)
        if customer is None:
            return None
        return {key: customer.get(key) for key in keys}

    async def set_customer_metafield(
        self,
        customer_gid: str,
        key: str,
        value: str,
        type_: str = "json",
    ) -> None:
        self._check_failure()
        self._customers.setdefault(customer_gid, {})[key] = value
        self.writes.append({"customer_gid": customer_gid, "key": key, "value": value, "type": type_})

    async def find_customer_id_by_email(self, email: str) -> Optional[str]:
        self._check_failure()
        return self._emails.get(email.lower())

    async def update_customer_metafields(
        self,
        customer_gid: str,
        metafields: List[Dict[str, Any]],
    ) -> None:
        self._check_failure()
        customer = self._customers.setdefault(customer_gid, {})
        for metafield in metafields:
            customer[metafield["key"]] = metafield["value"]
            self.writes.append({"customer_gid": customer_gid, **metafield})

    async def list_daily_log_metaobjects(self, email: str) -> List[Dict[str, Any]]:
        self._check_failure()
        matches = []
        for node in self._metaobjects:
            fields = {f["key"]: f["value"] for f in node.get("fields", [])}
            if fields.get("customer_id") == email:
                matches.append(copy.deepcopy(node))
        return matches

    async def get_shop_metafield(self, key: str) -> Optional[str]:
        self._check_failure()
        return self._shop.get(key)

"""
HTTP client for USDA FoodData Central.

A failed lookup is not an error for the caller: the item simply resolves as
unknown. Failures are logged and reported as empty results.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)

FDC_BASE_URL = "https://api.nal.usda.gov/fdc/v1"


class USDAFoodClient:
    """FoodLookup implementation for FoodData Central."""

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = FDC_BASE_URL,
        timeout: float = 10.0,
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    @property
    def enabled(self) -> bool:
        return bool(self._api_key)

    async def _get(self, path: str, params: Dict[str, Any]) -> Optional[Any]:
        url = f"{self._base_url}{path}"
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(url, params={**params, "api_key": self._api_key})
        except (httpx.ConnectError, httpx.TimeoutException) as e:
            logger.warning(f"FoodData Central unavailable for {path}: {e}")
            return None

        if response.status_code != 200:
            logger.warning(f"FoodData Central {path} returned {response.status_code}")
            return None
        try:
            return response.json()
        except ValueError:
            logger.warning(f"FoodData Central {path} returned invalid JSON")
            return None

    async def search_foods(self, query: str, page_size: int = 15) -> List[Dict[str, Any]]:
        """
        Search foods by text.

        Args:
            query: Search text
            page_size: Maximum hits

        Returns:
            Search hits, or [] when disabled or the call fails
        """
        if not self.enabled:
            return []
        data = await self._get("/foods/search", {"query": query, "pageSize": str(page_size)})
        foods = (data or {}).get("foods") if isinstance(data, dict) else None
        return foods if isinstance(foods, list) else []

    async def get_food(self, fdc_id: int) -> Optional[Dict[str, Any]]:
        if not self.enabled:
            return None
        data = await self._get(f"/food/{fdc_id}", {})
        return data if isinstance(data, dict) else None

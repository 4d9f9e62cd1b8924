"""
Food Database Interface (Port).

Search and detail lookups against a nutrient database (FoodData Central).
"""

from typing import Any, Dict, List, Optional, Protocol


class FoodLookup(Protocol):
    """Abstract interface for nutrient database lookups."""

    @property
    def enabled(self) -> bool:
        """False when the lookup has no credentials and should be skipped."""
        ...

    async def search_foods(self, query: str, page_size: int = 15) -> List[Dict[str, Any]]:
        """Search hits (description, dataType, brandName, fdcId)."""
        ...

    async def get_food(self, fdc_id: int) -> Optional[Dict[str, Any]]:
        """Detail record with foodNutrients, or None on failure."""
        ...

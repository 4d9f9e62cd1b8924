"""
Estimate Nutrition Use Case.

Meal text is parsed into items and each item is resolved in order: the
customer's saved foods, the shop's global foods, FoodData Central, and
finally an unknown entry that asks the user for the serving.
"""
import logging
from typing import Any, Dict, List, Optional

from application.exceptions import BadRequestError
from application.ports import CustomerStore, FoodLookup
from application.use_cases.plan_state import parse_json_value
from domain.logs.daily_logs import normalize_owner_id
from domain.nutrition.parser import index_food_memory, parse_meal_text
from domain.nutrition.resolver import (
    build_search_query,
    clarification_for,
    resolve_from_memory,
    select_best_food,
    sum_totals,
    unknown_item,
    usda_item,
)

logger = logging.getLogger(__name__)

USER_FOODS_KEY = "user_foods"
GLOBAL_FOODS_KEY = "global_foods"
SEARCH_PAGE_SIZE = 15


class EstimateNutritionUseCase:
    """Resolve calories and macros for free-text meals."""

    def __init__(self, store: CustomerStore, foods: FoodLookup):
        self._store = store
        self._foods = foods

    async def _user_foods(self, customer_id: Any) -> Dict[str, Dict[str, Any]]:
        customer_gid = normalize_owner_id(customer_id)
        if not customer_gid:
            return {}
        values = await self._store.get_customer_metafields(customer_gid, [USER_FOODS_KEY]) or {}
        return index_food_memory(parse_json_value(values.get(USER_FOODS_KEY)))

    async def _global_foods(self) -> Dict[str, Dict[str, Any]]:
        return index_food_memory(parse_json_value(await self._store.get_shop_metafield(GLOBAL_FOODS_KEY)))

    async def _usda_lookup(self, item: Dict[str, Any], debug: bool) -> Optional[Dict[str, Any]]:
        if not self._foods.enabled:
            if debug:
                return {
                    **unknown_item(item),
                    "source": "usda",
                    "confidence": 0.0,
                    "question": None,
                    "_debug": {"has_usda_key": False},
                }
            return None

        query = build_search_query(item)
        hits = await self._foods.search_foods(query, page_size=SEARCH_PAGE_SIZE)
        best = select_best_food(hits, query, item.get("name", ""))
        if best is None or best.get("fdcId") is None:
            return None

        detail = await self._foods.get_food(best["fdcId"])
        if detail is None:
            return None
        resolved = usda_item(item, detail, best)
        if resolved is not None and debug:
            resolved["_debug"] = {"query": query, "fdc_id": best["fdcId"], "data_type": best.get("dataType")}
        return resolved

    async def execute(self, text: Any, customer_id: Any = None, debug: bool = False) -> Dict[str, Any]:
        """
        Args:
            text: Meal description
            customer_id: Optional customer whose saved foods take priority
            debug: Attach lookup diagnostics to USDA-resolved items

        Raises:
            BadRequestError: text missing
        """
        if not text or not str(text).strip():
            raise BadRequestError("Missing text")

        user_foods = await self._user_foods(customer_id)
        global_foods = await self._global_foods()

        items: List[Dict[str, Any]] = []
        needs_clarification: List[Dict[str, str]] = []
        for item in parse_meal_text(str(text)):
            resolved = (
                resolve_from_memory(item, user_foods, global_foods)
                or await self._usda_lookup(item, debug)
                or unknown_item(item)
            )
            items.append(resolved)
            question = clarification_for(item, resolved)
            if question:
                needs_clarification.append(question)

        logger.info(f"Resolved {len(items)} food items ({len(needs_clarification)} need clarification)")
        return {
            "items": items,
            "totals": sum_totals(items),
            "needs_clarification": needs_clarification,
            "debug_counts": {
                "user_foods_count": len(user_foods),
                "global_foods_count": len(global_foods),
            },
        }

"""
Unit tests for domain/nutrition (meal text parsing and resolution rules).
"""

import pytest

from domain.nutrition.parser import (
    clean_name,
    index_food_memory,
    normalize_food_key,
    parse_meal_text,
    split_meal_text,
)
from domain.nutrition.resolver import (
    build_search_query,
    clarification_for,
    item_grams,
    nutrient_amount,
    resolve_from_memory,
    select_best_food,
    sum_totals,
    unknown_item,
    usda_item,
)

CHICKEN_DETAIL = {
    "description": "Chicken, breast, raw",
    "foodNutrients": [
        {"nutrient": {"id": 1008}, "amount": 120},
        {"nutrient": {"id": 1003}, "amount": 22.5},
        {"nutrient": {"id": 1005}, "amount": 0},
        {"nutrient": {"id": 1004}, "amount": 2.6},
    ],
}


@pytest.mark.unit
class TestParser:
    def test_mixed_separators(self):
        assert parse_meal_text("2 eggs, 1 cup rice and 5oz chicken") == [
            {"name": "eggs", "qty": 2, "unit": ""},
            {"name": "rice", "qty": 1, "unit": "cup"},
            {"name": "chicken", "qty": 5, "unit": "oz"},
        ]

    def test_unit_aliases(self):
        assert parse_meal_text("2 slices bread & 1 tbsp peanut butter") == [
            {"name": "bread", "qty": 2, "unit": "slice"},
            {"name": "peanut butter", "qty": 1, "unit": "tbsp"},
        ]

    def test_decimal_quantity(self):
        assert parse_meal_text("1.5 cups oats") == [{"name": "oats", "qty": 1.5, "unit": "cup"}]

    def test_zero_quantity_becomes_one(self):
        assert parse_meal_text("0 eggs")[0]["qty"] == 1

    def test_no_quantity(self):
        assert parse_meal_text("chicken with rice") == [{"name": "chicken rice", "qty": 1, "unit": ""}]

    def test_single_letter_tokens_dropped(self):
        assert parse_meal_text("a banana") == [{"name": "banana", "qty": 1, "unit": ""}]

    def test_nameless_items_dropped(self):
        assert parse_meal_text("5 g") == []
        assert parse_meal_text("") == []

    def test_split_meal_text(self):
        assert split_meal_text("chicken + rice\nbeans & corn") == ["chicken", "rice", "beans", "corn"]

    def test_clean_name(self):
        assert clean_name("Mom's lasagna") == "Mom lasagna"
        assert clean_name("toast w/ butter") == "toast butter"

    def test_normalize_food_key(self):
        assert normalize_food_key("Chicken Breast (Grilled)!") == "chicken breast grilled"


@pytest.mark.unit
class TestFoodMemory:
    def test_index_list(self):
        indexed = index_food_memory([{"name": "Chicken Breast"}, {"label": "Oats"}, "junk", {}])
        assert set(indexed) == {"chicken breast", "oats"}

    def test_index_mapping_prefers_entry_name(self):
        indexed = index_food_memory({"yog": {"name": "Greek Yogurt"}, "Protein Bar": {"calories": 200}})
        assert set(indexed) == {"greek yogurt", "protein bar"}

    def test_index_other(self):
        assert index_food_memory("nope") == {}

    def test_user_food_scaled_by_serving(self):
        user_foods = {
            "chicken breast": {
                "calories": 165, "protein": 31, "carbs": 0, "fat": 3.6,
                "serving_qty": 100, "serving_unit": "g",
            }
        }
        item = {"name": "chicken breast", "qty": 200, "unit": "g"}
        resolved = resolve_from_memory(item, user_foods, {})
        assert resolved["source"] == "user"
        assert resolved["confidence"] == 0.95
        assert resolved["calories"] == 330.0
        assert resolved["protein"] == 62.0
        assert resolved["fat"] == 7.2
        assert resolved["matched_to"] == "chicken breast"

    def test_unit_mismatch_uses_raw_quantity(self):
        global_foods = {"egg": {"label": "Large egg", "calories": 70, "serving_unit": "piece"}}
        resolved = resolve_from_memory({"name": "egg", "qty": 2, "unit": ""}, {}, global_foods)
        assert resolved["source"] == "global"
        assert resolved["confidence"] == 0.9
        assert resolved["calories"] == 140.0
        assert resolved["matched_to"] == "Large egg"

    def test_user_beats_global(self):
        entry = {"calories": 10}
        resolved = resolve_from_memory({"name": "gum", "qty": 1, "unit": ""}, {"gum": entry}, {"gum": entry})
        assert resolved["source"] == "user"

    def test_not_found(self):
        assert resolve_from_memory({"name": "kale", "qty": 1, "unit": ""}, {}, {}) is None

    def test_unknown_item(self):
        resolved = unknown_item({"name": "mystery stew", "qty": 1, "unit": ""})
        assert resolved["source"] == "unknown"
        assert resolved["confidence"] == 0.2
        assert resolved["calories"] is None
        assert "mystery stew" in resolved["question"]


@pytest.mark.unit
class TestFoodDataCentralRules:
    @pytest.mark.parametrize(
        "item,expected",
        [
            ({"name": "93% ground beef", "unit": "oz"}, "93% lean ground beef"),
            ({"name": "rice", "unit": "cup"}, "rice, white, cooked"),
            ({"name": "bread", "unit": "slice"}, "bread, white"),
            ({"name": "rice", "unit": "g"}, "rice"),
            ({"name": "salmon", "unit": ""}, "salmon"),
        ],
    )
    def test_build_search_query(self, item, expected):
        assert build_search_query(item) == expected

    def test_whole_food_beats_branded_and_processed(self):
        hits = [
            {"fdcId": 1, "description": "Chicken chips", "dataType": "Branded"},
            {"fdcId": 2, "description": "Chicken, breast, raw", "dataType": "Foundation"},
            {"fdcId": 3, "description": "Chicken breast, roasted", "dataType": "SR Legacy"},
        ]
        assert select_best_food(hits, "chicken breast", "chicken breast")["fdcId"] == 2

    def test_rice_prefers_cooked_white(self):
        hits = [
            {"fdcId": 1, "description": "Rice, fried, restaurant", "dataType": "Survey (FNDDS)"},
            {"fdcId": 2, "description": "Rice, white, cooked", "dataType": "Survey (FNDDS)"},
        ]
        assert select_best_food(hits, "rice, white, cooked", "rice")["fdcId"] == 2

    def test_tie_keeps_first(self):
        hits = [{"fdcId": 1, "description": "Kale"}, {"fdcId": 2, "description": "Kale"}]
        assert select_best_food(hits, "kale", "kale")["fdcId"] == 1

    def test_no_hits(self):
        assert select_best_food([], "kale", "kale") is None

    def test_nutrient_amount(self):
        assert nutrient_amount(CHICKEN_DETAIL, 1003) == 22.5
        assert nutrient_amount(CHICKEN_DETAIL, 9999) is None

    @pytest.mark.parametrize(
        "qty,unit,name,expected",
        [
            (200, "g", "chicken", 200.0),
            (1, "kg", "chicken", 1000.0),
            (2, "slice", "bread", 50.0),
            (1, "cup", "rice", 158.0),
            (1, "cup", "oats", None),
            (0, "g", "chicken", None),
        ],
    )
    def test_item_grams(self, qty, unit, name, expected):
        assert item_grams(qty, unit, name) == expected

    def test_usda_item_weighed(self):
        item = {"name": "chicken breast", "qty": 200, "unit": "g"}
        resolved = usda_item(item, CHICKEN_DETAIL, {"description": "hit"})
        assert resolved["source"] == "usda"
        assert resolved["confidence"] == 0.8
        assert resolved["calories"] == 240.0
        assert resolved["protein"] == 45.0
        assert resolved["fat"] == 5.2
        assert resolved["matched_to"] == "Chicken, breast, raw"

    def test_usda_item_unweighed_count(self):
        resolved = usda_item({"name": "chicken breast", "qty": 2, "unit": ""}, CHICKEN_DETAIL, {})
        assert resolved["confidence"] == 0.7
        assert resolved["calories"] == 240.0

    def test_usda_item_volume_asks_for_weight(self):
        resolved = usda_item({"name": "oats", "qty": 1, "unit": "cup"}, CHICKEN_DETAIL, {})
        assert resolved["confidence"] == 0.55
        assert "grams or ounces" in resolved["question"]

    def test_usda_item_known_household_measures(self):
        bread = usda_item({"name": "bread", "qty": 2, "unit": "slice"}, CHICKEN_DETAIL, {})
        rice = usda_item({"name": "rice", "qty": 1, "unit": "cup"}, CHICKEN_DETAIL, {})
        assert bread["confidence"] == 0.65
        assert rice["confidence"] == 0.7
        assert "question" not in rice

    def test_usda_item_without_energy(self):
        detail = {"foodNutrients": [{"nutrient": {"id": 1003}, "amount": 5}]}
        assert usda_item({"name": "x", "qty": 1, "unit": ""}, detail, {}) is None


@pytest.mark.unit
class TestSummary:
    def test_confident_item_needs_no_question(self):
        assert clarification_for({"name": "rice"}, {"confidence": 0.7}) is None

    def test_item_question_used(self):
        question = clarification_for({"name": "oats"}, {"confidence": 0.55, "question": "Grams?"})
        assert question == {"name": "oats", "question": "Grams?"}

    def test_generic_question(self):
        question = clarification_for({"name": "stew"}, {"confidence": 0.3})
        assert "stew" in question["question"]

    def test_sum_totals_ignores_unknowns(self):
        totals = sum_totals([
            {"calories": 240.0, "protein": 45.0, "carbs": 0.0, "fat": 5.2},
            {"calories": None, "protein": None, "carbs": None, "fat": None},
            {"calories": 70.0, "protein": 6.0, "carbs": 0.5, "fat": 5.0},
        ])
        assert totals == {"calories": 310.0, "protein": 51.0, "carbs": 0.5, "fat": 10.2}

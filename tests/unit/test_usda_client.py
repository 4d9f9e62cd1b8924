"""Unit tests for infrastructure/usda_client.py"""

import httpx
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from infrastructure.usda_client import USDAFoodClient


def _wire(mock_client_class, status_code=200, body=None, side_effect=None) -> MagicMock:
    mock_client = MagicMock()
    mock_client_class.return_value.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client_class.return_value.__aexit__ = AsyncMock(return_value=False)
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = body
    mock_client.get = AsyncMock(return_value=response, side_effect=side_effect)
    return mock_client


@pytest.mark.unit
class TestUSDAFoodClient:
    def test_enabled(self):
        assert USDAFoodClient("key").enabled is True
        assert USDAFoodClient(None).enabled is False

    @pytest.mark.asyncio
    @patch("infrastructure.usda_client.httpx.AsyncClient")
    async def test_disabled_skips_network(self, mock_client_class):
        client = USDAFoodClient(None)

        assert await client.search_foods("rice") == []
        assert await client.get_food(123) is None
        mock_client_class.assert_not_called()

    @pytest.mark.asyncio
    @patch("infrastructure.usda_client.httpx.AsyncClient")
    async def test_search_foods(self, mock_client_class):
        foods = [{"fdcId": 1, "description": "Rice, white, cooked"}]
        mock_client = _wire(mock_client_class, body={"foods": foods})

        hits = await USDAFoodClient("key").search_foods("rice, white, cooked")

        assert hits == foods
        url = mock_client.get.call_args.args[0]
        params = mock_client.get.call_args.kwargs["params"]
        assert url == "https://api.nal.usda.gov/fdc/v1/foods/search"
        assert params == {"query": "rice, white, cooked", "pageSize": "15", "api_key": "key"}

    @pytest.mark.asyncio
    @patch("infrastructure.usda_client.httpx.AsyncClient")
    async def test_search_foods_unexpected_body(self, mock_client_class):
        _wire(mock_client_class, body={"foods": "nope"})
        assert await USDAFoodClient("key").search_foods("rice") == []

    @pytest.mark.asyncio
    @patch("infrastructure.usda_client.httpx.AsyncClient")
    async def test_non_200_is_empty(self, mock_client_class):
        _wire(mock_client_class, status_code=429)
        assert await USDAFoodClient("key").search_foods("rice") == []

    @pytest.mark.asyncio
    @patch("infrastructure.usda_client.httpx.AsyncClient")
    async def test_network_failure_is_empty(self, mock_client_class, caplog):
        _wire(mock_client_class, side_effect=httpx.ConnectError("refused"))

        with caplog.at_level("WARNING"):
            assert await USDAFoodClient("key").get_food(99) is None

        assert "FoodData Central unavailable" in caplog.text

    @pytest.mark.asyncio
    @patch("infrastructure.usda_client.httpx.AsyncClient")
    async def test_get_food(self, mock_client_class):
        detail = {"fdcId": 99, "foodNutrients": []}
        mock_client = _wire(mock_client_class, body=detail)

        assert await USDAFoodClient("key", base_url="https://fdc.test/v1/").get_food(99) == detail
        assert mock_client.get.call_args.args[0] == "https://fdc.test/v1/food/99"

    @pytest.mark.asyncio
    @patch("infrastructure.usda_client.httpx.AsyncClient")
    async def test_invalid_json(self, mock_client_class):
        mock_client = _wire(mock_client_class)
        mock_client.get.return_value.json.side_effect = ValueError("bad")

        assert await USDAFoodClient("key").get_food(99) is None

"""Tests for the prices endpoint client.

Uses pytest-httpx to mock the prices API.
"""

import json

import httpx
import pytest

from folio.services.price_client import PriceClient

API_URL = "http://prices.test"

APPLE = {
    "symbol": "AAPL",
    "currentPrice": 150.0,
    "change": 5.0,
    "changePercent": 3.45,
    "lastUpdated": "2026-10-19T14:30:00+00:00",
}


@pytest.fixture
def client() -> PriceClient:
    return PriceClient(base_url=API_URL, timeout_sec=5.0)


class TestFetchAssetPrices:
    """Tests for PriceClient.fetch_asset_prices."""

    async def test_success(self, client, httpx_mock):
        httpx_mock.add_response(
            url=f"{API_URL}/api/prices",
            method="POST",
            json={"Apple": APPLE, "Mystery": None},
        )

        prices = await client.fetch_asset_prices(["Apple", "Mystery"])

        assert prices["Apple"].symbol == "AAPL"
        assert prices["Apple"].current_price == 150.0
        assert prices["Apple"].last_updated.year == 2026
        assert prices["Mystery"] is None

    async def test_sends_asset_names(self, client, httpx_mock):
        httpx_mock.add_response(url=f"{API_URL}/api/prices", method="POST", json={})

        await client.fetch_asset_prices(["Apple", "Gold"])

        request = httpx_mock.get_request()
        assert json.loads(request.content) == {"assetNames": ["Apple", "Gold"]}

    async def test_names_missing_from_response_are_none(self, client, httpx_mock):
        httpx_mock.add_response(url=f"{API_URL}/api/prices", method="POST", json={"Apple": APPLE})

        prices = await client.fetch_asset_prices(["Apple", "Tesla"])

        assert prices["Tesla"] is None

    async def test_server_error_degrades_to_all_none(self, client, httpx_mock):
        httpx_mock.add_response(
            url=f"{API_URL}/api/prices",
            method="POST",
            status_code=500,
            json={"error": "Failed to fetch prices"},
        )

        prices = await client.fetch_asset_prices(["Apple", "Gold"])

        assert prices == {"Apple": None, "Gold": None}

    async def test_transport_failure_degrades_to_all_none(self, client, httpx_mock):
        httpx_mock.add_exception(httpx.ConnectError("refused"), url=f"{API_URL}/api/prices")

        prices = await client.fetch_asset_prices(["Apple", "Gold"])

        assert prices == {"Apple": None, "Gold": None}

    async def test_malformed_body_degrades_to_all_none(self, client, httpx_mock):
        httpx_mock.add_response(url=f"{API_URL}/api/prices", method="POST", text="oops")

        prices = await client.fetch_asset_prices(["Apple"])

        assert prices == {"Apple": None}

    async def test_fetch_asset_price(self, client, httpx_mock):
        httpx_mock.add_response(url=f"{API_URL}/api/prices", method="POST", json={"Apple": APPLE})

        quote = await client.fetch_asset_price("Apple")

        assert quote.change == 5.0

    async def test_one_malformed_entry_does_not_null_the_others(self, client, httpx_mock):
        httpx_mock.add_response(
            url=f"{API_URL}/api/prices",
            method="POST",
            json={
                "Apple": APPLE,
                "Gold": {"symbol": "GC=F", "currentPrice": "lots"},
                "Tesla": ["not", "a", "quote"],
            },
        )

        prices = await client.fetch_asset_prices(["Apple", "Gold", "Tesla"])

        assert prices["Apple"].symbol == "AAPL"
        assert prices["Gold"] is None
        assert prices["Tesla"] is None

    async def test_non_object_body_degrades_to_all_none(self, client, httpx_mock):
        httpx_mock.add_response(url=f"{API_URL}/api/prices", method="POST", json=[APPLE])

        prices = await client.fetch_asset_prices(["Apple"])

        assert prices == {"Apple": None}

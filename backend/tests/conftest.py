"""Shared fixtures for the test suite."""

import asyncio
from typing import Any, Optional

import httpx
import pytest

from folio.models.quote import Quote
from folio.services.market_data.base import QuoteProvider, build_quote

CHART_URL = "https://query1.finance.yahoo.com/v8/finance/chart"


def chart_payload(
    symbol: str = "AAPL",
    regular_market_price: Optional[float] = 150.0,
    previous_close: Optional[float] = 145.0,
) -> dict[str, Any]:
    """Minimal Yahoo v8 chart response body."""
    meta: dict[str, Any] = {"symbol": symbol, "currency": "USD"}
    if regular_market_price is not None:
        meta["regularMarketPrice"] = regular_market_price
    if previous_close is not None:
        meta["previousClose"] = previous_close
    return {"chart": {"result": [{"meta": meta, "timestamp": [], "indicators": {}}], "error": None}}


class FakeQuoteProvider(QuoteProvider):
    """In-memory provider keyed by symbol.

    Prices map symbol -> (current, previous_close). Symbols in `slow` sleep
    before answering; symbols in `failing` raise.
    """

    def __init__(
        self,
        prices: dict[str, tuple[float, float]] | None = None,
        slow: dict[str, float] | None = None,
        failing: set[str] | None = None,
    ):
        self.prices = prices or {}
        self.slow = slow or {}
        self.failing = failing or set()
        self.requested: list[str] = []

    async def fetch_quote(self, client: httpx.AsyncClient, symbol: str) -> Optional[Quote]:
        self.requested.append(symbol)
        if symbol in self.slow:
            await asyncio.sleep(self.slow[symbol])
        if symbol in self.failing:
            raise RuntimeError(f"provider blew up for {symbol}")
        if symbol not in self.prices:
            return None
        current, previous = self.prices[symbol]
        return build_quote(symbol, current, previous)


@pytest.fixture
def fake_provider() -> FakeQuoteProvider:
    """Provider with a few well-known symbols."""
    return FakeQuoteProvider(
        prices={
            "AAPL": (150.0, 145.0),
            "BTC-USD": (60000.0, 61000.0),
            "GC=F": (2000.0, 1990.0),
        }
    )

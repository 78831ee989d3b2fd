"""
Price Service.

Resolves asset names to symbols and fetches their quotes concurrently.
Every requested name gets an entry; a name with no usable quote maps to None.
"""
import asyncio
import logging
from typing import Dict, Iterable, Optional

import httpx

from folio.core.config import settings
from folio.models.quote import Quote
from folio.services.market_data import get_quote_provider
from folio.services.market_data.base import QuoteProvider
from folio.services.symbol_resolver import resolve_symbol

logger = logging.getLogger(__name__)


class PriceService:
    """Batch quote lookup for free-form asset names."""

    def __init__(
        self,
        provider: QuoteProvider | None = None,
        request_timeout_sec: float | None = None,
        fetch_timeout_sec: float | None = None,
        max_concurrency: int | None = None,
    ) -> None:
        self.provider = provider or get_quote_provider()
        self.request_timeout_sec = (
            settings.QUOTE_REQUEST_TIMEOUT_SEC
            if request_timeout_sec is None
            else request_timeout_sec
        )
        self.fetch_timeout_sec = (
            settings.QUOTE_FETCH_TIMEOUT_SEC if fetch_timeout_sec is None else fetch_timeout_sec
        )
        self.max_concurrency = (
            settings.QUOTE_MAX_CONCURRENCY if max_concurrency is None else max_concurrency
        )

    async def fetch_all(self, asset_names: Iterable[str]) -> Dict[str, Optional[Quote]]:
        """
        Fetch quotes for all asset names.

        Duplicate names collapse to one entry. Fetches run concurrently and
        the call returns once every fetch has settled. Never raises: if the
        batch itself fails, every name maps to None.
        """
        names = list(dict.fromkeys(asset_names))
        if not names:
            return {}

        try:
            return await self._fetch_all(names)
        except Exception:
            logger.exception("Batch price fetch failed for %d assets", len(names))
            return {name: None for name in names}

    async def fetch_one(self, asset_name: str) -> Optional[Quote]:
        """Fetch the quote for a single asset name."""
        prices = await self.fetch_all([asset_name])
        return prices.get(asset_name)

    async def _fetch_all(self, names: list[str]) -> Dict[str, Optional[Quote]]:
        concurrency = max(self.max_concurrency or 1, 1)
        limits = httpx.Limits(max_connections=concurrency, max_keepalive_connections=concurrency)
        gate = asyncio.Semaphore(concurrency)

        async with httpx.AsyncClient(timeout=self.request_timeout_sec, limits=limits) as client:

            async def fetch_name(name: str) -> Optional[Quote]:
                async with gate:
                    symbol = resolve_symbol(name)
                    try:
                        return await asyncio.wait_for(
                            self.provider.fetch_quote(client, symbol),
                            timeout=self.fetch_timeout_sec,
                        )
                    except asyncio.TimeoutError:
                        logger.warning(
                            "Quote fetch for %s (%s) timed out after %.1fs",
                            name, symbol, self.fetch_timeout_sec,
                        )
                        return None

            results = await asyncio.gather(
                *[fetch_name(name) for name in names], return_exceptions=True
            )

        prices: Dict[str, Optional[Quote]] = {}
        for name, result in zip(names, results):
            if isinstance(result, BaseException):
                logger.warning("Quote fetch for %s failed: %s", name, result)
                prices[name] = None
            else:
                prices[name] = result

        priced = sum(1 for quote in prices.values() if quote is not None)
        logger.info("Fetched quotes for %d/%d assets", priced, len(names))
        return prices

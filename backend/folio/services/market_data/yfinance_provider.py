import asyncio
import logging
from typing import Optional

import httpx
import yfinance as yf

from folio.models.quote import Quote
from folio.services.market_data.base import QuoteProvider, build_quote

logger = logging.getLogger(__name__)


class YFinanceQuoteProvider(QuoteProvider):
    """
    yfinance-backed quote provider.

    yfinance manages its own HTTP session, so the batch client is unused.
    Lookups are blocking and run in a worker thread.
    """

    async def fetch_quote(self, client: httpx.AsyncClient, symbol: str) -> Optional[Quote]:
        try:
            return await asyncio.to_thread(self._fetch_quote_sync, symbol)
        except Exception as e:
            logger.warning(f"yfinance quote failed for {symbol}: {e}")
            return None

    def _fetch_quote_sync(self, symbol: str) -> Optional[Quote]:
        info = yf.Ticker(symbol).fast_info
        last_price = info.get("lastPrice")
        previous_close = info.get("previousClose")

        if previous_close is None:
            logger.warning(f"No previous close for {symbol} in yfinance response")
            return None

        return build_quote(symbol, last_price, previous_close)

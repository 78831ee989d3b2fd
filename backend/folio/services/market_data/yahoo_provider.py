import json
import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from folio.core.config import settings
from folio.models.quote import Quote
from folio.services.market_data.base import QuoteProvider, build_quote

logger = logging.getLogger(__name__)


class YahooChartProvider(QuoteProvider):
    """Quote provider using the Yahoo Finance v8 chart endpoint."""

    def __init__(
        self,
        base_url: str | None = None,
        user_agent: str | None = None,
    ) -> None:
        self.base_url = (settings.QUOTE_BASE_URL if base_url is None else base_url).rstrip("/")
        self.user_agent = settings.QUOTE_USER_AGENT if user_agent is None else user_agent

    @property
    def headers(self) -> dict[str, str]:
        # Yahoo rejects requests without a browser-like User-Agent
        return {
            "User-Agent": self.user_agent,
            "Accept": "application/json",
            "Accept-Language": "en-US,en;q=0.9",
            "Cache-Control": "no-cache",
            "Pragma": "no-cache",
        }

    async def fetch_quote(self, client: httpx.AsyncClient, symbol: str) -> Optional[Quote]:
        # Symbols may be free text; keep them to a single path segment
        url = f"{self.base_url}/{quote(symbol, safe='')}"
        try:
            resp = await client.get(url, headers=self.headers)
        except Exception as exc:
            logger.warning("Yahoo chart request failed for %s: %s", symbol, exc)
            return None

        if not resp.is_success:
            logger.warning(
                "Yahoo chart API error for %s: %s %s",
                symbol, resp.status_code, resp.reason_phrase,
            )
            return None

        data = self._safe_json(resp.text)
        if data is None:
            logger.warning("Invalid JSON from Yahoo chart API for %s", symbol)
            return None

        return self._parse_chart(data, symbol)

    def _parse_chart(self, data: Any, symbol: str) -> Optional[Quote]:
        chart = data.get("chart") if isinstance(data, dict) else None
        results = chart.get("result") if isinstance(chart, dict) else None
        if not isinstance(results, list) or not results or not isinstance(results[0], dict):
            logger.warning("Invalid response format for %s", symbol)
            return None

        meta = results[0].get("meta")
        if not isinstance(meta, dict):
            logger.warning("Missing meta data for %s", symbol)
            return None

        previous_close = meta.get("previousClose")
        current_price = meta.get("regularMarketPrice")
        if previous_close is None:
            # regularMarketPrice alone gives no change baseline
            logger.warning("Missing price data for %s", symbol)
            return None

        quote = build_quote(meta.get("symbol") or symbol, current_price, previous_close)
        if quote is None:
            logger.warning("Unusable price data for %s: previousClose=%r", symbol, previous_close)
        return quote

    def _safe_json(self, response_text: str) -> Any:
        try:
            return json.loads(response_text)
        except json.JSONDecodeError:
            return None

"""
Client for the batch prices endpoint.

Used by consumers of the API (dashboards, scripts). Any failure of the
request as a whole degrades to None for every requested asset.
"""
import logging
from typing import Dict, List, Optional

import httpx

from folio.core.config import settings
from folio.models.quote import Quote

logger = logging.getLogger(__name__)


class PriceClient:
    """HTTP client for POST /api/prices."""

    def __init__(self, base_url: str | None = None, timeout_sec: float | None = None) -> None:
        self.base_url = (settings.PRICE_API_BASE_URL if base_url is None else base_url).rstrip("/")
        self.timeout_sec = settings.PRICE_API_TIMEOUT_SEC if timeout_sec is None else timeout_sec

    async def fetch_asset_prices(self, asset_names: List[str]) -> Dict[str, Optional[Quote]]:
        """Fetch quotes for several assets in one request."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout_sec) as client:
                resp = await client.post(
                    f"{self.base_url}/api/prices",
                    json={"assetNames": asset_names},
                )
                resp.raise_for_status()
                payload = resp.json()
        except Exception as e:
            logger.error(f"Error fetching prices for {len(asset_names)} assets: {e}")
            return {name: None for name in asset_names}

        if not isinstance(payload, dict):
            logger.error(f"Unexpected prices payload: {type(payload).__name__}")
            return {name: None for name in asset_names}

        return {name: self._decode_quote(name, payload.get(name)) for name in asset_names}

    def _decode_quote(self, name: str, entry) -> Optional[Quote]:
        if not entry:
            return None
        try:
            return Quote.from_dict(entry)
        except (KeyError, TypeError, ValueError, OverflowError) as e:
            logger.warning(f"Malformed quote for {name}: {e}")
            return None

    async def fetch_asset_price(self, asset_name: str) -> Optional[Quote]:
        """Fetch the quote for a single asset."""
        prices = await self.fetch_asset_prices([asset_name])
        return prices.get(asset_name)

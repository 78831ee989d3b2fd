import math
from abc import ABC, abstractmethod
from typing import Optional

import httpx

from folio.models.quote import Quote


class QuoteProvider(ABC):
    """Abstract base class for quote providers."""

    @abstractmethod
    async def fetch_quote(self, client: httpx.AsyncClient, symbol: str) -> Optional[Quote]:
        """
        Fetch the current quote for a symbol.

        The client is owned by the caller and shared across one batch.
        Returns None when no quote is available; must not raise.
        """
        raise NotImplementedError


def build_quote(symbol: str, current_price, previous_close) -> Optional[Quote]:
    """
    Derive a Quote from a live price and the previous close.

    current_price falls back to previous_close when missing or zero.
    Returns None if previous_close is missing, zero or non-numeric.
    """
    try:
        previous = float(previous_close)
        current = float(current_price or previous_close)
    except (TypeError, ValueError, OverflowError):
        return None

    if not (math.isfinite(previous) and math.isfinite(current)) or previous == 0:
        return None

    change = current - previous
    return Quote(
        symbol=symbol,
        current_price=current,
        change=change,
        change_percent=(change / previous) * 100,
    )

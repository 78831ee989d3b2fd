from typing import Dict, Type
from folio.services.market_data.base import QuoteProvider
from folio.services.market_data.yahoo_provider import YahooChartProvider
from folio.services.market_data.yfinance_provider import YFinanceQuoteProvider
from folio.core.config import settings

PROVIDERS: Dict[str, Type[QuoteProvider]] = {
    "yahoo": YahooChartProvider,
    "yfinance": YFinanceQuoteProvider,
}


def get_quote_provider(name: str | None = None) -> QuoteProvider:
    """Factory to get provider instance."""
    name = name or settings.QUOTE_PROVIDER
    provider_class = PROVIDERS.get(name)
    if not provider_class:
        raise ValueError(f"Unknown quote provider: {name}")

    return provider_class()

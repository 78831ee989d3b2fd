"""
Symbol Resolver.

Maps free-form asset names ("Apple", "bitcoin", "Apple (AAPL)") to the
ticker symbols understood by the quote providers.
"""
import re
from types import MappingProxyType
from typing import Mapping

# Names are matched lower-cased and stripped.
SYMBOL_MAP: Mapping[str, str] = MappingProxyType({
    # Stocks
    "apple inc": "AAPL",
    "apple": "AAPL",
    "microsoft": "MSFT",
    "microsoft corporation": "MSFT",
    "google": "GOOGL",
    "alphabet": "GOOGL",
    "amazon": "AMZN",
    "tesla": "TSLA",
    "meta": "META",
    "facebook": "META",
    "netflix": "NFLX",
    "nvidia": "NVDA",
    "salesforce": "CRM",
    "adobe": "ADBE",

    # Crypto
    "bitcoin": "BTC-USD",
    "ethereum": "ETH-USD",
    "cardano": "ADA-USD",
    "solana": "SOL-USD",
    "dogecoin": "DOGE-USD",
    "polygon": "MATIC-USD",
    "chainlink": "LINK-USD",
    "polkadot": "DOT-USD",

    # ETFs
    "spy": "SPY",
    "qqq": "QQQ",
    "vti": "VTI",
    "voo": "VOO",
    "arkk": "ARKK",
    "gold etf": "GLD",
    "silver etf": "SLV",

    # Commodities (futures)
    "gold": "GC=F",
    "silver": "SI=F",
    "oil": "CL=F",
    "crude oil": "CL=F",
    "natural gas": "NG=F",
})

MAX_TICKER_LENGTH = 5
UNKNOWN_SYMBOL = "UNKNOWN"

_EMBEDDED_TICKER = re.compile(r"\(([A-Z]{1,5})\)")
_WHITESPACE = re.compile(r"\s+")


def resolve_symbol(asset_name: str) -> str:
    """
    Resolve an asset name to a ticker symbol.

    Never fails: unknown names fall back to the upper-cased name with
    whitespace removed, which may or may not be a real ticker.
    """
    # Already a ticker (short, all caps)
    if asset_name.strip() and len(asset_name) <= MAX_TICKER_LENGTH and asset_name == asset_name.upper():
        return asset_name

    mapped = SYMBOL_MAP.get(asset_name.strip().lower())
    if mapped:
        return mapped

    # "Apple (AAPL)" style
    match = _EMBEDDED_TICKER.search(asset_name)
    if match:
        return match.group(1)

    return _WHITESPACE.sub("", asset_name.upper()) or UNKNOWN_SYMBOL

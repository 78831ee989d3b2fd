#!/usr/bin/env python3
"""
Fetch current quotes for one or more assets.

Usage:
    python scripts/fetch_prices.py Apple bitcoin "Gold" [--api http://localhost:8000]
"""

import asyncio
import logging
import os
import sys
from argparse import ArgumentParser

# Add backend to path
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from folio.services.price_client import PriceClient
from folio.services.price_service import PriceService

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def fetch_prices(asset_names: list[str], api_url: str | None = None) -> int:
    """Fetch and print quotes. Returns the number of assets without a quote."""
    if api_url:
        logger.info(f"Fetching {len(asset_names)} quotes via {api_url}")
        prices = await PriceClient(base_url=api_url).fetch_asset_prices(asset_names)
    else:
        prices = await PriceService().fetch_all(asset_names)

    missing = 0
    for name, quote in prices.items():
        if quote is None:
            missing += 1
            print(f"{name:<24} {'-':<10} unavailable")
            continue
        print(
            f"{name:<24} {quote.symbol:<10} {quote.current_price:>12.2f} "
            f"{quote.change:>+10.2f} ({quote.change_percent:+.2f}%)"
        )
    return missing


if __name__ == "__main__":
    parser = ArgumentParser(description="Fetch current asset quotes")
    parser.add_argument("assets", nargs="+", help="Asset names or ticker symbols")
    parser.add_argument("--api", default=None, help="Price API base URL (default: fetch directly)")
    args = parser.parse_args()

    missing = asyncio.run(fetch_prices(args.assets, args.api))
    sys.exit(1 if missing else 0)

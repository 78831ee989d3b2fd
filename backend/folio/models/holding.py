import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


class AssetType(str, Enum):
    """Asset classes a holding can be recorded under."""
    STOCK = "Stock"
    ETF = "ETF"
    CRYPTOCURRENCY = "Cryptocurrency"
    BOND = "Bond"
    COMMODITY = "Commodity"
    REAL_ESTATE = "Real Estate"
    OTHER = "Other"


@dataclass(frozen=True)
class Holding:
    """
    A user's position in one asset.

    Owned and persisted by the holdings store; pricing code only reads
    quantity and purchase_price.
    """
    asset_name: str
    quantity: float
    purchase_price: float  # per unit
    asset_type: AssetType = AssetType.STOCK
    id: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        for name in ("quantity", "purchase_price"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"{name} must be finite and non-negative: {value}")

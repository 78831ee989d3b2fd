from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(frozen=True)
class Quote:
    """
    Current price snapshot for a ticker symbol.

    Fetched on demand and never persisted. A missing quote is represented
    as None by callers, never as a zero-valued Quote.
    """
    symbol: str
    current_price: float
    change: float          # absolute change since previous close
    change_percent: float
    last_updated: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "symbol": self.symbol,
            "currentPrice": self.current_price,
            "change": self.change,
            "changePercent": self.change_percent,
            "lastUpdated": self.last_updated.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Quote":
        """Build a Quote from its serialized form."""
        return cls(
            symbol=str(data["symbol"]),
            current_price=float(data["currentPrice"]),
            change=float(data["change"]),
            change_percent=float(data["changePercent"]),
            last_updated=datetime.fromisoformat(data["lastUpdated"]),
        )

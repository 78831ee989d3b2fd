"""
Performance Calculator Service.

Derives value, cost and gain/loss metrics for holdings from current quotes.
Holdings without a quote get no metrics and are left out of portfolio totals.
"""
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence

from folio.models.holding import Holding
from folio.models.quote import Quote


@dataclass(frozen=True)
class PerformanceMetrics:
    """Per-holding performance at the current price."""
    current_value: float
    cost_basis: float
    gain_loss: float
    gain_loss_percent: float  # 0.0 when cost_basis is zero
    day_change_value: float


@dataclass(frozen=True)
class HoldingPerformance:
    """A holding joined with its quote and metrics, if priced."""
    holding: Holding
    quote: Optional[Quote] = None
    metrics: Optional[PerformanceMetrics] = None

    @property
    def is_priced(self) -> bool:
        return self.metrics is not None


@dataclass
class PortfolioPerformance:
    """Portfolio-level totals across priced holdings."""
    holdings: List[HoldingPerformance] = field(default_factory=list)
    total_cost: float = 0.0
    total_value: float = 0.0
    total_gain_loss: float = 0.0
    total_gain_loss_percent: float = 0.0
    day_change: float = 0.0
    day_change_percent: float = 0.0
    allocation: Dict[str, float] = field(default_factory=dict)  # asset type -> % of value

    @property
    def holding_count(self) -> int:
        return len(self.holdings)

    @property
    def priced_count(self) -> int:
        return sum(1 for h in self.holdings if h.is_priced)

    @property
    def unpriced_count(self) -> int:
        return self.holding_count - self.priced_count


def percent_of(amount: float, base: float) -> float:
    """amount / base * 100, or 0.0 when base is zero."""
    if base == 0:
        return 0.0
    return (amount / base) * 100


class PerformanceCalculator:
    """
    Calculates holding and portfolio metrics from quotes.

    A zero cost basis yields a gain/loss percent of 0.0, both per holding
    and in portfolio totals.
    """

    def calculate_performance(
        self,
        quantity: float,
        purchase_price: float,
        current_price: float,
        day_change: float,
    ) -> PerformanceMetrics:
        current_value = quantity * current_price
        cost_basis = quantity * purchase_price
        gain_loss = current_value - cost_basis

        return PerformanceMetrics(
            current_value=current_value,
            cost_basis=cost_basis,
            gain_loss=gain_loss,
            gain_loss_percent=percent_of(gain_loss, cost_basis),
            day_change_value=quantity * day_change,
        )

    def evaluate_holding(self, holding: Holding, quote: Optional[Quote]) -> HoldingPerformance:
        """Join a holding with its quote. No quote means no metrics."""
        if quote is None:
            return HoldingPerformance(holding=holding)

        metrics = self.calculate_performance(
            holding.quantity,
            holding.purchase_price,
            quote.current_price,
            quote.change,
        )
        return HoldingPerformance(holding=holding, quote=quote, metrics=metrics)

    def summarize_portfolio(
        self,
        holdings: Sequence[Holding],
        quotes: Mapping[str, Optional[Quote]],
    ) -> PortfolioPerformance:
        """
        Compute per-holding metrics and portfolio totals.

        Quotes are keyed by asset name. Totals, day change and allocation
        only include holdings that have a quote.
        """
        summary = PortfolioPerformance(
            holdings=[self.evaluate_holding(h, quotes.get(h.asset_name)) for h in holdings]
        )

        value_by_type: Dict[str, float] = defaultdict(float)
        for item in summary.holdings:
            if item.metrics is None:
                continue
            summary.total_cost += item.metrics.cost_basis
            summary.total_value += item.metrics.current_value
            summary.total_gain_loss += item.metrics.gain_loss
            summary.day_change += item.metrics.day_change_value
            value_by_type[item.holding.asset_type.value] += item.metrics.current_value

        summary.total_gain_loss_percent = percent_of(summary.total_gain_loss, summary.total_cost)

        # Day change relative to the value at previous close
        previous_value = summary.total_value - summary.day_change
        summary.day_change_percent = percent_of(summary.day_change, previous_value)

        summary.allocation = {
            asset_type: percent_of(value, summary.total_value)
            for asset_type, value in value_by_type.items()
        }
        return summary


# Singleton instance for convenience
performance_calculator = PerformanceCalculator()


def calculate_performance(
    quantity: float,
    purchase_price: float,
    current_price: float,
    day_change: float,
) -> PerformanceMetrics:
    """Module-level shortcut for PerformanceCalculator.calculate_performance."""
    return performance_calculator.calculate_performance(
        quantity, purchase_price, current_price, day_change
    )

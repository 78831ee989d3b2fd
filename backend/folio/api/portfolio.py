"""
Portfolio API Router.
"""
from datetime import datetime
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from folio.api.prices import get_price_service
from folio.models.holding import AssetType, Holding
from folio.services.performance_calculator import performance_calculator
from folio.services.price_service import PriceService

router = APIRouter()


# ---------- Pydantic Schemas ----------

class HoldingIn(BaseModel):
    id: Optional[str] = None
    asset_name: str = Field(min_length=1)
    asset_type: AssetType = AssetType.STOCK
    quantity: float = Field(ge=0, allow_inf_nan=False)
    purchase_price: float = Field(ge=0, allow_inf_nan=False)
    created_at: Optional[datetime] = None

    def to_holding(self) -> Holding:
        extra = {"created_at": self.created_at} if self.created_at else {}
        return Holding(
            id=self.id,
            asset_name=self.asset_name,
            asset_type=self.asset_type,
            quantity=self.quantity,
            purchase_price=self.purchase_price,
            **extra,
        )


class PerformanceRequest(BaseModel):
    holdings: List[HoldingIn]


class QuoteSchema(BaseModel):
    symbol: str
    current_price: float
    change: float
    change_percent: float
    last_updated: datetime

    class Config:
        from_attributes = True


class PerformanceMetricsSchema(BaseModel):
    current_value: float
    cost_basis: float
    gain_loss: float
    gain_loss_percent: float
    day_change_value: float

    class Config:
        from_attributes = True


class HoldingPerformanceSchema(BaseModel):
    id: Optional[str]
    asset_name: str
    asset_type: AssetType
    quantity: float
    purchase_price: float
    quote: Optional[QuoteSchema]
    performance: Optional[PerformanceMetricsSchema]


class PortfolioPerformanceSchema(BaseModel):
    holdings: List[HoldingPerformanceSchema]
    holding_count: int
    priced_count: int
    unpriced_count: int
    total_cost: float
    total_value: float
    total_gain_loss: float
    total_gain_loss_percent: float
    day_change: float
    day_change_percent: float
    allocation: Dict[str, float]


# ---------- Endpoints ----------

@router.post("/performance", response_model=PortfolioPerformanceSchema)
async def get_portfolio_performance(
    request: PerformanceRequest,
    price_service: PriceService = Depends(get_price_service),
):
    """
    Price a set of holdings and compute their performance.

    Holdings without a quote are returned with null quote/performance and
    are excluded from the totals.
    """
    holdings = [h.to_holding() for h in request.holdings]
    quotes = await price_service.fetch_all(h.asset_name for h in holdings)
    summary = performance_calculator.summarize_portfolio(holdings, quotes)

    return PortfolioPerformanceSchema(
        holdings=[
            HoldingPerformanceSchema(
                id=item.holding.id,
                asset_name=item.holding.asset_name,
                asset_type=item.holding.asset_type,
                quantity=item.holding.quantity,
                purchase_price=item.holding.purchase_price,
                quote=QuoteSchema.model_validate(item.quote) if item.quote else None,
                performance=(
                    PerformanceMetricsSchema.model_validate(item.metrics)
                    if item.metrics else None
                ),
            )
            for item in summary.holdings
        ],
        holding_count=summary.holding_count,
        priced_count=summary.priced_count,
        unpriced_count=summary.unpriced_count,
        total_cost=summary.total_cost,
        total_value=summary.total_value,
        total_gain_loss=summary.total_gain_loss,
        total_gain_loss_percent=summary.total_gain_loss_percent,
        day_change=summary.day_change,
        day_change_percent=summary.day_change_percent,
        allocation=summary.allocation,
    )

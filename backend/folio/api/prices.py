"""
Prices API Router.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from folio.core.config import settings
from folio.services.price_service import PriceService

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------- Pydantic Schemas ----------

class PriceRequest(BaseModel):
    asset_names: List[str] = Field(alias="assetNames")

    class Config:
        populate_by_name = True


# ---------- Dependencies ----------

def get_price_service() -> PriceService:
    """New service per request; nothing is shared between calls."""
    return PriceService()


# ---------- Endpoints ----------

@router.post("/prices")
async def get_prices(
    request: Request,
    price_service: PriceService = Depends(get_price_service),
):
    """
    Fetch current quotes for a list of asset names.

    Returns an object keyed by the requested names; assets without a
    quote map to null.
    """
    try:
        body = PriceRequest.model_validate(await request.json())
    except (ValueError, ValidationError):
        return JSONResponse(status_code=400, content={"error": "assetNames array is required"})

    try:
        prices = await price_service.fetch_all(body.asset_names)
    except Exception:
        logger.exception("Price API error")
        return JSONResponse(status_code=500, content={"error": "Failed to fetch prices"})

    return JSONResponse(
        content={name: quote.to_dict() if quote else None for name, quote in prices.items()},
        headers={"Cache-Control": settings.prices_cache_control},
    )

"""
API routes for mandi market prices
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field

from ..services.market_service import SOURCE, MarketPriceSource

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/market-prices", tags=["market-prices"])

market_price_source = MarketPriceSource()


def get_market_price_source() -> MarketPriceSource:
    return market_price_source


class PriceComparisonRequest(BaseModel):
    commodities: List[str] = Field(default_factory=list, description="Commodities to compare; empty for all")


class PriceAlertRequest(BaseModel):
    commodity: str = Field(..., min_length=1, description="Commodity to watch")
    target_price: Optional[float] = Field(None, gt=0, description="Alert when the modal price reaches this value")


@router.get("")
async def get_market_prices(
    state: Optional[str] = Query(None, description="State name"),
    district: Optional[str] = Query(None, description="District name"),
    commodity: Optional[str] = Query(None, description="Commodity name in English or Hindi"),
    source: MarketPriceSource = Depends(get_market_price_source)
):
    """
    Get current mandi prices
    """
    try:
        prices = source.get_prices(state=state, district=district, commodity=commodity)
        return {
            "success": True,
            "data": [price.model_dump(mode="json") for price in prices],
            "total": len(prices),
            "last_updated": datetime.now(timezone.utc).isoformat(),
            "source": SOURCE
        }
    except Exception as e:
        logger.error(f"Market prices API error: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch market prices")


@router.post("/compare")
async def compare_prices(
    request: PriceComparisonRequest,
    source: MarketPriceSource = Depends(get_market_price_source)
):
    """
    Compare prices across commodities
    """
    try:
        comparison = source.compare(request.commodities)
        return {
            "success": True,
            "comparison": comparison.model_dump(),
            "generated_at": datetime.now(timezone.utc).isoformat()
        }
    except Exception as e:
        logger.error(f"Market prices compare error: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/alerts")
async def create_price_alert(
    request: PriceAlertRequest,
    source: MarketPriceSource = Depends(get_market_price_source)
):
    """
    Subscribe to price alerts for a commodity
    """
    try:
        return {"success": True, **source.subscribe_alert(request.commodity, request.target_price)}
    except Exception as e:
        logger.error(f"Price alert error: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")

"""
Pydantic models for mandi market prices
"""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field


class MarketPrice(BaseModel):
    """Daily price quote for a commodity at a mandi (INR per quintal)"""
    commodity: str
    commodity_hi: str
    market: str
    state: str
    district: str
    min_price: float = Field(..., ge=0)
    max_price: float = Field(..., ge=0)
    modal_price: float = Field(..., ge=0)
    change: float = 0
    change_percent: float = 0
    last_updated: Optional[datetime] = None


class PriceRange(BaseModel):
    min: float
    max: float


class PriceComparison(BaseModel):
    """Summary across a set of price quotes"""
    average_price: float
    price_range: PriceRange
    trend: str
    recommendations: List[str] = Field(default_factory=list)

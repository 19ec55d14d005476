"""
Market price source backed by mock mandi data
"""
import logging
import uuid
from datetime import datetime, timezone
from statistics import mean
from typing import Any, Dict, List, Optional, Sequence

from ..data import MOCK_MARKET_DATA
from ..models.market import MarketPrice, PriceComparison, PriceRange
from ..utils.validators import filter_value

logger = logging.getLogger(__name__)

SOURCE = "AGMARKNET, e-NAM"


class MarketPriceSource:
    """Read-only price quotes filtered by location and commodity"""

    def __init__(self, records: Optional[Sequence[Dict[str, Any]]] = None):
        now = datetime.now(timezone.utc)
        self._prices = tuple(
            MarketPrice(**{"last_updated": now, **record})
            for record in (MOCK_MARKET_DATA if records is None else records)
        )

    def get_prices(
        self,
        state: Optional[str] = None,
        district: Optional[str] = None,
        commodity: Optional[str] = None
    ) -> List[MarketPrice]:
        """
        Filter quotes by case-insensitive substring

        A commodity matches its English or Hindi name. Empty and "all"
        filters are ignored.
        """
        state = filter_value(state)
        district = filter_value(district)
        commodity = filter_value(commodity)

        prices = list(self._prices)

        if state:
            prices = [p for p in prices if state.lower() in p.state.lower()]

        if district:
            prices = [p for p in prices if district.lower() in p.district.lower()]

        if commodity:
            term = commodity.lower()
            prices = [
                p for p in prices
                if term in p.commodity.lower() or term in p.commodity_hi.lower()
            ]

        return prices

    def compare(self, commodities: Optional[Sequence[str]] = None) -> PriceComparison:
        """Summarize modal prices across the selected commodities"""
        prices = list(self._prices)
        if commodities:
            wanted = {c.lower() for c in commodities}
            prices = [p for p in prices if p.commodity.lower() in wanted]

        if not prices:
            return PriceComparison(
                average_price=0,
                price_range=PriceRange(min=0, max=0),
                trend="stable",
                recommendations=["No price data available for the selected commodities"]
            )

        average_change = mean(p.change_percent for p in prices)
        if average_change > 1:
            trend = "increasing"
        elif average_change < -1:
            trend = "decreasing"
        else:
            trend = "stable"

        if trend == "decreasing":
            recommendations = [
                "Prices are declining, consider storing produce if possible",
                "Compare rates across nearby mandis before selling"
            ]
        else:
            recommendations = [
                "Current prices are favorable for selling",
                "Consider waiting for better prices in premium markets"
            ]

        return PriceComparison(
            average_price=round(mean(p.modal_price for p in prices), 2),
            price_range=PriceRange(min=min(p.min_price for p in prices), max=max(p.max_price for p in prices)),
            trend=trend,
            recommendations=recommendations
        )

    def subscribe_alert(self, commodity: str, target_price: Optional[float] = None) -> Dict[str, Any]:
        """
        Subscribe to price alerts for a commodity

        Subscriptions are not persisted; the returned id is for display only.
        """
        alert_id = uuid.uuid4().hex[:12]
        logger.info(f"Price alert {alert_id} registered for {commodity}")
        return {
            "alert_id": alert_id,
            "commodity": commodity,
            "target_price": target_price,
            "message": "Price alert subscription successful"
        }

"""
API routes for weather forecasts
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field

from ..config import settings
from ..services.weather_service import DEFAULT_FORECAST_DAYS, SOURCE, MockWeatherSource, WeatherSource

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/weather", tags=["weather"])

weather_source = MockWeatherSource()


def get_weather_source() -> WeatherSource:
    return weather_source


@router.get("")
async def get_weather(
    location: Optional[str] = Query(None, description="Location name or state"),
    forecast_days: int = Query(DEFAULT_FORECAST_DAYS, description="Number of forecast days"),
    source: WeatherSource = Depends(get_weather_source)
):
    """
    Get current weather, forecast and farm advisories
    """
    try:
        report = source.get_report(location or settings.weather_default_location, forecast_days)
        now = datetime.now(timezone.utc)
        return {
            "success": True,
            "data": report.model_dump(mode="json"),
            "last_updated": now.isoformat(),
            "source": SOURCE,
            "cache_expiry": (now + timedelta(minutes=settings.weather_cache_minutes)).isoformat()
        }
    except Exception as e:
        logger.error(f"Weather API error: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch weather data")


@router.get("/locations")
async def search_locations(
    query: str = Query("", description="Location name or state"),
    source: WeatherSource = Depends(get_weather_source)
):
    """
    Search supported weather locations
    """
    try:
        locations = source.search_locations(query)
        return {"success": True, "locations": [location.model_dump() for location in locations]}
    except Exception as e:
        logger.error(f"Weather location search error: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


class WeatherAlertRequest(BaseModel):
    location: Optional[str] = Field(None, description="Location name or state")


@router.post("/alerts")
async def create_weather_alert(
    request: WeatherAlertRequest,
    source: WeatherSource = Depends(get_weather_source)
):
    """
    Subscribe to weather alerts for a location
    """
    try:
        return {"success": True, **source.subscribe_alert(request.location or settings.weather_default_location)}
    except Exception as e:
        logger.error(f"Weather alert error: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")

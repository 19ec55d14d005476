"""
Weather sources for forecasts and farm advisories
"""
import logging
import uuid
import random
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional, Protocol

from ..config import settings
from ..data import WEATHER_ADVISORIES, WEATHER_CONDITIONS, WEATHER_LOCATIONS, WIND_DIRECTIONS
from ..models.weather import Advisory, CurrentWeather, ForecastDay, Location, WeatherReport

logger = logging.getLogger(__name__)

SOURCE = "India Meteorological Department (IMD)"
DEFAULT_FORECAST_DAYS = 7


class WeatherSource(Protocol):
    """Provider of weather reports; the rule engine never depends on it"""

    def get_report(self, location: Optional[str] = None, forecast_days: int = DEFAULT_FORECAST_DAYS) -> WeatherReport:
        ...

    def search_locations(self, query: str) -> List[Location]:
        ...

    def subscribe_alert(self, location: Optional[str] = None) -> Dict[str, Any]:
        ...


class MockWeatherSource:
    """Randomly generated weather; pass a seeded Random for repeatable output"""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random(settings.weather_seed)
        self.locations = [Location(**location) for location in WEATHER_LOCATIONS]

    def find_location(self, query: Optional[str]) -> Location:
        """First location whose name or state contains query; Delhi otherwise"""
        term = (query or "").strip().lower()
        for location in self.locations:
            if term in location.name.lower() or term in location.state.lower():
                return location
        return self.locations[0]

    def search_locations(self, query: str) -> List[Location]:
        term = (query or "").strip().lower()
        return [
            location for location in self.locations
            if term in location.name.lower() or term in location.state.lower()
        ]

    def get_report(self, location: Optional[str] = None, forecast_days: int = DEFAULT_FORECAST_DAYS) -> WeatherReport:
        """
        Generate a weather report

        Args:
            location: Location name or state
            forecast_days: Number of forecast days, clamped to [1, max]
        """
        forecast_days = max(1, min(forecast_days, settings.weather_max_forecast_days))
        now = datetime.now(timezone.utc)
        rng = self.rng

        current = CurrentWeather(
            temperature=rng.randint(20, 34),
            feels_like=rng.randint(22, 36),
            humidity=rng.randint(40, 79),
            wind_speed=rng.randint(5, 24),
            wind_direction=rng.choice(WIND_DIRECTIONS),
            pressure=rng.randint(1000, 1019),
            visibility=rng.randint(5, 9),
            uv_index=rng.randint(1, 8),
            condition=rng.choice(WEATHER_CONDITIONS),
            last_updated=now
        )

        forecast = []
        for index in range(forecast_days):
            day = now + timedelta(days=index)
            if index == 0:
                day_name = "Today"
            elif index == 1:
                day_name = "Tomorrow"
            else:
                day_name = day.strftime("%A")

            forecast.append(ForecastDay(
                date=day.date().isoformat(),
                day_name=day_name,
                high=rng.randint(25, 34),
                low=rng.randint(15, 24),
                condition=rng.choice(WEATHER_CONDITIONS),
                # 30% chance of rain
                rainfall=rng.randint(0, 9) if rng.random() > 0.7 else 0,
                humidity=rng.randint(50, 79),
                wind_speed=rng.randint(5, 19)
            ))

        advisories = [
            Advisory(
                type=advisory["type"],
                title=advisory["title"],
                description=advisory["description"],
                priority=advisory["priority"],
                valid_until=now + timedelta(days=advisory["valid_days"])
            )
            for advisory in WEATHER_ADVISORIES
        ]

        return WeatherReport(
            location=self.find_location(location),
            current=current,
            forecast=forecast,
            advisories=advisories
        )

    def subscribe_alert(self, location: Optional[str] = None) -> Dict[str, Any]:
        """Subscribe to weather alerts; subscriptions are not persisted"""
        alert_id = uuid.uuid4().hex[:12]
        resolved = self.find_location(location)
        logger.info(f"Weather alert {alert_id} registered for {resolved.name}")
        return {
            "alert_id": alert_id,
            "location": resolved.model_dump(),
            "message": "Weather alert subscription successful"
        }

"""
Services package for the Kisan Sahayak backend
"""

from .eligibility_service import EligibilityService
from .chat_service import ChatService
from .scheme_service import SchemeService
from .market_service import MarketPriceSource
from .weather_service import WeatherSource, MockWeatherSource

__all__ = [
    "EligibilityService",
    "ChatService",
    "SchemeService",
    "MarketPriceSource",
    "WeatherSource",
    "MockWeatherSource"
]

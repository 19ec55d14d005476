"""
Static configuration bundled with the Kisan Sahayak backend
"""

from .chat_rules import CHAT_RULES, SUGGESTION_RULES
from .schemes import SCHEMES
from .market_prices import MOCK_MARKET_DATA
from .weather import WEATHER_LOCATIONS, WEATHER_CONDITIONS, WIND_DIRECTIONS, WEATHER_ADVISORIES

__all__ = [
    "CHAT_RULES",
    "SUGGESTION_RULES",
    "SCHEMES",
    "MOCK_MARKET_DATA",
    "WEATHER_LOCATIONS",
    "WEATHER_CONDITIONS",
    "WIND_DIRECTIONS",
    "WEATHER_ADVISORIES"
]

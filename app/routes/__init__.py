"""
API routes for the Kisan Sahayak backend
"""

from .chat import router as chat_router
from .schemes import router as schemes_router
from .market_prices import router as market_prices_router
from .weather import router as weather_router

__all__ = [
    "chat_router",
    "schemes_router",
    "market_prices_router",
    "weather_router"
]

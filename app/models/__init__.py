"""
Models package for the Kisan Sahayak backend
"""

from .rule import (
    ResponseRule,
    RuleStoreConfig,
    MatchResult
)

from .scheme import (
    SchemeCondition,
    SchemeBonus,
    SchemeRule,
    SchemeStoreConfig,
    ScoredScheme
)

from .profile import (
    FarmerProfile,
    EligibilityRequest,
    EligibilityResponse
)

from .chat import ChatRequest, ChatResponse
from .market import MarketPrice, PriceComparison
from .weather import WeatherReport, Location

__all__ = [
    # Rule models
    "ResponseRule",
    "RuleStoreConfig",
    "MatchResult",

    # Scheme models
    "SchemeCondition",
    "SchemeBonus",
    "SchemeRule",
    "SchemeStoreConfig",
    "ScoredScheme",

    # Profile models
    "FarmerProfile",
    "EligibilityRequest",
    "EligibilityResponse",

    # Data view models
    "ChatRequest",
    "ChatResponse",
    "MarketPrice",
    "PriceComparison",
    "WeatherReport",
    "Location"
]

import random

import pytest
from fastapi.testclient import TestClient

from app.data import CHAT_RULES, SCHEMES, SUGGESTION_RULES
from app.main import app
from app.routes.weather import get_weather_source
from app.rule_store import RuleStore, SchemeStore
from app.services.weather_service import MockWeatherSource

LANGUAGES = ["en", "hi"]


@pytest.fixture
def weather_rain_config():
    return {
        "name": "test",
        "default_language": "en",
        "rules": [
            {
                "id": "weather",
                "keywords": {"en": ["weather"]},
                "responses": {"en": "Weather answer", "hi": "मौसम उत्तर"}
            },
            {
                "id": "rain",
                "keywords": {"en": ["rain"]},
                "responses": {"en": "Rain answer", "hi": "बारिश उत्तर"}
            }
        ],
        "fallback": {"en": "Default answer", "hi": "डिफ़ॉल्ट उत्तर"}
    }


@pytest.fixture
def weather_rain_store(weather_rain_config):
    return RuleStore.load(weather_rain_config, LANGUAGES)


@pytest.fixture
def chat_store():
    return RuleStore.load(CHAT_RULES, LANGUAGES)


@pytest.fixture
def suggestion_store():
    return RuleStore.load(SUGGESTION_RULES, LANGUAGES)


@pytest.fixture
def scheme_store():
    return SchemeStore.load(SCHEMES)


@pytest.fixture
def small_farmer_scheme():
    """Medium-priority scheme for small and marginal farmers with land"""
    return {
        "id": "small-farmer-support",
        "title": {"en": "Small Farmer Support", "hi": "लघु किसान सहायता"},
        "category": "financial",
        "priority": "medium",
        "target_farmers": ["small", "marginal"],
        "conditions": [
            {"attribute": "land_holding_category", "op": "!=", "value": "no-land"}
        ]
    }


@pytest.fixture
def land_bonuses():
    return [
        {
            "attribute": "land_holding_category",
            "op": "==",
            "value": "less-than-1-hectare",
            "target": "small",
            "points": 30
        },
        {
            "attribute": "land_holding_category",
            "op": "==",
            "value": "1-2-hectares",
            "target": "marginal",
            "points": 25
        }
    ]


@pytest.fixture
def client():
    app.dependency_overrides[get_weather_source] = lambda: MockWeatherSource(random.Random(7))
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()

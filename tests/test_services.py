import random

import pytest

from app.config import settings
from app.models.profile import FarmerProfile
from app.services.chat_service import ChatService
from app.services.market_service import MarketPriceSource
from app.services.scheme_service import SchemeService
from app.services.weather_service import MockWeatherSource


@pytest.fixture
def chat_service(chat_store, suggestion_store):
    return ChatService(chat_store, suggestion_store)


@pytest.fixture
def scheme_service(scheme_store):
    return SchemeService(scheme_store)


class TestChatService:

    def test_reply_and_suggestions(self, chat_service):
        response = chat_service.respond("Tips for organic fertilizer?", "en")

        assert response.matched_rule_id == "fertilizer"
        assert response.suggestions[0] == "How to make organic fertilizers?"

    def test_fallback_reply(self, chat_service):
        response = chat_service.respond("hello there", "hi")

        assert response.matched_rule_id is None
        assert response.reply.startswith("मैं खेती के प्रश्नों")
        assert len(response.suggestions) == 5

    def test_regional_language_code(self, chat_service):
        response = chat_service.respond("बीज कहां मिलेंगे", "hi-IN")

        assert response.matched_rule_id == "seeds"
        assert response.reply.startswith("अच्छी गुणवत्ता")


class TestSchemeService:

    def test_list_all(self, scheme_service):
        assert len(scheme_service.list_schemes()) == 4

    def test_list_by_category(self, scheme_service):
        schemes = scheme_service.list_schemes(category="insurance")

        assert [s["id"] for s in schemes] == ["pm-fby"]

    def test_search_is_case_insensitive(self, scheme_service):
        schemes = scheme_service.list_schemes(search="SOLAR")

        assert [s["id"] for s in schemes] == ["pm-kusum"]

    def test_list_localized(self, scheme_service):
        scheme = scheme_service.list_schemes(language="hi")[0]

        assert scheme["title"] == "पीएम किसान सम्मान निधि"

    def test_check_eligibility(self, scheme_service):
        profile = FarmerProfile(land_holding_category="less-than-1-hectare")

        response = scheme_service.check_eligibility(profile, "en")

        assert response.total == 4
        assert [(s["id"], s["match_score"]) for s in response.eligible_schemes][:2] == [
            ("pm-kisan", 90), ("pm-fby", 60)
        ]

    def test_check_eligibility_marginal(self, scheme_service):
        profile = FarmerProfile(land_holding_category="1-2-hectares")

        response = scheme_service.check_eligibility(profile)

        assert response.eligible_schemes[0]["match_score"] == 85

    def test_compare_ignores_unknown_ids(self, scheme_service):
        comparison = scheme_service.compare(["pm-kusum", "unknown", "pm-kisan"])

        assert [s["id"] for s in comparison["schemes"]] == ["pm-kisan", "pm-kusum"]
        assert set(comparison["application_complexity"]) == {"pm-kisan", "pm-kusum"}
        assert len(comparison["recommendations"]) == 2

    def test_compare_total_benefits(self, scheme_service):
        comparison = scheme_service.compare(["pm-kisan", "pm-fby", "soil-health"])

        assert comparison["total_benefits"] == 15000

    def test_apply(self, scheme_service):
        application = scheme_service.apply("soil-health")

        assert application["scheme_id"] == "soil-health"
        assert len(application["application_id"]) == 12
        assert application["next_steps"][0].startswith("Verification of documents")

    def test_apply_unknown_scheme(self, scheme_service):
        assert scheme_service.apply("unknown") is None


class TestMarketPriceSource:

    def test_hindi_commodity_name(self):
        prices = MarketPriceSource().get_prices(commodity="गेहूं")

        assert [p.commodity for p in prices] == ["Wheat"]

    def test_state_substring(self):
        prices = MarketPriceSource().get_prices(state="maha")

        assert [p.commodity for p in prices] == ["Rice"]

    def test_all_filter(self):
        assert len(MarketPriceSource().get_prices(state="all", commodity="")) == 5

    def test_compare_all(self):
        comparison = MarketPriceSource().compare()

        assert comparison.average_price == 3615.0
        assert comparison.price_range.min == 320
        assert comparison.price_range.max == 7500
        assert comparison.trend == "stable"

    def test_compare_decreasing(self):
        comparison = MarketPriceSource().compare(["rice"])

        assert comparison.trend == "decreasing"
        assert comparison.average_price == 3400

    def test_compare_unknown(self):
        comparison = MarketPriceSource().compare(["saffron"])

        assert comparison.average_price == 0

    def test_subscribe_alert(self):
        source = MarketPriceSource()

        first = source.subscribe_alert("Wheat", 2500)
        second = source.subscribe_alert("Wheat", 2500)

        assert first["commodity"] == "Wheat"
        assert first["alert_id"] != second["alert_id"]


class TestMockWeatherSource:

    def test_seeded_reports_repeat(self):
        first = MockWeatherSource(random.Random(42)).get_report("Delhi", 5)
        second = MockWeatherSource(random.Random(42)).get_report("Delhi", 5)

        assert first.current.temperature == second.current.temperature
        assert first.current.condition == second.current.condition
        assert [(d.high, d.low, d.rainfall) for d in first.forecast] == [
            (d.high, d.low, d.rainfall) for d in second.forecast
        ]

    @pytest.mark.parametrize("requested,expected", [(0, 1), (3, 3), (30, settings.weather_max_forecast_days)])
    def test_forecast_days_are_clamped(self, requested, expected):
        report = MockWeatherSource(random.Random(1)).get_report("Delhi", requested)

        assert len(report.forecast) == expected
        assert report.forecast[0].day_name == "Today"

    def test_location_lookup(self):
        source = MockWeatherSource(random.Random(1))

        assert source.find_location("Rajasthan").name == "Jaipur"
        assert source.find_location("atlantis").name == "Delhi"

    def test_search_locations(self):
        locations = MockWeatherSource(random.Random(1)).search_locations("pradesh")

        assert [location.name for location in locations] == ["Lucknow"]

    def test_subscribe_alert_resolves_location(self):
        alert = MockWeatherSource(random.Random(1)).subscribe_alert("maharashtra")

        assert alert["location"]["name"] == "Mumbai"
        assert alert["alert_id"]

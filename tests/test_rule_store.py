import json

import pytest

from app.data import CHAT_RULES
from app.rule_store import ConfigurationError, RuleStore, SchemeStore

LANGUAGES = ["en", "hi"]


def test_load_keeps_declaration_order(weather_rain_store):
    assert [rule.id for rule in weather_rain_store.iterate()] == ["weather", "rain"]


def test_iterate_is_stable_across_calls(chat_store):
    assert chat_store.iterate() == chat_store.iterate()
    assert [rule.id for rule in chat_store.iterate()] == [rule["id"] for rule in CHAT_RULES["rules"]]


def test_higher_priority_rules_come_first(weather_rain_config):
    weather_rain_config["rules"][1]["priority"] = 5
    store = RuleStore.load(weather_rain_config, LANGUAGES)

    assert [rule.id for rule in store.iterate()] == ["rain", "weather"]


def test_duplicate_rule_id_raises(weather_rain_config):
    weather_rain_config["rules"][1]["id"] = "weather"

    with pytest.raises(ConfigurationError, match="duplicate rule id"):
        RuleStore.load(weather_rain_config, LANGUAGES)


@pytest.mark.parametrize("keywords", [{}, {"en": []}, {"en": ["  "], "hi": [""]}])
def test_empty_keywords_raise(weather_rain_config, keywords):
    weather_rain_config["rules"][0]["keywords"] = keywords

    with pytest.raises(ConfigurationError, match="no keywords"):
        RuleStore.load(weather_rain_config, LANGUAGES)


def test_missing_localization_without_default_raises(weather_rain_config):
    weather_rain_config["rules"][0]["responses"] = {"hi": "मौसम उत्तर"}

    with pytest.raises(ConfigurationError, match="missing localization"):
        RuleStore.load(weather_rain_config, LANGUAGES)


def test_missing_localization_with_default_is_accepted(weather_rain_config):
    weather_rain_config["rules"][0]["responses"] = {"en": "Weather answer"}

    store = RuleStore.load(weather_rain_config, LANGUAGES)

    assert store.get("weather").localized("hi", store.default_language) == "Weather answer"


def test_fallback_must_be_localized(weather_rain_config):
    weather_rain_config["fallback"] = {"hi": "डिफ़ॉल्ट उत्तर"}

    with pytest.raises(ConfigurationError, match="fallback"):
        RuleStore.load(weather_rain_config, LANGUAGES)


def test_malformed_source_raises(weather_rain_config):
    del weather_rain_config["fallback"]

    with pytest.raises(ConfigurationError):
        RuleStore.load(weather_rain_config, LANGUAGES)


def test_keywords_are_normalized(weather_rain_config):
    weather_rain_config["rules"][0]["keywords"] = {"en": ["  Weather  Report "]}

    store = RuleStore.load(weather_rain_config, LANGUAGES)

    assert store.get("weather").keywords == {"en": ["weather report"]}


def test_load_file(tmp_path, weather_rain_config):
    path = tmp_path / "rules.json"
    path.write_text(json.dumps(weather_rain_config, ensure_ascii=False), encoding="utf-8")

    store = RuleStore.load_file(path, LANGUAGES)

    assert len(store) == 2


def test_load_file_missing_raises(tmp_path):
    with pytest.raises(ConfigurationError, match="Cannot read"):
        RuleStore.load_file(tmp_path / "missing.json", LANGUAGES)


def test_scheme_store_rejects_duplicate_ids(small_farmer_scheme):
    with pytest.raises(ConfigurationError, match="duplicate scheme id"):
        SchemeStore.load({"schemes": [small_farmer_scheme, small_farmer_scheme]})


def test_scheme_store_rejects_unknown_operator(small_farmer_scheme):
    small_farmer_scheme["conditions"][0]["op"] = "like"

    with pytest.raises(ConfigurationError, match="Unsupported operator"):
        SchemeStore.load({"schemes": [small_farmer_scheme]})


def test_scheme_store_rejects_bonus_without_points(small_farmer_scheme):
    bonus = {"attribute": "land_holding_category", "op": "==", "value": "no-land"}

    with pytest.raises(ConfigurationError, match="points"):
        SchemeStore.load({"schemes": [small_farmer_scheme], "bonuses": [bonus]})


def test_scheme_store_keeps_declaration_order(scheme_store):
    assert [scheme.id for scheme in scheme_store.iterate()] == ["pm-kisan", "pm-fby", "soil-health", "pm-kusum"]
    assert len(scheme_store.bonuses) == 2

import pytest

from app.data import CHAT_RULES
from app.matcher import match, match_rule
from app.normalizer import normalize


def test_first_declared_rule_wins(weather_rain_store):
    result = match_rule(normalize("weather and rain", "en"), weather_rain_store, "en")

    assert result.matched
    assert result.rule_id == "weather"
    assert result.payload == "Weather answer"


def test_substring_match(chat_store):
    result = match_rule(normalize("I need fertilizers now", "en"), chat_store, "en")

    assert result.rule_id == "fertilizer"


def test_match_is_case_insensitive(chat_store):
    assert match(normalize("FERTILIZER please", "en"), chat_store, "en") == CHAT_RULES["rules"][0]["responses"]["en"]


def test_hindi_keyword_with_hindi_reply(chat_store):
    result = match_rule(normalize("मुझे खाद चाहिए", "hi"), chat_store, "hi")

    assert result.rule_id == "fertilizer"
    assert result.payload.startswith("अधिकांश फसलों")


def test_keywords_match_across_languages(chat_store):
    # Hindi keyword, English reply
    result = match_rule(normalize("आज मौसम कैसा है", "en"), chat_store, "en")

    assert result.rule_id == "weather"
    assert result.payload.startswith("Our weather section")


def test_fallback_for_unknown_input(chat_store):
    result = match_rule(normalize("asdkjaslkdj", "en"), chat_store, "en")

    assert not result.matched
    assert result.rule is None
    assert result.payload == CHAT_RULES["fallback"]["en"]


@pytest.mark.parametrize("text", ["", "   ", "!!!", "asdkjaslkdj", "नमस्ते", "12345", "a" * 2000])
@pytest.mark.parametrize("language", ["en", "hi"])
def test_match_always_answers(chat_store, text, language):
    payload = match(normalize(text, language), chat_store, language)

    assert isinstance(payload, str)
    assert payload


def test_unsupported_language_uses_default(chat_store):
    payload = match(normalize("seed", "fr"), chat_store, "fr")

    assert payload.startswith("Use quality certified seeds")


def test_language_defaults_to_input_language(chat_store):
    assert match(normalize("asdkjaslkdj", "hi"), chat_store) == CHAT_RULES["fallback"]["hi"]


def test_raw_strings_are_normalized(chat_store):
    assert match_rule("  PEST problem ", chat_store, "en").rule_id == "pest-control"


def test_match_is_deterministic(chat_store):
    message = normalize("market price of wheat and weather", "en")

    results = {match_rule(message, chat_store, "en").rule_id for _ in range(20)}

    assert results == {"market-prices"}


def test_list_payloads(suggestion_store):
    assert match(normalize("organic farming tips", "en"), suggestion_store, "en")[0] == "How to make organic fertilizers?"
    assert len(match(normalize("hello", "hi"), suggestion_store, "hi")) == 5

import pytest

from app.normalizer import NormalizedInput, normalize, tokenize


def test_lowercases_trims_and_tokenizes():
    result = normalize("  Which FERTILIZER, for   wheat?  ", "en")

    assert result.text == "which fertilizer, for wheat?"
    assert result.tokens == ("which", "fertilizer", "for", "wheat")
    assert result.language == "en"


def test_devanagari_tokens_stay_whole():
    result = normalize("किसान की फसल। खाद चाहिए", "hi")

    assert result.tokens == ("किसान", "की", "फसल", "खाद", "चाहिए")


def test_mixed_script_input():
    assert tokenize("wheat का भाव?") == ("wheat", "का", "भाव")


@pytest.mark.parametrize("raw", ["", None, "   ", "\n\t"])
def test_empty_input_gives_empty_tokens(raw):
    result = normalize(raw, "en")

    assert result.text == ""
    assert result.tokens == ()


@pytest.mark.parametrize("raw", [
    "Hello World",
    "  I need FERTILIZERS now!! ",
    "मौसम कैसा है?",
    "price: ₹2,325 / quintal",
])
def test_normalize_is_idempotent(raw):
    once = normalize(raw, "hi")

    assert normalize(once) == once
    assert normalize(once.text, "hi") == once


def test_token_content_is_not_altered():
    result = normalize("Fertilizers", "en")

    # no stemming
    assert result.tokens == ("fertilizers",)


def test_normalized_input_is_immutable():
    result = normalize("rain", "en")

    with pytest.raises(Exception):
        result.text = "changed"
    assert isinstance(result, NormalizedInput)

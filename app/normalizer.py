"""
Input normalization for keyword matching
"""
import unicodedata
from typing import Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict


class NormalizedInput(BaseModel):
    """Canonical form of a user message"""
    text: str
    tokens: Tuple[str, ...] = ()
    language: str = "en"

    model_config = ConfigDict(frozen=True)


def _is_boundary(char: str) -> bool:
    # Whitespace, punctuation (including the Devanagari danda) and symbols
    # separate tokens. Combining marks are kept so matras stay inside words.
    if char.isspace():
        return True
    category = unicodedata.category(char)
    return category[0] in ('P', 'S', 'Z') or category == 'Cc'


def tokenize(text: str) -> Tuple[str, ...]:
    """Split text on whitespace and punctuation boundaries"""
    tokens = []
    current = []
    for char in text:
        if _is_boundary(char):
            if current:
                tokens.append(''.join(current))
                current = []
        else:
            current.append(char)
    if current:
        tokens.append(''.join(current))
    return tuple(tokens)


def normalize(raw: Union[str, NormalizedInput, None], language: Optional[str] = None) -> NormalizedInput:
    """
    Normalize raw input before rule evaluation

    Lower-cases the text, trims it and collapses runs of whitespace. Tokens
    in non-Latin scripts are kept whole; no stemming is applied. Passing an
    already normalized input returns an equal value.

    Args:
        raw: User text (or a previous normalization result)
        language: Language tag of the input; defaults to the tag of an
            already normalized input, else "en"

    Returns:
        NormalizedInput with the canonical text and its tokens
    """
    if isinstance(raw, NormalizedInput):
        language = language or raw.language
        raw = raw.text
    language = language or "en"
    if not raw:
        return NormalizedInput(text="", tokens=(), language=language)

    text = ' '.join(raw.lower().split())
    return NormalizedInput(text=text, tokens=tokenize(text), language=language)

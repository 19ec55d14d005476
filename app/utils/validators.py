"""
Utility functions for request validation and value normalization
"""
import re
from typing import Any, Dict, List, Optional, Sequence

from ..config import settings


def _slug(value: str) -> str:
    """Lower-case a label and collapse separators to hyphens"""
    return re.sub(r'[\s_/]+', '-', value.strip().lower())


def normalize_choice(value: Any, options: Dict[str, Sequence[str]]) -> Optional[str]:
    """
    Map a questionnaire answer onto its canonical option value

    Args:
        value: Canonical value, English label or Hindi label
        options: Canonical value -> display labels

    Returns:
        Canonical option value, or None for an empty answer

    Raises:
        ValueError: If the answer is not one of the options
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"Expected a string, got {type(value).__name__}")
    if not value.strip():
        return None

    wanted = _slug(value)
    for canonical, labels in options.items():
        if wanted == canonical:
            return canonical
        if any(wanted == _slug(label) for label in labels):
            return canonical

    raise ValueError(f"Must be one of: {list(options)}")


def split_multi_value(value: Any) -> List[str]:
    """
    Split a multi-select answer into individual values

    The questionnaire submits multi-selects as comma-joined strings.
    """
    if value is None:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(',') if part.strip()]
    return [part for part in value if part]


def validate_language(language: Optional[str]) -> str:
    """
    Resolve a requested language to a supported language code

    Args:
        language: Language code such as "hi", "hi-IN" or "EN"

    Returns:
        Supported language code, falling back to the default language
    """
    if not language:
        return settings.default_language

    code = language.strip().lower().replace('_', '-').split('-')[0]
    if code in settings.get_supported_languages_list():
        return code
    return settings.default_language


def filter_value(value: Optional[str]) -> Optional[str]:
    """Treat empty and "all" query parameters as no filter"""
    if value is None:
        return None
    value = value.strip()
    if not value or value.lower() == 'all':
        return None
    return value

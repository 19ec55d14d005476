"""
Utility functions for the Kisan Sahayak backend
"""

from .validators import (
    normalize_choice,
    split_multi_value,
    validate_language,
    filter_value
)

__all__ = [
    "normalize_choice",
    "split_multi_value",
    "validate_language",
    "filter_value"
]

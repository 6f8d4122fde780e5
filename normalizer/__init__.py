"""
Normalizer module initialization.
"""

from normalizer.card_schema import (
    normalize,
    CardRecord,
    CategorizedCardRecord,
    DEFAULT_EXPIRY,
    DEFAULT_CVC,
    EXPORT_FIELDS
)

__all__ = [
    "normalize",
    "CardRecord",
    "CategorizedCardRecord",
    "DEFAULT_EXPIRY",
    "DEFAULT_CVC",
    "EXPORT_FIELDS"
]

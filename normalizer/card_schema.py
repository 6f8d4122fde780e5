"""
Test card record schema.

Every extraction tier (tables, raw text, static catalogue) produces
CardRecord objects so the store and the JSON export see one shape.
"""

import logging
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

DEFAULT_EXPIRY = "03/2030"
DEFAULT_CVC = "737"

EXPORT_FIELDS = ("number", "brand", "expiry", "cvc", "country", "note")


class CardRecord(BaseModel):
    """
    A single test payment card.
    
    Immutable once built: the store hands out the same instances to every
    query, so no caller may change them.
    """
    model_config = ConfigDict(frozen=True)
    
    number: str
    brand: str = ""
    expiry: str = DEFAULT_EXPIRY  # MM/YYYY or MM/YY
    cvc: str = DEFAULT_CVC  # digits, or "none" / "not applicable"
    country: str = ""  # two-letter code or empty
    note: str = ""
    
    def to_export(self) -> Dict[str, str]:
        """Serialize with the export key order."""
        return self.model_dump(include=set(EXPORT_FIELDS))


class CategorizedCardRecord(CardRecord):
    """Search result: a card annotated with the category it was found in."""
    category: str


def normalize(raw_data: Dict[str, Any]) -> CardRecord:
    """
    Build a CardRecord from a loosely-typed mapping.
    
    Missing or blank expiry/CVC fall back to the defaults; other missing
    fields become empty strings.
    
    Args:
        raw_data: Mapping with any of the CardRecord keys
    
    Returns:
        CardRecord
    """
    values = {
        field: str(raw_data.get(field) or "").strip()
        for field in EXPORT_FIELDS
    }
    if not values["expiry"]:
        values["expiry"] = DEFAULT_EXPIRY
    if not values["cvc"]:
        values["cvc"] = DEFAULT_CVC
    
    return CardRecord(**values)

"""
Static fallback catalogue of known-good test cards.

Last extraction tier: loaded only when neither tables nor text patterns
produce a card. Entries are curated by hand and are not re-validated.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

import yaml

from normalizer.card_schema import CardRecord, normalize

logger = logging.getLogger(__name__)

FALLBACK_FILE = Path(__file__).parent / "data" / "fallback_cards.yaml"


@lru_cache(maxsize=None)
def _load_catalogue(path: Path) -> Dict[str, Any]:
    """Load the catalogue YAML."""
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def fallback_version(path: Path = FALLBACK_FILE) -> str:
    """Version string of the shipped catalogue."""
    return str(_load_catalogue(path).get("version", ""))


def load_fallback_cards(path: Path = FALLBACK_FILE) -> Dict[str, List[CardRecord]]:
    """
    Build the fallback card mapping.
    
    Args:
        path: Catalogue file (defaults to the packaged one)
    
    Returns:
        Category name -> cards, in catalogue order. Fresh lists on every call.
    """
    catalogue = _load_catalogue(path)
    
    categories = {
        str(name): [normalize(entry) for entry in entries]
        for name, entries in catalogue["categories"].items()
    }
    
    logger.info(
        f"Loaded fallback catalogue v{catalogue.get('version', '?')}: "
        f"{sum(len(cards) for cards in categories.values())} cards"
    )
    return categories

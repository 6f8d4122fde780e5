"""
Regex fallback for pages whose tables yield nothing.

Scans the raw page content for digit groups shaped like card numbers.
Matches are not deduplicated across patterns.
"""

import logging
import re
from typing import Dict, List

from normalizer.card_schema import CardRecord, DEFAULT_CVC, DEFAULT_EXPIRY
from validator.card_number import infer_brand, is_valid_luhn

logger = logging.getLogger(__name__)

TEXT_CATEGORY = "Scraped from text"
TEXT_NOTE = "Extracted from text"

CARD_PATTERNS = [
    re.compile(r"(\d{4}\s*\d{4}\s*\d{4}\s*\d{4})", re.ASCII),
    re.compile(r"(\d{4}\s*\d{6}\s*\d{5})", re.ASCII),  # Amex
    re.compile(r"(\d{4}\s*\d{6}\s*\d{4})", re.ASCII),  # Diners
]

_WHITESPACE = re.compile(r"\s+")


def extract_text_patterns(content: str) -> Dict[str, List[CardRecord]]:
    """
    Pull Luhn-valid card numbers out of unstructured content.
    
    Args:
        content: Raw page content (HTML or text)
    
    Returns:
        {TEXT_CATEGORY: cards} or an empty dict if nothing matched
    """
    cards = []
    
    for pattern in CARD_PATTERNS:
        for match in pattern.findall(content or ""):
            number = _WHITESPACE.sub("", match)
            if not is_valid_luhn(number):
                continue
            
            cards.append(CardRecord(
                number=number,
                brand=infer_brand(number),
                expiry=DEFAULT_EXPIRY,
                cvc=DEFAULT_CVC,
                country="",
                note=TEXT_NOTE
            ))
    
    logger.debug(f"Text patterns found {len(cards)} valid numbers")
    return {TEXT_CATEGORY: cards} if cards else {}

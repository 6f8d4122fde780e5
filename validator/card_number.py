"""
Card number validation and shape checks.

Shared by every extraction tier:
- Luhn checksum validation
- Brand inference from the number prefix
- Shape tests used by the row classifier (country, expiry, CVC)
"""

import re
from typing import List, Tuple

MIN_CARD_LENGTH = 13
MAX_CARD_LENGTH = 19

UNKNOWN_BRAND = "Unknown"

# Ordered: first match wins
BRAND_PREFIXES: List[Tuple[str, re.Pattern]] = [
    ("Visa", re.compile(r"^4")),
    ("Mastercard", re.compile(r"^(5[1-5]|2[2-7])")),
    ("American Express", re.compile(r"^3[47]")),
    ("Diners", re.compile(r"^3[0689]")),
    ("Discover", re.compile(r"^(6011|65)")),
    ("JCB", re.compile(r"^35")),
    ("China UnionPay", re.compile(r"^62")),
]

_NON_DIGIT = re.compile(r"\D", re.ASCII)
_WHITESPACE = re.compile(r"\s+")
_COUNTRY_CODE = re.compile(r"^[A-Z]{2}$")
_EXPIRY = re.compile(r"\d{2}/\d{4}", re.ASCII)
_CVC = re.compile(r"^\d{3,4}$", re.ASCII)


def clean_card_number(card_number: str) -> str:
    """Strip every non-digit character."""
    return _NON_DIGIT.sub("", card_number or "")


def is_valid_luhn(number_text: str) -> bool:
    """
    Validate a card number with the Luhn algorithm.
    
    Non-digit characters are ignored. Numbers shorter than 13 or longer
    than 19 digits are rejected whatever their checksum.
    
    Args:
        number_text: Raw card number, possibly with spaces or dashes
    
    Returns:
        True if the checksum is valid
    """
    digits = clean_card_number(number_text)
    
    if len(digits) < MIN_CARD_LENGTH or len(digits) > MAX_CARD_LENGTH:
        return False
    
    total = 0
    # Walk right to left, doubling every second digit
    for position, char in enumerate(reversed(digits)):
        digit = int(char)
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    
    return total % 10 == 0


def infer_brand(number: str) -> str:
    """
    Guess the card brand from the number prefix.
    
    Returns one of Visa, Mastercard, American Express, Diners, Discover,
    JCB, China UnionPay or Unknown.
    """
    number = _WHITESPACE.sub("", number or "")
    
    for brand, pattern in BRAND_PREFIXES:
        if pattern.match(number):
            return brand
    return UNKNOWN_BRAND


def is_country_code(text: str) -> bool:
    """Check for an ISO-like country code: exactly two uppercase letters."""
    return bool(_COUNTRY_CODE.match((text or "").strip()))


def looks_like_expiry(text: str) -> bool:
    """Check for an MM/YYYY date anywhere in the text."""
    return bool(_EXPIRY.search(text or ""))


def looks_like_cvc(text: str) -> bool:
    """
    Check for a 3 or 4 digit security code.
    
    The whole cell must be the code: "7373 (Amex)" is not a CVC, so
    dates like "03/2030" never pass for one either.
    """
    return bool(_CVC.match((text or "").strip()))


def is_cvc_sentinel(text: str) -> bool:
    """Check for the "none" / "not applicable" CVC markers."""
    lowered = (text or "").strip().lower()
    return lowered == "none" or "not applicable" in lowered

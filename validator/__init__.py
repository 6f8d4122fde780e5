"""
Validator module initialization.
"""

from validator.card_number import (
    is_valid_luhn,
    infer_brand,
    clean_card_number,
    is_country_code,
    looks_like_expiry,
    looks_like_cvc,
    is_cvc_sentinel,
    UNKNOWN_BRAND
)

__all__ = [
    "is_valid_luhn",
    "infer_brand",
    "clean_card_number",
    "is_country_code",
    "looks_like_expiry",
    "looks_like_cvc",
    "is_cvc_sentinel",
    "UNKNOWN_BRAND"
]

"""
Positional + content-shape classification of a table row.

Built for the column layouts of the Adyen test card tables, where the
first cell is always the number and the remaining columns vary by table
(brand/country/expiry/CVC in different orders, free-text notes last).
A field, once assigned, is only overwritten where the precedence below
says so.
"""

import logging
from typing import Dict, Optional, Sequence

from normalizer.card_schema import CardRecord, DEFAULT_CVC, DEFAULT_EXPIRY
from validator.card_number import (
    clean_card_number,
    is_country_code,
    is_cvc_sentinel,
    is_valid_luhn,
    looks_like_cvc,
    looks_like_expiry,
)

logger = logging.getLogger(__name__)

NOTE_SEPARATOR = " | "


def classify_row(cells: Sequence[str]) -> Optional[CardRecord]:
    """
    Map the cell texts of one row to card fields.
    
    Args:
        cells: Cell texts in column order
    
    Returns:
        CardRecord, or None when the row has no Luhn-valid number
    """
    fields: Dict[str, str] = {
        "number": "",
        "brand": "",
        "expiry": "",
        "cvc": "",
        "country": "",
        "note": "",
    }
    
    for index, raw in enumerate(cells):
        text = (raw or "").strip()
        
        if index == 0:
            fields["number"] = clean_card_number(text)
        
        elif index == 1:
            if is_country_code(text):
                fields["country"] = text
            else:
                fields["brand"] = text
        
        elif index == 2:
            if looks_like_expiry(text):
                fields["expiry"] = text
            elif not fields["brand"]:
                fields["brand"] = text
        
        elif index == 3:
            if is_country_code(text):
                fields["country"] = text
            elif looks_like_cvc(text) or is_cvc_sentinel(text):
                fields["cvc"] = text
            elif not fields["expiry"] and looks_like_expiry(text):
                fields["expiry"] = text
        
        elif index == 4:
            if is_country_code(text):
                fields["country"] = text
            elif not fields["cvc"] and (looks_like_cvc(text) or text.lower() == "none"):
                fields["cvc"] = text
        
        elif text:
            if fields["note"]:
                fields["note"] += NOTE_SEPARATOR
            fields["note"] += text
    
    if not fields["number"] or not is_valid_luhn(fields["number"]):
        logger.debug(f"Rejected row {list(cells)!r}: no valid card number")
        return None
    
    if not fields["expiry"]:
        fields["expiry"] = DEFAULT_EXPIRY
    if not fields["cvc"]:
        fields["cvc"] = DEFAULT_CVC
    
    return CardRecord(**fields)

"""
Extractor module initialization.
"""

from extractor.row_classifier import classify_row
from extractor.table_extractor import extract_tables, parse_document, find_category_for_table, DEFAULT_CATEGORY
from extractor.text_pattern import extract_text_patterns, TEXT_CATEGORY
from extractor.fallback import load_fallback_cards, fallback_version
from extractor.adyen import AdyenExtractor
from extractor.registry import get_extractor, available_sources, EXTRACTORS

__all__ = [
    "classify_row",
    "extract_tables",
    "parse_document",
    "find_category_for_table",
    "DEFAULT_CATEGORY",
    "extract_text_patterns",
    "TEXT_CATEGORY",
    "load_fallback_cards",
    "fallback_version",
    "AdyenExtractor",
    "get_extractor",
    "available_sources",
    "EXTRACTORS"
]

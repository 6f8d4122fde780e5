"""
Table extraction using lxml XPath.

Every <table> in the page is read row by row; the category of a table
is the nearest h2/h3 heading before it in document order.
"""

import logging
import re
from typing import Dict, List, Optional

from lxml import etree
from lxml import html as lxml_html
from lxml.etree import _Element

from extractor.row_classifier import classify_row
from normalizer.card_schema import CardRecord

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "Other"
MIN_ROW_CELLS = 3

# Heading permalink widgets render their label before the title text
_ANCHOR_PREFIX = re.compile(r"^Anchor")
_WHITESPACE = re.compile(r"\s+")


def parse_document(html: str) -> Optional[_Element]:
    """
    Best-effort HTML parse.
    
    The recovering parser tolerates the broken markup real pages carry.
    Returns None only when no tree can be built at all (e.g. blank input).
    """
    parser = lxml_html.HTMLParser(recover=True)
    try:
        try:
            return lxml_html.document_fromstring(html, parser=parser)
        except ValueError:
            # str input carrying an XML encoding declaration
            return lxml_html.document_fromstring(html.encode("utf-8"), parser=parser)
    except (etree.LxmlError, ValueError) as e:
        logger.warning(f"Failed to parse HTML: {e}")
        return None


def find_category_for_table(table: _Element) -> str:
    """
    Name a table after the closest preceding h2/h3 heading.
    
    Args:
        table: <table> element
    
    Returns:
        Cleaned heading text, or DEFAULT_CATEGORY
    """
    headings = table.xpath("preceding::h2 | preceding::h3")
    if not headings:
        return DEFAULT_CATEGORY
    
    # XPath union results come back in document order
    text = headings[-1].text_content().strip()
    text = _ANCHOR_PREFIX.sub("", text)
    text = _WHITESPACE.sub(" ", text).strip()
    
    return text or DEFAULT_CATEGORY


def extract_cards_from_table(table: _Element) -> List[CardRecord]:
    """Classify every row of a table that has at least three cells."""
    cards = []
    
    for row in table.xpath(".//tr"):
        cells = row.xpath(".//td")
        if len(cells) < MIN_ROW_CELLS:
            continue
        
        card = classify_row([cell.text_content() for cell in cells])
        if card is not None:
            cards.append(card)
    
    return cards


def extract_tables(document: Optional[_Element]) -> Dict[str, List[CardRecord]]:
    """
    Extract cards from every table of a parsed document.
    
    Args:
        document: Root element from parse_document (None is treated as empty)
    
    Returns:
        Category name -> cards, in discovery order. Categories with no
        valid rows are left out.
    """
    categories: Dict[str, List[CardRecord]] = {}
    if document is None:
        return categories
    
    tables = document.xpath("//table")
    logger.debug(f"Found {len(tables)} tables")
    
    for table in tables:
        cards = extract_cards_from_table(table)
        if not cards:
            continue
        
        category = find_category_for_table(table)
        categories.setdefault(category, []).extend(cards)
        logger.debug(f"Table '{category}': {len(cards)} cards")
    
    return categories

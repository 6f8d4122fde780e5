"""
Adyen test card extraction strategy.

Three tiers, tried in order until one yields cards:
1. Tables on the page (row classifier)
2. Card-number-shaped digit groups in the raw content
3. The static fallback catalogue (never empty)
"""

import logging

from extractor.fallback import load_fallback_cards
from extractor.table_extractor import extract_tables, parse_document
from extractor.text_pattern import extract_text_patterns
from storage.card_store import CardStore

logger = logging.getLogger(__name__)


class AdyenExtractor:
    """
    Extract test cards from the Adyen "test card numbers" documentation page.
    """
    
    source = "adyen"
    
    def extract(self, html: str) -> CardStore:
        """
        Run the extraction tiers over a page.
        
        Args:
            html: Page HTML
        
        Returns:
            Populated CardStore (never empty)
        """
        categories = extract_tables(parse_document(html))
        if categories:
            logger.info(f"Table extraction found {len(categories)} categories")
            return CardStore(categories)
        
        logger.info("No cards in tables. Trying text patterns...")
        categories = extract_text_patterns(html)
        if categories:
            logger.info("Text pattern extraction found cards")
            return CardStore(categories)
        
        logger.warning("Automated extraction found nothing. Using fallback catalogue.")
        return CardStore(load_fallback_cards())

"""
In-memory card store and query surface.

A store is built once from a category -> cards mapping and is read-only
afterwards. Re-extraction builds a new store instead of updating one.
"""

import json
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from normalizer.card_schema import CardRecord, CategorizedCardRecord

logger = logging.getLogger(__name__)


class CardStore:
    """
    Category -> ordered cards, with the lookups used by front ends.
    
    Category order is the order categories were first populated; card
    order inside a category is discovery order.
    """
    
    def __init__(self, categories: Optional[Mapping[str, Iterable[CardRecord]]] = None):
        """
        Args:
            categories: Mapping to copy. Later changes to it are not seen.
        """
        self._cards: Dict[str, Tuple[CardRecord, ...]] = {
            name: tuple(cards) for name, cards in (categories or {}).items()
        }
    
    def __len__(self) -> int:
        return self.get_total_count()
    
    def __repr__(self):
        return f"<CardStore {len(self._cards)} categories, {self.get_total_count()} cards>"
    
    def is_empty(self) -> bool:
        return not self._cards
    
    def category_names(self) -> List[str]:
        return list(self._cards)
    
    def _iter_cards(self):
        for category, cards in self._cards.items():
            for card in cards:
                yield category, card
    
    def get_all_cards(self) -> Dict[str, List[CardRecord]]:
        """Snapshot of the whole store (new containers, shared immutable records)."""
        return {name: list(cards) for name, cards in self._cards.items()}
    
    def get_cards_by_category(self, category: str) -> List[CardRecord]:
        """Cards of one category, or an empty list."""
        return list(self._cards.get(category, ()))
    
    def get_cards_by_brand(self, brand: str) -> List[CardRecord]:
        """Cards whose brand contains `brand`, case-insensitively."""
        needle = brand.lower()
        return [card for _, card in self._iter_cards() if needle in card.brand.lower()]
    
    def get_cards_by_country(self, country: str) -> List[CardRecord]:
        """Cards issued in `country` (exact, case-sensitive code match)."""
        return [card for _, card in self._iter_cards() if card.country == country]
    
    def search_cards(self, term: str) -> List[CategorizedCardRecord]:
        """
        Case-insensitive search over number, brand, country and category name.
        
        Args:
            term: Search term
        
        Returns:
            Matching cards annotated with the category they belong to
        """
        needle = term.lower()
        results = []
        
        for category, card in self._iter_cards():
            haystacks = (card.number, card.brand, card.country, category)
            if any(needle in value.lower() for value in haystacks):
                results.append(CategorizedCardRecord(**card.model_dump(), category=category))
        
        logger.debug(f"Search '{term}' matched {len(results)} cards")
        return results
    
    def get_total_count(self) -> int:
        """Total number of cards across categories."""
        return sum(len(cards) for cards in self._cards.values())
    
    def get_scraping_stats(self) -> Dict[str, Any]:
        """
        Summary of the extraction result.
        
        Returns:
            {
                "total_cards": int,
                "categories": int,
                "categories_list": [str],
                "cards_by_category": {str: int}
            }
        """
        return {
            "total_cards": self.get_total_count(),
            "categories": len(self._cards),
            "categories_list": self.category_names(),
            "cards_by_category": {name: len(cards) for name, cards in self._cards.items()},
        }
    
    def to_dict(self) -> Dict[str, List[Dict[str, str]]]:
        """Plain-data form of the store, as exported."""
        return {
            name: [card.to_export() for card in cards]
            for name, cards in self._cards.items()
        }
    
    def export_to_json(self) -> str:
        """Pretty-printed JSON of the whole store, non-ASCII kept as is."""
        return json.dumps(self.to_dict(), indent=4, ensure_ascii=False)

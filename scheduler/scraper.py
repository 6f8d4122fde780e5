"""
Scraper: fetch a source page, extract its cards, serve queries.

Each instance owns its own store. The page is fetched and extracted
during construction; refresh() repeats the run and swaps the store only
once the new one is complete.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from extractor.registry import get_extractor
from fetcher.page_loader import PageContent, load_page
from normalizer.card_schema import CardRecord, CategorizedCardRecord
from storage.card_store import CardStore
from utils.settings import ScraperSettings, get_settings

logger = logging.getLogger(__name__)

FetchFunc = Callable[..., PageContent]


class CardScraper:
    """
    Test card scraper for one source.
    
    Raises FetchError from the constructor when the page cannot be
    retrieved; no partial store is ever exposed.
    """
    
    def __init__(
        self,
        source: Optional[str] = None,
        settings: Optional[ScraperSettings] = None,
        fetch: FetchFunc = load_page,
        proxy: Optional[str] = None
    ):
        """
        Args:
            source: Source name (defaults to settings.source)
            settings: Settings (defaults to the cached environment settings)
            fetch: Page loader, called as fetch(url, proxy=..., ...)
            proxy: Proxy override (defaults to settings.proxy)
        """
        self.settings = settings or get_settings()
        self.source = (source or self.settings.source).lower()
        self.url = self.settings.url_for(self.source)
        self.proxy = proxy if proxy is not None else self.settings.proxy
        self.extractor = get_extractor(self.source)
        self._fetch = fetch
        self._store = CardStore()
        
        self.refresh()
    
    @property
    def store(self) -> CardStore:
        return self._store
    
    def refresh(self) -> CardStore:
        """
        Fetch and extract again, replacing the store.
        
        Returns:
            The new store
        
        Raises:
            FetchError: The previous store is kept
        """
        page = self._fetch(
            self.url,
            proxy=self.proxy,
            timeout_ms=self.settings.timeout_ms,
            headless=self.settings.headless,
            user_agent=self.settings.user_agent,
            ignore_https_errors=self.settings.ignore_https_errors
        )
        
        store = self.extractor.extract(page.html)
        self._store = store
        
        logger.info(f"Scraped {store.get_total_count()} cards in {len(store.category_names())} categories from {self.source}")
        return store
    
    # Query surface, delegated to the current store
    
    def get_all_cards(self) -> Dict[str, List[CardRecord]]:
        return self._store.get_all_cards()
    
    def get_cards_by_category(self, category: str) -> List[CardRecord]:
        return self._store.get_cards_by_category(category)
    
    def get_cards_by_brand(self, brand: str) -> List[CardRecord]:
        return self._store.get_cards_by_brand(brand)
    
    def get_cards_by_country(self, country: str) -> List[CardRecord]:
        return self._store.get_cards_by_country(country)
    
    def search_cards(self, term: str) -> List[CategorizedCardRecord]:
        return self._store.search_cards(term)
    
    def get_total_count(self) -> int:
        return self._store.get_total_count()
    
    def get_scraping_stats(self) -> Dict[str, Any]:
        return self._store.get_scraping_stats()
    
    def export_to_json(self) -> str:
        return self._store.export_to_json()

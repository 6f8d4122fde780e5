"""
Command-line entry point: scrape a source and print or save the cards.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from extractor.registry import available_sources
from scheduler.scraper import CardScraper
from utils.exceptions import ScraperError
from utils.logger import setup_logging
from utils.settings import get_settings

logger = logging.getLogger(__name__)


def _dump_cards(cards) -> str:
    return json.dumps([card.model_dump() for card in cards], indent=4, ensure_ascii=False)


def run(
    source: Optional[str] = None,
    proxy: Optional[str] = None,
    output: Optional[str] = None,
    stats: bool = False,
    search: Optional[str] = None,
    brand: Optional[str] = None,
    country: Optional[str] = None,
    category: Optional[str] = None,
    scraper_factory=None
) -> bool:
    """
    Scrape a source and write the requested view to stdout or a file.
    
    Args:
        source: Source name (defaults to settings)
        proxy: Proxy override
        output: File to write to instead of stdout
        stats: Print extraction statistics
        search: Free-text search term
        brand: Brand substring filter
        country: Exact country code filter
        category: Category name filter
        scraper_factory: Scraper constructor (defaults to CardScraper)
    
    Returns:
        True if successful
    """
    try:
        scraper = (scraper_factory or CardScraper)(source=source, proxy=proxy)
    except ScraperError as e:
        logger.error(f"Scraping failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return False
    
    if stats:
        text = json.dumps(scraper.get_scraping_stats(), indent=4, ensure_ascii=False)
    elif search is not None:
        text = _dump_cards(scraper.search_cards(search))
    elif brand is not None:
        text = _dump_cards(scraper.get_cards_by_brand(brand))
    elif country is not None:
        text = _dump_cards(scraper.get_cards_by_country(country))
    elif category is not None:
        text = _dump_cards(scraper.get_cards_by_category(category))
    else:
        text = scraper.export_to_json()
    
    if output:
        path = Path(output)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text + "\n", encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to write {path}: {e}")
            print(f"Error: cannot write {path}: {e}", file=sys.stderr)
            return False
        logger.info(f"Wrote {path}")
    else:
        print(text)
    
    return True


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    
    parser = argparse.ArgumentParser(description="Payment test card scraper")
    parser.add_argument("--source", default=settings.source, choices=available_sources(), help="Card source")
    parser.add_argument("--proxy", default=settings.proxy, help="HTTP proxy URL")
    parser.add_argument("--output", help="Write the result to this file")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    
    query = parser.add_mutually_exclusive_group()
    query.add_argument("--stats", action="store_true", help="Print extraction statistics")
    query.add_argument("--search", help="Search number, brand, country and category")
    query.add_argument("--brand", help="Cards whose brand contains this text")
    query.add_argument("--country", help="Cards issued in this country code")
    query.add_argument("--category", help="Cards of one category")
    return parser


def main(argv: Optional[List[str]] = None):
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, get_settings().log_file)
    
    success = run(
        source=args.source,
        proxy=args.proxy,
        output=args.output,
        stats=args.stats,
        search=args.search,
        brand=args.brand,
        country=args.country,
        category=args.category
    )
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()

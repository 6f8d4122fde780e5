"""
Scheduler module initialization.
"""

from scheduler.scraper import CardScraper
from scheduler.run_pipeline import run, main

__all__ = ["CardScraper", "run", "main"]

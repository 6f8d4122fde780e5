"""
Utils module initialization.
"""

from utils.logger import setup_logging
from utils.exceptions import ScraperError, FetchError, UnknownSourceError, ERROR_CATALOG
from utils.settings import ScraperSettings, get_settings

__all__ = [
    "setup_logging",
    "ScraperError",
    "FetchError",
    "UnknownSourceError",
    "ERROR_CATALOG",
    "ScraperSettings",
    "get_settings"
]

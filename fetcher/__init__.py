"""
Fetcher module initialization.
"""

from fetcher.page_loader import load_page, PageContent

__all__ = ["load_page", "PageContent"]

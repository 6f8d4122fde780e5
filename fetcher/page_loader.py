"""
Playwright-based page loading.

Handles:
- Browser launch (optionally through an HTTP proxy) and cleanup
- Single navigation attempt, no retry
- Status and empty-content checks
"""

import logging
import time
from datetime import datetime
from typing import Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright
from pydantic import BaseModel, Field

from utils.exceptions import FetchError

logger = logging.getLogger(__name__)

HTTP_OK = 200


class PageContent(BaseModel):
    """Raw page content returned by the fetcher."""
    html: str
    url: str
    status: int
    timestamp: datetime = Field(default_factory=datetime.utcnow)
    load_time_ms: float = 0.0


def _launch_options(headless: bool, proxy: Optional[str]) -> dict:
    options = {"headless": headless}
    if proxy:
        options["proxy"] = {"server": proxy}
    return options


def load_page(
    url: str,
    proxy: Optional[str] = None,
    timeout_ms: int = 60000,
    headless: bool = True,
    user_agent: Optional[str] = None,
    ignore_https_errors: bool = True,
    wait_for_state: str = "domcontentloaded"
) -> PageContent:
    """
    Load a page once and return its HTML.
    
    Args:
        url: The URL to load
        proxy: Optional proxy server URL (e.g. "http://proxy:3128")
        timeout_ms: Navigation timeout in milliseconds
        headless: Whether to run in headless mode
        user_agent: Browser user agent override
        ignore_https_errors: Accept invalid TLS certificates
        wait_for_state: State to wait for ('load', 'domcontentloaded', 'networkidle')
    
    Returns:
        PageContent with a 200 status and non-empty HTML
    
    Raises:
        FetchError: On transport failure, non-200 status or empty content
    """
    start_time = time.time()
    logger.info(f"Loading page: {url}" + (f" via proxy {proxy}" if proxy else ""))
    
    try:
        with sync_playwright() as playwright:
            browser = playwright.chromium.launch(**_launch_options(headless, proxy))
            try:
                context = browser.new_context(
                    user_agent=user_agent,
                    ignore_https_errors=ignore_https_errors
                )
                page = context.new_page()
                page.set_default_timeout(timeout_ms)
                
                response = page.goto(url, wait_until=wait_for_state)
                status = response.status if response is not None else 0
                html = page.content()
            finally:
                browser.close()
    except PlaywrightError as e:
        logger.error(f"Error loading {url}: {e}")
        raise FetchError("FETCH_003", {"url": url, "reason": str(e)}) from e
    
    load_time_ms = (time.time() - start_time) * 1000
    
    if status != HTTP_OK:
        logger.error(f"Unexpected status {status} for {url}")
        raise FetchError("FETCH_001", {"url": url, "status": status})
    
    if not html or not html.strip():
        logger.error(f"Empty content for {url}")
        raise FetchError("FETCH_002", {"url": url})
    
    logger.info(f"Page loaded in {load_time_ms:.0f}ms. Size: HTML={len(html)} bytes")
    
    return PageContent(
        html=html,
        url=url,
        status=status,
        load_time_ms=load_time_ms
    )

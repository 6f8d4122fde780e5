"""Custom exception classes for the scraping pipeline.

Each exception carries an error_code that maps to ERROR_CATALOG. Only
fetch failures and unknown sources surface to callers; rejected rows and
empty extraction tiers are absorbed by the extractors.
"""

from typing import Any, Dict, Optional


ERROR_CATALOG: Dict[str, str] = {
    "FETCH_001": "Source page returned a non-success HTTP status",
    "FETCH_002": "Source page returned empty content",
    "FETCH_003": "Source page could not be loaded",
    "SOURCE_001": "Unknown card source",
}


class ScraperError(Exception):
    """Base exception for all scraping errors.

    Attributes:
        error_code: Code from ERROR_CATALOG (e.g., "FETCH_001")
        details: Additional context about the error (for logging)
    """

    def __init__(self, error_code: str, details: Optional[Dict[str, Any]] = None):
        self.error_code = error_code
        self.details = details or {}
        super().__init__(error_code)

    @property
    def message(self) -> str:
        return ERROR_CATALOG.get(self.error_code, "Unexpected scraping error")

    def __str__(self) -> str:
        text = f"{self.error_code}: {self.message}"
        if self.details:
            context = ", ".join(f"{key}={value}" for key, value in self.details.items())
            text = f"{text} ({context})"
        return text


class FetchError(ScraperError):
    """Raised when the source page cannot be retrieved.

    Fatal to the extraction run: no card store is produced.
    - Non-200 status (FETCH_001)
    - Empty body (FETCH_002)
    - Browser/transport failure (FETCH_003)
    """

    pass


class UnknownSourceError(ScraperError):
    """Raised when no extractor is registered for the requested source."""

    def __init__(self, source: str):
        super().__init__("SOURCE_001", {"source": source})
        self.source = source

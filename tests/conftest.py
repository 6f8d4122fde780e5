from typing import Optional

import pytest

from fetcher.page_loader import PageContent
from normalizer.card_schema import CardRecord
from storage.card_store import CardStore
from utils.settings import ScraperSettings

ADYEN_PAGE = """
<html>
<head><title>Test card numbers</title></head>
<body>
  <h1>Test card numbers</h1>
  <h2><a class="anchor">Anchor</a>American Express</h2>
  <table>
    <tr><th>Card number</th><th>Brand</th><th>Expiry</th><th>CVC</th><th>Country</th></tr>
    <tr><td>3700 0000 0000 002</td><td>Amex</td><td>03/2030</td><td>7373</td><td>NL</td></tr>
    <tr><td>3714 4963 5398 431</td><td>Amex</td><td>03/2030</td><td>7373</td><td>US</td></tr>
  </table>
  <h2>Visa</h2>
  <p>Cards issued in several countries.</p>
  <h3>Anchor   Visa
      consumer</h3>
  <table>
    <tr><td>4111 1111 1111 1111</td><td>NL</td><td>03/2030</td><td>737</td></tr>
    <tr><td>4444 3333 2222 1111</td><td>Visa Corporate</td><td>03/2030</td><td>737</td><td>GB</td><td>Eight-digit BIN</td></tr>
    <tr><td>4111 1111 1111 1112</td><td>Visa</td><td>03/2030</td><td>737</td></tr>
    <tr><td>only</td><td>two</td></tr>
  </table>
</body>
</html>
"""

TEXT_ONLY_PAGE = """
<html><body>
  <p>Use 4111 1111 1111 1111 for a successful payment.</p>
  <p>The number 1234 5678 9012 3456 is not a card.</p>
</body></html>
"""

EMPTY_PAGE = "<html><body><p>Nothing to see here.</p></body></html>"


@pytest.fixture
def adyen_page() -> str:
    return ADYEN_PAGE


@pytest.fixture
def text_only_page() -> str:
    return TEXT_ONLY_PAGE


@pytest.fixture
def empty_page() -> str:
    return EMPTY_PAGE


@pytest.fixture
def settings() -> ScraperSettings:
    """Settings isolated from the environment and any .env file."""
    return ScraperSettings(_env_file=None, proxy=None)


@pytest.fixture
def make_fetch():
    """Build a fake page loader returning fixed HTML, recording its calls."""
    def factory(html: str, status: int = 200):
        calls = []

        def fetch(url: str, proxy: Optional[str] = None, **kwargs) -> PageContent:
            calls.append({"url": url, "proxy": proxy, **kwargs})
            return PageContent(html=html, url=url, status=status)

        fetch.calls = calls
        return fetch
    return factory


@pytest.fixture
def sample_store() -> CardStore:
    return CardStore({
        "Visa": [
            CardRecord(number="4111111111111111", brand="Visa Classic", country="NL"),
            CardRecord(number="4444333322221111", brand="Visa Corporate", country="GB", note="Eight-digit BIN"),
        ],
        "Mastercard": [
            CardRecord(number="5555555555554444", brand="Mastercard Credit", country="US"),
        ],
        "US Debit": [
            CardRecord(number="6011609900000003", brand="Discover Debit / Accel", expiry="03/30", country="US"),
        ],
    })

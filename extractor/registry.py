"""
Source name -> extraction strategy.
"""

from extractor.adyen import AdyenExtractor
from utils.exceptions import UnknownSourceError

EXTRACTORS = {
    AdyenExtractor.source: AdyenExtractor,
}


def get_extractor(source: str):
    """
    Instantiate the extractor registered for a source.
    
    Raises:
        UnknownSourceError: If no extractor is registered under that name
    """
    try:
        return EXTRACTORS[source.lower()]()
    except KeyError:
        raise UnknownSourceError(source) from None


def available_sources() -> list[str]:
    return sorted(EXTRACTORS)

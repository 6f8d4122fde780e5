"""
Storage module initialization.
"""

from storage.card_store import CardStore

__all__ = ["CardStore"]

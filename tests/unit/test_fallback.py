"""Tests for the static fallback catalogue."""

import pytest

from extractor.fallback import FALLBACK_FILE, fallback_version, load_fallback_cards
from normalizer.card_schema import CardRecord
from validator.card_number import is_valid_luhn


class TestFallbackCatalogue:
    """Test the packaged catalogue."""

    def test_categories_in_order(self):
        categories = load_fallback_cards()
        assert list(categories) == ["US Debit", "Visa", "Visa Electron", "V Pay"]

    def test_counts(self):
        categories = load_fallback_cards()

        assert len(categories["US Debit"]) == 3
        assert len(categories["Visa"]) == 29
        assert len(categories["Visa Electron"]) == 1
        assert len(categories["V Pay"]) == 1

    def test_entries_fully_populated(self):
        for cards in load_fallback_cards().values():
            for card in cards:
                assert isinstance(card, CardRecord)
                assert card.number.isdigit()
                assert card.brand
                assert card.expiry
                assert card.cvc
                assert len(card.country) == 2

    def test_numbers_pass_luhn(self):
        """The catalogue is curated, but its numbers should still be sound."""
        for cards in load_fallback_cards().values():
            for card in cards:
                assert is_valid_luhn(card.number), card.number

    def test_known_entries(self):
        categories = load_fallback_cards()

        first = categories["Visa"][0]
        assert first.number == "4111111145551142"
        assert first.brand == "Visa Classic"
        assert first.note == "Security code optional"

        us_debit = categories["US Debit"][0]
        assert us_debit.expiry == "03/30"
        assert us_debit.country == "US"

    def test_fresh_containers(self):
        first = load_fallback_cards()
        first["Visa"].clear()
        assert len(load_fallback_cards()["Visa"]) == 29

    def test_version(self):
        assert fallback_version() == "2024.2"
        assert FALLBACK_FILE.exists()

    def test_custom_catalogue(self, tmp_path):
        path = tmp_path / "cards.yaml"
        path.write_text(
            'version: "1"\n'
            "categories:\n"
            "  Mastercard:\n"
            "    - number: 5555555555554444\n"
            "      brand: Mastercard\n"
            "      country: \"US\"\n",
            encoding="utf-8"
        )

        categories = load_fallback_cards(path)

        card = categories["Mastercard"][0]
        assert card.number == "5555555555554444"
        assert card.expiry == "03/2030"
        assert card.cvc == "737"
        assert card.note == ""

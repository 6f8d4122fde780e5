"""Tests for the text-pattern fallback tier."""

from extractor.text_pattern import TEXT_CATEGORY, TEXT_NOTE, extract_text_patterns


class TestExtractTextPatterns:
    """Test regex extraction from raw content."""

    def test_single_visa(self, text_only_page):
        categories = extract_text_patterns(text_only_page)

        assert list(categories) == [TEXT_CATEGORY]
        cards = categories[TEXT_CATEGORY]
        assert len(cards) == 1

        card = cards[0]
        assert card.number == "4111111111111111"
        assert card.brand == "Visa"
        assert card.expiry == "03/2030"
        assert card.cvc == "737"
        assert card.country == ""
        assert card.note == TEXT_NOTE

    def test_category_name(self):
        assert TEXT_CATEGORY == "Scraped from text"

    def test_amex_shape(self):
        categories = extract_text_patterns("Amex: 3714 496353 98431")
        cards = categories["Scraped from text"]

        assert [c.number for c in cards] == ["371449635398431"]
        assert cards[0].brand == "American Express"

    def test_diners_shape(self):
        categories = extract_text_patterns("Diners: 3600 666633 3344")
        cards = categories["Scraped from text"]

        assert [c.number for c in cards] == ["36006666333344"]
        assert cards[0].brand == "Diners"

    def test_pattern_order_and_no_dedup(self):
        text = "3600 666633 3344 and 4111111111111111 and again 4111 1111 1111 1111"
        cards = extract_text_patterns(text)["Scraped from text"]

        assert [c.number for c in cards] == [
            "4111111111111111",
            "4111111111111111",
            "36006666333344",
        ]

    def test_non_ascii_digits_ignored(self):
        assert extract_text_patterns("٤١١١ ٤١١١ ٤١١١ ٤١١١") == {}
        assert extract_text_patterns("４１１１ １１１１ １１１１ １１１１") == {}

    def test_nothing_found(self, empty_page):
        assert extract_text_patterns(empty_page) == {}
        assert extract_text_patterns("") == {}

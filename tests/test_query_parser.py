"""Tests for free-text query parsing and classification."""

import pytest

from graphics_api.query import parse, parse_query, tokenize


class TestTokenize:
    def test_lowercases_and_splits_on_whitespace(self):
        assert tokenize("Flat  ICON\tfor\nPayment") == ["flat", "icon", "for", "payment"]

    def test_drops_short_tokens(self):
        assert tokenize("a UI to go far") == ["far"]

    def test_empty_input(self):
        assert tokenize("") == []
        assert tokenize("   ") == []

    @pytest.mark.parametrize(
        "text",
        [
            "ÜBER Straße CAFÉ",
            "Hello, World!! ... ?!",
            "tabs\tand\nnewlines\r\nHERE",
            "MiXeD CaSe Sentence",
            "a bb ccc dddd",
            "🎉 party 🎉🎉🎉",
            "non\u00a0breaking   SPACE",
            "ÅNGSTRÖM x-ray  C3PO",
            "",
        ],
    )
    def test_terms_are_lowercase_and_longer_than_two(self, text):
        for term in tokenize(text):
            assert term == term.lower()
            assert len(term) > 2
            assert not any(ch.isspace() for ch in term)


class TestParseQuery:
    @pytest.mark.parametrize("text", ["flat icon for payment", "team celebrating success", "xyz qqq", ""])
    def test_parsing_is_idempotent(self, text):
        assert parse_query(text) == parse_query(text)

    def test_detects_category_style_and_content_type(self):
        parsed = parse_query("flat icon for payment")

        assert parsed.terms == ["flat", "icon", "for", "payment"]
        assert parsed.detected_categories == ["business"]
        assert parsed.detected_styles == ["flat"]
        assert parsed.detected_content_type == "icon"
        assert parsed.recommended_sources == [
            "phosphor", "lucide", "iconoodle", "doodle-ipsum", "storyset", "ira-design",
        ]

    def test_categories_keep_first_appearance_order(self):
        parsed = parse_query("team celebrating success")

        assert parsed.detected_categories == ["people", "business"]
        assert parsed.detected_styles == []
        assert parsed.detected_content_type is None

    def test_categories_are_not_repeated(self):
        parsed = parse_query("meeting office deal")
        assert parsed.detected_categories == ["business"]

    def test_later_content_type_wins(self):
        assert parse_query("icon illustration").detected_content_type == "illustration"
        assert parse_query("illustration icon").detected_content_type == "icon"

    def test_one_term_can_hit_style_and_content_type(self):
        parsed = parse_query("sketch")
        assert parsed.detected_styles == ["hand-drawn"]
        assert parsed.detected_content_type == "doodle"

    def test_hand_drawn_doodle_ranks_doodle_sources(self):
        parsed = parse_query("hand-drawn doodle")
        assert parsed.recommended_sources == ["doodle-ipsum", "iconoodle"]

    def test_payment_confirmation_is_business(self):
        parsed = parse_query("user sends payment confirmation")
        assert parsed.detected_categories == ["business"]
        assert parsed.recommended_sources[:3] == ["doodle-ipsum", "storyset", "ira-design"]

    def test_no_signal_recommends_nothing(self):
        parsed = parse_query("xyz qqq")
        assert parsed.terms == ["xyz", "qqq"]
        assert parsed.detected_categories == []
        assert parsed.recommended_sources == []

    def test_empty_query(self):
        parsed = parse_query("")
        assert parsed.terms == []
        assert parsed.recommended_sources == []

    def test_parse_alias(self):
        assert parse("flat icon") == parse_query("flat icon")

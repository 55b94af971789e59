"""
TEST DOC: Lexer

WHAT: Tests for input tokenization and normalization
WHY: Every span and classification is built on the token sequence
HOW: Test whitespace handling and edge cases

CASES:
- Simple word tokenization
- Collapsing repeated, leading and trailing whitespace
- Case preservation

EDGE CASES:
- Empty input
- Whitespace-only input
- Tabs, newlines and Unicode whitespace
"""

import pytest

from actor_input.parser.lexer import lex, normalize


class TestLex:
    """Tests for the lex function."""

    def test_simple_words(self):
        """Simple words are tokenized in order."""
        assert lex("take lamp") == ["take", "lamp"]

    def test_collapses_whitespace(self):
        """Leading, trailing and repeated whitespace never produce empty tokens."""
        tokens = lex("  put   rusty  sword   in old   chest  ")
        assert tokens == ["put", "rusty", "sword", "in", "old", "chest"]

    def test_tabs_and_newlines(self):
        """Tabs and newlines are separators too."""
        assert lex("look\tat\npainting") == ["look", "at", "painting"]

    def test_unicode_whitespace(self):
        """Non-breaking and ideographic spaces separate tokens."""
        assert lex("take lamp\u3000now\u00a0please") == ["take", "lamp", "now", "please"]

    def test_case_preserved(self):
        """The lexer does not change case."""
        assert lex("PUT Sword") == ["PUT", "Sword"]

    def test_punctuation_kept_in_tokens(self):
        """Punctuation is part of the surrounding token."""
        assert lex("say hello, world.") == ["say", "hello,", "world."]

    @pytest.mark.parametrize("text", ["", " ", "   ", "\t\n", "\u00a0"])
    def test_blank_input(self, text: str):
        """Blank input produces no tokens."""
        assert lex(text) == []


class TestNormalize:
    """Tests for the normalize function."""

    def test_single_spaces(self):
        """Whitespace runs collapse to single spaces."""
        assert normalize("  put   rusty  sword  ") == "put rusty sword"

    @pytest.mark.parametrize("text", ["", "   ", "\t"])
    def test_blank_input(self, text: str):
        """Blank input normalizes to the empty string."""
        assert normalize(text) == ""

    @pytest.mark.parametrize(
        "text",
        [
            "look",
            "put rusty sword in old chest",
            "  spaced   out\tinput ",
            "",
        ],
    )
    def test_idempotent(self, text: str):
        """Normalizing normalized input changes nothing."""
        once = normalize(text)
        assert normalize(once) == once

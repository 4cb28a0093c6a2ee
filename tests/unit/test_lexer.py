"""
Unit tests for the asciimath tokenizer.

Tests the lexer.py module: token classes, longest-match keywords, numbers,
quoted and raw text, and source offsets.
"""
import pytest
from asciimath_unicode.lexer import Token, TokenKind, tokenize


def kinds_and_texts(text):
    return [(t.kind, t.text) for t in tokenize(text)]


class TestTokenClasses:
    """Test that each kind of input lexes to the expected token class."""

    def test_single_letter_identifiers(self):
        """Runs of letters that are not keywords split into single letters."""
        assert kinds_and_texts("ab") == [
            (TokenKind.IDENTIFIER, "a"),
            (TokenKind.IDENTIFIER, "b"),
        ]

    def test_number_with_decimal_point(self):
        assert kinds_and_texts("3.14") == [(TokenKind.NUMBER, "3.14")]

    def test_number_stops_at_second_point(self):
        assert kinds_and_texts("1.2.3") == [
            (TokenKind.NUMBER, "1.2"),
            (TokenKind.OPERATOR, "."),
            (TokenKind.NUMBER, "3"),
        ]

    def test_trailing_point_is_not_part_of_number(self):
        assert kinds_and_texts("2.") == [
            (TokenKind.NUMBER, "2"),
            (TokenKind.OPERATOR, "."),
        ]

    def test_scripts_and_brackets(self):
        assert [t.kind for t in tokenize("x^(2)_i")] == [
            TokenKind.IDENTIFIER,
            TokenKind.POWER,
            TokenKind.OPEN,
            TokenKind.NUMBER,
            TokenKind.CLOSE,
            TokenKind.SUBSCRIPT,
            TokenKind.IDENTIFIER,
        ]

    def test_fraction_bar_is_operator(self):
        assert kinds_and_texts("/") == [(TokenKind.OPERATOR, "/")]

    def test_keyword(self):
        assert kinds_and_texts("alpha") == [(TokenKind.KEYWORD, "alpha")]

    def test_non_ascii_is_operator(self):
        assert kinds_and_texts("ρ") == [(TokenKind.OPERATOR, "ρ")]

    def test_whitespace_is_skipped(self):
        assert kinds_and_texts("  x \t\n y ") == [
            (TokenKind.IDENTIFIER, "x"),
            (TokenKind.IDENTIFIER, "y"),
        ]

    def test_empty_input(self):
        assert list(tokenize("")) == []


class TestLongestMatch:
    """Test that the longest reserved string wins."""

    @pytest.mark.parametrize("text", ["sinh", "<=>", "|-->", "***", "int"])
    def test_longest_keyword(self, text):
        first = next(tokenize(text))
        expected = "|--" if text == "|-->" else text
        assert first.text == expected

    def test_sum_is_not_split(self):
        assert kinds_and_texts("sum") == [(TokenKind.KEYWORD, "sum")]

    def test_keyword_inside_letters(self):
        """'sinx' is the keyword 'sin' followed by 'x'."""
        assert kinds_and_texts("sinx") == [
            (TokenKind.KEYWORD, "sin"),
            (TokenKind.IDENTIFIER, "x"),
        ]

    def test_arrow_beats_minus(self):
        assert kinds_and_texts("->") == [(TokenKind.KEYWORD, "->")]


class TestText:
    """Test quoted and raw text."""

    def test_quoted_text(self):
        assert kinds_and_texts('"hello world"') == [(TokenKind.TEXT, "hello world")]

    def test_unterminated_quote_is_operator(self):
        assert kinds_and_texts('"x') == [
            (TokenKind.OPERATOR, '"'),
            (TokenKind.IDENTIFIER, "x"),
        ]

    def test_raw_text_keyword(self):
        """text(...) takes its body verbatim."""
        assert kinds_and_texts("text(a sin b)") == [(TokenKind.TEXT, "a sin b")]

    def test_text_without_parens_is_keyword(self):
        assert kinds_and_texts("text x") == [
            (TokenKind.KEYWORD, "text"),
            (TokenKind.IDENTIFIER, "x"),
        ]


class TestPositions:
    """Test source offsets and laziness."""

    def test_offsets(self):
        toks = list(tokenize("ab + 12"))
        assert [t.pos for t in toks] == [0, 1, 3, 5]

    def test_tokenize_is_lazy(self):
        stream = tokenize("x y")
        assert next(stream) == Token(TokenKind.IDENTIFIER, "x", 0)
        assert next(stream) == Token(TokenKind.IDENTIFIER, "y", 2)
        with pytest.raises(StopIteration):
            next(stream)


class TestShortcodes:
    """Test emoji shortcode tokens."""

    def test_shortcode_is_keyword(self):
        assert kinds_and_texts(":hand:") == [(TokenKind.KEYWORD, ":hand:")]

    def test_unknown_shortcode_is_not_keyword(self):
        assert (TokenKind.KEYWORD, ":notanemojiatall:") not in kinds_and_texts(":notanemojiatall:")

    def test_colon_equals_still_reserved(self):
        assert kinds_and_texts(":=") == [(TokenKind.KEYWORD, ":=")]

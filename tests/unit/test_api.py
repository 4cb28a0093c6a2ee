"""
Unit tests for the programmatic conversion API.

Tests the api.py module: best-effort and strict conversion, streaming
output, parsing, and the accepted renderer forms.
"""
import io
import warnings

import pytest
from asciimath_unicode import (
    InlineRenderer,
    ParseError,
    UnmatchedBracket,
    convert_unicode,
    convert_unicode_strict,
    parse_unicode,
    write_unicode,
)
from asciimath_unicode.tree import Row


class TestConvertUnicode:
    """Test the best-effort convert_unicode()."""

    def test_basic(self):
        assert convert_unicode("1/2") == "½"

    def test_sum_example(self):
        assert convert_unicode("sum_(i=1)^n i^3") == "∑₍ᵢ₌₁₎ⁿi³"

    def test_invalid_input_returned_unchanged(self):
        with pytest.warns(RuntimeWarning, match="leaving input unchanged"):
            assert convert_unicode("(x") == "(x"

    def test_valid_input_emits_no_warning(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            convert_unicode("x^2")


class TestConvertUnicodeStrict:
    """Test convert_unicode_strict()."""

    def test_basic(self):
        assert convert_unicode_strict("alpha") == "α"

    def test_raises_parse_error(self):
        with pytest.raises(UnmatchedBracket):
            convert_unicode_strict("x)")

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            convert_unicode_strict("x^")


class TestWriteUnicode:
    """Test streaming output with write_unicode()."""

    def test_writes_rendering(self):
        sink = io.StringIO()
        write_unicode("x^2 + 1/2", sink)
        assert sink.getvalue() == "x²+½"

    def test_writes_input_on_error(self):
        sink = io.StringIO()
        with pytest.warns(RuntimeWarning):
            write_unicode("(x", sink)
        assert sink.getvalue() == "(x"


class TestParseUnicode:
    """Test parse_unicode()."""

    def test_returns_row(self):
        assert isinstance(parse_unicode("x y"), Row)

    def test_raises_parse_error(self):
        with pytest.raises(ParseError):
            parse_unicode("()")


class TestRendererArgument:
    """Test the forms accepted for the renderer argument."""

    def test_instance(self):
        assert convert_unicode("1/2", InlineRenderer(vulgar_fracs=False)) == "¹⁄₂"

    def test_mapping(self):
        assert convert_unicode("1/2", {"vulgar_fracs": False}) == "¹⁄₂"

    def test_mapping_with_preset(self):
        assert convert_unicode("1/2", {"preset": "linear"}) == "1/2"

    def test_config_path(self, write_config):
        path = write_config("symbols: false\n")
        assert convert_unicode("alpha", path) == "alpha"
        assert convert_unicode("alpha", str(path)) == "alpha"

    def test_invalid_type(self):
        with pytest.raises(TypeError):
            convert_unicode("x", 42)

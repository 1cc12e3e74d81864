"""Tests for value guards, price formatting and rich-text sanitization."""

from __future__ import annotations

from decimal import Decimal

import pytest

from publicsite.rendering.sanitize import sanitize_html
from publicsite.rendering.styles import (
    css_url,
    format_price,
    safe_padding,
    safe_url,
    truncate,
)
from publicsite.utils.colors import safe_color, tint


class TestSafeColor:
    @pytest.mark.parametrize("value", ["#fff", "#0ea5e9", "rgb(1, 2, 3)", "rgba(0,0,0,0.5)", "teal"])
    def test_accepts(self, value) -> None:
        assert safe_color(value, "#000") == value

    @pytest.mark.parametrize(
        "value",
        ["red; background: url(x)", "expression(alert(1))", "#12", None, 42, "url(javascript:x)"],
    )
    def test_rejects(self, value) -> None:
        assert safe_color(value, "#000") == "#000"


class TestTint:
    def test_six_digit_hex_gets_alpha(self) -> None:
        assert tint("#7c3aed", "15", "#f8fafc") == "#7c3aed15"

    def test_three_digit_hex_is_expanded(self) -> None:
        assert tint("#abc", "15", "#f8fafc") == "#aabbcc15"

    @pytest.mark.parametrize("color", ["red", "rgb(1, 2, 3)", "#abcd", "#7c3aed80"])
    def test_other_colors_use_fallback(self, color) -> None:
        assert tint(color, "15", "#f8fafc") == "#f8fafc"


class TestSafePadding:
    def test_lengths(self) -> None:
        assert safe_padding("10px  2rem", "0") == "10px 2rem"

    def test_rejects_injection(self) -> None:
        assert safe_padding("10px; color: red", "5px") == "5px"


class TestSafeUrl:
    @pytest.mark.parametrize(
        "value",
        ["https://a.com", "http://a.com/x?y=1", "/about", "#enroll", "mailto:hi@a.com", "tel:+1555"],
    )
    def test_allowed(self, value) -> None:
        assert safe_url(value) == value

    @pytest.mark.parametrize(
        "value", ["javascript:alert(1)", "JaVaScRiPt:alert(1)", "data:text/html,x", "java\tscript:x"]
    )
    def test_rejected(self, value) -> None:
        assert safe_url(value, "#") == "#"

    def test_css_url_rejects_quotes(self) -> None:
        assert css_url("https://a.com/x.png") == 'url("https://a.com/x.png")'
        assert css_url('https://a.com/x.png")') is None
        assert css_url("mailto:x@a.com") is None


class TestFormatPrice:
    @pytest.mark.parametrize(
        "amount, currency, expected",
        [
            (49, "USD", "$49 USD"),
            (Decimal("19.5"), "usd", "$19.50 USD"),
            (0, "USD", "$0 USD"),
            (1999, "EUR", "€1,999 EUR"),
            (10, "XYZ", "10 XYZ"),
            ("garbage", "USD", "$0 USD"),
        ],
    )
    def test_format(self, amount, currency, expected) -> None:
        assert format_price(amount, currency) == expected


class TestTruncate:
    def test_short_text_untouched(self) -> None:
        assert truncate("Hello") == "Hello"

    def test_long_text_is_cut_to_limit(self) -> None:
        result = truncate("word " * 60)
        assert len(result) <= 120
        assert result.endswith("…")

    def test_empty(self) -> None:
        assert truncate(None) == ""


class TestSanitizeHtml:
    def test_script_removed(self) -> None:
        assert "<script" not in sanitize_html("<script>alert(1)</script><p>ok</p>")

    def test_javascript_href_dropped(self) -> None:
        cleaned = sanitize_html('<a href="javascript:alert(1)">x</a>')
        assert "javascript:" not in cleaned

    def test_formatting_kept(self) -> None:
        html = '<h2>Title</h2><p><strong>Bold</strong> and <a href="https://a.com">link</a></p>'
        assert sanitize_html(html) == html

    def test_style_attribute_dropped(self) -> None:
        assert "style" not in sanitize_html('<p style="position:fixed">x</p>')

    @pytest.mark.parametrize("value", [None, "", 3, ["<p>"]])
    def test_non_strings(self, value) -> None:
        assert sanitize_html(value) == ""

"""Tests for display helpers."""

import pytest

from domain import format_liquidity, format_percent, format_sharpe, parse_liquidity


class TestFormatPercent:

    def test_positive_signed(self):
        assert format_percent(12.34) == "+12.3%"

    def test_negative(self):
        assert format_percent(-4.56) == "-4.6%"

    def test_zero(self):
        assert format_percent(0.0) == "+0.0%"

    def test_missing(self):
        assert format_percent(None) == "N/A"


class TestFormatSharpe:

    def test_values(self):
        assert format_sharpe(0.4213) == "+0.42"
        assert format_sharpe(-1.5) == "-1.50"
        assert format_sharpe(None) == "N/A"


class TestLiquidity:

    @pytest.mark.parametrize("value, expected", [
        (2_340_000_000, "2.3B"),
        (2_340_000, "2.3M"),
        (820_400, "820K"),
        (512, "512"),
        (None, "N/A"),
        (0, "N/A"),
    ])
    def test_format(self, value, expected):
        assert format_liquidity(value) == expected

    @pytest.mark.parametrize("text, expected", [
        ("2.3B", 2.3e9),
        ("1.5M", 1.5e6),
        ("820K", 820e3),
        ("512", 512.0),
        ("N/A", 0.0),
        (None, 0.0),
        ("garbage", 0.0),
        (1234.0, 1234.0),
    ])
    def test_parse(self, text, expected):
        assert parse_liquidity(text) == pytest.approx(expected)

    def test_parse_sorts_like_values(self):
        labels = ["820K", "2.3B", "1.5M"]
        assert sorted(labels, key=parse_liquidity) == ["820K", "1.5M", "2.3B"]

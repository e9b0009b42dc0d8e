"""Unit tests for amount and quantity normalization.

Tests cover:
- Currency glyph and thousands separator stripping
- Unparseable amounts falling back to 0.0
- Integer quantity parsing
"""

import pytest

from invoice_parser.postprocessor.normalizers import (
    AmountNormalizer,
    QuantityNormalizer,
    parse_amount,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("$1,234.56", 1234.56),
        ("12.50 €", 12.5),
        ("£ 1,000", 1000.0),
        ("¥500", 500.0),
        ("  42.00  ", 42.0),
        ("-5.00", -5.0),
        ("$ 99.00", 99.0),
    ],
)
def test_parse_amount_strips_symbols(raw: str, expected: float) -> None:
    """Test that currency glyphs, commas and whitespace are ignored."""
    assert parse_amount(raw) == pytest.approx(expected)


@pytest.mark.parametrize("raw", ["", None, "abc", "N/A", "$", "nan", "inf", "1.2.3", "1_000"])
def test_parse_amount_unparseable_returns_zero(raw) -> None:
    """Test that empty or malformed amounts become 0.0 without raising."""
    assert parse_amount(raw) == 0.0


def test_european_format_is_not_supported() -> None:
    """Test that a comma decimal separator is treated as a thousands separator."""
    assert parse_amount("1.234,56") == pytest.approx(1.23456)
    assert parse_amount("12,50") == 1250.0


def test_clean_removes_only_symbols() -> None:
    """Test that cleaning keeps sign and decimal point."""
    assert AmountNormalizer().clean("-$1,000.50 ") == "-1000.50"


@pytest.mark.parametrize(
    "raw, expected",
    [("3", 3), (" 12 ", 12), ("0", 0), ("+4", 4)],
)
def test_quantity_parses_integers(raw: str, expected: int) -> None:
    """Test that whole-number quantities are accepted."""
    assert QuantityNormalizer().normalize(raw) == expected


@pytest.mark.parametrize("raw", ["three", "", "2.5", "-1", "1,000", None])
def test_quantity_rejects_non_integers(raw) -> None:
    """Test that anything but a non-negative integer yields None."""
    assert QuantityNormalizer().normalize(raw) is None

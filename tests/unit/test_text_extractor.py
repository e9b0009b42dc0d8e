"""Unit tests for regex field extraction over PDF text.

Tests cover:
- Labeled invoice number and amounts
- Date shapes and leftmost match
- Label boundaries (Total vs Subtotal)
- Positional vendor name heuristic
- Defaults for unmatched fields
"""

import pytest

from invoice_parser.extraction import TextFieldExtractor
from invoice_parser.models import InvoiceRecord, NOT_AVAILABLE


@pytest.fixture
def extractor() -> TextFieldExtractor:
    return TextFieldExtractor()


def test_invoice_number_and_total(extractor: TextFieldExtractor) -> None:
    """Test the basic labeled fields."""
    fields = extractor.extract("Invoice #INV-42\nTotal: $150.00")

    assert fields["invoice_number"] == "INV-42"
    assert fields["total_amount"] == 150.0


def test_all_fields_from_sample(extractor: TextFieldExtractor, sample_text: str) -> None:
    """Test every header field on a realistic document."""
    fields = extractor.extract(sample_text)

    assert fields == {
        "invoice_number": "INV-42",
        "invoice_date": "2024-03-01",
        "total_amount": 105.0,
        "subtotal": 100.0,
        "tax_amount": 5.0,
        "vendor_name": "ACME Corporation",
    }


def test_unmatched_fields_keep_defaults(extractor: TextFieldExtractor) -> None:
    """Test that missing fields never raise and fall back to defaults."""
    fields = extractor.extract("nothing to see")

    assert fields["invoice_number"] == NOT_AVAILABLE
    assert fields["invoice_date"] == NOT_AVAILABLE
    assert fields["subtotal"] == 0.0
    assert fields["tax_amount"] == 0.0
    assert fields["total_amount"] == 0.0
    assert fields["vendor_name"] == "nothing to see"


def test_empty_text_yields_defaults(extractor: TextFieldExtractor) -> None:
    """Test that empty text produces an all-default record."""
    record = extractor.populate(InvoiceRecord(), "")

    assert record.to_dict() == InvoiceRecord().to_dict()


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Invoice: 2024-01-15", "2024-01-15"),
        ("Date 01/15/2024", "01/15/2024"),
        ("Date 01-15-2024", "01-15-2024"),
        ("Due 02/01/2024, issued 2024-01-15", "02/01/2024"),
        ("Date 2024/01/15", NOT_AVAILABLE),
    ],
)
def test_invoice_date_shapes(extractor: TextFieldExtractor, text: str, expected: str) -> None:
    """Test the supported date shapes; the leftmost match wins."""
    assert extractor.extract(text)["invoice_date"] == expected


def test_date_is_not_validated(extractor: TextFieldExtractor) -> None:
    """Test that the raw token is kept without calendar checks."""
    assert extractor.extract("Date 99/99/9999")["invoice_date"] == "99/99/9999"


def test_total_label_matches_inside_subtotal(extractor: TextFieldExtractor) -> None:
    """Test that "Total" inside a leading "Subtotal" line is the first total hit."""
    fields = extractor.extract("Subtotal: $100.00\nTax: $13.00\nTotal: $113.00")

    assert fields["subtotal"] == 100.0
    assert fields["tax_amount"] == 13.0
    assert fields["total_amount"] == 100.0


def test_hyphenated_subtotal_feeds_total(extractor: TextFieldExtractor) -> None:
    """Test that "Sub-Total" supplies both subtotal and total when it comes first."""
    fields = extractor.extract("Sub-Total $80.00\nGrand Total $90.00")

    assert fields["subtotal"] == 80.0
    assert fields["total_amount"] == 80.0


def test_total_before_subtotal(extractor: TextFieldExtractor) -> None:
    """Test that a total listed first is read from its own line."""
    fields = extractor.extract("Total: $113.00\nSubtotal: $100.00")

    assert fields["total_amount"] == 113.0
    assert fields["subtotal"] == 100.0


def test_tax_label_matches_inside_words(extractor: TextFieldExtractor) -> None:
    """Test that "tax" at the end of a longer word is taken as the tax label."""
    assert extractor.extract("Surtax $2.00\nTax $5.00")["tax_amount"] == 2.0


@pytest.mark.parametrize("label", ["Tax", "GST", "HST", "TVH", "TPS", "TVQ", "tax"])
def test_bilingual_tax_labels(extractor: TextFieldExtractor, label: str) -> None:
    """Test each tax label, case-insensitively."""
    assert extractor.extract(f"{label}: $7.50")["tax_amount"] == 7.5


def test_amount_with_thousands_separator(extractor: TextFieldExtractor) -> None:
    """Test that the amount shape accepts comma grouping."""
    assert extractor.extract("TOTAL $1,234.56")["total_amount"] == 1234.56


def test_french_invoice_label(extractor: TextFieldExtractor) -> None:
    """Test the Facture label."""
    assert extractor.extract("Facture # F-2024-007")["invoice_number"] == "F-2024-007"


def test_first_match_wins(extractor: TextFieldExtractor) -> None:
    """Test that a repeated label keeps the first value."""
    fields = extractor.extract("Total: $10.00\nTotal: $20.00")

    assert fields["total_amount"] == 10.0


def test_vendor_is_first_line_longer_than_three(extractor: TextFieldExtractor) -> None:
    """Test the positional vendor heuristic."""
    text = "\n  \nABC\n  Widgets Unlimited  \nInvoice #1"

    assert extractor.extract_vendor_name(text) == "Widgets Unlimited"


def test_vendor_defaults_when_all_lines_short(extractor: TextFieldExtractor) -> None:
    """Test the vendor fallback when no line qualifies."""
    assert extractor.extract_vendor_name("ab\ncd\n") == NOT_AVAILABLE


def test_populate_fills_record(extractor: TextFieldExtractor) -> None:
    """Test that populate writes fields into the given record."""
    record = InvoiceRecord()

    result = extractor.populate(record, "Invoice #A1\nTotal: $5.00")

    assert result is record
    assert record.invoice_number == "A1"
    assert record.total_amount == 5.0
    assert record.vendor_name == "Invoice #A1"

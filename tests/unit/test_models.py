"""Unit tests for InvoiceRecord and LineItem."""

import json

import pytest

from invoice_parser.models import InvoiceRecord, LineItem, NOT_AVAILABLE


def test_new_record_has_defaults() -> None:
    """Test that an empty record is complete with placeholder values."""
    record = InvoiceRecord()

    assert record.invoice_number == NOT_AVAILABLE
    assert record.invoice_date == NOT_AVAILABLE
    assert record.vendor_name == NOT_AVAILABLE
    assert record.vendor_address == ""
    assert record.customer_name == ""
    assert record.customer_address == ""
    assert record.subtotal == 0.0
    assert record.tax_amount == 0.0
    assert record.total_amount == 0.0
    assert record.items == []


def test_records_do_not_share_items() -> None:
    """Test that each record owns its own item list."""
    first, second = InvoiceRecord(), InvoiceRecord()
    first.add_item(LineItem("Widget", 1, 1.0, 1.0))

    assert second.item_count == 0


def test_add_item_preserves_order(sample_record: InvoiceRecord) -> None:
    """Test that items keep insertion order."""
    sample_record.add_item(LineItem("Widget C", 5, 1.0, 5.0))

    assert [item.description for item in sample_record.items] == ["Widget A", "Widget B", "Widget C"]
    assert sample_record.item_count == 3


def test_set_field_rejects_unknown_names() -> None:
    """Test that only header fields can be set by name."""
    record = InvoiceRecord()
    record.set_field("total_amount", 10.0)

    assert record.total_amount == 10.0
    with pytest.raises(KeyError):
        record.set_field("items", [])


@pytest.mark.parametrize(
    "subtotal, tax, total, expected",
    [
        (100.0, 13.0, 113.0, True),
        (100.0, 13.0, 113.009, True),
        (100.0, 13.0, 113.02, False),
        (0.0, 0.0, 0.0, True),
        (0.0, 0.0, 150.0, False),
    ],
)
def test_is_valid_tolerance(subtotal: float, tax: float, total: float, expected: bool) -> None:
    """Test the subtotal + tax == total check within 0.01."""
    record = InvoiceRecord(subtotal=subtotal, tax_amount=tax, total_amount=total)

    assert record.is_valid() is expected


def test_to_json_uses_attribute_names(sample_record: InvoiceRecord) -> None:
    """Test JSON keys and nested items."""
    data = json.loads(sample_record.to_json())

    assert list(data) == [
        "invoice_number",
        "invoice_date",
        "vendor_name",
        "vendor_address",
        "customer_name",
        "customer_address",
        "subtotal",
        "tax_amount",
        "total_amount",
        "items",
    ]
    assert data["items"][0] == {
        "description": "Widget A",
        "quantity": 2,
        "unit_price": 25.0,
        "line_total": 50.0,
    }


def test_repr_summarizes_record(sample_record: InvoiceRecord) -> None:
    """Test the short debugging representation."""
    assert repr(sample_record) == "InvoiceRecord(invoice=INV-001, vendor=ACME Corp, total=113.0, items=2)"

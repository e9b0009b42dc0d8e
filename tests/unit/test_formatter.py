"""Unit tests for JSON and two-section CSV serialization."""

import csv
import io
import json

from invoice_parser.models import InvoiceRecord, LineItem
from invoice_parser.output_handler import OutputFormatter


def test_csv_layout(sample_record: InvoiceRecord) -> None:
    """Test the exact two-section CSV text."""
    expected = (
        "Invoice Metadata\n"
        "Invoice Number,INV-001\n"
        "Date,2024-01-15\n"
        "Vendor,ACME Corp\n"
        "Subtotal,100.00\n"
        "Tax,13.00\n"
        "Total,113.00\n"
        "\n"
        "Line Items\n"
        "Description,Quantity,Unit Price,Line Total\n"
        "Widget A,2,25.00,50.00\n"
        "Widget B,1,50.00,50.00\n"
    )

    assert OutputFormatter().to_csv_string(sample_record) == expected


def test_csv_escapes_special_descriptions() -> None:
    """Test that commas, quotes and newlines survive a CSV round trip."""
    record = InvoiceRecord(vendor_name="Smith, Jones & Co")
    description = 'Bolt, 3/8" zinc\nboxed'
    record.add_item(LineItem(description, 1, 0.5, 0.5))

    text = OutputFormatter().to_csv_string(record)
    rows = list(csv.reader(io.StringIO(text)))

    assert rows[3] == ["Vendor", "Smith, Jones & Co"]
    assert rows[-1] == [description, "1", "0.50", "0.50"]
    assert '"Bolt, 3/8"" zinc' in text


def test_csv_for_empty_record() -> None:
    """Test that a record without items still has both sections."""
    rows = list(csv.reader(io.StringIO(OutputFormatter().to_csv_string(InvoiceRecord()))))

    assert rows[0] == ["Invoice Metadata"]
    assert rows[1] == ["Invoice Number", "N/A"]
    assert rows[7] == []
    assert rows[-2:] == [["Line Items"], ["Description", "Quantity", "Unit Price", "Line Total"]]


def test_json_string(sample_record: InvoiceRecord) -> None:
    """Test pretty-printed JSON content."""
    text = OutputFormatter(json_indent=4).to_json_string(sample_record)
    data = json.loads(text)

    assert data["invoice_number"] == "INV-001"
    assert data["total_amount"] == 113.0
    assert len(data["items"]) == 2
    assert text.startswith('{\n    "invoice_number"')


def test_json_keeps_non_ascii() -> None:
    """Test that accented text is written as-is."""
    text = OutputFormatter().to_json_string(InvoiceRecord(vendor_name="Café Müller"))

    assert "Café Müller" in text


def test_write_creates_parent_directories(tmp_path, sample_record: InvoiceRecord) -> None:
    """Test that writers create missing directories."""
    target = tmp_path / "nested" / "dir" / "invoice.json"

    written = OutputFormatter().write_json(sample_record, target)

    assert written == target
    assert json.loads(target.read_text(encoding="utf-8"))["vendor_name"] == "ACME Corp"

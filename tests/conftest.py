"""Shared pytest fixtures for the invoice parser test suite."""

import csv
import logging
from pathlib import Path
from typing import List

import pytest

from config import ConfigurationManager
from invoice_parser.models import InvoiceRecord, LineItem
from invoice_parser.utils.logger import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def default_config():
    """Load the bundled settings.yaml for every test."""
    ConfigurationManager.reset()
    ConfigurationManager()
    yield
    ConfigurationManager.reset()


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach handlers installed by setup_logger between tests."""
    yield
    app_logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in app_logger.handlers:
        handler.close()
    app_logger.handlers.clear()
    app_logger.setLevel(logging.NOTSET)
    app_logger.propagate = True


@pytest.fixture
def sample_rows() -> List[List[str]]:
    """CSV rows of a small invoice with metadata and a line-item table."""
    return [
        ["Invoice Number", "INV-001"],
        ["Date", "2024-01-15"],
        ["Vendor", "ACME Corp"],
        ["Subtotal", "$100.00"],
        ["Tax", "$13.00"],
        ["Total", "$113.00"],
        [],
        ["Description", "Quantity", "Unit Price", "Line Total"],
        ["Widget A", "2", "$25.00", "$50.00"],
        ["Widget B", "1", "$50.00", "$50.00"],
    ]


@pytest.fixture
def sample_text() -> str:
    """Decoded PDF text of a small invoice."""
    return (
        "ACME Corporation\n"
        "Invoice #INV-42\n"
        "Issued 2024-03-01\n"
        "Widget A 2 $25.00 $50.00\n"
        "Gadget 1 $50.00 $50.00\n"
        "Total: $105.00\n"
        "Subtotal: $100.00\n"
        "GST: $5.00\n"
    )


@pytest.fixture
def sample_record() -> InvoiceRecord:
    """A fully populated, arithmetically consistent record."""
    record = InvoiceRecord(
        invoice_number="INV-001",
        invoice_date="2024-01-15",
        vendor_name="ACME Corp",
        subtotal=100.0,
        tax_amount=13.0,
        total_amount=113.0,
    )
    record.add_item(LineItem("Widget A", 2, 25.0, 50.0))
    record.add_item(LineItem("Widget B", 1, 50.0, 50.0))
    return record


@pytest.fixture
def write_csv(tmp_path: Path):
    """Factory writing rows to a CSV file under tmp_path."""

    def _write(rows: List[List[str]], name: str = "invoice.csv") -> Path:
        path = tmp_path / name
        with open(path, "w", encoding="utf-8", newline="") as f:
            csv.writer(f).writerows(rows)
        return path

    return _write

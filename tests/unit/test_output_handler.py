"""Unit tests for output format routing."""

import json

import pytest

from invoice_parser.models import InvoiceRecord
from invoice_parser.output_handler import OutputHandler
from invoice_parser.utils.exceptions import OutputWriteError, UnsupportedOutputFormatError


def test_save_json(tmp_path, sample_record: InvoiceRecord) -> None:
    """Test writing a single JSON file at the exact path."""
    written = OutputHandler().save(sample_record, tmp_path / "out.json", "json")

    assert written == [tmp_path / "out.json"]
    assert json.loads((tmp_path / "out.json").read_text(encoding="utf-8"))["invoice_number"] == "INV-001"


def test_save_csv_ignores_path_suffix(tmp_path, sample_record: InvoiceRecord) -> None:
    """Test that the format, not the suffix, decides the content."""
    written = OutputHandler().save(sample_record, tmp_path / "out.txt", "CSV")

    assert written == [tmp_path / "out.txt"]
    assert written[0].read_text(encoding="utf-8").startswith("Invoice Metadata\n")


def test_save_both_replaces_suffix(tmp_path, sample_record: InvoiceRecord) -> None:
    """Test that "both" writes sibling .json and .csv files."""
    written = OutputHandler().save(sample_record, tmp_path / "result", "both")

    assert written == [tmp_path / "result.json", tmp_path / "result.csv"]
    assert all(path.exists() for path in written)


def test_default_format_from_config(tmp_path, sample_record: InvoiceRecord) -> None:
    """Test that JSON is used when no format is given."""
    handler = OutputHandler()

    assert handler.normalize_format(None) == "json"
    assert handler.output_paths(tmp_path / "a.json") == [(tmp_path / "a.json", "json")]


@pytest.mark.parametrize("fmt", ["xml", "xlsx", "js"])
def test_unsupported_format_raises(tmp_path, sample_record: InvoiceRecord, fmt: str) -> None:
    """Test that unknown formats are refused before anything is written."""
    with pytest.raises(UnsupportedOutputFormatError, match="Use 'json', 'csv', or 'both'"):
        OutputHandler().save(sample_record, tmp_path / "out", fmt)

    assert list(tmp_path.iterdir()) == []


def test_write_failure_raises_output_error(tmp_path, sample_record: InvoiceRecord) -> None:
    """Test that an unwritable target is reported as OutputWriteError."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    with pytest.raises(OutputWriteError):
        OutputHandler().save(sample_record, blocker / "out.json", "json")

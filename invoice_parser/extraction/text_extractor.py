"""
Text Field Extractor Module.

This module pulls single-valued header fields out of the decoded text of
a PDF invoice by applying the ordered rules in FIELD_RULES, plus a
positional heuristic for the vendor name.

Each field is matched independently over the whole text; the first
match of a rule wins. A rule that does not match leaves its default
("N/A" or 0.0) in place. No exception is raised for missing fields.

Author: ML Engineering Team
"""

from typing import Any, Dict, Optional, Tuple

from invoice_parser.models import InvoiceRecord, NOT_AVAILABLE
from invoice_parser.postprocessor.normalizers import AmountNormalizer
from invoice_parser.utils.logger import get_logger
from .rules import AMOUNT, FIELD_RULES, FieldRule, VENDOR_NAME_MIN_LENGTH

# Initialize module logger
logger = get_logger(__name__)


class TextFieldExtractor:
    """
    Regex-based extractor for invoice header fields in free text.

    Attributes:
        rules: Ordered field rules applied to the text
        amount_normalizer: Converts matched amounts to floats

    Example:
        >>> extractor = TextFieldExtractor()
        >>> fields = extractor.extract("Acme Co\\nInvoice #INV-42\\nTotal: $150.00")
        >>> fields['invoice_number'], fields['total_amount']
        ('INV-42', 150.0)
    """

    def __init__(self, rules: Tuple[FieldRule, ...] = FIELD_RULES) -> None:
        """
        Initialize the extractor.

        Args:
            rules: Field rules to apply. Defaults to FIELD_RULES.
        """
        self.rules = rules
        self.amount_normalizer = AmountNormalizer()

    def extract(self, text: str) -> Dict[str, Any]:
        """
        Extract every header field from text.

        Args:
            text: Full decoded document text.

        Returns:
            Dictionary of field name to value, with defaults for misses.
        """
        fields: Dict[str, Any] = {}

        for rule in self.rules:
            if rule.field_name in fields:
                continue
            value = self._apply_rule(rule, text)
            if value is not None:
                fields[rule.field_name] = value

        for rule in self.rules:
            if rule.field_name not in fields:
                logger.debug(f"No match for {rule.field_name}")
                fields[rule.field_name] = 0.0 if rule.kind == AMOUNT else NOT_AVAILABLE

        fields['vendor_name'] = self.extract_vendor_name(text)
        return fields

    def populate(self, record: InvoiceRecord, text: str) -> InvoiceRecord:
        """
        Fill the header fields of a record from text.

        Args:
            record: Record to update in place.
            text: Full decoded document text.

        Returns:
            The same record, for chaining.
        """
        for field_name, value in self.extract(text).items():
            record.set_field(field_name, value)
        return record

    def _apply_rule(self, rule: FieldRule, text: str) -> Optional[Any]:
        """
        Apply one rule and convert its first capture group.

        Returns:
            Converted value, or None when the rule does not match.
        """
        match = rule.pattern.search(text)
        if not match:
            return None

        raw_value = match.group(1).strip()
        if rule.kind == AMOUNT:
            return self.amount_normalizer.normalize(raw_value)
        return raw_value

    def extract_vendor_name(self, text: str) -> str:
        """
        Return the first line longer than VENDOR_NAME_MIN_LENGTH characters.

        This is positional, not semantic: leading boilerplate such as a
        page header will be returned as the vendor.
        """
        for line in text.split('\n'):
            line = line.strip()
            if len(line) > VENDOR_NAME_MIN_LENGTH:
                return line
        return NOT_AVAILABLE

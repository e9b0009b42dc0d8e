"""
Extraction Rule Tables.

All label patterns, alias tables and header keywords used by the
extractors live here as ordered data. Extractors iterate over these
tables; reordering or extending a table changes behavior without
touching control flow. Within a table, the first matching rule wins.

Tables:
    - FIELD_RULES: regex rules for single-valued fields in free text
    - METADATA_ALIASES: bilingual key aliases for key/value CSV rows
    - LINE_ITEM_HEADER_KEYWORDS: keyword groups identifying an item header
    - LINE_ITEM_TEXT_PATTERN: free-text line item shape

Author: ML Engineering Team
"""

import re
from dataclasses import dataclass
from typing import Dict, Tuple

# Value kinds
TEXT = "text"
AMOUNT = "amount"

# "$1,234.56", "1234.56", "$ 99.00"
MONEY = r'\$?\s*([0-9,]+\.[0-9]{2})'


@dataclass(frozen=True)
class FieldRule:
    """
    A named regex rule for one invoice field.

    Attributes:
        field_name: InvoiceRecord attribute populated by the rule
        pattern: Compiled regex; group 1 holds the value
        kind: TEXT (kept verbatim, trimmed) or AMOUNT (normalized)
    """
    field_name: str
    pattern: re.Pattern
    kind: str = TEXT


def _label_rule(field_name: str, labels: Tuple[str, ...], value: str, kind: str) -> FieldRule:
    """
    Build a case-insensitive "<label> <value>" rule.

    Labels are not anchored to word starts: "Total" also matches inside
    "Subtotal", so the leftmost occurrence in the text wins.
    """
    alternatives = '|'.join(re.escape(label) for label in labels)
    pattern = re.compile(
        rf'(?:{alternatives}){value}',
        re.IGNORECASE
    )
    return FieldRule(field_name, pattern, kind)


FIELD_RULES: Tuple[FieldRule, ...] = (
    _label_rule(
        'invoice_number',
        ('Invoice', 'Facture', 'INV'),
        r'\s*[#:]?\s*([A-Z0-9-]+)',
        TEXT,
    ),
    FieldRule(
        'invoice_date',
        re.compile(
            r'([0-9]{4}-[0-9]{2}-[0-9]{2}'
            r'|[0-9]{2}/[0-9]{2}/[0-9]{4}'
            r'|[0-9]{2}-[0-9]{2}-[0-9]{4})'
        ),
        TEXT,
    ),
    _label_rule(
        'total_amount',
        ('Total', 'TOTAL', 'Grand Total'),
        rf'\s*:?\s*{MONEY}',
        AMOUNT,
    ),
    _label_rule(
        'subtotal',
        ('Subtotal', 'Sub-Total', 'SUBTOTAL'),
        rf'\s*:?\s*{MONEY}',
        AMOUNT,
    ),
    _label_rule(
        'tax_amount',
        ('Tax', 'GST', 'HST', 'TVH', 'TPS', 'TVQ'),
        rf'\s*:?\s*{MONEY}',
        AMOUNT,
    ),
)

# Vendor name heuristic: first line longer than this many characters
VENDOR_NAME_MIN_LENGTH = 3


@dataclass(frozen=True)
class MetadataAlias:
    """
    Key spellings that map one CSV metadata row to an invoice field.

    Attributes:
        field_name: InvoiceRecord attribute populated
        aliases: Lower-case key spellings (English and French)
        kind: TEXT or AMOUNT
    """
    field_name: str
    aliases: Tuple[str, ...]
    kind: str = TEXT


METADATA_ALIASES: Tuple[MetadataAlias, ...] = (
    MetadataAlias('invoice_number', ('invoice number', 'invoice #', 'numéro de facture')),
    MetadataAlias('invoice_date', ('date', 'invoice date', 'date de facture')),
    MetadataAlias('vendor_name', ('vendor', 'vendor name', 'fournisseur')),
    MetadataAlias('subtotal', ('subtotal', 'sous-total'), AMOUNT),
    MetadataAlias('tax_amount', ('tax', 'taxes', 'gst', 'hst'), AMOUNT),
    MetadataAlias('total_amount', ('total', 'grand total'), AMOUNT),
)


def build_alias_lookup(aliases: Tuple[MetadataAlias, ...]) -> Dict[str, MetadataAlias]:
    """
    Flatten an alias table into a key -> alias mapping.

    When two entries claim the same key, the earlier entry wins.
    """
    lookup: Dict[str, MetadataAlias] = {}
    for entry in aliases:
        for alias in entry.aliases:
            lookup.setdefault(alias, entry)
    return lookup


METADATA_ALIAS_LOOKUP = build_alias_lookup(METADATA_ALIASES)

# Leading rows inspected for key/value metadata
METADATA_SCAN_ROWS = 10
METADATA_MIN_COLUMNS = 2

# Every group must contribute at least one keyword to the header text
LINE_ITEM_HEADER_KEYWORDS: Tuple[Tuple[str, ...], ...] = (
    ('description',),
    ('quantity', 'qty'),
    ('price', 'amount'),
)
LINE_ITEM_MIN_COLUMNS = 4

# "<words> <integer> <money> <money>"; any whitespace separates tokens,
# so a description may start on an earlier line
LINE_ITEM_TEXT_PATTERN = re.compile(
    r'([A-Za-z][A-Za-z\s]+)'
    r'\s+([0-9]+)'
    r'\s+\$?([0-9,]+\.[0-9]{2})'
    r'\s+\$?([0-9,]+\.[0-9]{2})'
)

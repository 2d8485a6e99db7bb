"""
Extraction Module for the SMS analyzer.

Pulls transaction fields out of raw SMS text:
- Preprocessing (normalisation, merchant clean-up)
- Per-field extractors (type, amount, date, card, bank, merchant)
"""

from .extractors import (
    TransactionType,
    ExtractedFields,
    search_pattern,
    first_match,
    extract_transaction_type,
    extract_amount,
    parse_date_text,
    extract_date,
    extract_card_number,
    extract_bank_name,
    extract_merchant,
    extract_fields,
)
from .preprocess import (
    normalize_text,
    strip_merchant_prefix,
    strip_merchant_suffixes,
    clean_merchant_name,
)

__all__ = [
    "TransactionType",
    "ExtractedFields",
    "search_pattern",
    "first_match",
    "extract_transaction_type",
    "extract_amount",
    "parse_date_text",
    "extract_date",
    "extract_card_number",
    "extract_bank_name",
    "extract_merchant",
    "extract_fields",
    "normalize_text",
    "strip_merchant_prefix",
    "strip_merchant_suffixes",
    "clean_merchant_name",
]

"""
Field extractors for bank SMS alerts.

Each field is pulled out independently by its own function, trying an
ordered list of patterns on the upper-cased text and keeping the first hit.
Only a missing amount is fatal for the analyzer; every other miss leaves the
field as None.
"""

import re
from dataclasses import dataclass, asdict
from datetime import date, datetime
from enum import Enum
from typing import Dict, List, Optional

from ..config.analyzer_config import ANALYZER_CONFIG
from ..patterns.sms_patterns import (
    INCOME_KEYWORDS,
    AMOUNT_PATTERNS,
    DATE_PATTERNS,
    CARD_PATTERNS,
    BANK_NAMES,
    MERCHANT_PATTERNS,
)
from .preprocess import normalize_text, clean_merchant_name


class TransactionType(Enum):
    """Direction of money movement."""
    EXPENSE = "expense"
    INCOME = "income"


@dataclass
class ExtractedFields:
    """Raw fields pulled from one SMS."""
    type: TransactionType
    amount: Optional[float]
    date: str
    merchant: Optional[str]
    card_number: Optional[str]
    bank_name: Optional[str]
    original_text: str

    def to_dict(self) -> Dict:
        data = asdict(self)
        data["type"] = self.type.value
        return data


def search_pattern(pattern: str, text: str) -> Optional[re.Match]:
    """
    Search a single extraction pattern.

    Args:
        pattern: Regex pattern string
        text: Upper-cased SMS text

    Returns:
        The match object or None
    """
    return re.search(pattern, text, re.IGNORECASE)


def first_match(text: str, patterns: List[str]) -> Optional[re.Match]:
    """Return the match of the first pattern that hits, in list order."""
    for pattern in patterns:
        match = search_pattern(pattern, text)
        if match:
            return match
    return None


def extract_transaction_type(text: str) -> TransactionType:
    """Expense unless an income keyword appears in the text."""
    upper_text = normalize_text(text)
    for keyword in INCOME_KEYWORDS:
        if keyword in upper_text:
            return TransactionType.INCOME
    return TransactionType.EXPENSE


def extract_amount(text: str) -> Optional[float]:
    """
    Extract the transaction amount.

    Args:
        text: SMS text

    Returns:
        Amount as float with thousands separators removed, or None

    Example:
        >>> extract_amount("Rs.1,234.50 debited")
        1234.5
    """
    match = first_match(normalize_text(text), AMOUNT_PATTERNS)
    if not match:
        return None
    return float(match.group(1).replace(",", ""))


def _parse_date(date_text: str, formats: List[str]) -> Optional[date]:
    for date_format in formats:
        try:
            return datetime.strptime(date_text, date_format).date()
        except ValueError:
            continue
    return None


def parse_date_text(date_text: str) -> Optional[date]:
    """
    Parse a captured date string, day first.

    Args:
        date_text: e.g. "12-05-2024", "12/05/24", "12 MAY 2024"

    Returns:
        date object, or None if the text is not a valid date
    """
    formats = ANALYZER_CONFIG["date_formats"]
    compact = " ".join(date_text.split())

    if re.match(r"^\d", compact) and re.search(r"[-/]", compact):
        return _parse_date(compact.replace("/", "-"), formats["numeric"])
    return _parse_date(compact, formats["textual"])


def extract_date(text: str, today: Optional[date] = None) -> str:
    """
    Extract the transaction date as an ISO string.

    Falls back to today when no pattern yields a valid date.

    Args:
        text: SMS text
        today: Override for the default date

    Returns:
        Date in YYYY-MM-DD format
    """
    upper_text = normalize_text(text)
    default = (today or date.today()).isoformat()

    for pattern in DATE_PATTERNS:
        match = search_pattern(pattern, upper_text)
        if not match:
            continue
        parsed = parse_date_text(match.group(1))
        if parsed:
            return parsed.isoformat()

    return default


def extract_card_number(text: str) -> Optional[str]:
    """Extract the last four digits of the card or account."""
    match = first_match(normalize_text(text), CARD_PATTERNS)
    return match.group(1) if match else None


def extract_bank_name(text: str) -> Optional[str]:
    """Return the first known bank mentioned in the text."""
    upper_text = normalize_text(text)
    for bank in BANK_NAMES:
        if bank in upper_text:
            return bank
    return None


def extract_merchant(text: str) -> Optional[str]:
    """
    Extract and clean the merchant / counterparty name.

    Args:
        text: SMS text

    Returns:
        Cleaned merchant name, or None

    Example:
        >>> extract_merchant("Rs.999 spent on IND*AMAZON using HDFC Card")
        'AMAZON'
    """
    match = first_match(normalize_text(text), MERCHANT_PATTERNS)
    if not match:
        return None
    return clean_merchant_name(match.group(1))


def extract_fields(raw_text: str, today: Optional[date] = None) -> ExtractedFields:
    """
    Run every field extractor over one SMS.

    Args:
        raw_text: Raw SMS body
        today: Override for the default date

    Returns:
        ExtractedFields (amount is None when no amount pattern matched)
    """
    return ExtractedFields(
        type=extract_transaction_type(raw_text),
        amount=extract_amount(raw_text),
        date=extract_date(raw_text, today=today),
        merchant=extract_merchant(raw_text),
        card_number=extract_card_number(raw_text),
        bank_name=extract_bank_name(raw_text),
        original_text=raw_text,
    )

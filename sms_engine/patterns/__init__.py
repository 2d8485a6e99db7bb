"""
SMS Pattern Definitions for the transaction analyzer.

Contains the ordered keyword lists and regex patterns for:
- Transaction direction (income keywords)
- Amount, date, card number and merchant extraction
- Bank recognition and merchant clean-up
- Merchant -> category rules
"""

from .sms_patterns import (
    INCOME_KEYWORDS,
    AMOUNT_PATTERNS,
    DATE_PATTERNS,
    CARD_PATTERNS,
    BANK_NAMES,
    MERCHANT_PATTERNS,
    MERCHANT_PREFIXES,
    CITY_NAMES,
    CORPORATE_SUFFIXES,
)
from .merchant_rules import MERCHANT_RULES

__all__ = [
    "INCOME_KEYWORDS",
    "AMOUNT_PATTERNS",
    "DATE_PATTERNS",
    "CARD_PATTERNS",
    "BANK_NAMES",
    "MERCHANT_PATTERNS",
    "MERCHANT_PREFIXES",
    "CITY_NAMES",
    "CORPORATE_SUFFIXES",
    "MERCHANT_RULES",
]

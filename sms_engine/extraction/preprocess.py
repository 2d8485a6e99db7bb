"""
Preprocessing utilities for SMS extraction.
Handles text normalisation and merchant name clean-up.
"""

import re
from typing import Optional

from ..patterns.sms_patterns import (
    MERCHANT_PREFIXES,
    CITY_NAMES,
    CORPORATE_SUFFIXES,
)


# Pre-compiled clean-up patterns; everything from the first hit onwards is dropped
_CITY_PATTERN = re.compile(
    r"\s+(?:" + "|".join(CITY_NAMES) + r")\b.*$", re.IGNORECASE
)
_SUFFIX_PATTERN = re.compile(
    r"\s+(?:" + "|".join(CORPORATE_SUFFIXES) + r")\b.*$", re.IGNORECASE
)
_TRAILING_PUNCTUATION = re.compile(r"[\s\-\.]+$")


def normalize_text(text: Optional[str]) -> str:
    """
    Normalize text for matching.

    Args:
        text: Raw text to normalize

    Returns:
        Normalized uppercase text
    """
    if not text:
        return ""
    return text.upper().strip()


def strip_merchant_prefix(merchant: str) -> str:
    """Remove a leading payment-gateway token such as IND*."""
    for prefix in MERCHANT_PREFIXES:
        if merchant.upper().startswith(prefix):
            return merchant[len(prefix):]
    return merchant


def strip_merchant_suffixes(merchant: str) -> str:
    """
    Remove trailing city names, corporate suffixes and dangling dashes/dots.

    Applying this to an already cleaned name returns it unchanged.

    Args:
        merchant: Merchant name

    Returns:
        Merchant name without location/legal-entity noise
    """
    cleaned = _CITY_PATTERN.sub("", merchant)
    cleaned = _SUFFIX_PATTERN.sub("", cleaned)
    cleaned = _TRAILING_PUNCTUATION.sub("", cleaned)
    return cleaned.strip()


def clean_merchant_name(raw_merchant: Optional[str]) -> Optional[str]:
    """
    Clean a raw merchant capture.

    Args:
        raw_merchant: Text captured by a merchant pattern

    Returns:
        Cleaned merchant name, or None if nothing is left
    """
    if not raw_merchant:
        return None

    merchant = strip_merchant_prefix(raw_merchant.strip())
    merchant = strip_merchant_suffixes(merchant)

    return merchant or None

"""
Categorisation Module for the SMS analyzer.

Maps merchants to budget categories through:
- Exact rule-key matching
- Partial (bidirectional containment) matching in rule order
- Optional fuzzy matching
- Label -> id resolution against the user's context
"""

from .engine import MerchantCategorizer, Categorization
from .pattern_matching import (
    match_exact,
    match_partial,
    match_fuzzy,
    resolve_label,
)

__all__ = [
    "MerchantCategorizer",
    "Categorization",
    "match_exact",
    "match_partial",
    "match_fuzzy",
    "resolve_label",
]

"""
Merchant Rule Matching for SMS categorisation.

Provides the exact, partial and fuzzy lookups against the ordered merchant
rule table, and the label -> id resolution against the lookup indexes.
"""

from typing import Dict, List, Optional, Tuple

from rapidfuzz import fuzz


Rule = Tuple[str, Dict[str, str]]


def match_exact(merchant: str, rules: List[Rule]) -> Optional[Rule]:
    """
    Find a rule whose key equals the merchant.

    Args:
        merchant: Upper-cased merchant name
        rules: Ordered merchant rules

    Returns:
        (key, labels) or None
    """
    for key, labels in rules:
        if key == merchant:
            return (key, labels)
    return None


def match_partial(merchant: str, rules: List[Rule]) -> Optional[Rule]:
    """
    Find the first rule where key and merchant contain one another.

    Containment is checked both ways, so table order decides ties.

    Args:
        merchant: Upper-cased merchant name
        rules: Ordered merchant rules

    Returns:
        (key, labels) or None

    Example:
        >>> match_partial("ZOMATO ORDER", MERCHANT_RULES)[0]
        'ZOMATO'
    """
    for key, labels in rules:
        if key in merchant or merchant in key:
            return (key, labels)
    return None


def match_fuzzy(
    merchant: str,
    rules: List[Rule],
    threshold: int = 85
) -> Optional[Tuple[str, Dict[str, str], float]]:
    """
    Find the closest rule key by fuzzy ratio.

    Args:
        merchant: Upper-cased merchant name
        rules: Ordered merchant rules
        threshold: Minimum score for a match (0-100)

    Returns:
        (key, labels, score) or None; earlier rules win on equal scores
    """
    best_score = 0.0
    best_match = None
    for key, labels in rules:
        score = fuzz.ratio(key, merchant)
        if score > best_score and score >= threshold:
            best_score = score
            best_match = (key, labels, score)
    return best_match


def resolve_label(label: Optional[str], index: Dict[str, object]) -> Optional[object]:
    """
    Resolve a category/subcategory label against an upper-cased index.

    Tries a direct upper-case lookup first, then a case-insensitive scan of
    all keys for an exact name match.

    Args:
        label: Human-readable label from a rule
        index: Upper-cased name -> value mapping

    Returns:
        The indexed value or None
    """
    if not label:
        return None

    value = index.get(label.upper())
    if value is not None:
        return value

    lowered = label.lower()
    for key, candidate in index.items():
        if key.lower() == lowered:
            return candidate

    return None

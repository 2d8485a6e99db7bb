"""
Merchant Categorizer for SMS transactions.
Maps an extracted merchant to a budget category and subcategory.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Dict, List, Optional

from ..config.analyzer_config import ANALYZER_CONFIG
from ..context.loader import LookupIndexes
from ..patterns.merchant_rules import MERCHANT_RULES
from .pattern_matching import (
    Rule,
    match_exact,
    match_partial,
    match_fuzzy,
    resolve_label,
)

logger = logging.getLogger(__name__)


@dataclass
class Categorization:
    """Result of merchant categorisation."""
    category_name: Optional[str] = None
    category_id: Optional[str] = None
    subcategory_name: Optional[str] = None
    subcategory_id: Optional[str] = None
    match_method: Optional[str] = None  # 'exact', 'partial', 'fuzzy'
    matched_rule: Optional[str] = None

    def to_dict(self) -> Dict:
        return asdict(self)


class MerchantCategorizer:
    """Categorizes merchants using the ordered merchant rule table."""

    def __init__(
        self,
        indexes: LookupIndexes,
        rules: Optional[List[Rule]] = None,
        fuzzy_enabled: Optional[bool] = None,
        fuzzy_threshold: Optional[int] = None
    ):
        """
        Initialize the categorizer.

        Args:
            indexes: Lookup indexes built from the context snapshot
            rules: Ordered (key, labels) rules; defaults to MERCHANT_RULES
            fuzzy_enabled: Try fuzzy matching after partial matching
            fuzzy_threshold: Minimum fuzzy score (0-100)
        """
        fuzzy_config = ANALYZER_CONFIG["fuzzy_matching"]
        self.indexes = indexes
        self.rules = list(rules) if rules is not None else list(MERCHANT_RULES)
        self.fuzzy_enabled = (
            fuzzy_config["enabled"] if fuzzy_enabled is None else fuzzy_enabled
        )
        self.fuzzy_threshold = (
            fuzzy_config["threshold"] if fuzzy_threshold is None else fuzzy_threshold
        )

    def categorize(self, merchant: Optional[str]) -> Categorization:
        """
        Categorize a merchant name.

        Exact key matches win over partial matches regardless of table
        order. Labels are returned even when the user's data has no
        matching category or subcategory id.

        Args:
            merchant: Cleaned merchant name (any case) or None

        Returns:
            Categorization (all None when nothing matched)
        """
        if not merchant:
            return Categorization()

        merchant_upper = merchant.upper()

        rule = match_exact(merchant_upper, self.rules)
        if rule:
            return self._build(rule[0], rule[1], "exact", merchant_upper)

        rule = match_partial(merchant_upper, self.rules)
        if rule:
            return self._build(rule[0], rule[1], "partial", merchant_upper)

        if self.fuzzy_enabled:
            fuzzy_rule = match_fuzzy(merchant_upper, self.rules, self.fuzzy_threshold)
            if fuzzy_rule:
                return self._build(fuzzy_rule[0], fuzzy_rule[1], "fuzzy", merchant_upper)

        logger.debug("No merchant rule for %s", merchant_upper)
        return Categorization()

    def _build(
        self,
        rule_key: str,
        labels: Dict[str, str],
        match_method: str,
        merchant: str
    ) -> Categorization:
        category_name = labels.get("category")
        subcategory_name = labels.get("subcategory")

        category_id = resolve_label(category_name, self.indexes.categories)
        subcategory_info = resolve_label(subcategory_name, self.indexes.subcategories)

        logger.debug(
            "Merchant %s matched rule %s (%s): category=%s (%s), subcategory=%s (%s)",
            merchant,
            rule_key,
            match_method,
            category_name,
            "found" if category_id else "missing",
            subcategory_name,
            "found" if subcategory_info else "missing",
        )

        return Categorization(
            category_name=category_name,
            category_id=category_id,
            subcategory_name=subcategory_name,
            subcategory_id=subcategory_info["id"] if subcategory_info else None,
            match_method=match_method,
            matched_rule=rule_key,
        )

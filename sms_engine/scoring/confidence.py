"""
Confidence Scorer for SMS analysis.
Turns extraction and resolution coverage into a score between 0 and 1.
"""

from typing import Dict, Optional

from ..config.analyzer_config import ANALYZER_CONFIG
from ..extraction.extractors import ExtractedFields
from ..categorisation.engine import Categorization
from ..accounts.resolver import AccountInfo


class ConfidenceScorer:
    """Fixed weighted-sum confidence scorer."""

    def __init__(self, weights: Optional[Dict[str, float]] = None):
        """
        Initialize the scorer.

        Args:
            weights: Per-signal weights; defaults to ANALYZER_CONFIG
        """
        self.weights = weights or ANALYZER_CONFIG["confidence_weights"]
        self.max_confidence = ANALYZER_CONFIG["max_confidence"]
        self.precision = ANALYZER_CONFIG["confidence_precision"]

    def score(
        self,
        extracted: ExtractedFields,
        categorization: Categorization,
        account_info: AccountInfo
    ) -> float:
        """
        Score one analysis.

        Each term is all-or-nothing:
        - amount present and positive
        - date present (always, since it defaults to today)
        - merchant present
        - category id resolved
        - account id resolved

        Args:
            extracted: Extracted SMS fields
            categorization: Merchant categorisation
            account_info: Resolved account

        Returns:
            Confidence in [0, 1]
        """
        confidence = 0.0

        if extracted.amount and extracted.amount > 0:
            confidence += self.weights["amount"]
        if extracted.date:
            confidence += self.weights["date"]
        if extracted.merchant:
            confidence += self.weights["merchant"]
        if categorization.category_id:
            confidence += self.weights["category"]
        if account_info.account_id:
            confidence += self.weights["account"]

        return round(max(0.0, min(confidence, self.max_confidence)), self.precision)

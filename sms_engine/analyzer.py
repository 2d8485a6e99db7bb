"""
SMS Analyzer - turns a bank SMS into a transaction draft.

Pipeline: extract fields -> categorize merchant -> resolve account ->
score confidence -> assemble the transaction dict.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional, Union

from .config.analyzer_config import ANALYZER_CONFIG
from .context.loader import ContextSnapshot, build_indexes
from .extraction.extractors import ExtractedFields, TransactionType, extract_fields
from .categorisation.engine import MerchantCategorizer, Categorization
from .categorisation.pattern_matching import Rule
from .patterns.merchant_rules import MERCHANT_RULES
from .accounts.resolver import AccountResolver, AccountInfo, AccountType
from .scoring.confidence import ConfidenceScorer

logger = logging.getLogger(__name__)


@dataclass
class AnalysisResult:
    """Outcome of analysing one SMS."""
    success: bool
    data: Optional[Dict] = None
    error: Optional[str] = None
    confidence: float = 0.0
    extracted_data: Optional[ExtractedFields] = None
    debug_rationale: Optional[str] = None

    def to_dict(self) -> Dict:
        result = {
            "success": self.success,
            "data": self.data,
            "confidence": self.confidence,
        }
        if self.error is not None:
            result["error"] = self.error
        if self.extracted_data is not None:
            result["extracted_data"] = self.extracted_data.to_dict()
        if self.debug_rationale is not None:
            result["debug_rationale"] = self.debug_rationale
        return result


def build_transaction(
    extracted: ExtractedFields,
    categorization: Categorization,
    account_info: AccountInfo,
    confidence: float
) -> Dict:
    """
    Assemble the transaction dict handed to the caller.

    Args:
        extracted: Extracted SMS fields
        categorization: Merchant categorisation
        account_info: Resolved account
        confidence: Overall confidence

    Returns:
        Transaction dictionary
    """
    if extracted.merchant:
        name = extracted.merchant
    elif extracted.type == TransactionType.INCOME:
        name = "Income Transaction"
    else:
        name = "Expense Transaction"

    if extracted.card_number:
        name += f" - Card {ANALYZER_CONFIG['card_label_prefix']}{extracted.card_number}"

    # Credit card matches are labelled "<BANK> <DIGITS>"
    account_name = account_info.account_name
    if (
        extracted.card_number
        and extracted.bank_name
        and account_info.account_type == AccountType.CREDIT_CARD
    ):
        account_name = f"{extracted.bank_name} {extracted.card_number}"

    return {
        "name": name,
        "amount": extracted.amount,
        "type": extracted.type.value,
        "category_id": categorization.category_id,
        "category_name": categorization.category_name,
        "subcategory_id": categorization.subcategory_id,
        "subcategory_name": categorization.subcategory_name,
        "date": extracted.date,
        "account_id": account_info.account_id,
        "account_name": account_name,
        "account_type": account_info.account_type.value if account_info.account_type else None,
        "is_recurring": False,
        "merchant": extracted.merchant,
        "confidence": confidence,
    }


class SMSAnalyzer:
    """Analyzes bank SMS alerts against the user's context snapshot."""

    def __init__(
        self,
        snapshot: Union[ContextSnapshot, Dict, None] = None,
        extra_rules: Optional[List[Rule]] = None,
        fuzzy_enabled: Optional[bool] = None,
        debug_mode: bool = False
    ):
        """
        Initialize the analyzer and build the lookup indexes.

        Args:
            snapshot: ContextSnapshot or plain dict in the same shape
            extra_rules: Merchant rules checked before the default table
            fuzzy_enabled: Override ANALYZER_CONFIG fuzzy matching switch
            debug_mode: If True, attach a rationale string to each result

        Raises:
            ValueError: If the snapshot is malformed (see update_context)
        """
        self.rules = list(extra_rules or []) + list(MERCHANT_RULES)
        self.fuzzy_enabled = fuzzy_enabled
        self.debug_mode = debug_mode
        self.scorer = ConfidenceScorer()
        self.update_context(snapshot)

    def update_context(self, snapshot: Union[ContextSnapshot, Dict, None]) -> None:
        """
        Rebuild the lookup indexes from a new snapshot.

        Args:
            snapshot: ContextSnapshot or plain dict in the same shape

        Raises:
            ValueError: If a snapshot record is missing a required field or
                has the wrong shape; the previous context is kept
        """
        try:
            if snapshot is None:
                snapshot = ContextSnapshot()
            elif isinstance(snapshot, dict):
                snapshot = ContextSnapshot.from_dict(snapshot)
            indexes = build_indexes(snapshot)
        except (KeyError, TypeError, AttributeError) as e:
            raise ValueError(f"Invalid context snapshot: {e!r}") from e

        self.snapshot = snapshot
        self.indexes = indexes
        self.categorizer = MerchantCategorizer(
            self.indexes,
            rules=self.rules,
            fuzzy_enabled=self.fuzzy_enabled,
        )
        self.account_resolver = AccountResolver(self.indexes)

    def analyze(self, sms_text: str, today: Optional[date] = None) -> AnalysisResult:
        """
        Analyze a single SMS.

        Never raises: a missing amount or any unexpected error comes back as
        an unsuccessful result with zero confidence.

        Args:
            sms_text: Raw SMS body
            today: Override for the default transaction date

        Returns:
            AnalysisResult
        """
        try:
            extracted = extract_fields(sms_text, today=today)

            if extracted.amount is None:
                logger.debug("No amount found in SMS: %r", sms_text)
                return AnalysisResult(
                    success=False,
                    error=ANALYZER_CONFIG["messages"]["no_amount"],
                    confidence=0.0,
                    extracted_data=extracted,
                )

            categorization = self.categorizer.categorize(extracted.merchant)
            account_info = self.account_resolver.resolve(
                extracted.card_number,
                extracted.bank_name,
            )
            confidence = self.scorer.score(extracted, categorization, account_info)
            transaction = build_transaction(
                extracted,
                categorization,
                account_info,
                confidence,
            )

            logger.debug(
                "SMS parsed: merchant=%s amount=%s category=%s/%s account=%s confidence=%.2f",
                extracted.merchant,
                extracted.amount,
                categorization.category_name,
                categorization.subcategory_name,
                transaction["account_name"],
                confidence,
            )

            return AnalysisResult(
                success=True,
                data=transaction,
                confidence=confidence,
                extracted_data=extracted,
                debug_rationale=self._build_debug_rationale(categorization, account_info),
            )

        except Exception as e:
            logger.exception("SMS analysis failed")
            return AnalysisResult(
                success=False,
                error=str(e) or ANALYZER_CONFIG["messages"]["unknown_error"],
                confidence=0.0,
            )

    def analyze_batch(
        self,
        messages: List[str],
        today: Optional[date] = None
    ) -> List[AnalysisResult]:
        """
        Analyze several SMS messages with the same context.

        Args:
            messages: Raw SMS bodies
            today: Override for the default transaction date

        Returns:
            One AnalysisResult per message, in input order
        """
        return [self.analyze(message, today=today) for message in messages]

    def _build_debug_rationale(
        self,
        categorization: Categorization,
        account_info: AccountInfo
    ) -> Optional[str]:
        """Build debug rationale string if debug mode is enabled."""
        if not self.debug_mode:
            return None

        category_part = (
            f"category: {categorization.match_method} rule {categorization.matched_rule}"
            if categorization.match_method
            else "category: no rule"
        )
        account_part = (
            f"account: {account_info.matched_by}"
            if account_info.matched_by
            else "account: none"
        )
        return f"{category_part}; {account_part}"


def analyze_sms(
    sms_text: str,
    context: Union[ContextSnapshot, Dict, None] = None
) -> AnalysisResult:
    """
    Analyze one SMS against a context snapshot.

    Args:
        sms_text: Raw SMS body
        context: ContextSnapshot or plain dict with categories,
            subcategories, accounts and credit cards

    Returns:
        AnalysisResult

    Example:
        >>> result = analyze_sms(
        ...     "Rs.999.00 spent on IND*AMAZON using HDFC Card XX1234 on 12-05-2024",
        ...     {"credit_cards": [{"id": "cc1", "name": "HDFC Card",
        ...                        "bank": "HDFC", "card_number": "1234"}]}
        ... )
        >>> result.data["account_id"]
        'cc1'
    """
    try:
        analyzer = SMSAnalyzer(context)
    except ValueError as e:
        logger.exception("Invalid context snapshot")
        return AnalysisResult(
            success=False,
            error=str(e),
            confidence=0.0,
        )
    return analyzer.analyze(sms_text)

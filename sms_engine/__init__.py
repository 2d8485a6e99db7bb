"""
SMS Engine - Rule-based bank SMS transaction analyzer.

Turns Indian bank and card alert messages into transaction drafts for a
personal-finance app, resolving merchants, categories and accounts against
the user's own data.

Main Components:
    - patterns: Extraction patterns and merchant rules
    - config: Analyzer configuration and snapshot loading
    - context: Context snapshot and lookup indexes
    - extraction: Field extractors
    - categorisation: Merchant categorizer
    - accounts: Account resolver
    - scoring: Confidence scorer
"""

from .analyzer import (
    SMSAnalyzer,
    AnalysisResult,
    build_transaction,
    analyze_sms,
)
from .context.loader import ContextSnapshot, LookupIndexes, build_indexes
from .extraction.extractors import TransactionType, ExtractedFields, extract_fields
from .categorisation.engine import MerchantCategorizer, Categorization
from .accounts.resolver import AccountResolver, AccountInfo, AccountType
from .scoring.confidence import ConfidenceScorer
from .config.analyzer_config import ANALYZER_CONFIG
from .config.snapshot_loader import load_context_snapshot
from .patterns.merchant_rules import MERCHANT_RULES


__version__ = "1.0.0"
__all__ = [
    # Analyzer
    "SMSAnalyzer",
    "AnalysisResult",
    "build_transaction",
    "analyze_sms",
    # Context
    "ContextSnapshot",
    "LookupIndexes",
    "build_indexes",
    "load_context_snapshot",
    # Extraction
    "TransactionType",
    "ExtractedFields",
    "extract_fields",
    # Categorisation
    "MerchantCategorizer",
    "Categorization",
    "MERCHANT_RULES",
    # Accounts
    "AccountResolver",
    "AccountInfo",
    "AccountType",
    # Scoring
    "ConfidenceScorer",
    # Configuration
    "ANALYZER_CONFIG",
]

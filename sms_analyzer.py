"""
Backward compatibility wrapper for SMSAnalyzer.
Imports from the sms_engine module structure.
"""

from sms_engine.analyzer import (
    SMSAnalyzer,
    AnalysisResult,
    analyze_sms,
)
from sms_engine.context.loader import ContextSnapshot

# Re-export for backward compatibility
__all__ = [
    "SMSAnalyzer",
    "AnalysisResult",
    "analyze_sms",
    "ContextSnapshot",
]

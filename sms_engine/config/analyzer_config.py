"""
Analyzer configuration for the SMS transaction analyzer.
Contains confidence weights, matching switches and extraction settings.
"""

ANALYZER_CONFIG = {
    # Confidence weights (sum = 1.0, result clamped to 1.0)
    "confidence_weights": {
        "amount": 0.3,
        "date": 0.1,
        "merchant": 0.2,
        "category": 0.2,
        "account": 0.2,
    },
    "max_confidence": 1.0,
    "confidence_precision": 2,

    # Fuzzy merchant matching, tried after exact and partial matching (opt-in)
    "fuzzy_matching": {
        "enabled": False,
        "threshold": 85,
    },

    # Extraction
    "date_formats": {
        "numeric": ["%d-%m-%Y", "%d-%m-%y"],
        "textual": ["%d %b %Y", "%d %b %y", "%d %B %Y", "%d %B %y"],
    },

    # Result assembly
    "messages": {
        "no_amount": "Unable to extract amount from SMS",
        "unknown_error": "Unknown error",
    },
    "card_label_prefix": "XX",
}

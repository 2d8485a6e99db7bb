"""
Configuration module for the SMS transaction analyzer.

This module contains the analyzer configuration dictionary and the
context snapshot file loader.
"""

from .analyzer_config import ANALYZER_CONFIG
from .snapshot_loader import load_context_snapshot

__all__ = [
    "ANALYZER_CONFIG",
    "load_context_snapshot",
]

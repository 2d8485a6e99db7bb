"""
Context snapshot loader.
Loads JSON files containing the categories, subcategories, accounts and
credit cards used as the lookup universe for SMS analysis.
"""

import json
from pathlib import Path

from ..context.loader import ContextSnapshot


def load_context_snapshot(json_path: str) -> ContextSnapshot:
    """
    Load a context snapshot from a JSON file.

    Args:
        json_path: Path to JSON file containing the snapshot

    Returns:
        ContextSnapshot built from the file contents

    Example JSON format:
        {
            "categories": [{"id": "c1", "name": "Wants"}],
            "subcategories": [{"id": "s1", "name": "Shopping", "category_id": "c1"}],
            "accounts": [{"id": "a1", "name": "Salary", "institution": "ICICI"}],
            "credit_cards": [{"id": "cc1", "name": "HDFC Card", "bank": "HDFC", "card_number": "1234"}]
        }
    """
    snapshot_file = Path(json_path)
    if not snapshot_file.exists():
        raise FileNotFoundError(f"Context snapshot file not found: {json_path}")

    with open(snapshot_file, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(
            f"Context snapshot must be a JSON object, got {type(data).__name__}"
        )

    return ContextSnapshot.from_dict(data)

"""
Context loader for the SMS analyzer.
Builds upper-cased lookup indexes from the caller's snapshot of categories,
subcategories, bank accounts and credit cards.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


def _first_present(record: Dict, *keys: str) -> Optional[object]:
    """Return the first non-empty value among the given keys."""
    for key in keys:
        value = record.get(key)
        if value not in (None, ""):
            return value
    return None


@dataclass(frozen=True)
class ContextSnapshot:
    """Read-only snapshot of the user's budget entities."""
    categories: List[Dict] = field(default_factory=list)
    subcategories: List[Dict] = field(default_factory=list)
    accounts: List[Dict] = field(default_factory=list)
    credit_cards: List[Dict] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict) -> "ContextSnapshot":
        """
        Build a snapshot from a plain dictionary.

        Accepts snake_case keys as well as the camelCase keys sent by the
        mobile client (``creditCards``, ``cardNumber``, ``categoryId``).

        Args:
            data: Dictionary with categories, subcategories, accounts and
                credit cards lists (any of them may be missing)

        Returns:
            ContextSnapshot with normalised records
        """
        categories = [
            {"id": item["id"], "name": item["name"]}
            for item in data.get("categories") or []
        ]
        subcategories = [
            {
                "id": item["id"],
                "name": item["name"],
                "category_id": _first_present(item, "category_id", "categoryId"),
            }
            for item in data.get("subcategories") or []
        ]
        accounts = [
            {
                "id": item["id"],
                "name": item["name"],
                "institution": item.get("institution"),
            }
            for item in data.get("accounts") or []
        ]
        raw_cards = data.get("credit_cards")
        if raw_cards is None:
            raw_cards = data.get("creditCards")
        credit_cards = [
            {
                "id": item["id"],
                "name": item["name"],
                "bank": item["bank"],
                "card_number": _first_present(item, "card_number", "cardNumber"),
            }
            for item in raw_cards or []
        ]
        return cls(
            categories=categories,
            subcategories=subcategories,
            accounts=accounts,
            credit_cards=credit_cards,
        )


@dataclass
class LookupIndexes:
    """Upper-cased name -> id mappings derived from a ContextSnapshot."""
    categories: Dict[str, str] = field(default_factory=dict)
    subcategories: Dict[str, Dict[str, str]] = field(default_factory=dict)
    bank_accounts: Dict[str, str] = field(default_factory=dict)
    credit_cards: Dict[str, str] = field(default_factory=dict)


def build_indexes(snapshot: ContextSnapshot) -> LookupIndexes:
    """
    Build lookup indexes from a context snapshot.

    Every key is the upper-cased human-readable name. Accounts are indexed
    under both institution and display name; credit cards under bank, display
    name and, when a card number is known, "<BANK> <NUMBER>" and "<NUMBER>".
    Colliding keys keep the last id written.

    Args:
        snapshot: Caller-supplied context snapshot

    Returns:
        LookupIndexes (empty mappings for an empty snapshot)
    """
    indexes = LookupIndexes()

    for category in snapshot.categories:
        indexes.categories[category["name"].upper()] = category["id"]

    for subcategory in snapshot.subcategories:
        indexes.subcategories[subcategory["name"].upper()] = {
            "id": subcategory["id"],
            "category_id": subcategory.get("category_id"),
        }

    for account in snapshot.accounts:
        name_key = account["name"].upper()
        institution = account.get("institution")
        institution_key = institution.upper() if institution else name_key
        indexes.bank_accounts[institution_key] = account["id"]
        indexes.bank_accounts[name_key] = account["id"]

    for card in snapshot.credit_cards:
        bank_key = card["bank"].upper()
        indexes.credit_cards[bank_key] = card["id"]
        indexes.credit_cards[card["name"].upper()] = card["id"]

        card_number = card.get("card_number")
        if card_number:
            card_number_key = str(card_number)
            indexes.credit_cards[f"{bank_key} {card_number_key}"] = card["id"]
            indexes.credit_cards[card_number_key] = card["id"]

    logger.debug(
        "Context loaded: %d categories, %d subcategories, %d account keys, %d card keys",
        len(indexes.categories),
        len(indexes.subcategories),
        len(indexes.bank_accounts),
        len(indexes.credit_cards),
    )

    return indexes

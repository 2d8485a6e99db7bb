"""
Account Resolver for SMS transactions.
Matches card digits and bank names to the user's credit cards and accounts.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from ..context.loader import LookupIndexes

logger = logging.getLogger(__name__)


class AccountType(Enum):
    """Kind of account a transaction is booked against."""
    BANK = "bank"
    CREDIT_CARD = "credit_card"


@dataclass
class AccountInfo:
    """Resolved account for a transaction."""
    account_id: Optional[str] = None
    account_name: Optional[str] = None
    account_type: Optional[AccountType] = None
    matched_by: Optional[str] = None  # 'card_number', 'credit_card', 'bank_account', 'fallback'

    def to_dict(self) -> Dict:
        return {
            "account_id": self.account_id,
            "account_name": self.account_name,
            "account_type": self.account_type.value if self.account_type else None,
            "matched_by": self.matched_by,
        }


class AccountResolver:
    """Resolves SMS account signals against the lookup indexes."""

    BANK_SUFFIX = " BANK"

    def __init__(self, indexes: LookupIndexes):
        self.indexes = indexes

    def resolve(
        self,
        card_number: Optional[str],
        bank_name: Optional[str]
    ) -> AccountInfo:
        """
        Resolve an account, trying card digits before the bank name.

        Args:
            card_number: Last four digits from the SMS
            bank_name: Bank name from the SMS

        Returns:
            AccountInfo (all None when there is nothing to go on)
        """
        account_info = self.resolve_by_card_number(card_number)
        if account_info is None:
            account_info = self.resolve_by_bank_name(bank_name)
        return account_info

    def resolve_by_card_number(self, card_number: Optional[str]) -> Optional[AccountInfo]:
        """
        Find a credit card whose index key contains the card digits.

        Args:
            card_number: Last four digits from the SMS

        Returns:
            AccountInfo named after the matched key, or None
        """
        if not card_number:
            return None

        for key, card_id in self.indexes.credit_cards.items():
            if card_number in key:
                logger.debug("Credit card %s matched by digits %s", key, card_number)
                return AccountInfo(
                    account_id=card_id,
                    account_name=key,
                    account_type=AccountType.CREDIT_CARD,
                    matched_by="card_number",
                )

        return None

    def resolve_by_bank_name(self, bank_name: Optional[str]) -> AccountInfo:
        """
        Resolve by bank name, preferring credit cards over bank accounts.

        When the bank is recognised but nothing in the user's data matches,
        a credit card with no id is assumed so the caller still gets a label.

        Args:
            bank_name: Bank name from the SMS

        Returns:
            AccountInfo
        """
        if not bank_name:
            return AccountInfo()

        bank_upper = bank_name.upper()

        card_id = self._find_credit_card(bank_name, bank_upper)
        if card_id:
            return AccountInfo(
                account_id=card_id,
                account_name=f"{bank_name} Credit Card",
                account_type=AccountType.CREDIT_CARD,
                matched_by="credit_card",
            )

        account_id = (
            self.indexes.bank_accounts.get(bank_upper)
            or self.indexes.bank_accounts.get(bank_name)
        )
        if account_id:
            return AccountInfo(
                account_id=account_id,
                account_name=f"{bank_name} Account",
                account_type=AccountType.BANK,
                matched_by="bank_account",
            )

        logger.debug("No account for bank %s, assuming credit card", bank_name)
        return AccountInfo(
            account_id=None,
            account_name=f"{bank_name} Credit Card",
            account_type=AccountType.CREDIT_CARD,
            matched_by="fallback",
        )

    def _find_credit_card(self, bank_name: str, bank_upper: str) -> Optional[str]:
        cards = self.indexes.credit_cards

        card_id = cards.get(bank_upper) or cards.get(bank_name)
        if card_id:
            return card_id

        stripped = bank_upper.replace(self.BANK_SUFFIX, "")
        variations = [
            f"{bank_upper}{self.BANK_SUFFIX}",
            stripped,
            f"{stripped}{self.BANK_SUFFIX}",
        ]
        for variation in variations:
            card_id = cards.get(variation)
            if card_id:
                return card_id

        return None

"""
Test suite for confidence scoring.
"""

import unittest

from sms_engine.extraction import ExtractedFields, TransactionType
from sms_engine.categorisation import Categorization
from sms_engine.accounts import AccountInfo, AccountType
from sms_engine.scoring import ConfidenceScorer


def make_fields(amount=100.0, merchant=None):
    return ExtractedFields(
        type=TransactionType.EXPENSE,
        amount=amount,
        date="2024-05-12",
        merchant=merchant,
        card_number=None,
        bank_name=None,
        original_text="",
    )


class TestConfidenceScorer(unittest.TestCase):
    """Test the weighted confidence score."""

    def setUp(self):
        self.scorer = ConfidenceScorer()
        self.categorization = Categorization(category_name="Wants", category_id="c1")
        self.account = AccountInfo(
            account_id="cc1",
            account_name="HDFC 1234",
            account_type=AccountType.CREDIT_CARD,
        )

    def test_amount_and_date_only(self):
        """Test the minimum score of a successful parse."""
        score = self.scorer.score(make_fields(), Categorization(), AccountInfo())

        self.assertEqual(score, 0.4)

    def test_all_signals(self):
        """Test the maximum score."""
        score = self.scorer.score(
            make_fields(merchant="AMAZON"),
            self.categorization,
            self.account,
        )

        self.assertEqual(score, 1.0)

    def test_merchant_without_category(self):
        """Test rounding of 0.3 + 0.1 + 0.2."""
        score = self.scorer.score(
            make_fields(merchant="QWERTY"),
            Categorization(),
            AccountInfo(),
        )

        self.assertEqual(score, 0.6)

    def test_category_label_without_id_scores_nothing(self):
        """Test that only a resolved id earns the category weight."""
        score = self.scorer.score(
            make_fields(merchant="BIGBASKET"),
            Categorization(category_name="Needs"),
            AccountInfo(account_name="AXIS Credit Card", account_type=AccountType.CREDIT_CARD),
        )

        self.assertEqual(score, 0.6)

    def test_zero_amount(self):
        """Test a zero amount earns no amount weight."""
        score = self.scorer.score(make_fields(amount=0.0), Categorization(), AccountInfo())

        self.assertEqual(score, 0.1)

    def test_score_is_clamped(self):
        """Test custom weights never push the score above 1."""
        scorer = ConfidenceScorer(weights={
            "amount": 0.5,
            "date": 0.5,
            "merchant": 0.5,
            "category": 0.5,
            "account": 0.5,
        })
        score = scorer.score(make_fields(merchant="AMAZON"), self.categorization, self.account)

        self.assertEqual(score, 1.0)

    def test_score_in_bounds(self):
        """Test every combination stays within [0, 1]."""
        for merchant in (None, "AMAZON"):
            for categorization in (Categorization(), self.categorization):
                for account in (AccountInfo(), self.account):
                    score = self.scorer.score(make_fields(merchant=merchant), categorization, account)
                    self.assertGreaterEqual(score, 0.0)
                    self.assertLessEqual(score, 1.0)


if __name__ == "__main__":
    unittest.main()

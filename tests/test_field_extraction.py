"""
Test suite for SMS field extraction.

Tests cover:
- Transaction direction keywords
- Amount patterns and their order
- Date patterns, day-first parsing and the today fallback
- Card number, bank name and merchant extraction
- Merchant clean-up (IND* prefix, cities, corporate suffixes)
"""

import unittest
from datetime import date

from sms_engine.extraction import (
    TransactionType,
    extract_transaction_type,
    extract_amount,
    extract_date,
    parse_date_text,
    extract_card_number,
    extract_bank_name,
    extract_merchant,
    extract_fields,
    search_pattern,
    clean_merchant_name,
    strip_merchant_suffixes,
)
from sms_engine.patterns import AMOUNT_PATTERNS, CARD_PATTERNS


class TestTransactionType(unittest.TestCase):
    """Test income/expense detection."""

    def test_credited_is_income(self):
        """Test that a credit alert is income."""
        self.assertEqual(
            extract_transaction_type("Rs.500 credited to your account"),
            TransactionType.INCOME
        )

    def test_cashback_is_income(self):
        """Test that cashback is income."""
        self.assertEqual(
            extract_transaction_type("Cashback of Rs 50 added"),
            TransactionType.INCOME
        )

    def test_salary_is_income(self):
        """Test that salary credit is income."""
        self.assertEqual(
            extract_transaction_type("Salary of INR 45,000 for May"),
            TransactionType.INCOME
        )

    def test_spend_is_expense(self):
        """Test that a spend alert without income keywords is expense."""
        self.assertEqual(
            extract_transaction_type("Rs.500 spent at ZOMATO"),
            TransactionType.EXPENSE
        )


class TestAmountExtraction(unittest.TestCase):
    """Test amount patterns."""

    def test_rs_prefix_with_thousands_separator(self):
        """Test Rs. prefix with comma separators."""
        self.assertEqual(extract_amount("Rs.1,234.50 debited"), 1234.50)

    def test_inr_prefix(self):
        """Test INR prefix."""
        self.assertEqual(extract_amount("INR 500 spent at KFC"), 500.0)

    def test_rupee_symbol_prefix(self):
        """Test the rupee symbol."""
        self.assertEqual(extract_amount("₹2,500 paid to Rahul"), 2500.0)

    def test_currency_suffix(self):
        """Test amount followed by currency."""
        self.assertEqual(extract_amount("Payment of 750 INR received"), 750.0)

    def test_amount_keyword(self):
        """Test AMOUNT keyword variant."""
        self.assertEqual(extract_amount("Amount 300 debited from A/c"), 300.0)

    def test_debited_suffix(self):
        """Test number followed by DEBITED."""
        self.assertEqual(extract_amount("1200 debited from your account"), 1200.0)

    def test_first_pattern_wins(self):
        """Test that the prefix pattern is preferred over later patterns."""
        self.assertEqual(extract_amount("Rs 100 spent, 200 INR cashback pending"), 100.0)

    def test_currency_attached_to_preceding_word(self):
        """Test a currency token glued to the word before it."""
        self.assertEqual(extract_amount("debited withRs.500 at ZOMATO"), 500.0)
        self.assertEqual(extract_amount("paid viaINR 250"), 250.0)

    def test_no_amount_returns_none(self):
        """Test that text without an amount yields None."""
        self.assertIsNone(extract_amount("Your account statement is ready"))

    def test_amount_is_deterministic(self):
        """Test repeated extraction gives the same amount."""
        text = "Rs.1,234.50 debited"
        self.assertEqual(extract_amount(text), extract_amount(text))

    def test_single_pattern_can_be_checked_in_isolation(self):
        """Test each amount pattern is usable on its own."""
        self.assertIsNotNone(search_pattern(AMOUNT_PATTERNS[0], "RS.10"))
        self.assertIsNone(search_pattern(AMOUNT_PATTERNS[0], "10 RS"))
        self.assertIsNotNone(search_pattern(AMOUNT_PATTERNS[1], "10 RS"))


class TestDateExtraction(unittest.TestCase):
    """Test date patterns and fallback."""

    def setUp(self):
        self.today = date(2024, 1, 1)

    def test_numeric_day_first(self):
        """Test D-M-Y parsing."""
        self.assertEqual(
            extract_date("spent on 12-05-2024", today=self.today),
            "2024-05-12"
        )

    def test_numeric_slash_two_digit_year(self):
        """Test D/M/YY parsing."""
        self.assertEqual(
            extract_date("txn dated 12/05/24", today=self.today),
            "2024-05-12"
        )

    def test_textual_month(self):
        """Test textual month names."""
        self.assertEqual(
            extract_date("debited on 12 May 2024", today=self.today),
            "2024-05-12"
        )

    def test_invalid_date_falls_back_to_today(self):
        """Test that an invalid date keeps the default."""
        self.assertEqual(
            extract_date("spent on 45-13-2024", today=self.today),
            "2024-01-01"
        )

    def test_no_date_uses_today(self):
        """Test the default date when nothing matches."""
        self.assertEqual(extract_date("Rs.500 debited", today=self.today), "2024-01-01")

    def test_default_is_iso_today(self):
        """Test the real default is today's ISO date."""
        self.assertEqual(extract_date("Rs.500 debited"), date.today().isoformat())

    def test_parse_date_text_rejects_invalid(self):
        """Test the parser returns None for impossible dates."""
        self.assertIsNone(parse_date_text("31-02-2024"))


class TestCardAndBankExtraction(unittest.TestCase):
    """Test card number and bank name extraction."""

    def test_card_keyword_with_mask(self):
        """Test CARD XX1234."""
        self.assertEqual(extract_card_number("HDFC Card XX1234"), "1234")

    def test_account_keyword_with_number_prefix(self):
        """Test A/c no. XX5678."""
        self.assertEqual(extract_card_number("A/c no. XX5678 debited"), "5678")

    def test_bare_mask(self):
        """Test ****4321 without keyword."""
        self.assertEqual(extract_card_number("spent using ****4321"), "4321")

    def test_digits_before_card_keyword(self):
        """Test digits followed by CARD."""
        self.assertEqual(extract_card_number("Your 9876 card was charged"), "9876")

    def test_no_card_number(self):
        """Test messages without card digits."""
        self.assertIsNone(extract_card_number("Rs.500 credited"))

    def test_card_patterns_checked_in_order(self):
        """Test the keyword pattern does not need the bare-mask pattern."""
        self.assertIsNone(search_pattern(CARD_PATTERNS[1], "CARD XX1234"))
        self.assertIsNotNone(search_pattern(CARD_PATTERNS[0], "CARD XX1234"))

    def test_bank_name(self):
        """Test bank detection."""
        self.assertEqual(extract_bank_name("ICICI Bank: Rs 200 spent"), "ICICI")

    def test_bank_list_order_wins(self):
        """Test that list order, not text position, decides the bank."""
        self.assertEqual(extract_bank_name("Transfer from SBI to HDFC"), "HDFC")

    def test_no_bank(self):
        """Test messages without a known bank."""
        self.assertIsNone(extract_bank_name("Rs.500 debited"))


class TestMerchantExtraction(unittest.TestCase):
    """Test merchant patterns and clean-up."""

    def test_on_pattern_strips_ind_prefix(self):
        """Test 'spent on IND*AMAZON using ...'."""
        self.assertEqual(
            extract_merchant("Rs.999.00 spent on IND*AMAZON using HDFC Card XX1234 on 12-05-2024"),
            "AMAZON"
        )

    def test_at_pattern_strips_city(self):
        """Test city removal."""
        self.assertEqual(
            extract_merchant("INR 450.00 spent at ZOMATO BANGALORE on 03-04-2024"),
            "ZOMATO"
        )

    def test_paid_to_strips_corporate_suffix(self):
        """Test corporate suffix removal."""
        self.assertEqual(
            extract_merchant("Rs 2,000 paid to Swiggy Pvt Ltd on 01-02-2024"),
            "SWIGGY"
        )

    def test_trailing_dash_terminates(self):
        """Test dash terminator."""
        self.assertEqual(extract_merchant("Rs.150 spent at UBER - ref 1234"), "UBER")

    def test_from_pattern(self):
        """Test FROM pattern."""
        self.assertEqual(
            extract_merchant("Rs.5000 received from ACME CORP on 05-06-2024"),
            "ACME CORP"
        )

    def test_for_pattern(self):
        """Test FOR pattern."""
        self.assertEqual(extract_merchant("Rs.499 debited for NETFLIX"), "NETFLIX")

    def test_connector_words_stay_in_merchant(self):
        """Test that FOR inside a merchant name does not end the capture."""
        self.assertEqual(extract_merchant("Rs.200 spent at BOOKS FOR YOU"), "BOOKS FOR YOU")

    def test_no_merchant(self):
        """Test messages without a merchant cue."""
        self.assertIsNone(extract_merchant("Rs.500 debited"))


class TestMerchantCleanup(unittest.TestCase):
    """Test merchant clean-up helpers."""

    def test_suffix_cleanup_is_idempotent(self):
        """Test cleaning a cleaned name again is a no-op."""
        for raw in ["ZOMATO BANGALORE", "FOO TRADERS -.", "ACME PVT LTD", "KFC MUMBAI 12"]:
            once = strip_merchant_suffixes(raw)
            self.assertEqual(strip_merchant_suffixes(once), once)

    def test_clean_removes_prefix_and_suffix(self):
        """Test the full clean-up."""
        self.assertEqual(clean_merchant_name("IND*FLIPKART INDIA PVT"), "FLIPKART")

    def test_clean_keeps_domain(self):
        """Test that dots inside the name survive."""
        self.assertEqual(clean_merchant_name("IND*AMAZON.IN"), "AMAZON.IN")

    def test_clean_empty(self):
        """Test empty captures."""
        self.assertIsNone(clean_merchant_name(""))
        self.assertIsNone(clean_merchant_name(" - "))


class TestExtractFields(unittest.TestCase):
    """Test the combined extractor."""

    def test_all_fields(self):
        """Test a full card alert."""
        sms = "Rs.999.00 spent on IND*AMAZON using HDFC Card XX1234 on 12-05-2024"
        fields = extract_fields(sms)

        self.assertEqual(fields.type, TransactionType.EXPENSE)
        self.assertEqual(fields.amount, 999.0)
        self.assertEqual(fields.date, "2024-05-12")
        self.assertEqual(fields.merchant, "AMAZON")
        self.assertEqual(fields.card_number, "1234")
        self.assertEqual(fields.bank_name, "HDFC")
        self.assertEqual(fields.original_text, sms)

    def test_missing_fields_stay_none(self):
        """Test best-effort extraction with gaps."""
        fields = extract_fields("Rs.500 credited", today=date(2024, 1, 1))

        self.assertEqual(fields.type, TransactionType.INCOME)
        self.assertEqual(fields.amount, 500.0)
        self.assertEqual(fields.date, "2024-01-01")
        self.assertIsNone(fields.merchant)
        self.assertIsNone(fields.card_number)
        self.assertIsNone(fields.bank_name)

    def test_to_dict_uses_plain_type(self):
        """Test serialisation of the type enum."""
        data = extract_fields("Rs.500 credited").to_dict()
        self.assertEqual(data["type"], "income")


if __name__ == "__main__":
    unittest.main()

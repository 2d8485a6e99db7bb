"""
SMS extraction patterns for the transaction analyzer.
Patterns for Indian bank and card alert messages.

All patterns run against the upper-cased SMS text. Lists are ordered:
the first pattern that matches wins.
"""

# Keywords that flip a message from expense to income
INCOME_KEYWORDS = (
    "CREDITED",
    "DEPOSIT",
    "RECEIVED",
    "REFUND",
    "CASHBACK",
    "SALARY",
)

# Amount patterns (group 1 is the number, thousands separators allowed)
AMOUNT_PATTERNS = [
    # RS.1,234.50 / INR 500 / ₹999
    r"(?:RS\.?\s*|INR\s*|₹\s*)(\d+(?:,\d+)*(?:\.\d{2})?)",
    # 1,234.50 RS / 500 INR
    r"(\d+(?:,\d+)*(?:\.\d{2})?)\s*(?:RS\.?|INR|₹)",
    # AMOUNT 500 / AMOUNT RS 500
    r"AMOUNT\s*(?:RS\.?\s*|INR\s*|₹\s*)?(\d+(?:,\d+)*(?:\.\d{2})?)",
    # 500 DEBITED / 500 SPENT
    r"(\d+(?:,\d+)*(?:\.\d{2})?)\s*(?:DEBITED|CREDITED|SPENT|PAID)",
]

# Date patterns (group 1 is the date text)
DATE_PATTERNS = [
    r"(\d{1,2}[-/]\d{1,2}[-/]\d{2,4})",
    r"(\d{1,2}\s+(?:JAN|FEB|MAR|APR|MAY|JUN|JUL|AUG|SEP|OCT|NOV|DEC)[A-Z]*\s+\d{2,4})",
    r"\bON\s+(\d{1,2}[-/]\d{1,2}[-/]\d{2,4})",
]

# Card / account last-four patterns (group 1 is the digits)
CARD_PATTERNS = [
    r"(?:CARD|A/C)\s*(?:NO\.?\s*)?[X*]+(\d{4})",
    r"[X*]{4,}(\d{4})",
    r"(\d{4})\s*(?:CARD|A/C)",
]

# Banks recognised by substring, in priority order
BANK_NAMES = (
    "HDFC",
    "ICICI",
    "AXIS",
    "SBI",
    "KOTAK",
    "INDUSIND",
)

# Words that end a merchant capture
_MERCHANT_STOP = (
    r"(?:\s+[-\.]|\s+(?:ON|USING)\b|\s+\d|\s*$)"
)

# Merchant patterns (group 1 is the raw merchant text)
MERCHANT_PATTERNS = [
    # SPENT ON AMAZON / AT ZOMATO / @ SWIGGY
    r"(?:\bON|\bAT|@)\s+([A-Z*][A-Z0-9\s\-\.\*&]{2,30}?)" + _MERCHANT_STOP,
    # PAID TO RAHUL / TO AIRTEL
    r"(?:\bPAID TO|\bTO)\s+([A-Z][A-Z0-9\s\-\.&]{2,30}?)" + _MERCHANT_STOP,
    # FROM ACME / VIA PAYTM
    r"(?:\bFROM|\bVIA)\s+([A-Z][A-Z0-9\s\-\.&]{2,30}?)" + _MERCHANT_STOP,
    # FOR NETFLIX
    r"(?:\bFOR|\bAT)\s+([A-Z*][A-Z0-9\s\-\.\*&]{2,30}?)" + _MERCHANT_STOP,
]

# Merchant clean-up
MERCHANT_PREFIXES = ("IND*",)

CITY_NAMES = (
    "BANGALORE",
    "MUMBAI",
    "DELHI",
    "CHENNAI",
    "HYDERABAD",
    "PUNE",
    "KOLKATA",
)

CORPORATE_SUFFIXES = (
    "PVT",
    "LTD",
    "LIMITED",
    "PRIVATE",
    "INDIA",
)

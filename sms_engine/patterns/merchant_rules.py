"""
Merchant categorisation rules for the SMS analyzer.

Ordered list of (merchant key, labels) pairs. Keys are upper-case merchant
tokens; labels name the category and subcategory as they appear in the
user's budget. Order matters: partial matching walks this list from the top
and stops at the first hit.
"""

MERCHANT_RULES = [
    # Shopping & E-commerce
    ("AMAZON", {"category": "Wants", "subcategory": "Shopping"}),
    ("AMAZON.IN", {"category": "Wants", "subcategory": "Shopping"}),
    ("AMAZON.COM", {"category": "Wants", "subcategory": "Shopping"}),
    ("IND*AMAZON", {"category": "Wants", "subcategory": "Shopping"}),
    ("IND*AMAZON.IN", {"category": "Wants", "subcategory": "Shopping"}),
    ("FLIPKART", {"category": "Wants", "subcategory": "Shopping"}),
    ("MYNTRA", {"category": "Wants", "subcategory": "Shopping"}),
    ("AJIO", {"category": "Wants", "subcategory": "Shopping"}),
    ("NYKAA", {"category": "Wants", "subcategory": "Shopping"}),
    ("MEESHO", {"category": "Wants", "subcategory": "Shopping"}),

    # Food & Dining
    ("ZOMATO", {"category": "Wants", "subcategory": "Food & Dining"}),
    ("SWIGGY", {"category": "Wants", "subcategory": "Food & Dining"}),
    ("DOMINOS", {"category": "Wants", "subcategory": "Food & Dining"}),
    ("MCDONALDS", {"category": "Wants", "subcategory": "Food & Dining"}),
    ("KFC", {"category": "Wants", "subcategory": "Food & Dining"}),
    ("PIZZA HUT", {"category": "Wants", "subcategory": "Food & Dining"}),

    # Groceries
    ("BIGBASKET", {"category": "Needs", "subcategory": "Groceries"}),
    ("GROFERS", {"category": "Needs", "subcategory": "Groceries"}),
    ("ZEPTO", {"category": "Needs", "subcategory": "Groceries"}),
    ("BLINKIT", {"category": "Needs", "subcategory": "Groceries"}),
    ("DUNZO", {"category": "Needs", "subcategory": "Groceries"}),
    ("BIG BAZAAR", {"category": "Needs", "subcategory": "Groceries"}),
    ("RELIANCE FRESH", {"category": "Needs", "subcategory": "Groceries"}),

    # Transportation
    ("UBER", {"category": "Needs", "subcategory": "Transportation"}),
    ("OLA", {"category": "Needs", "subcategory": "Transportation"}),
    ("RAPIDO", {"category": "Needs", "subcategory": "Transportation"}),

    # Entertainment
    ("NETFLIX", {"category": "Wants", "subcategory": "Entertainment"}),
    ("AMAZON PRIME", {"category": "Wants", "subcategory": "Entertainment"}),
    ("BOOKMYSHOW", {"category": "Wants", "subcategory": "Entertainment"}),
    ("HOTSTAR", {"category": "Wants", "subcategory": "Entertainment"}),
    ("SPOTIFY", {"category": "Wants", "subcategory": "Entertainment"}),
    ("PVR CINEMAS", {"category": "Wants", "subcategory": "Entertainment"}),

    # Bills & Utilities
    ("AIRTEL", {"category": "Needs", "subcategory": "Phone & Internet"}),
    ("JIO", {"category": "Needs", "subcategory": "Phone & Internet"}),
    ("VODAFONE", {"category": "Needs", "subcategory": "Phone & Internet"}),
    ("BSNL", {"category": "Needs", "subcategory": "Phone & Internet"}),
    ("TATA POWER", {"category": "Needs", "subcategory": "Utilities"}),
    ("ELECTRICITY BILL", {"category": "Needs", "subcategory": "Utilities"}),

    # Healthcare
    ("APOLLO PHARMACY", {"category": "Needs", "subcategory": "Healthcare"}),
    ("MEDPLUS", {"category": "Needs", "subcategory": "Healthcare"}),
    ("1MG", {"category": "Needs", "subcategory": "Healthcare"}),

    # Electronics
    ("CROMA ELECTRONICS", {"category": "Wants", "subcategory": "Electronics"}),
    ("VIJAY SALES", {"category": "Wants", "subcategory": "Electronics"}),
    ("RELIANCE DIGITAL", {"category": "Wants", "subcategory": "Electronics"}),

    # Fashion & Lifestyle
    ("LIFESTYLE STORES", {"category": "Wants", "subcategory": "Fashion"}),
    ("WESTSIDE", {"category": "Wants", "subcategory": "Fashion"}),
    ("PANTALOONS", {"category": "Wants", "subcategory": "Fashion"}),

    # Travel
    ("INDIGO AIRLINES", {"category": "Wants", "subcategory": "Travel"}),
    ("SPICEJET", {"category": "Wants", "subcategory": "Travel"}),
    ("BOOKING.COM", {"category": "Wants", "subcategory": "Travel"}),
    ("MAKEMYTRIP", {"category": "Wants", "subcategory": "Travel"}),
    ("LUFTHANSA", {"category": "Wants", "subcategory": "Travel"}),

    # Financial Services
    ("MUTUAL FUND", {"category": "Save", "subcategory": "Investments"}),
    ("SIP", {"category": "Save", "subcategory": "Investments"}),
    ("INSURANCE PREMIUM", {"category": "Needs", "subcategory": "Insurance"}),
    ("HOME LOAN EMI", {"category": "Needs", "subcategory": "Loan EMI"}),
    ("CAR LOAN EMI", {"category": "Needs", "subcategory": "Loan EMI"}),

    # Government & Tax
    ("INCOME TAX", {"category": "Needs", "subcategory": "Government & Tax"}),
    ("GST PAYMENT", {"category": "Needs", "subcategory": "Government & Tax"}),
]

"""
Rule Tables
============
Static keyword sets and ordered regex lists used by the SMS classifier.

All tables are compiled once at import and never mutated:
- keyword sets are frozensets matched as plain substrings
- pattern lists are tuples of (compiled pattern, tag) pairs, evaluated
  in order with first-match-wins semantics

Amount patterns capture the numeric amount as group 1.
"""

import re

SPAM = "spam"
TRANSACTIONAL = "transactional"
NON_TRANSACTIONAL = "non-transactional"

DEBIT = "debit"
CREDIT = "credit"

UNKNOWN_MERCHANT = "Unknown Merchant"
MAX_MERCHANT_LENGTH = 50

# Currency marker and numeric amount shared by the amount patterns
_CUR = r"(?:rs\.?|inr|₹)"
_AMT = r"([\d,]+(?:\.\d{1,2})?)"
# Gap between a keyword and the amount or verb it pairs with. Bounded so
# each keyword occurrence costs constant work instead of a scan to the end.
_GAP = r".{0,160}?"


# ==============================
# SPAM
# ==============================

SPAM_KEYWORDS = frozenset(kw.lower() for kw in [
    # Promotions
    "100% free", "act now", "apply now", "free gift", "money back", "limited time", "winner",
    "exclusive deal", "click here", "you have been selected", "be your own boss", "free trial",
    "congratulations", "you won", "claim now", "urgent", "hurry", "expires today", "last chance",
    "no obligation", "risk free", "satisfaction guaranteed", "special promotion", "limited offer",
    "call now", "order now", "buy now", "subscribe", "unsubscribe", "opt out", "stop sms",

    # Gambling / easy money
    "lottery", "jackpot", "casino", "gambling", "bet", "loan approved", "credit approved",
    "instant cash", "easy money", "work from home", "make money fast", "get rich quick",

    # Hype
    "miracle", "breakthrough", "amazing", "incredible", "fantastic", "unbelievable",
    "free consultation", "free quote", "free estimate", "no cost", "no fee", "no charge",
    "double your income", "financial freedom", "debt relief", "consolidate debt",

    # Pharma / health
    "viagra", "cialis", "pharmacy", "prescription", "medicine", "pills", "drugs",
    "weight loss", "lose weight", "diet pills", "fat burner", "slim down",

    # Schemes / trading
    "mlm", "multi level marketing", "pyramid scheme", "network marketing",
    "investment opportunity", "stock alert", "penny stock", "trading", "forex",
])

SPAM_PATTERNS = (
    (re.compile(r"http[s]?://", re.IGNORECASE), "link"),
    (re.compile(r"!{3,}"), "exclamations"),
    # local@domain.tld, repetitions bounded to keep the search linear
    (re.compile(r"[\w.-]{1,64}@[\w-]{1,63}(?:\.[\w-]{1,63})+", re.IGNORECASE), "email"),
)


# ==============================
# TRANSACTIONS
# ==============================

TRANSACTION_KEYWORDS = frozenset(kw.lower() for kw in [
    # Movement terms
    "debited", "credited", "transaction", "paid", "payment", "transferred", "upi", "imps", "neft",
    "netbanking", "wallet", "purchase", "merchant", "ref no", "a/c", "acc", "account",
    "balance", "avl bal", "available balance", "txn", "transaction id", "reference number",
    "atm", "pos", "online", "mobile banking", "internet banking", "card", "debit card",
    "credit card", "bank", "branch", "ifsc", "micr", "cheque", "dd", "demand draft",
    "rtgs", "swift", "wire transfer", "remittance", "money transfer", "fund transfer",

    # Payment apps / gateways
    "paytm", "phonepe", "gpay", "google pay", "bhim", "amazon pay", "mobikwik",
    "freecharge", "paypal", "razorpay", "cashfree", "instamojo", "payu", "ccavenue",

    # Banks
    "sbi", "hdfc", "icici", "axis", "kotak", "yes bank", "pnb", "bob", "canara",
    "union bank", "indian bank", "central bank", "syndicate", "allahabad", "vijaya",
    "corporation bank", "oriental bank", "andhra bank", "dena bank", "idbi",
])

TRANSACTION_PATTERNS = (
    (re.compile(rf"debited{_GAP}(?:account|a/c|acc)", re.IGNORECASE), "debited_account"),
    (re.compile(rf"credited{_GAP}(?:account|a/c|acc)", re.IGNORECASE), "credited_account"),
    (re.compile(rf"payment{_GAP}(?:successful|done|received)", re.IGNORECASE), "payment_status"),
    (re.compile(r"(?:rs\.?|₹|inr)\s?\d", re.IGNORECASE), "currency_amount"),
    (re.compile(r"ref(?:erence)?\s?no\.?\s?\d+", re.IGNORECASE), "reference_number"),
)


# ==============================
# AMOUNT & DIRECTION
# ==============================

# Priority order matters: the first matching debit pattern wins, and
# credit patterns are only tried when no debit pattern matched.
DEBIT_PATTERNS = (
    (re.compile(rf"a/?c\s?[x*]*\d+\s+debited\s+for\s+{_CUR}\s?{_AMT}", re.IGNORECASE), DEBIT),
    (re.compile(rf"your\s+(?:a/?c(?:count)?(?:\snumber)?\s[x*]\d+).?debited\s+(?:by|for)\s+{_CUR}\s?{_AMT}",
                re.IGNORECASE), DEBIT),
    (re.compile(rf"transaction\s+(?:of\s?)?{_CUR}\s?{_AMT}{_GAP}debited", re.IGNORECASE), DEBIT),
    (re.compile(rf"debit(?:ed)?\s+(?:of|for)\s+{_CUR}\s?{_AMT}", re.IGNORECASE), DEBIT),
    (re.compile(rf"atm\s+wdl{_GAP}{_CUR}\s?{_AMT}", re.IGNORECASE), DEBIT),
    (re.compile(rf"(?:neft|imps|upi|transfer|txn){_GAP}debited\s+{_CUR}\s?{_AMT}", re.IGNORECASE), DEBIT),
    (re.compile(rf"your\s(?:a/?c|account)\s(?:is\s)?debited\s+{_CUR}?\s?{_AMT}", re.IGNORECASE), DEBIT),
    (re.compile(rf"{_CUR}\s?{_AMT}\s?(?:has\s)?been\s?debited", re.IGNORECASE), DEBIT),
    (re.compile(rf"amount\s?(?:is|:)\s?{_CUR}\s?{_AMT}", re.IGNORECASE), DEBIT),
)

CREDIT_PATTERNS = (
    (re.compile(rf"credit(?:ed)?\s?(?:with|by|:)?\s?{_CUR}\s?{_AMT}", re.IGNORECASE), CREDIT),
    (re.compile(rf"your\s(?:a/?c|account)\s(?:is\s)?credited(?:\swith)?\s?{_CUR}\s?{_AMT}",
                re.IGNORECASE), CREDIT),
)

AMOUNT_PATTERNS = DEBIT_PATTERNS + CREDIT_PATTERNS


# ==============================
# MERCHANT
# ==============================

# Candidate text is bounded so that a long run without a stop word
# cannot trigger quadratic backtracking.
_CANDIDATE = r"([A-Za-z0-9\s&.-]{1,120}?)"
_STOP = r"(?:\s+on|\s+via|\s+using|\s+ref|\s+txn|\.|\s*$)"

MERCHANT_PATTERNS = (
    (re.compile(rf"(?:at|to)\s+{_CANDIDATE}{_STOP}", re.IGNORECASE), "at_to"),
    (re.compile(rf"for\s+{_CANDIDATE}{_STOP}", re.IGNORECASE), "for"),
    (re.compile(rf"{_CANDIDATE}\s+transaction", re.IGNORECASE), "before_transaction"),
    (re.compile(rf"paid\s+to\s+{_CANDIDATE}{_STOP}", re.IGNORECASE), "paid_to"),
    (re.compile(rf"transfer\s+to\s+{_CANDIDATE}{_STOP}", re.IGNORECASE), "transfer_to"),
)

NON_MERCHANT_WORDS = frozenset([
    "account", "a/c", "acc", "bank", "branch", "atm", "pos", "online",
    "mobile", "internet", "card", "debit", "credit", "transaction", "txn",
    "payment", "transfer", "upi", "imps", "neft", "rtgs", "ref", "reference",
    "number", "no", "id", "balance", "avl", "available", "limit", "date",
    "time", "amount", "rs", "inr", "rupees", "paisa", "your", "you", "has",
    "been", "is", "was", "will", "be", "for", "from", "to", "at", "on",
    "via", "using", "with", "by", "in", "of", "the", "and", "or", "but",
])

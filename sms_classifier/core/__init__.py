"""
Core Modules
=============
Contains the message classification logic:
- rules.py       — Keyword sets and ordered regex tables
- classifier.py  — Spam / transaction detection and amount extraction
- merchant.py    — Merchant name extraction
- transaction.py — Expense-tracking decision per SMS
"""

from sms_classifier.core.classifier import (
    ClassificationResult,
    classify,
    extract_amount,
    is_spam,
    is_transactional,
)
from sms_classifier.core.merchant import extract_merchant
from sms_classifier.core.transaction import (
    MessageAnalysis,
    TransactionData,
    analyze_message,
    extract_transaction_data,
)

__all__ = [
    "ClassificationResult",
    "MessageAnalysis",
    "TransactionData",
    "analyze_message",
    "classify",
    "extract_amount",
    "extract_merchant",
    "extract_transaction_data",
    "is_spam",
    "is_transactional",
]

"""
Merchant Extraction
====================
Best-effort extraction of the counterparty name from a transaction SMS.

Patterns run against the original-case text so merchant capitalization
survives. Each captured candidate is cleaned and filtered; the first
accepted candidate wins, otherwise the "Unknown Merchant" sentinel is
returned.
"""

import logging
import re

from sms_classifier.core.rules import (
    MAX_MERCHANT_LENGTH,
    MERCHANT_PATTERNS,
    NON_MERCHANT_WORDS,
    UNKNOWN_MERCHANT,
)

logger = logging.getLogger(__name__)

_DISALLOWED_CHARS = re.compile(r"[^\w\s&.-]")
_WHITESPACE = re.compile(r"\s+")
# Leading plain number, amount or clock time: "500 ...", "3 PM", "10:30 am"
_LEADING_NUMBER = re.compile(r"\d+(?:[.,:]\d+)*(?:\s|$)")


def clean_merchant_name(candidate: str) -> str:
    """Replace stray symbols with spaces and normalize whitespace."""
    cleaned = _DISALLOWED_CHARS.sub(" ", candidate.strip())
    return _WHITESPACE.sub(" ", cleaned).strip()


def is_common_non_merchant(text: str) -> bool:
    """True if the lowercased candidate is a banking/grammar filler word."""
    return text in NON_MERCHANT_WORDS


def _accept(candidate: str) -> bool:
    if len(candidate) <= 2:
        return False
    if is_common_non_merchant(candidate.lower()):
        return False
    if _LEADING_NUMBER.match(candidate):
        return False
    return True


def extract_merchant(text: str) -> str:
    """
    Extract a merchant name from a raw SMS.

    Never raises. Output is non-empty and at most 50 characters.

    Args:
        text: Raw message text, original case

    Returns:
        Merchant name, or "Unknown Merchant"
    """
    if not text:
        return UNKNOWN_MERCHANT

    for pattern, tag in MERCHANT_PATTERNS:
        match = pattern.search(text)
        if not match or not match.group(1):
            continue

        merchant = clean_merchant_name(match.group(1))
        if _accept(merchant):
            logger.debug(f"Merchant '{merchant}' via '{tag}' pattern")
            return merchant[:MAX_MERCHANT_LENGTH]

    return UNKNOWN_MERCHANT

"""
SMS Classification Engine
==========================
Decides whether a bank/merchant SMS is spam, a transaction notification,
or neither, and pulls the amount and debit/credit direction out of
transaction messages.

Pipeline (short-circuiting):
    1. Lowercase once
    2. Spam check      — keyword substrings, then spam patterns
    3. Transaction     — keyword substrings, then transaction patterns
    4. Amount extract  — debit tier first, credit tier second

Every function here is pure and total: any string, including empty or
adversarial text, yields a well-formed result.
"""

import logging
from typing import Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from sms_classifier.core.rules import (
    AMOUNT_PATTERNS,
    NON_TRANSACTIONAL,
    SPAM,
    SPAM_KEYWORDS,
    SPAM_PATTERNS,
    TRANSACTION_KEYWORDS,
    TRANSACTION_PATTERNS,
    TRANSACTIONAL,
)

logger = logging.getLogger(__name__)


class ClassificationResult(BaseModel):
    """Outcome of classifying a single message."""
    model_config = ConfigDict(frozen=True)

    status: Literal["spam", "transactional", "non-transactional"] = Field(
        description="Message class")
    direction: Optional[Literal["debit", "credit"]] = Field(default=None, description="Money out or in")
    amount: Optional[str] = Field(default=None, description="Amount with thousands separators removed")


def _contains_any(lowered: str, keywords) -> bool:
    for kw in keywords:
        if kw in lowered:
            return True
    return False


def _matches_any(text: str, patterns) -> bool:
    for pattern, tag in patterns:
        if pattern.search(text):
            logger.debug(f"Pattern '{tag}' matched")
            return True
    return False


def is_spam(text: str) -> bool:
    """
    Check a message against spam keywords and spam patterns.

    Keywords are matched as plain substrings of the lowercased text,
    so they also hit mid-word.

    Args:
        text: Message text in any case

    Returns:
        True if any spam keyword or pattern matches
    """
    lowered = (text or "").lower()
    return _contains_any(lowered, SPAM_KEYWORDS) or _matches_any(lowered, SPAM_PATTERNS)


def is_transactional(text: str) -> bool:
    """
    Check a message against transaction keywords and patterns.

    Independent of spam status; classify() decides precedence.
    """
    lowered = (text or "").lower()
    return (_contains_any(lowered, TRANSACTION_KEYWORDS)
            or _matches_any(lowered, TRANSACTION_PATTERNS))


def extract_amount(text: str) -> Tuple[Optional[str], Optional[str]]:
    """
    Extract (direction, amount) from a transaction message.

    Debit patterns are tried before credit patterns and the first match
    wins. Commas are stripped from the captured amount; nothing else is
    reformatted.

    Args:
        text: Message text (lowercased internally)

    Returns:
        ("debit" | "credit", amount) or (None, None) when nothing matches
    """
    lowered = (text or "").lower()
    for pattern, direction in AMOUNT_PATTERNS:
        match = pattern.search(lowered)
        if not match:
            continue
        amount = match.group(1).replace(",", "")
        # A bare run of commas ("rs ,,") is not an amount
        if amount:
            logger.debug(f"Amount {amount} ({direction}) via /{pattern.pattern}/")
            return direction, amount
    return None, None


def classify(text: str) -> ClassificationResult:
    """
    Classify a raw SMS.

    Spam takes precedence over transaction detection. A transactional
    message with no recognizable amount is still reported as
    transactional, with direction and amount both None.

    Args:
        text: Raw message text

    Returns:
        ClassificationResult
    """
    lowered = (text or "").lower()

    if is_spam(lowered):
        return ClassificationResult(status=SPAM)

    if is_transactional(lowered):
        direction, amount = extract_amount(lowered)
        return ClassificationResult(status=TRANSACTIONAL, direction=direction, amount=amount)

    return ClassificationResult(status=NON_TRANSACTIONAL)

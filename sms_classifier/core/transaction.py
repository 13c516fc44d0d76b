"""
Expense Analysis
=================
Combines classification and merchant extraction into the decision an
expense tracker takes for each incoming SMS:

- spam                          → ignored
- transactional, debit amount   → recorded as an expense
- transactional, credit amount  → reported but not recorded
- transactional, no amount      → ignored
- anything else                 → ignored

The merchant is only looked up for messages that carry an amount.
"""

import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from sms_classifier.core.classifier import ClassificationResult, classify
from sms_classifier.core.merchant import extract_merchant
from sms_classifier.core.rules import DEBIT, SPAM, TRANSACTIONAL

logger = logging.getLogger(__name__)

IGNORED_SPAM = "ignored_spam"
RECORDED_EXPENSE = "recorded_expense"
SKIPPED_CREDIT = "skipped_credit"
IGNORED_NO_AMOUNT = "ignored_no_amount"
IGNORED_NON_TRANSACTIONAL = "ignored_non_transactional"


class TransactionData(BaseModel):
    """A money movement pulled out of an SMS."""
    model_config = ConfigDict(frozen=True)

    amount: Decimal = Field(description="Transaction amount")
    merchant: str = Field(description="Counterparty, or 'Unknown Merchant'")
    direction: Literal["debit", "credit"] = Field(description="Money out or in")
    timestamp: datetime = Field(description="When the message was received")
    original_text: str = Field(description="Raw SMS body")


class MessageAnalysis(BaseModel):
    """Classification plus the expense-tracking decision for one SMS."""
    model_config = ConfigDict(frozen=True)

    classification: ClassificationResult
    disposition: Literal["ignored_spam", "recorded_expense", "skipped_credit",
                         "ignored_no_amount", "ignored_non_transactional"]
    merchant: Optional[str] = None
    transaction: Optional[TransactionData] = None


def _build_transaction(text: str, result: ClassificationResult,
                       timestamp: Optional[datetime]) -> TransactionData:
    return TransactionData(
        amount=Decimal(result.amount),
        merchant=extract_merchant(text),
        direction=result.direction,
        timestamp=timestamp or datetime.now(timezone.utc),
        original_text=text,
    )


def analyze_message(text: str, timestamp: Optional[datetime] = None) -> MessageAnalysis:
    """
    Run the full pipeline on one SMS and decide what to do with it.

    Args:
        text: Raw message text
        timestamp: Receive time; defaults to now (UTC)

    Returns:
        MessageAnalysis with disposition and, for messages carrying an
        amount, the extracted TransactionData
    """
    text = text or ""
    result = classify(text)

    if result.status == SPAM:
        logger.info("SMS identified as spam - ignoring")
        return MessageAnalysis(classification=result, disposition=IGNORED_SPAM)

    if result.status != TRANSACTIONAL:
        logger.info("Non-transactional SMS - ignoring")
        return MessageAnalysis(classification=result, disposition=IGNORED_NON_TRANSACTIONAL)

    if not (result.amount and result.direction):
        logger.info("Transactional SMS without a recognizable amount - ignoring")
        return MessageAnalysis(classification=result, disposition=IGNORED_NO_AMOUNT)

    transaction = _build_transaction(text, result, timestamp)

    if transaction.direction == DEBIT:
        disposition = RECORDED_EXPENSE
        logger.info(f"Expense detected: {transaction.amount} at {transaction.merchant}")
    else:
        disposition = SKIPPED_CREDIT
        logger.info(f"Credit of {transaction.amount} detected - not recorded as expense")

    return MessageAnalysis(
        classification=result,
        disposition=disposition,
        merchant=transaction.merchant,
        transaction=transaction,
    )


def extract_transaction_data(text: str, timestamp: Optional[datetime] = None) -> Optional[TransactionData]:
    """Return the expense record for a debit SMS, or None for anything else."""
    analysis = analyze_message(text, timestamp)
    if analysis.disposition != RECORDED_EXPENSE:
        return None
    return analysis.transaction

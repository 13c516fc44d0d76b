"""
Pydantic Schema Definitions
============================
Defines request/response models for the SMS classifier API.

MessageRequest:  Raw SMS body plus optional receive time.
MerchantReply:   Merchant name extracted from a message.
ExpenseReply:    Expense record for debit messages, null otherwise.

Classification and analysis responses reuse the core models
(ClassificationResult, MessageAnalysis) directly.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from sms_classifier.config import MAX_MESSAGE_LENGTH
from sms_classifier.core.transaction import TransactionData


class MessageRequest(BaseModel):
    """Incoming SMS to classify."""
    text: str = Field(max_length=MAX_MESSAGE_LENGTH, description="Raw SMS body")
    timestamp: Optional[datetime] = Field(default=None, description="Receive time, defaults to now")


class MerchantReply(BaseModel):
    merchant: str = Field(description="Merchant name or 'Unknown Merchant'")


class ExpenseReply(BaseModel):
    """Expense extracted from a debit SMS."""
    expense: Optional[TransactionData] = Field(default=None, description="Null unless the SMS is a debit")

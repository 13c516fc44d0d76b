"""Tests for the per-message expense decision."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from sms_classifier.core import analyze_message, extract_transaction_data

RECEIVED = datetime(2024, 6, 13, 9, 30, tzinfo=timezone.utc)


class TestAnalyzeMessage:
    """Test dispositions for typical bank SMS."""

    def test_debit_recorded_as_expense(self):
        text = "Your A/c X1234 has been debited for Rs. 250.00 at Amazon on 13-Jun-24. Avl Bal: Rs 25,000.00"
        analysis = analyze_message(text, RECEIVED)

        assert analysis.disposition == "recorded_expense"
        assert analysis.merchant == "Amazon"
        assert analysis.transaction.amount == Decimal("250.00")
        assert analysis.transaction.direction == "debit"
        assert analysis.transaction.timestamp == RECEIVED
        assert analysis.transaction.original_text == text

    def test_atm_withdrawal(self):
        analysis = analyze_message("ATM WDL Rs.2000 from SBI ATM at MG Road on 13-Jun-24. Avl Bal: Rs.15000")
        assert analysis.disposition == "recorded_expense"
        assert analysis.transaction.amount == Decimal("2000")
        assert analysis.merchant == "MG Road"

    def test_credit_is_skipped(self):
        analysis = analyze_message("Your account is credited with INR 2,500 by IMPS from John Doe")
        assert analysis.disposition == "skipped_credit"
        assert analysis.transaction.direction == "credit"
        assert analysis.transaction.amount == Decimal("2500")
        assert analysis.merchant == "Unknown Merchant"

    def test_spam_is_ignored(self):
        analysis = analyze_message("Congratulations! You have won a FREE gift card worth ₹1000. Click here!!!")
        assert analysis.disposition == "ignored_spam"
        assert analysis.classification.status == "spam"
        assert analysis.transaction is None
        assert analysis.merchant is None

    def test_transactional_without_amount(self):
        analysis = analyze_message("Paid ₹150 to Swiggy via UPI. Transaction ID: ABC123456789. Balance: ₹5000")
        assert analysis.disposition == "ignored_no_amount"
        assert analysis.classification.status == "transactional"
        assert analysis.transaction is None

    def test_non_transactional(self):
        analysis = analyze_message("Your OTP for login is 123456. Do not share with anyone.")
        assert analysis.disposition == "ignored_non_transactional"

    def test_default_timestamp_is_utc_now(self):
        before = datetime.now(timezone.utc)
        analysis = analyze_message("Rs 450 has been debited from your account")
        assert analysis.transaction.timestamp >= before
        assert analysis.transaction.timestamp.tzinfo is not None


class TestExtractTransactionData:
    """Test the debit-only expense extractor."""

    def test_debit(self):
        data = extract_transaction_data("Transaction of Rs.600 at Croma on 02-Jan has been debited", RECEIVED)
        assert data is not None
        assert data.amount == Decimal("600")
        assert data.merchant == "Croma"

    @pytest.mark.parametrize("text", [
        "Your account is credited with INR 2,500 by IMPS from John Doe",
        "Congratulations! You have won a FREE gift card worth ₹1000. Click here!!!",
        "Meeting scheduled for 3 PM today.",
        "",
    ])
    def test_returns_none(self, text):
        assert extract_transaction_data(text) is None

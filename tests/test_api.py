"""Tests for the HTTP endpoints."""

from decimal import Decimal

from sms_classifier import config

DEBIT_SMS = "Your A/c X1234 has been debited for Rs. 5,000 on 12 Jun. Avl Bal: Rs 25,000"


class TestHealth:

    def test_health(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "running"


class TestEndpoints:
    """Test request/response shapes."""

    def test_classify(self, client):
        response = client.post("/classify", json={"text": DEBIT_SMS})
        assert response.status_code == 200
        assert response.json() == {"status": "transactional", "direction": "debit", "amount": "5000"}

    def test_classify_spam(self, client):
        response = client.post("/classify", json={"text": "Click here!!! to claim"})
        assert response.json() == {"status": "spam", "direction": None, "amount": None}

    def test_merchant(self, client):
        text = "Transaction of Rs.500 at Big Bazaar using your HDFC Bank Debit Card ending 1234"
        response = client.post("/merchant", json={"text": text})
        assert response.status_code == 200
        assert response.json() == {"merchant": "Big Bazaar"}

    def test_analyze(self, client):
        text = "Your A/c X1234 has been debited for Rs. 250.00 at Amazon on 13-Jun-24."
        response = client.post("/analyze", json={"text": text, "timestamp": "2024-06-13T09:30:00Z"})
        body = response.json()

        assert response.status_code == 200
        assert body["disposition"] == "recorded_expense"
        assert body["classification"]["direction"] == "debit"
        assert body["merchant"] == "Amazon"
        assert Decimal(str(body["transaction"]["amount"])) == Decimal("250.00")
        assert body["transaction"]["timestamp"].startswith("2024-06-13T09:30:00")

    def test_expense_for_credit_is_null(self, client):
        response = client.post("/expense", json={"text": "Your account is credited with INR 2,500"})
        assert response.status_code == 200
        assert response.json() == {"expense": None}

    def test_empty_text_is_valid(self, client):
        response = client.post("/classify", json={"text": ""})
        assert response.status_code == 200
        assert response.json()["status"] == "non-transactional"

    def test_missing_text(self, client):
        assert client.post("/classify", json={}).status_code == 422

    def test_text_too_long(self, client):
        text = "a" * (config.MAX_MESSAGE_LENGTH + 1)
        assert client.post("/classify", json={"text": text}).status_code == 422


class TestApiKey:
    """Test X-API-Key enforcement."""

    def test_rejects_missing_key(self, secured_client):
        response = secured_client.post("/classify", json={"text": DEBIT_SMS})
        assert response.status_code == 401

    def test_rejects_wrong_key(self, secured_client):
        response = secured_client.post("/merchant", json={"text": DEBIT_SMS},
                                       headers={"X-API-Key": "nope"})
        assert response.status_code == 401

    def test_accepts_valid_key(self, secured_client):
        response = secured_client.post("/classify", json={"text": DEBIT_SMS},
                                       headers={"X-API-Key": "secret"})
        assert response.status_code == 200

    def test_health_is_open(self, secured_client):
        assert secured_client.get("/").status_code == 200

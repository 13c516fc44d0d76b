"""
SMS Transaction Classifier — Main Application
===============================================
FastAPI service that classifies bank/merchant SMS and extracts the
amount, debit/credit direction and merchant of transaction messages.

Endpoints:
    GET  /          — Health check
    POST /classify  — Spam / transactional / non-transactional + amount
    POST /merchant  — Merchant name
    POST /analyze   — Classification plus expense-tracking decision
    POST /expense   — Expense record for debit messages

Architecture:
    1. Receives the raw SMS body
    2. Runs the pure classification core (no state, no I/O)
    3. Returns the result; persistence and notifications are left to
       the caller
"""

import logging
import traceback
from fastapi import FastAPI, Depends, Request
from fastapi.responses import JSONResponse

from sms_classifier import __version__, config
from sms_classifier.security import verify_api_key
from sms_classifier.schemas import ExpenseReply, MerchantReply, MessageRequest
from sms_classifier.core import (
    ClassificationResult,
    MessageAnalysis,
    analyze_message,
    classify,
    extract_merchant,
    extract_transaction_data,
)

# Configure logging for production visibility
logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

if not config.API_KEY:
    logger.warning("API_KEY not set — requests are not authenticated")

app = FastAPI(
    title="SMS Transaction Classifier",
    description="Classifies bank SMS and extracts amount, direction and merchant",
    version=__version__
)


# ---------- GLOBAL EXCEPTION HANDLER ----------

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Log unexpected errors and return a generic 500 body."""
    logger.error(f"Unhandled exception on {request.url.path}: {exc}")
    logger.error(traceback.format_exc())
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"}
    )


# ---------- HEALTH CHECK ----------

@app.get("/")
def health_check():
    """Health check endpoint for deployment probes."""
    return {"status": "running", "service": "SMS Transaction Classifier"}


# ---------- HELPERS ----------

def preview(text: str, limit: int = 100) -> str:
    """Shorten message text for log lines."""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


# ---------- ENDPOINTS ----------

@app.post("/classify", response_model=ClassificationResult)
def classify_endpoint(data: MessageRequest, api_key: str = Depends(verify_api_key)):
    """Classify an SMS and extract amount and direction."""
    result = classify(data.text)
    logger.info(f"[CLASSIFY] {preview(data.text)!r} → {result.status} "
                f"{result.direction or '-'} {result.amount or '-'}")
    return result


@app.post("/merchant", response_model=MerchantReply)
def merchant_endpoint(data: MessageRequest, api_key: str = Depends(verify_api_key)):
    """Extract the merchant name from an SMS."""
    merchant = extract_merchant(data.text)
    logger.info(f"[MERCHANT] {preview(data.text)!r} → {merchant}")
    return MerchantReply(merchant=merchant)


@app.post("/analyze", response_model=MessageAnalysis)
def analyze_endpoint(data: MessageRequest, api_key: str = Depends(verify_api_key)):
    """
    Classify an SMS and decide what an expense tracker should do with it.

    Returns the classification, the disposition (recorded_expense,
    skipped_credit, ignored_*), and the extracted transaction when the
    message carries an amount.
    """
    analysis = analyze_message(data.text, data.timestamp)
    logger.info(f"[ANALYZE] {preview(data.text)!r} → {analysis.disposition}")
    return analysis


@app.post("/expense", response_model=ExpenseReply)
def expense_endpoint(data: MessageRequest, api_key: str = Depends(verify_api_key)):
    """Return the expense record for a debit SMS, or null."""
    expense = extract_transaction_data(data.text, data.timestamp)
    logger.info(f"[EXPENSE] {preview(data.text)!r} → "
                f"{'recorded' if expense else 'none'}")
    return ExpenseReply(expense=expense)

"""
API Security Module
====================
Handles API key verification for incoming requests.

When no API_KEY is configured the check is skipped, so the service can
run locally without credentials.
"""

from fastapi import Header, HTTPException

from sms_classifier import config


def verify_api_key(x_api_key: str = Header(default="")) -> str:
    """
    Validate the X-API-Key header against the configured API key.

    Args:
        x_api_key: API key from X-API-Key header

    Returns:
        The API key string if valid

    Raises:
        HTTPException: 401 if a key is configured and the header does not match
    """
    if config.API_KEY and x_api_key != config.API_KEY:
        raise HTTPException(status_code=401, detail="Invalid or missing API key")
    return x_api_key

"""
Configuration Module
=====================
Loads environment variables from .env file for:
- API_KEY: Authentication key for incoming requests (optional — an empty
  value disables authentication)
- LOG_LEVEL: Logging level name (default INFO)
- MAX_MESSAGE_LENGTH: Longest SMS body accepted by the API (default 2000)

Raises RuntimeError at startup if a value is malformed, preventing the
app from starting in a misconfigured state.
"""

import os
import logging
from dotenv import load_dotenv

load_dotenv()

API_KEY: str = os.getenv("API_KEY", "")
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    raise RuntimeError(f"LOG_LEVEL {LOG_LEVEL!r} is not a logging level — check .env file")

try:
    MAX_MESSAGE_LENGTH: int = int(os.getenv("MAX_MESSAGE_LENGTH", "2000"))
except ValueError:
    raise RuntimeError("MAX_MESSAGE_LENGTH must be an integer — check .env file")

if MAX_MESSAGE_LENGTH <= 0:
    raise RuntimeError("MAX_MESSAGE_LENGTH must be positive — check .env file")

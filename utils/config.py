"""Configuration settings for the UA document utilities."""
import os

# API Security (API Key Authentication)
# Comma-separated list of valid API keys. If empty, auth is disabled.
API_KEYS = [k.strip() for k in os.environ.get("API_KEYS", "").split(",") if k.strip()]

# Logging configuration
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_JSON_FORMAT = os.environ.get("LOG_JSON_FORMAT", "true").lower() == "true"

# Server
API_HOST = os.environ.get("API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("API_PORT", "8000"))


# ID Type Patterns
ID_PATTERNS = {
    "rnokpp": {
        "pattern": r"^\d{10}$",
        "description": "10-digit numeric Ukrainian taxpayer number (RNOKPP)",
        "length": 10,
        "type": "numeric"
    },
}

RNOKPP_PATTERN = ID_PATTERNS["rnokpp"]["pattern"]
RNOKPP_LENGTH = ID_PATTERNS["rnokpp"]["length"]

# Phone numbers
UA_PHONE_PREFIX = "+38"  # Prepended to bare 10-digit numbers
UA_PHONE_LOCAL_LENGTH = 10

"""Centralized configuration constants.

All configurable values in one place for easy maintenance.
Deployment settings can be overridden via environment variables.
"""

import os

# Rule variant used by the CLI and API when the caller does not pick one.
# The scorer itself always defaults to "standard".
DEFAULT_RULE_VARIANT = os.environ.get("DEFAULT_RULE_VARIANT", "standard").strip().lower()

# Directories and files
LOG_DIR = os.environ.get("LOG_DIR", "logs")
SIEM_LOG_FILE = os.path.join(LOG_DIR, "siem_events.jsonl")

# Event log rotation
SIEM_LOG_ENABLED = os.environ.get("SIEM_LOG_ENABLED", "true").lower() == "true"
SIEM_LOG_MAX_BYTES = int(os.environ.get("SIEM_LOG_MAX_BYTES", 10 * 1024 * 1024))  # 10MB default
SIEM_LOG_BACKUP_COUNT = int(os.environ.get("SIEM_LOG_BACKUP_COUNT", 5))

# API input limits
# Scoring is linear in length, the cap only bounds request size
MAX_PASSWORD_INPUT_LENGTH = int(os.environ.get("MAX_PASSWORD_INPUT_LENGTH", 1024))

# HTTPS enforcement
# Set REQUIRE_HTTPS=true in production to reject non-HTTPS requests
REQUIRE_HTTPS = os.environ.get("REQUIRE_HTTPS", "false").lower() == "true"

# Rate limiting (slowapi syntax)
RATE_LIMIT_DEFAULT = os.environ.get("RATE_LIMIT_DEFAULT", "100/minute")
RATE_LIMIT_ENABLED = os.environ.get("RATE_LIMIT_ENABLED", "true").lower() == "true"

# CORS
# Comma-separated list of allowed origins
_cors_origins_env = os.environ.get("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")
CORS_ORIGINS: list[str] = [
    origin.strip() for origin in _cors_origins_env.split(",") if origin.strip()
]

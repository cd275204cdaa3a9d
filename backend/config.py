"""
Shareboard runtime configuration.

Every value can be overridden from the environment (or a local .env file,
which main.py loads before anything else is imported):
  SHARE_SESSION_TTL_SECONDS=3600
  SHARE_CORS_ORIGINS=http://localhost:8000,https://share.example.com
"""

import os

# Sessions untouched for this long are dropped (24h)
SESSION_TTL_SECONDS = int(os.environ.get("SHARE_SESSION_TTL_SECONDS", 24 * 60 * 60))

SESSION_ID_LENGTH = 8
SESSION_ID_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"

MAX_CONTENT_LENGTH = int(os.environ.get("SHARE_MAX_CONTENT_LENGTH", 1_000_000))

CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("SHARE_CORS_ORIGINS", "http://localhost:8000").split(",")
    if origin.strip()
]

# Client timings, handed to the page via /api/share/config
POLL_INTERVAL_MS = int(os.environ.get("SHARE_POLL_INTERVAL_MS", 1000))
HEARTBEAT_INTERVAL_MS = int(os.environ.get("SHARE_HEARTBEAT_INTERVAL_MS", 30_000))
UPDATE_DEBOUNCE_MS = int(os.environ.get("SHARE_UPDATE_DEBOUNCE_MS", 300))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

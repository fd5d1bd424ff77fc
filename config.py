"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


# ── Telegram ──────────────────────────────────────────────
TELEGRAM_BOT_TOKEN: str = os.getenv("TELEGRAM_BOT_TOKEN", "")

# Update kinds to receive, e.g. "message,callback_query". Empty = all kinds.
_raw_updates = os.getenv("ALLOWED_UPDATES", "")
ALLOWED_UPDATES: list[str] = [
    kind.strip() for kind in _raw_updates.split(",") if kind.strip()
]

DROP_PENDING_UPDATES: bool = _as_bool(os.getenv("DROP_PENDING_UPDATES", "false"))

# ── Dispatch ──────────────────────────────────────────────
# Max updates handled at once. 1 processes updates strictly one by one.
CONCURRENT_UPDATES: int = int(os.getenv("CONCURRENT_UPDATES", "8"))

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

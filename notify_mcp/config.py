"""
Telegram Notify MCP — Centralized configuration.

Loads the bot credentials from .env / the environment and validates the
required keys. Settings are built once at startup by `load_settings()` and
injected into the notifier; nothing mutates them afterwards.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

# .env lives at the project root (two levels up from notify_mcp/config.py)
_ENV_PATH = Path(__file__).resolve().parent.parent / ".env"

_DEFAULT_API_BASE_URL = "https://api.telegram.org"


class Settings(BaseModel):
    """Server settings loaded from environment variables."""

    model_config = ConfigDict(frozen=True)

    # Telegram
    TELEGRAM_BOT_TOKEN: str
    TELEGRAM_CHAT_ID: str
    TELEGRAM_API_BASE_URL: str = _DEFAULT_API_BASE_URL

    # Diagnostics (always written to stderr)
    LOG_LEVEL: str = "INFO"

    @field_validator("TELEGRAM_CHAT_ID", mode="before")
    @classmethod
    def parse_chat_id(cls, v: str | int) -> str:
        return str(v).strip()

    @field_validator("TELEGRAM_API_BASE_URL")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/") or _DEFAULT_API_BASE_URL

    @field_validator("LOG_LEVEL")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        return level if isinstance(logging.getLevelName(level), int) else "INFO"


def _is_missing(value: str) -> bool:
    return not value or value.startswith("your-")


def load_settings() -> Settings:
    """Load settings from .env and the environment, validating required keys.

    Exits the process with status 1 when a required key is missing, so the
    server never starts serving without a destination.
    """
    load_dotenv(_ENV_PATH)

    token = os.getenv("TELEGRAM_BOT_TOKEN", "").strip()
    chat_id = os.getenv("TELEGRAM_CHAT_ID", "").strip()

    if _is_missing(token):
        print("ERROR: TELEGRAM_BOT_TOKEN is missing or not set in .env", file=sys.stderr)
        sys.exit(1)

    if _is_missing(chat_id):
        print("ERROR: TELEGRAM_CHAT_ID is missing or not set in .env", file=sys.stderr)
        sys.exit(1)

    return Settings(
        TELEGRAM_BOT_TOKEN=token,
        TELEGRAM_CHAT_ID=chat_id,
        TELEGRAM_API_BASE_URL=os.getenv("TELEGRAM_API_BASE_URL", _DEFAULT_API_BASE_URL),
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
    )

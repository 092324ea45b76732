import logging
import os
import re
from dataclasses import dataclass
from typing import Any

from dotenv import load_dotenv

# Load .env once, globally
load_dotenv()

DEFAULT_MAX_EMAILS = 50
MAX_EMAILS_LIMIT = 100

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


@dataclass(frozen=True)
class Settings:
    default_max_emails: int = DEFAULT_MAX_EMAILS
    max_emails_limit: int = MAX_EMAILS_LIMIT
    log_level: str = "INFO"


def env_int(env_key: str, default: int) -> int:
    """
    Read a positive integer from ENV.
    Missing, non-numeric or non-positive values fall back to default.
    """
    value = os.getenv(env_key)
    if value is None:
        return default
    try:
        parsed = int(value.strip())
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def load_settings() -> Settings:
    return Settings(
        default_max_emails=env_int("INBOX_SORTER_DEFAULT_MAX_EMAILS", DEFAULT_MAX_EMAILS),
        max_emails_limit=env_int("INBOX_SORTER_MAX_EMAILS_LIMIT", MAX_EMAILS_LIMIT),
        log_level=os.getenv("INBOX_SORTER_LOG_LEVEL", "INFO").upper(),
    )


def _leading_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match:
            return int(match.group(1))
    return None


def clamp_max_emails(value: Any, settings: Settings | None = None) -> int:
    """
    Turn a user-supplied batch size into a usable one.

    "25" and "25 emails" both parse as 25. Absent, non-numeric or zero values
    fall back to the default; the result never exceeds the limit or drops
    below 0.
    """
    cfg = settings or load_settings()
    parsed = _leading_int(value)
    if not parsed:
        parsed = cfg.default_max_emails
    return max(0, min(parsed, cfg.max_emails_limit))


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or load_settings().log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

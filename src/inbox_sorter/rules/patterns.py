from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class PatternTables:
    """
    Keyword tables used by the scorer.

    All entries are lowercase and matched as plain substrings. Build another
    instance for a different keyword set instead of mutating the defaults.
    """

    marketing_keywords: Tuple[str, ...]
    important_keywords: Tuple[str, ...]
    marketing_senders: Tuple[str, ...]
    important_senders: Tuple[str, ...]


# Phrases signaling promotional intent
MARKETING_KEYWORDS = (
    "unsubscribe",
    "promotional",
    "sale",
    "discount",
    "offer",
    "deal",
    "newsletter",
    "marketing",
    "advertisement",
    "promo",
    "limited time",
    "buy now",
    "shop now",
    "exclusive",
    "free shipping",
    "save now",
    "special offer",
    "subscribe",
    "notification",
    "update",
    "digest",
)

# Phrases signaling transactional or urgent intent
IMPORTANT_KEYWORDS = (
    "invoice",
    "receipt",
    "payment",
    "account",
    "security",
    "alert",
    "verification",
    "confirm",
    "reset password",
    "bank",
    "statement",
    "bill",
    "transaction",
    "urgent",
    "action required",
    "contract",
    "meeting",
    "appointment",
    "deadline",
    "legal",
    "tax",
)

MARKETING_SENDERS = ("noreply", "no-reply", "marketing")
IMPORTANT_SENDERS = ("admin", "support", "billing")


DEFAULT_PATTERNS = PatternTables(
    marketing_keywords=MARKETING_KEYWORDS,
    important_keywords=IMPORTANT_KEYWORDS,
    marketing_senders=MARKETING_SENDERS,
    important_senders=IMPORTANT_SENDERS,
)

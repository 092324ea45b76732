from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from inbox_sorter.models import EmailRecord
from inbox_sorter.rules.links import extract_unsubscribe_link
from inbox_sorter.rules.patterns import DEFAULT_PATTERNS, PatternTables

logger = logging.getLogger(__name__)

KEYWORD_WEIGHT = 1
SENDER_BONUS = 2
UNSUBSCRIBE_LINK_BONUS = 3


@dataclass(frozen=True)
class EmailScore:
    marketing: int
    important: int
    unsubscribe_link: Optional[str] = None


class Scorer:
    """
    Fixed-weight keyword scorer.

    Weights:
    - each keyword table entry found in subject or body: +1
    - sender matches any sender hint of the table: +2 (once)
    - body carries an unsubscribe link: +3 on the marketing side
    """

    def __init__(self, patterns: PatternTables = DEFAULT_PATTERNS) -> None:
        self.patterns = patterns

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"marketing={len(self.patterns.marketing_keywords)}, "
            f"important={len(self.patterns.important_keywords)})"
        )

    # --- Helpers (None-safe, case-insensitive) ---

    def norm(self, s: str | None) -> str:
        """Normalize text for matching (None-safe, lowercased)."""
        return (s or "").lower()

    def contains_any(self, text: str, needles: Sequence[str]) -> bool:
        """True if any needle is a substring of the already-normalized text."""
        return any(n in text for n in needles)

    def count_keywords(self, subject: str, body: str, keywords: Sequence[str]) -> int:
        # One hit per keyword, whether it shows up in subject, body or both.
        return sum(KEYWORD_WEIGHT for kw in keywords if kw in subject or kw in body)

    # --- Scoring ---

    def score(self, email: EmailRecord) -> EmailScore:
        subject = self.norm(email.subject)
        sender = self.norm(email.from_email)
        body = self.norm(email.body)

        marketing = self.count_keywords(subject, body, self.patterns.marketing_keywords)
        important = self.count_keywords(subject, body, self.patterns.important_keywords)

        if self.contains_any(sender, self.patterns.marketing_senders):
            marketing += SENDER_BONUS
        if self.contains_any(sender, self.patterns.important_senders):
            important += SENDER_BONUS

        # Extract from the original body so the reported link keeps its casing.
        link = extract_unsubscribe_link(email.body)
        if link:
            marketing += UNSUBSCRIBE_LINK_BONUS

        logger.debug(
            "scored email id=%s marketing=%d important=%d link=%s",
            email.id,
            marketing,
            important,
            bool(link),
        )
        return EmailScore(marketing=marketing, important=important, unsubscribe_link=link)


def score_email(email: EmailRecord, patterns: PatternTables = DEFAULT_PATTERNS) -> EmailScore:
    return Scorer(patterns).score(email)

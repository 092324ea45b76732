from __future__ import annotations

from typing import Optional

from inbox_sorter.models import Classification, ClassificationResult, EmailRecord
from inbox_sorter.rules.scoring import EmailScore, Scorer

ACTION_UNSUBSCRIBE_AVAILABLE = "Unsubscribe available"
ACTION_MARK_AS_SPAM = "Mark as spam or delete"
ACTION_KEEP = "Keep and respond professionally if needed"

_DEFAULT_SCORER = Scorer()


def classify_email(email: EmailRecord, scorer: Optional[Scorer] = None) -> ClassificationResult:
    """
    Label one email as marketing or important.
    Ties (including 0-0) go to important so nothing relevant gets thrown away.
    """
    score = (scorer or _DEFAULT_SCORER).score(email)
    is_marketing = score.marketing > score.important

    return ClassificationResult(
        id=email.id,
        from_email=email.from_email,
        subject=email.subject,
        date=email.date,
        classification=Classification.MARKETING if is_marketing else Classification.IMPORTANT,
        action=_action_for(is_marketing, score),
        reason=_reason_for(is_marketing, score),
        # Passed through even when the email ends up as important.
        unsubscribe_link=score.unsubscribe_link,
    )


def _action_for(is_marketing: bool, score: EmailScore) -> str:
    if not is_marketing:
        return ACTION_KEEP
    if score.unsubscribe_link:
        return ACTION_UNSUBSCRIBE_AVAILABLE
    return ACTION_MARK_AS_SPAM


def _reason_for(is_marketing: bool, score: EmailScore) -> str:
    # Only the winning score is surfaced.
    if is_marketing:
        return f"Marketing email detected (score: {score.marketing}). Contains promotional content."
    return f"Important email detected (score: {score.important}). Requires attention."

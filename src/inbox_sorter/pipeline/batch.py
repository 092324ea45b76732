from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import List, Optional, Sequence

from inbox_sorter.models import BatchResult, BatchStats, ClassificationResult, EmailRecord
from inbox_sorter.pipeline.policy import apply_auto_unsubscribe, is_unsubscribable
from inbox_sorter.rules.classification import classify_email
from inbox_sorter.rules.scoring import Scorer

logger = logging.getLogger(__name__)


def compute_stats(results: Sequence[ClassificationResult], auto_unsubscribe: bool) -> BatchStats:
    marketing = sum(1 for r in results if r.is_marketing)
    # Same predicate as the rewrite, so the count always matches the rewritten set.
    unsubscribed = sum(1 for r in results if is_unsubscribable(r)) if auto_unsubscribe else 0
    return BatchStats(
        total=len(results),
        marketing=marketing,
        important=len(results) - marketing,
        unsubscribed=unsubscribed,
    )


def classify_batch(
    emails: Sequence[EmailRecord],
    auto_unsubscribe: bool = False,
    *,
    scorer: Optional[Scorer] = None,
    max_workers: Optional[int] = None,
) -> BatchResult:
    """
    Classify every email of a batch and aggregate the stats.

    Args:
        emails: Records to classify. Result i belongs to emails[i].
        auto_unsubscribe: If True, marketing results with an unsubscribe link
            are reported as unsubscribed (simulated, no network access).
        scorer: Optional scorer with a non-default keyword set.
        max_workers: If > 1, classify in a thread pool. Output order is unchanged.

    Returns:
        BatchResult with the ordered results and the batch stats.
    """
    # None falls through to the classifier's shared default scorer.
    classify = partial(classify_email, scorer=scorer)

    results: List[ClassificationResult]
    if max_workers and max_workers > 1 and len(emails) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            # map() yields in input order regardless of completion order.
            results = list(pool.map(classify, emails))
    else:
        results = [classify(email) for email in emails]

    stats = compute_stats(results, auto_unsubscribe)
    if auto_unsubscribe:
        results = apply_auto_unsubscribe(results)

    logger.debug(
        "classified batch total=%d marketing=%d important=%d unsubscribed=%d",
        stats.total,
        stats.marketing,
        stats.important,
        stats.unsubscribed,
    )
    return BatchResult(results=tuple(results), stats=stats)

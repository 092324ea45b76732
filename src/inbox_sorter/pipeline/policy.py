from __future__ import annotations

from dataclasses import replace
from typing import List, Sequence

from inbox_sorter.models import ClassificationResult

ACTION_UNSUBSCRIBED = "Successfully unsubscribed"


def is_unsubscribable(result: ClassificationResult) -> bool:
    return result.is_marketing and bool(result.unsubscribe_link)


def apply_auto_unsubscribe(results: Sequence[ClassificationResult]) -> List[ClassificationResult]:
    # Simulated: no request is sent, only the recommended action is rewritten.
    return [
        replace(result, action=ACTION_UNSUBSCRIBED) if is_unsubscribable(result) else result
        for result in results
    ]

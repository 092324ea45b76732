from __future__ import annotations

import re
from typing import Optional

# Any scheme-prefixed token that contains "unsubscribe" somewhere after "://".
UNSUBSCRIBE_LINK_PATTERN = re.compile(r"https?://\S+unsubscribe\S*", re.IGNORECASE)


def extract_unsubscribe_link(body: str) -> Optional[str]:
    """
    Return the first unsubscribe-looking URL in body, casing preserved.

    Best-effort only: no URL validation, so plain "unsubscribe" text without a
    link yields None and shortened links without the word are missed.
    """
    match = UNSUBSCRIBE_LINK_PATTERN.search(body or "")
    if not match:
        return None
    return match.group(0)

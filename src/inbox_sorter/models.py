from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple


class Classification(str, Enum):
    MARKETING = "marketing"
    IMPORTANT = "important"


@dataclass(frozen=True)
class EmailRecord:
    id: str
    from_email: str
    subject: str
    date: str
    body: str
    headers: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Copy and freeze so neither the caller nor the engine can edit headers in place.
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EmailRecord":
        # JSON payloads use "from"; missing required keys raise KeyError.
        return cls(
            id=str(data["id"]),
            from_email=data["from"],
            subject=data["subject"],
            date=data["date"],
            body=data["body"],
            headers=dict(data.get("headers") or {}),
        )


@dataclass(frozen=True)
class ClassificationResult:
    id: str
    from_email: str
    subject: str
    date: str
    classification: Classification
    action: str
    reason: str
    unsubscribe_link: Optional[str] = None

    @property
    def is_marketing(self) -> bool:
        return self.classification == Classification.MARKETING

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "from": self.from_email,
            "subject": self.subject,
            "date": self.date,
            "classification": self.classification.value,
            "action": self.action,
            "reason": self.reason,
        }
        if self.unsubscribe_link is not None:
            data["unsubscribeLink"] = self.unsubscribe_link
        return data


@dataclass(frozen=True)
class BatchStats:
    total: int = 0
    marketing: int = 0
    important: int = 0
    unsubscribed: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "total": self.total,
            "marketing": self.marketing,
            "important": self.important,
            "unsubscribed": self.unsubscribed,
        }


@dataclass(frozen=True)
class BatchResult:
    results: Tuple[ClassificationResult, ...]
    stats: BatchStats

    def to_dict(self) -> Dict[str, Any]:
        results: List[Dict[str, Any]] = [r.to_dict() for r in self.results]
        return {"results": results, "stats": self.stats.to_dict()}

# backend/app/api/analyze.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from starlette.concurrency import run_in_threadpool

from inbox_sorter.config.settings import MAX_EMAILS_LIMIT, clamp_max_emails
from inbox_sorter.models import EmailRecord
from inbox_sorter.pipeline.batch import classify_batch
from inbox_sorter.sources.demo import generate_demo_emails

logger = logging.getLogger(__name__)
router = APIRouter()


class AnalyzeRequest(BaseModel):
    # Connection fields are accepted for compatibility; no mailbox is contacted.
    provider: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    imap_host: Optional[str] = Field(default=None, alias="imapHost")
    imap_port: Optional[Union[int, str]] = Field(default=None, alias="imapPort")
    # Raw value; clamp_max_emails falls back to the default for anything non-numeric.
    max_emails: Optional[Any] = Field(default=None, alias="maxEmails")
    auto_unsubscribe: bool = Field(default=False, alias="autoUnsubscribe")


class EmailPayload(BaseModel):
    id: str
    from_: str = Field(alias="from")
    subject: str
    date: str
    body: str
    headers: Dict[str, Any] = Field(default_factory=dict)

    def to_record(self) -> EmailRecord:
        return EmailRecord(
            id=self.id,
            from_email=self.from_,
            subject=self.subject,
            date=self.date,
            body=self.body,
            headers=dict(self.headers),
        )


class ClassifyRequest(BaseModel):
    emails: List[EmailPayload] = Field(default_factory=list, max_length=MAX_EMAILS_LIMIT)
    auto_unsubscribe: bool = Field(default=False, alias="autoUnsubscribe")


@router.post("/analyze")
async def analyze_endpoint(request: AnalyzeRequest) -> Any:
    try:
        max_emails = clamp_max_emails(request.max_emails)
        emails = generate_demo_emails(max_emails)
        # Run classification in a worker thread so FastAPI stays responsive.
        batch = await run_in_threadpool(classify_batch, emails, request.auto_unsubscribe)
    except Exception as exc:
        logger.exception("Error analyzing emails")
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to analyze emails", "details": str(exc) or type(exc).__name__},
        )

    logger.info(
        "analyzed demo batch total=%d marketing=%d important=%d unsubscribed=%d",
        batch.stats.total,
        batch.stats.marketing,
        batch.stats.important,
        batch.stats.unsubscribed,
    )
    return batch.to_dict()


@router.post("/classify")
async def classify_endpoint(request: ClassifyRequest) -> dict:
    records = [payload.to_record() for payload in request.emails]
    batch = await run_in_threadpool(classify_batch, records, request.auto_unsubscribe)
    logger.info(
        "classified batch total=%d marketing=%d important=%d unsubscribed=%d",
        batch.stats.total,
        batch.stats.marketing,
        batch.stats.important,
        batch.stats.unsubscribed,
    )
    return batch.to_dict()


@router.get("/health")
async def health() -> dict:
    return {"ok": True}

# backend/app/main.py
from fastapi import FastAPI

from backend.app.api.analyze import router as analyze_router
from inbox_sorter.config.settings import configure_logging

configure_logging()

app = FastAPI(title="inbox-sorter API")
app.include_router(analyze_router, prefix="/api")

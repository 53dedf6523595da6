"""Call Insight Analytics API entrypoint."""

from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parents[1] / ".env")

from fastapi import FastAPI

from callinsight.api import router as analysis_router
from callinsight.config import get_settings
from callinsight.utils import setup_logging

settings = get_settings()
setup_logging(settings.log_level, settings.log_file)

app = FastAPI(
    title="Call Insight Analytics API",
    description="Transcript → Speaker Segmentation → Heuristic Scoring → Vocalytics, Sentiment, Names, Coaching",
)
app.include_router(analysis_router)


@app.get("/health")
def health():
    return {"status": "ok"}

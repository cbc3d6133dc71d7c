import os
import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from api.schemas import (
    HighlightRequest,
    HighlightResponse,
    MarkRequest,
    MarkResponse,
    RangeSchema,
    ReportResponse,
    ReportSchema,
    SettingsSchema,
    SettingsUpdate,
)
from longspan.document import InMemoryDocument
from longspan.errors import InvalidSettingValue
from longspan.log import setup_logging
from longspan.models import HighlightRange, Settings
from longspan.pipeline import highlight_text, report_long_spans
from longspan.reconciler import HighlightReconciler
from longspan.settings import DEFAULT_SETTINGS_PATH, SettingsStore, parse_max_words


setup_logging()
logger = logging.getLogger("api")

store = SettingsStore(os.environ.get("LONGSPAN_SETTINGS", DEFAULT_SETTINGS_PATH))
store.load()

app = FastAPI(
    title="Long Sentence Highlighter",
    version="0.1.0",
    description="Finds sentences longer than a word threshold and returns their highlight ranges.",
)

origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:8501",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _settings_for(req: HighlightRequest) -> Settings:
    settings = store.snapshot()
    if req.max_words is not None:
        settings = settings.with_max_words(req.max_words)
    if req.highlight_color is not None:
        settings = settings.with_color(req.highlight_color)
    return settings


def _range_schemas(text: str, ranges: list[HighlightRange]) -> list[RangeSchema]:
    return [RangeSchema(start=r.start, end=r.end, text=text[r.start:r.end]) for r in ranges]


@app.post("/highlight", response_model=HighlightResponse)
async def highlight(req: HighlightRequest) -> HighlightResponse:
    logger.info("Received /highlight request")
    settings = _settings_for(req)
    document = InMemoryDocument(req.text)
    reconciler = HighlightReconciler(lambda: document, lambda: settings)

    await reconciler.refresh()

    return HighlightResponse(
        ranges=_range_schemas(req.text, list(document.highlights)),
        highlight_color=document.color or settings.highlight_color,
        max_words=settings.max_words,
    )


@app.post("/mark", response_model=MarkResponse)
def mark(req: MarkRequest) -> MarkResponse:
    logger.info("Received /mark request")
    marked, ranges = highlight_text(req.text, _settings_for(req), marker=req.marker)
    return MarkResponse(marked_text=marked, ranges=_range_schemas(req.text, ranges))


@app.post("/report", response_model=ReportResponse)
def report(req: HighlightRequest) -> ReportResponse:
    reports = report_long_spans(req.text, _settings_for(req))
    return ReportResponse(
        spans=[
            ReportSchema(
                line=r.line,
                column=r.column,
                start=r.start,
                end=r.end,
                words=r.words,
                text=r.text,
            )
            for r in reports
        ]
    )


@app.get("/settings", response_model=SettingsSchema)
def get_settings() -> SettingsSchema:
    settings = store.snapshot()
    return SettingsSchema(max_words=settings.max_words, highlight_color=settings.highlight_color)


@app.put("/settings", response_model=SettingsSchema)
def put_settings(update: SettingsUpdate) -> SettingsSchema:
    settings = store.snapshot()
    if update.max_words is not None:
        try:
            settings = Settings(
                max_words=parse_max_words(update.max_words),
                highlight_color=settings.highlight_color,
            )
        except InvalidSettingValue as e:
            raise HTTPException(status_code=422, detail=str(e))
    if update.highlight_color is not None:
        settings = settings.with_color(update.highlight_color)

    store.save(settings)
    logger.info("Settings updated: max_words=%d", settings.max_words)
    return SettingsSchema(max_words=settings.max_words, highlight_color=settings.highlight_color)

# longspan/pipeline.py

from __future__ import annotations

import logging
from typing import List, Optional

from .models import HighlightRange, LongSpanReport, Settings
from .segment import find_long_spans, word_count
from .locate import locate
from .transform import DEFAULT_MARKER, mark_long_spans

logger = logging.getLogger("longspan.pipeline")


def compute_highlights(text: str, settings: Optional[Settings] = None) -> List[HighlightRange]:
    """
    Find the long sentences in `text` and return their highlight ranges.

    Pure and deterministic: the same text and settings always give the same
    ranges, in document order.
    """
    settings = settings or Settings()
    long_spans = find_long_spans(text, settings)
    ranges = locate(text, long_spans)

    if len(ranges) < len(long_spans):
        logger.debug("Dropped %d long span(s) that could not be located", len(long_spans) - len(ranges))

    return ranges


def report_long_spans(text: str, settings: Optional[Settings] = None) -> List[LongSpanReport]:
    """
    List located long spans with their 1-based line and 0-based column.
    """
    settings = settings or Settings()
    reports: List[LongSpanReport] = []

    for rng in compute_highlights(text, settings):
        span_text = text[rng.start:rng.end]
        line_start = text.rfind("\n", 0, rng.start) + 1
        reports.append(
            LongSpanReport(
                line=text.count("\n", 0, rng.start) + 1,
                column=rng.start - line_start,
                start=rng.start,
                end=rng.end,
                words=word_count(span_text),
                text=span_text,
            )
        )

    return reports


def highlight_text(
    text: str,
    settings: Optional[Settings] = None,
    marker: str = DEFAULT_MARKER,
) -> tuple[str, List[HighlightRange]]:
    """
    Return `text` with every long sentence wrapped in `marker`, plus the ranges
    (in the coordinates of the unmarked text).
    """
    ranges = compute_highlights(text, settings)
    return mark_long_spans(text, ranges, marker), ranges

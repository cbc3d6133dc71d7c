# longspan/segment.py

from __future__ import annotations

import regex as re
from typing import List
from longspan.models import LongSpan, Settings, Span


# Sentence end: whitespace run right after . ! or ? (terminator stays left).
# Paragraph end: a newline plus any following blank lines.
SPLIT_RE = re.compile(r"(?<=[.!?])\s+|\r?\n(?:[ \t]*\r?\n)*")


def segment(text: str) -> List[Span]:
    """
    Split text into sentence- or line-like spans, in document order.

    Delimiters are consumed and never part of a span. Pieces that are empty
    or only whitespace are dropped since they can never be long.
    """
    if not text:
        return []
    return [Span(text=piece) for piece in SPLIT_RE.split(text) if piece.strip()]


def word_count(text: str) -> int:
    return len(text.split())


def is_long(span: Span, settings: Settings) -> bool:
    return span.word_count() > max(1, settings.max_words)


def find_long_spans(text: str, settings: Settings) -> List[LongSpan]:
    spans: List[LongSpan] = []

    for span in segment(text):
        if is_long(span, settings):
            spans.append(LongSpan(text=span.text, words=span.word_count()))

    return spans

# longspan/locate.py

from __future__ import annotations

import logging
from typing import List, Sequence
from longspan.errors import SpanNotLocated
from longspan.models import HighlightRange, Span

logger = logging.getLogger("longspan.locate")


def locate(text: str, spans: Sequence[Span], strict: bool = False) -> List[HighlightRange]:
    """
    Resolve each span to its [start, end) offset in `text`.

    Spans are searched for literally, in order, starting where the previous
    match ended, so a sentence repeated in the document maps to each of its
    occurrences in turn and the result is sorted and non-overlapping.
    Spans that cannot be found after the cursor are dropped, or raise
    SpanNotLocated when `strict` is set.
    """
    ranges: List[HighlightRange] = []
    pos = 0

    for span in spans:
        if not span.text:
            continue

        i = text.find(span.text, pos)
        if i == -1:
            if strict:
                raise SpanNotLocated("Span not found after cursor", {"pos": pos, "text": span.text})
            logger.debug("Long span not located after offset %d: %r", pos, span.text[:60])
            continue

        end = i + len(span.text)
        ranges.append(HighlightRange(start=i, end=end))
        pos = end

    return ranges

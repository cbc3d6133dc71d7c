# longspan/transform.py

from __future__ import annotations

from typing import List, Sequence
from longspan.models import HighlightRange

DEFAULT_MARKER = "=="


def mark_long_spans(
    text: str,
    ranges: Sequence[HighlightRange],
    marker: str = DEFAULT_MARKER,
) -> str:
    """
    Wrap each range in highlight markers, e.g. ``==a long sentence==``.

    Text outside the ranges is copied through unchanged. Ranges that overlap
    an earlier one are skipped.
    """
    out_parts: List[str] = []
    cursor = 0

    for rng in sorted(ranges, key=lambda r: r.start):
        if rng.start < cursor or rng.end > len(text):
            continue
        if rng.start > cursor:
            out_parts.append(text[cursor:rng.start])

        out_parts.append(marker)
        out_parts.append(text[rng.start:rng.end])
        out_parts.append(marker)
        cursor = rng.end

    if cursor < len(text):
        out_parts.append(text[cursor:])

    return "".join(out_parts)

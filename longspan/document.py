# longspan/document.py

from __future__ import annotations

from typing import List, Optional, Protocol, Sequence, Tuple
from longspan.models import HighlightRange


class DocumentSource(Protocol):
    """What the reconciler needs from an editor buffer."""

    async def get_text(self) -> str:
        ...

    async def apply_highlights(self, ranges: Sequence[HighlightRange], color: str) -> None:
        """Atomically replace every existing highlight with `ranges`."""
        ...


class InMemoryDocument:
    """
    A plain text buffer that records the highlights applied to it.

    The highlight set is swapped in a single assignment, so readers never
    see old and new highlights mixed together.
    """

    def __init__(self, text: str = "", name: Optional[str] = None):
        self.text = text
        self.name = name
        self.highlights: Tuple[HighlightRange, ...] = ()
        self.color: Optional[str] = None
        self.apply_count = 0

    async def get_text(self) -> str:
        return self.text

    async def apply_highlights(self, ranges: Sequence[HighlightRange], color: str) -> None:
        self.highlights = tuple(ranges)
        self.color = color
        self.apply_count += 1

    def set_text(self, text: str) -> None:
        self.text = text

    def highlighted_texts(self) -> List[str]:
        return [self.text[r.start:r.end] for r in self.highlights]

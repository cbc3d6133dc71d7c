# longspan/reconciler.py

from __future__ import annotations

import asyncio
import logging
from typing import Callable, List, Optional

from .document import DocumentSource
from .errors import EditorUnavailable, LongSpanError, NoActiveDocument
from .models import HighlightRange, Settings
from .pipeline import compute_highlights

logger = logging.getLogger("longspan.reconciler")

NO_DOCUMENT_NOTICE = "No active document to highlight long sentences in."
EDITOR_UNAVAILABLE_NOTICE = "Failed to access the editor."


class HighlightReconciler:
    """
    Recomputes the highlights of the active document on every trigger.

    Each trigger reads the text, runs the detector with the current settings
    snapshot and hands the document one replace-all update. When triggers
    overlap, only the most recent one applies its result.
    """

    def __init__(
        self,
        get_document: Callable[[], Optional[DocumentSource]],
        get_settings: Callable[[], Settings],
        notify: Optional[Callable[[str], None]] = None,
    ):
        self._get_document = get_document
        self._get_settings = get_settings
        self._notify = notify or (lambda message: None)
        self._generation = 0
        self.last_applied: Optional[List[HighlightRange]] = None
        self._apply_lock: Optional[asyncio.Lock] = None
        self._lock_loop = None

    def _lock(self) -> asyncio.Lock:
        # One lock per event loop; hosts may call asyncio.run per trigger.
        loop = asyncio.get_running_loop()
        if self._apply_lock is None or self._lock_loop is not loop:
            self._apply_lock = asyncio.Lock()
            self._lock_loop = loop
        return self._apply_lock

    async def refresh(self, settings: Optional[Settings] = None) -> Optional[List[HighlightRange]]:
        """
        Run one full read-compute-apply cycle.

        Returns the applied ranges, or None if a newer trigger started while
        this one was waiting. Applies are serialized, so an older run can
        never land on top of a newer one. Raises NoActiveDocument or
        EditorUnavailable; in both cases nothing is applied.
        """
        try:
            document = self._get_document()
        except LongSpanError:
            raise
        except Exception as e:
            raise EditorUnavailable("Could not look up the active document", {"error": str(e)}) from e
        if document is None:
            raise NoActiveDocument("No active document")

        self._generation += 1
        generation = self._generation
        settings = settings or self._get_settings()

        try:
            text = await document.get_text()
        except LongSpanError:
            raise
        except Exception as e:
            raise EditorUnavailable("Could not read document text", {"error": str(e)}) from e

        if generation != self._generation:
            logger.debug("Highlight run %d superseded before apply", generation)
            return None

        ranges = compute_highlights(text, settings)

        async with self._lock():
            if generation != self._generation:
                logger.debug("Highlight run %d superseded while waiting to apply", generation)
                return None

            try:
                await document.apply_highlights(ranges, settings.highlight_color)
            except LongSpanError:
                raise
            except Exception as e:
                raise EditorUnavailable("Could not apply highlights", {"error": str(e)}) from e

            logger.info(
                "Applied %d highlight(s) (max_words=%d)", len(ranges), settings.max_words
            )
            self.last_applied = ranges
            return ranges

    async def run_command(self) -> None:
        """The user-invoked "highlight long sentences" command."""
        try:
            await self.refresh()
        except NoActiveDocument:
            logger.info(NO_DOCUMENT_NOTICE)
            self._notify(NO_DOCUMENT_NOTICE)
        except EditorUnavailable as e:
            logger.warning("%s: %s", EDITOR_UNAVAILABLE_NOTICE, e)
            self._notify(EDITOR_UNAVAILABLE_NOTICE)

    # Host event hooks

    async def on_document_activated(self) -> None:
        await self._refresh_quietly()

    async def on_document_changed(self) -> None:
        await self._refresh_quietly()

    async def on_settings_changed(self, settings: Optional[Settings] = None) -> None:
        await self._refresh_quietly(settings)

    async def _refresh_quietly(self, settings: Optional[Settings] = None) -> None:
        try:
            await self.refresh(settings)
        except NoActiveDocument:
            logger.debug("Trigger ignored: no active document")
        except EditorUnavailable as e:
            logger.warning("%s: %s", EDITOR_UNAVAILABLE_NOTICE, e)
            self._notify(EDITOR_UNAVAILABLE_NOTICE)

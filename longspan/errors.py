"""
Error types for the long-span highlighter.

None of these are fatal to a host: each one is scoped to a single trigger
and leaves the last applied highlights in place.

- InvalidSettingValue: bad max_words input; callers ignore it and keep the
  previous value.
- NoActiveDocument: a recompute was requested with nothing open.
- EditorUnavailable: the document source could not be read or written.
- SpanNotLocated: a long span could not be found verbatim after the cursor.
  The locator drops such spans unless asked to be strict.
"""

from typing import Optional


class LongSpanError(Exception):
    """Base exception for all highlighter errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class InvalidSettingValue(LongSpanError):
    pass


class NoActiveDocument(LongSpanError):
    pass


class EditorUnavailable(LongSpanError):
    pass


class SpanNotLocated(LongSpanError):
    pass

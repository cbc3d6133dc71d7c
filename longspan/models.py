# longspan/models.py

from dataclasses import dataclass, replace

from longspan.errors import InvalidSettingValue

DEFAULT_MAX_WORDS = 10
DEFAULT_HIGHLIGHT_COLOR = "rgba(255,182,193,0.5)"


def parse_max_words(value) -> int:
    """
    Parse a word threshold coming from user input or a settings file.

    Accepts ints and numeric strings; anything non-numeric or <= 0 raises
    InvalidSettingValue.
    """
    if isinstance(value, bool):
        raise InvalidSettingValue("max_words must be a number", {"value": value})
    try:
        parsed = int(str(value).strip())
    except (TypeError, ValueError):
        raise InvalidSettingValue("max_words must be a number", {"value": value})
    if parsed <= 0:
        raise InvalidSettingValue("max_words must be positive", {"value": value})
    return parsed


@dataclass(frozen=True)
class Settings:
    max_words: int = DEFAULT_MAX_WORDS
    highlight_color: str = DEFAULT_HIGHLIGHT_COLOR

    def with_max_words(self, value) -> "Settings":
        """Return a copy using `value`; invalid input keeps the current threshold."""
        try:
            return replace(self, max_words=parse_max_words(value))
        except InvalidSettingValue:
            return self

    def with_color(self, color: str) -> "Settings":
        if not isinstance(color, str) or not color.strip():
            return self
        return replace(self, highlight_color=color.strip())


@dataclass(frozen=True)
class Span:
    text: str

    def word_count(self) -> int:
        return len(self.text.split())


@dataclass(frozen=True)
class LongSpan(Span):
    words: int = 0


@dataclass(frozen=True)
class HighlightRange:
    start: int
    end: int

    def __post_init__(self):
        if self.start < 0 or self.start >= self.end:
            raise ValueError(f"Invalid highlight range [{self.start}, {self.end})")

    def overlaps(self, other: "HighlightRange") -> bool:
        return not (self.end <= other.start or other.end <= self.start)

    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class LongSpanReport:
    line: int
    column: int
    start: int
    end: int
    words: int
    text: str

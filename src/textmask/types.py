"""Core types."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Union

from .patterns import DIGIT

# A pattern is either a plain string (matched as a substring of the char)
# or a compiled pattern exposing ``.search()`` (``regex`` / ``re``).
Pattern = Union[str, Any]
Transform = Callable[[str], str]

DECORATOR = "decorator"
WILDCARD = "wildcard"
LITERAL = "literal"


class ConfigurationError(ValueError):
    """Raised when an engine cannot be built from the given configuration."""


@dataclass(frozen=True, slots=True)
class Token:
    """The classified role of one template character."""
    kind: str                  # "decorator" | "wildcard" | "literal"
    char: str
    pattern: Pattern | None = None  # None for literals

    @property
    def is_decorator(self) -> bool:
        return self.kind == DECORATOR

    @property
    def is_wildcard(self) -> bool:
        return self.kind == WILDCARD


@dataclass(frozen=True, slots=True)
class OverflowPolicy:
    """How to treat values longer than every template.

    If ``allowed``, ``pattern`` must be set: every overflowing character
    has to match it.
    """
    allowed: bool = True
    pattern: Pattern | None = DIGIT

    def __post_init__(self) -> None:
        if self.allowed and self.pattern is None:
            raise ConfigurationError(
                "overflow is allowed but no overflow pattern was given"
            )

    @classmethod
    def only_digits(cls) -> "OverflowPolicy":
        return cls(allowed=True, pattern=DIGIT)

    @classmethod
    def forbidden(cls) -> "OverflowPolicy":
        return cls(allowed=False, pattern=None)


@dataclass(frozen=True, slots=True)
class CursorRange:
    """A selection inside a field, as string offsets."""
    start: int
    end: int

    @classmethod
    def collapsed_at(cls, offset: int) -> "CursorRange":
        return cls(offset, offset)

    @property
    def collapsed(self) -> bool:
        return self.start == self.end


@dataclass(frozen=True, slots=True)
class EditDelta:
    """One atomic edit: the field before and after."""
    old_text: str
    old_range: CursorRange
    new_text: str
    new_range: CursorRange

    @classmethod
    def of(
        cls,
        old_text: str,
        old_cursor: int,
        new_text: str,
        new_cursor: int,
    ) -> "EditDelta":
        """Build a delta from collapsed cursors (the common typing case)."""
        return cls(
            old_text,
            CursorRange.collapsed_at(old_cursor),
            new_text,
            CursorRange.collapsed_at(new_cursor),
        )


@dataclass(frozen=True, slots=True)
class MaskInfo:
    """Clean value and validity of the last accepted edit."""
    clean: str
    is_valid: bool


@dataclass(frozen=True, slots=True)
class FormatResult:
    """Result of processing one edit."""
    text: str                  # text to display
    cursor_offset: int         # collapsed cursor in ``text``
    clean: str                 # text without decorators
    is_valid: bool             # mask filled (or overflowed when allowed)

    @property
    def info(self) -> MaskInfo:
        return MaskInfo(clean=self.clean, is_valid=self.is_valid)


EMPTY_RESULT = FormatResult(text="", cursor_offset=0, clean="", is_valid=False)

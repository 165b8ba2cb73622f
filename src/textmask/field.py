"""MaskedField — a minimal field buffer that drives a MaskEngine.

It plays the part of the host text widget: it owns the text and the
selection, turns key presses into the EditDelta a widget would deliver,
and adopts whatever the engine hands back.

Usage:

    field = MaskedField.create(["+1 (###) ####-###"])
    field.type_text("13123456")
    field.text        # "+1 (312) 3456"
    field.cursor      # 13
    field.backspace()
    field.is_valid    # False
"""

from __future__ import annotations
from dataclasses import dataclass, field as dc_field

from .classifier import split
from .engine import EngineConfig, MaskEngine
from .types import CursorRange, EditDelta, FormatResult


@dataclass
class MaskedField:
    """Text field state fed through a mask engine."""

    engine: MaskEngine
    text: str = ""
    selection: CursorRange = dc_field(default_factory=lambda: CursorRange(0, 0))

    @classmethod
    def create(cls, masks: list[str], **options) -> "MaskedField":
        """Factory — a fresh field over its own engine."""
        return cls(engine=MaskEngine(EngineConfig(masks=masks, **options)))

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def cursor(self) -> int:
        return self.selection.end

    @property
    def clean(self) -> str:
        return self.engine.current_info().clean

    @property
    def is_valid(self) -> bool:
        return self.engine.current_info().is_valid

    def select(self, start: int, end: int) -> None:
        """Select a range (no edit is sent to the engine)."""
        size = len(self.text)
        start, end = sorted((min(max(start, 0), size), min(max(end, 0), size)))
        self.selection = CursorRange(start, end)

    def move_cursor(self, offset: int) -> None:
        self.select(offset, offset)

    # ------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------

    def type_text(self, chars: str) -> FormatResult:
        """Insert ``chars`` at the cursor, replacing any selection."""
        start, end = self.selection.start, self.selection.end
        new_text = self.text[:start] + chars + self.text[end:]
        return self._apply(new_text, start + len(chars))

    def paste(self, chars: str) -> FormatResult:
        """Alias for type_text."""
        return self.type_text(chars)

    def backspace(self) -> FormatResult | None:
        """Delete the selection, or the character left of the cursor."""
        start, end = self.selection.start, self.selection.end
        if start == end:
            if start == 0:
                return None
            start -= len(split(self.text[:start])[-1])
        return self._apply(self.text[:start] + self.text[end:], start)

    def delete(self) -> FormatResult | None:
        """Delete the selection, or the character right of the cursor."""
        start, end = self.selection.start, self.selection.end
        if start == end:
            if end >= len(self.text):
                return None
            end += len(split(self.text[end:])[0])
        return self._apply(self.text[:start] + self.text[end:], start)

    def set_text(self, raw: str) -> str:
        """Replace the whole value, formatted (e.g. when prefilling)."""
        self.text = self.engine.pretty_text(raw)
        self.move_cursor(len(self.text))
        return self.text

    def clear(self) -> FormatResult | None:
        self.select(0, len(self.text))
        return self.backspace() if self.text else None

    def _apply(self, new_text: str, new_cursor: int) -> FormatResult:
        delta = EditDelta(
            old_text=self.text,
            old_range=self.selection,
            new_text=new_text,
            new_range=CursorRange.collapsed_at(new_cursor),
        )
        result = self.engine.process(delta)
        self.text = result.text
        self.move_cursor(result.cursor_offset)
        return result

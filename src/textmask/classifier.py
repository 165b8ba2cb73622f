"""Character classification against a decorator / wildcard / literal ruleset.

Every decision about what a character *is* goes through :class:`Classifier`:
the matcher, the renderer, the cursor mapper and the engine's edit
classification all ask the same instance, so ``clean_of`` and
``count_decorators`` can never disagree with ``classify``.

Text is walked by grapheme cluster (``regex`` ``\\X``), not by code point,
so a flag emoji or a letter with combining marks counts as one character.
"""

from __future__ import annotations
from collections.abc import Iterable, Mapping
from types import MappingProxyType

import regex

from .types import DECORATOR, LITERAL, WILDCARD, Pattern, Token

_GRAPHEME = regex.compile(r"\X")


def split(text: str) -> list[str]:
    """Split text into grapheme clusters."""
    return _GRAPHEME.findall(text)


def pattern_matches(char: str, pattern: Pattern) -> bool:
    """Check a single character against a string or compiled pattern."""
    if isinstance(pattern, str):
        return pattern in char
    return pattern.search(char) is not None


class Classifier:
    """Decorator > wildcard > literal classification for one ruleset."""

    __slots__ = ("_wildcards", "_decorators")

    def __init__(
        self,
        wildcards: Mapping[str, Pattern],
        decorators: Iterable[Pattern],
    ) -> None:
        self._wildcards = MappingProxyType(dict(wildcards))
        self._decorators = tuple(decorators)

    @property
    def wildcards(self) -> Mapping[str, Pattern]:
        return self._wildcards

    @property
    def decorators(self) -> tuple[Pattern, ...]:
        return self._decorators

    def is_decorator(self, char: str) -> bool:
        return any(pattern_matches(char, dec) for dec in self._decorators)

    def classify(self, char: str) -> Token:
        if self.is_decorator(char):
            return Token(DECORATOR, char)
        pattern = self._wildcards.get(char)
        if pattern is not None:
            return Token(WILDCARD, char, pattern)
        return Token(LITERAL, char)

    def tokenize(self, template: str) -> list[Token]:
        """Classify every character of a template, in order."""
        return [self.classify(char) for char in split(template)]

    def wildcard_accepts(self, wildcard: Token, char: str) -> bool:
        return pattern_matches(char, wildcard.pattern)

    # ------------------------------------------------------------------
    # Derived helpers
    # ------------------------------------------------------------------

    def clean_of(self, text: str) -> str:
        """Text with every decorator removed, order preserved."""
        return "".join(char for char in split(text) if not self.is_decorator(char))

    def count_decorators(self, text: str) -> int:
        return sum(1 for char in split(text) if self.is_decorator(char))

    def count_non_decorators(self, text: str) -> int:
        return sum(1 for char in split(text) if not self.is_decorator(char))

"""Template selection for a clean value.

Two searches live here:

* :func:`find_mask` walks the *clean* value (no decorators) through each
  template, skipping template decorators.  It is what every reformat uses.
* :func:`char_by_char_search` walks the *display* text one character per
  template position.  The engine only uses it to decide whether a decorator
  typed at the end of the field belongs there.
"""

from __future__ import annotations
from collections.abc import Iterable
from dataclasses import dataclass

from .classifier import Classifier, pattern_matches, split
from .types import OverflowPolicy, Token

FULL = "full"
OVERFLOW = "overflow"
MISS = "miss"


@dataclass(frozen=True, slots=True)
class Attempt:
    """Outcome of trying one template against a clean value."""
    outcome: str               # "full" | "overflow" | "miss"
    suffix_start: int = -1     # first unconsumed clean char, for "overflow"


_MISS = Attempt(MISS)
_FULL = Attempt(FULL)


def attempt_template(
    clean: list[str],
    tokens: list[Token],
    classifier: Classifier,
    allow_autofill: bool = False,
) -> Attempt:
    """Walk one template against ``clean``.

    ``clean`` running out first is a full match (a partially typed value
    still fits).  The template running out first is an overflow.
    """
    mi = ci = 0
    while True:
        if ci >= len(clean):
            return _FULL
        if mi >= len(tokens):
            return Attempt(OVERFLOW, ci)

        token = tokens[mi]
        if token.is_decorator:
            mi += 1
            continue
        if token.is_wildcard:
            if not classifier.wildcard_accepts(token, clean[ci]):
                return _MISS
            mi += 1
            ci += 1
            continue

        # Literal: typed as-is, or skipped over when autofill may insert it
        if clean[ci] == token.char:
            ci += 1
        elif not allow_autofill:
            return _MISS
        mi += 1


def find_mask(
    clean: str,
    masks: Iterable[str],
    classifier: Classifier,
    overflow: OverflowPolicy,
    allow_autofill: bool = False,
) -> str | None:
    """Return the first template that accepts ``clean``, or None.

    ``masks`` must already be sorted shortest first.  When no template
    accepts the value outright, the last template it overflowed (the
    longest one) is used, provided the overflowing tail matches the
    overflow pattern.  Shorter overflowed templates are not retried.
    """
    chars = split(clean)
    candidate: str | None = None
    suffix_start = -1

    for template in masks:
        result = attempt_template(chars, classifier.tokenize(template), classifier, allow_autofill)
        if result.outcome == FULL:
            return template
        if result.outcome == OVERFLOW and overflow.allowed:
            candidate = template
            suffix_start = result.suffix_start

    if candidate is None:
        return None
    if all(pattern_matches(char, overflow.pattern) for char in chars[suffix_start:]):
        return candidate
    return None


def _fits_char_by_char(
    chars: list[str],
    tokens: list[Token],
    classifier: Classifier,
    overflow: OverflowPolicy,
) -> bool:
    for i, char in enumerate(chars):
        if i >= len(tokens):
            # Anything past the template is taken on trust when overflow is on
            return overflow.allowed
        token = tokens[i]
        if token.is_wildcard:
            if not classifier.wildcard_accepts(token, char):
                return False
        elif token.char != char:
            return False
    return True


def char_by_char_search(
    text: str,
    masks: Iterable[str],
    classifier: Classifier,
    overflow: OverflowPolicy,
) -> str | None:
    """Return the first template whose characters line up with ``text``."""
    chars = split(text)
    for template in masks:
        if _fits_char_by_char(chars, classifier.tokenize(template), classifier, overflow):
            return template
    return None

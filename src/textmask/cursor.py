"""Cursor placement after the field text has been rewritten.

Offsets going in and out are plain string indices.  Scanning is done by
grapheme cluster, so a returned offset never lands inside a cluster.
"""

from __future__ import annotations

from .classifier import Classifier, split


def remap(
    classifier: Classifier,
    old_text: str,
    old_cursor: int,
    new_text: str,
    skip: int = 0,
) -> int:
    """Keep the cursor behind the same number of non-decorators.

    Counts the non-decorators left of ``old_cursor`` in ``old_text``, adds
    ``skip`` (characters the reformat inserted ahead of the cursor, e.g.
    autofilled literals), and returns the offset just after that many
    non-decorators in ``new_text``.  Falls back to the end of ``new_text``.
    """
    if old_cursor < 0:
        return 0

    wanted = skip + classifier.count_non_decorators(old_text[:old_cursor])
    if wanted <= 0:
        return 0

    seen = 0
    offset = 0
    for char in split(new_text):
        offset += len(char)
        if not classifier.is_decorator(char):
            seen += 1
            if seen == wanted:
                return offset
    return len(new_text)


def skip_decorators_forward(classifier: Classifier, text: str, offset: int) -> int:
    """Offset after the run of decorators starting at ``offset``."""
    for char in split(text[offset:]):
        if not classifier.is_decorator(char):
            break
        offset += len(char)
    return offset


def step_forward(text: str, offset: int) -> int:
    """Move one grapheme to the right, stopping at the end of ``text``."""
    chars = split(text[offset:])
    return offset + len(chars[0]) if chars else offset

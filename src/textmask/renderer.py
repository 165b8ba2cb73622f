"""Rebuild display text from a clean value and the template it fits."""

from __future__ import annotations
from collections.abc import Mapping

from .classifier import Classifier, split
from .types import Transform


def _transformed(transforms: Mapping[str, Transform], key: str, char: str) -> str:
    transform = transforms.get(key)
    return transform(char) if transform is not None else char


def render(
    clean: str,
    template: str,
    classifier: Classifier,
    transforms: Mapping[str, Transform] | None = None,
) -> str:
    """Lay ``clean`` out over ``template``.

    The template must be one :func:`~textmask.matcher.find_mask` chose for
    this value.  Output stops at the last clean character, so trailing
    decorators are not shown until the user reaches them.  Characters past
    the end of the template (overflow) are appended verbatim.
    """
    transforms = transforms or {}
    chars = split(clean)
    tokens = classifier.tokenize(template)
    out: list[str] = []
    pi = ti = 0

    while True:
        if ti >= len(tokens):
            out.extend(chars[pi:])
            break
        if pi >= len(chars):
            break

        token = tokens[ti]
        if token.is_decorator:
            out.append(token.char)
            ti += 1
        elif token.is_wildcard or token.char == chars[pi]:
            out.append(_transformed(transforms, token.char, chars[pi]))
            ti += 1
            pi += 1
        else:
            # Autofill: emit the constant run up to the next wildcard
            while ti < len(tokens) and not tokens[ti].is_wildcard:
                out.append(tokens[ti].char)
                ti += 1

    return "".join(out)

"""Validated, ordered collection of mask templates."""

from __future__ import annotations
from collections.abc import Iterable, Iterator

from .classifier import split
from .types import ConfigurationError


class MaskCollection:
    """Immutable list of templates, shortest first.

    The matcher returns the first template that fully accepts a value, so
    the order decides ties: shorter templates win, and templates of equal
    length keep the order they were registered in (the sort is stable).
    """

    __slots__ = ("_templates",)

    def __init__(self, templates: Iterable[str]) -> None:
        if isinstance(templates, str):
            raise ConfigurationError("`masks` must be a list of templates, not a string")
        templates = list(templates)
        if not templates:
            raise ConfigurationError("`masks` must not be empty")
        for template in templates:
            if not isinstance(template, str) or not template:
                raise ConfigurationError(f"invalid mask template: {template!r}")
        self._templates = tuple(sorted(templates, key=lambda t: len(split(t))))

    @classmethod
    def build(cls, templates: Iterable[str]) -> "MaskCollection":
        if isinstance(templates, MaskCollection):
            return templates
        return cls(templates)

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def __getitem__(self, index: int) -> str:
        return self._templates[index]

    def __repr__(self) -> str:
        return f"MaskCollection({list(self._templates)!r})"

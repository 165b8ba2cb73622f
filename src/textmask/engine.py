"""MaskEngine — the main API.  One edit in, one formatted result out.

Usage:
    from textmask import EditDelta, EngineConfig, MaskEngine

    engine = MaskEngine(EngineConfig(masks=["+1 (###) ####-###"]))

    result = engine.process(EditDelta.of("", 0, "13123456", 8))
    print(result.text)             # "+1 (312) 3456"
    print(result.cursor_offset)    # 13
    print(engine.current_info())   # MaskInfo(clean='13123456', is_valid=False)

    engine.pretty_text("+12345678901")   # "+1 (234) 5678-901"

The engine keeps exactly one piece of state, the last accepted result.
Calls must be serialized by the caller; configuration is read-only and
can be shared between engines.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from types import MappingProxyType

from .classifier import Classifier, split
from .cursor import remap, skip_decorators_forward, step_forward
from .masks import MaskCollection
from .matcher import char_by_char_search, find_mask
from .patterns import COUNTRY_PHONE_MASKS, DIGIT, default_decorators, default_wildcards
from .renderer import render
from .types import (
    EMPTY_RESULT,
    ConfigurationError,
    EditDelta,
    FormatResult,
    MaskInfo,
    OverflowPolicy,
    Pattern,
    Transform,
)

logger = logging.getLogger(__name__)


@dataclass
class EngineConfig:
    """Configuration for the MaskEngine."""
    masks: list[str]                                   # required, non-empty
    wildcards: dict[str, Pattern] | None = None        # None = "#" digits, "@" letters
    decorators: list[Pattern] | None = None            # None = " ()-+|/:"
    # Per template character: applied to the typed char when rendering
    transforms: dict[str, Transform] = field(default_factory=dict)
    overflow: OverflowPolicy = field(default_factory=OverflowPolicy.only_digits)
    # Let unmatched template literals be inserted ahead of the user's input
    allow_autofill: bool = False


class MaskEngine:
    """Stateless-per-call input mask formatter.

    Edits are classified before anything is reformatted:

    1. a replaced selection always reformats;
    2. a single deletion that leaves only decorators is accepted as typed;
       any other single deletion reformats;
    3. a single decorator typed at the end is kept only where the mask has
       it; typed mid-text it is kept and the cursor jumps ahead;
    4. everything else is cleaned, matched, rendered and the cursor remapped.
    """

    def __init__(self, config: EngineConfig) -> None:
        self.config = config
        self.masks = MaskCollection.build(config.masks)

        wildcards = default_wildcards() if config.wildcards is None else config.wildcards
        for key in wildcards:
            if not isinstance(key, str) or len(split(key)) != 1:
                raise ConfigurationError(f"wildcard id must be a single character: {key!r}")
        decorators = default_decorators() if config.decorators is None else config.decorators
        self.classifier = Classifier(wildcards, decorators)

        for key, transform in config.transforms.items():
            if not callable(transform):
                raise ConfigurationError(f"transform for {key!r} is not callable")
        self.transforms = MappingProxyType(dict(config.transforms))

        if not isinstance(config.overflow, OverflowPolicy):
            raise ConfigurationError("`overflow` must be an OverflowPolicy")
        self.overflow = config.overflow
        self.allow_autofill = bool(config.allow_autofill)

        self._result = EMPTY_RESULT

    @classmethod
    def country_phone_masks(cls, *, allow_overflow: bool = True) -> "MaskEngine":
        """Engine over the built-in table of ~300 international phone masks."""
        return cls(EngineConfig(
            masks=list(COUNTRY_PHONE_MASKS),
            overflow=OverflowPolicy(allowed=allow_overflow, pattern=DIGIT),
        ))

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def result(self) -> FormatResult:
        return self._result

    @property
    def info(self) -> MaskInfo:
        return self._result.info

    def current_info(self) -> MaskInfo:
        """Clean value and validity of the last accepted edit."""
        return self._result.info

    def process(self, delta: EditDelta) -> FormatResult:
        """Apply one edit and return what the field should show."""
        if not delta.old_range.collapsed:
            logger.debug("selection replaced: reformatting")
            return self._default(delta)

        classifier = self.classifier
        old_len = len(split(delta.old_text))
        new_len = len(split(delta.new_text))
        old_plain = classifier.count_non_decorators(delta.old_text)
        new_plain = classifier.count_non_decorators(delta.new_text)

        if new_len == old_len - 1:
            if new_plain == 0:
                # Only decorators left: keep them so an emptied field still
                # edits naturally
                logger.debug("deletion left only decorators: %r", delta.new_text)
                return self._store(FormatResult(
                    text=delta.new_text,
                    cursor_offset=delta.new_range.start,
                    clean="",
                    is_valid=False,
                ))
            return self._default(delta)

        if new_plain == old_plain and new_len == old_len + 1:
            return self._added_decorator(delta)

        return self._default(delta)

    def pretty_text(self, raw: str) -> str:
        """Format a whole value at once, e.g. to prefill a field.

        Returns ``raw`` unchanged when no mask accepts it.
        """
        return self.process(EditDelta.of(raw, len(raw), raw, len(raw))).text

    # ------------------------------------------------------------------
    # Edit handlers
    # ------------------------------------------------------------------

    def _added_decorator(self, delta: EditDelta) -> FormatResult:
        new_text = delta.new_text
        cursor = delta.new_range.start

        if cursor >= len(new_text):
            # Typed at the end: keep it only if the mask has it right there
            template = char_by_char_search(new_text, self.masks, self.classifier, self.overflow)
            chars = split(new_text)
            position = len(chars) - 1
            if template is not None:
                template_chars = split(template)
                if position < len(template_chars) and template_chars[position] == chars[position]:
                    logger.debug("decorator %r accepted at end", chars[position])
                    return self._keep(new_text, cursor)
            logger.debug("decorator %r does not belong at end, reverted", chars[position])
            return self._revert(delta)

        # Typed mid-text: jump over the decorator run it joined
        start = min(max(delta.old_range.start, 0), len(new_text))
        end = skip_decorators_forward(self.classifier, new_text, start)
        logger.debug("decorator inserted mid-text at %d", start)
        return self._keep(new_text, step_forward(new_text, end))

    def _default(self, delta: EditDelta) -> FormatResult:
        classifier = self.classifier
        clean = classifier.clean_of(delta.new_text)
        template = self._find(clean)
        if template is None:
            logger.debug("no mask accepts %r: edit rejected", clean)
            return self._revert(delta)

        text = render(clean, template, classifier, self.transforms)
        # Non-decorators the render added ahead of the user's (autofill)
        skip = classifier.count_non_decorators(text) - classifier.count_non_decorators(delta.new_text)
        cursor = remap(classifier, delta.new_text, delta.new_range.start, text, skip=skip)
        return self._store(FormatResult(
            text=text,
            cursor_offset=cursor,
            clean=clean,
            is_valid=self._filled(clean, template),
        ))

    def _find(self, clean: str) -> str | None:
        return find_mask(clean, self.masks, self.classifier, self.overflow, self.allow_autofill)

    def _filled(self, clean: str, template: str | None) -> bool:
        if template is None:
            return False
        return len(split(clean)) >= self.classifier.count_non_decorators(template)

    # ------------------------------------------------------------------
    # Snapshot
    # ------------------------------------------------------------------

    def _store(self, result: FormatResult) -> FormatResult:
        self._result = result
        return result

    def _keep(self, text: str, cursor: int) -> FormatResult:
        """Accept ``text`` without reformatting; clean and validity follow it."""
        clean = self.classifier.clean_of(text)
        return self._store(FormatResult(
            text=text,
            cursor_offset=cursor,
            clean=clean,
            is_valid=self._filled(clean, self._find(clean)),
        ))

    def _revert(self, delta: EditDelta) -> FormatResult:
        """Hand the old field state back; the snapshot is left untouched."""
        return FormatResult(
            text=delta.old_text,
            cursor_offset=delta.old_range.start,
            clean=self._result.clean,
            is_valid=self._result.is_valid,
        )

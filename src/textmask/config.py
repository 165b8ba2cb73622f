"""YAML/dict config loader for textmask.

Supports loading from a YAML file or a plain dict (for embedding in a
larger application config).

Example YAML:

    textmask:
      masks:
        - "+1 (###) ###-####"
        - "+44 #### ######"
      # or, instead of masks:
      # preset: country_phone
      wildcards:
        "#": "[0-9]"
        "A": "[A-Za-z]"
      decorators: [" ", "(", ")", "-", "+"]
      decorator_patterns: ["[.]"]
      transforms:
        A: upper
      overflow:              # or just `overflow: false`
        allowed: true
        pattern: "[0-9]"
      allow_autofill: false
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Any

import regex

from .engine import EngineConfig, MaskEngine
from .patterns import COUNTRY_PHONE_MASKS, DEFAULT_DECORATORS
from .types import ConfigurationError, OverflowPolicy

logger = logging.getLogger(__name__)

# Transforms that can be named from a config file
TRANSFORMS = {
    "upper": str.upper,
    "lower": str.lower,
    "casefold": str.casefold,
}

PRESETS = {
    "country_phone": COUNTRY_PHONE_MASKS,
}


def _compile(source: Any, what: str) -> Any:
    """Compile a regex source; already-compiled patterns pass through."""
    if not isinstance(source, str):
        return source
    try:
        return regex.compile(source)
    except regex.error as e:
        raise ConfigurationError(f"invalid {what} pattern {source!r}: {e}") from e


def _transform(key: str, name: Any):
    if callable(name):
        return name
    if name not in TRANSFORMS:
        raise ConfigurationError(
            f"unknown transform {name!r} for {key!r} (known: {', '.join(sorted(TRANSFORMS))})"
        )
    return TRANSFORMS[name]


def _mapping(data: Any, key: str) -> dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"`{key}` must be a mapping, got {type(data).__name__}")
    return data


def _overflow(data: Any) -> OverflowPolicy:
    if isinstance(data, OverflowPolicy):
        return data
    # `overflow: false` / `overflow: true` shorthand
    if isinstance(data, bool):
        data = {"allowed": data}
    data = _mapping(data, "overflow")
    allowed = bool(data.get("allowed", True))
    source = data.get("pattern", "[0-9]" if allowed else None)
    return OverflowPolicy(
        allowed=allowed,
        pattern=None if source is None else _compile(source, "overflow"),
    )


def load_config(data: dict[str, Any]) -> dict[str, Any]:
    """Normalize a config dict (from YAML or inline).

    Idempotent: a dict that went through here once comes out the same.
    """
    # Support nested under "textmask" key or flat
    if "textmask" in data:
        data = data["textmask"] or {}

    preset = data.get("preset")
    if preset is not None:
        preset = str(preset).replace("-", "_")
        if preset not in PRESETS:
            raise ConfigurationError(f"unknown preset {preset!r}")
        masks = list(PRESETS[preset])
    else:
        masks = data.get("masks") or []
        if isinstance(masks, str):
            raise ConfigurationError("`masks` must be a list of templates, not a string")
        masks = list(masks)
    if not masks:
        raise ConfigurationError("config needs `masks` or a `preset`")

    wildcards = None
    if data.get("wildcards") is not None:
        wildcards = {
            str(key): _compile(source, "wildcard")
            for key, source in _mapping(data["wildcards"], "wildcards").items()
        }

    decorators = None
    if data.get("decorators") is not None or data.get("decorator_patterns"):
        literal = data.get("decorators")
        decorators = list(DEFAULT_DECORATORS if literal is None else literal)
        decorators += [
            _compile(source, "decorator")
            for source in data.get("decorator_patterns") or []
        ]

    transforms = {
        str(key): _transform(key, name)
        for key, name in _mapping(data.get("transforms"), "transforms").items()
    }
    overflow = _overflow(data.get("overflow"))

    cfg = {
        "masks": masks,
        "wildcards": wildcards,
        "decorators": decorators,
        "transforms": transforms,
        "overflow": overflow,
        "allow_autofill": bool(data.get("allow_autofill", False)),
    }
    logger.debug(
        "loaded config: %d masks, overflow=%s, autofill=%s",
        len(masks), overflow.allowed, cfg["allow_autofill"],
    )
    return cfg


def read_yaml(path: str | Path) -> dict[str, Any]:
    """Read the raw (un-normalized) config mapping from a YAML file."""
    import yaml
    with open(Path(path).expanduser(), encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path}: expected a mapping at the top level")
    if "textmask" in data:
        return data["textmask"] or {}
    return data


def load_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load config from a YAML file."""
    return load_config(read_yaml(path))


def create_engine(config: dict[str, Any]) -> MaskEngine:
    """Create a fully configured engine from a config dict."""
    return MaskEngine(EngineConfig(**load_config(config)))

"""textmask — input masks that keep the cursor where the user expects it."""

from .engine import MaskEngine, EngineConfig
from .classifier import Classifier
from .masks import MaskCollection
from .field import MaskedField
from .config import create_engine, load_config, load_from_yaml
from .patterns import COUNTRY_PHONE_MASKS
from .types import (
    ConfigurationError,
    CursorRange,
    EditDelta,
    FormatResult,
    MaskInfo,
    OverflowPolicy,
)

__all__ = [
    "MaskEngine", "EngineConfig",
    "Classifier", "MaskCollection",
    "MaskedField",
    "create_engine", "load_config", "load_from_yaml",
    "COUNTRY_PHONE_MASKS",
    "ConfigurationError", "CursorRange", "EditDelta", "FormatResult",
    "MaskInfo", "OverflowPolicy",
]
__version__ = "0.1.0"

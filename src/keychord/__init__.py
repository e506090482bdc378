"""keychord package."""

__all__ = [
    "DisallowedModifierError",
    "DuplicateModifierError",
    "Err",
    "InvalidKeyError",
    "Key",
    "KeyEvent",
    "KeyNotationError",
    "NotationError",
    "Ok",
    "Result",
    "UnknownModifierError",
    "alias",
    "format_key_sequence",
    "from_code",
    "normalize",
    "normalize_sequence",
    "parse",
    "parse_key_sequence",
    "parse_sequence",
    "stringify",
]
__version__ = "0.1.0"

from .notation import alias, from_code, normalize, parse, stringify
from .sequence import format_key_sequence, normalize_sequence, parse_key_sequence, parse_sequence
from .types import (
    DisallowedModifierError,
    DuplicateModifierError,
    Err,
    InvalidKeyError,
    Key,
    KeyEvent,
    KeyNotationError,
    NotationError,
    Ok,
    Result,
    UnknownModifierError,
)

"""Value types for key events, parsed keys, results and parse errors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Generic, NoReturn, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")

MODIFIER_FIELDS = ("alt", "ctrl", "meta", "shift")


@dataclass(frozen=True)
class KeyEvent:
    """Snapshot of one keyboard interaction as reported by an input layer."""

    key: str = ""
    code: str | None = None
    shift: bool = False
    ctrl: bool = False
    alt: bool = False
    meta: bool = False


@dataclass(frozen=True)
class Key:
    """A parsed chord: canonical label plus the modifiers that are held."""

    key: str
    shift: bool = False
    ctrl: bool = False
    alt: bool = False
    meta: bool = False

    def as_dict(self) -> dict[str, object]:
        data: dict[str, object] = {"key": self.key}
        for name in MODIFIER_FIELDS:
            if getattr(self, name):
                data[name] = True
        return data


@dataclass(frozen=True)
class InvalidKeyError:
    name: ClassVar[str] = "InvalidKeyError"

    key: str

    @property
    def message(self) -> str:
        return f"Invalid key: {self.key}"

    def as_dict(self) -> dict[str, str]:
        return {"name": self.name, "key": self.key, "message": self.message}


@dataclass(frozen=True)
class _ModifierError:
    """Base for errors about one modifier letter inside a notation string."""

    name: ClassVar[str] = ""
    reason: ClassVar[str] = ""

    modifier: str
    context: str

    @property
    def message(self) -> str:
        return f"{self.context}: {self.reason}: {self.modifier}"

    def as_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "modifier": self.modifier,
            "context": self.context,
            "message": self.message,
        }


@dataclass(frozen=True)
class UnknownModifierError(_ModifierError):
    name: ClassVar[str] = "UnknownModifierError"
    reason: ClassVar[str] = "Unknown modifier"


@dataclass(frozen=True)
class DuplicateModifierError(_ModifierError):
    name: ClassVar[str] = "DuplicateModifierError"
    reason: ClassVar[str] = "Duplicate modifier"


@dataclass(frozen=True)
class DisallowedModifierError(_ModifierError):
    name: ClassVar[str] = "DisallowedModifierError"
    reason: ClassVar[str] = "Unusable modifier with single-character keys"


NotationError = Union[
    InvalidKeyError,
    UnknownModifierError,
    DuplicateModifierError,
    DisallowedModifierError,
]


class KeyNotationError(ValueError):
    """Raised by ``Err.unwrap()``; carries the error value."""

    def __init__(self, error: NotationError) -> None:
        super().__init__(error.message)
        self.error = error


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T
    ok: ClassVar[bool] = True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    value: E
    ok: ClassVar[bool] = False

    def unwrap(self) -> NoReturn:
        raise KeyNotationError(self.value)


Result = Union[Ok[T], Err[E]]

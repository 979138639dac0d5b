"""
Definition of the closed value variant `Value` used for dynamically typed arguments.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


class TypeMismatch(TypeError):
    """Raised when a value is not of any of the expected kinds."""

    def __init__(self, value: Any, expected: str) -> None:
        super().__init__(f"Expected {expected}, got {type(value).__name__}: {value!r}")
        self.value = value
        self.expected = expected


@dataclass(frozen=True)
class Value(ABC):
    @abstractmethod
    def unwrap(self) -> Any:
        pass

    @abstractmethod
    def __str__(self) -> str:
        pass


@dataclass(frozen=True)
class Int(Value):
    value: int = field(init=True)

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeMismatch(self.value, "int")

    def unwrap(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Float(Value):
    value: float = field(init=True)

    def __post_init__(self) -> None:
        if not isinstance(self.value, float):
            raise TypeMismatch(self.value, "float")

    def unwrap(self) -> float:
        return self.value

    def __str__(self) -> str:
        return repr(self.value)


@dataclass(frozen=True)
class Str(Value):
    value: str = field(init=True)

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeMismatch(self.value, "str")

    def unwrap(self) -> str:
        return self.value

    def __str__(self) -> str:
        return repr(self.value)


@dataclass(frozen=True)
class Seq(Value):
    items: tuple[Value, ...] = field(default=())

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            raise TypeMismatch(self.items, "tuple of values")
        for item in self.items:
            if not isinstance(item, Value):
                raise TypeMismatch(item, "value")

    def unwrap(self) -> list[Any]:
        return [item.unwrap() for item in self.items]

    def __str__(self) -> str:
        return f"[{' '.join(str(item) for item in self.items)}]"


def lift(x: Any) -> Value:
    """Maps a plain python value into the `Value` variant.

    Lists and tuples become `Seq` (recursively), `bool` is not treated as a number.
    Raises `TypeMismatch` for any other kind of value.
    """
    match x:
        case Value():
            return x
        case bool():
            raise TypeMismatch(x, "int, float, str or sequence")
        case int():
            return Int(x)
        case float():
            return Float(x)
        case str():
            return Str(x)
        case list() | tuple():
            return Seq(tuple(lift(item) for item in x))
    raise TypeMismatch(x, "int, float, str or sequence")

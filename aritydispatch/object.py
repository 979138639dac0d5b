"""
Helpers for string keyed maps of dynamically typed values.
"""

from collections.abc import Callable, Mapping
from typing import Any

from .types import TypeMismatch


def create(*keyvals: Any) -> dict[str, Any]:
    """Builds a map from alternating keys and values.

    `create("a", 1, "b", 2)` is `{"a": 1, "b": 2}`. Later keys overwrite earlier ones.
    """
    if len(keyvals) % 2 != 0:
        raise ValueError(f"Expected alternating keys and values, got {len(keyvals)} argument(s)")
    obj: dict[str, Any] = {}
    for key, value in zip(keyvals[::2], keyvals[1::2]):
        if not isinstance(key, str):
            raise TypeMismatch(key, "str key")
        obj[key] = value
    return obj


def for_each(obj: Mapping[str, Any], f: Callable[[str, Any, Mapping[str, Any]], Any]) -> None:
    """Calls `f(key, value, obj)` for every entry of `obj`, discarding the results."""
    for key, value in obj.items():
        f(key, value, obj)
    return None

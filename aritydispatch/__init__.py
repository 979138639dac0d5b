from .dispatcher import ArityDispatcher, Handler, UnsupportedArity
from .dsl import DSL
from .numeric import double, long, plus_one
from .object import create, for_each
from .types import Value, Int, Float, Str, Seq, TypeMismatch, lift

__all__ = [
    "DSL",
    "ArityDispatcher",
    "Handler",
    "UnsupportedArity",
    "TypeMismatch",
    "Value",
    "Int",
    "Float",
    "Str",
    "Seq",
    "lift",
    "double",
    "long",
    "plus_one",
    "create",
    "for_each",
]

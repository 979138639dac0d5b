"""
A small handler family dispatched on one, two, or two plus a tail of arguments.

Every handler logs the arguments it received and returns a tag naming itself.
"""

import logging
from collections.abc import Sequence
from typing import Any

from .dsl import DSL

logger = logging.getLogger(__name__)


def _format(xs: Sequence[Any]) -> str:
    return f"[{' '.join(str(x) for x in xs)}]"


def bar_1(x: Any) -> Any:
    logger.info(f"{x}")
    return "Bar_1"


def bar_2(x: Any, y: Any) -> Any:
    logger.info(f"{x} {y}")
    return "Bar_2"


def bar_2_va(x: Any, y: Any, *xs: Any) -> Any:
    logger.info(f"{x} {y} {_format(xs)}")
    return "Bar_2_VA"


class Foo:
    _bar = DSL().Exact(bar_1, arity=1).Exact(bar_2, arity=2).Variadic(bar_2_va).Build("bar")

    bar_1 = staticmethod(bar_1)
    bar_2 = staticmethod(bar_2)
    bar_2_va = staticmethod(bar_2_va)

    def bar(self, *xs: Any) -> Any:
        return Foo._bar.dispatch(*xs)

    def bar_apply_to(self, xs: Sequence[Any]) -> Any:
        return Foo._bar.dispatch_from_list(xs)

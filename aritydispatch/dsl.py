# pylint: disable=invalid-name
"""
This module provides a `DSL` class, which allows users to define a family of handlers
in a declarative manner using a fluent interface.
"""

from __future__ import annotations
import logging
from collections.abc import Callable
from typing import Any, Optional

from .dispatcher import ArityDispatcher, Handler


class DSL:
    """
    A domain-specific language (DSL) to define arity dispatched functions.

    The handler family is collected once and frozen into an `ArityDispatcher` by `Build`.

    Examples:
        DSL()
            .Exact(lambda x: ...)
            .Exact(lambda x, y: ...)
            .Variadic(lambda x, y, *xs: ...)
            .Build("bar")

        constructs a dispatcher with three handlers:
        - one for exactly one argument
        - one for exactly two arguments
        - one for two arguments followed by a non-empty tail, which is used for every
          call with more than two arguments
    """

    def __init__(self) -> None:
        """
        Initialize the DSL object
        """

        self._handlers: list[Handler] = []

    @staticmethod
    def _handler(function: Callable[..., Any], name: Optional[str]) -> Handler:
        if isinstance(function, Handler):
            return function if name is None else Handler(name, function.function, function.arity, function.variadic)
        handler = Handler.of(function, name)
        if name is None and handler.name == "<lambda>":
            # lambdas are named after their arity, e.g. lambda_2 or lambda_2_va
            suffix = "_va" if handler.variadic else ""
            handler = Handler(f"lambda_{handler.arity}{suffix}", function, handler.arity, handler.variadic)
        return handler

    def Exact(self, function: Callable[..., Any], arity: Optional[int] = None, name: Optional[str] = None) -> DSL:
        """
        Add a handler for an exact number of arguments.

        :param function: The handler. It must not take `*args`.
        :type function: Callable[..., Any]
        :param arity: The expected number of arguments. If given, it has to match the signature
            of `function`.
        :type arity: int | None
        :param name: The name of the handler, defaults to the name of `function`.
        :type name: str | None
        :return: The DSL object.
        :rtype: DSL
        """
        handler = DSL._handler(function, name)
        if handler.variadic:
            raise ValueError(f"{handler.name} takes a variable number of arguments, use Variadic")
        if arity is not None and handler.arity != arity:
            raise ValueError(f"{handler.name} takes {handler.arity} argument(s), not {arity}")
        self._handlers.append(handler)
        return self

    def Variadic(self, function: Callable[..., Any], name: Optional[str] = None) -> DSL:
        """
        Add the handler for calls exceeding every exact arity.

        The fixed parameters of `function` are bound to the first arguments, the remaining
        arguments are passed as its `*args` tail.

        :param function: The handler. It must take `*args`.
        :type function: Callable[..., Any]
        :param name: The name of the handler, defaults to the name of `function`.
        :type name: str | None
        :return: The DSL object.
        :rtype: DSL
        """
        handler = DSL._handler(function, name)
        if not handler.variadic:
            raise ValueError(f"{handler.name} takes a fixed number of arguments, use Exact")
        self._handlers.append(handler)
        return self

    def Build(self, name: str = "dispatch", logger: Optional[logging.Logger] = None) -> ArityDispatcher:
        """
        Constructs the dispatcher from the collected handlers.

        :param name: The name of the dispatched function, used in error messages.
        :type name: str
        :param logger: Logger for routing decisions.
        :type logger: logging.Logger | None
        :return: The constructed dispatcher.
        :rtype: ArityDispatcher
        """
        return ArityDispatcher(self._handlers, name=name, logger=logger)

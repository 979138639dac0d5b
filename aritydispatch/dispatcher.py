"""Arity based dispatch.
   An `ArityDispatcher` binds a fixed family of handlers under one entry point:
   - handlers for an exact number of positional arguments
   - at most one variadic handler taking a fixed prefix and an open tail
   A call with N arguments is routed by N alone. The variadic handler takes priority
   whenever N exceeds every fixed arity known to the dispatcher."""

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from inspect import Parameter, signature
from types import MappingProxyType
from typing import Any, Optional


class UnsupportedArity(TypeError):
    """Raised when no handler accepts the number of supplied arguments."""

    def __init__(self, arity: int, name: str = "dispatch") -> None:
        super().__init__(f"Invalid arity: {arity} (no handler of {name} accepts {arity} argument(s))")
        self.arity = arity
        self.name = name


@dataclass(frozen=True)
class Handler:
    # function taking `arity` fixed positional arguments, followed by a tail if `variadic`
    name: str
    function: Callable[..., Any] = field(compare=False)
    arity: int
    variadic: bool = False

    def __str__(self) -> str:
        if self.variadic:
            return f"{self.name}/{self.arity}+"
        return f"{self.name}/{self.arity}"

    def accepts(self, n: int) -> bool:
        return n >= self.arity if self.variadic else n == self.arity

    def split(self, args: Sequence[Any]) -> tuple[tuple[Any, ...], tuple[Any, ...]]:
        """Splits `args` into the fixed prefix and the (possibly empty) tail."""
        return tuple(args[: self.arity]), tuple(args[self.arity :])

    def __call__(self, *args: Any) -> Any:
        if not self.accepts(len(args)):
            raise UnsupportedArity(len(args), self.name)
        fixed, tail = self.split(args)
        return self.function(*fixed, *tail)

    @staticmethod
    def of(function: Callable[..., Any], name: Optional[str] = None) -> "Handler":
        """Derives arity and variadicity of `function` from its signature.

        Positional parameters without default count towards the arity, parameters with
        default values are never filled by the dispatcher.
        """
        try:
            parameters = list(signature(function).parameters.values())
        except ValueError:
            raise ValueError(
                f"Handler {function!r} does not expose a signature. "
                "If it's a built-in, you can simply wrap it in another function."
            )

        positional = [
            p
            for p in parameters
            if p.kind in (Parameter.POSITIONAL_ONLY, Parameter.POSITIONAL_OR_KEYWORD)
        ]
        arity = len(list(filter(lambda p: p.default is Parameter.empty, positional)))
        variadic = any(map(lambda p: p.kind == Parameter.VAR_POSITIONAL, parameters))

        required_keywords = [
            p.name
            for p in parameters
            if p.kind == Parameter.KEYWORD_ONLY and p.default is Parameter.empty
        ]
        if required_keywords:
            raise ValueError(
                f"Handler {function!r} has required keyword-only parameters {required_keywords}"
            )

        if name is None:
            name = getattr(function, "__name__", repr(function))
        return Handler(name, function, arity, variadic)


class ArityDispatcher:
    """Routes calls to the handler registered for their number of arguments.

    The handler family is fixed at construction, afterwards the dispatcher is read-only.
    """

    _logger: logging.Logger

    def __init__(
        self,
        handlers: Iterable[Handler | Callable[..., Any]],
        name: str = "dispatch",
        logger: Optional[logging.Logger] = None,
    ) -> None:
        if logger is None:
            self._logger = logging.getLogger(__name__)
        else:
            self._logger = logger

        self.name = name
        exact: dict[int, Handler] = {}
        by_name: dict[str, Handler] = {}
        variadic: Handler | None = None

        for handler in handlers:
            if not isinstance(handler, Handler):
                handler = Handler.of(handler)
            if handler.name in by_name:
                raise ValueError(f"Duplicate handler name: {handler.name}")
            by_name[handler.name] = handler
            if handler.variadic:
                if variadic is not None:
                    raise ValueError(
                        f"{name} has two variadic handlers: {variadic} and {handler}"
                    )
                variadic = handler
            else:
                if handler.arity in exact:
                    raise ValueError(
                        f"{name} has two handlers for arity {handler.arity}: "
                        f"{exact[handler.arity]} and {handler}"
                    )
                exact[handler.arity] = handler

        self._exact: Mapping[int, Handler] = MappingProxyType(exact)
        self._by_name: Mapping[str, Handler] = MappingProxyType(by_name)
        self._variadic = variadic
        # calls with more arguments than any exact handler takes go to the variadic handler
        self._threshold = max(exact.keys(), default=-1)

    def __repr__(self) -> str:
        return f"ArityDispatcher({self.name}: {', '.join(str(h) for h in self.handlers)})"

    @property
    def handlers(self) -> tuple[Handler, ...]:
        return tuple(self._by_name.values())

    @property
    def arities(self) -> frozenset[int]:
        return frozenset(self._exact.keys())

    @property
    def variadic(self) -> Handler | None:
        return self._variadic

    def select(self, n: int) -> Handler:
        """Selects the handler for a call with `n` arguments.

        Raises `UnsupportedArity` if there is none.
        """
        if self._variadic is not None and n > self._threshold and self._variadic.accepts(n):
            return self._variadic
        handler = self._exact.get(n)
        if handler is None:
            raise UnsupportedArity(n, self.name)
        return handler

    def dispatch(self, *args: Any) -> Any:
        """Invokes the handler for `len(args)` and returns its result unchanged."""
        handler = self.select(len(args))
        self._logger.debug(f"{self.name}: {len(args)} argument(s) -> {handler}")
        if handler.variadic:
            fixed, tail = handler.split(args)
            return handler.function(*fixed, *tail)
        return handler.function(*args)

    __call__ = dispatch

    def dispatch_from_list(self, args: Sequence[Any]) -> Any:
        """Same routing as `dispatch`, for arguments already collected in a sequence.

        The variadic handler is reached through `invoke` by name.
        """
        handler = self.select(len(args))
        self._logger.debug(f"{self.name} (list): {len(args)} argument(s) -> {handler}")
        if handler.variadic:
            return self.invoke(handler.name, args)
        return handler.function(*args)

    def invoke(self, name: str, args: Sequence[Any]) -> Any:
        """Calls the handler named `name` with `args` unpacked."""
        try:
            handler = self._by_name[name]
        except KeyError:
            raise KeyError(f"{self.name} has no handler named {name}") from None
        return handler(*args)

"""
Function rendering registry.

Each dialect owns one :class:`FunctionRegistry`, filled once while the dialect
is constructed and frozen afterwards. Lookups ignore case::

    registry = FunctionRegistry()
    registry.register("len", TemplateFunction("LENGTH({0})"))
    registry.freeze()
    registry.render("LEN", ["name"])  # 'LENGTH(name)'
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Dict, List, Protocol, Union, runtime_checkable

from .errors import DialectConfigurationError, MalformedInputError
from .utils import get_logger


@runtime_checkable
class SqlFunction(Protocol):
    """
    Renders a dialect specific call from already rendered argument text.
    """

    def render(self, args: Sequence[str]) -> str: ...


FunctionHandler = Callable[[Sequence[str]], str]
FunctionLike = Union[SqlFunction, FunctionHandler]


def generic_call(name: str, args: Sequence[str]) -> str:
    return f"{name}({', '.join(args)})"


class TemplateFunction:
    """
    Formats positional arguments into a fixed template such as ``"LENGTH({0})"``.
    """

    def __init__(self, template: str) -> None:
        self.template = template

    def render(self, args: Sequence[str]) -> str:
        try:
            return self.template.format(*args)
        except IndexError as exc:
            raise MalformedInputError(
                f"Template {self.template!r} expects more than {len(args)} argument(s)"
            ) from exc

    def __repr__(self) -> str:
        return f"TemplateFunction({self.template!r})"


class RenamedFunction:
    """
    Generic call syntax under a different function name.
    """

    def __init__(self, name: str) -> None:
        self.name = name

    def render(self, args: Sequence[str]) -> str:
        return generic_call(self.name, args)

    def __repr__(self) -> str:
        return f"RenamedFunction({self.name!r})"


class _CallableFunction:
    def __init__(self, handler: FunctionHandler) -> None:
        self.handler = handler

    def render(self, args: Sequence[str]) -> str:
        return self.handler(args)


def as_sql_function(renderer: FunctionLike) -> SqlFunction:
    if isinstance(renderer, SqlFunction):
        return renderer
    if callable(renderer):
        return _CallableFunction(renderer)
    raise DialectConfigurationError(f"Cannot use {renderer!r} as a function renderer")


class FunctionRegistry:
    """
    Case-insensitive mapping of function names to renderers.
    """

    def __init__(self) -> None:
        self._functions: Dict[str, SqlFunction] = {}
        self._frozen = False
        self.logger = get_logger("functions")

    @staticmethod
    def _key(name: str) -> str:
        return name.casefold()

    def register(self, name: str, renderer: FunctionLike) -> None:
        if self._frozen:
            raise DialectConfigurationError(
                f"Cannot register function '{name}' after the registry was frozen."
            )
        if not name:
            raise DialectConfigurationError("Function name must not be empty.")
        self._functions[self._key(name)] = as_sql_function(renderer)
        self.logger.debug("Registered SQL function %s", name)

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, name: str) -> SqlFunction | None:
        return self._functions.get(self._key(name))

    def names(self) -> List[str]:
        return sorted(self._functions)

    def render(self, name: str, args: Sequence[str]) -> str:
        function = self.get(name)
        if function is not None:
            return function.render(args)
        return generic_call(name, args)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._key(name) in self._functions

    def __len__(self) -> int:
        return len(self._functions)

from __future__ import annotations

import sys
import types
from collections.abc import Mapping
from typing import Any, Callable, Optional

from classmonkey.exceptions import NoSuchMethodError
from classmonkey.logging import get_logger
from classmonkey.registry import get_registry
from classmonkey.resolution import TargetResolver
from classmonkey.types import (
    BindingHandle,
    ModifierEntry,
    ModifierKind,
)

logger = get_logger("exports")

_resolver = TargetResolver()


def exports(
    name: str, target: Any, source: Any = None
) -> list[BindingHandle]:
    """
    Install an existing function as method ``name`` of ``target``.

    ``source`` is the function itself, or a module / namespace / mapping
    holding a callable called ``name``. Without it the function is looked
    up in the calling module. The function receives the object as its
    first argument.

    Example:
        def shout(self, text):
            return text.upper()

        exports("shout", "myapp.models.Post")
    """
    if source is None:
        source = sys._getframe(1).f_globals
    handles = _resolver.resolve_many(target, name)
    function = _find_function(name, source)
    if function is None:
        raise NoSuchMethodError(
            handles[0],
            f"{_describe_source(source)} has no callable named {name!r}",
        )

    registry = get_registry()
    for handle in handles:
        registry.install(
            handle, ModifierEntry(ModifierKind.NEW, function)
        )
        logger.function_exported(name, handle)
    return handles


def _find_function(
    name: str, source: Any
) -> Optional[Callable[..., Any]]:
    if callable(source) and not isinstance(
        source, (type, types.ModuleType)
    ):
        return source

    if isinstance(source, Mapping):
        candidate = source.get(name)
    else:
        candidate = getattr(source, name, None)

    return candidate if callable(candidate) else None


def _describe_source(source: Any) -> str:
    if isinstance(source, Mapping) and "__name__" in source:
        return f"module {source['__name__']!r}"
    return repr(source)

from __future__ import annotations

from typing import Any, Optional, Union

from classmonkey.exceptions import ImmutableAccessorError
from classmonkey.logging import get_logger
from classmonkey.registry import get_registry
from classmonkey.resolution import TargetResolver
from classmonkey.types import (
    ModifierEntry,
    ModifierKind,
    Mutability,
)

logger = get_logger("accessors")

_resolver = TargetResolver()


class Accessor:
    """
    Getter/setter method body.

    Values live in each receiver's ``__dict__`` under a private key and
    fall back to ``default``.
    """

    def __init__(
        self,
        name: str,
        mutability: Mutability,
        default: Any = None,
    ) -> None:
        self.name: str = name
        self.mutability: Mutability = mutability
        self.default: Any = default
        self.storage_key: str = (
            f"_classmonkey_accessor_{name}"
        )

    @property
    def writable(self) -> bool:
        return self.mutability == Mutability.READ_WRITE

    def __call__(self, receiver: Any, *args: Any) -> Any:
        if not args:
            return self.get(receiver)
        if len(args) > 1:
            raise TypeError(
                f"{self.name}() takes at most 1 argument "
                f"({len(args)} given)"
            )
        return self.set(receiver, args[0])

    def get(self, receiver: Any) -> Any:
        storage = getattr(receiver, "__dict__", {})
        return storage.get(self.storage_key, self.default)

    def set(self, receiver: Any, value: Any) -> Any:
        if not self.writable:
            raise ImmutableAccessorError(self.name, receiver)
        vars(receiver)[self.storage_key] = value
        return value

    def __repr__(self) -> str:
        return (
            f"Accessor({self.name!r}, "
            f"{self.mutability.value}, default={self.default!r})"
        )


def has(
    qualified_name: str,
    is_: Union[Mutability, str] = Mutability.READ_ONLY,
    default: Any = None,
    target: Optional[Any] = None,
) -> Accessor:
    """
    Add an accessor method to a class.

    ``qualified_name`` is ``"package.module.Class.attribute"``; pass
    ``target`` to give the class (or object) directly and use a bare
    attribute name.

    Example:
        has("myapp.models.Post.title", is_="ro", default="untitled")
        Post().title()  # 'untitled'
    """
    mutability = Mutability(is_)

    if target is None:
        class_path, _, name = qualified_name.rpartition(".")
        if not class_path:
            raise ValueError(
                f"Expected 'module.Class.attribute', got {qualified_name!r}"
            )
        target = class_path
    else:
        name = qualified_name

    accessor = Accessor(name, mutability, default)
    registry = get_registry()
    for handle in _resolver.resolve_many(target, name):
        registry.install(
            handle, ModifierEntry(ModifierKind.NEW, accessor)
        )
        logger.accessor_defined(
            handle.describe(), mutability.value
        )
    return accessor

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol

from classmonkey.types import Implementation, ModifierKind


class Modifier(Protocol):

    kind: ModifierKind

    def wrap(
        self,
        inner: Optional[Implementation],
        body: Callable[..., Any],
    ) -> Implementation: ...


class BaseModifier:

    kind: ModifierKind

    @property
    def needs_inner(self) -> bool:
        return not self.kind.replaces_implementation

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

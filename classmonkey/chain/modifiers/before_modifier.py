from __future__ import annotations

from typing import Any, Callable

from classmonkey.types import Implementation, ModifierKind

from .base_modifier import BaseModifier


class BeforeStage:
    """Runs a run of ``before`` bodies, oldest first, then ``inner``."""

    __slots__ = ("bodies", "inner")

    def __init__(
        self,
        bodies: tuple[Callable[..., Any], ...],
        inner: Implementation,
    ) -> None:
        self.bodies = bodies
        self.inner = inner

    def __call__(self, receiver, *args, **kwargs):
        for body in self.bodies:
            body(receiver, *args, **kwargs)
        return self.inner(receiver, *args, **kwargs)


class BeforeModifier(BaseModifier):

    kind = ModifierKind.BEFORE

    def wrap(
        self,
        inner: Implementation,
        body: Callable[..., Any],
    ) -> Implementation:
        if isinstance(inner, BeforeStage):
            return BeforeStage(
                inner.bodies + (body,), inner.inner
            )
        return BeforeStage((body,), inner)

from __future__ import annotations

from typing import Any, Callable

from classmonkey.types import Implementation, ModifierKind

from .base_modifier import BaseModifier


class AroundModifier(BaseModifier):
    """
    ``body(inner, receiver, *args, **kwargs)``; ``inner`` takes the
    receiver as its first argument, like an unbound method.
    """

    kind = ModifierKind.AROUND

    def wrap(
        self,
        inner: Implementation,
        body: Callable[..., Any],
    ) -> Implementation:
        def run_around(receiver, *args, **kwargs):
            return body(inner, receiver, *args, **kwargs)

        return run_around

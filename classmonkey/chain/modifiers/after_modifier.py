from __future__ import annotations

from typing import Any, Callable

from classmonkey.types import Implementation, ModifierKind

from .base_modifier import BaseModifier


class AfterModifier(BaseModifier):

    kind = ModifierKind.AFTER

    def wrap(
        self,
        inner: Implementation,
        body: Callable[..., Any],
    ) -> Implementation:
        def run_after(receiver, *args, **kwargs):
            result = inner(receiver, *args, **kwargs)
            body(receiver, *args, **kwargs)
            return result

        return run_after

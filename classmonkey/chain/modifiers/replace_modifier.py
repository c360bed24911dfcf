from __future__ import annotations

from typing import Any, Callable, Optional

from classmonkey.types import Implementation, ModifierKind

from .base_modifier import BaseModifier


class ReplaceModifier(BaseModifier):
    """Discards whatever was folded so far and uses ``body`` instead."""

    def wrap(
        self,
        inner: Optional[Implementation],
        body: Callable[..., Any],
    ) -> Implementation:
        return body


class OverrideModifier(ReplaceModifier):

    kind = ModifierKind.OVERRIDE


class NewMethodModifier(ReplaceModifier):

    kind = ModifierKind.NEW


class InstanceReplaceModifier(ReplaceModifier):

    kind = ModifierKind.INSTANCE_REPLACE

from __future__ import annotations

from typing import Dict, Type

from classmonkey.types import ModifierKind

from .after_modifier import AfterModifier
from .around_modifier import AroundModifier
from .base_modifier import BaseModifier, Modifier
from .before_modifier import BeforeModifier, BeforeStage
from .replace_modifier import (
    InstanceReplaceModifier,
    NewMethodModifier,
    OverrideModifier,
    ReplaceModifier,
)

MODIFIER_REGISTRY: Dict[ModifierKind, Type[Modifier]] = {
    ModifierKind.BEFORE: BeforeModifier,
    ModifierKind.AFTER: AfterModifier,
    ModifierKind.AROUND: AroundModifier,
    ModifierKind.OVERRIDE: OverrideModifier,
    ModifierKind.NEW: NewMethodModifier,
    ModifierKind.INSTANCE_REPLACE: InstanceReplaceModifier,
}


def get_modifier(kind: ModifierKind) -> Modifier:
    modifier_class: Type[Modifier] | None = (
        MODIFIER_REGISTRY.get(kind)
    )
    if modifier_class is None:
        raise ValueError(f"Unknown modifier kind: {kind}")
    return modifier_class()


__all__: list[str] = [
    "Modifier",
    "BaseModifier",
    "MODIFIER_REGISTRY",
    "get_modifier",
    "BeforeModifier",
    "BeforeStage",
    "AfterModifier",
    "AroundModifier",
    "ReplaceModifier",
    "OverrideModifier",
    "NewMethodModifier",
    "InstanceReplaceModifier",
]

from .modifier_chain import ModifierChain
from .modifiers import (
    MODIFIER_REGISTRY,
    AfterModifier,
    AroundModifier,
    BaseModifier,
    BeforeModifier,
    InstanceReplaceModifier,
    Modifier,
    NewMethodModifier,
    OverrideModifier,
    get_modifier,
)

__all__ = [
    "ModifierChain",
    "Modifier",
    "BaseModifier",
    "MODIFIER_REGISTRY",
    "get_modifier",
    "BeforeModifier",
    "AfterModifier",
    "AroundModifier",
    "OverrideModifier",
    "NewMethodModifier",
    "InstanceReplaceModifier",
]

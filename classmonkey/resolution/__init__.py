from .class_loader import (
    ClassLoader,
    canpatch,
    get_class_loader,
    load_class,
)
from .target_resolver import TargetResolver

__all__ = [
    "TargetResolver",
    "ClassLoader",
    "get_class_loader",
    "load_class",
    "canpatch",
]

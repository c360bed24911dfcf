from .accessor_generator import Accessor, has
from .export_injector import exports
from .patch_functions import (
    after,
    around,
    before,
    instance,
    is_patched,
    method,
    original,
    override,
    patched_bindings,
    unpatch,
)

__all__: list[str] = [
    "before",
    "after",
    "around",
    "override",
    "method",
    "instance",
    "unpatch",
    "original",
    "is_patched",
    "patched_bindings",
    "has",
    "Accessor",
    "exports",
]

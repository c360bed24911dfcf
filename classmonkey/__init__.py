"""
classmonkey - Patch classes and objects you do not own

Stack behavior onto existing methods, call through to the original,
and put everything back when you are done.

Quick Start:

    from classmonkey import around, before, original, unpatch

    def no_args_guard(orig, self, *args):
        if not args:
            return "No arguments!"
        return orig(self, *args)

    around("greet", no_args_guard, Greeter)
    before("greet", lambda self, *a: audit.append(a), Greeter)

    Greeter().greet()                  # 'No arguments!'
    original(Greeter(), "greet", "x")  # bypasses both modifiers

    unpatch("greet", Greeter)          # back to the untouched method

Targets:

    Greeter                    # the class: every instance, every subclass
    "myapp.models.Greeter"     # same, imported on demand
    greeter                    # this one object only
    [Greeter, "other.Class"]   # each target independently

CLI:

    classmonkey check ./patches.py   # import a patch script, list what it patched
    classmonkey info                 # version and supported modifiers
"""

__version__ = "0.3.0"

from .dsl import (
    Accessor,
    after,
    around,
    before,
    exports,
    has,
    instance,
    is_patched,
    method,
    original,
    override,
    patched_bindings,
    unpatch,
)
from .exceptions import (
    AmbiguousTargetError,
    ConcurrentPatchError,
    DuplicateMethodError,
    ImmutableAccessorError,
    MonkeyError,
    NoSuchMethodError,
    NotPatchedError,
)
from .logging import (
    MonkeyLogger,
    get_logger,
    setup_logging,
)
from .registry import (
    PatchRegistry,
    configure,
    get_registry,
    reset_registry,
)
from .resolution import (
    TargetResolver,
    canpatch,
    load_class,
)
from .types import (
    ActiveBinding,
    BindingHandle,
    ConflictPolicy,
    ModifierEntry,
    ModifierKind,
    MonkeyConfig,
    Mutability,
    OriginalRecord,
    SlotKind,
    TargetKind,
)

__all__ = [
    # Version
    "__version__",
    # DSL
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
    "canpatch",
    "load_class",
    # Core
    "PatchRegistry",
    "TargetResolver",
    "get_registry",
    "reset_registry",
    "configure",
    # Types
    "BindingHandle",
    "TargetKind",
    "ModifierKind",
    "ModifierEntry",
    "OriginalRecord",
    "ActiveBinding",
    "SlotKind",
    "Mutability",
    "ConflictPolicy",
    "MonkeyConfig",
    # Exceptions
    "MonkeyError",
    "NoSuchMethodError",
    "DuplicateMethodError",
    "AmbiguousTargetError",
    "NotPatchedError",
    "ImmutableAccessorError",
    "ConcurrentPatchError",
    # Logging
    "setup_logging",
    "get_logger",
    "MonkeyLogger",
]

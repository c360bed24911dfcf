"""
classmonkey - Core Types

Design Philosophy:
- A patch is addressed by a binding handle: one method on one target
- The target is either a class (every instance) or a single live object
- The pristine implementation is captured once, as a value
- Everything that is actually bound into a method table is derived from
  (original implementation, modifier chain)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

# =============================================================================
# ENUMS
# =============================================================================


class TargetKind(str, Enum):
    """Whether a patch applies to a whole class or to one object."""

    CLASS = "class"
    INSTANCE = "instance"


class ModifierKind(str, Enum):
    """
    Kinds of behavioral modification that can be stacked on a method.

    The value is the DSL keyword that installs the modifier.
    """

    BEFORE = "before"
    AFTER = "after"
    AROUND = "around"
    OVERRIDE = "override"
    NEW = "method"
    INSTANCE_REPLACE = "instance"

    @property
    def replaces_implementation(self) -> bool:
        return self in (
            ModifierKind.OVERRIDE,
            ModifierKind.NEW,
            ModifierKind.INSTANCE_REPLACE,
        )


class Mutability(str, Enum):
    """Accessor mutability."""

    READ_ONLY = "ro"
    READ_WRITE = "rw"


class SlotKind(str, Enum):
    """
    Shape of the value held in a method table slot.

    The installed wrapper is re-wrapped in the same descriptor so that
    ``C.m()`` and ``obj.m()`` keep resolving the way they did before.
    """

    FUNCTION = "function"
    CLASSMETHOD = "classmethod"
    STATICMETHOD = "staticmethod"
    CALLABLE = "callable"


class ConflictPolicy(str, Enum):
    """What a second mutation of a busy handle does."""

    FAIL_FAST = "fail_fast"
    WAIT = "wait"


# =============================================================================
# BINDING HANDLE
# =============================================================================

Implementation = Callable[..., Any]


@dataclass(frozen=True, eq=False)
class BindingHandle:
    """
    Identity of "this method, on this target".

    Two handles are equal when they have the same kind, the very same
    target object (class or instance) and the same method name. Hashing
    goes through ``id()`` so unhashable objects can still be targets.
    """

    target_kind: TargetKind
    target_ref: Any
    method_name: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BindingHandle):
            return NotImplemented
        return (
            self.target_kind == other.target_kind
            and self.target_ref is other.target_ref
            and self.method_name == other.method_name
        )

    def __hash__(self) -> int:
        return hash(
            (
                self.target_kind,
                id(self.target_ref),
                self.method_name,
            )
        )

    @property
    def is_instance(self) -> bool:
        return self.target_kind == TargetKind.INSTANCE

    @property
    def owner_class(self) -> type:
        if self.is_instance:
            return type(self.target_ref)
        return self.target_ref

    def describe(self) -> str:
        if self.is_instance:
            cls = type(self.target_ref)
            target = (
                f"<{cls.__qualname__} object at "
                f"{id(self.target_ref):#x}>"
            )
        else:
            target = (
                f"{self.target_ref.__module__}."
                f"{self.target_ref.__qualname__}"
            )
        return f"{target}.{self.method_name}"

    def __repr__(self) -> str:
        return (
            f"BindingHandle({self.target_kind.value}, "
            f"{self.describe()})"
        )


# =============================================================================
# REGISTRY RECORDS
# =============================================================================


@dataclass(frozen=True)
class OriginalRecord:
    """
    The implementation a handle had before its first patch.

    ``implementation`` always takes ``(receiver, *args, **kwargs)``; it is
    ``None`` when the method did not exist (a ``method`` patch).
    ``owned_slot`` tells whether the handle's own method table held the
    value, as opposed to it being inherited from a class.
    """

    handle: BindingHandle
    implementation: Optional[Implementation]
    raw: Any = None
    slot_kind: SlotKind = SlotKind.FUNCTION
    owned_slot: bool = True

    @property
    def exists(self) -> bool:
        return self.implementation is not None


@dataclass(frozen=True)
class ModifierEntry:
    """One behavioral modification of a method."""

    kind: ModifierKind
    body: Callable[..., Any]


@dataclass
class ActiveBinding:
    """Registry entry for a patched handle."""

    handle: BindingHandle
    original: OriginalRecord
    chain: tuple[ModifierEntry, ...] = ()
    installed_wrapper: Any = None

    @property
    def kinds(self) -> list[ModifierKind]:
        return [entry.kind for entry in self.chain]

    @property
    def has_implementation(self) -> bool:
        return self.original.exists or any(
            entry.kind.replaces_implementation
            for entry in self.chain
        )


# =============================================================================
# CONFIGURATION
# =============================================================================


@dataclass
class MonkeyConfig:
    """Configuration for the patch registry."""

    conflict_policy: ConflictPolicy = (
        ConflictPolicy.FAIL_FAST
    )

    # Only consulted with ConflictPolicy.WAIT; None waits forever
    lock_timeout_s: Optional[float] = None

    log_level: str = "WARNING"

    def __post_init__(self):
        if not isinstance(
            self.conflict_policy, ConflictPolicy
        ):
            self.conflict_policy = ConflictPolicy(
                self.conflict_policy
            )
        if (
            self.lock_timeout_s is not None
            and self.lock_timeout_s < 0
        ):
            raise ValueError(
                "lock_timeout_s must be >= 0 or None"
            )

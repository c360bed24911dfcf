from __future__ import annotations

from typing import Any, Callable

from classmonkey.exceptions import NotPatchedError
from classmonkey.registry import get_registry
from classmonkey.resolution import TargetResolver
from classmonkey.types import (
    ActiveBinding,
    BindingHandle,
    ModifierEntry,
    ModifierKind,
    SlotKind,
    TargetKind,
)

_resolver = TargetResolver()


def _install(
    kind: ModifierKind,
    method_name: str,
    body: Callable[..., Any],
    target: Any,
) -> list[BindingHandle]:
    registry = get_registry()
    handles = _resolver.resolve_many(target, method_name)
    for handle in handles:
        registry.install(handle, ModifierEntry(kind, body))
    return handles


def before(
    method_name: str, body: Callable[..., Any], target: Any
) -> list[BindingHandle]:
    """Run ``body(self, *args, **kwargs)`` before the method."""
    return _install(
        ModifierKind.BEFORE, method_name, body, target
    )


def after(
    method_name: str, body: Callable[..., Any], target: Any
) -> list[BindingHandle]:
    """Run ``body(self, *args, **kwargs)`` after the method returns."""
    return _install(
        ModifierKind.AFTER, method_name, body, target
    )


def around(
    method_name: str, body: Callable[..., Any], target: Any
) -> list[BindingHandle]:
    """
    Call ``body(orig, self, *args, **kwargs)`` instead of the method.

    ``orig`` is the implementation being wrapped; call it as
    ``orig(self, *args)``.
    """
    return _install(
        ModifierKind.AROUND, method_name, body, target
    )


def override(
    method_name: str, body: Callable[..., Any], target: Any
) -> list[BindingHandle]:
    """Replace an existing method."""
    return _install(
        ModifierKind.OVERRIDE, method_name, body, target
    )


def method(
    method_name: str, body: Callable[..., Any], target: Any
) -> list[BindingHandle]:
    """Add a method that does not exist yet."""
    return _install(
        ModifierKind.NEW, method_name, body, target
    )


def instance(
    method_name: str, body: Callable[..., Any], obj: Any
) -> list[BindingHandle]:
    """Replace a method on one object only."""
    return _install(
        ModifierKind.INSTANCE_REPLACE, method_name, body, obj
    )


def unpatch(method_name: str, target: Any) -> None:
    """
    Restore the original method, dropping every stacked modifier.

    With several targets nothing is restored unless all of them are
    patched.
    """
    registry = get_registry()
    handles = _resolver.resolve_many(target, method_name)
    for handle in handles:
        if not registry.is_patched(handle):
            raise NotPatchedError(handle)
    for handle in handles:
        registry.uninstall(handle)


def is_patched(method_name: str, target: Any) -> bool:
    handle = _resolver.resolve(target, method_name)
    return get_registry().is_patched(handle)


def patched_bindings() -> list[ActiveBinding]:
    return get_registry().bindings()


def original(
    target: Any, method_name: str, *args: Any, **kwargs: Any
) -> Any:
    """
    Call the implementation ``method_name`` had before it was patched.

    With an object, the object is the receiver. With a class, the
    receiver is the class for classmethods, nothing for staticmethods,
    and the first positional argument otherwise.
    """
    registry = get_registry()
    handle = _resolver.resolve(target, method_name)
    binding = registry.find_binding_for(
        handle.target_ref, method_name
    )
    if binding is None:
        raise NotPatchedError(handle)

    if handle.target_kind == TargetKind.INSTANCE:
        receiver = handle.target_ref
    else:
        receiver, args = _class_receiver(
            binding, handle.target_ref, args
        )

    return registry.call_original(
        binding.handle, receiver, *args, **kwargs
    )


def _class_receiver(
    binding: ActiveBinding, cls: type, args: tuple
) -> tuple[Any, tuple]:
    slot_kind = binding.original.slot_kind
    if slot_kind == SlotKind.CLASSMETHOD:
        return cls, args
    if slot_kind == SlotKind.STATICMETHOD:
        return None, args
    if not args:
        raise TypeError(
            f"original({cls.__qualname__}, "
            f"{binding.handle.method_name!r}) needs the "
            "receiver as its first argument"
        )
    return args[0], args[1:]

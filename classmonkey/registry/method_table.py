from __future__ import annotations

import types
from typing import Any, Callable

from classmonkey.exceptions import NoSuchMethodError
from classmonkey.types import (
    BindingHandle,
    Implementation,
    OriginalRecord,
    SlotKind,
)

_MISSING = object()


class MethodTable:
    """
    Reads and writes a single method slot.

    Class handles live in the class ``__dict__``; instance handles live in
    the object's own ``__dict__``, which Python consults before the class
    for plain methods.
    """

    def find(self, handle: BindingHandle) -> Any:
        """Return the raw value a lookup would reach, or ``_MISSING``."""
        if handle.is_instance:
            own = vars(handle.target_ref)
            if handle.method_name in own:
                return own[handle.method_name]
        return _lookup_mro(
            handle.owner_class, handle.method_name
        )

    def occupied(self, handle: BindingHandle) -> bool:
        return self.find(handle) is not _MISSING

    def owns_slot(self, handle: BindingHandle) -> bool:
        return handle.method_name in vars(
            handle.target_ref
        )

    def capture(
        self, handle: BindingHandle
    ) -> OriginalRecord:
        raw = self.find(handle)
        if raw is _MISSING:
            raise NoSuchMethodError(handle)

        owned = self.owns_slot(handle)

        if handle.is_instance and owned:
            if not callable(raw):
                raise NoSuchMethodError(
                    handle, "attribute is not callable"
                )
            return OriginalRecord(
                handle=handle,
                implementation=_drop_receiver(raw),
                raw=raw,
                slot_kind=SlotKind.CALLABLE,
                owned_slot=True,
            )

        slot_kind, implementation = _unwrap_descriptor(
            handle, raw
        )
        if handle.is_instance:
            # Inherited instance slots follow the class slot as it is
            # at call time, patched or not.
            implementation = _class_slot_caller(handle)

        return OriginalRecord(
            handle=handle,
            implementation=implementation,
            raw=raw,
            slot_kind=slot_kind,
            owned_slot=owned,
        )

    def vacant(
        self, handle: BindingHandle
    ) -> OriginalRecord:
        return OriginalRecord(
            handle=handle,
            implementation=None,
            raw=None,
            slot_kind=SlotKind.FUNCTION,
            owned_slot=False,
        )

    def install(
        self,
        handle: BindingHandle,
        slot_kind: SlotKind,
        wrapper: Callable[..., Any],
    ) -> Any:
        """Bind ``wrapper`` into the slot; returns the stored value."""
        if handle.is_instance:
            bound = types.MethodType(
                wrapper, handle.target_ref
            )
            vars(handle.target_ref)[
                handle.method_name
            ] = bound
            return bound

        value = _rewrap_descriptor(slot_kind, wrapper)
        setattr(
            handle.target_ref, handle.method_name, value
        )
        return value

    def restore(
        self,
        handle: BindingHandle,
        original: OriginalRecord,
    ) -> None:
        if handle.is_instance:
            own = vars(handle.target_ref)
            if original.owned_slot:
                own[handle.method_name] = original.raw
            else:
                own.pop(handle.method_name, None)
            return

        if original.owned_slot:
            setattr(
                handle.target_ref,
                handle.method_name,
                original.raw,
            )
        elif handle.method_name in vars(
            handle.target_ref
        ):
            delattr(
                handle.target_ref, handle.method_name
            )


def _lookup_mro(cls: type, name: str) -> Any:
    for klass in cls.__mro__:
        namespace = vars(klass)
        if name in namespace:
            return namespace[name]
    return _MISSING


def _unwrap_descriptor(
    handle: BindingHandle, raw: Any
) -> tuple[SlotKind, Implementation]:
    if isinstance(raw, classmethod):
        func = raw.__func__

        def call_classmethod(receiver, *args, **kwargs):
            cls = (
                receiver
                if isinstance(receiver, type)
                else type(receiver)
            )
            return func(cls, *args, **kwargs)

        return SlotKind.CLASSMETHOD, call_classmethod

    if isinstance(raw, staticmethod):
        return SlotKind.STATICMETHOD, _drop_receiver(
            raw.__func__
        )

    if isinstance(raw, types.FunctionType):
        return SlotKind.FUNCTION, raw

    if callable(raw):
        if hasattr(type(raw), "__get__"):

            def call_bound(receiver, *args, **kwargs):
                return _bind(raw, receiver)(*args, **kwargs)

            return SlotKind.CALLABLE, call_bound
        return SlotKind.CALLABLE, _drop_receiver(raw)

    raise NoSuchMethodError(
        handle, "attribute is not callable"
    )


def _rewrap_descriptor(
    slot_kind: SlotKind, wrapper: Callable[..., Any]
) -> Any:
    if slot_kind == SlotKind.CLASSMETHOD:
        return classmethod(wrapper)

    if slot_kind == SlotKind.STATICMETHOD:

        def call_static(*args, **kwargs):
            return wrapper(None, *args, **kwargs)

        call_static.__wrapped__ = wrapper
        return staticmethod(call_static)

    return wrapper


def _drop_receiver(func: Callable[..., Any]) -> Implementation:
    def call_without_receiver(receiver, *args, **kwargs):
        return func(*args, **kwargs)

    return call_without_receiver


def _bind(raw: Any, receiver: Any) -> Callable[..., Any]:
    """What ``receiver.<name>`` gives for a class slot holding ``raw``."""
    if hasattr(type(raw), "__get__"):
        return raw.__get__(receiver, type(receiver))
    return raw


def _class_slot_caller(handle: BindingHandle) -> Implementation:
    cls = handle.owner_class
    name = handle.method_name

    def call_class_slot(receiver, *args, **kwargs):
        raw = _lookup_mro(cls, name)
        if raw is _MISSING:
            raise AttributeError(
                f"{cls.__qualname__!r} object has no "
                f"attribute {name!r}"
            )
        return _bind(raw, receiver)(*args, **kwargs)

    return call_class_slot

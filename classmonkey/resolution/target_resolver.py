from __future__ import annotations

import types
from typing import Any, Iterable, Optional

from classmonkey.exceptions import AmbiguousTargetError
from classmonkey.types import BindingHandle, TargetKind

from .class_loader import ClassLoader, get_class_loader

_NON_TARGET_TYPES = (
    types.ModuleType,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
)

_PLURAL_TYPES = (list, tuple, set, frozenset)


class TargetResolver:
    """
    Turns a target reference into a binding handle.

    - a class, or a string naming one, gives a CLASS handle
    - any other object with its own ``__dict__`` gives an INSTANCE handle
    """

    def __init__(
        self, class_loader: Optional[ClassLoader] = None
    ) -> None:
        self._class_loader: ClassLoader = (
            class_loader or get_class_loader()
        )

    def resolve(
        self, ref: Any, method_name: str
    ) -> BindingHandle:
        _check_method_name(method_name)

        if isinstance(ref, type):
            return BindingHandle(
                TargetKind.CLASS, ref, method_name
            )

        if isinstance(ref, str):
            return BindingHandle(
                TargetKind.CLASS,
                self._class_loader.load(ref),
                method_name,
            )

        self._check_live_object(ref)
        return BindingHandle(
            TargetKind.INSTANCE, ref, method_name
        )

    def resolve_many(
        self, refs: Any, method_name: str
    ) -> list[BindingHandle]:
        if not isinstance(refs, _PLURAL_TYPES):
            return [self.resolve(refs, method_name)]

        if not refs:
            raise AmbiguousTargetError(
                refs, "empty target list"
            )

        handles: list[BindingHandle] = []
        for ref in _iter_targets(refs):
            handle = self.resolve(ref, method_name)
            if handle not in handles:
                handles.append(handle)
        return handles

    @staticmethod
    def _check_live_object(ref: Any) -> None:
        if ref is None:
            raise AmbiguousTargetError(
                ref, "None is not a class or an object"
            )

        if isinstance(ref, _NON_TARGET_TYPES):
            raise AmbiguousTargetError(
                ref,
                f"a {type(ref).__name__} is neither a class "
                "nor an instance",
            )

        if isinstance(ref, _PLURAL_TYPES):
            raise AmbiguousTargetError(
                ref, "expected a single target"
            )

        try:
            vars(ref)
        except TypeError:
            raise AmbiguousTargetError(
                ref,
                "object has no per-instance method table "
                "(no __dict__)",
            ) from None


def _iter_targets(refs: Iterable[Any]) -> Iterable[Any]:
    for ref in refs:
        if isinstance(ref, _PLURAL_TYPES):
            raise AmbiguousTargetError(
                refs, "nested target lists are not supported"
            )
        yield ref


def _check_method_name(method_name: Any) -> None:
    if (
        not isinstance(method_name, str)
        or not method_name.isidentifier()
    ):
        raise ValueError(
            f"Invalid method name: {method_name!r}"
        )

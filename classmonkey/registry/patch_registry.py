from __future__ import annotations

import threading
from typing import Any, Optional

from classmonkey.chain import ModifierChain
from classmonkey.exceptions import (
    AmbiguousTargetError,
    DuplicateMethodError,
    NoSuchMethodError,
    NotPatchedError,
)
from classmonkey.logging import get_logger
from classmonkey.types import (
    ActiveBinding,
    BindingHandle,
    ModifierEntry,
    ModifierKind,
    MonkeyConfig,
    OriginalRecord,
    TargetKind,
)

from .handle_locks import HandleLockTable
from .method_table import MethodTable
from .original_store import OriginalStore

logger = get_logger("registry")


class PatchRegistry:
    """
    Owns every active patch in the process.

    Each handle maps to one ActiveBinding; the wrapper bound into the
    live method table is recomputed from the binding's original and chain
    on every install. Unpatching is all-or-nothing per handle.
    """

    def __init__(
        self, config: Optional[MonkeyConfig] = None
    ) -> None:
        self._config: MonkeyConfig = config or MonkeyConfig()
        self._bindings: dict[BindingHandle, ActiveBinding] = {}
        self._originals: OriginalStore = OriginalStore()
        self._table: MethodTable = MethodTable()
        self._chain: ModifierChain = ModifierChain()
        self._locks: HandleLockTable = HandleLockTable(
            self._config
        )
        self._state_lock = threading.RLock()

    @property
    def config(self) -> MonkeyConfig:
        return self._config

    @property
    def originals(self) -> OriginalStore:
        return self._originals

    @property
    def method_table(self) -> MethodTable:
        return self._table

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def install(
        self, handle: BindingHandle, entry: ModifierEntry
    ) -> ActiveBinding:
        with self._locks.transaction(handle):
            current = self.lookup(handle)
            self._validate(handle, entry, current)

            if current is None:
                original = self._capture(handle, entry)
                chain: tuple[ModifierEntry, ...] = (entry,)
            else:
                original = current.original
                chain = current.chain + (entry,)

            wrapper = self._chain.compose(original, chain)
            installed = self._table.install(
                handle, original.slot_kind, wrapper
            )

            binding = ActiveBinding(
                handle=handle,
                original=original,
                chain=chain,
                installed_wrapper=installed,
            )
            with self._state_lock:
                self._originals.record(original)
                self._bindings[handle] = binding

        logger.patch_installed(
            handle, entry.kind, len(chain)
        )
        return binding

    def uninstall(self, handle: BindingHandle) -> None:
        with self._locks.transaction(handle):
            binding = self.lookup(handle)
            if binding is None:
                raise NotPatchedError(handle)

            self._table.restore(handle, binding.original)

            with self._state_lock:
                del self._bindings[handle]
                self._originals.discard(handle)

        logger.patch_removed(handle, binding.kinds)

    def lookup(
        self, handle: BindingHandle
    ) -> Optional[ActiveBinding]:
        with self._state_lock:
            return self._bindings.get(handle)

    def call_original(
        self,
        handle: BindingHandle,
        receiver: Any,
        *args: Any,
        **kwargs: Any,
    ) -> Any:
        binding = self.lookup(handle)
        if binding is None:
            raise NotPatchedError(handle)

        original = self._pristine(binding)
        if not original.exists:
            raise NoSuchMethodError(
                handle,
                "method was added by a patch and has no original",
            )

        logger.original_called(handle)
        return original.implementation(
            receiver, *args, **kwargs
        )

    # =========================================================================
    # QUERIES
    # =========================================================================

    def is_patched(self, handle: BindingHandle) -> bool:
        return self.lookup(handle) is not None

    def bindings(self) -> list[ActiveBinding]:
        with self._state_lock:
            return list(self._bindings.values())

    def find_binding_for(
        self, receiver: Any, method_name: str
    ) -> Optional[ActiveBinding]:
        """
        The binding an ordinary ``receiver.method_name`` call goes
        through, if it is patched at all.
        """
        if isinstance(receiver, type):
            classes = receiver.__mro__
        else:
            per_object = self.lookup(
                BindingHandle(
                    TargetKind.INSTANCE,
                    receiver,
                    method_name,
                )
            )
            if per_object is not None:
                return per_object
            classes = type(receiver).__mro__

        for klass in classes:
            binding = self.lookup(
                BindingHandle(
                    TargetKind.CLASS, klass, method_name
                )
            )
            if binding is not None:
                return binding
            if method_name in vars(klass):
                return None
        return None

    def clear(self) -> None:
        """Unpatch every handle, newest binding first."""
        for binding in reversed(self.bindings()):
            if self.is_patched(binding.handle):
                self.uninstall(binding.handle)

    def __len__(self) -> int:
        with self._state_lock:
            return len(self._bindings)

    def __contains__(self, handle: object) -> bool:
        with self._state_lock:
            return handle in self._bindings

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _validate(
        self,
        handle: BindingHandle,
        entry: ModifierEntry,
        current: Optional[ActiveBinding],
    ) -> None:
        if (
            entry.kind == ModifierKind.INSTANCE_REPLACE
            and not handle.is_instance
        ):
            raise AmbiguousTargetError(
                handle.target_ref,
                "instance replacement needs a live object, not a class",
            )

        if entry.kind == ModifierKind.NEW:
            if current is not None:
                if current.has_implementation:
                    raise DuplicateMethodError(handle)
            elif self._table.occupied(handle):
                raise DuplicateMethodError(handle)

        if not callable(entry.body):
            raise TypeError(
                f"{entry.kind.value} body for {handle.describe()} "
                f"must be callable, got {type(entry.body).__name__}"
            )

    def _pristine(
        self, binding: ActiveBinding
    ) -> OriginalRecord:
        """
        The record call-through uses. An instance that inherits its
        method defers to the class binding's original when the class is
        patched too.
        """
        original = binding.original
        handle = binding.handle
        if not handle.is_instance or original.owned_slot:
            return original

        class_binding = self.find_binding_for(
            handle.owner_class, handle.method_name
        )
        if class_binding is None:
            return original
        return class_binding.original

    def _capture(
        self, handle: BindingHandle, entry: ModifierEntry
    ) -> OriginalRecord:
        if entry.kind == ModifierKind.NEW:
            return self._table.vacant(handle)
        return self._table.capture(handle)

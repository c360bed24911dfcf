from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from classmonkey.types import BindingHandle


class MonkeyError(Exception):

    def __init__(
        self,
        message: str,
        handle: Optional[BindingHandle] = None,
    ) -> None:
        self.handle: Optional[BindingHandle] = handle
        super().__init__(message)


class NoSuchMethodError(MonkeyError):

    def __init__(
        self,
        handle: BindingHandle,
        reason: str = "method does not exist on target",
    ) -> None:
        super().__init__(
            f"Cannot patch {handle.describe()}: {reason}",
            handle,
        )


class DuplicateMethodError(MonkeyError):

    def __init__(self, handle: BindingHandle) -> None:
        super().__init__(
            f"Cannot add method {handle.describe()}: "
            "an implementation already exists",
            handle,
        )


class AmbiguousTargetError(MonkeyError):

    def __init__(self, target: Any, reason: str) -> None:
        self.target: Any = target
        super().__init__(
            f"Cannot resolve patch target {target!r}: {reason}"
        )


class NotPatchedError(MonkeyError):

    def __init__(self, handle: BindingHandle) -> None:
        super().__init__(
            f"{handle.describe()} is not patched", handle
        )


class ImmutableAccessorError(MonkeyError):

    def __init__(
        self, accessor_name: str, receiver: Any = None
    ) -> None:
        self.accessor_name: str = accessor_name
        self.receiver: Any = receiver
        super().__init__(
            f"Accessor {accessor_name!r} is read-only"
        )


class ConcurrentPatchError(MonkeyError):

    def __init__(self, handle: BindingHandle) -> None:
        super().__init__(
            f"Another patch transaction is in progress "
            f"for {handle.describe()}",
            handle,
        )

from __future__ import annotations

from typing import Iterator, Optional

from classmonkey.types import BindingHandle, OriginalRecord


class OriginalStore:
    """
    Pristine implementations keyed by binding handle.

    A record is written once, on the first patch of its handle, and
    stays untouched until the handle is fully unpatched.
    """

    def __init__(self) -> None:
        self._records: dict[BindingHandle, OriginalRecord] = {}

    def record(self, original: OriginalRecord) -> OriginalRecord:
        existing = self._records.get(original.handle)
        if existing is not None:
            return existing
        self._records[original.handle] = original
        return original

    def get(
        self, handle: BindingHandle
    ) -> Optional[OriginalRecord]:
        return self._records.get(handle)

    def discard(
        self, handle: BindingHandle
    ) -> Optional[OriginalRecord]:
        return self._records.pop(handle, None)

    def clear(self) -> None:
        self._records.clear()

    def __contains__(self, handle: object) -> bool:
        return handle in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[OriginalRecord]:
        return iter(list(self._records.values()))

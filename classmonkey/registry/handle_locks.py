from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator

from classmonkey.exceptions import ConcurrentPatchError
from classmonkey.logging import get_logger
from classmonkey.types import (
    BindingHandle,
    ConflictPolicy,
    MonkeyConfig,
)

logger = get_logger("locks")


@dataclass
class _HandleLock:
    lock: threading.Lock = field(
        default_factory=threading.Lock
    )
    users: int = 0


class HandleLockTable:
    """
    One transaction lock per binding handle.

    Entries are dropped as soon as nobody holds or waits on them, so
    instance targets are not kept alive by the table.
    """

    def __init__(self, config: MonkeyConfig) -> None:
        self._config: MonkeyConfig = config
        self._table_lock = threading.Lock()
        self._locks: dict[BindingHandle, _HandleLock] = {}

    def is_busy(self, handle: BindingHandle) -> bool:
        with self._table_lock:
            entry = self._locks.get(handle)
            return entry is not None and entry.lock.locked()

    @contextmanager
    def transaction(
        self, handle: BindingHandle
    ) -> Iterator[None]:
        entry = self._checkout(handle)
        try:
            acquired = self._acquire(entry)
            if not acquired:
                logger.warning(
                    f"Concurrent patch of {handle.describe()} rejected"
                )
                raise ConcurrentPatchError(handle)
            try:
                yield
            finally:
                entry.lock.release()
        finally:
            self._checkin(handle, entry)

    def _acquire(self, entry: _HandleLock) -> bool:
        if (
            self._config.conflict_policy
            == ConflictPolicy.FAIL_FAST
        ):
            return entry.lock.acquire(blocking=False)

        timeout = self._config.lock_timeout_s
        if timeout is None:
            return entry.lock.acquire()
        return entry.lock.acquire(timeout=timeout)

    def _checkout(
        self, handle: BindingHandle
    ) -> _HandleLock:
        with self._table_lock:
            entry = self._locks.get(handle)
            if entry is None:
                entry = _HandleLock()
                self._locks[handle] = entry
            entry.users += 1
            return entry

    def _checkin(
        self, handle: BindingHandle, entry: _HandleLock
    ) -> None:
        with self._table_lock:
            entry.users -= 1
            if entry.users == 0:
                self._locks.pop(handle, None)

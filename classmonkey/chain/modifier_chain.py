from __future__ import annotations

import functools
from typing import Iterable, Optional

from classmonkey.exceptions import NoSuchMethodError
from classmonkey.types import (
    Implementation,
    ModifierEntry,
    OriginalRecord,
)

from .modifiers import get_modifier


class ModifierChain:
    """
    Folds a handle's modifiers over its original implementation.

    Entries are applied oldest first: index 0 is innermost. The result is
    always a plain function so it binds like any other method.
    """

    def effective(
        self,
        original: OriginalRecord,
        entries: Iterable[ModifierEntry],
    ) -> Optional[Implementation]:
        current: Optional[Implementation] = (
            original.implementation
        )

        for entry in entries:
            modifier = get_modifier(entry.kind)
            if current is None and modifier.needs_inner:
                raise NoSuchMethodError(
                    original.handle,
                    f"nothing to wrap with {entry.kind.value!r}",
                )
            current = modifier.wrap(current, entry.body)

        return current

    def compose(
        self,
        original: OriginalRecord,
        entries: Iterable[ModifierEntry],
    ) -> Implementation:
        effective = self.effective(original, entries)
        if effective is None:
            raise NoSuchMethodError(original.handle)

        def patched(receiver, *args, **kwargs):
            return effective(receiver, *args, **kwargs)

        _describe_wrapper(patched, original)
        return patched


def _describe_wrapper(
    patched: Implementation, original: OriginalRecord
) -> None:
    handle = original.handle
    source = getattr(original.raw, "__func__", original.raw)

    if original.exists and callable(source):
        functools.update_wrapper(patched, source)
    else:
        patched.__qualname__ = (
            f"{handle.owner_class.__qualname__}."
            f"{handle.method_name}"
        )
    patched.__name__ = handle.method_name

"""
Process-wide patch registry.

The registry is created lazily on first use and starts empty; it is never
persisted. ``reset_registry`` restores every patched method and drops the
instance, which is what test suites and shutdown hooks want.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import fields
from typing import Any, Optional

from classmonkey.types import MonkeyConfig

from .handle_locks import HandleLockTable
from .method_table import MethodTable
from .original_store import OriginalStore
from .patch_registry import PatchRegistry

_registry: Optional[PatchRegistry] = None
_registry_lock = threading.Lock()


def get_registry() -> PatchRegistry:
    global _registry
    with _registry_lock:
        if _registry is None:
            _registry = PatchRegistry()
        return _registry


def reset_registry() -> None:
    global _registry
    with _registry_lock:
        registry, _registry = _registry, None
    if registry is not None:
        registry.clear()


def configure(**options: Any) -> MonkeyConfig:
    """
    Update the registry configuration in place.

    Example:
        configure(conflict_policy="wait", lock_timeout_s=2.0)
    """
    known = {f.name for f in fields(MonkeyConfig)}
    unknown = set(options) - known
    if unknown:
        raise TypeError(
            f"Unknown config option(s): {', '.join(sorted(unknown))}"
        )

    config = get_registry().config
    updated = MonkeyConfig(
        **{
            name: options.get(name, getattr(config, name))
            for name in known
        }
    )
    for name in known:
        setattr(config, name, getattr(updated, name))

    if "log_level" in options:
        logging.getLogger("classmonkey").setLevel(
            config.log_level.upper()
        )
    return config


__all__: list[str] = [
    "PatchRegistry",
    "OriginalStore",
    "MethodTable",
    "HandleLockTable",
    "get_registry",
    "reset_registry",
    "configure",
]

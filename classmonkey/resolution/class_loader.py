from __future__ import annotations

import importlib
import threading
from typing import Any

from classmonkey.exceptions import AmbiguousTargetError
from classmonkey.logging import get_logger

logger = get_logger("loader")


class ClassLoader:
    """
    Resolves class paths such as ``"pkg.mod.Class"`` or
    ``"pkg.mod:Outer.Inner"`` by importing the module part.

    Results are cached per path.
    """

    def __init__(self) -> None:
        self._cache: dict[str, type] = {}
        self._lock = threading.Lock()

    def load(self, path: str) -> type:
        with self._lock:
            cached = self._cache.get(path)
        if cached is not None:
            return cached

        cls = self._import(path)
        with self._lock:
            self._cache[path] = cls
        logger.class_loaded(path)
        return cls

    def loaded(self) -> dict[str, type]:
        with self._lock:
            return dict(self._cache)

    def forget(self) -> None:
        with self._lock:
            self._cache.clear()

    def _import(self, path: str) -> type:
        path = path.strip()
        if ":" in path:
            module_name, _, attribute_path = path.partition(
                ":"
            )
            module = self._import_module(path, module_name)
            if module is None:
                raise AmbiguousTargetError(
                    path, f"no module named {module_name!r}"
                )
            return self._walk(
                path, module, attribute_path.split(".")
            )

        parts = path.split(".")
        if len(parts) < 2 or not all(parts):
            raise AmbiguousTargetError(
                path,
                "expected a dotted path like 'package.module.Class'",
            )

        for split in range(len(parts) - 1, 0, -1):
            module_name = ".".join(parts[:split])
            module = self._import_module(path, module_name)
            if module is not None:
                return self._walk(path, module, parts[split:])

        raise AmbiguousTargetError(
            path, "no importable module prefix"
        )

    @staticmethod
    def _import_module(path: str, module_name: str):
        try:
            return importlib.import_module(module_name)
        except ModuleNotFoundError as exc:
            missing = exc.name or ""
            if module_name == missing or module_name.startswith(
                missing + "."
            ):
                return None
            raise

    @staticmethod
    def _walk(
        path: str, obj: Any, attribute_names: list[str]
    ) -> type:
        for name in attribute_names:
            try:
                obj = getattr(obj, name)
            except AttributeError:
                raise AmbiguousTargetError(
                    path, f"no attribute {name!r}"
                ) from None

        if not isinstance(obj, type):
            raise AmbiguousTargetError(
                path,
                f"names a {type(obj).__name__}, not a class",
            )
        return obj


_default_loader = ClassLoader()


def get_class_loader() -> ClassLoader:
    return _default_loader


def load_class(path: str) -> type:
    return _default_loader.load(path)


def canpatch(*paths: str) -> list[type]:
    """
    Import and cache the given classes ahead of patching them.

    Example:
        canpatch("http.client.HTTPConnection", "json.JSONEncoder")
    """
    return [_default_loader.load(path) for path in paths]

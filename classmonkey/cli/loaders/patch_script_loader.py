from __future__ import annotations

import importlib.util
import sys
from pathlib import Path
from types import ModuleType
from typing import Optional

from ...logging import MonkeyLogger


class PatchScriptLoader:
    """Imports a Python file whose top level applies patches."""

    def can_load(self, path: Path) -> bool:
        return path.is_file() and path.suffix == ".py"

    def load(
        self, path: Path, logger: MonkeyLogger
    ) -> Optional[ModuleType]:
        if not self.can_load(path):
            logger.error(f"Not a Python file: {path}")
            return None

        module_name = f"classmonkey_patches_{path.stem}"
        try:
            return self._import_module(module_name, path)
        except Exception as e:
            sys.modules.pop(module_name, None)
            logger.error(f"Failed to load {path}: {e}")
            return None

    @staticmethod
    def _import_module(
        module_name: str, path: Path
    ) -> ModuleType:
        spec = importlib.util.spec_from_file_location(
            module_name, path
        )
        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        spec.loader.exec_module(module)
        return module

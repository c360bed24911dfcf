"""
classmonkey Logging Module

Provides rich logging for patch operations with:
- Colored output keyed to modifier kinds
- Structured log format for files and non-tty streams
- Semantic methods for install / remove / call-through events

The library never attaches handlers on its own; call ``setup_logging``
to see its output.

Usage:
    from classmonkey.logging import setup_logging

    logger = setup_logging(level="DEBUG")
    logger.info("Applying patches...")
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Iterable, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text
from rich.theme import Theme

if TYPE_CHECKING:
    from .types import BindingHandle, ModifierKind

# =============================================================================
# SHARED CONSOLE
# =============================================================================

console = Console(
    theme=Theme(
        {
            "info": "cyan",
            "warning": "yellow",
            "error": "bold red",
            "debug": "dim",
        }
    )
)


# =============================================================================
# CUSTOM THEME
# =============================================================================

MONKEY_THEME = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "debug": "dim",
        "target": "bold white",
        "modifier.before": "bold blue",
        "modifier.after": "bold blue",
        "modifier.around": "bold magenta",
        "modifier.override": "bold yellow",
        "modifier.method": "bold green",
        "modifier.instance": "bold yellow",
        "restore": "bold green",
    }
)


# =============================================================================
# CUSTOM LOG HANDLER
# =============================================================================


class MonkeyRichHandler(RichHandler):
    """Rich handler with short, iconized level names."""

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("show_time", True)
        kwargs.setdefault("show_path", False)
        kwargs.setdefault("rich_tracebacks", True)
        super().__init__(*args, **kwargs)

    def get_level_text(
        self, record: logging.LogRecord
    ) -> Text:
        level_name = record.levelname

        icons = {
            "DEBUG": "🔍",
            "INFO": "🐒",
            "WARNING": "⚠️ ",
            "ERROR": "❌",
            "CRITICAL": "🚨",
        }

        icon = icons.get(level_name, "•")

        style = {
            "DEBUG": "dim",
            "INFO": "cyan",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "bold red",
        }.get(level_name, "white")

        return Text(f"{icon} {level_name:<8}", style=style)


# =============================================================================
# MONKEY LOGGER
# =============================================================================


class MonkeyLogger:
    """
    High-level logging interface for classmonkey.

    Example:
        logger = MonkeyLogger("registry")
        logger.patch_installed(handle, ModifierKind.BEFORE, depth=2)
    """

    def __init__(
        self, name: str, level: Optional[str] = None
    ):
        self.name = name
        self._logger = logging.getLogger(
            f"classmonkey.{name}"
        )
        if level is not None:
            self._logger.setLevel(
                getattr(logging, level.upper())
            )

    @property
    def stdlib_logger(self) -> logging.Logger:
        return self._logger

    def _log(self, level: int, message: str):
        self._logger.log(
            level, message, extra={"markup": True}
        )

    # =========================================================================
    # SEMANTIC LOGGING METHODS
    # =========================================================================

    def patch_installed(
        self,
        handle: BindingHandle,
        kind: ModifierKind,
        depth: int,
    ):
        """Log a modifier being added to a handle's chain."""
        self._log(
            logging.DEBUG,
            f"[modifier.{kind.value}]{kind.value}[/modifier.{kind.value}] "
            f"installed on [target]{handle.describe()}[/target] "
            f"[dim](chain depth {depth})[/dim]",
        )

    def patch_removed(
        self,
        handle: BindingHandle,
        kinds: Iterable[ModifierKind],
    ):
        """Log a handle being restored to its original binding."""
        kinds_str = ", ".join(k.value for k in kinds)
        self._log(
            logging.DEBUG,
            f"[restore]Restored[/restore] [target]{handle.describe()}[/target] "
            f"[dim](dropped: {kinds_str or 'nothing'})[/dim]",
        )

    def original_called(self, handle: BindingHandle):
        """Log a call-through to the pristine implementation."""
        self._log(
            logging.DEBUG,
            f"Calling original of [target]{handle.describe()}[/target]",
        )

    def accessor_defined(
        self, qualified_name: str, mutability: str
    ):
        self._log(
            logging.DEBUG,
            f"Accessor [target]{qualified_name}[/target] defined ({mutability})",
        )

    def function_exported(
        self, name: str, handle: BindingHandle
    ):
        self._log(
            logging.DEBUG,
            f"Exported [target]{name}[/target] into {handle.describe()}",
        )

    def class_loaded(self, path: str):
        self._log(
            logging.DEBUG,
            f"Loaded class [target]{path}[/target]",
        )

    def error(self, message: str, exc_info: bool = False):
        """Log error."""
        self._logger.error(message, exc_info=exc_info)

    def warning(self, message: str):
        """Log warning."""
        self._log(
            logging.WARNING, f"[warning]{message}[/warning]"
        )

    def info(self, message: str):
        """Log info."""
        self._log(logging.INFO, message)

    def debug(self, message: str):
        """Log debug."""
        self._log(logging.DEBUG, f"[dim]{message}[/dim]")


# =============================================================================
# SETUP FUNCTION
# =============================================================================


def setup_logging(
    level: str = "INFO",
    rich_output: bool = True,
    log_file: Optional[str] = None,
) -> MonkeyLogger:
    """
    Configure classmonkey logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        rich_output: Enable rich console output
        log_file: Optional file path for log output

    Returns:
        MonkeyLogger instance
    """
    root_logger = logging.getLogger("classmonkey")
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    if rich_output:
        handler = MonkeyRichHandler(
            console=Console(theme=MONKEY_THEME, stderr=True),
            show_time=True,
            show_path=False,
        )
        handler.setFormatter(
            logging.Formatter("%(message)s")
        )
        root_logger.addHandler(handler)
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)

    return MonkeyLogger("main")


def get_logger(name: str) -> MonkeyLogger:
    """
    Get a classmonkey logger instance.

    Args:
        name: Logger name, nested under ``classmonkey.``

    Returns:
        MonkeyLogger instance
    """
    return MonkeyLogger(name)

from . import check_command, info_command

__all__ = ["check_command", "info_command"]

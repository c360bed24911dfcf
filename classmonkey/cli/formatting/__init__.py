from .rich_command import RichCommand
from .rich_group import RichGroup

__all__ = ["RichCommand", "RichGroup"]

from .binding_table_renderer import BindingTableRenderer

__all__ = ["BindingTableRenderer"]

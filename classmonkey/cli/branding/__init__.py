from .assets import (
    BANNER_STYLE_MAP,
    LOGO_MINI,
    LOGO_SMALL,
    MODIFIER_HELP,
    STATUS_ICON_MAP,
    TARGET_SYNTAX,
)
from .console_branding import ConsoleBranding

__all__ = [
    "ConsoleBranding",
    "BANNER_STYLE_MAP",
    "STATUS_ICON_MAP",
    "MODIFIER_HELP",
    "TARGET_SYNTAX",
    "LOGO_SMALL",
    "LOGO_MINI",
]

"""
Theming system.

Semantic color contexts, size tokens, and the process-wide Theme used to
resolve helper defaults.
"""

from .color_scheme import ColorContext, ColorScheme
from .constants import COMPACT_CONSTANTS, DEFAULT_CONSTANTS, ConstantToken, ThemeConstants
from .palette_manager import PaletteManager
from .theme import Theme, ThemeManager

__all__ = [
    "ColorContext",
    "ColorScheme",
    "ConstantToken",
    "ThemeConstants",
    "DEFAULT_CONSTANTS",
    "COMPACT_CONSTANTS",
    "PaletteManager",
    "ThemeManager",
    "Theme",
]

"""
Process-wide theme lookup.

The helpers resolve their default colors and sizes through ``Theme`` at call
time, so switching scheme or constants changes the defaults of every
subsequent helper call.
"""

import logging
from pathlib import Path
from typing import Callable, List, Optional

from PyQt6.QtGui import QColor

from .color_scheme import ColorContext, ColorScheme
from .constants import DEFAULT_CONSTANTS, ConstantToken, ThemeConstants
from .palette_manager import PaletteManager

logger = logging.getLogger(__name__)

ThemeChangeCallback = Callable[['ThemeManager'], None]


class ThemeManager:
    """
    Holds the current ColorScheme and ThemeConstants.

    Coordinates palette updates and change notification so that theme
    switching reaches both the QApplication palette and any listeners.
    """

    def __init__(self, color_scheme: Optional[ColorScheme] = None,
                 constants: ThemeConstants = DEFAULT_CONSTANTS):
        self.color_scheme = color_scheme or ColorScheme()
        self.constants = constants
        self.palette_manager = PaletteManager(self.color_scheme)
        self._theme_change_callbacks: List[ThemeChangeCallback] = []

    # ---- lookups -------------------------------------------------------

    def color(self, context: ColorContext) -> QColor:
        """Resolve a semantic color context against the current scheme."""
        return self.color_scheme.color_for(context)

    def constant(self, token: ConstantToken) -> float:
        """Resolve a size token against the current constants."""
        return self.constants.value_for(token)

    # ---- switching -----------------------------------------------------

    def switch_to_dark_theme(self):
        self.apply_color_scheme(ColorScheme.create_dark_theme())

    def switch_to_light_theme(self):
        self.apply_color_scheme(ColorScheme.create_light_theme())

    def apply_color_scheme(self, color_scheme: ColorScheme):
        """
        Apply a new color scheme to the entire application.

        Args:
            color_scheme: New ColorScheme to apply
        """
        self.color_scheme = color_scheme
        self.palette_manager.update_color_scheme(color_scheme)
        self.palette_manager.apply_palette_to_application()
        self._notify()
        logger.info("Applied new color scheme")

    def set_constants(self, constants: ThemeConstants):
        self.constants = constants
        self._notify()
        logger.info(f"Applied theme constants: {constants}")

    def reset(self):
        """Restore the default scheme and constants."""
        self.color_scheme = ColorScheme()
        self.constants = DEFAULT_CONSTANTS
        self.palette_manager.update_color_scheme(self.color_scheme)
        if self.palette_manager.original_palette is not None:
            self.palette_manager.restore_original_palette()
        self._notify()

    # ---- notification --------------------------------------------------

    def register_theme_change_callback(self, callback: ThemeChangeCallback):
        """
        Register a callback to be called when theme changes.

        Args:
            callback: Function called with this ThemeManager
        """
        self._theme_change_callbacks.append(callback)

    def unregister_theme_change_callback(self, callback: ThemeChangeCallback):
        if callback in self._theme_change_callbacks:
            self._theme_change_callbacks.remove(callback)

    def _notify(self):
        for callback in list(self._theme_change_callbacks):
            try:
                callback(self)
            except Exception as e:
                logger.warning(f"Theme change callback failed: {e}")

    # ---- configuration -------------------------------------------------

    def load_theme_from_config(self, config_path: str) -> bool:
        """
        Load and apply a color scheme from a JSON configuration file.

        Args:
            config_path: Path to JSON configuration file

        Returns:
            bool: True if the file existed and was applied
        """
        if not Path(config_path).exists():
            logger.error(f"Theme config not found: {config_path}")
            return False
        self.apply_color_scheme(ColorScheme.load_color_scheme_from_config(config_path))
        return True

    def save_current_theme(self, config_path: str) -> bool:
        return self.color_scheme.save_to_json(config_path)


# Process-wide theme consulted by every helper default
Theme = ThemeManager()

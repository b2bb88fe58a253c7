"""
QPalette integration for ColorScheme.

Pushes the semantic scheme into Qt's palette so unstyled widgets follow
the same theme as widgets styled through the helpers.
"""

import logging
from typing import Optional

from PyQt6.QtGui import QPalette
from PyQt6.QtWidgets import QApplication

from .color_scheme import ColorScheme

logger = logging.getLogger(__name__)


class PaletteManager:
    """Builds and applies a QPalette from a ColorScheme."""

    def __init__(self, color_scheme: ColorScheme):
        """
        Initialize the palette manager with a color scheme.

        Args:
            color_scheme: ColorScheme instance to use for palette generation
        """
        self.color_scheme = color_scheme
        self._original_palette = None

    @property
    def original_palette(self) -> Optional[QPalette]:
        """Palette captured before the first apply, if any."""
        return self._original_palette

    def update_color_scheme(self, color_scheme: ColorScheme):
        self.color_scheme = color_scheme

    def create_palette(self) -> QPalette:
        """
        Create a QPalette from the current color scheme.

        Returns:
            QPalette: Configured palette with color scheme colors
        """
        palette = QPalette()
        cs = self.color_scheme

        palette.setColor(QPalette.ColorRole.Window, cs.to_qcolor(cs.background))
        palette.setColor(QPalette.ColorRole.WindowText, cs.to_qcolor(cs.text_primary))

        palette.setColor(QPalette.ColorRole.Base, cs.to_qcolor(cs.background_secondary))
        palette.setColor(QPalette.ColorRole.AlternateBase, cs.to_qcolor(cs.background))
        palette.setColor(QPalette.ColorRole.Text, cs.to_qcolor(cs.text_primary))
        palette.setColor(QPalette.ColorRole.PlaceholderText, cs.to_qcolor(cs.text_secondary))

        palette.setColor(QPalette.ColorRole.Button, cs.to_qcolor(cs.background_secondary))
        palette.setColor(QPalette.ColorRole.ButtonText, cs.to_qcolor(cs.text_primary))

        palette.setColor(QPalette.ColorRole.Highlight, cs.to_qcolor(cs.accent))
        palette.setColor(QPalette.ColorRole.Shadow, cs.to_qcolor(cs.shadow))
        palette.setColor(QPalette.ColorRole.Mid, cs.to_qcolor(cs.border))

        return palette

    def apply_palette_to_application(self, app: Optional[QApplication] = None) -> bool:
        """
        Apply the color scheme palette to the entire application.

        Args:
            app: QApplication instance (uses QApplication.instance() if None)

        Returns:
            bool: True if a palette was applied
        """
        if app is None:
            app = QApplication.instance()

        if app is None:
            logger.debug("No QApplication instance found, skipping palette")
            return False

        # Store original palette for restoration
        if self._original_palette is None:
            self._original_palette = app.palette()

        app.setPalette(self.create_palette())
        logger.debug("Applied color scheme palette to application")
        return True

    def restore_original_palette(self, app: Optional[QApplication] = None):
        """Restore the palette captured before the first apply."""
        if app is None:
            app = QApplication.instance()

        if app is None or self._original_palette is None:
            logger.warning("Cannot restore original palette")
            return

        app.setPalette(self._original_palette)
        self._original_palette = None
        logger.debug("Restored original application palette")

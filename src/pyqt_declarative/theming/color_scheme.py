"""
Color scheme for pyqt-declarative styling helpers.

Maps semantic color contexts (background, shadow, accent, ...) to concrete
RGB(A) values, with light/dark variants and JSON configuration so that
styling code never carries literal colors.
"""

import json
import logging
from dataclasses import dataclass, fields
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from PyQt6.QtGui import QColor

from pyqt_declarative.exceptions import ThemeTokenError

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]


class ColorContext(Enum):
    """Semantic color labels resolved through the current theme."""
    BACKGROUND = "background"
    BACKGROUND_SECONDARY = "background_secondary"
    SHADOW = "shadow"
    BORDER = "border"
    TEXT_PRIMARY = "text_primary"
    TEXT_SECONDARY = "text_secondary"
    ACCENT = "accent"


@dataclass
class ColorScheme:
    """
    Semantic color scheme for styled widgets.

    Each field name matches a ColorContext value. The defaults form the
    dark theme; use create_light_theme() for the light variant.
    """

    # Surfaces
    background: RGB = (43, 43, 43)             # #2b2b2b - Window/root backgrounds
    background_secondary: RGB = (30, 30, 30)   # #1e1e1e - Cards and panels

    # Depth
    shadow: RGB = (0, 0, 0)                    # #000000 - Drop shadows
    border: RGB = (85, 85, 85)                 # #555555 - Outlines

    # Text
    text_primary: RGB = (255, 255, 255)        # #ffffff
    text_secondary: RGB = (204, 204, 204)      # #cccccc
    accent: RGB = (0, 170, 255)                # #00aaff

    def color_for(self, context: ColorContext) -> QColor:
        """
        Resolve a semantic context to a QColor.

        Args:
            context: ColorContext to look up

        Returns:
            QColor: Qt color for the context

        Raises:
            ThemeTokenError: If the scheme has no value for the context
        """
        name = context.value if isinstance(context, ColorContext) else context
        value = getattr(self, str(name), None)
        if not isinstance(value, tuple):
            raise ThemeTokenError(f"No color defined for context {context!r}")
        return self.to_qcolor(value)

    def to_qcolor(self, color_tuple: Union[RGB, RGBA]) -> QColor:
        """Convert an RGB or RGBA tuple to a QColor."""
        return QColor(*color_tuple)

    def to_hex(self, color_tuple: RGB) -> str:
        """
        Convert RGB tuple to hex color string.

        Args:
            color_tuple: RGB color tuple (r, g, b)

        Returns:
            str: Hex color string (e.g., "#ff0000")
        """
        r, g, b = color_tuple[:3]
        return f"#{r:02x}{g:02x}{b:02x}"

    @classmethod
    def create_dark_theme(cls) -> 'ColorScheme':
        """Create the dark theme variant (the dataclass defaults)."""
        return cls()

    @classmethod
    def create_light_theme(cls) -> 'ColorScheme':
        """
        Create a light theme variant with adjusted colors for light backgrounds.

        Returns:
            ColorScheme: Light theme color scheme
        """
        return cls(
            background=(245, 245, 245),            # Light gray background
            background_secondary=(255, 255, 255),  # White cards
            shadow=(0, 0, 0),
            border=(180, 180, 180),                # Medium gray borders
            text_primary=(0, 0, 0),
            text_secondary=(80, 80, 80),
            accent=(0, 100, 200),                  # Darker blue accent
        )

    @classmethod
    def load_color_scheme_from_config(cls, config_path: Optional[str] = None) -> 'ColorScheme':
        """
        Load color scheme from external configuration file.

        Unknown keys and malformed values are ignored; a missing or unreadable
        file yields the default scheme.

        Args:
            config_path: Path to JSON config file (optional)

        Returns:
            ColorScheme: Loaded color scheme or default if file not found
        """
        if config_path and Path(config_path).exists():
            try:
                with open(config_path, 'r') as f:
                    config = json.load(f)

                known = {f.name for f in fields(cls)}
                scheme_kwargs = {}
                for key, value in config.items():
                    if key in known and isinstance(value, list) and len(value) >= 3:
                        scheme_kwargs[key] = tuple(value)

                return cls(**scheme_kwargs)

            except (OSError, ValueError, TypeError) as e:
                logger.warning(f"Failed to load color scheme from {config_path}: {e}")

        return cls()

    def get_color_dict(self) -> Dict[str, RGB]:
        """Get all colors as a dictionary keyed by context name."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def save_to_json(self, config_path: str) -> bool:
        """
        Save color scheme to JSON configuration file.

        Args:
            config_path: Path to save JSON config file

        Returns:
            bool: True if save successful, False otherwise
        """
        try:
            json_dict = {k: list(v) for k, v in self.get_color_dict().items()}

            with open(config_path, 'w') as f:
                json.dump(json_dict, f, indent=2, sort_keys=True)

            logger.info(f"Color scheme saved to {config_path}")
            return True

        except OSError as e:
            logger.error(f"Failed to save color scheme to {config_path}: {e}")
            return False

"""
Theme constants for spacing, rounding and shadows.

Centralizes the numeric defaults used by the stack, styling and layout
helpers so every card and stack in an application shares the same rhythm.
"""

from dataclasses import dataclass
from enum import Enum

from pyqt_declarative.exceptions import ThemeTokenError


class ConstantToken(Enum):
    """Semantic size tokens resolved through the current theme."""
    PADDING = "padding"
    CORNER_RADIUS = "corner_radius"
    SHADOW_RADIUS = "shadow_radius"
    SHADOW_OPACITY = "shadow_opacity"


@dataclass(frozen=True)
class ThemeConstants:
    """Numeric values for each ConstantToken."""

    # Default stack spacing and layout guide margins
    padding: float = 8.0

    # Card styling
    corner_radius: float = 12.0
    shadow_radius: float = 8.0
    shadow_opacity: float = 0.15

    def value_for(self, token: ConstantToken) -> float:
        name = token.value if isinstance(token, ConstantToken) else token
        value = getattr(self, str(name), None)
        if not isinstance(value, (int, float)):
            raise ThemeTokenError(f"No constant defined for token {token!r}")
        return float(value)


# Default configuration
DEFAULT_CONSTANTS = ThemeConstants()

# Denser spacing for tool windows and side panels
COMPACT_CONSTANTS = ThemeConstants(
    padding=4.0,
    corner_radius=6.0,
    shadow_radius=4.0,
)

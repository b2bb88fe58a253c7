"""
pyqt-declarative: fluent layout and styling helpers for PyQt6.

Thin, chainable functions over QWidget and Qt layouts:

- Stacks: h_stack / v_stack / vertically_centered_in_stack build StackView
  containers with theme-driven spacing
- Styling: rounded, shadow, background_color, gradient_background and card
  presets, with colors resolved through semantic ColorContext values
- Layout: pin, pin_edges, constrain_to_size and wrap_in_view express edge
  and size constraints realised by Qt layouts

Defaults come from the process-wide Theme (see pyqt_declarative.theming).
"""

__version__ = "0.1.0"

from .exceptions import ConstraintError, DeclarativeError, ThemeTokenError
from .geometry import DirectionalEdgeInsets, EdgeInsets
from .layout import (
    Attribute,
    Constraint,
    LayoutGuide,
    PinLayout,
    Priority,
    activate,
    constrain_to_size,
    margins_guide,
    pin,
    pin_edges,
    wrap_in_view,
)
from .stack import Alignment, Axis, Distribution, StackView, h_stack, v_stack, vertically_centered_in_stack
from .styling import (
    CornerMask,
    apply_layer,
    background_color,
    card_style,
    card_style_with_background,
    card_style_with_gradient,
    gradient_background,
    layer_of,
    rounded,
    shadow,
)
from .theming import ColorContext, ColorScheme, ConstantToken, Theme, ThemeConstants

__all__ = [
    "__version__",
    # errors
    "DeclarativeError",
    "ThemeTokenError",
    "ConstraintError",
    # geometry
    "EdgeInsets",
    "DirectionalEdgeInsets",
    # layout
    "Attribute",
    "Constraint",
    "LayoutGuide",
    "PinLayout",
    "Priority",
    "activate",
    "constrain_to_size",
    "margins_guide",
    "pin",
    "pin_edges",
    "wrap_in_view",
    # stacks
    "Alignment",
    "Axis",
    "Distribution",
    "StackView",
    "h_stack",
    "v_stack",
    "vertically_centered_in_stack",
    # styling
    "CornerMask",
    "apply_layer",
    "background_color",
    "card_style",
    "card_style_with_background",
    "card_style_with_gradient",
    "gradient_background",
    "layer_of",
    "rounded",
    "shadow",
    # theming
    "ColorContext",
    "ColorScheme",
    "ConstantToken",
    "Theme",
    "ThemeConstants",
]

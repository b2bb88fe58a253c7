"""
View styling helpers.

Corner rounding, shadows, theme backgrounds and gradients, recorded on a
per-widget Layer and rendered through a scoped stylesheet.
"""

from .layer import CornerMask, GradientLayer, Layer, layer_of
from .style_generator import STYLE_ID_PROPERTY, LayerStyleGenerator
from .view_styling import (
    apply_layer,
    background_color,
    card_style,
    card_style_with_background,
    card_style_with_gradient,
    gradient_background,
    rounded,
    shadow,
)

__all__ = [
    "CornerMask",
    "GradientLayer",
    "Layer",
    "layer_of",
    "LayerStyleGenerator",
    "STYLE_ID_PROPERTY",
    "apply_layer",
    "background_color",
    "card_style",
    "card_style_with_background",
    "card_style_with_gradient",
    "gradient_background",
    "rounded",
    "shadow",
]

"""
QStyleSheet generation for widget layers.

Turns a Layer into a stylesheet block scoped to one widget's style id, so
rounding and fills apply to that widget only and never cascade to its
children.
"""

import logging
from typing import Optional

from PyQt6.QtGui import QColor

from .layer import GradientLayer, Layer

STYLE_ID_PROPERTY = "declarativeStyleId"

logger = logging.getLogger(__name__)


def to_rgba(color: QColor) -> str:
    """Format a QColor for use in a stylesheet."""
    return f"rgba({color.red()}, {color.green()}, {color.blue()}, {color.alpha()})"


class LayerStyleGenerator:
    """
    Generates a QStyleSheet string from a Layer.

    A gradient sublayer is drawn above the layer's background color, so when
    one with colors is present it replaces the plain background.
    """

    def __init__(self, layer: Layer):
        self.layer = layer

    def generate_background(self) -> Optional[str]:
        gradient = self.layer.gradient
        if gradient is not None and gradient.colors:
            return f"background: {self.generate_gradient(gradient)};"
        if self.layer.background_color is not None:
            return f"background-color: {to_rgba(self.layer.background_color)};"
        return None

    def generate_gradient(self, gradient: GradientLayer) -> str:
        """
        Generate a qlineargradient expression for ``gradient``.

        Returns:
            str: Gradient expression; a single color yields a solid fill
        """
        colors = gradient.colors
        if len(colors) == 1:
            return to_rgba(colors[0])
        (x1, y1), (x2, y2) = gradient.start_point, gradient.end_point
        stops = ", ".join(
            f"stop:{index / (len(colors) - 1):g} {to_rgba(color)}"
            for index, color in enumerate(colors)
        )
        return f"qlineargradient(x1:{x1:g}, y1:{y1:g}, x2:{x2:g}, y2:{y2:g}, {stops})"

    def generate_corners(self) -> str:
        top_left, top_right, bottom_right, bottom_left = self.layer.corner_radii()
        return (
            f"border-top-left-radius: {top_left:g}px;\n"
            f"    border-top-right-radius: {top_right:g}px;\n"
            f"    border-bottom-right-radius: {bottom_right:g}px;\n"
            f"    border-bottom-left-radius: {bottom_left:g}px;"
        )

    def generate_border(self) -> Optional[str]:
        layer = self.layer
        if layer.border_width <= 0 or layer.border_color is None:
            return None
        return f"border: {layer.border_width:g}px solid {to_rgba(layer.border_color)};"

    def generate_widget_style(self, style_id: str) -> str:
        """
        Generate the stylesheet block for the widget tagged with ``style_id``.

        Args:
            style_id: Value of the widget's STYLE_ID_PROPERTY, used in the selector

        Returns:
            str: QStyleSheet for the widget
        """
        declarations = [
            self.generate_background(),
            self.generate_border(),
            self.generate_corners(),
        ]
        body = "\n    ".join(d for d in declarations if d)
        return f'*[{STYLE_ID_PROPERTY}="{style_id}"] {{\n    {body}\n}}'

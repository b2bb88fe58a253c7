"""
Per-widget layer record.

A Layer holds the visual properties the styling helpers mutate. It is kept
on the widget as a Qt dynamic property so it survives the Python wrapper and
is rendered by ``apply_layer``.
"""

from dataclasses import dataclass, field
from enum import Flag
from typing import Any, List, Optional, Tuple

from PyQt6.QtCore import QRect, QSizeF
from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import QWidget

LAYER_PROPERTY = "declarativeLayer"


class CornerMask(Flag):
    MIN_X_MIN_Y = 1  # top-left
    MAX_X_MIN_Y = 2  # top-right
    MIN_X_MAX_Y = 4  # bottom-left
    MAX_X_MAX_Y = 8  # bottom-right
    ALL = 15


@dataclass(eq=False)
class GradientLayer:
    """Linear gradient drawn behind the widget's content."""
    colors: List[QColor] = field(default_factory=list)
    # Unit coordinates, top to bottom by default
    start_point: Tuple[float, float] = (0.5, 0.0)
    end_point: Tuple[float, float] = (0.5, 1.0)
    frame: QRect = field(default_factory=QRect)
    masks_to_bounds: bool = False
    corner_radius: float = 0.0
    masked_corners: CornerMask = CornerMask.ALL


@dataclass(eq=False)
class Layer:
    corner_radius: float = 0.0
    masked_corners: CornerMask = CornerMask.ALL
    background_color: Optional[QColor] = None
    border_color: Optional[QColor] = None
    border_width: float = 0.0
    shadow_radius: float = 3.0
    shadow_offset: QSizeF = field(default_factory=lambda: QSizeF(0, -3))
    shadow_opacity: float = 0.0
    shadow_color: QColor = field(default_factory=lambda: QColor(0, 0, 0))
    masks_to_bounds: bool = False
    # Only GradientLayer entries are rendered; other records are kept in order
    sublayers: List[Any] = field(default_factory=list)

    def insert_sublayer(self, sublayer: Any, index: int):
        """Insert ``sublayer`` at ``index``, moving it if already present."""
        self.sublayers = [s for s in self.sublayers if s is not sublayer]
        self.sublayers.insert(index, sublayer)

    @property
    def gradient(self) -> Optional[GradientLayer]:
        """First gradient sublayer, if any."""
        return next((s for s in self.sublayers if isinstance(s, GradientLayer)), None)

    def corner_radii(self) -> Tuple[float, float, float, float]:
        """Radii for (top-left, top-right, bottom-right, bottom-left)."""
        def radius(corner: CornerMask) -> float:
            return self.corner_radius if corner in self.masked_corners else 0.0

        return (
            radius(CornerMask.MIN_X_MIN_Y),
            radius(CornerMask.MAX_X_MIN_Y),
            radius(CornerMask.MAX_X_MAX_Y),
            radius(CornerMask.MIN_X_MAX_Y),
        )


def layer_of(widget: QWidget) -> Layer:
    """The widget's layer, created on first use."""
    layer = widget.property(LAYER_PROPERTY)
    if not isinstance(layer, Layer):
        layer = Layer()
        widget.setProperty(LAYER_PROPERTY, layer)
    return layer

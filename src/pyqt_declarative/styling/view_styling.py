"""
Chainable styling helpers for QWidget.

Each helper mutates the widget's Layer, re-renders it and returns the widget,
so calls compose: ``card_style(rounded(widget, radius=4))``. Default sizes and
colors come from the current Theme at call time.
"""

import itertools
import logging
import re
from typing import Iterable, Optional, Union

from PyQt6.QtCore import QSizeF, Qt
from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import QGraphicsDropShadowEffect, QWidget

from pyqt_declarative.theming import ColorContext, ConstantToken, Theme

from .layer import CornerMask, GradientLayer, layer_of
from .style_generator import STYLE_ID_PROPERTY, LayerStyleGenerator

logger = logging.getLogger(__name__)

ColorLike = Union[QColor, Qt.GlobalColor, str]

_BLOCK_BEGIN = "/* pyqt-declarative:begin */"
_BLOCK_END = "/* pyqt-declarative:end */"
_BLOCK_PATTERN = re.compile(re.escape(_BLOCK_BEGIN) + r".*?" + re.escape(_BLOCK_END), re.DOTALL)

_style_ids = itertools.count(1)


def _style_id(widget: QWidget) -> str:
    style_id = widget.property(STYLE_ID_PROPERTY)
    if not style_id:
        style_id = f"s{next(_style_ids)}"
        widget.setProperty(STYLE_ID_PROPERTY, style_id)
    return style_id


def _merge_stylesheet(existing: str, block: str) -> str:
    """Replace the generated block in ``existing``, keeping the caller's rules."""
    own = _BLOCK_PATTERN.sub("", existing).strip()
    generated = f"{_BLOCK_BEGIN}\n{block}\n{_BLOCK_END}"
    return f"{own}\n{generated}" if own else generated


def apply_layer(widget: QWidget) -> QWidget:
    """Render the widget's Layer as a scoped stylesheet block and shadow effect."""
    layer = layer_of(widget)
    style_id = _style_id(widget)

    # Plain QWidgets only paint stylesheet backgrounds with this attribute
    widget.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
    block = LayerStyleGenerator(layer).generate_widget_style(style_id)
    widget.setStyleSheet(_merge_stylesheet(widget.styleSheet(), block))

    effect = widget.graphicsEffect()
    if layer.shadow_opacity > 0:
        if not isinstance(effect, QGraphicsDropShadowEffect):
            effect = QGraphicsDropShadowEffect(widget)
            widget.setGraphicsEffect(effect)
        color = QColor(layer.shadow_color)
        color.setAlphaF(max(0.0, min(1.0, layer.shadow_opacity * layer.shadow_color.alphaF())))
        effect.setColor(color)
        effect.setBlurRadius(layer.shadow_radius)
        effect.setOffset(layer.shadow_offset.width(), layer.shadow_offset.height())
    elif isinstance(effect, QGraphicsDropShadowEffect):
        widget.setGraphicsEffect(None)

    logger.debug(f"Applied layer {style_id} to {widget.objectName() or type(widget).__name__}")
    return widget


def background_color(widget: QWidget, context: ColorContext) -> QWidget:
    layer_of(widget).background_color = Theme.color(context)
    return apply_layer(widget)


def rounded(widget: QWidget, radius: Optional[float] = None,
            corners: CornerMask = CornerMask.ALL) -> QWidget:
    """
    Round the masked corners of ``widget``.

    Args:
        widget: Widget to style
        radius: Corner radius (theme CORNER_RADIUS if None)
        corners: Which corners to round

    Returns:
        The widget
    """
    if radius is None:
        radius = Theme.constant(ConstantToken.CORNER_RADIUS)
    layer = layer_of(widget)
    layer.corner_radius = radius
    layer.masked_corners = corners
    return apply_layer(widget)


def shadow(widget: QWidget, radius: Optional[float] = None,
           offset: Optional[QSizeF] = None,
           color_context: ColorContext = ColorContext.SHADOW) -> QWidget:
    """
    Give ``widget`` a soft drop shadow in the theme's shadow color.

    Args:
        widget: Widget to style
        radius: Blur radius (theme SHADOW_RADIUS if None)
        offset: Shadow offset (no offset if None)
        color_context: Theme color used for shadow and border

    Returns:
        The widget
    """
    if radius is None:
        radius = Theme.constant(ConstantToken.SHADOW_RADIUS)
    color = Theme.color(color_context)

    layer = layer_of(widget)
    layer.shadow_radius = radius
    layer.shadow_offset = QSizeF(offset) if offset is not None else QSizeF(0, 0)
    layer.shadow_opacity = Theme.constant(ConstantToken.SHADOW_OPACITY)
    layer.masks_to_bounds = False
    layer.shadow_color = color
    layer.border_color = QColor(color)
    return apply_layer(widget)


def gradient_background(widget: QWidget, colors: Iterable[ColorLike]) -> QWidget:
    """
    Fill ``widget`` with a top-to-bottom gradient through ``colors``.

    Reuses the layer's existing gradient sublayer when there is one, so
    repeated calls only replace the colors.
    """
    layer = layer_of(widget)
    gradient = layer.gradient or GradientLayer()

    gradient.colors = [QColor(c) for c in colors]
    gradient.frame = widget.rect()
    gradient.masks_to_bounds = True
    gradient.corner_radius = layer.corner_radius
    gradient.masked_corners = layer.masked_corners
    layer.insert_sublayer(gradient, 0)
    return apply_layer(widget)


def card_style(widget: QWidget) -> QWidget:
    return shadow(rounded(widget))


def card_style_with_background(widget: QWidget,
                               context: ColorContext = ColorContext.BACKGROUND_SECONDARY) -> QWidget:
    return background_color(card_style(widget), context)


def card_style_with_gradient(widget: QWidget, colors: Iterable[ColorLike]) -> QWidget:
    return gradient_background(card_style(widget), colors)

"""Pin, size and wrap helpers built on constraint activation."""

import logging
from typing import List, Union

from PyQt6.QtCore import QSize, QSizeF
from PyQt6.QtWidgets import QWidget

from .anchors import Anchorable
from .constraints import Attribute, Constraint, Priority, activate

logger = logging.getLogger(__name__)


def pin(widget: QWidget, anchorable: Anchorable, padding: float = 0,
        low_priority_bottom: bool = False) -> List[Constraint]:
    """Pin all four edges of ``widget`` to ``anchorable`` with uniform padding."""
    return pin_edges(widget, anchorable,
                     top_inset=padding, leading_inset=padding,
                     bottom_inset=padding, trailing_inset=padding,
                     low_priority_bottom=low_priority_bottom)


def pin_edges(widget: QWidget, anchorable: Anchorable,
              top_inset: float = 0, leading_inset: float = 0,
              bottom_inset: float = 0, trailing_inset: float = 0,
              low_priority_bottom: bool = False) -> List[Constraint]:
    """
    Pin the edges of ``widget`` to ``anchorable`` with per-edge insets.

    ``widget`` must already be a child of the anchorable's owner widget, or
    share a parent with it.

    Args:
        widget: Widget to position
        anchorable: QWidget or LayoutGuide to pin to
        top_inset, leading_inset, bottom_inset, trailing_inset: Inward insets
        low_priority_bottom: Make the bottom edge DEFAULT_HIGH so the widget
            may keep its minimum height instead of shrinking with the target

    Returns:
        The four activated constraints (leading, trailing, top, bottom)

    Raises:
        ConstraintError: If the widget is neither a child nor a sibling of the
            anchorable's owner
    """
    bottom = Constraint(anchorable, Attribute.BOTTOM, widget, Attribute.BOTTOM, bottom_inset)
    if low_priority_bottom:
        bottom.priority = Priority.DEFAULT_HIGH

    return activate([
        Constraint(widget, Attribute.LEADING, anchorable, Attribute.LEADING, leading_inset),
        Constraint(anchorable, Attribute.TRAILING, widget, Attribute.TRAILING, trailing_inset),
        Constraint(widget, Attribute.TOP, anchorable, Attribute.TOP, top_inset),
        bottom,
    ])


def constrain_to_size(widget: QWidget, size: Union[QSize, QSizeF]) -> QWidget:
    """Fix ``widget`` to ``size``; returns the widget for chaining."""
    activate([
        Constraint(widget, Attribute.WIDTH, constant=size.width()),
        Constraint(widget, Attribute.HEIGHT, constant=size.height()),
    ])
    return widget


def wrap_in_view(widget: QWidget, top_inset: float = 0, leading_inset: float = 0,
                 bottom_inset: float = 0, trailing_inset: float = 0) -> QWidget:
    """
    Wrap ``widget`` in a new container, pinned with the given insets.

    Returns:
        The new container, whose only child is ``widget``
    """
    container = QWidget()
    widget.setParent(container)
    pin_edges(widget, container,
              top_inset=top_inset, leading_inset=leading_inset,
              bottom_inset=bottom_inset, trailing_inset=trailing_inset)
    logger.debug(f"Wrapped {widget.objectName() or type(widget).__name__} in container")
    return container

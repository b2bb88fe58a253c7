"""Build stack containers from sequences of widgets."""

from typing import Optional, Sequence

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QSizePolicy, QWidget

from pyqt_declarative.geometry import DirectionalEdgeInsets
from pyqt_declarative.theming import ConstantToken, Theme

from .stack_view import Alignment, Axis, Distribution, StackView


def _spacing_or_default(spacing: Optional[float]) -> float:
    if spacing is None:
        return Theme.constant(ConstantToken.PADDING)
    return spacing


def h_stack(views: Sequence[QWidget], spacing: Optional[float] = None,
            alignment: Alignment = Alignment.FILL,
            distribution: Distribution = Distribution.FILL) -> StackView:
    """Arrange ``views`` left to right; spacing defaults to the theme padding."""
    return StackView.make(views, _spacing_or_default(spacing), Axis.HORIZONTAL,
                          alignment, distribution)


def v_stack(views: Sequence[QWidget], spacing: Optional[float] = None,
            alignment: Alignment = Alignment.FILL,
            distribution: Distribution = Distribution.FILL,
            edge_insets: DirectionalEdgeInsets = DirectionalEdgeInsets()) -> StackView:
    """
    Arrange ``views`` top to bottom inside ``edge_insets``.

    Args:
        views: Widgets to arrange, in order
        spacing: Gap between views (theme padding if None)
        alignment: Cross-axis alignment
        distribution: How extra vertical space is shared
        edge_insets: Directional margins around the arranged views

    Returns:
        StackView: New vertical stack with margin-relative arrangement enabled
    """
    stack = StackView.make(views, _spacing_or_default(spacing), Axis.VERTICAL,
                           alignment, distribution)
    stack.directional_layout_margins = edge_insets
    stack.is_layout_margins_relative_arrangement = True
    return stack


def _spacer() -> QWidget:
    spacer = QWidget()
    spacer.setObjectName("stack_spacer")
    spacer.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)
    spacer.setSizePolicy(QSizePolicy.Policy.Preferred, QSizePolicy.Policy.Expanding)
    return spacer


def vertically_centered_in_stack(views: Sequence[QWidget],
                                 spacing: Optional[float] = None) -> StackView:
    """Vertical stack with ``views`` centered between two equal-height spacers."""
    top_spacer = _spacer()
    bottom_spacer = _spacer()
    stack = v_stack([top_spacer, *views, bottom_spacer], spacing=spacing)
    # Equal stretch keeps both spacers the same height
    stack.set_stretch(top_spacer, 1)
    stack.set_stretch(bottom_spacer, 1)
    return stack

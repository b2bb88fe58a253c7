"""
StackView: a QWidget that arranges children along one axis.

Wraps a QBoxLayout and keeps the arrangement (axis, cross-axis alignment,
distribution, spacing, margins) as plain properties. Changing any property
rebuilds the box layout in place.
"""

import logging
from enum import Enum
from typing import Dict, Iterable, List, Optional

from PyQt6.QtCore import QEvent, Qt
from PyQt6.QtWidgets import QBoxLayout, QSizePolicy, QSpacerItem, QWidget

from pyqt_declarative.geometry import DirectionalEdgeInsets

logger = logging.getLogger(__name__)


class Axis(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @property
    def direction(self) -> QBoxLayout.Direction:
        if self is Axis.HORIZONTAL:
            return QBoxLayout.Direction.LeftToRight
        return QBoxLayout.Direction.TopToBottom


class Alignment(Enum):
    """Cross-axis alignment of arranged subviews."""
    FILL = "fill"
    LEADING = "leading"
    TOP = "leading"
    CENTER = "center"
    TRAILING = "trailing"
    BOTTOM = "trailing"
    FIRST_BASELINE = "first_baseline"

    def qt_flag(self, axis: Axis) -> Qt.AlignmentFlag:
        if self is Alignment.FILL:
            return Qt.AlignmentFlag(0)
        if axis is Axis.HORIZONTAL:
            return {
                Alignment.LEADING: Qt.AlignmentFlag.AlignTop,
                Alignment.CENTER: Qt.AlignmentFlag.AlignVCenter,
                Alignment.TRAILING: Qt.AlignmentFlag.AlignBottom,
                Alignment.FIRST_BASELINE: Qt.AlignmentFlag.AlignBaseline,
            }[self]
        # Baselines only apply across a horizontal axis
        return {
            Alignment.LEADING: Qt.AlignmentFlag.AlignLeading,
            Alignment.CENTER: Qt.AlignmentFlag.AlignHCenter,
            Alignment.TRAILING: Qt.AlignmentFlag.AlignTrailing,
            Alignment.FIRST_BASELINE: Qt.AlignmentFlag.AlignLeading,
        }[self]


class Distribution(Enum):
    """How extra space along the axis is shared."""
    FILL = "fill"
    FILL_EQUALLY = "fill_equally"
    FILL_PROPORTIONALLY = "fill_proportionally"
    EQUAL_SPACING = "equal_spacing"
    EQUAL_CENTERING = "equal_centering"


class StackView(QWidget):
    """
    Container that lays out its arranged subviews along an axis.

    Usage:
        stack = StackView.make([title, body], spacing=8, axis=Axis.VERTICAL,
                               alignment=Alignment.FILL,
                               distribution=Distribution.FILL)
        stack.add_arranged_subview(footer)

    A widget stops being arranged when it is removed from the stack's
    children (reparented or deleted).
    """

    def __init__(self, arranged_subviews: Iterable[QWidget] = (), parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._arranged: List[QWidget] = []
        self._stretch: Dict[QWidget, int] = {}
        self._axis = Axis.HORIZONTAL
        self._alignment = Alignment.FILL
        self._distribution = Distribution.FILL
        self._spacing = 0.0
        self._margins = DirectionalEdgeInsets.zero()
        self._margins_relative = False

        self._box = QBoxLayout(self._axis.direction, self)
        self._box.setContentsMargins(0, 0, 0, 0)
        self._box.setSpacing(0)

        for view in arranged_subviews:
            self._arranged.append(view)
        self._rebuild()

    @classmethod
    def make(cls, views: Iterable[QWidget], spacing: float, axis: Axis,
             alignment: Alignment, distribution: Distribution) -> 'StackView':
        stack = cls(views)
        stack._alignment = alignment
        stack._distribution = distribution
        stack._spacing = spacing
        stack._axis = axis
        stack._rebuild()
        return stack

    # ---- arranged subviews ---------------------------------------------

    @property
    def arranged_subviews(self) -> List[QWidget]:
        return list(self._arranged)

    def add_arranged_subview(self, view: QWidget):
        self.insert_arranged_subview(view, len(self._arranged))

    def insert_arranged_subview(self, view: QWidget, index: int):
        """Insert ``view`` at ``index``; an already arranged view is moved."""
        if view in self._arranged:
            self._arranged.remove(view)
        self._arranged.insert(index, view)
        self._rebuild()

    def remove_arranged_subview(self, view: QWidget):
        """Stop arranging ``view`` without removing it from the stack."""
        if view in self._arranged:
            self._arranged.remove(view)
            self._stretch.pop(view, None)
            self._box.removeWidget(view)
            self._rebuild()

    def remove_all_arranged_subviews(self):
        """Detach every arranged subview from the stack and its hierarchy."""
        views = self._arranged
        self._arranged = []
        self._stretch.clear()
        for view in views:
            self._box.removeWidget(view)
            view.setParent(None)
        self._rebuild()
        logger.debug(f"Removed {len(views)} arranged subviews")

    def set_stretch(self, view: QWidget, stretch: int):
        """Override the stretch factor the distribution would give ``view``."""
        self._stretch[view] = stretch
        self._rebuild()

    def stretch_for(self, view: QWidget) -> int:
        if view in self._stretch:
            return self._stretch[view]
        if self._distribution is Distribution.FILL_EQUALLY:
            return 1
        if self._distribution is Distribution.FILL_PROPORTIONALLY:
            hint = view.sizeHint()
            length = hint.width() if self._axis is Axis.HORIZONTAL else hint.height()
            return max(1, length)
        return 0

    # ---- arrangement properties ----------------------------------------

    @property
    def axis(self) -> Axis:
        return self._axis

    @axis.setter
    def axis(self, value: Axis):
        self._axis = value
        self._rebuild()

    @property
    def alignment(self) -> Alignment:
        return self._alignment

    @alignment.setter
    def alignment(self, value: Alignment):
        self._alignment = value
        self._rebuild()

    @property
    def distribution(self) -> Distribution:
        return self._distribution

    @distribution.setter
    def distribution(self, value: Distribution):
        self._distribution = value
        self._rebuild()

    @property
    def spacing(self) -> float:
        return self._spacing

    @spacing.setter
    def spacing(self, value: float):
        self._spacing = value
        self._rebuild()

    @property
    def directional_layout_margins(self) -> DirectionalEdgeInsets:
        return self._margins

    @directional_layout_margins.setter
    def directional_layout_margins(self, value: DirectionalEdgeInsets):
        self._margins = value
        self._apply_margins()

    @property
    def is_layout_margins_relative_arrangement(self) -> bool:
        return self._margins_relative

    @is_layout_margins_relative_arrangement.setter
    def is_layout_margins_relative_arrangement(self, value: bool):
        self._margins_relative = value
        self._apply_margins()

    # ---- layout --------------------------------------------------------

    def _apply_margins(self):
        if not self._margins_relative:
            self._box.setContentsMargins(0, 0, 0, 0)
            return
        m = self._margins
        left, right = (m.trailing, m.leading) if self.isRightToLeft() else (m.leading, m.trailing)
        self._box.setContentsMargins(
            int(round(left)), int(round(m.top)), int(round(right)), int(round(m.bottom))
        )

    def _gap(self, length: int, policy: QSizePolicy.Policy) -> QSpacerItem:
        if self._axis is Axis.HORIZONTAL:
            return QSpacerItem(length, 0, policy, QSizePolicy.Policy.Minimum)
        return QSpacerItem(0, length, QSizePolicy.Policy.Minimum, policy)

    def _rebuild(self):
        box = self._box
        while box.count():
            box.takeAt(0)

        box.setDirection(self._axis.direction)
        self._apply_margins()
        flag = self._alignment.qt_flag(self._axis)
        spacing = int(round(self._spacing))

        if self._distribution in (Distribution.EQUAL_SPACING, Distribution.EQUAL_CENTERING):
            # Gaps are spacer items: ``spacing`` is their minimum, extra space is shared
            centering = self._distribution is Distribution.EQUAL_CENTERING
            box.setSpacing(0)
            if centering and self._arranged:
                box.addItem(self._gap(0, QSizePolicy.Policy.Expanding))
                box.setStretch(box.count() - 1, 1)
            for index, view in enumerate(self._arranged):
                if index:
                    box.addItem(self._gap(spacing, QSizePolicy.Policy.MinimumExpanding))
                    box.setStretch(box.count() - 1, 2 if centering else 1)
                box.addWidget(view, self.stretch_for(view), flag)
            if centering and self._arranged:
                box.addItem(self._gap(0, QSizePolicy.Policy.Expanding))
                box.setStretch(box.count() - 1, 1)
        else:
            box.setSpacing(spacing)
            for view in self._arranged:
                box.addWidget(view, self.stretch_for(view), flag)

        logger.debug(
            f"Rebuilt {self._axis.value} stack: {len(self._arranged)} views, "
            f"alignment={self._alignment.value}, distribution={self._distribution.value}"
        )

    # ---- Qt events -----------------------------------------------------

    def childEvent(self, event):
        if event.type() == QEvent.Type.ChildRemoved:
            child = event.child()
            if any(view is child for view in self._arranged):
                self._arranged = [view for view in self._arranged if view is not child]
                self._stretch.pop(child, None)
        super().childEvent(event)

    def changeEvent(self, event):
        # Qt may deliver this while QWidget.__init__ is still running
        if event.type() == QEvent.Type.LayoutDirectionChange and hasattr(self, "_box"):
            self._apply_margins()
        super().changeEvent(event)

"""Tests for stack containers."""

import pytest
from PyQt6.QtCore import QRect, QSize, Qt
from PyQt6.QtWidgets import QLabel, QWidget


class HintedWidget(QWidget):
    def __init__(self, width, height):
        super().__init__()
        self._hint = QSize(width, height)

    def sizeHint(self):
        return self._hint


def test_h_stack_arranges_views(qapp):
    """Test h_stack keeps order and requested arrangement."""
    from pyqt_declarative.stack import Alignment, Axis, Distribution, h_stack

    views = [QLabel("a"), QLabel("b"), QLabel("c")]
    stack = h_stack(views, spacing=6, alignment=Alignment.CENTER,
                    distribution=Distribution.FILL_EQUALLY)

    assert len(stack.arranged_subviews) == 3
    assert all(a is b for a, b in zip(stack.arranged_subviews, views))
    assert stack.axis is Axis.HORIZONTAL
    assert stack.alignment is Alignment.CENTER
    assert stack.distribution is Distribution.FILL_EQUALLY
    assert stack.spacing == 6
    assert all(view.parentWidget() is stack for view in views)

    layout = stack.layout()
    assert layout.spacing() == 6
    assert [layout.stretch(i) for i in range(3)] == [1, 1, 1]
    assert layout.itemAt(0).alignment() == Qt.AlignmentFlag.AlignVCenter


def test_h_stack_default_spacing_from_theme(qapp):
    """Test spacing defaults to the theme padding at call time."""
    from pyqt_declarative.stack import h_stack
    from pyqt_declarative.theming import COMPACT_CONSTANTS, ConstantToken, Theme

    assert h_stack([QLabel()]).spacing == Theme.constant(ConstantToken.PADDING)

    Theme.set_constants(COMPACT_CONSTANTS)
    assert h_stack([QLabel()]).spacing == 4.0


def test_empty_stack(qapp):
    from pyqt_declarative.stack import h_stack

    stack = h_stack([])
    assert stack.arranged_subviews == []
    assert stack.layout().count() == 0


def test_v_stack_applies_directional_margins(qapp):
    """Test v_stack enables margin-relative arrangement."""
    from pyqt_declarative.geometry import DirectionalEdgeInsets
    from pyqt_declarative.stack import Axis, v_stack

    stack = v_stack([QLabel("a"), QLabel("b")], spacing=2,
                    edge_insets=DirectionalEdgeInsets(top=1, leading=2, bottom=3, trailing=4))

    assert stack.axis is Axis.VERTICAL
    assert stack.is_layout_margins_relative_arrangement
    m = stack.layout().contentsMargins()
    assert (m.left(), m.top(), m.right(), m.bottom()) == (2, 1, 4, 3)

    stack.setLayoutDirection(Qt.LayoutDirection.RightToLeft)
    m = stack.layout().contentsMargins()
    assert (m.left(), m.right()) == (4, 2)


def test_margins_ignored_unless_relative(qapp):
    from pyqt_declarative.geometry import DirectionalEdgeInsets
    from pyqt_declarative.stack import Alignment, Axis, Distribution, StackView

    stack = StackView.make([QLabel()], 0, Axis.VERTICAL, Alignment.FILL, Distribution.FILL)
    stack.directional_layout_margins = DirectionalEdgeInsets.uniform(9)
    m = stack.layout().contentsMargins()
    assert (m.left(), m.top(), m.right(), m.bottom()) == (0, 0, 0, 0)

    stack.is_layout_margins_relative_arrangement = True
    assert stack.layout().contentsMargins().top() == 9


def test_vertically_centered_brackets_with_spacers(qapp):
    """Test centered stack adds two equal-stretch spacers."""
    from pyqt_declarative.stack import Axis, vertically_centered_in_stack

    views = [QLabel("title"), QLabel("subtitle")]
    stack = vertically_centered_in_stack(views, spacing=3)

    arranged = stack.arranged_subviews
    assert len(arranged) == len(views) + 2
    assert arranged[0].objectName() == "stack_spacer"
    assert arranged[-1].objectName() == "stack_spacer"
    assert arranged[1] is views[0] and arranged[2] is views[1]
    assert stack.axis is Axis.VERTICAL

    layout = stack.layout()
    assert layout.stretch(0) == layout.stretch(3) == 1
    assert layout.stretch(1) == layout.stretch(2) == 0


def test_equal_spacing_inserts_gaps(qapp):
    from pyqt_declarative.stack import Distribution, h_stack

    stack = h_stack([QLabel("a"), QLabel("b"), QLabel("c")], spacing=6,
                    distribution=Distribution.EQUAL_SPACING)

    layout = stack.layout()
    assert layout.count() == 5
    assert layout.spacing() == 0
    gap = layout.itemAt(1).spacerItem()
    assert gap is not None
    assert gap.minimumSize().width() == 6


def test_property_change_rebuilds_layout(qapp):
    from PyQt6.QtWidgets import QBoxLayout
    from pyqt_declarative.stack import Alignment, Axis, h_stack

    stack = h_stack([QLabel("a"), QLabel("b")], spacing=1)
    stack.axis = Axis.VERTICAL
    stack.alignment = Alignment.TRAILING
    stack.spacing = 10

    layout = stack.layout()
    assert layout.direction() == QBoxLayout.Direction.TopToBottom
    assert layout.spacing() == 10
    assert layout.itemAt(0).alignment() == Qt.AlignmentFlag.AlignTrailing
    assert layout.count() == 2


def test_remove_all_arranged_subviews(qapp):
    """Test removed views leave the stack hierarchy."""
    from pyqt_declarative.stack import h_stack

    views = [QLabel("a"), QLabel("b")]
    stack = h_stack(views)
    stack.remove_all_arranged_subviews()

    assert stack.arranged_subviews == []
    assert stack.layout().count() == 0
    assert all(view.parentWidget() is None for view in views)


def test_reparented_view_is_no_longer_arranged(qapp):
    from pyqt_declarative.stack import h_stack

    views = [QLabel("a"), QLabel("b")]
    stack = h_stack(views)
    other = QWidget()
    views[0].setParent(other)

    assert len(stack.arranged_subviews) == 1
    assert stack.arranged_subviews[0] is views[1]


def test_add_arranged_subview_moves_existing(qapp):
    from pyqt_declarative.stack import h_stack

    a, b = QLabel("a"), QLabel("b")
    stack = h_stack([a, b])
    stack.add_arranged_subview(a)

    assert [v.text() for v in stack.arranged_subviews] == ["b", "a"]


def test_fill_proportionally_uses_size_hints(qapp):
    """Test proportional stretch follows each view's hint along the axis."""
    from pyqt_declarative.stack import Distribution, h_stack, v_stack

    narrow, wide, bare = HintedWidget(30, 5), HintedWidget(60, 20), QWidget()
    stack = h_stack([narrow, wide, bare], spacing=0,
                    distribution=Distribution.FILL_PROPORTIONALLY)

    layout = stack.layout()
    assert [layout.stretch(i) for i in range(3)] == [30, 60, 1]

    column = v_stack([HintedWidget(30, 5), HintedWidget(60, 20)],
                     distribution=Distribution.FILL_PROPORTIONALLY)
    assert [column.layout().stretch(i) for i in range(2)] == [5, 20]


def test_equal_centering_adds_end_gaps(qapp):
    from pyqt_declarative.stack import Distribution, h_stack

    stack = h_stack([QLabel("a"), QLabel("b")], spacing=6,
                    distribution=Distribution.EQUAL_CENTERING)

    layout = stack.layout()
    assert layout.count() == 5
    assert [layout.stretch(i) for i in range(5)] == [1, 0, 2, 0, 1]
    for index in (0, 2, 4):
        assert layout.itemAt(index).spacerItem() is not None
    assert layout.itemAt(0).spacerItem().minimumSize().width() == 0
    assert layout.itemAt(2).spacerItem().minimumSize().width() == 6


def test_first_baseline_alignment(qapp):
    from pyqt_declarative.stack import Alignment, Axis, h_stack, v_stack

    row = h_stack([QLabel("a"), QLabel("b")], alignment=Alignment.FIRST_BASELINE)
    assert row.layout().itemAt(0).alignment() == Qt.AlignmentFlag.AlignBaseline

    # Baselines have no meaning across a vertical axis
    column = v_stack([QLabel("a")], alignment=Alignment.FIRST_BASELINE)
    assert column.layout().itemAt(0).alignment() == Qt.AlignmentFlag.AlignLeading
    assert Alignment.FIRST_BASELINE.qt_flag(Axis.VERTICAL) == Alignment.LEADING.qt_flag(Axis.VERTICAL)


def test_vertically_centered_geometry(qapp):
    """Test the spacers split the free height evenly around the content."""
    from pyqt_declarative.stack import vertically_centered_in_stack

    content = QWidget()
    content.setFixedHeight(30)
    stack = vertically_centered_in_stack([content], spacing=0)
    stack.show()
    stack.layout().setGeometry(QRect(0, 0, 100, 300))

    top_spacer, _, bottom_spacer = stack.arranged_subviews
    assert top_spacer.height() == bottom_spacer.height() == 135
    assert content.geometry() == QRect(0, 135, 100, 30)
    stack.close()

"""
QLayout that positions children from their edge constraints.

Each child is placed using the insets of its active edge constraints,
measured from the owner's rect or from a sibling's geometry. An axis pinned
on both edges stretches the child; an axis pinned on one edge keeps the
child's size hint. Non-required constraints on an axis let the child keep its
minimum size and overflow the owner.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from PyQt6 import sip
from PyQt6.QtCore import QRect, QSize
from PyQt6.QtWidgets import QLayout, QLayoutItem, QWidget, QWidgetItem

from pyqt_declarative.exceptions import ConstraintError
from pyqt_declarative.geometry import EdgeInsets

from .anchors import Anchorable, anchor_margins, anchor_owner
from .constraints import Attribute, Constraint

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class _PinnedItem:
    item: QLayoutItem
    # attribute -> (constraint, target, child_is_first)
    edges: Dict[Attribute, Tuple[Constraint, Anchorable, bool]] = field(default_factory=dict)

    def inset(self, attribute: Attribute) -> Optional[float]:
        entry = self.edges.get(attribute)
        if entry is None:
            return None
        constraint, target, child_is_first = entry
        margin = getattr(anchor_margins(target), attribute.value)
        return margin + constraint.inset(child_is_first)

    def is_soft(self, *attributes: Attribute) -> bool:
        return any(
            not self.edges[a][0].is_required for a in attributes if a in self.edges
        )

    def sibling_targets(self, owner: QWidget) -> List[QWidget]:
        """Target widgets other than ``owner`` this item is measured from."""
        targets = []
        for _, target, _ in self.edges.values():
            widget = anchor_owner(target)
            if widget is not owner and widget not in targets:
                targets.append(widget)
        return targets

    def drop_target(self, widget: QWidget):
        for attribute, (constraint, target, _) in list(self.edges.items()):
            if anchor_owner(target) is widget:
                constraint.active = False
                del self.edges[attribute]


def _span(start: Optional[float], end: Optional[float], origin: float,
          hint: int, minimum: int, soft: bool) -> Tuple[float, float]:
    """Position and size along one axis, from absolute edge coordinates."""
    if start is not None and end is not None:
        size = end - start
        if soft:
            size = max(size, minimum)
        return start, size
    if start is not None:
        return start, hint
    if end is not None:
        return end - hint, hint
    return origin, hint


class PinLayout(QLayout):
    """Layout backing activated edge constraints among its owner's children."""

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setContentsMargins(0, 0, 0, 0)
        self._items: List[_PinnedItem] = []

    @classmethod
    def for_widget(cls, owner: QWidget) -> 'PinLayout':
        """
        Return the owner's PinLayout, installing one if the owner has no layout.

        Raises:
            ConstraintError: If the owner already has a different layout
        """
        layout = owner.layout()
        if layout is None:
            logger.debug(f"Installing PinLayout on {owner.objectName() or owner}")
            return cls(owner)
        if isinstance(layout, cls):
            return layout
        raise ConstraintError(
            f"{owner!r} is managed by {type(layout).__name__}; cannot pin children to it"
        )

    # ---- constraint registration ---------------------------------------

    def add_constraint(self, widget: QWidget, target: Anchorable,
                       constraint: Constraint, child_is_first: bool):
        entry = self._entry_for(widget)
        if entry is None:
            self.addChildWidget(widget)
            entry = _PinnedItem(QWidgetItem(widget))
            self._items.append(entry)
        entry.edges[constraint.first_attribute] = (constraint, target, child_is_first)
        self.invalidate()

    def constraints_for(self, widget: QWidget) -> List[Constraint]:
        entry = self._entry_for(widget)
        if entry is None:
            return []
        return [constraint for constraint, _, _ in entry.edges.values()]

    def insets_for(self, widget: QWidget) -> EdgeInsets:
        """Effective insets of ``widget`` from its targets, treating unpinned edges as zero."""
        entry = self._entry_for(widget)
        if entry is None:
            raise ConstraintError(f"{widget!r} is not pinned in this layout")
        return EdgeInsets(*(entry.inset(a) or 0.0 for a in (
            Attribute.TOP, Attribute.LEADING, Attribute.BOTTOM, Attribute.TRAILING)))

    def _entry_for(self, widget: QWidget) -> Optional[_PinnedItem]:
        for entry in self._items:
            if entry.item.widget() is widget:
                return entry
        return None

    def _placement_order(self) -> List[_PinnedItem]:
        """Items ordered so each sibling target is placed before its dependents."""
        owner = self.parentWidget()
        placed: List[_PinnedItem] = []
        pending = list(self._items)
        while pending:
            placed_widgets = [entry.item.widget() for entry in placed]
            pinned = [entry.item.widget() for entry in pending]
            ready = [
                entry for entry in pending
                if all(t in placed_widgets or t not in pinned
                       for t in entry.sibling_targets(owner))
            ]
            if not ready:
                # Cyclic sibling pins: fall back to insertion order
                ready = pending[:1]
            placed.extend(ready)
            pending = [entry for entry in pending if entry not in ready]
        return placed

    def _reference(self, entry: _PinnedItem, attribute: Attribute, rect: QRect) -> Optional[QRect]:
        """Rect the given edge is measured from, or None when the edge is unusable."""
        if attribute not in entry.edges:
            return None
        target = anchor_owner(entry.edges[attribute][1])
        owner = self.parentWidget()
        if target is owner:
            return rect
        if sip.isdeleted(target) or target.parentWidget() is not owner:
            return None
        return target.geometry()

    # ---- QLayout interface ---------------------------------------------

    def addItem(self, item: QLayoutItem):
        self._items.append(_PinnedItem(item))

    def count(self) -> int:
        return len(self._items)

    def itemAt(self, index: int) -> Optional[QLayoutItem]:
        if 0 <= index < len(self._items):
            return self._items[index].item
        return None

    def takeAt(self, index: int) -> Optional[QLayoutItem]:
        if not 0 <= index < len(self._items):
            return None
        removed = self._items.pop(index)
        widget = removed.item.widget()
        if widget is not None:
            for entry in self._items:
                entry.drop_target(widget)
        return removed.item

    def sizeHint(self) -> QSize:
        return self._accumulate(lambda item: item.sizeHint(), minimum=False)

    def minimumSize(self) -> QSize:
        return self._accumulate(lambda item: item.minimumSize(), minimum=True)

    def _accumulate(self, measure, minimum: bool) -> QSize:
        width = height = 0
        owner = self.parentWidget()
        for entry in self._items:
            # Sibling-relative items follow their siblings' size
            if entry.sibling_targets(owner):
                continue
            size = measure(entry.item)
            leading = entry.inset(Attribute.LEADING) or 0.0
            trailing = entry.inset(Attribute.TRAILING) or 0.0
            top = entry.inset(Attribute.TOP) or 0.0
            bottom = entry.inset(Attribute.BOTTOM) or 0.0

            w = leading + size.width() + trailing
            h = top + size.height() + bottom
            if minimum and entry.is_soft(Attribute.LEADING, Attribute.TRAILING):
                w = leading
            if minimum and entry.is_soft(Attribute.TOP, Attribute.BOTTOM):
                h = top
            width = max(width, int(round(w)))
            height = max(height, int(round(h)))
        return QSize(width, height)

    def setGeometry(self, rect: QRect):
        super().setGeometry(rect)
        owner = self.parentWidget()
        right_to_left = owner is not None and owner.isRightToLeft()
        left_attr, right_attr = (
            (Attribute.TRAILING, Attribute.LEADING) if right_to_left
            else (Attribute.LEADING, Attribute.TRAILING)
        )

        for entry in self._placement_order():
            hint = entry.item.sizeHint()
            minimum = entry.item.minimumSize()

            left_ref = self._reference(entry, left_attr, rect)
            right_ref = self._reference(entry, right_attr, rect)
            top_ref = self._reference(entry, Attribute.TOP, rect)
            bottom_ref = self._reference(entry, Attribute.BOTTOM, rect)

            left = left_ref.x() + entry.inset(left_attr) if left_ref is not None else None
            right = (right_ref.x() + right_ref.width() - entry.inset(right_attr)
                     if right_ref is not None else None)
            top = top_ref.y() + entry.inset(Attribute.TOP) if top_ref is not None else None
            bottom = (bottom_ref.y() + bottom_ref.height() - entry.inset(Attribute.BOTTOM)
                      if bottom_ref is not None else None)

            x, width = _span(left, right, rect.x(), hint.width(), minimum.width(),
                             entry.is_soft(Attribute.LEADING, Attribute.TRAILING))
            y, height = _span(top, bottom, rect.y(), hint.height(), minimum.height(),
                              entry.is_soft(Attribute.TOP, Attribute.BOTTOM))

            entry.item.setGeometry(QRect(
                int(round(x)),
                int(round(y)),
                max(0, int(round(width))),
                max(0, int(round(height))),
            ))

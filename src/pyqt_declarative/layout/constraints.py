"""
Constraint records and activation.

A Constraint states ``first.attr = second.attr * multiplier + constant``.
Qt widgets have no constraint engine, so activation realises each record
with a native mechanism. Edge constraints between a widget and its parent
(or a guide on its parent), or between siblings, are handed to the parent's
PinLayout. Dimension constraints against nothing become fixed widget sizes.
"""

import logging
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, List, Optional

from PyQt6.QtWidgets import QWidget

from pyqt_declarative.exceptions import ConstraintError

from .anchors import Anchorable, anchor_owner

logger = logging.getLogger(__name__)


class Attribute(Enum):
    LEADING = "leading"
    TRAILING = "trailing"
    TOP = "top"
    BOTTOM = "bottom"
    WIDTH = "width"
    HEIGHT = "height"

    @property
    def is_edge(self) -> bool:
        return self not in (Attribute.WIDTH, Attribute.HEIGHT)

    @property
    def is_start_edge(self) -> bool:
        """Leading and top measure inward with a positive constant."""
        return self in (Attribute.LEADING, Attribute.TOP)


class Priority(IntEnum):
    REQUIRED = 1000
    DEFAULT_HIGH = 750
    DEFAULT_LOW = 250


@dataclass(eq=False)
class Constraint:
    first_item: Anchorable
    first_attribute: Attribute
    second_item: Optional[Anchorable] = None
    second_attribute: Optional[Attribute] = None
    constant: float = 0.0
    multiplier: float = 1.0
    priority: Priority = Priority.REQUIRED
    active: bool = False

    @property
    def is_required(self) -> bool:
        return self.priority >= Priority.REQUIRED

    def pinned_pair(self):
        """
        Split an edge constraint into (child widget, target anchorable).

        The child is the item placed by the constraint. Against its parent (or
        a guide on the parent) that is the nested widget. Between siblings it
        is the first item on leading/top edges and the second on
        trailing/bottom edges, matching how ``pin_edges`` orders its items.

        Returns:
            Tuple of (child, target, child_is_first)

        Raises:
            ConstraintError: If the items are neither parent/child nor siblings
        """
        if self.second_item is None or self.second_attribute is not self.first_attribute:
            raise ConstraintError(
                f"Only matching edge constraints between two items are supported, got "
                f"{self.first_attribute} to {self.second_attribute}"
            )
        first, second = self.first_item, self.second_item
        if isinstance(first, QWidget) and first.parentWidget() is anchor_owner(second):
            return first, second, True
        if isinstance(second, QWidget) and second.parentWidget() is anchor_owner(first):
            return second, first, False

        child_is_first = self.first_attribute.is_start_edge
        child, target = (first, second) if child_is_first else (second, first)
        parent = child.parentWidget() if isinstance(child, QWidget) else None
        if parent is not None and anchor_owner(target).parentWidget() is parent:
            return child, target, child_is_first
        raise ConstraintError(
            f"{first!r} and {second!r} are neither parent/child nor siblings"
        )

    def inset(self, child_is_first: bool) -> float:
        """Distance from the target edge inward to the child edge."""
        # leading/top: child = target + c; trailing/bottom: target = child + c
        if child_is_first == self.first_attribute.is_start_edge:
            return self.constant
        return -self.constant


def activate(constraints: Iterable[Constraint]) -> List[Constraint]:
    """
    Activate each constraint.

    Args:
        constraints: Constraint records to activate

    Returns:
        The activated constraints, in order

    Raises:
        ConstraintError: If an edge constraint spans unrelated widgets or has a
            multiplier other than 1. Also raised when the shared parent
            already uses a different QLayout
    """
    from .pin_layout import PinLayout

    activated = []
    for constraint in constraints:
        if constraint.first_attribute.is_edge:
            if constraint.multiplier != 1:
                raise ConstraintError(
                    f"Edge constraints take no multiplier, got {constraint.multiplier}"
                )
            child, target, child_is_first = constraint.pinned_pair()
            layout = PinLayout.for_widget(child.parentWidget())
            layout.add_constraint(child, target, constraint, child_is_first)
        elif constraint.second_item is None:
            _apply_fixed_dimension(constraint)
        else:
            raise ConstraintError(
                f"Relative {constraint.first_attribute.value} constraints are not supported"
            )
        constraint.active = True
        activated.append(constraint)
    return activated


def _apply_fixed_dimension(constraint: Constraint):
    widget = constraint.first_item
    if not isinstance(widget, QWidget):
        raise ConstraintError(f"Cannot fix the size of {widget!r}")
    value = max(0, int(round(constraint.constant)))
    if constraint.first_attribute is Attribute.WIDTH:
        widget.setFixedWidth(value)
    else:
        widget.setFixedHeight(value)
    logger.debug(f"Fixed {constraint.first_attribute.value} of {widget.objectName() or widget} to {value}")

"""Anchorable targets for pinning: widgets and layout guides."""

from dataclasses import dataclass
from typing import Optional, Union

from PyQt6.QtWidgets import QWidget

from pyqt_declarative.geometry import EdgeInsets
from pyqt_declarative.theming import ConstantToken, Theme


@dataclass(frozen=True, eq=False)
class LayoutGuide:
    """
    A rectangle inside ``owner`` inset by ``margins``.

    Pinning to a guide behaves like pinning to its owner with the guide's
    margins added to every inset.
    """

    owner: QWidget
    margins: EdgeInsets = EdgeInsets()


Anchorable = Union[QWidget, LayoutGuide]


def margins_guide(widget: QWidget, margins: Optional[EdgeInsets] = None) -> LayoutGuide:
    """Guide inset from ``widget`` by ``margins`` (theme padding by default)."""
    if margins is None:
        margins = EdgeInsets.uniform(Theme.constant(ConstantToken.PADDING))
    return LayoutGuide(widget, margins)


def anchor_owner(anchorable: Anchorable) -> QWidget:
    """The widget ``anchorable`` is measured from."""
    if isinstance(anchorable, LayoutGuide):
        return anchorable.owner
    return anchorable


def anchor_margins(anchorable: Anchorable) -> EdgeInsets:
    if isinstance(anchorable, LayoutGuide):
        return anchorable.margins
    return EdgeInsets.zero()

"""
Layout and constraint helpers.

Pin edges to a widget or layout guide, fix sizes, and wrap widgets in padded
containers. Activated edge constraints are realised by a PinLayout on the
target widget.
"""

from .anchors import Anchorable, LayoutGuide, margins_guide
from .constraints import Attribute, Constraint, Priority, activate
from .pin_layout import PinLayout
from .pinning import constrain_to_size, pin, pin_edges, wrap_in_view

__all__ = [
    "Anchorable",
    "LayoutGuide",
    "margins_guide",
    "Attribute",
    "Constraint",
    "Priority",
    "activate",
    "PinLayout",
    "pin",
    "pin_edges",
    "constrain_to_size",
    "wrap_in_view",
]

"""
Stack containers.

StackView arranges widgets along one axis; the builders create horizontal,
vertical and vertically centered stacks with theme-driven spacing.
"""

from .builders import h_stack, v_stack, vertically_centered_in_stack
from .stack_view import Alignment, Axis, Distribution, StackView

__all__ = [
    "Alignment",
    "Axis",
    "Distribution",
    "StackView",
    "h_stack",
    "v_stack",
    "vertically_centered_in_stack",
]

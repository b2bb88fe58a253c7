"""Value types shared by the layout and stack helpers."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EdgeInsets:
    """
    Insets measured inward from each edge of a rectangle.

    Leading and trailing follow the layout direction: leading is the left
    edge in left-to-right layouts and the right edge in right-to-left ones.
    """

    top: float = 0.0
    leading: float = 0.0
    bottom: float = 0.0
    trailing: float = 0.0

    @classmethod
    def zero(cls) -> 'EdgeInsets':
        return cls()

    @classmethod
    def uniform(cls, value: float) -> 'EdgeInsets':
        return cls(value, value, value, value)


# Stack margins use the same leading/trailing semantics
DirectionalEdgeInsets = EdgeInsets

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
import math

from chartframe.domain import Dimension, check_dimension


LOGGER = logging.getLogger(__name__)


class Edge(Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"

    @property
    def dimension(self) -> Dimension:
        """Dimension consumed when carving from this edge."""
        return "y" if self in (Edge.TOP, Edge.BOTTOM) else "x"

    @property
    def is_horizontal(self) -> bool:
        return self in (Edge.TOP, Edge.BOTTOM)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in screen coordinates (origin top-left, y grows downward)."""

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"rect width/height must be >= 0, got {self.width}x{self.height}")

    @property
    def x_max(self) -> float:
        return self.x + self.width

    @property
    def y_max(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    def origin(self, dimension: Dimension) -> float:
        return self.x if check_dimension(dimension) == "x" else self.y

    def span(self, dimension: Dimension) -> float:
        return self.width if check_dimension(dimension) == "x" else self.height

    def inset(self, value: float) -> "Rect":
        dx = min(max(0.0, float(value)), self.width / 2.0)
        dy = min(max(0.0, float(value)), self.height / 2.0)
        return Rect(x=self.x + dx, y=self.y + dy, width=self.width - 2.0 * dx, height=self.height - 2.0 * dy)

    def intersect_horizontal(self, other: "Rect") -> "Rect":
        """Restrict the x range to ``other``'s, keeping this rect's y range."""
        x0 = max(self.x, other.x)
        x1 = max(x0, min(self.x_max, other.x_max))
        return Rect(x=x0, y=self.y, width=x1 - x0, height=self.height)

    def intersect_vertical(self, other: "Rect") -> "Rect":
        """Restrict the y range to ``other``'s, keeping this rect's x range."""
        y0 = max(self.y, other.y)
        y1 = max(y0, min(self.y_max, other.y_max))
        return Rect(x=self.x, y=y0, width=self.width, height=y1 - y0)

    def overlaps(self, other: "Rect") -> bool:
        return self.x < other.x_max and self.x_max > other.x and self.y < other.y_max and self.y_max > other.y

    def contains_rect(self, other: "Rect") -> bool:
        return self.x <= other.x and self.y <= other.y and other.x_max <= self.x_max and other.y_max <= self.y_max


@dataclass(frozen=True)
class Segment:
    x0: float
    y0: float
    x1: float
    y1: float


def split_rect(rect: Rect, edge: Edge, thickness: float) -> tuple[Rect, Rect]:
    """Carve ``thickness`` off ``edge`` of ``rect``, returning ``(carved, remainder)``.

    The thickness saturates to the available span, so the remainder can collapse to zero
    size but never goes negative. ``rect`` itself is left untouched; callers thread the
    remainder into the next split, which makes allocation order part of the layout.
    """
    span = rect.span(edge.dimension)
    t = float(thickness)
    if math.isnan(t) or t < 0.0:
        t = 0.0
    if t > span:
        LOGGER.debug("clamping %s split thickness %s to available span %s", edge.value, t, span)
        t = span

    if edge is Edge.TOP:
        carved = Rect(x=rect.x, y=rect.y, width=rect.width, height=t)
        rest = Rect(x=rect.x, y=rect.y + t, width=rect.width, height=rect.height - t)
    elif edge is Edge.BOTTOM:
        rest = Rect(x=rect.x, y=rect.y, width=rect.width, height=rect.height - t)
        carved = Rect(x=rect.x, y=rest.y_max, width=rect.width, height=t)
    elif edge is Edge.LEFT:
        carved = Rect(x=rect.x, y=rect.y, width=t, height=rect.height)
        rest = Rect(x=rect.x + t, y=rect.y, width=rect.width - t, height=rect.height)
    else:
        rest = Rect(x=rect.x, y=rect.y, width=rect.width - t, height=rect.height)
        carved = Rect(x=rest.x_max, y=rect.y, width=t, height=rect.height)
    return carved, rest


class AspectRatio(Enum):
    LANDSCAPE = "landscape"
    SQUARE = "square"
    PORTRAIT = "portrait"

    def rect(self) -> Rect:
        if self is AspectRatio.SQUARE:
            return Rect(x=0.0, y=0.0, width=2000.0, height=2000.0)
        if self is AspectRatio.PORTRAIT:
            return Rect(x=0.0, y=0.0, width=1500.0, height=2000.0)
        return Rect(x=0.0, y=0.0, width=2000.0, height=1500.0)

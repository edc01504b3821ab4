from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
import math
from typing import Any, Iterable, Literal

import numpy as np

from chartframe.adapters import normalize_points
from chartframe.errors import EmptyDomainError, InvalidDomainError
from chartframe.series import PointSeries


Dimension = Literal["x", "y"]
DIMENSIONS: tuple[Dimension, ...] = ("x", "y")


def check_dimension(dimension: str) -> Dimension:
    if dimension not in DIMENSIONS:
        raise ValueError(f"dimension must be 'x' or 'y', got {dimension!r}")
    return dimension  # type: ignore[return-value]


@dataclass(frozen=True)
class Extent:
    """Closed numeric interval ``[lo, hi]`` along one dimension."""

    lo: float
    hi: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.lo) and math.isfinite(self.hi)):
            raise InvalidDomainError(f"extent bounds must be finite, got [{self.lo}, {self.hi}]")
        if self.lo > self.hi:
            raise InvalidDomainError(f"extent lower bound exceeds upper bound: {self.lo} > {self.hi}")

    @classmethod
    def of_values(cls, values: np.ndarray) -> "Extent":
        if values.size == 0:
            raise EmptyDomainError("no values to bound")
        return cls(lo=float(np.min(values)), hi=float(np.max(values)))

    @property
    def span(self) -> float:
        return self.hi - self.lo

    @property
    def is_degenerate(self) -> bool:
        return self.lo == self.hi

    def union(self, other: "Extent") -> "Extent":
        return Extent(lo=min(self.lo, other.lo), hi=max(self.hi, other.hi))

    def include(self, values: np.ndarray) -> "Extent":
        """Grow to cover the finite entries of ``values``; returns ``self`` if there are none."""
        arr = np.asarray(values, dtype=np.float64)
        arr = arr[np.isfinite(arr)]
        if arr.size == 0:
            return self
        return self.union(Extent.of_values(arr))


@dataclass(frozen=True)
class BoundingDomain:
    """Minimum bounding box of a set of points, one :class:`Extent` per dimension.

    Domains are values: :meth:`extend` and :meth:`union` return new domains and never
    shrink either operand, so folding any arrangement of the same point sets gives the
    same result.
    """

    x: Extent
    y: Extent

    @classmethod
    def from_points(cls, points: Any, **kwargs: Any) -> "BoundingDomain":
        """Bound every finite point; raises :class:`EmptyDomainError` if there is none."""
        series = normalize_points(points, **kwargs)
        return cls.from_series(series)

    @classmethod
    def from_series(cls, series: PointSeries) -> "BoundingDomain":
        if series.finite_count == 0:
            raise EmptyDomainError("no finite points to bound")
        return cls(x=Extent.of_values(series.finite_x()), y=Extent.of_values(series.finite_y()))

    @classmethod
    def from_bounds(cls, x_min: float, x_max: float, y_min: float, y_max: float) -> "BoundingDomain":
        return cls(x=Extent(lo=x_min, hi=x_max), y=Extent(lo=y_min, hi=y_max))

    @classmethod
    def fold(cls, domains: Iterable["BoundingDomain"]) -> "BoundingDomain":
        items = list(domains)
        if not items:
            raise EmptyDomainError("no domains to combine")
        return reduce(cls.union, items)

    def extend(self, points: Any, **kwargs: Any) -> "BoundingDomain":
        series = normalize_points(points, **kwargs)
        if series.finite_count == 0:
            return self
        return BoundingDomain(x=self.x.include(series.finite_x()), y=self.y.include(series.finite_y()))

    def union(self, other: "BoundingDomain") -> "BoundingDomain":
        return BoundingDomain(x=self.x.union(other.x), y=self.y.union(other.y))

    def extent(self, dimension: Dimension) -> Extent:
        return self.x if check_dimension(dimension) == "x" else self.y

    def min(self, dimension: Dimension) -> float:
        return self.extent(dimension).lo

    def max(self, dimension: Dimension) -> float:
        return self.extent(dimension).hi

    def span(self, dimension: Dimension) -> float:
        return self.extent(dimension).span

    @property
    def x_min(self) -> float:
        return self.x.lo

    @property
    def x_max(self) -> float:
        return self.x.hi

    @property
    def y_min(self) -> float:
        return self.y.lo

    @property
    def y_max(self) -> float:
        return self.y.hi

from __future__ import annotations

from dataclasses import dataclass
import math

import numpy as np

from chartframe.domain import Dimension
from chartframe.geometry import Rect
from chartframe.scales import NumericScale


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def round_half_away_array(values: np.ndarray) -> np.ndarray:
    arr = np.asarray(values, dtype=np.float64)
    return (np.sign(arr) * np.floor(np.abs(arr) + 0.5)).astype(np.int64)


def map_value(value: float, scale: NumericScale, rect: Rect, dimension: Dimension) -> int:
    """Project a data value through ``scale`` onto ``rect`` along ``dimension``."""
    pixel = rect.origin(dimension) + rect.span(dimension) * scale.normalize(value)
    return round_half_away(pixel)


def map_values(values: np.ndarray, scale: NumericScale, rect: Rect, dimension: Dimension) -> np.ndarray:
    pixels = rect.origin(dimension) + rect.span(dimension) * scale.normalize_array(values)
    return round_half_away_array(pixels)


@dataclass(frozen=True)
class CoordinateMapper:
    """Pair of scales bound to the plot body they project into."""

    x_scale: NumericScale
    y_scale: NumericScale
    rect: Rect

    def map_x(self, value: float) -> int:
        return map_value(value, self.x_scale, self.rect, "x")

    def map_y(self, value: float) -> int:
        return map_value(value, self.y_scale, self.rect, "y")

    def map_point(self, x: float, y: float) -> tuple[int, int]:
        return (self.map_x(x), self.map_y(y))

    def map_points(self, x: np.ndarray, y: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        px = map_values(x, self.x_scale, self.rect, "x")
        py = map_values(y, self.y_scale, self.rect, "y")
        return px, py

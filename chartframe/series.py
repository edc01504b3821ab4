from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, eq=False)
class PointSeries:
    x: np.ndarray
    y: np.ndarray
    mask: np.ndarray
    source_name: str | None = None

    def __eq__(self, other: object) -> bool:
        # Element-wise comparison; NaN coordinates match so masked points compare equal.
        if not isinstance(other, PointSeries):
            return NotImplemented
        return (
            self.source_name == other.source_name
            and np.array_equal(self.mask, other.mask)
            and np.array_equal(self.x, other.x, equal_nan=True)
            and np.array_equal(self.y, other.y, equal_nan=True)
        )

    __hash__ = None  # type: ignore[assignment]

    @property
    def finite_count(self) -> int:
        return int(np.count_nonzero(self.mask))

    def finite_x(self) -> np.ndarray:
        return self.x[self.mask]

    def finite_y(self) -> np.ndarray:
        return self.y[self.mask]

from __future__ import annotations

from dataclasses import dataclass, replace
import logging
import math
import sys

import numpy as np

from chartframe.domain import BoundingDomain, Dimension, Extent
from chartframe.errors import InvalidDomainError
from chartframe.labels import Tick, format_tick, format_ticks_for_axis


LOGGER = logging.getLogger(__name__)

DEFAULT_TARGET_TICKS = 5
DEGENERATE_POSITION = 0.5

_NICE_FACTORS = (1, 2, 5, 10)
_BOUNDARY_EPS = 1e-9
_MAX_EXP10 = 308

__all__ = [
    "DEFAULT_TARGET_TICKS",
    "DEGENERATE_POSITION",
    "NumericScale",
    "check_scale_extent",
    "format_tick",
    "format_ticks_for_axis",
    "generate_ticks",
    "nice_step",
    "tick_step",
]


def _nice_parts(raw: float) -> tuple[int, int]:
    """Split the nice step for ``raw`` into a factor from ``{1, 2, 5}`` and a power of ten."""
    if not math.isfinite(raw) or raw <= 0:
        raise ValueError("raw step must be finite and > 0")
    exp = math.floor(math.log10(raw))
    frac = raw * _power_of_ten(-exp) if exp < 0 else raw / _power_of_ten(exp)
    factor = _NICE_FACTORS[-1]
    for candidate in _NICE_FACTORS:
        # Tolerate log10/division drift such as 2.0000000000000004.
        if frac <= candidate * (1.0 + _BOUNDARY_EPS):
            factor = candidate
            break
    if factor == 10:
        return 1, exp + 1
    return factor, exp


def _power_of_ten(exp: int) -> float:
    return math.inf if exp > _MAX_EXP10 else 10.0**exp


def _step_value(factor: int, exp: int) -> float:
    if exp < 0:
        return factor / _power_of_ten(-exp)
    return factor * _power_of_ten(exp)


def nice_step(raw: float) -> float:
    """Round ``raw`` up to the nearest member of the ``{1, 2, 5} x 10^k`` family."""
    return _step_value(*_nice_parts(raw))


def tick_step(lo: float, hi: float, target: int) -> float:
    if target <= 0:
        raise ValueError("target must be > 0")
    if hi == lo:
        return 0.0
    return nice_step((hi - lo) / target)


def generate_ticks(lo: float, hi: float, target: int) -> np.ndarray:
    """Multiples of the nice step inside ``[lo, hi]``, both bounds inclusive."""
    if target <= 0:
        raise ValueError("target must be > 0")
    if hi == lo:
        return np.asarray([lo], dtype=np.float64)
    factor, exp = _nice_parts((hi - lo) / target)
    step = _step_value(factor, exp)
    first = math.ceil(lo / step - _BOUNDARY_EPS)
    last = math.floor(hi / step + _BOUNDARY_EPS)
    multiples = np.arange(first, last + 1, dtype=np.float64) * factor
    # Integer multiples over an exact power of ten land on the closest double, so 3 * 0.1 is 0.3.
    if exp < 0:
        ticks = multiples / _power_of_ten(-exp)
    else:
        ticks = multiples * _power_of_ten(exp)
    ticks[ticks == 0.0] = 0.0
    return np.unique(ticks)


def check_scale_extent(extent: Extent, target: int) -> None:
    """Raise :class:`InvalidDomainError` when ``extent`` cannot carry a finite, non-zero step."""
    if extent.is_degenerate:
        return
    span = extent.hi - extent.lo
    if not math.isfinite(span):
        raise InvalidDomainError(f"extent span overflows: [{extent.lo}, {extent.hi}]")
    raw = span / target
    if raw < sys.float_info.min:
        raise InvalidDomainError(f"extent span too small for {target} ticks: [{extent.lo}, {extent.hi}]")
    if not math.isfinite(nice_step(raw)):
        raise InvalidDomainError(f"tick step overflows for [{extent.lo}, {extent.hi}]")


@dataclass(frozen=True)
class NumericScale:
    """Linear scale over one extent, with nice ticks and ``[0, 1]`` normalization.

    ``is_inverted`` flips normalization (``1 - t``) for axes whose pixel coordinate grows
    opposite to the data, e.g. screen ``y``. The tick step is derived on demand from the
    extent and ``target_tick_count``; it is never stored.
    """

    extent: Extent
    target_tick_count: int = DEFAULT_TARGET_TICKS
    is_inverted: bool = False

    def __post_init__(self) -> None:
        if self.target_tick_count <= 0:
            raise ValueError("target_tick_count must be > 0")
        check_scale_extent(self.extent, self.target_tick_count)
        if self.extent.is_degenerate:
            LOGGER.debug("degenerate scale at %s; normalize() is fixed at %s", self.extent.lo, DEGENERATE_POSITION)

    @classmethod
    def from_extent(cls, lo: float, hi: float, target_tick_count: int = DEFAULT_TARGET_TICKS) -> "NumericScale":
        return cls(extent=Extent(lo=lo, hi=hi), target_tick_count=target_tick_count)

    @classmethod
    def from_domain(
        cls,
        domain: BoundingDomain,
        target_tick_count: int = DEFAULT_TARGET_TICKS,
        dimension: Dimension = "x",
    ) -> "NumericScale":
        return cls(extent=domain.extent(dimension), target_tick_count=target_tick_count)

    @property
    def lo(self) -> float:
        return self.extent.lo

    @property
    def hi(self) -> float:
        return self.extent.hi

    @property
    def is_degenerate(self) -> bool:
        return self.extent.is_degenerate

    @property
    def step(self) -> float:
        return tick_step(self.lo, self.hi, self.target_tick_count)

    def tick_values(self) -> np.ndarray:
        return generate_ticks(self.lo, self.hi, self.target_tick_count)

    def ticks(self) -> tuple[Tick, ...]:
        values = self.tick_values()
        step = self.step
        if step == 0.0:
            labels = [format_tick(float(v)) for v in values]
        else:
            labels = [format_tick(float(v), step=step) for v in values]
        return tuple(Tick(value=float(v), label=label) for v, label in zip(values, labels, strict=True))

    def normalize(self, value: float) -> float:
        if self.is_degenerate:
            return DEGENERATE_POSITION
        t = (float(value) - self.lo) / (self.hi - self.lo)
        return 1.0 - t if self.is_inverted else t

    def normalize_array(self, values: np.ndarray) -> np.ndarray:
        arr = np.asarray(values, dtype=np.float64)
        if self.is_degenerate:
            return np.full(arr.shape, DEGENERATE_POSITION, dtype=np.float64)
        t = (arr - self.lo) / (self.hi - self.lo)
        return 1.0 - t if self.is_inverted else t

    def inverted(self) -> "NumericScale":
        return replace(self, is_inverted=not self.is_inverted)

    def union(self, other: "NumericScale") -> "NumericScale":
        return replace(self, extent=self.extent.union(other.extent))

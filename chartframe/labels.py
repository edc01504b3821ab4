from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation
from enum import Enum
import math

import numpy as np


@dataclass(frozen=True)
class Tick:
    """A tick value in data units paired with its display label."""

    value: float
    label: str


class Anchor(Enum):
    START = "start"
    MIDDLE = "middle"
    END = "end"


class VerticalOffset(Enum):
    BELOW = "below"
    AT = "at"
    ABOVE = "above"

    @property
    def factor(self) -> float:
        # Screen y grows downward, so "above" moves toward smaller y.
        if self is VerticalOffset.ABOVE:
            return -1.0
        if self is VerticalOffset.BELOW:
            return 1.0
        return 0.0


@dataclass(frozen=True)
class Label:
    """Tick label styling: vertical nudge, text anchor and an optional fixed precision."""

    offset: VerticalOffset = VerticalOffset.AT
    anchor: Anchor = Anchor.MIDDLE
    rounding_precision: int | None = None

    def __post_init__(self) -> None:
        if self.rounding_precision is not None and self.rounding_precision < 0:
            raise ValueError("rounding_precision must be >= 0")

    def above(self) -> "Label":
        return replace(self, offset=VerticalOffset.ABOVE)

    def below(self) -> "Label":
        return replace(self, offset=VerticalOffset.BELOW)

    def start(self) -> "Label":
        return replace(self, anchor=Anchor.START)

    def end(self) -> "Label":
        return replace(self, anchor=Anchor.END)

    def with_precision(self, digits: int | None) -> "Label":
        return replace(self, rounding_precision=digits)

    def rounded(self, value: float) -> str:
        if self.rounding_precision is None:
            return format_tick(value)
        return f"{value:.{self.rounding_precision}f}"


def format_tick(value: float, *, step: float | None = None) -> str:
    """Render ``value`` at the precision implied by ``step``, trimming fractional zeros."""
    if not math.isfinite(value):
        return str(value)
    if step is not None and math.isfinite(step) and step > 0 and abs(value) <= step * 1e-9:
        value = 0.0
    if step is not None:
        decimals = decimals_from_step(step)
    elif value != 0.0 and abs(value) < 1e-6:
        decimals = decimals_from_step(abs(value))
    else:
        decimals = 6

    d = Decimal(repr(float(value)))
    quant = Decimal("1").scaleb(-decimals)
    try:
        q = d.quantize(quant)
    except InvalidOperation:
        q = d
    out = format(q, "f")
    # Only trim trailing zeros for fractional values (preserve integer zeros like 30, 40).
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    if out == "-0":
        out = "0"
    return out


def format_ticks_for_axis(ticks: np.ndarray) -> list[str]:
    if ticks.size == 0:
        return []
    if ticks.size == 1:
        return [format_tick(float(ticks[0]))]
    step = float(abs(ticks[1] - ticks[0]))
    return [format_tick(float(v), step=step) for v in ticks]


def decimals_from_step(step: float) -> int:
    if step <= 0 or not math.isfinite(step):
        return 6
    d = Decimal(repr(float(step))).normalize()
    exp = d.as_tuple().exponent
    return max(0, -int(exp))

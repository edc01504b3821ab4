from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from chartframe.adapters import normalize_points
from chartframe.config import DEFAULT_SETTINGS, ChartSettings
from chartframe.domain import BoundingDomain
from chartframe.geometry import Rect
from chartframe.mapping import CoordinateMapper
from chartframe.scales import NumericScale
from chartframe.series import PointSeries


PlotKind = Literal["area", "line", "scatter"]
PLOT_KINDS: tuple[PlotKind, ...] = ("area", "line", "scatter")


@dataclass(frozen=True)
class PlotGeometry:
    name: str
    kind: PlotKind
    index: int
    vertices: tuple[tuple[int, int], ...]

    @property
    def style_index(self) -> int:
        return self.index % 10


@dataclass(frozen=True)
class Plot:
    """A named data series drawn against a shared domain."""

    name: str
    domain: BoundingDomain
    series: PointSeries
    kind: PlotKind = "line"

    def __post_init__(self) -> None:
        if self.kind not in PLOT_KINDS:
            raise ValueError(f"unknown plot kind: {self.kind!r}")

    @classmethod
    def of(cls, name: str, domain: BoundingDomain, points: Any, kind: PlotKind = "line") -> "Plot":
        return cls(name=name, domain=domain, series=normalize_points(points, source_name=name), kind=kind)

    @classmethod
    def line(cls, name: str, domain: BoundingDomain, points: Any) -> "Plot":
        return cls.of(name, domain, points, kind="line")

    @classmethod
    def area(cls, name: str, domain: BoundingDomain, points: Any) -> "Plot":
        return cls.of(name, domain, points, kind="area")

    @classmethod
    def scatter(cls, name: str, domain: BoundingDomain, points: Any) -> "Plot":
        return cls.of(name, domain, points, kind="scatter")

    def mapper(self, body: Rect, settings: ChartSettings = DEFAULT_SETTINGS) -> CoordinateMapper:
        target = settings.target_tick_count
        x_scale = NumericScale.from_domain(self.domain, target, dimension="x")
        y_scale = NumericScale.from_domain(self.domain, target, dimension="y").inverted()
        return CoordinateMapper(x_scale=x_scale, y_scale=y_scale, rect=body)

    def geometry(self, body: Rect, *, index: int = 0, settings: ChartSettings = DEFAULT_SETTINGS) -> PlotGeometry:
        mapper = self.mapper(body, settings)
        xs = self.series.finite_x()
        px, py = mapper.map_points(xs, self.series.finite_y())
        vertices = [(int(x), int(y)) for x, y in zip(px.tolist(), py.tolist(), strict=True)]
        if self.kind == "area" and vertices:
            # Close the outline down to the y = 0 baseline under the first and last points.
            baseline = mapper.map_y(0.0)
            first_x = vertices[0][0]
            last_x = vertices[-1][0]
            vertices = [(first_x, baseline), *vertices, (last_x, baseline)]
        return PlotGeometry(name=self.name, kind=self.kind, index=index, vertices=tuple(vertices))

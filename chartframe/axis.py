from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Literal

from chartframe.config import DEFAULT_SETTINGS, ChartSettings
from chartframe.domain import BoundingDomain, Dimension
from chartframe.geometry import Edge, Rect, Segment, split_rect
from chartframe.labels import Anchor, Label, Tick
from chartframe.mapping import map_value, round_half_away
from chartframe.scales import DEFAULT_TARGET_TICKS, NumericScale


AxisOrientation = Literal["horizontal", "vertical"]

AXIS_ORIENTATIONS: tuple[AxisOrientation, ...] = ("horizontal", "vertical")


@dataclass(frozen=True)
class TickPosition:
    pixel: int
    label: str
    value: float


@dataclass(frozen=True)
class LabelPosition:
    x: int
    y: int
    text: str


@dataclass(frozen=True)
class AxisGeometry:
    rect: Rect
    name_rect: Rect | None
    line: Segment
    tick_marks: tuple[Segment, ...]
    labels: tuple[LabelPosition, ...]
    anchor: Anchor


@dataclass(frozen=True)
class Axis:
    """Tick-labelled axis attached to one edge of the plot body.

    Horizontal axes read the ``x`` extent and sit on the bottom (default) or top edge.
    Vertical axes read the ``y`` extent through an inverted scale, so larger values sit
    higher on screen, and sit on the left (default) or right edge.

    An optional :class:`Label` replaces the edge's default text anchor, nudges tick labels
    by ``label_gap`` above or below, and can fix the decimal places of every tick label.
    """

    orientation: AxisOrientation
    edge: Edge
    scale: NumericScale
    name: str | None = None
    label: Label | None = None

    def __post_init__(self) -> None:
        if self.orientation not in AXIS_ORIENTATIONS:
            raise ValueError(f"unknown axis orientation: {self.orientation!r}")
        if self.edge.is_horizontal != (self.orientation == "horizontal"):
            raise ValueError(f"{self.orientation} axis cannot attach to the {self.edge.value} edge")

    @classmethod
    def horizontal(cls, domain: BoundingDomain, target_tick_count: int = DEFAULT_TARGET_TICKS) -> "Axis":
        scale = NumericScale.from_domain(domain, target_tick_count, dimension="x")
        return cls(orientation="horizontal", edge=Edge.BOTTOM, scale=scale)

    @classmethod
    def vertical(cls, domain: BoundingDomain, target_tick_count: int = DEFAULT_TARGET_TICKS) -> "Axis":
        scale = NumericScale.from_domain(domain, target_tick_count, dimension="y").inverted()
        return cls(orientation="vertical", edge=Edge.LEFT, scale=scale)

    @property
    def dimension(self) -> Dimension:
        return "x" if self.orientation == "horizontal" else "y"

    def with_name(self, name: str) -> "Axis":
        return replace(self, name=name)

    def with_label(self, label: Label) -> "Axis":
        return replace(self, label=label)

    def on_top(self) -> "Axis":
        return replace(self, edge=Edge.TOP)

    def on_right(self) -> "Axis":
        return replace(self, edge=Edge.RIGHT)

    def ticks(self) -> tuple[Tick, ...]:
        """Scale ticks, relabelled at the label's fixed precision when one is set."""
        ticks = self.scale.ticks()
        if self.label is None or self.label.rounding_precision is None:
            return ticks
        return tuple(replace(tick, label=self.label.rounded(tick.value)) for tick in ticks)

    def required_space(self, settings: ChartSettings = DEFAULT_SETTINGS) -> float:
        return settings.axis_space_named if self.name is not None else settings.axis_space_unnamed

    def allocate(self, rect: Rect, settings: ChartSettings = DEFAULT_SETTINGS) -> tuple[Rect, Rect]:
        return split_rect(rect, self.edge, self.required_space(settings))

    def tick_positions(self, rect: Rect) -> tuple[TickPosition, ...]:
        dim = self.dimension
        return tuple(
            TickPosition(pixel=map_value(tick.value, self.scale, rect, dim), label=tick.label, value=tick.value)
            for tick in self.ticks()
        )

    def gridlines(self, body: Rect) -> tuple[Segment, ...]:
        lines: list[Segment] = []
        for pos in self.tick_positions(body):
            if self.orientation == "horizontal":
                lines.append(Segment(x0=pos.pixel, y0=body.y, x1=pos.pixel, y1=body.y_max))
            else:
                lines.append(Segment(x0=body.x, y0=pos.pixel, x1=body.x_max, y1=pos.pixel))
        return tuple(lines)

    def geometry(self, axis_rect: Rect, body: Rect, settings: ChartSettings = DEFAULT_SETTINGS) -> AxisGeometry:
        """Axis line, tick marks and label anchors inside the space allocated to this axis."""
        if self.orientation == "horizontal":
            rect = axis_rect.intersect_horizontal(body)
        else:
            rect = axis_rect.intersect_vertical(body)
        name_rect: Rect | None = None
        if self.name is not None:
            name_rect, rect = split_rect(rect, self.edge, self.required_space(settings) / 2.0)

        length = settings.tick_length
        nudge = self.label.offset.factor * settings.label_gap if self.label is not None else 0.0
        positions = self.tick_positions(rect)
        marks: list[Segment] = []
        labels: list[LabelPosition] = []
        if self.orientation == "horizontal":
            # The axis line hugs the side of the rect that faces the plot body.
            if self.edge is Edge.BOTTOM:
                y = rect.y
                mark_y0, mark_y1 = y, y + length
                label_y = round_half_away(y + 2.0 * length + nudge)
            else:
                y = rect.y_max
                mark_y0, mark_y1 = y - length, y
                label_y = round_half_away(y - 2.0 * length + nudge)
            line = Segment(x0=rect.x, y0=y, x1=rect.x_max, y1=y)
            for pos in positions:
                marks.append(Segment(x0=pos.pixel, y0=mark_y0, x1=pos.pixel, y1=mark_y1))
                labels.append(LabelPosition(x=pos.pixel, y=label_y, text=pos.label))
            anchor = Anchor.MIDDLE
        else:
            if self.edge is Edge.LEFT:
                x = rect.x_max
                mark_x0, mark_x1 = x - length, x
                label_x = round_half_away(x - settings.label_offset)
                anchor = Anchor.END
            else:
                x = rect.x
                mark_x0, mark_x1 = x, x + length
                label_x = round_half_away(x + settings.label_offset)
                anchor = Anchor.START
            line = Segment(x0=x, y0=rect.y, x1=x, y1=rect.y_max)
            for pos in positions:
                marks.append(Segment(x0=mark_x0, y0=pos.pixel, x1=mark_x1, y1=pos.pixel))
                labels.append(LabelPosition(x=label_x, y=round_half_away(pos.pixel + nudge), text=pos.label))
        if self.label is not None:
            anchor = self.label.anchor
        return AxisGeometry(
            rect=rect,
            name_rect=name_rect,
            line=line,
            tick_marks=tuple(marks),
            labels=tuple(labels),
            anchor=anchor,
        )

from __future__ import annotations

from dataclasses import dataclass, replace
import logging

from chartframe.axis import Axis, AxisGeometry
from chartframe.config import DEFAULT_SETTINGS, ChartSettings
from chartframe.geometry import AspectRatio, Edge, Rect, Segment, split_rect
from chartframe.labels import Anchor
from chartframe.plot import Plot, PlotGeometry


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Title:
    text: str
    anchor: Anchor = Anchor.MIDDLE
    edge: Edge = Edge.TOP

    def at_start(self) -> "Title":
        return replace(self, anchor=Anchor.START)

    def at_end(self) -> "Title":
        return replace(self, anchor=Anchor.END)

    def on_top(self) -> "Title":
        return replace(self, edge=Edge.TOP)

    def on_bottom(self) -> "Title":
        return replace(self, edge=Edge.BOTTOM)

    def on_left(self) -> "Title":
        return replace(self, edge=Edge.LEFT)

    def on_right(self) -> "Title":
        return replace(self, edge=Edge.RIGHT)


@dataclass(frozen=True)
class TitleLayout:
    title: Title
    rect: Rect


@dataclass(frozen=True)
class AxisLayout:
    axis: Axis
    rect: Rect
    geometry: AxisGeometry
    gridlines: tuple[Segment, ...]


@dataclass(frozen=True)
class ChartLayout:
    frame: Rect
    titles: tuple[TitleLayout, ...]
    axes: tuple[AxisLayout, ...]
    body: Rect
    plots: tuple[PlotGeometry, ...]


@dataclass(frozen=True)
class Chart:
    """Immutable chart configuration; :meth:`layout` resolves it to pixel geometry.

    Space is allocated from the inset frame in a fixed order: titles first, then axes,
    each in the order they were added. Whatever remains is the plot body shared by
    gridlines and every plot.
    """

    aspect_ratio: AspectRatio = AspectRatio.LANDSCAPE
    titles: tuple[Title, ...] = ()
    axes: tuple[Axis, ...] = ()
    plots: tuple[Plot, ...] = ()
    settings: ChartSettings = DEFAULT_SETTINGS

    def with_aspect_ratio(self, aspect_ratio: AspectRatio) -> "Chart":
        return replace(self, aspect_ratio=aspect_ratio)

    def with_title(self, title: Title | str) -> "Chart":
        if isinstance(title, str):
            title = Title(text=title)
        return replace(self, titles=(*self.titles, title))

    def with_axis(self, axis: Axis) -> "Chart":
        return replace(self, axes=(*self.axes, axis))

    def with_plot(self, plot: Plot) -> "Chart":
        return replace(self, plots=(*self.plots, plot))

    def with_settings(self, settings: ChartSettings) -> "Chart":
        return replace(self, settings=settings)

    def frame(self) -> Rect:
        return self.aspect_ratio.rect().inset(self.settings.margin)

    def area(self) -> Rect:
        _, _, _, body = self._allocate()
        return body

    def layout(self) -> ChartLayout:
        frame, title_rects, axis_rects, body = self._allocate()
        titles = tuple(TitleLayout(title=t, rect=r) for t, r in zip(self.titles, title_rects, strict=True))
        axes = tuple(
            AxisLayout(
                axis=axis,
                rect=rect,
                geometry=axis.geometry(rect, body, self.settings),
                gridlines=axis.gridlines(body),
            )
            for axis, rect in zip(self.axes, axis_rects, strict=True)
        )
        plots = tuple(plot.geometry(body, index=i, settings=self.settings) for i, plot in enumerate(self.plots))
        return ChartLayout(frame=frame, titles=titles, axes=axes, body=body, plots=plots)

    def _allocate(self) -> tuple[Rect, list[Rect], list[Rect], Rect]:
        frame = self.frame()
        area = frame
        title_rects: list[Rect] = []
        for title in self.titles:
            rect, area = split_rect(area, title.edge, self.settings.title_space)
            title_rects.append(rect)
        axis_rects: list[Rect] = []
        for axis in self.axes:
            rect, area = axis.allocate(area, self.settings)
            axis_rects.append(rect)
        LOGGER.debug(
            "chart layout: frame=%s titles=%s axes=%s body=%s",
            frame,
            len(title_rects),
            len(axis_rects),
            area,
        )
        return frame, title_rects, axis_rects, area

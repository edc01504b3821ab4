from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from chartframe.axis import Axis
from chartframe.chart import Chart
from chartframe.config import DEFAULT_SETTINGS, ChartSettings, load_settings
from chartframe.domain import BoundingDomain
from chartframe.geometry import AspectRatio
from chartframe.plot import Plot, PlotKind


def chart(
    *,
    aspect_ratio: AspectRatio = AspectRatio.LANDSCAPE,
    settings: ChartSettings | None = None,
    settings_path: str | Path | None = None,
) -> Chart:
    if settings is not None and settings_path is not None:
        raise ValueError("pass settings or settings_path, not both")
    if settings_path is not None:
        settings = load_settings(settings_path)
    return Chart(aspect_ratio=aspect_ratio, settings=settings or DEFAULT_SETTINGS)


def series_chart(
    series: Mapping[str, Any],
    *,
    kind: PlotKind = "line",
    title: str | None = None,
    x_name: str | None = None,
    y_name: str | None = None,
    aspect_ratio: AspectRatio = AspectRatio.LANDSCAPE,
    settings: ChartSettings | None = None,
) -> Chart:
    """Chart every named series against one domain covering all of them."""
    if not series:
        raise ValueError("at least one series is required")
    out = chart(aspect_ratio=aspect_ratio, settings=settings)
    domain = BoundingDomain.fold(BoundingDomain.from_points(points) for points in series.values())
    target = out.settings.target_tick_count
    if title is not None:
        out = out.with_title(title)
    x_axis = Axis.horizontal(domain, target)
    y_axis = Axis.vertical(domain, target)
    out = out.with_axis(x_axis.with_name(x_name) if x_name is not None else x_axis)
    out = out.with_axis(y_axis.with_name(y_name) if y_name is not None else y_axis)
    for name, points in series.items():
        out = out.with_plot(Plot.of(name, domain, points, kind=kind))
    return out

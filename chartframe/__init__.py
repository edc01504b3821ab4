from chartframe.api import chart, series_chart
from chartframe.axis import Axis, AxisGeometry, TickPosition
from chartframe.chart import Chart, ChartLayout, Title
from chartframe.config import ChartSettings, load_settings
from chartframe.domain import BoundingDomain, Extent
from chartframe.errors import ChartError, EmptyDomainError, InvalidDomainError, PlotDataError
from chartframe.geometry import AspectRatio, Edge, Rect, Segment, split_rect
from chartframe.labels import Anchor, Label, Tick
from chartframe.mapping import CoordinateMapper, map_value
from chartframe.plot import Plot, PlotGeometry
from chartframe.scales import NumericScale

__all__ = [
    "Anchor",
    "AspectRatio",
    "Axis",
    "AxisGeometry",
    "BoundingDomain",
    "Chart",
    "ChartError",
    "ChartLayout",
    "ChartSettings",
    "CoordinateMapper",
    "Edge",
    "EmptyDomainError",
    "Extent",
    "InvalidDomainError",
    "Label",
    "NumericScale",
    "Plot",
    "PlotDataError",
    "PlotGeometry",
    "Rect",
    "Segment",
    "Tick",
    "TickPosition",
    "Title",
    "chart",
    "load_settings",
    "map_value",
    "series_chart",
]

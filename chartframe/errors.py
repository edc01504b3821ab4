from __future__ import annotations


class ChartError(Exception):
    pass


class PlotDataError(ChartError, ValueError):
    pass


class EmptyDomainError(ChartError, ValueError):
    pass


class InvalidDomainError(ChartError, ValueError):
    pass

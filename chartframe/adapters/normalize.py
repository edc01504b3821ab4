from __future__ import annotations

from collections.abc import Iterable, Sequence
from decimal import Decimal
import logging
from typing import Any

import numpy as np

from chartframe.errors import PlotDataError
from chartframe.series import PointSeries


LOGGER = logging.getLogger(__name__)


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def normalize_points(
    points: Any = None,
    *,
    x: Any = None,
    y: Any = None,
    data: Any = None,
    source_name: str | None = None,
) -> PointSeries:
    """Coerce point input into aligned float64 ``x``/``y`` arrays plus a finiteness mask.

    ``points`` may be a sequence (or any iterable) of ``(x, y)`` pairs, an ``(N, 2)`` array,
    a DataFrame with ``x``/``y`` columns, an ``(N, 2)`` tensor, or a one-dimensional run of
    scalars (read as ``y`` against the sample index). ``x=``/``y=`` pass the dimensions
    separately; with ``data=`` they name DataFrame columns. Empty input is allowed and
    yields an empty series.
    """
    if isinstance(points, PointSeries):
        return points
    if points is not None and (x is not None or y is not None):
        raise PlotDataError("pass either points or x=/y=, not both")

    if data is not None:
        x_values, y_values = _resolve_frame_columns(data, x=x, y=y)
    elif points is not None:
        x_values, y_values = _split_points(points)
    else:
        if y is None:
            raise PlotDataError("points or y input is required")
        x_values, y_values = x, y

    y_arr = _coerce_1d_numeric(y_values, label="y")
    if x_values is None:
        x_arr = np.arange(y_arr.size, dtype=np.float64)
    else:
        x_arr = _coerce_1d_numeric(x_values, label="x")

    if x_arr.shape != y_arr.shape:
        raise PlotDataError(f"x and y length mismatch: {x_arr.size} != {y_arr.size}")

    mask = np.isfinite(x_arr) & np.isfinite(y_arr)
    dropped = int(mask.size - np.count_nonzero(mask))
    if dropped:
        LOGGER.debug("masked %s non-finite point(s) from %s", dropped, source_name or "series")
    return PointSeries(x=x_arr, y=y_arr, mask=mask, source_name=source_name)


def _resolve_frame_columns(data: Any, *, x: Any, y: Any) -> tuple[Any, Any]:
    if pd is None:
        raise PlotDataError("pandas is required when using `data=`")
    if not isinstance(data, pd.DataFrame):
        raise PlotDataError("`data` must be a pandas DataFrame")
    x_key = "x" if x is None else x
    y_key = "y" if y is None else y
    for key in (x_key, y_key):
        if not isinstance(key, str):
            raise PlotDataError("with `data=`, x and y must be column names")
        if key not in data.columns:
            raise PlotDataError(f"column not found: {key}")
    return data[x_key], data[y_key]


def _split_points(points: Any) -> tuple[Any, Any]:
    if pd is not None and isinstance(points, pd.DataFrame):
        if "x" in points.columns and "y" in points.columns:
            return points["x"], points["y"]
        numeric_cols = [c for c in points.columns if _is_numeric_dtype(points[c])]
        if len(numeric_cols) == 1:
            return None, points[numeric_cols[0]]
        if len(numeric_cols) != 2:
            raise PlotDataError("DataFrame points need x/y columns or exactly two numeric columns")
        return points[numeric_cols[0]], points[numeric_cols[1]]

    if torch is not None and isinstance(points, torch.Tensor):
        tensor = points.detach()
        if tensor.is_cuda:
            tensor = tensor.cpu()
        points = tensor.to(torch.float64).numpy()

    if isinstance(points, np.ndarray):
        arr = points
    elif isinstance(points, (str, bytes, bytearray)):
        raise PlotDataError(f"unsupported points input type: {type(points)!r}")
    elif isinstance(points, Iterable):
        items = list(points)
        if not items:
            return np.empty(0, dtype=np.float64), np.empty(0, dtype=np.float64)
        if all(isinstance(item, (tuple, list, np.ndarray)) for item in items):
            for i, item in enumerate(items):
                if len(item) != 2:
                    raise PlotDataError(f"point at index {i} must have exactly 2 coordinates")
            return [item[0] for item in items], [item[1] for item in items]
        arr = _object_array(items)
    else:
        raise PlotDataError(f"unsupported points input type: {type(points)!r}")

    if arr.ndim == 1:
        return None, arr
    if arr.ndim == 2 and arr.shape[1] == 2:
        return arr[:, 0], arr[:, 1]
    raise PlotDataError(f"points must be 1-D or shaped (N, 2), got {arr.shape}")


def _is_numeric_dtype(series: Any) -> bool:
    if pd is None:
        return False
    try:
        return bool(pd.api.types.is_numeric_dtype(series))
    except Exception:
        return False


def _coerce_1d_numeric(value: Any, *, label: str) -> np.ndarray:
    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.ndim != 1:
            raise PlotDataError(f"{label} must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy()

    if pd is not None and isinstance(value, pd.Series):
        return _coerce_ndarray(value.to_numpy(), label=label)

    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise PlotDataError(f"{label} must be 1-D")
        return _coerce_ndarray(value, label=label)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return _coerce_ndarray(_object_array(value), label=label)

    raise PlotDataError(f"unsupported {label} input type: {type(value)!r}")


def _object_array(values: Sequence[Any]) -> np.ndarray:
    # Element-wise fill keeps nested sequences from being broadcast into extra dimensions.
    out = np.empty(len(values), dtype=object)
    for i, raw in enumerate(values):
        out[i] = raw
    return out


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None:
            out[i] = np.nan
            continue
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        if isinstance(raw, (str, bytes, bytearray)):
            raise PlotDataError(f"{label} contains non-numeric value at index {i}: {raw!r}")
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise PlotDataError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out

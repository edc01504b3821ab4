from __future__ import annotations

from dataclasses import dataclass, fields
import math
from pathlib import Path
import tomllib
from typing import Any, Mapping


@dataclass(frozen=True)
class ChartSettings:
    """Resolved layout constants for one chart. Lengths are in frame pixels."""

    target_tick_count: int = 5
    margin: float = 40.0
    title_space: float = 100.0
    axis_space_named: float = 160.0
    axis_space_unnamed: float = 80.0
    tick_length: float = 20.0
    label_gap: float = 8.0

    def __post_init__(self) -> None:
        if isinstance(self.target_tick_count, bool) or not isinstance(self.target_tick_count, int):
            raise ValueError("target_tick_count must be an integer")
        if self.target_tick_count <= 0:
            raise ValueError("target_tick_count must be > 0")
        for name in ("margin", "title_space", "axis_space_named", "axis_space_unnamed", "tick_length", "label_gap"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{name} must be a number")
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"{name} must be finite and >= 0")
        if self.axis_space_named < self.axis_space_unnamed:
            raise ValueError("axis_space_named must be >= axis_space_unnamed")

    @property
    def label_offset(self) -> float:
        return self.tick_length + self.label_gap


DEFAULT_SETTINGS = ChartSettings()

_FIELD_NAMES = frozenset(f.name for f in fields(ChartSettings))


def settings_from_mapping(raw: Mapping[str, Any]) -> ChartSettings:
    """Build settings from a flat mapping or one holding a ``[chart]`` table."""
    table = raw.get("chart", raw)
    if not isinstance(table, Mapping):
        raise ValueError("chart settings must be a table")
    unknown = sorted(set(table) - _FIELD_NAMES)
    if unknown:
        raise ValueError(f"unknown chart setting(s): {', '.join(unknown)}")
    kwargs: dict[str, Any] = {}
    for key, value in table.items():
        if key == "target_tick_count":
            kwargs[key] = value
        elif isinstance(value, int) and not isinstance(value, bool):
            kwargs[key] = float(value)
        else:
            kwargs[key] = value
    return ChartSettings(**kwargs)


def load_settings(path: str | Path) -> ChartSettings:
    settings_path = Path(path)
    if not settings_path.exists():
        raise FileNotFoundError(f"chart settings not found: {settings_path}")
    with settings_path.open("rb") as f:
        raw = tomllib.load(f)
    return settings_from_mapping(raw)

"""Closed set of chart kinds supported by the builders."""

from __future__ import annotations

from enum import StrEnum


class ChartKind(StrEnum):
    """Chart kind selected by the user.

    Values are stable identifiers shared by forms, snapshots, and payloads.
    """

    bar = "bar"
    line = "line"
    pie = "pie"
    scatter = "scatter"
    bar_3d = "3d-bar"
    scatter_3d = "3d-scatter"
    surface_3d = "3d-surface"

    @property
    def is_3d(self) -> bool:
        """Whether the kind renders as a 3D scene (and requires a Z axis)."""

        return self in _KINDS_3D

    @classmethod
    def parse(cls, raw: str) -> ChartKind:
        """Parse a chart kind, accepting legacy `3dbar`-style spellings.

        Raises:
            ValueError: When `raw` does not name a supported kind.
        """

        normalized = raw.strip().casefold()
        normalized = _LEGACY_ALIASES.get(normalized, normalized)
        return cls(normalized)


_KINDS_3D = frozenset({ChartKind.bar_3d, ChartKind.scatter_3d, ChartKind.surface_3d})

_LEGACY_ALIASES = {
    "3dbar": "3d-bar",
    "3dscatter": "3d-scatter",
    "3dsurface": "3d-surface",
}

KINDS_2D: tuple[ChartKind, ...] = (ChartKind.bar, ChartKind.line, ChartKind.pie, ChartKind.scatter)
KINDS_3D: tuple[ChartKind, ...] = (ChartKind.bar_3d, ChartKind.scatter_3d, ChartKind.surface_3d)

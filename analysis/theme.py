"""Light/dark theme tokens shared by the 2D and 3D builders.

The theme is always passed explicitly; nothing in this package reads ambient
UI state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class ColorPair:
    """Fill and border colors for one chart element."""

    fill: str
    border: str


@dataclass(frozen=True, slots=True)
class Theme:
    """Resolved color tokens for a light or dark UI.

    Args:
        name: `"light"` or `"dark"`.
        is_dark: Whether this is the dark variant.
        palette: Ordered hex colors cycled by index.
        text_color: Foreground color for titles, ticks, and scene labels.
        grid_color: Color for 2D grid lines.
        scene_grid_color: Cell color for the 3D floor grid.
        scene_section_color: Section color for the 3D floor grid.
        background: Top and bottom gradient stops for the 3D canvas.
        point_color: Color for 3D scatter points.
        surface_color: Color for the 3D surface mesh.
        hover_color: Highlight color for hovered 3D bars.
    """

    name: str
    is_dark: bool
    palette: tuple[str, ...]
    text_color: str
    grid_color: str
    scene_grid_color: str
    scene_section_color: str
    background: tuple[str, str]
    point_color: str
    surface_color: str
    hover_color: str = "#ff6b6b"

    def color(self, index: int) -> str:
        """Return the palette color for a zero-based index, cycling."""

        return self.palette[index % len(self.palette)]


LIGHT_PALETTE: Final[tuple[str, ...]] = (
    "#4BC0C0",
    "#9966FF",
    "#FF9F40",
    "#FF6384",
    "#54A0FF",
    "#C7CEEA",
    "#FDD26E",
    "#8D3B73",
    "#009B8B",
    "#FFD700",
    "#A9A9A9",
    "#4682B4",
)

DARK_PALETTE: Final[tuple[str, ...]] = (
    "#2ECC71",
    "#9B59B6",
    "#E67E22",
    "#E74C3C",
    "#3498DB",
    "#95A5A6",
    "#F1C40F",
    "#D35400",
    "#1ABC9C",
    "#27AE60",
    "#C0392B",
    "#8E44AD",
)

LIGHT_THEME: Final = Theme(
    name="light",
    is_dark=False,
    palette=LIGHT_PALETTE,
    text_color="black",
    grid_color="rgba(0,0,0,0.1)",
    scene_grid_color="#6f6f6f",
    scene_section_color="#9d4b4b",
    background=("#f0f8ff", "#e6f3ff"),
    point_color="#6a0dad",
    surface_color="#74b9ff",
)

DARK_THEME: Final = Theme(
    name="dark",
    is_dark=True,
    palette=DARK_PALETTE,
    text_color="white",
    grid_color="rgba(255,255,255,0.1)",
    scene_grid_color="#4a4a4a",
    scene_section_color="#7a7a7a",
    background=("#2d2d2d", "#1a1a1a"),
    point_color="#4ecdc4",
    surface_color="#3498db",
)


def resolve_theme(is_dark: bool) -> Theme:
    """Return the dark theme when `is_dark` is true, otherwise the light theme."""

    return DARK_THEME if is_dark else LIGHT_THEME


def hex_to_rgba(color: str, alpha: float) -> str:
    """Convert `#RRGGBB` into a CSS `rgba(...)` string."""

    digits = color.lstrip("#")
    red, green, blue = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    return f"rgba({red}, {green}, {blue}, {alpha:g})"


@dataclass(frozen=True, slots=True)
class ColorAssignment:
    """Deterministic index -> ColorPair mapping cycling through a palette.

    Args:
        pairs: Palette entries; index `i` maps to `pairs[i % len(pairs)]`.
    """

    pairs: tuple[ColorPair, ...]

    @classmethod
    def from_theme(cls, theme: Theme, *, fill_alpha: float = 0.6) -> ColorAssignment:
        """Build a translucent-fill / opaque-border assignment from a theme."""

        return cls(
            pairs=tuple(
                ColorPair(fill=hex_to_rgba(color, fill_alpha), border=hex_to_rgba(color, 1.0))
                for color in theme.palette
            )
        )

    @property
    def size(self) -> int:
        """Number of distinct palette entries."""

        return len(self.pairs)

    def for_index(self, index: int) -> ColorPair:
        """Return the ColorPair for a zero-based index."""

        return self.pairs[index % len(self.pairs)]

    def assign(self, count: int) -> tuple[ColorPair, ...]:
        """Return ColorPairs for indices `0..count-1`."""

        return tuple(self.for_index(index) for index in range(count))

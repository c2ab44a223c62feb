"""Tests for light/dark theme tokens and palette cycling."""

from __future__ import annotations

import re

import pytest

from analysis.theme import (
    DARK_THEME,
    LIGHT_THEME,
    ColorAssignment,
    ColorPair,
    Theme,
    hex_to_rgba,
    resolve_theme,
)

pytestmark = pytest.mark.unit


def test_resolve_theme_selects_variant() -> None:
    """Pick the dark theme only when asked."""

    assert resolve_theme(True) is DARK_THEME
    assert resolve_theme(False) is LIGHT_THEME
    assert DARK_THEME.is_dark and not LIGHT_THEME.is_dark


@pytest.mark.parametrize("theme", [LIGHT_THEME, DARK_THEME])
def test_palettes_hold_twelve_hex_colors(theme: Theme) -> None:
    """Each palette has twelve `#RRGGBB` entries."""

    assert len(theme.palette) == 12
    assert all(re.fullmatch(r"#[0-9A-Fa-f]{6}", color) for color in theme.palette)


def test_theme_color_cycles() -> None:
    """Palette lookups wrap around."""

    assert LIGHT_THEME.color(0) == LIGHT_THEME.color(12) == "#4BC0C0"
    assert DARK_THEME.color(13) == DARK_THEME.palette[1]


def test_hex_to_rgba() -> None:
    """Convert hex colors to CSS rgba strings."""

    assert hex_to_rgba("#4BC0C0", 0.6) == "rgba(75, 192, 192, 0.6)"
    assert hex_to_rgba("#000000", 1.0) == "rgba(0, 0, 0, 1)"


def test_color_assignment_from_theme() -> None:
    """Fill is translucent and border opaque for the same base color."""

    assignment = ColorAssignment.from_theme(LIGHT_THEME)

    assert assignment.size == 12
    assert assignment.for_index(0) == ColorPair(fill="rgba(75, 192, 192, 0.6)", border="rgba(75, 192, 192, 1)")
    assert assignment.for_index(12) == assignment.for_index(0)
    assert assignment.assign(3) == tuple(assignment.for_index(i) for i in range(3))
    assert assignment.assign(0) == ()

"""Rank-dependent colors shared by every ranking view.

The board, the chart and the showcase all color a team from the same
``(rank, field_size)`` pair, so the mapping lives here as a pure function.
"""

from __future__ import annotations

from dataclasses import dataclass
import math

from quizboard.styling.color_palette import ColorPalette, Theme


@dataclass(slots=True, frozen=True)
class RGBColor:
    """An sRGB color with 0-255 channels."""

    red: int
    green: int
    blue: int

    @classmethod
    def from_hex(cls, value: str) -> "RGBColor":
        digits = value.lstrip("#")
        if len(digits) != 6:
            raise ValueError(f"Expected a #RRGGBB color, got {value!r}.")
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    def to_hex(self) -> str:
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"

    def to_rgba_css(self, alpha: float = 1.0) -> str:
        alpha = max(0.0, min(1.0, alpha))
        return f"rgba({self.red}, {self.green}, {self.blue}, {alpha:g})"

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)


GRADIENT_BEST = RGBColor.from_hex(ColorPalette.RANK_BEST.get(Theme.LIGHT))
GRADIENT_MIDDLE = RGBColor.from_hex(ColorPalette.RANK_MIDDLE.get(Theme.LIGHT))
GRADIENT_WORST = RGBColor.from_hex(ColorPalette.RANK_WORST.get(Theme.LIGHT))
NEUTRAL_ACCENT = RGBColor.from_hex(ColorPalette.ACCENT_PRIMARY.get(Theme.LIGHT))

_PODIUM_COLORS = {
    1: RGBColor.from_hex(ColorPalette.PODIUM_GOLD.get(Theme.LIGHT)),
    2: RGBColor.from_hex(ColorPalette.PODIUM_SILVER.get(Theme.LIGHT)),
    3: RGBColor.from_hex(ColorPalette.PODIUM_BRONZE.get(Theme.LIGHT)),
}


def _channel(start: int, end: int, t: float) -> int:
    # Half-up rounding.
    return max(0, min(255, math.floor(start + (end - start) * t + 0.5)))


def _interpolate(start: RGBColor, end: RGBColor, t: float) -> RGBColor:
    return RGBColor(
        _channel(start.red, end.red, t),
        _channel(start.green, end.green, t),
        _channel(start.blue, end.blue, t),
    )


def color_for(rank: int, field_size: int, gradient_enabled: bool) -> RGBColor:
    """Map a rank within a field of teams onto the green -> yellow -> red scale.

    Rank 1 is pure green and rank ``field_size`` pure red. When the gradient
    is disabled, or there is nothing to compare against, every team gets the
    neutral accent color.
    """
    if not gradient_enabled or field_size <= 1:
        return NEUTRAL_ACCENT

    position = (rank - 1) / (field_size - 1)
    position = max(0.0, min(1.0, position))
    if position < 0.5:
        return _interpolate(GRADIENT_BEST, GRADIENT_MIDDLE, position * 2)
    return _interpolate(GRADIENT_MIDDLE, GRADIENT_WORST, (position - 0.5) * 2)


def podium_color(rank: int, gradient_enabled: bool) -> RGBColor:
    """Gold, silver and bronze for the top three; the accent color for the rest."""
    if not gradient_enabled:
        return NEUTRAL_ACCENT
    return _PODIUM_COLORS.get(rank, NEUTRAL_ACCENT)

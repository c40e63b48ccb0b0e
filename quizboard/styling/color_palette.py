"""Color palette for QuizBoard supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    # Text colors
    TEXT_PRIMARY = ThemeColors(
        light="#000000",      # Black
        dark="#F5F5F5"        # WhiteSmoke
    )

    # Background colors
    BACKGROUND_PRIMARY = ThemeColors(
        light="#FFFFFF",      # White
        dark="#1E1E1E"        # Dark Gray
    )

    BACKGROUND_SECONDARY = ThemeColors(
        light="#F5F5F5",      # WhiteSmoke
        dark="#2D2D2D"        # Slightly lighter dark
    )

    # Accent colors; the primary accent doubles as the uniform rank color
    # when the gradient is switched off.
    ACCENT_PRIMARY = ThemeColors(
        light="#0078D4",      # Blue
        dark="#4A9EFF"        # Lighter Blue
    )

    # Rank gradient stops (best -> middle -> worst)
    RANK_BEST = ThemeColors(
        light="#4CAF50",      # Green
        dark="#4CAF50"
    )

    RANK_MIDDLE = ThemeColors(
        light="#FFEB3B",      # Yellow
        dark="#FFEB3B"
    )

    RANK_WORST = ThemeColors(
        light="#FF5252",      # Red
        dark="#FF5252"
    )

    # Podium colors for the showcase views
    PODIUM_GOLD = ThemeColors(
        light="#FFD700",
        dark="#FFD700"
    )

    PODIUM_SILVER = ThemeColors(
        light="#C0C0C0",
        dark="#C0C0C0"
    )

    PODIUM_BRONZE = ThemeColors(
        light="#CD7F32",
        dark="#CD7F32"
    )

    # Border colors
    BORDER_PRIMARY = ThemeColors(
        light="#D1D1D1",      # Gray
        dark="#555555"        # Dark Gray
    )

    # Button colors
    BUTTON_PRIMARY_BG = ThemeColors(
        light="#0078D4",      # Blue
        dark="#4A9EFF"        # Lighter Blue
    )

    BUTTON_PRIMARY_TEXT = ThemeColors(
        light="#FFFFFF",      # White
        dark="#000000"        # Black
    )

    BUTTON_SECONDARY_BG = ThemeColors(
        light="#F5F5F5",      # WhiteSmoke
        dark="#3A3A3A"        # Dark Gray
    )

    BUTTON_HOVER_BG = ThemeColors(
        light="#E8E8E8",      # Light Gray
        dark="#505050"        # Medium Gray
    )

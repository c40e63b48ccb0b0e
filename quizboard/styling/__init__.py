"""Styling module for the QuizBoard console."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]

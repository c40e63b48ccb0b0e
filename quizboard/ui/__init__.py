"""Qt UI components for the scoreboard console."""

from .dialog_helpers import (
    confirm_replace_quiz,
    show_error,
    show_info,
    show_warning,
)
from .scoreboard_window import ScoreboardWindow

__all__ = [
    "ScoreboardWindow",
    "confirm_replace_quiz",
    "show_error",
    "show_info",
    "show_warning",
]

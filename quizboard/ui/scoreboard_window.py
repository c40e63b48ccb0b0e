"""Qt main window switching between the board, score entry and reveal views."""

from __future__ import annotations

from enum import Enum, auto

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from quizboard.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION, HELP_TEXT
from quizboard.constants.quiz_constants import DEFAULT_REVEAL_TIER_SIZE
from quizboard.constants.ui_constants import (
    API_URL_PLACEHOLDER,
    BOARD_REFRESH_INTERVAL_MS,
    CONFIRM_MOCK_QUIZ_MESSAGE,
    EX_AEQUO_NO_TIEBREAK_MESSAGE,
    MODE_BUTTON_BOARD,
    MODE_BUTTON_MOCK,
    MODE_BUTTON_REVEAL,
    MODE_BUTTON_SCORES,
    WINDOW_TITLE,
)
from quizboard.core.mock_quiz import generate_mock_quiz
from quizboard.core.score_manager import ScoreManager
from quizboard.styling.color_palette import Theme
from quizboard.styling.styles import Styles
from quizboard.ui.components.board_panel import BoardPanel
from quizboard.ui.components.reveal_panel import RevealPanel
from quizboard.ui.components.score_entry_panel import ScoreEntryPanel
from quizboard.ui.dialog_helpers import confirm_replace_quiz, show_error, show_info, show_warning
from quizboard.ui.settings_dialog import SettingsDialog


class ConsoleMode(Enum):
    """High-level UI mode for the console."""

    BOARD = auto()
    SCORE_ENTRY = auto()
    REVEAL = auto()


class ScoreboardWindow(QMainWindow):
    """Main Qt window orchestrating the console views."""

    def __init__(self, score_manager: ScoreManager, api_url: str | None = None) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        self.score_manager = score_manager
        self.api_url = api_url or API_URL_PLACEHOLDER

        self._mode = ConsoleMode.BOARD
        self._reveal_tier_size: int = DEFAULT_REVEAL_TIER_SIZE
        self._board_font_size: int = 14
        self._theme: Theme = Theme.LIGHT

        self._build_ui()
        self._configure_refresh_timer()
        self._apply_styles()
        self._set_mode(ConsoleMode.BOARD)

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_mode_buttons(root_layout)

        self.api_label = QLabel(f"Presentation API: {self.api_url}", self)
        root_layout.addWidget(self.api_label)

        self.mode_stack = QStackedWidget(self)
        self.board_panel = BoardPanel(self.score_manager, self)
        self.score_entry_panel = ScoreEntryPanel(self.score_manager, self)
        self.reveal_panel = RevealPanel(self.score_manager, self)

        self.mode_stack.addWidget(self.board_panel)
        self.mode_stack.addWidget(self.score_entry_panel)
        self.mode_stack.addWidget(self.reveal_panel)

        root_layout.addWidget(self.mode_stack)

    def _build_mode_buttons(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()

        self.board_mode_button = QPushButton(MODE_BUTTON_BOARD, self)
        self.board_mode_button.setCheckable(True)
        self.board_mode_button.clicked.connect(lambda: self._set_mode(ConsoleMode.BOARD))
        button_row.addWidget(self.board_mode_button)

        self.scores_mode_button = QPushButton(MODE_BUTTON_SCORES, self)
        self.scores_mode_button.setCheckable(True)
        self.scores_mode_button.clicked.connect(lambda: self._set_mode(ConsoleMode.SCORE_ENTRY))
        button_row.addWidget(self.scores_mode_button)

        self.reveal_mode_button = QPushButton(MODE_BUTTON_REVEAL, self)
        self.reveal_mode_button.setCheckable(True)
        self.reveal_mode_button.clicked.connect(lambda: self._set_mode(ConsoleMode.REVEAL))
        button_row.addWidget(self.reveal_mode_button)

        self.mock_button = QPushButton(MODE_BUTTON_MOCK, self)
        self.mock_button.clicked.connect(self._handle_generate_mock)
        button_row.addWidget(self.mock_button)

        self.about_button = QPushButton(f"About {APP_NAME}", self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.help_button = QPushButton("Help", self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        self.settings_button = QPushButton("Settings", self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        layout.addLayout(button_row)

    def _configure_refresh_timer(self) -> None:
        self.refresh_timer = QTimer(self)
        self.refresh_timer.setInterval(BOARD_REFRESH_INTERVAL_MS)
        self.refresh_timer.timeout.connect(self._refresh_state)
        self.refresh_timer.start()

    def _refresh_state(self) -> None:
        # Scores can also arrive through the API thread.
        if self._mode == ConsoleMode.BOARD:
            self.board_panel.refresh()

    def _set_mode(self, mode: ConsoleMode) -> None:
        self._mode = mode
        self.board_mode_button.setChecked(mode == ConsoleMode.BOARD)
        self.scores_mode_button.setChecked(mode == ConsoleMode.SCORE_ENTRY)
        self.reveal_mode_button.setChecked(mode == ConsoleMode.REVEAL)

        if mode == ConsoleMode.BOARD:
            self.board_panel.refresh()
        elif mode == ConsoleMode.SCORE_ENTRY:
            self.score_entry_panel.reload()
        else:
            self.reveal_panel.start_reveal()

        index_map = {
            ConsoleMode.BOARD: 0,
            ConsoleMode.SCORE_ENTRY: 1,
            ConsoleMode.REVEAL: 2,
        }
        self.mode_stack.setCurrentIndex(index_map[mode])

    def _handle_generate_mock(self) -> None:
        if self.score_manager.get_teams() and not confirm_replace_quiz(self, CONFIRM_MOCK_QUIZ_MESSAGE):
            return
        try:
            generate_mock_quiz(self.score_manager)
        except ValueError as exc:
            show_error(self, "Mock quiz failed", str(exc))
            return
        self._set_mode(ConsoleMode.BOARD)

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(
            self,
            config=self.score_manager.get_config(),
            reveal_tier_size=self._reveal_tier_size,
            board_font_size=self._board_font_size,
            theme=self._theme,
        )
        if dialog.exec():
            changes = dialog.get_config_changes()
            if changes:
                try:
                    self.score_manager.update_config(**changes)
                except ValueError as exc:
                    show_error(self, "Settings rejected", str(exc))
                    return
            if self.score_manager.get_config().ex_aequo_enabled and not any(
                round_.is_tiebreak_round for round_ in self.score_manager.get_rounds()
            ):
                show_warning(self, "Ex Aequo", EX_AEQUO_NO_TIEBREAK_MESSAGE)
            self._reveal_tier_size = dialog.get_reveal_tier_size()
            self._board_font_size = dialog.get_board_font_size()
            self._theme = dialog.get_theme()
            self._apply_styles()
            self._set_mode(self._mode)

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style(self._theme))
        self.board_panel.apply_font_size(self._board_font_size)
        self.reveal_panel.set_tier_size(self._reveal_tier_size)
        self.reveal_panel.set_theme(self._theme)

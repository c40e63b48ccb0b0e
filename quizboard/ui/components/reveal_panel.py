"""Component for the click-to-reveal ranking ceremony."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quizboard.constants.quiz_constants import DEFAULT_REVEAL_TIER_SIZE
from quizboard.constants.ui_constants import (
    REVEAL_COMPLETE_MESSAGE,
    REVEAL_EMPTY_STATE,
    REVEAL_HINT,
    REVEAL_NEXT_BUTTON,
    REVEAL_RESET_BUTTON,
)
from quizboard.core.services.gradient_color_mapper import podium_color
from quizboard.core.services.reveal_sequencer import RevealSequencer
from quizboard.core.score_manager import ScoreManager
from quizboard.styling.color_palette import Theme
from quizboard.styling.styles import Styles


def _ordinal(rank: int) -> str:
    if 10 <= rank % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(rank % 10, "th")
    return f"{rank}{suffix}"


class RevealPanel(QWidget):
    """UI component that discloses one team per click.

    The ranking is frozen when a reveal starts; later score edits show up
    after "Start Over".
    """

    def __init__(self, score_manager: ScoreManager, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.score_manager = score_manager
        self._tier_size: int = DEFAULT_REVEAL_TIER_SIZE
        self._gradient_enabled: bool = True
        self._theme: Theme = Theme.LIGHT
        self._sequencer = RevealSequencer([], top_tier_size=self._tier_size)
        self._card_labels: list[QLabel] = []

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.title_label = QLabel(f"Top {self._tier_size} Teams", self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.title_label)

        self.hint_label = QLabel(REVEAL_HINT, self)
        self.hint_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.hint_label)

        self.cards_layout = QVBoxLayout()
        layout.addLayout(self.cards_layout, stretch=1)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.reset_button = QPushButton(REVEAL_RESET_BUTTON, self)
        self.reset_button.clicked.connect(self.start_reveal)
        button_row.addWidget(self.reset_button)

        self.next_button = QPushButton(REVEAL_NEXT_BUTTON, self)
        self.next_button.clicked.connect(self._handle_next)
        button_row.addWidget(self.next_button)
        layout.addLayout(button_row)

    def set_tier_size(self, tier_size: int) -> None:
        self._tier_size = max(1, tier_size)
        self.title_label.setText(f"Top {self._tier_size} Teams")

    def set_theme(self, theme: Theme) -> None:
        self._theme = theme
        self._render()

    def start_reveal(self) -> None:
        """Take a fresh ranking and hide every team again."""
        self._gradient_enabled = self.score_manager.get_config().gradient_enabled
        self._sequencer = RevealSequencer(
            self.score_manager.get_ranking(),
            top_tier_size=self._tier_size,
        )
        self._render()

    def mousePressEvent(self, event) -> None:  # noqa: N802 - Qt override
        self._handle_next()
        super().mousePressEvent(event)

    def _handle_next(self) -> None:
        if self._sequencer.advance() is not None:
            self._render()

    def _render(self) -> None:
        for label in self._card_labels:
            self.cards_layout.removeWidget(label)
            label.deleteLater()
        self._card_labels = []

        if self._sequencer.team_count == 0:
            self.hint_label.setText(REVEAL_EMPTY_STATE)
            self.next_button.setEnabled(False)
            return

        for result in self._sequencer.revealed_results():
            color = podium_color(result.rank, self._gradient_enabled)
            label = QLabel(
                f"{_ordinal(result.rank)} place  |  {result.display_nr}. {result.name}  |  "
                f"{result.total:g} points",
                self,
            )
            label.setAlignment(Qt.AlignCenter)
            label.setStyleSheet(
                Styles.get_reveal_card_style(color.to_hex(), result.rank == 1, self._theme)
            )
            self.cards_layout.addWidget(label)
            self._card_labels.append(label)

        complete = self._sequencer.is_complete
        self.hint_label.setText(REVEAL_COMPLETE_MESSAGE if complete else REVEAL_HINT)
        self.next_button.setEnabled(not complete)

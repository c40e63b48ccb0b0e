"""Component for entering the points of one round."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QComboBox,
    QDoubleSpinBox,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quizboard.constants.ui_constants import (
    SCORES_NO_ROUNDS_MESSAGE,
    SCORES_ROUND_LABEL,
    SCORES_SAVE_BUTTON,
    SCORES_SAVED_MESSAGE,
)
from quizboard.core.models import RoundDescriptor
from quizboard.core.score_manager import ScoreManager
from quizboard.ui.dialog_helpers import show_error
from quizboard.utils.form_changes import changed_values


class ScoreEntryPanel(QWidget):
    """UI component for recording every team's points in the selected round.

    The selected round is this panel's own state; it is not persisted.
    """

    def __init__(self, score_manager: ScoreManager, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.score_manager = score_manager
        self._selected_round_id: int | None = None
        self._spinboxes: dict[int, QDoubleSpinBox] = {}
        self._shown_points: dict[int, float] = {}

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        round_row = QHBoxLayout()
        round_row.addWidget(QLabel(SCORES_ROUND_LABEL, self))
        self.round_combo = QComboBox(self)
        self.round_combo.currentIndexChanged.connect(self._handle_round_changed)
        round_row.addWidget(self.round_combo, stretch=1)
        layout.addLayout(round_row)

        self.form_container = QWidget(self)
        self.form_layout = QFormLayout()
        self.form_container.setLayout(self.form_layout)
        layout.addWidget(self.form_container, stretch=1)

        self.status_label = QLabel("", self)
        layout.addWidget(self.status_label)

        self.save_button = QPushButton(SCORES_SAVE_BUTTON, self)
        self.save_button.clicked.connect(self._handle_save)
        layout.addWidget(self.save_button)

    def reload(self, selected_round_id: int | None = None) -> None:
        """Rebuild the round list, keeping the given round selected when it still exists."""
        if selected_round_id is None:
            selected_round_id = self._selected_round_id
        rounds = self.score_manager.get_rounds()

        self.round_combo.blockSignals(True)
        self.round_combo.clear()
        for round_ in rounds:
            suffix = " (tiebreak)" if round_.is_tiebreak_round else ""
            self.round_combo.addItem(f"{round_.sequence_nr}. {round_.title}{suffix}", round_.id)
        self.round_combo.blockSignals(False)

        if not rounds:
            self._selected_round_id = None
            self._populate_form(None)
            self.status_label.setText(SCORES_NO_ROUNDS_MESSAGE)
            self.save_button.setEnabled(False)
            return

        index = self.round_combo.findData(selected_round_id)
        self.round_combo.setCurrentIndex(index if index >= 0 else 0)
        self._handle_round_changed(self.round_combo.currentIndex())

    def _handle_round_changed(self, index: int) -> None:
        round_id = self.round_combo.itemData(index)
        self._selected_round_id = round_id
        round_ = next((r for r in self.score_manager.get_rounds() if r.id == round_id), None)
        self._populate_form(round_)
        self.save_button.setEnabled(round_ is not None)
        self.status_label.setText("")

    def _populate_form(self, round_: RoundDescriptor | None) -> None:
        while self.form_layout.rowCount():
            self.form_layout.removeRow(0)
        self._spinboxes = {}
        self._shown_points = {}
        if round_ is None:
            return

        for team in self.score_manager.get_teams():
            spinbox = QDoubleSpinBox(self.form_container)
            spinbox.setRange(0, round_.max_score)
            spinbox.setDecimals(1)
            record = self.score_manager.get_score(round_.id, team.id)
            spinbox.setValue(record.points if record is not None else 0)
            label = f"{team.display_nr}. {team.name}"
            if team.excluded:
                label += " (excluded)"
            self.form_layout.addRow(label, spinbox)
            self._spinboxes[team.id] = spinbox
            self._shown_points[team.id] = spinbox.value()

    def _handle_save(self) -> None:
        if self._selected_round_id is None:
            return
        current = {team_id: spinbox.value() for team_id, spinbox in self._spinboxes.items()}
        # Untouched teams keep their stored points, which the spin box may display rounded.
        edited = changed_values(self._shown_points, current)
        try:
            for team_id, points in edited.items():
                self.score_manager.record_score(self._selected_round_id, team_id, points)
                self._shown_points[team_id] = points
        except (KeyError, ValueError) as exc:
            show_error(self, "Scores rejected", str(exc))
            return
        self.status_label.setText(
            SCORES_SAVED_MESSAGE.format(round_title=self.round_combo.currentText())
        )

"""Component for the tabular scoreboard view."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QAbstractItemView,
    QHeaderView,
    QLabel,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from quizboard.constants.ui_constants import BOARD_ROW_ALPHA
from quizboard.core.leaderboard_views import Board
from quizboard.core.score_manager import ScoreManager
from quizboard.styling.styles import Styles


def _format_points(value: float) -> str:
    return f"{value:.0f}" if float(value).is_integer() else f"{value:.2f}"


class BoardPanel(QWidget):
    """UI component rendering ranks, per-round points and totals."""

    def __init__(self, score_manager: ScoreManager, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.score_manager = score_manager
        self._last_board: Board | None = None

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.title_label = QLabel("Scoreboard", self)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.title_label)

        self.table = QTableWidget(self)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.setSelectionMode(QAbstractItemView.NoSelection)
        self.table.verticalHeader().setVisible(False)
        layout.addWidget(self.table, stretch=1)

        self.max_label = QLabel("", self)
        layout.addWidget(self.max_label)

    def refresh(self) -> None:
        board = self.score_manager.get_board()
        if board == self._last_board:
            return
        self._last_board = board

        headers = ["Rank", "Nr", "Team"]
        headers.extend(round_.title for round_ in board.rounds)
        if board.tiebreak_round is not None:
            headers.append(f"{board.tiebreak_round.title} (tiebreak)")
        headers.append("Total")

        self.table.clear()
        self.table.setColumnCount(len(headers))
        self.table.setHorizontalHeaderLabels(headers)
        self.table.setRowCount(len(board.rows))

        for row_index, row in enumerate(board.rows):
            cells = [str(row.result.rank), str(row.result.display_nr), row.result.name]
            cells.extend(_format_points(points) for points in row.round_points)
            if board.tiebreak_round is not None:
                cells.append(_format_points(row.result.tiebreak_value))
            cells.append(_format_points(row.result.total))

            background = QColor(row.color.red, row.color.green, row.color.blue)
            background.setAlphaF(BOARD_ROW_ALPHA)
            for column, text in enumerate(cells):
                item = QTableWidgetItem(text)
                item.setBackground(background)
                if column != 2:
                    item.setTextAlignment(Qt.AlignCenter)
                self.table.setItem(row_index, column, item)

        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeToContents)
        self.table.horizontalHeader().setSectionResizeMode(2, QHeaderView.Stretch)

    def apply_font_size(self, font_size: int) -> None:
        self.table.setStyleSheet(f"font-size: {font_size}pt;")

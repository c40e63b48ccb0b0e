"""Settings dialog for configuring quiz scoring and display preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox,
    QDialog,
    QDoubleSpinBox,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)

from quizboard.core.models import QuizConfig
from quizboard.styling.color_palette import Theme
from quizboard.utils.form_changes import changed_values


class SettingsDialog(QDialog):
    """Dialog for editing the quiz configuration and console preferences."""

    def __init__(
        self,
        parent=None,
        config: QuizConfig | None = None,
        reveal_tier_size: int = 5,
        board_font_size: int = 14,
        theme: Theme = Theme.LIGHT,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(420)

        self._config = config or QuizConfig()
        self._reveal_tier_size = max(1, min(10, reveal_tier_size))
        self._board_font_size = board_font_size
        self._theme = theme

        self._build_ui()
        self._shown_config = self._config_form_values()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Scale conversion group
        scale_group = QGroupBox("Scale Conversion")
        scale_layout = QVBoxLayout()
        scale_group.setLayout(scale_layout)

        self.scale_checkbox = QCheckBox("Convert every round to a standard scale")
        self.scale_checkbox.setToolTip(
            "Rounds flagged 'exclude from scale' and the tiebreak round keep their raw points."
        )
        self.scale_checkbox.setChecked(self._config.scale_conversion_enabled)
        scale_layout.addWidget(self.scale_checkbox)

        scale_row = QHBoxLayout()
        scale_row.addWidget(QLabel("Standard scale (points per round):"))
        scale_row.addStretch()
        self.scale_spinbox = QDoubleSpinBox()
        self.scale_spinbox.setRange(0, 1000)
        self.scale_spinbox.setDecimals(1)
        self.scale_spinbox.setValue(self._config.standard_scale or 0)
        scale_row.addWidget(self.scale_spinbox)
        scale_layout.addLayout(scale_row)

        layout.addWidget(scale_group)

        # Ex Aequo group
        ex_aequo_group = QGroupBox("Ex Aequo Tiebreak")
        ex_aequo_layout = QVBoxLayout()
        ex_aequo_group.setLayout(ex_aequo_layout)

        self.ex_aequo_checkbox = QCheckBox("Break ties by closeness to a target value")
        self.ex_aequo_checkbox.setChecked(self._config.ex_aequo_enabled)
        ex_aequo_layout.addWidget(self.ex_aequo_checkbox)

        target_row = QHBoxLayout()
        target_row.addWidget(QLabel("Target value:"))
        target_row.addStretch()
        self.target_spinbox = QDoubleSpinBox()
        self.target_spinbox.setRange(-1_000_000, 1_000_000)
        self.target_spinbox.setDecimals(2)
        self.target_spinbox.setValue(self._config.ex_aequo_target_value or 0)
        target_row.addWidget(self.target_spinbox)
        ex_aequo_layout.addLayout(target_row)

        layout.addWidget(ex_aequo_group)

        # Display settings group
        display_group = QGroupBox("Display Settings")
        display_layout = QVBoxLayout()
        display_group.setLayout(display_layout)

        self.gradient_checkbox = QCheckBox("Color teams by rank (green to red)")
        self.gradient_checkbox.setChecked(self._config.gradient_enabled)
        display_layout.addWidget(self.gradient_checkbox)

        tier_row = QHBoxLayout()
        tier_label = QLabel("Reveal tier size (top N):")
        tier_label.setToolTip("Teams revealed one by one, worst to best, before the rest of the field.")
        tier_row.addWidget(tier_label)
        tier_row.addStretch()
        self.tier_spinbox = QSpinBox()
        self.tier_spinbox.setRange(1, 10)
        self.tier_spinbox.setValue(self._reveal_tier_size)
        tier_row.addWidget(self.tier_spinbox)
        display_layout.addLayout(tier_row)

        font_row = QHBoxLayout()
        font_row.addWidget(QLabel("Board font size:"))
        font_row.addStretch()
        self.font_spinbox = QSpinBox()
        self.font_spinbox.setRange(8, 32)
        self.font_spinbox.setValue(self._board_font_size)
        self.font_spinbox.setSuffix(" pt")
        font_row.addWidget(self.font_spinbox)
        display_layout.addLayout(font_row)

        self.dark_theme_checkbox = QCheckBox("Dark theme")
        self.dark_theme_checkbox.setChecked(self._theme == Theme.DARK)
        display_layout.addWidget(self.dark_theme_checkbox)

        layout.addWidget(display_group)

        # Buttons
        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def _config_form_values(self) -> dict[str, object]:
        return {
            "scale_conversion_enabled": self.scale_checkbox.isChecked(),
            "standard_scale": self.scale_spinbox.value(),
            "gradient_enabled": self.gradient_checkbox.isChecked(),
            "ex_aequo_enabled": self.ex_aequo_checkbox.isChecked(),
            "ex_aequo_target_value": self.target_spinbox.value(),
        }

    def get_config_changes(self) -> dict[str, object]:
        """Return the edited configuration fields as keyword arguments for ``update_config``.

        Fields left untouched are omitted, so values the spin boxes display
        rounded (or ``None`` shown as 0) are never written back.
        """
        changes = changed_values(self._shown_config, self._config_form_values())
        if "standard_scale" in changes and changes["standard_scale"] <= 0:
            changes["standard_scale"] = None
        return changes

    def get_reveal_tier_size(self) -> int:
        return self.tier_spinbox.value()

    def get_board_font_size(self) -> int:
        return self.font_spinbox.value()

    def get_theme(self) -> Theme:
        return Theme.DARK if self.dark_theme_checkbox.isChecked() else Theme.LIGHT

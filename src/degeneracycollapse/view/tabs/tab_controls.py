"""
Constraint Controls
Checkbox for the auxiliary penalty and the α slider; writes to SimulatorState.
"""
from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGroupBox, QCheckBox, QLabel, QSlider
)

from degeneracycollapse.config import ALPHA_MIN, ALPHA_MAX, ALPHA_STEP
from degeneracycollapse.model.i18n import Texts
from degeneracycollapse.model.state import SimulatorState


def alpha_to_ticks(alpha: float) -> int:
    return int(round((alpha - ALPHA_MIN) / ALPHA_STEP))


def ticks_to_alpha(ticks: int) -> float:
    return ALPHA_MIN + ticks * ALPHA_STEP


class ConstraintControlPanel(QWidget):
    """
    Checkbox for the auxiliary constraint and the α slider.

    QSlider is integer-only, so α is stored as ticks of ALPHA_STEP.
    Writes straight to the SimulatorState; the state emits the render trigger.
    """

    def __init__(self, state: SimulatorState, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.state = state

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.group = QGroupBox("")
        group_layout = QVBoxLayout(self.group)

        self.chk_enabled = QCheckBox()
        self.chk_enabled.setChecked(self.state.enabled)
        self.chk_enabled.toggled.connect(self.on_enabled_toggled)
        group_layout.addWidget(self.chk_enabled)

        # Caption row: "Constraint strength (α): 0.000"
        hbox_caption = QHBoxLayout()
        self.lbl_alpha_caption = QLabel()
        hbox_caption.addWidget(self.lbl_alpha_caption)
        self.lbl_alpha_value = QLabel()
        self.lbl_alpha_value.setStyleSheet("font-family: monospace;")
        hbox_caption.addWidget(self.lbl_alpha_value)
        hbox_caption.addStretch()
        group_layout.addLayout(hbox_caption)

        self.slider = QSlider(Qt.Orientation.Horizontal)
        self.slider.setRange(0, alpha_to_ticks(ALPHA_MAX))
        self.slider.setSingleStep(1)
        self.slider.setPageStep(50)  # 0.05
        self.slider.setValue(alpha_to_ticks(self.state.alpha))
        self.slider.setEnabled(self.state.enabled)
        self.slider.valueChanged.connect(self.on_slider_changed)
        group_layout.addWidget(self.slider)

        layout.addWidget(self.group)

        self._update_alpha_label()

    def on_enabled_toggled(self, checked: bool) -> None:
        self.slider.setEnabled(checked)
        self.state.set_enabled(checked)

    def on_slider_changed(self, ticks: int) -> None:
        self.state.set_alpha(ticks_to_alpha(ticks))
        self._update_alpha_label()

    def _update_alpha_label(self) -> None:
        self.lbl_alpha_value.setText(f"{self.state.alpha:.3f}")

    def retranslate(self, texts: Texts) -> None:
        self.chk_enabled.setText(texts.enable_constraint)
        self.lbl_alpha_caption.setText(f"{texts.constraint_strength}:")

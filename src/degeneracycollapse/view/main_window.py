"""
Main Application Window
=======================
The primary GUI container: explanation text, controls and ring profile on the
left, the heatmap canvas on the right.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects SimulatorState.changed to a synchronous render pass
   and pushes the result to the canvas and the ring profile plot.
"""
from __future__ import annotations

import logging
import math

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QSplitter, QGroupBox, QLabel, QPushButton
)

from degeneracycollapse.config import CANVAS_WIDTH, CANVAS_HEIGHT
from degeneracycollapse.controller.renderer import FieldRenderer, RenderResult
from degeneracycollapse.model.field import Grid
from degeneracycollapse.model.i18n import FORMULA, Language, texts_for
from degeneracycollapse.model.params import RenderParams
from degeneracycollapse.model.state import SimulatorState
from degeneracycollapse.view.tabs.tab_controls import ConstraintControlPanel
from degeneracycollapse.view.widgets.heatmap import HeatmapCanvas
from degeneracycollapse.view.widgets.ring_profile import RingProfilePlot

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, state: SimulatorState, renderer: FieldRenderer | None = None) -> None:
        super().__init__()
        self.state: SimulatorState = state
        self.renderer: FieldRenderer = renderer or FieldRenderer(grid=Grid(CANVAS_WIDTH, CANVAS_HEIGHT))

        self.resize(1200, 720)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)

        main_layout = QVBoxLayout(main_widget)
        main_layout.setContentsMargins(12, 12, 12, 12)

        # --- 1. HEADER: title + language toggle ---
        header = QHBoxLayout()
        self.lbl_title = QLabel()
        self.lbl_title.setStyleSheet("font-size: 22pt; font-weight: 300;")
        header.addWidget(self.lbl_title, 1)

        self.btn_language = QPushButton()
        self.btn_language.setFixedWidth(60)
        self.btn_language.clicked.connect(self.state.toggle_language)
        header.addWidget(self.btn_language, 0, Qt.AlignmentFlag.AlignTop)
        main_layout.addLayout(header)

        # --- 2. SPLITTER (CONTENT AREA) ---
        splitter = QSplitter(Qt.Orientation.Horizontal)
        main_layout.addWidget(splitter, 1)

        # --- LEFT SIDE: explanation, controls, ring profile ---
        left = QWidget()
        left_layout = QVBoxLayout(left)
        left_layout.setContentsMargins(0, 0, 0, 0)

        self.grp_explanation = QGroupBox("")
        self._explanation_layout = QVBoxLayout(self.grp_explanation)
        self._explanation_labels: list[QLabel] = []
        left_layout.addWidget(self.grp_explanation)

        self.controls = ConstraintControlPanel(self.state)
        left_layout.addWidget(self.controls)

        self.ring_plot = RingProfilePlot()
        left_layout.addWidget(self.ring_plot, 1)

        self.lbl_formula = QLabel(FORMULA)
        self.lbl_formula.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.lbl_formula.setStyleSheet("color: #6b7280;")
        left_layout.addWidget(self.lbl_formula)

        splitter.addWidget(left)

        # --- RIGHT SIDE: heatmap canvas ---
        right = QWidget()
        right_layout = QVBoxLayout(right)
        self.canvas = HeatmapCanvas(self.renderer.grid.width, self.renderer.grid.height)
        right_layout.addWidget(self.canvas, 0, Qt.AlignmentFlag.AlignCenter)
        splitter.addWidget(right)

        splitter.setSizes([550, 650])

        # --- SIGNAL CONNECTIONS ---
        self.state.changed.connect(self.on_params_changed)
        self.state.language_changed.connect(self.retranslate_ui)

        # Initial Render
        self.retranslate_ui(self.state.language)
        self.on_params_changed(self.state.snapshot())

    def on_params_changed(self, params: RenderParams) -> None:
        """Slot called whenever alpha, the constraint flag or the language changes."""
        result = self.renderer.render(params)
        self.canvas.set_result(result)
        self.ring_plot.set_profile(params)
        self._show_window_status(result, params.language)

    def retranslate_ui(self, language: Language) -> None:
        """Refresh all user-visible strings after a language change."""
        texts = texts_for(language)

        self.setWindowTitle(texts.title)
        self.lbl_title.setText(texts.title)
        self.btn_language.setText(language.value.upper())

        for label in self._explanation_labels:
            self._explanation_layout.removeWidget(label)
            label.deleteLater()
        self._explanation_labels = []
        for paragraph in texts.explanation:
            label = QLabel(paragraph)
            label.setWordWrap(True)
            self._explanation_layout.addWidget(label)
            self._explanation_labels.append(label)

        self.controls.retranslate(texts)
        self.ring_plot.retranslate(texts)

    def _show_window_status(self, result: RenderResult, language: Language) -> None:
        if math.isnan(result.min_loss):
            self.statusBar().clearMessage()
            return
        template = texts_for(language).window_status
        self.statusBar().showMessage(template.format(low=result.min_loss, high=result.clamped_max))

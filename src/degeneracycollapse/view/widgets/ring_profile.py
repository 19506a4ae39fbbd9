"""Plot of the loss restricted to the unit ring."""
from __future__ import annotations

import logging

import numpy as np
import pyqtgraph as pg
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QVBoxLayout

from degeneracycollapse.config import ALPHA_MAX
from degeneracycollapse.model.field import ring_profile
from degeneracycollapse.model.i18n import Texts
from degeneracycollapse.model.params import RenderParams

logger = logging.getLogger(__name__)


class RingProfilePlot(QWidget):
    """
    L(cos θ, sin θ) for θ in [-π, π].

    Flat at zero while the constraint is off; becomes α·cos²θ when it is on,
    with minima at θ = ±π/2, i.e. the points (0, ±1).
    """

    CURVE_COLOR = '#1f77b4'
    MARKER_COLOR = '#d62728'

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.plot_widget = pg.PlotWidget()
        self.plot_widget.setBackground('w')
        self.plot_widget.showGrid(x=True, y=True, alpha=0.3)
        self.plot_widget.getAxis('bottom').setPen('k')
        self.plot_widget.getAxis('left').setPen('k')
        self.plot_widget.getAxis('bottom').setTextPen('k')
        self.plot_widget.getAxis('left').setTextPen('k')
        self.plot_widget.setMouseEnabled(x=False, y=False)
        self.plot_widget.setXRange(-np.pi, np.pi, padding=0.02)
        self.plot_widget.setYRange(0.0, ALPHA_MAX * 1.1, padding=0.05)
        self.plot_widget.setMinimumHeight(180)
        layout.addWidget(self.plot_widget)

        self.curve = self.plot_widget.plot([], [], pen=pg.mkPen(color=self.CURVE_COLOR, width=2))

        # Collapse targets (0, ±1)
        for pos in (-np.pi / 2, np.pi / 2):
            marker = pg.InfiniteLine(
                pos=pos,
                angle=90,
                pen=pg.mkPen(color=self.MARKER_COLOR, width=1, style=Qt.PenStyle.DashLine),
            )
            self.plot_widget.addItem(marker)

    def set_profile(self, params: RenderParams) -> None:
        theta, loss = ring_profile(params.alpha, params.enabled)
        self.curve.setData(theta, loss)

    def curve_data(self) -> tuple[np.ndarray, np.ndarray]:
        """The (theta, loss) arrays currently plotted."""
        return self.curve.getData()

    def retranslate(self, texts: Texts) -> None:
        self.plot_widget.setTitle(texts.ring_profile_title, color='black', size='11pt')
        self.plot_widget.setLabel('bottom', texts.ring_angle_label, color='black')
        self.plot_widget.setLabel('left', texts.ring_loss_label, color='black')

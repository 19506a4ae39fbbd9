"""
Heatmap Canvas
Fixed-size raster surface that displays a RenderResult.
"""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np
from PySide6.QtCore import QPoint, QPointF, QSize
from PySide6.QtGui import QColor, QFont, QImage, QPainter, QPen
from PySide6.QtWidgets import QWidget, QSizePolicy

from degeneracycollapse.config import CANVAS_WIDTH, CANVAS_HEIGHT
from degeneracycollapse.controller.renderer import RenderResult

logger = logging.getLogger(__name__)


def rgba_to_qimage(image: np.ndarray) -> QImage:
    """Wrap a (h, w, 4) uint8 buffer in a QImage that owns its own copy of the pixels."""
    buf = np.ascontiguousarray(image, dtype=np.uint8)
    height, width = buf.shape[:2]
    qimg = QImage(buf.data, width, height, 4 * width, QImage.Format.Format_RGBA8888)
    # QImage only borrows `buf`; detach before it goes out of scope
    return qimg.copy()


class HeatmapCanvas(QWidget):
    """
    Display surface for the loss heatmap.

    The RGBA buffer is converted once per result; the overlay (crosshair and
    axis labels) is painted on top in every paintEvent.
    """

    def __init__(
        self,
        width: int = CANVAS_WIDTH,
        height: int = CANVAS_HEIGHT,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._canvas_size = QSize(width, height)
        self.setFixedSize(self._canvas_size)
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)

        self._result: Optional[RenderResult] = None
        self._image: Optional[QImage] = None

    def sizeHint(self) -> QSize:
        return self._canvas_size

    def result(self) -> Optional[RenderResult]:
        return self._result

    def image(self) -> Optional[QImage]:
        return self._image

    def set_result(self, result: RenderResult) -> None:
        """Publish a complete render and schedule a repaint."""
        self._result = result
        self._image = None if result.is_empty else rgba_to_qimage(result.image)
        self.update()

    def paintEvent(self, event) -> None:
        if self._result is None or self._image is None:
            return

        painter = QPainter()
        if not painter.begin(self):
            logger.debug("Canvas surface not available, skipping paint.")
            return

        try:
            painter.drawImage(QPoint(0, 0), self._image)
            self._paint_overlay(painter)
        finally:
            painter.end()

    def _paint_overlay(self, painter: QPainter) -> None:
        overlay = self._result.overlay

        for line in overlay.lines:
            pen = QPen(QColor(line.color))
            pen.setWidth(line.width)
            painter.setPen(pen)
            painter.drawLine(QPointF(line.x0, line.y0), QPointF(line.x1, line.y1))

        for label in overlay.labels:
            font = QFont(label.font_family)
            font.setStyleHint(QFont.StyleHint.SansSerif)
            font.setPixelSize(label.font_size_px)
            painter.setFont(font)
            painter.setPen(QColor(label.color))
            painter.drawText(QPointF(label.x, label.y), label.text)

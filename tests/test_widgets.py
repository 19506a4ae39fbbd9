import logging

import numpy as np
import pytest

from degeneracycollapse.controller.renderer import FieldRenderer, render
from degeneracycollapse.model.field import Domain, Grid
from degeneracycollapse.model.params import RenderParams
from degeneracycollapse.model.state import SimulatorState
from degeneracycollapse.view.main_window import MainWindow
from degeneracycollapse.view.tabs.tab_controls import ConstraintControlPanel, ticks_to_alpha
from degeneracycollapse.view.widgets.heatmap import HeatmapCanvas, rgba_to_qimage
from degeneracycollapse.view.widgets.ring_profile import RingProfilePlot


def test_rgba_to_qimage_preserves_pixels():
    result = render(8, 6, Domain(), 0.3, True, "en")
    qimg = rgba_to_qimage(result.image)
    assert (qimg.width(), qimg.height()) == (8, 6)
    for px, py in [(0, 0), (7, 5), (4, 3)]:
        color = qimg.pixelColor(px, py)
        r, g, b, a = result.image[py, px]
        assert (color.red(), color.green(), color.blue(), color.alpha()) == (r, g, b, a)


class TestHeatmapCanvas:
    def test_set_result(self, qtbot):
        canvas = HeatmapCanvas(16, 16)
        qtbot.addWidget(canvas)
        result = render(16, 16, Domain(), 0.0, False, "en")
        canvas.set_result(result)
        assert canvas.result() is result
        assert canvas.image() is not None
        assert (canvas.width(), canvas.height()) == (16, 16)

    def test_paints_image(self, qtbot):
        canvas = HeatmapCanvas(16, 16)
        qtbot.addWidget(canvas)
        canvas.set_result(render(16, 16, Domain(), 0.0, False, "en"))
        grabbed = canvas.grab().toImage()
        color = grabbed.pixelColor(0, 15)
        assert (color.red(), color.green(), color.blue()) == (255, 0, 0)

    def test_empty_result_skips_paint(self, qtbot):
        canvas = HeatmapCanvas(16, 16)
        qtbot.addWidget(canvas)
        canvas.set_result(render(0, 0, Domain(), 0.0, False, "en"))
        assert canvas.image() is None
        canvas.grab()

    def test_paint_without_surface_is_skipped(self, qtbot, caplog):
        canvas = HeatmapCanvas(16, 16)
        qtbot.addWidget(canvas)
        canvas.set_result(render(16, 16, Domain(), 0.0, False, "en"))
        caplog.set_level(logging.DEBUG, logger="degeneracycollapse.view.widgets.heatmap")
        # QPainter.begin() fails outside a real paint event
        canvas.paintEvent(None)
        assert "Canvas surface not available" in caplog.text


class TestRingProfilePlot:
    def test_profile_follows_params(self, qtbot):
        plot = RingProfilePlot()
        qtbot.addWidget(plot)

        plot.set_profile(RenderParams(alpha=0.4, enabled=True))
        _, loss = plot.curve_data()
        assert loss.max() == pytest.approx(0.4)

        plot.set_profile(RenderParams(alpha=0.4, enabled=False))
        _, loss = plot.curve_data()
        np.testing.assert_allclose(loss, 0.0, atol=1e-12)


class TestConstraintControlPanel:
    def test_slider_writes_alpha(self, qtbot):
        state = SimulatorState()
        panel = ConstraintControlPanel(state)
        qtbot.addWidget(panel)

        panel.slider.setValue(250)
        assert state.alpha == pytest.approx(0.25)
        assert panel.lbl_alpha_value.text() == "0.250"

        panel.slider.setValue(panel.slider.maximum())
        assert state.alpha == pytest.approx(0.5)

    def test_checkbox_disables_slider(self, qtbot):
        state = SimulatorState()
        panel = ConstraintControlPanel(state)
        qtbot.addWidget(panel)

        panel.chk_enabled.setChecked(False)
        assert not state.enabled
        assert not panel.slider.isEnabled()

    def test_tick_mapping(self):
        assert ticks_to_alpha(0) == 0.0
        assert ticks_to_alpha(1) == pytest.approx(0.001)


class TestMainWindow:
    @pytest.fixture
    def window(self, qtbot):
        state = SimulatorState()
        win = MainWindow(state, renderer=FieldRenderer(grid=Grid(40, 40)))
        qtbot.addWidget(win)
        return win

    def test_initial_render(self, window):
        result = window.canvas.result()
        assert result is not None
        assert result.image.shape == (40, 40, 4)
        assert window.windowTitle() == "Degeneracy Collapse Simulator"
        assert window.btn_language.text() == "EN"

    def test_slider_triggers_render(self, window):
        before = window.canvas.result().image.copy()
        window.controls.slider.setValue(500)
        after = window.canvas.result().image
        assert not np.array_equal(before, after)

    def test_language_toggle(self, window):
        window.btn_language.click()
        assert window.state.language.value == "ru"
        assert window.btn_language.text() == "RU"
        assert window.windowTitle() == "Симулятор коллапса вырожденных решений"
        assert window.controls.chk_enabled.text() == "Включить вспомогательное ограничение"
        assert window.canvas.result().overlay.labels[0].text == "x"

    def test_status_shows_window(self, window):
        assert window.statusBar().currentMessage() == "Color range: [0.0000, 0.5000]"

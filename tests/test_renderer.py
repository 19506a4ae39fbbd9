import numpy as np
import pytest

from degeneracycollapse.controller.renderer import (
    FieldRenderer, Overlay, build_overlay, colorize, normalize, render, sample_field
)
from degeneracycollapse.model.field import Domain, Grid
from degeneracycollapse.model.i18n import Language
from degeneracycollapse.model.params import RenderParams


class TestNormalize:
    def test_window_clamps_high_losses(self):
        losses = np.array([[0.0, 0.25, 2.0]])
        normalized, low, high, clamped = normalize(losses, window=0.5)
        np.testing.assert_allclose(normalized, [[0.0, 0.5, 1.0]])
        assert (low, high, clamped) == (0.0, 2.0, 0.5)

    def test_narrow_field_uses_full_range(self):
        losses = np.array([[1.0, 1.1, 1.2]])
        normalized, low, high, clamped = normalize(losses, window=0.5)
        np.testing.assert_allclose(normalized, [[0.0, 0.5, 1.0]])
        assert clamped == high == 1.2

    def test_flat_field_maps_to_zero(self):
        normalized, low, high, clamped = normalize(np.full((3, 3), 2.0))
        np.testing.assert_array_equal(normalized, np.zeros((3, 3)))
        assert low == high == clamped == 2.0

    def test_empty_matrix(self):
        normalized, low, high, clamped = normalize(np.empty((0, 4)))
        assert normalized.shape == (0, 4)
        assert np.isnan(low) and np.isnan(high) and np.isnan(clamped)

    def test_values_in_unit_interval(self, small_grid, domain):
        for alpha, enabled in [(0.0, False), (0.25, True), (0.5, True)]:
            normalized, *_ = normalize(sample_field(small_grid, domain, alpha, enabled))
            assert normalized.min() >= 0.0
            assert normalized.max() <= 1.0


class TestColorize:
    def test_channel_formulas(self):
        rgba = colorize(np.array([0.0, 0.5, 1.0]))
        assert rgba.dtype == np.uint8
        np.testing.assert_array_equal(rgba, [
            [0, 100, 255, 255],
            [127, 50, 127, 255],
            [255, 0, 0, 255],
        ])

    def test_floors_rather_than_rounds(self):
        rgba = colorize(np.array([0.999]))
        assert rgba[0, 0] == 254
        assert rgba[0, 1] == 0
        assert rgba[0, 2] == 0


class TestOverlay:
    def test_crosshair_and_labels(self):
        overlay = build_overlay(500, 500, Language.EN)
        assert len(overlay.lines) == 2
        vertical, horizontal = overlay.lines
        assert (vertical.x0, vertical.y0, vertical.x1, vertical.y1) == (250.0, 0.0, 250.0, 500.0)
        assert (horizontal.x0, horizontal.y0, horizontal.x1, horizontal.y1) == (0.0, 250.0, 500.0, 250.0)
        assert all(line.color == "#ffffff" and line.width == 1 for line in overlay.lines)

        x_label, y_label = overlay.labels
        assert (x_label.text, x_label.x, x_label.y) == ("x", 485.0, 245.0)
        assert (y_label.text, y_label.x, y_label.y) == ("y", 255.0, 15.0)
        assert x_label.font_size_px == 12

    def test_language_only_changes_text(self):
        en = build_overlay(300, 200, "en")
        ru = build_overlay(300, 200, "ru")
        assert en.lines == ru.lines
        assert [(lbl.x, lbl.y) for lbl in en.labels] == [(lbl.x, lbl.y) for lbl in ru.labels]

    def test_empty_for_empty_grid(self):
        assert build_overlay(0, 10, "en").is_empty


class TestFieldRenderer:
    def test_invalid_window(self):
        with pytest.raises(ValueError):
            FieldRenderer(window=0.0)

    def test_image_shape_and_alpha(self, small_grid):
        result = FieldRenderer(grid=small_grid).render(RenderParams(alpha=0.3, enabled=True))
        assert result.image.shape == (100, 100, 4)
        assert result.image.dtype == np.uint8
        assert (result.image[..., 3] == 255).all()
        assert (result.width, result.height) == (100, 100)

    def test_deterministic(self, small_grid):
        renderer = FieldRenderer(grid=small_grid)
        params = RenderParams(alpha=0.123, enabled=True, language=Language.RU)
        first = renderer.render(params)
        second = renderer.render(params)
        assert first.image.tobytes() == second.image.tobytes()
        assert first.overlay == second.overlay

    def test_default_window_statistics(self, small_grid):
        result = FieldRenderer(grid=small_grid).render(RenderParams(alpha=0.0, enabled=False))
        # (0, ±1) and (±1, 0) lie exactly on the 100x100 grid
        assert result.min_loss == 0.0
        assert result.clamped_max == 0.5
        assert result.max_loss == pytest.approx(49.0)

    def test_disabled_constraint_ignores_alpha(self, small_grid):
        renderer = FieldRenderer(grid=small_grid)
        a = renderer.render(RenderParams(alpha=0.5, enabled=False))
        b = renderer.render(RenderParams(alpha=0.0, enabled=False))
        np.testing.assert_array_equal(a.image, b.image)

    def test_constraint_changes_image(self, small_grid):
        renderer = FieldRenderer(grid=small_grid)
        a = renderer.render(RenderParams(alpha=0.5, enabled=True))
        b = renderer.render(RenderParams(alpha=0.0, enabled=True))
        assert not np.array_equal(a.image, b.image)

    def test_ring_pixels_are_blue(self, small_grid):
        result = FieldRenderer(grid=small_grid).render(RenderParams(alpha=0.0, enabled=False))
        # px=50 -> x=0, py=25 -> y=1
        np.testing.assert_array_equal(result.image[25, 50], [0, 100, 255, 255])
        # top-left corner (-2, 2) saturates red
        np.testing.assert_array_equal(result.image[0, 0], [255, 0, 0, 255])

    @pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (0, 0)])
    def test_empty_grid(self, domain, width, height):
        result = render(width, height, domain, 0.2, True, "en")
        assert result.is_empty
        assert result.image.shape == (height, width, 4)
        assert result.overlay == Overlay()
        assert np.isnan(result.min_loss)

    def test_single_pixel_is_degenerate(self, domain):
        result = render(1, 1, domain, 0.2, True, "en")
        assert result.min_loss == result.max_loss == result.clamped_max
        np.testing.assert_array_equal(result.image[0, 0], [0, 100, 255, 255])

    def test_module_render_matches_renderer(self, domain):
        direct = FieldRenderer(grid=Grid(20, 30), domain=domain).render(
            RenderParams(alpha=0.2, enabled=True, language=Language.EN)
        )
        wrapped = render(20, 30, domain, 0.2, True, "en")
        np.testing.assert_array_equal(direct.image, wrapped.image)
        assert direct.overlay == wrapped.overlay

    def test_custom_domain(self):
        result = render(10, 10, Domain(0.0, 1.0, 0.0, 1.0), 0.0, False, "en")
        assert result.image.shape == (10, 10, 4)
        # Bottom-left pixel (0, 0.1) is the farthest from the ring in this domain
        assert result.max_loss == pytest.approx((0.01 - 1.0) ** 2)


class TestScenarios:
    def test_four_by_four_ring_beats_corners(self, domain):
        grid = Grid(4, 4)
        losses = sample_field(grid, domain, 0.0, False)
        x, y = grid.coordinates(domain)
        distance_to_ring = np.abs(x ** 2 + y ** 2 - 1.0)
        nearest = losses[distance_to_ring == distance_to_ring.min()]
        corners = losses[[0, 0, -1, -1], [0, -1, 0, -1]]
        assert nearest.size >= 2
        assert nearest.max() < corners.min()

    def test_strong_constraint_minimum_near_vertical_axis(self, small_grid, domain):
        losses = sample_field(small_grid, domain, 0.5, True)
        x, y = small_grid.coordinates(domain)
        row, col = np.unravel_index(np.argmin(losses), losses.shape)
        point = np.array([x[row, col], y[row, col]])

        to_vertical = min(np.hypot(*(point - [0.0, 1.0])), np.hypot(*(point - [0.0, -1.0])))
        to_horizontal = min(np.hypot(*(point - [1.0, 0.0])), np.hypot(*(point - [-1.0, 0.0])))
        assert to_vertical < to_horizontal

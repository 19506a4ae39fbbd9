"""
Field Renderer
==============
Evaluates the loss field on a pixel grid and maps it onto an RGBA image.

The render is a two-pass process:
    1. Sample every pixel and reduce to (min_loss, max_loss).
    2. Normalize into the window [min_loss, min(max_loss, min_loss + window)]
       and map to color: blue for low loss, red for high loss.

Pass 2 depends on the complete field, so the full sample matrix is buffered.
Nothing is cached between calls.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from degeneracycollapse.config import NORMALIZATION_WINDOW
from degeneracycollapse.model.field import Domain, Grid, loss_field
from degeneracycollapse.model.i18n import Language, texts_for
from degeneracycollapse.model.params import RenderParams

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

OVERLAY_COLOR = "#ffffff"
LABEL_FONT_FAMILY = "sans-serif"
LABEL_FONT_SIZE_PX = 12


# ==========================================
# RESULT STRUCTURES
# ==========================================

@dataclass(frozen=True)
class OverlayLine:
    x0: float
    y0: float
    x1: float
    y1: float
    color: str = OVERLAY_COLOR
    width: int = 1


@dataclass(frozen=True)
class OverlayLabel:
    text: str
    x: float
    y: float  # baseline
    color: str = OVERLAY_COLOR
    font_family: str = LABEL_FONT_FAMILY
    font_size_px: int = LABEL_FONT_SIZE_PX


@dataclass(frozen=True)
class Overlay:
    """Draw instructions painted on top of the heatmap image."""
    lines: tuple[OverlayLine, ...] = ()
    labels: tuple[OverlayLabel, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.lines and not self.labels


@dataclass(frozen=True)
class RenderResult:
    """
    Output of one render pass.

    Attributes:
        image: (height, width, 4) uint8 RGBA buffer, row-major, top-left origin.
        overlay: Crosshair and axis labels.
        min_loss: Smallest sampled loss (NaN for an empty grid).
        max_loss: Largest sampled loss (NaN for an empty grid).
        clamped_max: Upper end of the normalization window (NaN for an empty grid).
    """
    image: npt.NDArray[np.uint8]
    overlay: Overlay = field(default_factory=Overlay)
    min_loss: float = math.nan
    max_loss: float = math.nan
    clamped_max: float = math.nan

    @property
    def width(self) -> int:
        return int(self.image.shape[1])

    @property
    def height(self) -> int:
        return int(self.image.shape[0])

    @property
    def is_empty(self) -> bool:
        return self.image.size == 0


# ==========================================
# PASSES
# ==========================================

def sample_field(
    grid: Grid,
    domain: Domain,
    alpha: float,
    enabled: bool,
) -> npt.NDArray[np.float64]:
    """Pass 1: evaluate the loss at every pixel. Returns a (height, width) matrix."""
    x, y = grid.coordinates(domain)
    return np.asarray(loss_field(x, y, alpha, enabled), dtype=np.float64)


def normalize(
    losses: npt.NDArray[np.float64],
    window: float = NORMALIZATION_WINDOW,
) -> tuple[npt.NDArray[np.float64], float, float, float]:
    """
    Map losses onto [0, 1] inside the clamped window.

    clamped_max = min(max_loss, min_loss + window); values above it saturate
    at 1. A flat field (clamped_max == min_loss) maps to 0 everywhere.

    Args:
        losses: Sample matrix from `sample_field`.
        window: Width of the displayed loss range above the minimum.

    Returns:
        (normalized, min_loss, max_loss, clamped_max)
    """
    if losses.size == 0:
        return np.zeros_like(losses), math.nan, math.nan, math.nan

    min_loss = float(losses.min())
    max_loss = float(losses.max())
    clamped_max = min(max_loss, min_loss + window)

    span = clamped_max - min_loss
    if span == 0.0:
        return np.zeros_like(losses), min_loss, max_loss, clamped_max

    normalized = np.clip((losses - min_loss) / span, 0.0, 1.0)
    return normalized, min_loss, max_loss, clamped_max


def colorize(normalized: npt.NDArray[np.float64]) -> npt.NDArray[np.uint8]:
    """
    Pass 2: linear blue -> red ramp.

        r = floor(255 * n), g = floor(100 * (1 - n)), b = floor(255 * (1 - n)), a = 255
    """
    n = np.asarray(normalized, dtype=np.float64)
    rgba = np.empty(n.shape + (4,), dtype=np.uint8)
    rgba[..., 0] = np.floor(255.0 * n)
    rgba[..., 1] = np.floor(100.0 * (1.0 - n))
    rgba[..., 2] = np.floor(255.0 * (1.0 - n))
    rgba[..., 3] = 255
    return rgba


def build_overlay(width: int, height: int, language: Language | str) -> Overlay:
    """Crosshair through the image centre plus the two axis labels."""
    if width == 0 or height == 0:
        return Overlay()

    texts = texts_for(language)
    cx = width / 2
    cy = height / 2
    lines = (
        OverlayLine(cx, 0.0, cx, float(height)),
        OverlayLine(0.0, cy, float(width), cy),
    )
    labels = (
        OverlayLabel(texts.x_axis, width - 15.0, cy - 5.0),
        OverlayLabel(texts.y_axis, cx + 5.0, 15.0),
    )
    return Overlay(lines=lines, labels=labels)


# ==========================================
# RENDERER
# ==========================================

class FieldRenderer:
    """
    Stateless renderer bound to a fixed grid and domain.

    Every call to `render` builds a fresh sample matrix and image; nothing is
    shared between calls.
    """

    def __init__(
        self,
        grid: Grid | None = None,
        domain: Domain | None = None,
        window: float = NORMALIZATION_WINDOW,
    ) -> None:
        if not window > 0.0:
            raise ValueError(f"Normalization window must be positive, got {window}.")
        self.grid = grid if grid is not None else Grid()
        self.domain = domain if domain is not None else Domain()
        self.window = window

    def render(self, params: RenderParams) -> RenderResult:
        """
        Produce the heatmap image and overlay for the given parameters.

        Args:
            params: Snapshot of (alpha, enabled, language).

        Returns:
            RenderResult. For an empty grid the image has zero size and the
            overlay is empty.
        """
        width, height = self.grid.width, self.grid.height

        if self.grid.is_empty:
            logger.debug(f"Empty grid {width}x{height}, nothing to render.")
            return RenderResult(image=np.zeros((height, width, 4), dtype=np.uint8))

        losses = sample_field(self.grid, self.domain, params.alpha, params.enabled)
        normalized, min_loss, max_loss, clamped_max = normalize(losses, self.window)
        image = colorize(normalized)
        overlay = build_overlay(width, height, params.language)

        logger.debug(
            f"Rendered {width}x{height} (alpha={params.alpha:.3f}, enabled={params.enabled}): "
            f"window [{min_loss:.4g}, {clamped_max:.4g}], max {max_loss:.4g}"
        )
        return RenderResult(
            image=image,
            overlay=overlay,
            min_loss=min_loss,
            max_loss=max_loss,
            clamped_max=clamped_max,
        )


def render(
    width: int,
    height: int,
    domain: Domain,
    alpha: float,
    enabled: bool,
    language: Language | str,
    window: float = NORMALIZATION_WINDOW,
) -> RenderResult:
    """One-shot render with an explicit argument list."""
    renderer = FieldRenderer(grid=Grid(width, height), domain=domain, window=window)
    return renderer.render(RenderParams(alpha=alpha, enabled=enabled, language=Language(language)))

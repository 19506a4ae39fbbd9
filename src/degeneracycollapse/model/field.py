"""
Loss Field & Sampling Grid
==========================
The scalar function being visualized and the pixel <-> plane mapping.

    L(x, y) = (x² + y² - 1)² + α·x²     (penalty term only when enabled)

The base term is zero on the whole unit ring, so the unconstrained problem has
infinitely many minima. The penalty α·x² keeps the field even in x and y but
lifts every ring point except (0, ±1).
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from degeneracycollapse.config import CANVAS_WIDTH, CANVAS_HEIGHT, DOMAIN_BOUNDS, RING_PROFILE_SAMPLES

if TYPE_CHECKING:
    import numpy.typing as npt


# ------------------------------------------------------------------------------
# Data Structures
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class Domain:
    """Rectangular region of the (x, y) plane."""
    x_min: float = DOMAIN_BOUNDS[0]
    x_max: float = DOMAIN_BOUNDS[1]
    y_min: float = DOMAIN_BOUNDS[2]
    y_max: float = DOMAIN_BOUNDS[3]

    def __post_init__(self) -> None:
        bounds = (self.x_min, self.x_max, self.y_min, self.y_max)
        if not all(math.isfinite(b) for b in bounds):
            raise ValueError(f"Domain bounds must be finite, got {bounds}.")
        if self.x_min >= self.x_max:
            raise ValueError(f"x_min ({self.x_min}) must be smaller than x_max ({self.x_max}).")
        if self.y_min >= self.y_max:
            raise ValueError(f"y_min ({self.y_min}) must be smaller than y_max ({self.y_max}).")

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min


@dataclass(frozen=True)
class Grid:
    """Pixel resolution of one render pass."""
    width: int = CANVAS_WIDTH
    height: int = CANVAS_HEIGHT

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {self.width}x{self.height}.")

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def coordinates(
        self, domain: Domain
    ) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
        """
        Map every pixel to its plane coordinates.

        Pixel column px maps to x = x_min + (px / width) * (x_max - x_min).
        Pixel row py maps to y = y_min + ((height - py) / height) * (y_max - y_min),
        i.e. row 0 (top of the image) is y_max.

        Args:
            domain: The visualized region.

        Returns:
            (x, y) arrays, both of shape (height, width).
        """
        if self.is_empty:
            empty = np.empty((self.height, self.width), dtype=np.float64)
            return empty, empty.copy()

        px = np.arange(self.width, dtype=np.float64)
        py = np.arange(self.height, dtype=np.float64)
        xs = domain.x_min + (px / self.width) * domain.width
        ys = domain.y_min + ((self.height - py) / self.height) * domain.height
        x, y = np.meshgrid(xs, ys, indexing="xy")
        return x, y


# ------------------------------------------------------------------------------
# Field
# ------------------------------------------------------------------------------
def loss_field(
    x: float | npt.NDArray[np.float64],
    y: float | npt.NDArray[np.float64],
    alpha: float,
    enabled: bool,
) -> float | npt.NDArray[np.float64]:
    """
    Evaluate L(x, y; α, enabled) = (x² + y² - 1)² + (α·x² if enabled else 0).

    Works element-wise on numpy arrays as well as on plain floats.
    """
    f = (x * x + y * y - 1.0) ** 2
    g = alpha * x * x if enabled else 0.0
    return f + g


def ring_profile(
    alpha: float,
    enabled: bool,
    samples: int = RING_PROFILE_SAMPLES,
) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """
    Sample the loss along the unit ring as a function of the polar angle.

    Args:
        alpha: Constraint strength.
        enabled: Whether the penalty term is active.
        samples: Number of angles in [-π, π] (inclusive).

    Returns:
        (theta, loss) arrays of length `samples`.
    """
    theta = np.linspace(-np.pi, np.pi, samples)
    loss = loss_field(np.cos(theta), np.sin(theta), alpha, enabled)
    return theta, np.asarray(loss, dtype=np.float64)

"""
Configuration & Global Constants
================================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (canvas size, domain bounds, slider
   range) from being scattered throughout the view and controller code.
2. Identity: It holds the organisation/application names applied to
   QCoreApplication at startup.

Exports:
    CANVAS_WIDTH, CANVAS_HEIGHT (int): Heatmap resolution in pixels.
    DOMAIN_BOUNDS (tuple): (x_min, x_max, y_min, y_max) of the visualized plane.
    NORMALIZATION_WINDOW (float): Loss units mapped onto the full color ramp.
"""
import logging

# Application identity
ORG_ID = "degeneracy-lab"
APP_ID = "degeneracy-collapse"
VISIBLE_APP_NAME = "Degeneracy Collapse Simulator"

# Heatmap grid
CANVAS_WIDTH: int = 500
CANVAS_HEIGHT: int = 500
DOMAIN_BOUNDS: tuple[float, float, float, float] = (-2.0, 2.0, -2.0, 2.0)

# Width of the displayed loss range above the minimum
NORMALIZATION_WINDOW: float = 0.5

# Constraint strength slider
ALPHA_MIN: float = 0.0
ALPHA_MAX: float = 0.5
ALPHA_STEP: float = 0.001

# Initial UI state
DEFAULT_ALPHA: float = 0.0
DEFAULT_ENABLED: bool = True
DEFAULT_LANGUAGE: str = "en"

# Ring profile plot
RING_PROFILE_SAMPLES: int = 361

LOG_LEVEL: int = logging.INFO
LOG_FILE: str | None = None
LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT: str = '%H:%M:%S'
# Third-party loggers kept at WARNING
QUIET_LOGGERS: tuple[str, ...] = ("pyqtgraph",)

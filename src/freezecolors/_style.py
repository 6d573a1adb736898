"""Shared matplotlib style for the demo and example figures.

- Images drawn with the origin at the lower left (``axis xy``) and without
  interpolation, so frozen and live panels can be compared pixel for pixel.
- Screen-sized figures at 100 DPI, PNG output at 150 DPI.
"""
from __future__ import annotations

import matplotlib.pyplot as plt

# ---------------------------------------------------------------------------
# Figure sizes
# ---------------------------------------------------------------------------

PANEL_FIGSIZE: tuple[float, float] = (10.0, 11.0)   # 3 x 2 panel grid
SINGLE_FIGSIZE: tuple[float, float] = (7.0, 5.5)    # one 3-D axes


# ---------------------------------------------------------------------------
# rcParams
# ---------------------------------------------------------------------------

STYLE_PARAMS: dict[str, object] = {
    # Images
    "image.origin": "lower",
    "image.interpolation": "nearest",
    "image.cmap": "viridis",
    # Display / save resolution
    "figure.dpi": 100,
    "savefig.dpi": 150,
    "savefig.format": "png",
    "figure.facecolor": "white",
    # Text
    "font.size": 9,
    "axes.titlesize": 9,
    "xtick.labelsize": 8,
    "ytick.labelsize": 8,
}


def apply_style() -> None:
    """Apply the demo matplotlib style settings."""
    plt.rcParams.update(STYLE_PARAMS)

"""Freeze the colors of matplotlib artists to use several colormaps per axes.

Modules
-------
- **freeze**: ``freeze_colors`` / ``unfreeze_colors`` and the ``ColorFreezer``
  session behind them.
- **colorbar**: ``add_colorbar``, a colorbar that does not resize its axes.
- **colormaps**: per-axes colormap and color range (``set_colormap``,
  ``set_clim``).
- **indexing**: scalar data -> colormap rows -> RGBA.
- **scene**: artist type tags, color-data adapters and tree traversal.
"""
from __future__ import annotations

from .colorbar import ColorbarLayout, add_colorbar, get_layout
from .colormaps import (
    color_table,
    get_clim,
    get_colormap,
    set_clim,
    set_colormap,
    set_figure_colormap,
)
from .errors import BadColor, FreezeColorsError, InvalidHandle, InvalidOption
from .freeze import ColorFreezer, freeze_colors, get_freezer, unfreeze_colors
from .types import DIRECT, SCALED, ColorbarBinding, FrozenState

__version__ = "0.1.0"

__all__ = [
    # freeze
    "ColorFreezer",
    "freeze_colors",
    "unfreeze_colors",
    "get_freezer",
    # colorbar
    "ColorbarLayout",
    "add_colorbar",
    "get_layout",
    # colormaps
    "color_table",
    "get_clim",
    "get_colormap",
    "set_clim",
    "set_colormap",
    "set_figure_colormap",
    # errors
    "FreezeColorsError",
    "InvalidHandle",
    "InvalidOption",
    "BadColor",
    # types
    "FrozenState",
    "ColorbarBinding",
    "SCALED",
    "DIRECT",
]

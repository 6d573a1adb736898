"""Colorbars that leave their host axes alone.

``Figure.colorbar(mappable, ax=ax)`` shrinks *ax* to make room for the
colorbar. ``add_colorbar`` instead places a narrow colorbar axes flush
against the host axes edge, so plots with and without colorbars keep the
same size. Colorbars created here can be frozen with ``freeze_colors``.

Layout presets:
- ``"vert"``: full-height bar on the right edge.
- ``"wide"``: as ``"vert"`` with the width of a default colorbar.
- ``"vshort"``: half-height bar, vertically centered.
- ``"horiz"``: full-width bar below the axes.
- ``"hshort"``: half-width bar below the axes, centered.
"""
from __future__ import annotations

import dataclasses

import matplotlib
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.cm import ScalarMappable
from matplotlib.colorbar import Colorbar
from matplotlib.font_manager import FontProperties

from .colormaps import axes_mappables


@dataclasses.dataclass(frozen=True)
class ColorbarLayout:
    """Placement of a colorbar relative to its host axes.

    Parameters
    ----------
    orientation : str
        ``"vertical"`` (right of the axes) or ``"horizontal"`` (below).
    stripe : float
        Bar thickness as a fraction of the host width (vertical) or
        height (horizontal).
    gap : float
        Space between host edge and bar, same units as *stripe*.
    length : float
        Bar length as a fraction of the host height or width.
    """

    orientation: str
    stripe: float
    gap: float
    length: float


# ---------------------------------------------------------------------------
# Built-in presets
# ---------------------------------------------------------------------------

_LAYOUTS: dict[str, ColorbarLayout] = {
    "vert": ColorbarLayout(orientation="vertical", stripe=0.04, gap=0.0, length=1.0),
    "wide": ColorbarLayout(orientation="vertical", stripe=0.07, gap=0.0, length=1.0),
    "vshort": ColorbarLayout(orientation="vertical", stripe=0.04, gap=0.0, length=0.5),
    "horiz": ColorbarLayout(orientation="horizontal", stripe=0.04, gap=0.05, length=1.0),
    "hshort": ColorbarLayout(orientation="horizontal", stripe=0.04, gap=0.05, length=0.5),
}

_ALIASES: dict[str, str] = {
    "vertical": "vert",
    "horizontal": "horiz",
}


def get_layout(name: str) -> ColorbarLayout:
    """Look up a colorbar layout preset.

    Parameters
    ----------
    name : str
        One of ``"vert"``, ``"wide"``, ``"vshort"``, ``"horiz"``,
        ``"hshort"`` (``"vertical"`` and ``"horizontal"`` are accepted too).

    Returns
    -------
    ColorbarLayout

    Raises
    ------
    ValueError
        If *name* is not a recognized layout.
    """
    key = _ALIASES.get(name, name)
    try:
        return _LAYOUTS[key]
    except KeyError:
        available = ", ".join(sorted(_LAYOUTS))
        raise ValueError(
            f"Unknown colorbar location {name!r}. Available locations: {available}"
        ) from None


def colorbar_rect(ax: Axes, layout: ColorbarLayout) -> list[float]:
    """Figure-fraction ``[left, bottom, width, height]`` of the bar for *ax*."""
    # fixed-aspect axes only settle their box at draw time
    ax.apply_aspect()
    pos = ax.get_position()
    if layout.orientation == "vertical":
        return [
            pos.x1 + layout.gap * pos.width,
            pos.y0 + 0.5 * (1.0 - layout.length) * pos.height,
            layout.stripe * pos.width,
            layout.length * pos.height,
        ]
    return [
        pos.x0 + 0.5 * (1.0 - layout.length) * pos.width,
        pos.y0 - (layout.stripe + layout.gap) * pos.height,
        layout.length * pos.width,
        layout.stripe * pos.height,
    ]


def _tick_fontsize() -> float:
    """One point smaller than the host tick labels."""
    size = FontProperties(size=matplotlib.rcParams["ytick.labelsize"]).get_size_in_points()
    return max(size - 1.0, 1.0)


def add_colorbar(
    mappable: ScalarMappable | None = None,
    ax: Axes | None = None,
    location: str | Axes = "vert",
    *,
    title: str = "",
) -> Colorbar:
    """Add a colorbar next to *ax* without resizing *ax*.

    Parameters
    ----------
    mappable : ScalarMappable, optional
        Artist the colorbar describes. Defaults to the most recently added
        color-mapped artist of *ax*.
    ax : Axes, optional
        Host axes (default: current axes).
    location : str or Axes
        Layout preset name (see module docstring), or an existing axes to
        draw the colorbar into; that axes gets a horizontal bar when it is
        wider than tall.
    title : str
        Title drawn above the bar.

    Returns
    -------
    Colorbar

    Raises
    ------
    ValueError
        If *location* is unknown or *ax* holds no color-mapped artist.
    """
    if ax is None:
        ax = plt.gca()
    if mappable is None:
        mappables = axes_mappables(ax)
        if not mappables:
            raise ValueError(
                "No color-mapped artist found in the axes; pass the mappable explicitly"
            )
        mappable = mappables[-1]

    fig = ax.figure
    if isinstance(location, Axes):
        cax = location
        extent = cax.get_window_extent()
        orientation = "horizontal" if extent.width > extent.height else "vertical"
    else:
        layout = get_layout(location)
        previous = fig.gca()
        cax = fig.add_axes(colorbar_rect(ax, layout))
        fig.sca(previous)
        orientation = layout.orientation

    colorbar = fig.colorbar(mappable, cax=cax, orientation=orientation)
    colorbar.ax.tick_params(labelsize=_tick_fontsize())
    if title:
        colorbar.ax.set_title(title, fontsize=_tick_fontsize())
    return colorbar

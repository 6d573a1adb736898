"""Per-axes colormap and color range.

matplotlib keeps a colormap and a norm on every ``ScalarMappable``. These
helpers give an axes a single colormap and color range by fanning the
setting out to every color-mapped artist in it. Frozen artists accept the
new setting but keep their appearance; their colorbars follow it until the
next freeze call reasserts a frozen colorbar.
"""
from __future__ import annotations

import matplotlib
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.cm import ScalarMappable
from matplotlib.colors import Colormap
from matplotlib.figure import Figure
from jaxtyping import Float

from .scene import colorbar_of, colorbars_in


def resolve_colormap(cmap: str | Colormap | None = None) -> Colormap:
    """Look up a colormap by name (``None`` -> ``rcParams["image.cmap"]``).

    Raises
    ------
    ValueError
        If *cmap* is not a registered colormap name.
    """
    if isinstance(cmap, Colormap):
        return cmap
    if cmap is None:
        cmap = matplotlib.rcParams["image.cmap"]
    try:
        return matplotlib.colormaps[cmap]
    except KeyError:
        available = ", ".join(sorted(matplotlib.colormaps))
        raise ValueError(
            f"Unknown colormap {cmap!r}. Available colormaps: {available}"
        ) from None


def color_table(cmap: str | Colormap | None) -> Float[np.ndarray, "N 3"]:
    """Sample *cmap* into an ``(N, 3)`` RGB table, one row per entry."""
    cmap = resolve_colormap(cmap)
    return np.asarray(cmap(np.arange(cmap.N)), dtype=np.float64)[:, :3]


def axes_mappables(ax: Axes) -> list[ScalarMappable]:
    """Color-mapped artists drawn in *ax*, in drawing-list order."""
    return [child for child in ax.get_children() if isinstance(child, ScalarMappable)]


def get_colormap(ax: Axes | None = None) -> Colormap:
    """Colormap of the most recently added color-mapped artist in *ax*."""
    if ax is None:
        ax = plt.gca()
    mappables = axes_mappables(ax)
    if not mappables:
        return resolve_colormap(None)
    return mappables[-1].get_cmap()


def set_colormap(cmap: str | Colormap, ax: Axes | None = None) -> Colormap:
    """Apply *cmap* to every color-mapped artist in *ax* (default: current axes).

    Parameters
    ----------
    cmap : str or Colormap
        Colormap name or instance.
    ax : Axes, optional
        Target axes.

    Returns
    -------
    Colormap
        The resolved colormap.
    """
    if ax is None:
        ax = plt.gca()
    cmap = resolve_colormap(cmap)
    for mappable in axes_mappables(ax):
        mappable.set_cmap(cmap)
    return cmap


def get_clim(ax: Axes | None = None) -> tuple[float | None, float | None]:
    """Color range of the most recently added color-mapped artist in *ax*."""
    if ax is None:
        ax = plt.gca()
    mappables = axes_mappables(ax)
    if not mappables:
        return (None, None)
    return mappables[-1].get_clim()


def set_clim(vmin: float, vmax: float, ax: Axes | None = None) -> None:
    """Set the color range of every color-mapped artist in *ax*."""
    if ax is None:
        ax = plt.gca()
    for mappable in axes_mappables(ax):
        mappable.set_clim(vmin, vmax)


def set_figure_colormap(cmap: str | Colormap, fig: Figure | None = None) -> Colormap:
    """Apply *cmap* to every data axes of *fig* (default: current figure).

    Colorbar axes are left alone; colorbars follow their mappables.
    """
    if fig is None:
        fig = plt.gcf()
    cmap = resolve_colormap(cmap)
    colorbar_axes = {id(colorbar.ax) for colorbar in colorbars_in(fig)}
    for ax in fig.get_axes():
        if id(ax) not in colorbar_axes and colorbar_of(ax) is None:
            set_colormap(cmap, ax)
    return cmap

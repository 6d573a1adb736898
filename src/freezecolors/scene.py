"""Access to matplotlib's artist tree: type tags, color-data adapters, traversal.

matplotlib artists expose color data differently:
- images hold a 2-D scalar array (indexed) or an ``(M, N, 3|4)`` array
  (true color) and are frozen by replacing their data;
- collections (meshes, scatter series, surfaces, polygons, lines) hold a
  scalar array next to explicit face/edge colors and are frozen by writing
  flattened RGBA colors and clearing the array.

Each kind is served by an adapter selected from :func:`artist_kind`.
"""
from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Mapping
from typing import Protocol

import matplotlib.pyplot as plt
import numpy as np
# open figures without plt.figure(n), which would change the current figure
from matplotlib._pylab_helpers import Gcf
from matplotlib.artist import Artist
from matplotlib.axes import Axes
from matplotlib.cm import ScalarMappable
from matplotlib.collections import (
    Collection,
    LineCollection,
    PathCollection,
    PolyQuadMesh,
    QuadMesh,
)
from matplotlib.colorbar import Colorbar
from matplotlib.colors import Normalize, NoNorm
from matplotlib.contour import ContourSet
from matplotlib.figure import Figure, SubFigure
from matplotlib.image import AxesImage, BboxImage, FigureImage, NonUniformImage, PcolorImage
from mpl_toolkits.mplot3d.art3d import Poly3DCollection

from .types import DIRECT, SCALED

# ---------------------------------------------------------------------------
# Type tags
# ---------------------------------------------------------------------------

IMAGE = "image"
MESH = "mesh"
SCATTER = "scatter"
SURFACE = "surface"
LINE = "line"
PATCH = "patch"
AXES = "axes"
FIGURE = "figure"
COLORBAR = "colorbar"
OTHER = "other"


def artist_kind(obj: object) -> str:
    """Return the type tag of a matplotlib object."""
    if isinstance(obj, Colorbar):
        return COLORBAR
    if isinstance(obj, (Figure, SubFigure)):
        return FIGURE
    if isinstance(obj, Axes):
        return AXES
    # contour sets recompute their colors from levels on every change
    if isinstance(obj, (ContourSet, NonUniformImage, PcolorImage)):
        return OTHER
    if isinstance(obj, (AxesImage, BboxImage, FigureImage)):
        return IMAGE
    if isinstance(obj, (QuadMesh, PolyQuadMesh)):
        return MESH
    if isinstance(obj, PathCollection):
        return SCATTER
    if isinstance(obj, Poly3DCollection):
        return SURFACE
    if isinstance(obj, LineCollection):
        return LINE
    if isinstance(obj, Collection):
        return PATCH
    return OTHER


def is_live(obj: object) -> bool:
    """True if *obj* is a matplotlib object still attached to a figure."""
    if isinstance(obj, Colorbar):
        return is_live(obj.ax)
    if isinstance(obj, Figure):
        return True
    if isinstance(obj, Axes):
        fig = obj.figure
        return fig is not None and obj in fig.axes
    if isinstance(obj, Artist):
        return obj.figure is not None
    return False


# ---------------------------------------------------------------------------
# Adapters
# ---------------------------------------------------------------------------


class ColorDataAdapter(Protocol):
    """Read/write surface for the color data of one kind of artist."""

    def get_color_data(self, artist: ScalarMappable) -> np.ndarray | None: ...

    def set_color_data(self, artist: ScalarMappable, data: np.ndarray) -> None: ...

    def is_indexed(self, artist: ScalarMappable) -> bool: ...

    def write_true_color(self, artist: ScalarMappable, rgba: np.ndarray) -> None: ...


def get_mapping_mode(artist: ScalarMappable) -> str:
    """``"direct"`` for ``NoNorm`` artists, ``"scaled"`` otherwise."""
    return DIRECT if isinstance(getattr(artist, "norm", None), NoNorm) else SCALED


def set_mapping_mode(artist: ScalarMappable, mode: str) -> None:
    """Switch the norm of *artist* to ``NoNorm`` or a fresh ``Normalize``."""
    if get_mapping_mode(artist) == mode:
        return
    if mode == DIRECT:
        artist.set_norm(NoNorm())
    else:
        artist.set_norm(Normalize())


def _is_color_array(data: np.ndarray | None) -> bool:
    if data is None or np.size(data) == 0:
        return False
    return np.issubdtype(data.dtype, np.number) or data.dtype == np.bool_


class ImageAdapter:
    """Images: the color plane is the third array axis."""

    def get_color_data(self, artist: AxesImage) -> np.ndarray | None:
        return artist.get_array()

    def set_color_data(self, artist: AxesImage, data: np.ndarray) -> None:
        artist.set_data(data)

    def is_indexed(self, artist: AxesImage) -> bool:
        data = self.get_color_data(artist)
        return _is_color_array(data) and data.ndim == 2

    def write_true_color(self, artist: AxesImage, rgba: np.ndarray) -> None:
        data = self.get_color_data(artist)
        artist.set_data(rgba.reshape(data.shape[0], data.shape[1], 4))


def _maps_edges(artist: Collection) -> bool:
    """True if the colormap drives the edges of *artist* (lines, unfilled markers)."""
    return isinstance(artist, LineCollection) or len(artist.get_facecolor()) == 0


class CollectionAdapter:
    """Collections: scalar array beside flattened ``(K, 4)`` face/edge colors.

    Meshes store 2-D data but 1-D colors, so the true-color layout is the
    row-major flattening of the data grid.
    """

    def get_color_data(self, artist: Collection) -> np.ndarray | None:
        return artist.get_array()

    def set_color_data(self, artist: Collection, data: np.ndarray) -> None:
        if _maps_edges(artist):
            # hand the edges back to the colormap
            artist.set_edgecolor(None)
        artist.set_array(data)

    def is_indexed(self, artist: Collection) -> bool:
        # QuadMesh also accepts (M, N, 3|4) true-color arrays
        data = self.get_color_data(artist)
        return _is_color_array(data) and data.ndim < 3

    def write_true_color(self, artist: Collection, rgba: np.ndarray) -> None:
        colors = rgba.reshape(-1, 4)
        maps_edges = _maps_edges(artist)
        artist.set_array(None)
        if maps_edges:
            artist.set_edgecolor(colors)
        else:
            artist.set_facecolor(colors)


_IMAGE_ADAPTER = ImageAdapter()
_COLLECTION_ADAPTER = CollectionAdapter()

_ADAPTERS: dict[str, ColorDataAdapter] = {
    IMAGE: _IMAGE_ADAPTER,
    MESH: _COLLECTION_ADAPTER,
    SCATTER: _COLLECTION_ADAPTER,
    SURFACE: _COLLECTION_ADAPTER,
    LINE: _COLLECTION_ADAPTER,
    PATCH: _COLLECTION_ADAPTER,
}


def adapter_for(obj: object) -> ColorDataAdapter | None:
    """Adapter for *obj*, or ``None`` if it carries no color data."""
    return _ADAPTERS.get(artist_kind(obj))


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------


def colorbar_of(ax: object) -> Colorbar | None:
    """The colorbar drawn in *ax*, or ``None`` if *ax* is not a colorbar axes."""
    colorbar = getattr(ax, "_colorbar", None)
    return colorbar if isinstance(colorbar, Colorbar) else None


def _children(obj: object) -> list[object]:
    if isinstance(obj, Colorbar):
        return []
    get_children = getattr(obj, "get_children", None)
    return list(get_children()) if get_children is not None else []


def walk(
    root: object, skip: Iterable[object] = (), *, colorbar_axes: bool = False
) -> Iterator[object]:
    """Breadth-first iteration over *root* and its descendants.

    Objects in *skip* are neither yielded nor descended into, and neither are
    colorbar axes unless *colorbar_axes* is true.
    """
    skipped = {id(obj) for obj in skip}
    queue = deque([root])
    seen: set[int] = set()
    while queue:
        obj = queue.popleft()
        if id(obj) in seen or id(obj) in skipped:
            continue
        if not colorbar_axes and isinstance(obj, Axes) and colorbar_of(obj) is not None:
            continue
        seen.add(id(obj))
        yield obj
        if adapter_for(obj) is None:
            queue.extend(_children(obj))


def discover_indexed(root: object, skip: Iterable[object] = ()) -> list[ScalarMappable]:
    """Every artist under *root* whose color data is indexed.

    Artists carrying color data are leaves: artists with true-color or empty
    color data are ignored and their children are not visited. Artists
    without color data are searched recursively.

    Parameters
    ----------
    root : Figure, Axes or Artist
        Where the search starts (included if it qualifies itself).
    skip : iterable
        Objects excluded together with their subtrees, e.g. colorbar axes.

    Returns
    -------
    list
        Qualifying artists in breadth-first order.
    """
    found = []
    for obj in walk(root, skip):
        adapter = adapter_for(obj)
        if adapter is not None and adapter.is_indexed(obj):
            found.append(obj)
    return found


def discover_frozen(
    root: object, frozen: Mapping[object, object], skip: Iterable[object] = ()
) -> list[ScalarMappable]:
    """Every artist under *root* that has an entry in *frozen*."""
    return [obj for obj in walk(root, skip) if adapter_for(obj) is not None and obj in frozen]


def colorbars_in(root: object) -> list[Colorbar]:
    """Colorbars under *root*: drawn in its axes or attached to its mappables."""
    found: dict[int, Colorbar] = {}
    for obj in walk(root, colorbar_axes=True):
        if isinstance(obj, Axes):
            colorbar = colorbar_of(obj)
        elif isinstance(obj, ScalarMappable):
            colorbar = getattr(obj, "colorbar", None)
        else:
            continue
        if isinstance(colorbar, Colorbar):
            found.setdefault(id(colorbar), colorbar)
    return list(found.values())


def enclosing_axes(artist: Artist) -> Axes | None:
    """Axes an artist belongs to (the artist itself if it is an axes)."""
    if isinstance(artist, Axes):
        return artist
    return getattr(artist, "axes", None)


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------


class MatplotlibScene:
    """The pyplot session: current axes, open figures and their colorbars.

    Parameters
    ----------
    figures : iterable of Figure, optional
        Figures to consider. Defaults to every figure managed by pyplot,
        looked up on each call.
    """

    def __init__(self, figures: Iterable[Figure] | None = None) -> None:
        self._figures = list(figures) if figures is not None else None

    def current_axes(self) -> Axes:
        return plt.gca()

    def figures(self) -> list[Figure]:
        if self._figures is not None:
            return list(self._figures)
        return [manager.canvas.figure for manager in Gcf.get_all_fig_managers()]

    def colorbars(self) -> list[Colorbar]:
        """Every colorbar attached to a color-mapped artist of an open figure."""
        return [colorbar for fig in self.figures() for colorbar in colorbars_in(fig)]

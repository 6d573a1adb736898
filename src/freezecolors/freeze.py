"""Freeze and unfreeze the colors of color-mapped artists.

Freezing converts an artist's scalar color data into true-color RGBA using
the colormap and color range active at call time, so later colormap or
``clim`` changes no longer affect it. This is what allows several colormaps
inside one figure, or even one axes::

    ax.imshow(z, cmap="hot")
    freeze_colors(ax)
    freeze_colors(ax.figure.colorbar(ax.images[0]))

The original scalar data is kept and can be put back with
``unfreeze_colors``. Colorbars are not frozen themselves; instead their
colormap is recorded and reasserted on every later ``freeze_colors`` call.
"""
from __future__ import annotations

import logging
import warnings
import weakref

import numpy as np
from matplotlib.cm import ScalarMappable
from matplotlib.colorbar import Colorbar
from matplotlib.figure import Figure

from .backend import MatplotlibBackend, RenderingBackend
from .colormaps import color_table
from .errors import InvalidHandle, InvalidOption
from .indexing import freeze_color_data, validate_nancolor
from .scene import (
    MatplotlibScene,
    adapter_for,
    colorbars_in,
    discover_frozen,
    discover_indexed,
    enclosing_axes,
    get_mapping_mode,
    is_live,
    set_mapping_mode,
)
from .types import SCALED, ColorbarBinding, FrozenState

logger = logging.getLogger(__name__)

FREEZE_OPTIONS: frozenset[str] = frozenset({"nancolor"})


def _check_options(options: dict[str, object], allowed: frozenset[str]) -> None:
    unknown = sorted(set(options) - allowed)
    if unknown:
        valid = ", ".join(repr(name) for name in sorted(allowed)) or "none"
        raise InvalidOption(
            f"Unrecognized option(s) {', '.join(map(repr, unknown))}. Valid options: {valid}"
        )


class ColorFreezer:
    """Owns the frozen-artist and colorbar-binding tables of a session.

    Parameters
    ----------
    scene : MatplotlibScene, optional
        Supplies the current axes and the colorbars of open figures.
    backend : RenderingBackend, optional
        Checked once per freeze before true-color data is written.
    """

    def __init__(
        self,
        scene: MatplotlibScene | None = None,
        backend: RenderingBackend | None = None,
    ) -> None:
        self.scene = scene if scene is not None else MatplotlibScene()
        self.backend = backend if backend is not None else MatplotlibBackend()
        self._frozen: weakref.WeakKeyDictionary[ScalarMappable, FrozenState] = (
            weakref.WeakKeyDictionary()
        )
        self._bindings: weakref.WeakKeyDictionary[Colorbar, ColorbarBinding] = (
            weakref.WeakKeyDictionary()
        )

    # -- queries ------------------------------------------------------------

    def is_frozen(self, artist: ScalarMappable) -> bool:
        return artist in self._frozen

    def frozen_state(self, artist: ScalarMappable) -> FrozenState | None:
        return self._frozen.get(artist)

    def colorbar_binding(self, colorbar: Colorbar) -> ColorbarBinding | None:
        return self._bindings.get(colorbar)

    # -- helpers ------------------------------------------------------------

    def _resolve_root(self, root: object | None) -> object:
        if root is None:
            return self.scene.current_axes()
        if not is_live(root):
            raise InvalidHandle(
                "The root must be a live matplotlib figure, axes, artist or "
                f"colorbar, got {type(root).__name__}"
            )
        return root

    @staticmethod
    def _colorbar_axes(root: object) -> list[object]:
        fig = root if isinstance(root, Figure) else getattr(root, "figure", None)
        if isinstance(root, Colorbar) or fig is None:
            return []
        return [colorbar.ax for colorbar in colorbars_in(fig)]

    # -- freeze -------------------------------------------------------------

    def freeze(self, root: object | None = None, **options: object) -> object:
        """Freeze the colors of every color-mapped artist under *root*.

        Parameters
        ----------
        root : Figure, Axes, Artist or Colorbar, optional
            Where to look for artists (default: current axes). A colorbar is
            not frozen itself: its current colormap is recorded and
            reasserted on later calls.
        nancolor : color, optional
            ``[r, g, b]`` (or a color name) used for NaN/masked samples.
            Components are clamped to ``[0, 1]``. By default such samples
            keep the colormap's "bad" color, transparent unless set.

        Returns
        -------
        object
            *root* (the current axes when omitted).

        Raises
        ------
        InvalidHandle
            If *root* is not a live matplotlib object.
        InvalidOption
            If an option other than ``nancolor`` is given.
        BadColor
            If *nancolor* is not a 3-component color.
        """
        return self._freeze(root, options)

    def _freeze(self, root: object | None, options: dict[str, object]) -> object:
        # one frame below the public entry points, so warnings name their caller
        _check_options(options, FREEZE_OPTIONS)
        nancolor = validate_nancolor(options.get("nancolor"))
        root = self._resolve_root(root)

        bound = None
        if isinstance(root, Colorbar):
            self._bind_colorbar(root)
            bound = root
        else:
            artists = discover_indexed(root, skip=self._colorbar_axes(root))
            if artists and not self.backend.supports_true_color():
                self.backend.switch_to_raster()
            for artist in artists:
                self._freeze_artist(artist, nancolor)
            logger.debug("Froze %d artist(s) under %r", len(artists), root)
            if nancolor is not None and not artists:
                warnings.warn(
                    f"nancolor had no effect: no color-mapped artists under {root!r}",
                    stacklevel=3,
                )

        self._reassert_colorbars(exclude=bound)
        return root

    def _freeze_artist(self, artist: ScalarMappable, nancolor: np.ndarray | None) -> None:
        adapter = adapter_for(artist)
        data = adapter.get_color_data(artist)
        mode = get_mapping_mode(artist)
        if mode == SCALED and not artist.norm.scaled():
            artist.autoscale_None()

        # colorbars read the norm, keep its limits across the rewrite
        vmin, vmax = artist.get_clim()
        cmap = artist.get_cmap()
        if nancolor is None:
            undefined_rgba = cmap.get_bad()
        else:
            undefined_rgba = np.append(nancolor, 1.0)

        rgba = freeze_color_data(data, mode, (vmin, vmax), color_table(cmap), undefined_rgba)
        self._frozen[artist] = FrozenState(color_data=data, mapping_mode=mode)
        adapter.write_true_color(artist, rgba)
        artist.set_clim(vmin, vmax)
        logger.debug("Froze %s (%s, %s) with %r", type(artist).__name__, mode, data.shape, cmap.name)

    # -- colorbars ----------------------------------------------------------

    def _bind_colorbar(self, colorbar: Colorbar) -> None:
        axes = enclosing_axes(colorbar.mappable)
        if axes is None or not is_live(axes):
            axes = self.scene.current_axes()
        binding = ColorbarBinding(axes=axes, colormap=colorbar.mappable.get_cmap().copy())
        self._bindings[colorbar] = binding
        logger.debug("Bound colorbar to colormap %r", binding.colormap.name)

    def _reassert_colorbars(self, exclude: Colorbar | None = None) -> None:
        for colorbar in self.scene.colorbars():
            if colorbar is exclude:
                continue
            binding = self._bindings.get(colorbar)
            if binding is None:
                continue
            if colorbar.mappable.get_cmap() != binding.colormap:
                logger.info("Reasserting frozen colormap %r on colorbar", binding.colormap.name)
                colorbar.mappable.set_cmap(binding.colormap)

    # -- unfreeze -----------------------------------------------------------

    def unfreeze(self, root: object | None = None, **options: object) -> object:
        """Restore the original color data of frozen artists under *root*.

        Artists that were never frozen are left untouched. Passing a
        colorbar drops its colormap binding.

        Parameters
        ----------
        root : Figure, Axes, Artist or Colorbar, optional
            Where to look for frozen artists (default: current axes).

        Returns
        -------
        object
            *root* (the current axes when omitted).

        Raises
        ------
        InvalidHandle
            If *root* is not a live matplotlib object.
        InvalidOption
            If any option is given.
        """
        _check_options(options, frozenset())
        root = self._resolve_root(root)

        if isinstance(root, Colorbar):
            self._bindings.pop(root, None)
            return root

        artists = discover_frozen(root, self._frozen, skip=self._colorbar_axes(root))
        for artist in artists:
            state = self._frozen.pop(artist)
            adapter_for(artist).set_color_data(artist, state.color_data)
            set_mapping_mode(artist, state.mapping_mode)
        logger.debug("Unfroze %d artist(s) under %r", len(artists), root)
        return root


# ---------------------------------------------------------------------------
# Module-level session
# ---------------------------------------------------------------------------

_FREEZER = ColorFreezer()


def get_freezer() -> ColorFreezer:
    """The freezer behind :func:`freeze_colors` and :func:`unfreeze_colors`."""
    return _FREEZER


def freeze_colors(root: object | None = None, **options: object) -> object:
    """Freeze colors under *root* using the session freezer.

    See :meth:`ColorFreezer.freeze`.
    """
    return _FREEZER._freeze(root, options)


def unfreeze_colors(root: object | None = None, **options: object) -> object:
    """Unfreeze colors under *root* using the session freezer.

    See :meth:`ColorFreezer.unfreeze`.
    """
    return _FREEZER.unfreeze(root, **options)

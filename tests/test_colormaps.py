"""Per-axes colormap and color range helpers."""
from __future__ import annotations

import matplotlib
import matplotlib.pyplot as plt
import numpy as np
import pytest
from numpy.testing import assert_allclose

from freezecolors.colormaps import (
    axes_mappables,
    color_table,
    get_clim,
    get_colormap,
    resolve_colormap,
    set_clim,
    set_colormap,
    set_figure_colormap,
)


class TestResolveColormap:

    def test_by_name(self):
        assert resolve_colormap("hot").name == "hot"

    def test_instance_passes_through(self):
        cmap = matplotlib.colormaps["cool"]
        assert resolve_colormap(cmap) is cmap

    def test_none_uses_rcparams(self):
        with matplotlib.rc_context({"image.cmap": "gray"}):
            assert resolve_colormap(None).name == "gray"

    def test_unknown_name_lists_available(self):
        with pytest.raises(ValueError, match="Available colormaps:.*viridis"):
            resolve_colormap("no-such-map")


class TestColorTable:

    def test_one_row_per_entry(self):
        table = color_table("viridis")
        assert table.shape == (256, 3)

    def test_matches_colormap_samples(self):
        cmap = matplotlib.colormaps["hot"].resampled(8)
        table = color_table(cmap)
        assert table.shape == (8, 3)
        assert_allclose(table, cmap(np.arange(8))[:, :3])


class TestAxesColormap:

    def test_set_colormap_reaches_every_mappable(self, ramp):
        fig, ax = plt.subplots()
        image = ax.imshow(ramp, cmap="hot")
        mesh = ax.pcolormesh(ramp, cmap="cool")
        set_colormap("gray", ax)
        assert image.get_cmap().name == "gray"
        assert mesh.get_cmap().name == "gray"

    def test_get_colormap_reads_latest_mappable(self, ramp):
        fig, ax = plt.subplots()
        ax.imshow(ramp, cmap="hot")
        ax.scatter([0, 1], [0, 1], c=[0, 1], cmap="cool")
        assert get_colormap(ax).name == "cool"

    def test_get_colormap_of_empty_axes_is_default(self):
        fig, ax = plt.subplots()
        assert get_colormap(ax).name == matplotlib.rcParams["image.cmap"]

    def test_defaults_to_current_axes(self, ramp):
        fig, ax = plt.subplots()
        image = ax.imshow(ramp)
        set_colormap("copper")
        assert image.get_cmap().name == "copper"

    def test_clim_round_trip(self, ramp):
        fig, ax = plt.subplots()
        image = ax.imshow(ramp)
        set_clim(2.0, 8.0, ax)
        assert image.get_clim() == (2.0, 8.0)
        assert get_clim(ax) == (2.0, 8.0)

    def test_clim_of_empty_axes(self):
        fig, ax = plt.subplots()
        assert get_clim(ax) == (None, None)

    def test_axes_mappables_excludes_plain_artists(self, ramp):
        fig, ax = plt.subplots()
        ax.plot([0, 1], [0, 1])
        image = ax.imshow(ramp)
        assert axes_mappables(ax) == [image]


class TestFigureColormap:

    def test_repaints_data_axes_and_their_colorbars(self, ramp):
        fig, (left, right) = plt.subplots(1, 2)
        a = left.imshow(ramp, cmap="hot")
        b = right.imshow(ramp, cmap="cool")
        colorbar = fig.colorbar(a, ax=left)
        set_figure_colormap("gray", fig)
        assert a.get_cmap().name == "gray"
        assert b.get_cmap().name == "gray"
        # the bar follows its mappable
        assert colorbar.cmap.name == "gray"

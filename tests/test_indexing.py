"""Color-index math: row computation, clamping, undefined samples, lookup."""
from __future__ import annotations

import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal

from freezecolors.errors import BadColor
from freezecolors.indexing import (
    color_rows,
    direct_rows,
    freeze_color_data,
    lookup_true_color,
    scaled_rows,
    validate_nancolor,
)
from freezecolors.types import DIRECT, SCALED

# 8-row table whose red channel encodes the row number
TABLE8 = np.column_stack(
    [np.arange(1, 9) / 8.0, np.zeros(8), np.linspace(1.0, 0.0, 8)]
)


# ---------------------------------------------------------------------------
# Scaled mapping
# ---------------------------------------------------------------------------


class TestScaledRows:
    """ceil((v - vmin) / (vmax - vmin) * N), clamped to [1, N]."""

    def test_midpoint_of_eight_rows(self):
        rows, undefined = color_rows(np.array([5.0]), SCALED, (0.0, 10.0), 8)
        assert rows.tolist() == [4]
        assert not undefined.any()

    def test_range_endpoints(self):
        rows, _ = color_rows(np.array([0.0, 10.0]), SCALED, (0.0, 10.0), 8)
        # vmin computes row 0 and is clamped up
        assert rows.tolist() == [1, 8]

    def test_out_of_range_is_clamped(self):
        rows, _ = color_rows(np.array([-100.0, 1e6]), SCALED, (0.0, 10.0), 8)
        assert rows.tolist() == [1, 8]

    def test_degenerate_range_maps_to_first_row(self):
        rows, undefined = color_rows(np.array([3.0, 3.0, np.nan]), SCALED, (3.0, 3.0), 8)
        assert rows.tolist() == [1, 1, 1]
        assert undefined.tolist() == [False, False, True]

    def test_unclamped_rows(self):
        raw = scaled_rows(np.array([-5.0, 2.5, 15.0]), (0.0, 10.0), 4)
        assert_allclose(raw, [-2.0, 1.0, 6.0])

    def test_shape_is_preserved(self):
        data = np.linspace(0.0, 1.0, 12).reshape(3, 4)
        rows, undefined = color_rows(data, SCALED, (0.0, 1.0), 256)
        assert rows.shape == (3, 4)
        assert undefined.shape == (3, 4)
        assert rows.dtype == np.intp


# ---------------------------------------------------------------------------
# Direct mapping
# ---------------------------------------------------------------------------


class TestDirectRows:
    """Integer data index the table from 0; float data are table fractions."""

    def test_integers_shift_by_one(self):
        rows, _ = color_rows(np.array([0, 1, 7]), DIRECT, (0.0, 1.0), 8)
        assert rows.tolist() == [1, 2, 8]

    def test_integer_rows_ignore_table_size(self):
        assert_allclose(direct_rows(np.array([0, 2, 5]), 8), [1.0, 3.0, 6.0])

    def test_floats_are_fractions_of_the_table(self):
        assert_allclose(direct_rows(np.array([0.2, 0.5, 0.99]), 8), [2.0, 5.0, 8.0])

    def test_float_one_is_the_last_row(self):
        rows, _ = color_rows(np.array([0.0, 1.0]), DIRECT, (0.0, 1.0), 8)
        assert rows.tolist() == [1, 8]

    def test_masked_integers_keep_integer_rule(self):
        data = np.ma.masked_array([1, 3], mask=[False, True])
        rows, undefined = color_rows(data, DIRECT, (0.0, 1.0), 8)
        assert rows[0] == 2
        assert undefined.tolist() == [False, True]

    def test_booleans_land_on_rows_one_and_two(self):
        rows, _ = color_rows(np.array([False, True, True]), DIRECT, (0.0, 1.0), 8)
        assert rows.tolist() == [1, 2, 2]

    def test_clim_is_ignored(self):
        rows, _ = color_rows(np.array([3]), DIRECT, (100.0, 200.0), 8)
        assert rows.tolist() == [4]

    def test_out_of_range_is_clamped(self):
        rows, _ = color_rows(np.array([-3.0, 50.0]), DIRECT, (0.0, 1.0), 8)
        assert rows.tolist() == [1, 8]


# ---------------------------------------------------------------------------
# Undefined samples
# ---------------------------------------------------------------------------


class TestUndefinedSamples:
    """NaN and masked entries."""

    @pytest.mark.parametrize("mode", [SCALED, DIRECT])
    def test_nan_is_flagged_with_placeholder_row(self, mode):
        rows, undefined = color_rows(np.array([np.nan, 2.0]), mode, (0.0, 4.0), 8)
        assert undefined.tolist() == [True, False]
        assert rows[0] == 1

    def test_masked_entries_are_undefined(self):
        data = np.ma.masked_array([1.0, 2.0, 3.0], mask=[False, True, False])
        _, undefined = color_rows(data, SCALED, (0.0, 4.0), 8)
        assert undefined.tolist() == [False, True, False]

    def test_undefined_samples_get_undefined_color(self):
        rgba = freeze_color_data(
            np.array([np.nan, 5.0]), SCALED, (0.0, 10.0), TABLE8, (0.0, 0.0, 1.0, 1.0)
        )
        assert_allclose(rgba[0], [0.0, 0.0, 1.0, 1.0])
        assert_allclose(rgba[1], [*TABLE8[3], 1.0])

    def test_default_undefined_color_is_transparent(self):
        rgba = freeze_color_data(np.array([np.nan]), SCALED, (0.0, 1.0), TABLE8)
        assert rgba[0, 3] == 0.0


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------


class TestLookup:
    """Table gather into RGBA."""

    def test_defined_samples_are_opaque(self):
        rows = np.array([[1, 8], [2, 3]])
        rgba = lookup_true_color(rows, np.zeros(rows.shape, bool), TABLE8, (0, 0, 0, 0))
        assert rgba.shape == (2, 2, 4)
        assert_allclose(rgba[..., 3], 1.0)
        assert_allclose(rgba[..., 0], rows / 8.0)

    def test_frozen_colors_follow_table_rows(self):
        data = np.arange(8)
        rgba = freeze_color_data(data, DIRECT, (0.0, 1.0), TABLE8)
        assert_array_equal(rgba[:, :3], TABLE8)

    def test_rejects_empty_table(self):
        with pytest.raises(ValueError, match="at least one row"):
            color_rows(np.array([1.0]), SCALED, (0.0, 1.0), 0)

    def test_rejects_unknown_mode(self):
        with pytest.raises(ValueError, match="Unknown mapping mode"):
            color_rows(np.array([1.0]), "log", (0.0, 1.0), 8)


# ---------------------------------------------------------------------------
# Undefined-sample color validation
# ---------------------------------------------------------------------------


class TestValidateNancolor:
    """validate_nancolor: clamping and rejection."""

    def test_none_passes_through(self):
        assert validate_nancolor(None) is None

    def test_components_are_clamped(self):
        assert_allclose(validate_nancolor([-0.5, 0.25, 2.0]), [0.0, 0.25, 1.0])

    def test_color_name(self):
        assert_allclose(validate_nancolor("blue"), [0.0, 0.0, 1.0])

    @pytest.mark.parametrize(
        "bad",
        [[1.0, 0.0], [0.0, 0.0, 0.0, 1.0], [[0.0, 0.0, 1.0]], "not-a-color", ["a", "b", "c"], [np.nan, 0, 0]],
    )
    def test_rejects_malformed_colors(self, bad):
        with pytest.raises(BadColor):
            validate_nancolor(bad)

    def test_bad_color_is_a_value_error(self):
        with pytest.raises(ValueError):
            validate_nancolor([1.0])

"""Color-index math: scalar data -> colormap rows -> true-color RGBA.

Row numbers are 1-based throughout this module (row 1 is the first entry of
the color table) and are converted to array offsets only at lookup time.

Two mapping modes:
- ``scaled``: ``row = ceil((v - vmin) / (vmax - vmin) * N)``
- ``direct`` (``NoNorm``), as matplotlib colormaps read unnormalized data:
  integer and boolean data index the table from 0, ``row = floor(v) + 1``
  (booleans land on rows 1 and 2); float data are fractions of the table,
  ``row = floor(v * N) + 1``.

Rows are clamped to ``[1, N]``. NaN and masked samples are undefined and are
colored by a separate policy.
"""
from __future__ import annotations

import numpy as np
from matplotlib.colors import to_rgb
from jaxtyping import Bool, Float, Int
from numpy.typing import ArrayLike

from .errors import BadColor
from .types import DIRECT, SCALED

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _as_float(data: ArrayLike) -> Float[np.ndarray, "..."]:
    """Float64 copy of *data* with masked entries replaced by NaN."""
    masked = np.ma.asarray(data)
    return np.ma.filled(masked.astype(np.float64), np.nan)


def validate_nancolor(nancolor: object) -> Float[np.ndarray, "3"] | None:
    """Validate and clamp an undefined-sample color.

    Parameters
    ----------
    nancolor : sequence of 3 floats, str or None
        ``None`` keeps undefined samples transparent. A matplotlib color
        name is converted with :func:`matplotlib.colors.to_rgb`.

    Returns
    -------
    np.ndarray or None
        RGB triple clamped to ``[0, 1]``.

    Raises
    ------
    BadColor
        If *nancolor* is not a 3-component color.
    """
    if nancolor is None:
        return None
    if isinstance(nancolor, str):
        try:
            return np.asarray(to_rgb(nancolor), dtype=np.float64)
        except ValueError:
            raise BadColor(f"nancolor {nancolor!r} is not a valid color name") from None
    try:
        rgb = np.asarray(nancolor, dtype=np.float64)
    except (TypeError, ValueError):
        raise BadColor(f"nancolor must be an [r, g, b] vector, got {nancolor!r}") from None
    if rgb.shape != (3,):
        raise BadColor(f"nancolor must be an [r, g, b] vector, got shape {rgb.shape}")
    if np.any(np.isnan(rgb)):
        raise BadColor(f"nancolor components must be numbers, got {nancolor!r}")
    return np.clip(rgb, 0.0, 1.0)


# ---------------------------------------------------------------------------
# Row computation
# ---------------------------------------------------------------------------


def scaled_rows(
    data: ArrayLike, clim: tuple[float, float], n_rows: int
) -> Float[np.ndarray, "..."]:
    """Unclamped 1-based rows for scaled mapping (NaN where undefined).

    A degenerate range (``vmax == vmin``) sends every defined sample to row 1.
    """
    values = _as_float(data)
    vmin, vmax = float(clim[0]), float(clim[1])
    span = vmax - vmin
    if span == 0.0:
        return np.where(np.isnan(values), np.nan, 1.0)
    return np.ceil((values - vmin) / span * n_rows)


def direct_rows(data: ArrayLike, n_rows: int) -> Float[np.ndarray, "..."]:
    """Unclamped 1-based rows for direct mapping (NaN where undefined)."""
    dtype = np.ma.asarray(data).dtype
    values = _as_float(data)
    if np.issubdtype(dtype, np.integer) or dtype == np.bool_:
        return np.floor(values) + 1.0
    return np.floor(values * n_rows) + 1.0


def color_rows(
    data: ArrayLike,
    mapping_mode: str,
    clim: tuple[float, float],
    n_rows: int,
) -> tuple[Int[np.ndarray, "..."], Bool[np.ndarray, "..."]]:
    """Compute clamped 1-based table rows for *data*.

    Parameters
    ----------
    data : array_like
        Indexed color data (numeric or boolean; may be masked).
    mapping_mode : str
        ``"scaled"`` or ``"direct"``.
    clim : tuple[float, float]
        Color range ``(vmin, vmax)``; only used in scaled mode.
    n_rows : int
        Number of rows in the color table.

    Returns
    -------
    rows : np.ndarray
        Integer rows in ``[1, n_rows]``, same shape as *data*. Undefined
        samples hold the placeholder row 1.
    undefined : np.ndarray
        Boolean mask of undefined (NaN or masked) samples.

    Raises
    ------
    ValueError
        If *mapping_mode* is unknown or *n_rows* < 1.
    """
    if n_rows < 1:
        raise ValueError(f"Color table must have at least one row, got {n_rows}")
    if mapping_mode == SCALED:
        raw = scaled_rows(data, clim, n_rows)
    elif mapping_mode == DIRECT:
        raw = direct_rows(data, n_rows)
    else:
        raise ValueError(f"Unknown mapping mode {mapping_mode!r}")

    undefined = np.isnan(raw)
    raw[undefined] = 1.0
    rows = np.clip(raw, 1, n_rows).astype(np.intp)
    return rows, undefined


# ---------------------------------------------------------------------------
# Table lookup
# ---------------------------------------------------------------------------


def lookup_true_color(
    rows: Int[np.ndarray, "*shape"],
    undefined: Bool[np.ndarray, "*shape"],
    table: Float[np.ndarray, "N 3"],
    undefined_rgba: ArrayLike,
) -> Float[np.ndarray, "*shape 4"]:
    """Gather RGBA colors for 1-based *rows* from an ``(N, 3)`` *table*.

    Defined samples get alpha 1; undefined samples get *undefined_rgba*.

    Returns
    -------
    np.ndarray
        Array of shape ``(*rows.shape, 4)``.
    """
    table = np.asarray(table, dtype=np.float64)
    rgba = np.ones((*rows.shape, 4), dtype=np.float64)
    for channel in range(3):
        plane = table[rows - 1, channel]
        rgba[..., channel] = plane
    rgba[undefined] = np.asarray(undefined_rgba, dtype=np.float64)
    return rgba


def freeze_color_data(
    data: ArrayLike,
    mapping_mode: str,
    clim: tuple[float, float],
    table: Float[np.ndarray, "N 3"],
    undefined_rgba: ArrayLike = (0.0, 0.0, 0.0, 0.0),
) -> Float[np.ndarray, "*shape 4"]:
    """Convert indexed color data to true-color RGBA using *table*.

    Parameters
    ----------
    data : array_like
        Indexed color data.
    mapping_mode : str
        ``"scaled"`` or ``"direct"``.
    clim : tuple[float, float]
        Color range used for scaled mapping.
    table : np.ndarray
        ``(N, 3)`` RGB color table.
    undefined_rgba : array_like
        RGBA assigned to NaN/masked samples (transparent by default).

    Returns
    -------
    np.ndarray
        ``(*data.shape, 4)`` float RGBA array.
    """
    table = np.asarray(table, dtype=np.float64)
    rows, undefined = color_rows(data, mapping_mode, clim, table.shape[0])
    return lookup_true_color(rows, undefined, table, undefined_rgba)

"""Snapshot records kept by the freezer as Equinox modules.

Two records:
- ``FrozenState``: the indexed color data and mapping mode an artist had
  before it was frozen, so ``unfreeze`` can put them back.
- ``ColorbarBinding``: the owner axes and colormap a colorbar was frozen to,
  reasserted on every later freeze call.

Neither record is attached to the matplotlib object itself; the freezer keeps
them in identity-keyed side tables.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

import equinox as eqx
import numpy as np

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.colors import Colormap

# ---------------------------------------------------------------------------
# Mapping modes
# ---------------------------------------------------------------------------

SCALED = "scaled"
"""Values are rescaled by the color range before table lookup."""

DIRECT = "direct"
"""Values are used as (0-based) table indices as-is."""

MAPPING_MODES: frozenset[str] = frozenset({SCALED, DIRECT})


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


class FrozenState(eqx.Module):
    """Original color data of a frozen artist.

    Parameters
    ----------
    color_data : np.ndarray
        The indexed (scalar) color data, exactly as read from the artist.
        May be a masked array.
    mapping_mode : str
        ``"scaled"`` or ``"direct"``.
    """

    color_data: np.ndarray
    mapping_mode: str = eqx.field(static=True, default=SCALED)

    def __check_init__(self) -> None:
        if self.mapping_mode not in MAPPING_MODES:
            raise ValueError(
                f"Unknown mapping mode {self.mapping_mode!r}. "
                f"Expected one of: {', '.join(sorted(MAPPING_MODES))}"
            )
        if np.size(self.color_data) == 0:
            raise ValueError("FrozenState requires non-empty color data")


class ColorbarBinding(eqx.Module):
    """Colormap snapshot bound to a colorbar by ``freeze_colors(colorbar)``.

    Parameters
    ----------
    axes : Axes
        Axes whose colormap is reasserted.
    colormap : Colormap
        Copy of the colormap active when the colorbar was frozen.
    """

    axes: "Axes"
    colormap: "Colormap"

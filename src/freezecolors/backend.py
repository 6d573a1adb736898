"""Rendering-backend capability check used before writing true-color data.

The freezer asks an injected backend whether true-color artist data can be
rendered and, if not, switches it to a raster backend once. Which backend
names count as lacking true-color support is configuration
(``FreezeSettings.legacy_backends``); every backend shipped with current
matplotlib renders RGBA data, so the default set is empty.
"""
from __future__ import annotations

import dataclasses
import logging
from typing import Protocol

import matplotlib
import matplotlib.pyplot as plt

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class FreezeSettings:
    """Immutable freezer configuration.

    Parameters
    ----------
    raster_backend : str
        Backend to switch to when the active one cannot render true color.
    legacy_backends : frozenset[str]
        Lower-case backend names treated as lacking true-color support.
    """

    raster_backend: str
    legacy_backends: frozenset[str]


DEFAULT_SETTINGS = FreezeSettings(
    raster_backend="agg",
    legacy_backends=frozenset(),
)


class RenderingBackend(Protocol):
    """What the freezer needs from the rendering backend."""

    def supports_true_color(self) -> bool: ...

    def switch_to_raster(self) -> None: ...


class MatplotlibBackend:
    """The process-wide matplotlib backend."""

    def __init__(self, settings: FreezeSettings = DEFAULT_SETTINGS) -> None:
        self.settings = settings

    @property
    def name(self) -> str:
        return matplotlib.get_backend().lower()

    def supports_true_color(self) -> bool:
        return self.name not in self.settings.legacy_backends

    def switch_to_raster(self) -> None:
        logger.info(
            "Backend %r cannot render true-color data; switching to %r",
            self.name,
            self.settings.raster_backend,
        )
        plt.switch_backend(self.settings.raster_backend)

"""Shared test fixtures for the freezecolors test suite.

Every test runs on the Agg backend and starts and ends with no open figures.
Freezer fixtures are isolated from the module-level session.
"""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest

from freezecolors.freeze import ColorFreezer


# ---------------------------------------------------------------------------
# Figure lifecycle
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _close_figures():
    plt.close("all")
    yield
    plt.close("all")


# ---------------------------------------------------------------------------
# Freezer fixtures
# ---------------------------------------------------------------------------


class FakeBackend:
    """Backend stand-in that records capability checks and switches."""

    def __init__(self, true_color: bool = True) -> None:
        self.true_color = true_color
        self.checks = 0
        self.switches = 0

    def supports_true_color(self) -> bool:
        self.checks += 1
        return self.true_color

    def switch_to_raster(self) -> None:
        self.switches += 1
        self.true_color = True


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def freezer(backend) -> ColorFreezer:
    """A fresh freezer with its own tables and a recording backend."""
    return ColorFreezer(backend=backend)


# ---------------------------------------------------------------------------
# Data fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def ramp() -> np.ndarray:
    """4 x 5 ramp of values 0..19."""
    return np.arange(20, dtype=float).reshape(4, 5)


@pytest.fixture
def image_axes(ramp):
    """Axes holding one ``hot`` image of :func:`ramp`."""
    fig, ax = plt.subplots()
    image = ax.imshow(ramp, cmap="hot")
    return ax, image

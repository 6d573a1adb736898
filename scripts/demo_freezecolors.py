"""Interactive walk-through of freezecolors.

Builds the demonstration figures step by step, pausing between steps so the
effect of each ``freeze_colors`` / ``set_colormap`` call can be watched:

1. A live image next to a frozen one; a figure-wide colormap change only
   affects the live image, and the next freeze call restores the frozen
   colorbar.
2. Five kinds of color-mapped artists, each with its own colormap, including
   two scatter series with different colormaps in one axes, a contour plot
   with a frozen colorbar, and NaN handling (transparent vs. ``nancolor``).
3. Two surfaces with different colormaps in one 3-D axes.
4. Three stacked surfaces with their own colormaps and color ranges.
5. ``unfreeze_colors`` on the first figure: everything follows the current
   colormap again.

Usage
-----
Step through interactively:
    python scripts/demo_freezecolors.py

Render every step to PNG without a display:
    python scripts/demo_freezecolors.py --no-pause --save demo_output/
"""
from __future__ import annotations

import argparse
import logging
import os

import matplotlib
import matplotlib.pyplot as plt
import numpy as np

from freezecolors import (
    add_colorbar,
    freeze_colors,
    set_colormap,
    set_figure_colormap,
    unfreeze_colors,
)
from freezecolors._style import PANEL_FIGSIZE, SINGLE_FIGSIZE, apply_style

# ---------------------------------------------------------------------------
# Sample data
# ---------------------------------------------------------------------------


def peaks(n: int = 49) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Sum of translated Gaussians on ``[-3, 3]^2`` (the classic test surface)."""
    x, y = np.meshgrid(np.linspace(-3.0, 3.0, n), np.linspace(-3.0, 3.0, n))
    z = (
        3.0 * (1.0 - x) ** 2 * np.exp(-(x**2) - (y + 1.0) ** 2)
        - 10.0 * (x / 5.0 - x**3 - y**5) * np.exp(-(x**2) - y**2)
        - np.exp(-((x + 1.0) ** 2) - y**2) / 3.0
    )
    return x, y, z


# ---------------------------------------------------------------------------
# Step runner
# ---------------------------------------------------------------------------


class Stepper:
    """Pause between demo steps, or save every step when running headless."""

    def __init__(self, pause: bool, save_dir: str | None) -> None:
        self.pause = pause
        self.save_dir = save_dir
        self.count = 0

    def step(self, message: str) -> None:
        self.count += 1
        print(f"[{self.count:02d}] {message}")
        if self.save_dir is not None:
            for num in plt.get_fignums():
                path = os.path.join(self.save_dir, f"step{self.count:02d}_fig{num}.png")
                plt.figure(num).savefig(path)
        else:
            plt.pause(0.1)
        if self.pause:
            input("    =Hit Enter=")


# ---------------------------------------------------------------------------
# Figures
# ---------------------------------------------------------------------------


def live_vs_frozen(stepper: Stepper) -> plt.Figure:
    """Figure 1, top row: one live and one frozen image."""
    _, _, z = peaks()
    fig, axes = plt.subplots(3, 2, figsize=PANEL_FIGSIZE, num=1)
    for ax in axes.flat[2:]:
        ax.set_visible(False)

    ax = axes[0, 0]
    image = ax.imshow(z, cmap="hot")
    ax.set_title("colors not frozen")
    fig.colorbar(image, ax=ax)
    stepper.step("image with the 'hot' colormap and a regular colorbar")

    set_colormap("jet", ax)
    stepper.step("live image switched to 'jet', its colorbar follows")
    set_colormap("hot", ax)

    ax = axes[0, 1]
    image = ax.imshow(z, cmap="jet")
    ax.set_title("'jet' colormap, frozen")
    freeze_colors(ax)
    freeze_colors(fig.colorbar(image, ax=ax))
    stepper.step("second image frozen with 'jet', colorbar frozen too")

    set_figure_colormap("cool", fig)
    stepper.step(
        "figure colormap set to 'cool': the frozen image keeps its colors, "
        "its colorbar follows for now"
    )

    freeze_colors(axes[0, 0])
    stepper.step("left image frozen with 'cool'; the frozen colorbar is back to 'jet'")
    return fig


def many_artists(fig: plt.Figure, stepper: Stepper) -> None:
    """Figure 1, rebuilt: five kinds of color-mapped artists."""
    x, y, z = peaks()
    fig.clf()

    ax = fig.add_subplot(3, 2, 1)
    image = ax.imshow(z, cmap="hot")
    ax.set_title("imshow, 'hot'")
    freeze_colors(ax)
    freeze_colors(add_colorbar(image, ax))
    stepper.step("frozen image with a frozen colorbar")

    ax = fig.add_subplot(3, 2, 2, projection="3d")
    ax.plot_surface(x, y, z, cmap="jet", linewidth=0)
    ax.set_title("surface, 'jet'")
    freeze_colors(ax)
    stepper.step("frozen surface")

    ax = fig.add_subplot(3, 2, 3)
    rng = np.random.default_rng(0)
    points = rng.uniform(-3.0, 3.0, size=(2, 60))
    sizes = rng.uniform(10.0, 80.0, size=60)
    hot = ax.scatter(points[0], points[1], s=sizes, c=points[0] + points[1], cmap="hot")
    freeze_colors(ax)
    freeze_colors(add_colorbar(hot, ax, "wide"))
    cool = ax.scatter(points[1], points[0], s=sizes, c=points[0] - points[1], cmap="cool")
    freeze_colors(ax)
    freeze_colors(add_colorbar(cool, ax, "horiz"))
    ax.set_title("two scatters, 'hot' and 'cool'")
    stepper.step("two scatter series with different colormaps in one axes")

    ax = fig.add_subplot(3, 2, 4)
    contours = ax.contourf(x, y, z, levels=12, cmap="copper")
    ax.set_title("contourf, 'copper' (colorbar frozen only)")
    freeze_colors(add_colorbar(contours, ax))
    stepper.step("contour plot: only its colorbar is frozen")

    holey = np.where(np.hypot(x, y) < 1.2, np.nan, z)
    for index, nancolor in ((5, None), (6, (0.0, 0.0, 1.0))):
        ax = fig.add_subplot(3, 2, index)
        ax.set_facecolor("green")
        ax.pcolormesh(x, y, holey, cmap="hot", shading="auto")
        if nancolor is None:
            ax.set_title("NaN transparent")
            freeze_colors(ax)
        else:
            ax.set_title("NaN as nancolor")
            freeze_colors(ax, nancolor=nancolor)
    stepper.step("pcolormesh with NaNs: transparent (green shows through) vs. blue")

    set_figure_colormap("gray", fig)
    stepper.step("figure colormap set to 'gray': frozen artists keep their colors")
    freeze_colors(fig)
    stepper.step("next freeze call: frozen colorbars reasserted")


def two_surfaces(stepper: Stepper) -> None:
    """Figure 2: two colormaps in one 3-D axes."""
    x, y, z = peaks()
    fig = plt.figure(num=2, figsize=SINGLE_FIGSIZE)
    ax = fig.add_subplot(projection="3d")

    ax.plot_surface(x, y, z, cmap="viridis", linewidth=0)
    freeze_colors(ax)
    freeze_colors(add_colorbar(ax=ax, location="vshort"))

    ax.plot_surface(x, y, z + 12.0, cmap="gray", linewidth=0, alpha=0.8)
    freeze_colors(ax)
    freeze_colors(add_colorbar(ax=ax, location="hshort"))
    ax.set_title("two colormaps, one axes")
    stepper.step("two surfaces, 'viridis' and 'gray', in one 3-D axes")


def stacked_surfaces(stepper: Stepper) -> None:
    """Figure 3: three surfaces with their own colormap and color range."""
    x, y, z = peaks(31)
    fig = plt.figure(num=3, figsize=SINGLE_FIGSIZE)
    ax = fig.add_subplot(projection="3d")

    layers = ((0.0, "viridis", "vert"), (20.0, "gray", "wide"), (40.0, "hot", "horiz"))
    for offset, cmap, location in layers:
        surface = ax.plot_surface(x, y, z + offset, cmap=cmap, linewidth=0)
        surface.set_clim(offset - 6.0, offset + 8.0)
        freeze_colors(ax)
        freeze_colors(add_colorbar(surface, ax, location, title=cmap))
    ax.set_title("three surfaces, three colormaps")
    stepper.step("stacked surfaces, each frozen with its own colormap and range")


def main():
    parser = argparse.ArgumentParser(
        description="Step through the freezecolors demonstration.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--no-pause",
        action="store_true",
        help="Do not wait for Enter between steps.",
    )
    parser.add_argument(
        "--save",
        type=str,
        default=None,
        metavar="DIR",
        help="Save every step as PNG into DIR (uses the Agg backend).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log freeze/unfreeze details.",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.save is not None:
        matplotlib.use("Agg")
        os.makedirs(args.save, exist_ok=True)
    else:
        plt.ion()
    apply_style()

    stepper = Stepper(pause=not args.no_pause, save_dir=args.save)
    fig = live_vs_frozen(stepper)
    many_artists(fig, stepper)
    two_surfaces(stepper)
    stacked_surfaces(stepper)

    set_figure_colormap("gray", fig)
    unfreeze_colors(fig)
    stepper.step("figure 1 unfrozen: every artist follows 'gray' again")

    print(f"\nDone: {stepper.count} steps")
    if args.save is None:
        plt.ioff()
        plt.show()


if __name__ == "__main__":
    main()

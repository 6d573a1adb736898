"""Two colormaps in one axes.

matplotlib colors every artist from its own colormap, but anything that
later touches the colormaps of an axes (``set_colormap``) or the colorbars
of a figure repaints all of them. Freezing pins an artist's colors.

Verifies:
- The frozen image keeps its pixels after the axes colormap changes
- Its colorbar is reasserted to the frozen colormap on the next freeze call
- Unfreezing restores the original scalar data
"""

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np

from freezecolors import add_colorbar, freeze_colors, set_colormap, unfreeze_colors

x, y = np.meshgrid(np.linspace(-2.0, 2.0, 64), np.linspace(-2.0, 2.0, 64))
ring = np.hypot(x, y)
saddle = x * y

fig, ax = plt.subplots(figsize=(6, 5))

# Left half in "hot", frozen together with its colorbar
left = ax.imshow(ring, cmap="hot", extent=(-4.0, 0.0, -2.0, 2.0))
freeze_colors(ax)
bar = freeze_colors(add_colorbar(left, ax, "vshort", title="hot"))
frozen_pixels = left.get_array().copy()

# Right half in "cool"; freeze it too
right = ax.imshow(saddle, cmap="cool", extent=(0.0, 4.0, -2.0, 2.0))
freeze_colors(ax)
ax.set_xlim(-4.0, 4.0)

print("Multiple colormaps per axes")
print("=" * 40)
print(f"Frozen data shape: {left.get_array().shape}")

# Repaint the whole axes gray: frozen images keep their colors
set_colormap("gray", ax)
assert np.array_equal(left.get_array(), frozen_pixels), "frozen pixels changed!"
print(f"Colorbar colormap after set_colormap: {bar.mappable.get_cmap().name}")

# Any freeze call puts the frozen colorbar back
freeze_colors(ax)
print(f"Colorbar colormap after next freeze:   {bar.mappable.get_cmap().name}")
assert bar.mappable.get_cmap().name == "hot", "colorbar not reasserted!"

# Back to scalar data, drawn with each image's current colormap
unfreeze_colors(ax)
assert left.get_array().ndim == 2 and right.get_array().ndim == 2
print(f"Unfrozen data shape: {left.get_array().shape}")

fig.savefig("multiple_colormaps_per_axis.png")
print("\nSaved multiple_colormaps_per_axis.png")

"""Exceptions raised while validating freeze/unfreeze arguments.

All of them are raised before any artist is touched, so a rejected call
leaves the figure exactly as it was.
"""
from __future__ import annotations


class FreezeColorsError(ValueError):
    """Base class for argument errors raised by :mod:`freezecolors`."""


class InvalidHandle(FreezeColorsError):
    """The root argument is not a live matplotlib figure, axes, artist or colorbar."""


class InvalidOption(FreezeColorsError):
    """An unrecognized keyword option was passed."""


class BadColor(FreezeColorsError):
    """The undefined-sample color is not a 3-component RGB value."""

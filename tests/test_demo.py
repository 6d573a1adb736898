"""Headless run of the demonstration script."""
from __future__ import annotations

import os
import runpy
import sys

import pytest

SCRIPT = os.path.join(os.path.dirname(__file__), os.pardir, "scripts", "demo_freezecolors.py")


@pytest.mark.slow
def test_demo_saves_every_step(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["demo_freezecolors.py", "--no-pause", "--save", str(tmp_path)])
    runpy.run_path(SCRIPT, run_name="__main__")
    saved = sorted(p.name for p in tmp_path.iterdir())
    assert saved
    assert any(name.startswith("step01_") for name in saved)
    assert all(name.endswith(".png") for name in saved)

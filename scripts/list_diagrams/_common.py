"""Shared style, unit scaling, and output helpers for the list diagrams."""

import os
from dataclasses import dataclass

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

# ---------------------------------------------------------------------------
# Paths and settings
# ---------------------------------------------------------------------------

REPO_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
OUTPUT_DIR = os.path.join(REPO_ROOT, "assets")
# Power of two, so inches = pixels / DPI converts back to whole pixels exactly
DPI = 128

# Origin margin around every scene, in physical pixels
MARGIN = 2

# ---------------------------------------------------------------------------
# Palette
# ---------------------------------------------------------------------------

STYLE = {
    "ink": "#000000",  # Outlines, arrows, labels
    "pointer": "#8f8fef",  # hsl(240, 75%, 75%) — head and next-pointer halves
    "null": "#ef8f8f",  # hsl(0, 75%, 75%) — NULL terminator
    "alt_pointer": "#8fef8f",  # hsl(120, 75%, 75%) — indirect pointer callout
}

# ---------------------------------------------------------------------------
# Device-independent sizes
# ---------------------------------------------------------------------------

BASE_UNITS = {
    "space": 40,
    "node_w": 80,
    "node_h": 40,
    "font_size": 20,
    "line_width": 4,
    "head_size": 5,
}


def scale(units, ratio):
    """Convert device-independent units to whole physical pixels.

    Truncates toward zero rather than rounding; the reference images are
    pixel-exact only with truncation.
    """
    return int(units / ratio)


@dataclass(frozen=True)
class Metrics:
    """Pixel sizes for one pixel ratio, computed once and never rescaled."""

    space: int
    node_w: int
    node_h: int
    font_size: int
    line_width: int
    head_size: int

    @property
    def pitch(self):
        """Distance from the start of one node box to the start of the next."""
        return self.node_w + self.space

    @classmethod
    def for_ratio(cls, ratio):
        return cls(**{name: scale(units, ratio) for name, units in BASE_UNITS.items()})


def save(surface, out_dir, filename):
    """Write a drawn surface to out_dir and release its figure."""
    os.makedirs(out_dir, exist_ok=True)
    out = os.path.join(out_dir, filename)
    surface.fig.savefig(out, dpi=DPI, transparent=True)
    plt.close(surface.fig)
    rel = os.path.relpath(out, REPO_ROOT)
    print(f"  {rel}")
    return out

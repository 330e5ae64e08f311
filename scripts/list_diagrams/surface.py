"""Raster drawing surface with a canvas-style 2D context.

A Surface wraps a matplotlib figure whose size in pixels equals the
surface size, with a single borderless axes mapped one data unit to one
pixel and y growing downward.  Drawing state (line width, join, cap, fill
and stroke colour) lives on the surface and is saved and restored as a
stack, so callers can scope a state change to a single operation.
"""

import matplotlib.pyplot as plt
from matplotlib.lines import Line2D
from matplotlib.patches import Circle, Polygon, Rectangle

from ._common import DPI, STYLE

# Size of a freshly created surface before init() sizes it
DEFAULT_SIZE = (300, 150)

DEFAULT_STATE = {
    "line_width": 1,
    "line_join": "miter",
    "line_cap": "butt",
    "fill_style": STYLE["ink"],
    "stroke_style": STYLE["ink"],
}


def _points(px):
    """Convert a length in pixels to matplotlib points."""
    return px * 72 / DPI


class Surface:
    """A drawing target owned by one render call."""

    def __init__(self, metrics, width=DEFAULT_SIZE[0], height=DEFAULT_SIZE[1]):
        self.metrics = metrics
        self.fig = None
        self.ax = None
        self.resize(width, height)

    # -- state --------------------------------------------------------------

    def save(self):
        self._stack.append({name: getattr(self, name) for name in DEFAULT_STATE})

    def restore(self):
        if self._stack:
            vars(self).update(self._stack.pop())

    # -- sizing -------------------------------------------------------------

    def resize(self, width, height):
        """Set the pixel size; discards everything drawn and resets state."""
        if self.fig is not None:
            plt.close(self.fig)
        self.width = width
        self.height = height
        self.fig = plt.figure(figsize=(width / DPI, height / DPI), dpi=DPI)
        self.ax = self.fig.add_axes([0, 0, 1, 1])
        self.ax.set_xlim(0, width)
        self.ax.set_ylim(height, 0)
        self.ax.axis("off")
        vars(self).update(DEFAULT_STATE)
        self._stack = []
        self._z = 0

    def _next_z(self):
        # Later operations paint over earlier ones regardless of artist type
        self._z += 1
        return self._z

    def _stroke_kwargs(self):
        return {
            "edgecolor": self.stroke_style,
            "linewidth": _points(self.line_width),
            "joinstyle": self.line_join,
            "capstyle": self.line_cap,
        }

    # -- drawing ------------------------------------------------------------

    def fill_rect(self, x, y, w, h):
        self.ax.add_patch(
            Rectangle(
                (x, y),
                w,
                h,
                facecolor=self.fill_style,
                edgecolor="none",
                linewidth=0,
                zorder=self._next_z(),
            )
        )

    def stroke_rect(self, x, y, w, h):
        self.ax.add_patch(
            Rectangle((x, y), w, h, fill=False, zorder=self._next_z(), **self._stroke_kwargs())
        )

    def stroke_line(self, points):
        xs, ys = zip(*points)
        self.ax.add_line(
            Line2D(
                xs,
                ys,
                color=self.stroke_style,
                linewidth=_points(self.line_width),
                solid_capstyle=self.line_cap,
                solid_joinstyle=self.line_join,
                zorder=self._next_z(),
            )
        )

    def stroke_polygon(self, points):
        self.ax.add_patch(
            Polygon(points, closed=True, fill=False, zorder=self._next_z(), **self._stroke_kwargs())
        )

    def fill_polygon(self, points):
        self.ax.add_patch(
            Polygon(
                points,
                closed=True,
                facecolor=self.fill_style,
                edgecolor="none",
                linewidth=0,
                zorder=self._next_z(),
            )
        )

    def fill_circle(self, x, y, radius):
        self.ax.add_patch(
            Circle(
                (x, y),
                radius,
                facecolor=self.fill_style,
                edgecolor="none",
                linewidth=0,
                zorder=self._next_z(),
            )
        )

    def fill_text(self, text, x, y, font_size):
        """Draw text centred on (x, y) in the monospace face."""
        self.ax.text(
            x,
            y,
            text,
            color=self.fill_style,
            fontsize=_points(font_size),
            family="monospace",
            ha="center",
            va="center",
            zorder=self._next_z(),
        )


def init(surface, width, height):
    """Size a surface for a scene and set the default stroke."""
    surface.resize(width, height)
    surface.line_width = surface.metrics.line_width
    surface.line_join = "round"

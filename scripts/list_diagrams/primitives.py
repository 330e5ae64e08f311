"""Primitive drawing routines: arrows, filled boxes, and centred labels."""

import numpy as np

HEAD_ANGLE = np.pi / 6


def arrow_geometry(x0, y0, x1, y1, metrics):
    """Return (shaft_end, head) for an arrow from (x0, y0) to (x1, y1).

    The head is a 3x2 array, apex first.  The apex sits one line width
    short of the destination and the shaft stops one more line width short
    of the apex, so the square shaft cap never pokes through the head.
    """
    angle = np.arctan2(y1 - y0, x1 - x0)
    width = metrics.line_width
    step = width * np.array([np.cos(angle), np.sin(angle)])

    apex = np.array([x1, y1], dtype=float) - step
    shaft_end = apex - step

    head = np.array(
        [
            apex,
            apex - metrics.head_size * np.array([np.cos(angle - HEAD_ANGLE), np.sin(angle - HEAD_ANGLE)]),
            apex - metrics.head_size * np.array([np.cos(angle + HEAD_ANGLE), np.sin(angle + HEAD_ANGLE)]),
        ]
    )
    return shaft_end, head


def draw_arrow(surface, x0, y0, x1, y1):
    """Draw a straight arrow with a filled triangular head."""
    shaft_end, head = arrow_geometry(x0, y0, x1, y1, surface.metrics)

    surface.save()
    surface.line_width = surface.metrics.line_width
    surface.line_cap = "projecting"
    surface.line_join = "miter"

    surface.stroke_line([(x0, y0), tuple(shaft_end)])
    surface.stroke_polygon(head)
    surface.fill_polygon(head)
    surface.restore()


def fill_rect(surface, color, x, y, w, h):
    surface.save()
    surface.fill_style = color
    surface.fill_rect(x, y, w, h)
    surface.restore()


def draw_text(surface, text, x, y, w, h):
    """Centre text in the box (x, y, w, h)."""
    font_size = surface.metrics.font_size
    # Nudge down a sixteenth of the font size; monospace glyphs sit high
    surface.fill_text(text, x + w / 2, y + font_size / 16 + h / 2, font_size)

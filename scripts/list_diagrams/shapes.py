"""Named list shapes built from the primitives: node, head, NULL, pointer."""

from ._common import STYLE
from .primitives import draw_arrow, draw_text, fill_rect

# Gap left between an arrow tip and the box it points at
ARROW_GAP = 2


def draw_node(surface, x, y, value):
    """A list node: value on the left, next pointer on the right."""
    m = surface.metrics
    w, h = m.node_w, m.node_h

    fill_rect(surface, STYLE["pointer"], x + w / 2, y, w / 2, h)
    surface.stroke_rect(x, y, w, h)
    surface.stroke_line([(x + w / 2, y), (x + w / 2, y + h)])

    draw_text(surface, value, x, y, w / 2, h)

    draw_arrow(surface, x + w * 3 / 4, y + h / 2, x + w + m.space - ARROW_GAP, y + h / 2)
    surface.fill_circle(x + w * 3 / 4, y + h / 2, h / 6)


def draw_head(surface, x, y):
    m = surface.metrics
    w, h = m.node_w, m.node_h

    fill_rect(surface, STYLE["pointer"], x, y, w, h)
    surface.stroke_rect(x, y, w, h)
    draw_text(surface, "head", x, y, w, h)
    draw_arrow(surface, x + w, y + h / 2, x + w + m.space - ARROW_GAP, y + h / 2)


def draw_null(surface, x, y):
    # No outline: the terminator should not read as a live node
    m = surface.metrics
    fill_rect(surface, STYLE["null"], x, y, m.node_w, m.node_h)
    draw_text(surface, "NULL", x, y, m.node_w, m.node_h)


def draw_pointer(surface, name, color, x, y, w):
    """A named cursor box with an arrow pointing up into the row above."""
    m = surface.metrics
    h = m.node_h

    fill_rect(surface, color, x, y, w, h)
    surface.stroke_rect(x, y, w, h)
    draw_text(surface, name, x, y, w, h)
    draw_arrow(surface, x + w / 2, y, x + w / 2, y - m.space)

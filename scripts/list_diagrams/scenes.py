"""Scene data for each diagram and the walker that lays it out.

Every diagram is a fixed list of placements.  A placement names a shape
kind and positions it on a grid whose columns are one node pitch apart and
whose rows are one node height plus one spacing apart; pointer callouts can
additionally be inset and narrowed by a fraction of the node width.
"""

from dataclasses import dataclass

from ._common import MARGIN, STYLE
from .shapes import draw_head, draw_node, draw_null, draw_pointer
from .surface import init


@dataclass(frozen=True)
class Placement:
    kind: str
    args: tuple = ()
    col: int = 0
    row: int = 0
    inset: float = 0.0
    span: float = 1.0


@dataclass(frozen=True)
class Scene:
    name: str
    title: str
    placements: tuple


SHAPES = {
    "node": draw_node,
    "head": draw_head,
    "null": draw_null,
    "pointer": draw_pointer,
}

# Shapes whose outgoing arrow reaches into the next column
_ARROWED = {"node", "head"}

_LIST = (
    Placement("head"),
    Placement("node", ("0",), col=1),
    Placement("node", ("1",), col=2),
    Placement("node", ("2",), col=3),
    Placement("null", col=4),
)

# ---------------------------------------------------------------------------
# Diagram registry
# ---------------------------------------------------------------------------

SCENES = (
    Scene("node", "A single list node", (Placement("node", ("0",)),)),
    Scene("list", "A list of three nodes", _LIST),
    Scene(
        "traditional",
        "Removal with prev and walk cursors",
        _LIST
        + (
            Placement("pointer", ("prev", "pointer"), col=1, row=1),
            Placement("pointer", ("walk", "pointer"), col=2, row=1),
        ),
    ),
    Scene(
        "improved",
        "Removal through an indirect pointer",
        _LIST + (Placement("pointer", ("p", "alt_pointer"), col=1, row=1, inset=0.5, span=0.5),),
    ),
    Scene(
        "linux",
        "Removal with the list head treated as a node",
        (
            Placement("node", ("h",)),
            Placement("node", ("0",), col=1),
            Placement("node", ("1",), col=2),
            Placement("node", ("2",), col=3),
            Placement("null", col=4),
            Placement("pointer", ("p", "pointer"), row=1, inset=0.5, span=0.5),
        ),
    ),
)

SCENES_BY_NAME = {scene.name: scene for scene in SCENES}


def position(placement, metrics):
    """Absolute top-left corner of a placement."""
    x = MARGIN + placement.col * metrics.pitch + placement.inset * metrics.node_w
    y = MARGIN + placement.row * (metrics.node_h + metrics.space)
    return x, y


def _extent(placement, metrics):
    if placement.kind in _ARROWED:
        return metrics.pitch
    if placement.kind == "pointer":
        return placement.span * metrics.node_w
    return metrics.node_w


def scene_size(scene, metrics):
    """Pixel size of the surface that holds every shape of a scene."""
    right = max(
        p.col * metrics.pitch + p.inset * metrics.node_w + _extent(p, metrics)
        for p in scene.placements
    )
    rows = max(p.row for p in scene.placements) + 1
    width = 2 * MARGIN + right
    height = 2 * MARGIN + rows * metrics.node_h + (rows - 1) * metrics.space
    return int(width), int(height)


def place(surface, placement):
    x, y = position(placement, surface.metrics)
    draw = SHAPES[placement.kind]
    if placement.kind == "pointer":
        name, color = placement.args
        draw(surface, name, STYLE[color], x, y, placement.span * surface.metrics.node_w)
    else:
        draw(surface, x, y, *placement.args)


def layout(surface, scene):
    """Size the surface for a scene, then draw its shapes in order."""
    init(surface, *scene_size(scene, surface.metrics))
    for placement in scene.placements:
        place(surface, placement)


def render(host):
    """Draw every scene whose surface the host provides.

    host maps diagram names to surfaces; names it does not have are
    skipped.  Returns the names drawn.
    """
    drawn = []
    for scene in SCENES:
        surface = host.get(scene.name)
        if surface is None:
            continue
        layout(surface, scene)
        drawn.append(scene.name)
    return drawn

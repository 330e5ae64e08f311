"""Shared fixtures: metrics at ratio 1 and a surface that records its calls."""

from __future__ import annotations

import matplotlib.pyplot as plt
import pytest

from list_diagrams._common import Metrics
from list_diagrams.surface import Surface

DRAWING_OPS = (
    "fill_rect",
    "stroke_rect",
    "stroke_line",
    "stroke_polygon",
    "fill_polygon",
    "fill_circle",
    "fill_text",
)


class RecordingSurface(Surface):
    """Surface that logs every drawing call as (name, args, fill_style)."""

    def __init__(self, metrics, *args, **kwargs):
        self.calls = []
        super().__init__(metrics, *args, **kwargs)

    def names(self):
        return [name for name, _, _ in self.calls]


def _recorder(name):
    def op(self, *args):
        self.calls.append((name, args, self.fill_style))
        return getattr(Surface, name)(self, *args)

    op.__name__ = name
    return op


for _name in DRAWING_OPS:
    setattr(RecordingSurface, _name, _recorder(_name))


@pytest.fixture
def metrics() -> Metrics:
    return Metrics.for_ratio(1)


@pytest.fixture
def surface(metrics):
    s = RecordingSurface(metrics)
    s.resize(700, 200)
    s.line_width = metrics.line_width
    s.line_join = "round"
    yield s
    plt.close(s.fig)


@pytest.fixture
def make_surface():
    """Factory for recording surfaces; closes their figures afterwards."""
    made = []

    def factory(metrics):
        s = RecordingSurface(metrics)
        made.append(s)
        return s

    yield factory
    for s in made:
        plt.close(s.fig)

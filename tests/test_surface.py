"""Surface drawing state and resize behaviour."""

from __future__ import annotations

import matplotlib.pyplot as plt

from list_diagrams._common import STYLE, Metrics
from list_diagrams.surface import DEFAULT_STATE, Surface, init


def test_nested_save_restore_unwinds_in_order() -> None:
    s = Surface(Metrics.for_ratio(1))
    try:
        s.fill_style = "#111111"
        s.save()
        s.fill_style = "#222222"
        s.line_cap = "projecting"
        s.save()
        s.fill_style = "#333333"

        s.restore()
        assert (s.fill_style, s.line_cap) == ("#222222", "projecting")
        s.restore()
        assert (s.fill_style, s.line_cap) == ("#111111", "butt")
        s.restore()
        assert s.fill_style == "#111111"
    finally:
        plt.close(s.fig)


def test_resize_resets_state_and_init_sets_stroke() -> None:
    metrics = Metrics.for_ratio(2)
    s = Surface(metrics)
    try:
        s.fill_style = STYLE["null"]
        s.save()

        init(s, 64, 24)

        assert {name: getattr(s, name) for name in DEFAULT_STATE if name not in ("line_width", "line_join")} == {
            "line_cap": "butt",
            "fill_style": STYLE["ink"],
            "stroke_style": STYLE["ink"],
        }
        assert (s.line_width, s.line_join) == (metrics.line_width, "round")
        s.restore()
        assert s.fill_style == STYLE["ink"]
        assert (s.width, s.height) == (64, 24)
    finally:
        plt.close(s.fig)

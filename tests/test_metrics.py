"""Unit scaling and derived pixel sizes."""

from __future__ import annotations

import math
from dataclasses import astuple

import pytest

from list_diagrams._common import BASE_UNITS, Metrics, scale


@pytest.mark.parametrize("ratio", [0.5, 1.0, 1.25, 1.5, 2.0, 3.0, 4.0])
def test_every_size_is_truncated_base_over_ratio(ratio: float) -> None:
    metrics = Metrics.for_ratio(ratio)

    for name, units in BASE_UNITS.items():
        assert getattr(metrics, name) == math.floor(units / ratio)
        assert isinstance(getattr(metrics, name), int)


@pytest.mark.parametrize("ratio", [0.5, 1.0, 1.5, 2.0, 3.0, 4.0])
def test_no_size_truncates_to_zero(ratio: float) -> None:
    """Halving the ratio from any of these never leaves a size under 1px."""
    for r in (ratio, ratio / 2):
        metrics = Metrics.for_ratio(r)
        assert min(astuple(metrics)) >= 1


def test_scale_truncates_rather_than_rounds() -> None:
    assert scale(40, 1.5) == 26  # 26.67
    assert scale(5, 3) == 1  # 1.67
    assert scale(4, 1.25) == 3  # 3.2


def test_ratio_one_matches_base_units() -> None:
    metrics = Metrics.for_ratio(1)

    assert metrics == Metrics(space=40, node_w=80, node_h=40, font_size=20, line_width=4, head_size=5)
    assert metrics.pitch == 120


def test_ratio_two_halves_everything() -> None:
    metrics = Metrics.for_ratio(2)

    assert (metrics.node_w, metrics.node_h, metrics.space) == (40, 20, 20)
    assert (metrics.line_width, metrics.head_size) == (2, 2)
    assert metrics.pitch == 60

"""Donut chart geometry.

A ring is drawn as one stroked circle per segment: each stroke has dash
pattern ``arc_length circumference`` and is shifted by ``arc_offset``, so the
segments sit end to end around the ring. The renderer applies the -90 degree
rotation that puts offset 0 at the top.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List

from .aggregate import LanguageStat


@dataclass(frozen=True)
class ChartSegment:
    name: str
    color: str
    arc_length: float
    arc_offset: float
    circumference: float

    @property
    def dash_array(self) -> str:
        return f"{self.arc_length} {self.circumference}"


def circumference(radius: float) -> float:
    return 2 * math.pi * radius


def ring_radius(size: float, stroke_width: float) -> float:
    """Radius of a ring of ``stroke_width`` drawn inside a ``size`` square."""
    return size / 2 - stroke_width


def build_segments(stats: Iterable[LanguageStat], radius: float) -> List[ChartSegment]:
    """
    Lay out one arc per stat, in order.

    Args:
        stats: Ranked stats; percentages are expected to sum to 100
        radius: Ring radius

    Returns:
        Segments in the same order as ``stats``. Zero-percent stats give
        zero-length arcs and are kept.
    """
    total = circumference(radius)
    cursor = 0.0
    segments = []
    for stat in stats:
        arc = (stat.percent / 100) * total
        segments.append(ChartSegment(stat.name, stat.color, arc, cursor, total))
        cursor -= arc
    return segments


__all__ = ["ChartSegment", "circumference", "ring_radius", "build_segments"]

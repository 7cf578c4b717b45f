"""Pure overlap tests on top-left anchored rectangles."""
from __future__ import annotations

from typing import Protocol


class Rect(Protocol):
    x: float
    y: float
    width: float
    height: float


Vec = tuple[float, ...]


def padded_aabb_vs_aabb(
    a: Rect, b: Rect, padding: float = 0.0,
) -> tuple[Vec, float] | None:
    """Overlap of two boxes each shrunk by ``padding`` on every side.

    Returns (normal A→B, depth) on the minimum-penetration axis or None.
    Touching edges do not count. A box smaller than twice the padding
    collapses to its centre point.
    """
    min_overlap = float("inf")
    min_axis = -1
    min_sign = 1.0
    spans = (
        (a.x, a.width, b.x, b.width),
        (a.y, a.height, b.y, b.height),
    )
    for i, (pos_a, size_a, pos_b, size_b) in enumerate(spans):
        half_a = max(0.0, size_a / 2 - padding)
        half_b = max(0.0, size_b / 2 - padding)
        center_a = pos_a + size_a / 2
        center_b = pos_b + size_b / 2
        overlap = (half_a + half_b) - abs(center_a - center_b)
        if overlap <= 0.0:
            return None
        if overlap < min_overlap:
            min_overlap = overlap
            min_axis = i
            min_sign = 1.0 if center_b >= center_a else -1.0

    normal = tuple(min_sign if i == min_axis else 0.0 for i in range(2))
    return normal, min_overlap


def overlaps(a: Rect, b: Rect, padding: float = 0.0) -> bool:
    return padded_aabb_vs_aabb(a, b, padding) is not None

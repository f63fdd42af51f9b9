"""Axis-aligned bounding boxes."""

from __future__ import annotations

from dataclasses import dataclass, field

from chiprunner.vecmath import Vector3


@dataclass
class AABB:
    """Box spanned by its minimum and maximum corners."""

    min: Vector3 = field(default_factory=Vector3)
    max: Vector3 = field(default_factory=Vector3)


def is_collision(aabb1: AABB, aabb2: AABB) -> bool:
    """True when the boxes overlap or touch on every axis."""
    return all(
        not (hi1 < lo2 or lo1 > hi2)
        for lo1, hi1, lo2, hi2 in zip(aabb1.min, aabb1.max, aabb2.min, aabb2.max)
    )
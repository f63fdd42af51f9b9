"""Interpolation and easing curves."""

from __future__ import annotations

import math


def linear(start: float, end: float, t: float) -> float:
    """Blend from ``start`` to ``end`` by an already eased ``t``."""
    return (1.0 - t) * start + t * end


def ease_out(x: float) -> float:
    return math.sin((x * math.pi) / 2.0)


def ease_in(x: float) -> float:
    return 1.0 - math.cos((x * math.pi) / 2.0)


def ease_in_out(x: float) -> float:
    return -(math.cos(math.pi * x) - 1.0) / 2.0


def smooth_step(t: float) -> float:
    """Quintic fade curve 6t^5 - 15t^4 + 10t^3."""
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)
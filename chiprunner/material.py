"""Surface material and per-object colour data."""

from __future__ import annotations

from dataclasses import dataclass, field

from chiprunner.vecmath import Vector3, Vector4


@dataclass
class Material:
    """Lighting coefficients and texture reference of a mesh surface."""

    name: str = ""
    ambient: Vector3 = field(default_factory=lambda: Vector3(0.3, 0.3, 0.3))
    diffuse: Vector3 = field(default_factory=lambda: Vector3(0.8, 0.8, 0.8))
    specular: Vector3 = field(default_factory=lambda: Vector3(0.0, 0.0, 0.0))
    uv_scale: Vector3 = field(default_factory=lambda: Vector3(1.0, 1.0, 1.0))
    uv_offset: Vector3 = field(default_factory=lambda: Vector3(0.0, 0.0, 0.0))
    alpha: float = 1.0
    texture_filename: str = ""
    texture_handle: int = 0


@dataclass
class ObjectColor:
    """RGBA colour applied to a single drawn object."""

    color: Vector4 = field(default_factory=lambda: Vector4(1.0, 1.0, 1.0, 1.0))
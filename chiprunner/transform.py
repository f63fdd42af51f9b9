"""World and view-projection transform data."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from chiprunner.vecmath import Matrix4x4, Vector3, make_affine_matrix


@dataclass
class WorldTransform:
    """Local scale, rotation and translation of an object, plus its world matrix."""

    scale: Vector3 = field(default_factory=lambda: Vector3(1.0, 1.0, 1.0))
    rotation: Vector3 = field(default_factory=Vector3)
    translation: Vector3 = field(default_factory=Vector3)
    mat_world: Matrix4x4 = field(default_factory=Matrix4x4.identity)
    parent: Optional["WorldTransform"] = None

    def update_matrix(self) -> None:
        """Recompute the world matrix from scale, rotation and translation."""
        self.mat_world = make_affine_matrix(self.scale, self.rotation, self.translation)


@dataclass
class ViewProjection:
    """Camera placement and projection parameters."""

    rotation: Vector3 = field(default_factory=Vector3)
    translation: Vector3 = field(default_factory=lambda: Vector3(0.0, 0.0, -50.0))
    fov_angle_y: float = 45.0 * 3.141592654 / 180.0
    aspect_ratio: float = 16.0 / 9.0
    near_z: float = 0.1
    far_z: float = 1000.0
    mat_view: Matrix4x4 = field(default_factory=Matrix4x4.identity)
    mat_projection: Matrix4x4 = field(default_factory=Matrix4x4.identity)

    def __post_init__(self) -> None:
        if not math.isfinite(self.aspect_ratio) or self.aspect_ratio <= 0.0:
            raise ValueError("aspect_ratio must be a positive number")
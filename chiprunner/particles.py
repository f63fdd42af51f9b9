"""Burst of particles shown when the player dies."""

from __future__ import annotations

import math
from typing import ClassVar, List

from chiprunner.material import ObjectColor
from chiprunner.transform import WorldTransform
from chiprunner.vecmath import Vector3, Vector4, make_rotate_z_matrix, transform


class DeathParticles:
    """Particles flying outward in a ring while fading out."""

    NUM_PARTICLES: ClassVar[int] = 8
    DURATION: ClassVar[float] = 1.0
    SPEED: ClassVar[float] = 0.1
    ANGLE_UNIT: ClassVar[float] = 2.0 * math.pi / 8

    def __init__(self, position: Vector3) -> None:
        self.world_transforms: List[WorldTransform] = [
            WorldTransform(translation=position.copy()) for _ in range(self.NUM_PARTICLES)
        ]
        self.counter = 0.0
        self.finished = False
        self.color = Vector4(1.0, 1.0, 1.0, 1.0)
        self.object_color = ObjectColor()

    def update(self) -> None:
        """Move every particle one frame outward and fade the colour."""
        if self.finished:
            return
        for world_transform in self.world_transforms:
            world_transform.update_matrix()
        for i, world_transform in enumerate(self.world_transforms):
            velocity = transform(
                Vector3(self.SPEED, 0.0, 0.0), make_rotate_z_matrix(self.ANGLE_UNIT * i)
            )
            world_transform.translation = world_transform.translation + velocity
        self.counter += 1.0 / 60.0
        if self.counter >= self.DURATION:
            self.counter = self.DURATION
            self.finished = True
        self.color.w = max(0.0, 1.0 - self.counter / self.DURATION)
        self.object_color.color = Vector4(*self.color)
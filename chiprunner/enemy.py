"""Walking enemy that marches left with a rocking animation."""

from __future__ import annotations

import math
from typing import Any, ClassVar

from chiprunner.aabb import AABB
from chiprunner.transform import WorldTransform
from chiprunner.vecmath import Vector3


class Enemy:
    """Enemy moving at a constant speed toward negative x."""

    WALK_SPEED: ClassVar[float] = 0.05
    WALK_MOTION_ANGLE_START: ClassVar[float] = math.pi / 6.0
    WALK_MOTION_ANGLE_END: ClassVar[float] = -(math.pi / 4.0)
    WALK_MOTION_TIME: ClassVar[float] = 1.0
    WIDTH: ClassVar[float] = 0.8
    HEIGHT: ClassVar[float] = 0.8

    def __init__(self, position: Vector3) -> None:
        self.world_transform = WorldTransform(translation=position.copy())
        self.world_transform.rotation.y = -(math.pi / 2.0)
        self.velocity = Vector3(-self.WALK_SPEED, 0.0, 0.0)
        self.walk_timer = 0.0

    @property
    def world_position(self) -> Vector3:
        return self.world_transform.translation.copy()

    def update(self) -> None:
        """Advance the walk animation and move by one frame."""
        self.walk_timer += 1.0 / 60.0
        param = math.sin(2.0 * math.pi * self.walk_timer / self.WALK_MOTION_TIME)
        radian = self.WALK_MOTION_ANGLE_START + self.WALK_MOTION_ANGLE_END * (param + 1.0) / 2.0
        self.world_transform.rotation.x = radian
        self.world_transform.update_matrix()
        self.world_transform.translation = self.world_transform.translation + self.velocity

    def aabb(self) -> AABB:
        """Bounding box centred on the enemy."""
        pos = self.world_transform.translation
        half_w = self.WIDTH / 2.0
        half_h = self.HEIGHT / 2.0
        return AABB(
            min=Vector3(pos.x - half_w, pos.y - half_h, pos.z - half_w),
            max=Vector3(pos.x + half_w, pos.y + half_h, pos.z + half_w),
        )

    def on_collision(self, player: Any) -> None:
        """Enemies are unaffected by touching the player."""
        del player
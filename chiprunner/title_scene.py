"""Title screen with a bobbing logo, left with the space key."""

from __future__ import annotations

import math
from typing import ClassVar

from chiprunner.input import Key, Keyboard
from chiprunner.transform import ViewProjection, WorldTransform
from chiprunner.vecmath import Vector3


class TitleScene:
    """Shows the title and the player model until space is pressed."""

    TIME_TITLE_MOVE: ClassVar[float] = 2.0
    TITLE_SCALE: ClassVar[float] = 10.0
    PLAYER_SCALE: ClassVar[float] = 10.0

    def __init__(self) -> None:
        self.finished = False
        self.counter = 0.0
        self.view_projection = ViewProjection()

        s = self.TITLE_SCALE
        self.world_transform_title = WorldTransform(
            scale=Vector3(s, s, s),
            rotation=Vector3(math.pi / 2.0, math.pi, 0.0),
            translation=Vector3(-19.0, 0.0, 0.0),
        )
        p = self.PLAYER_SCALE
        self.world_transform_player = WorldTransform(
            scale=Vector3(p, p, p),
            rotation=Vector3(0.0, 0.95 * math.pi, 0.0),
            translation=Vector3(-2.0, -10.0, 0.0),
        )

    def update(self, keyboard: Keyboard) -> None:
        """Advance the bobbing animation and watch for the space key."""
        if keyboard.push_key(Key.SPACE):
            self.finished = True
        self.counter = math.fmod(self.counter + 1.0 / 60.0, self.TIME_TITLE_MOVE)
        angle = self.counter / self.TIME_TITLE_MOVE * 2.0 * math.pi
        self.world_transform_title.translation.y = math.sin(angle) + 10.0
        self.world_transform_title.update_matrix()
        self.world_transform_player.update_matrix()
"""Player character: keyboard-driven running, jumping and tile collision."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Optional

from chiprunner.aabb import AABB
from chiprunner.easing import ease_in_out, linear
from chiprunner.input import Key, Keyboard
from chiprunner.mapchip import MapChipField, MapChipType
from chiprunner.transform import WorldTransform
from chiprunner.vecmath import Vector3


class LRDirection(enum.IntEnum):
    """Which way the player faces."""

    RIGHT = 0
    LEFT = 1


class Corner(enum.IntEnum):
    """Corners of the player's collision box."""

    RIGHT_BOTTOM = 0
    LEFT_BOTTOM = 1
    RIGHT_TOP = 2
    LEFT_TOP = 3


@dataclass
class CollisionMapInfo:
    """Result of checking one frame's movement against the map."""

    ceiling: bool = False
    landing: bool = False
    hit_wall: bool = False
    move: Vector3 = field(default_factory=Vector3)


class Player:
    """The runner controlled by the arrow keys."""

    ACCELERATION: ClassVar[float] = 0.01
    ATTENUATION: ClassVar[float] = 0.09
    LIMIT_RUN_SPEED: ClassVar[float] = 0.3
    TIME_TURN: ClassVar[float] = 0.3
    TURN_TIMER_START: ClassVar[float] = 0.7
    GRAVITY_ACCELERATION: ClassVar[float] = 0.98
    LIMIT_FALL_SPEED: ClassVar[float] = 0.5
    JUMP_ACCELERATION: ClassVar[float] = 20.0
    WIDTH: ClassVar[float] = 0.8
    HEIGHT: ClassVar[float] = 0.8
    BLANK: ClassVar[float] = 0.04
    GROUND_SEARCH_HEIGHT: ClassVar[float] = 0.06
    ATTENUATION_WALL: ClassVar[float] = 0.2
    ATTENUATION_LANDING: ClassVar[float] = 0.0
    DESTINATION_ROTATION_Y: ClassVar[Dict[LRDirection, float]] = {
        LRDirection.RIGHT: math.pi / 2.0,
        LRDirection.LEFT: math.pi * 3.0 / 2.0,
    }

    def __init__(self, position: Vector3, map_chip_field: Optional[MapChipField] = None) -> None:
        self.world_transform = WorldTransform(translation=position.copy())
        self.world_transform.rotation.y = math.pi / 2.0
        self.map_chip_field = map_chip_field
        self.velocity = Vector3()
        self.is_dead = False
        self.lr_direction = LRDirection.RIGHT
        self.turn_first_rotation_y = 0.0
        self.turn_timer = 0.0
        self.on_ground = True
        self.spawn = 0
        self.hit_goal = False

    @property
    def world_position(self) -> Vector3:
        return self.world_transform.translation.copy()

    def _field(self) -> MapChipField:
        if self.map_chip_field is None:
            raise RuntimeError("player has no map chip field")
        return self.map_chip_field

    # ------------------------------------------------------------------ frame

    def update(self, keyboard: Keyboard) -> None:
        """Run one frame: input, map collision, movement, grounding and turning."""
        self._field()
        self.input_move(keyboard)
        info = CollisionMapInfo(move=self.velocity.copy())
        self._check_map_collision(info)
        self.world_transform.translation = self.world_transform.translation + info.move
        if info.ceiling:
            self.velocity.y = 0.0
        if info.hit_wall:
            self.velocity.x *= 1.0 - self.ATTENUATION_WALL
        self._update_on_ground(info)
        self.animate_turn()
        self.world_transform.update_matrix()

    def input_move(self, keyboard: Keyboard) -> None:
        """Apply running, braking, jumping or gravity to the velocity."""
        if self.on_ground:
            right = keyboard.push_key(Key.RIGHT)
            left = keyboard.push_key(Key.LEFT)
            if right or left:
                acceleration = 0.0
                if right:
                    if self.velocity.x < 0.0:
                        self.velocity.x *= 1.0 - self.ATTENUATION
                    acceleration += self.ACCELERATION
                    self._start_turn(LRDirection.RIGHT)
                else:
                    if self.velocity.x > 0.0:
                        self.velocity.x *= 1.0 - self.ATTENUATION
                    acceleration -= self.ACCELERATION
                    self._start_turn(LRDirection.LEFT)
                self.velocity.x += acceleration
                self.velocity.x = min(
                    max(self.velocity.x, -self.LIMIT_RUN_SPEED), self.LIMIT_RUN_SPEED
                )
            else:
                self.velocity.x *= 1.0 - self.ATTENUATION
            if keyboard.push_key(Key.UP):
                self.velocity = self.velocity + Vector3(0.0, self.JUMP_ACCELERATION / 60.0, 0.0)
        else:
            self.velocity = self.velocity + Vector3(0.0, -self.GRAVITY_ACCELERATION / 60.0, 0.0)
            self.velocity.y = max(self.velocity.y, -self.LIMIT_FALL_SPEED)

    def _start_turn(self, direction: LRDirection) -> None:
        if self.lr_direction != direction:
            self.lr_direction = direction
            self.turn_first_rotation_y = self.world_transform.rotation.y
            self.turn_timer = self.TURN_TIMER_START

    def animate_turn(self) -> None:
        """Rotate toward the facing direction while the turn timer runs."""
        if self.turn_timer > 0.0:
            self.turn_timer = max(self.turn_timer - 1.0 / 60.0, 0.0)
            destination = self.DESTINATION_ROTATION_Y[self.lr_direction]
            self.world_transform.rotation.y = linear(
                destination, self.turn_first_rotation_y, ease_in_out(self.turn_timer)
            )

    # -------------------------------------------------------------- geometry

    def corner_position(self, center: Vector3, corner: Corner) -> Vector3:
        """Position of a corner of the collision box around ``center``."""
        half_w = self.WIDTH / 2.0
        half_h = self.HEIGHT / 2.0
        offsets = {
            Corner.RIGHT_BOTTOM: Vector3(+half_w, -half_h, 0.0),
            Corner.LEFT_BOTTOM: Vector3(-half_w, -half_h, 0.0),
            Corner.RIGHT_TOP: Vector3(+half_w, +half_h, 0.0),
            Corner.LEFT_TOP: Vector3(-half_w, +half_h, 0.0),
        }
        return center + offsets[Corner(corner)]

    def _corners_after(self, move: Vector3) -> Dict[Corner, Vector3]:
        center = self.world_transform.translation + move
        return {corner: self.corner_position(center, corner) for corner in Corner}

    def aabb(self) -> AABB:
        """Bounding box centred on the player."""
        pos = self.world_transform.translation
        half_w = self.WIDTH / 2.0
        half_h = self.HEIGHT / 2.0
        return AABB(
            min=Vector3(pos.x - half_w, pos.y - half_h, pos.z - half_w),
            max=Vector3(pos.x + half_w, pos.y + half_h, pos.z + half_w),
        )

    # ------------------------------------------------------------- collision

    def _check_map_collision(self, info: CollisionMapInfo) -> None:
        self._check_up(info)
        self._check_down(info)
        self._check_right(info)
        self._check_left(info)

    def _check_up(self, info: CollisionMapInfo) -> None:
        if info.move.y <= 0:
            return
        chips = self._field()
        corners = self._corners_after(info.move)
        hit = False
        for corner in (Corner.LEFT_TOP, Corner.RIGHT_TOP):
            index = chips.index_set_at(corners[corner])
            if chips.type_at(index.x_index, index.y_index) is MapChipType.BLOCK:
                hit = True
        if hit:
            translation = self.world_transform.translation
            index = chips.index_set_at(translation + Vector3(0.0, self.HEIGHT / 2.0, 0.0))
            rect = chips.rect_at(index.x_index, index.y_index)
            info.move.y = max(
                0.0, rect.bottom - translation.y - (self.HEIGHT / 2.0 + self.BLANK)
            )
            info.ceiling = True

    def _check_down(self, info: CollisionMapInfo) -> None:
        if info.move.y >= 0:
            return
        chips = self._field()
        corners = self._corners_after(info.move)
        hit = False

        index = chips.index_set_at(corners[Corner.LEFT_BOTTOM])
        chip = chips.type_at(index.x_index, index.y_index)
        if chip is MapChipType.BLOCK:
            hit = True
        if chip is MapChipType.SAVE_BLOCK:
            hit = True
            self.spawn = 1

        index = chips.index_set_at(corners[Corner.RIGHT_BOTTOM])
        chip = chips.type_at(index.x_index, index.y_index)
        if chip is MapChipType.BLOCK:
            hit = True
        if chip is MapChipType.SAVE_BLOCK:
            hit = True
            self.spawn = 1
        if chip is MapChipType.GOAL_BLOCK:
            hit = True
            self.hit_goal = True

        if hit:
            translation = self.world_transform.translation
            below = Vector3(0.0, -self.HEIGHT / 2.0, 0.0)
            index_now = chips.index_set_at(translation + below)
            if index_now.y_index != index.y_index:
                index = chips.index_set_at(translation + info.move + below)
                rect = chips.rect_at(index.x_index, index.y_index)
                info.move.y = min(
                    0.0, rect.top - translation.y + (self.HEIGHT / 2.0 + self.BLANK)
                )
                info.landing = True

    def _wall_hit(self, corners: Dict[Corner, Vector3], pair: tuple, step: int) -> Any:
        chips = self._field()
        hit = False
        index = None
        for corner in pair:
            index = chips.index_set_at(corners[corner])
            chip = chips.type_at(index.x_index, index.y_index)
            chip_next = chips.type_at(index.x_index + step, index.y_index)
            if chip is MapChipType.BLOCK and chip_next is not MapChipType.BLOCK:
                hit = True
        return hit, index

    def _check_right(self, info: CollisionMapInfo) -> None:
        if info.move.x <= 0:
            return
        chips = self._field()
        corners = self._corners_after(info.move)
        hit, index = self._wall_hit(corners, (Corner.RIGHT_TOP, Corner.RIGHT_BOTTOM), -1)
        if hit:
            translation = self.world_transform.translation
            side = Vector3(self.WIDTH / 2.0, 0.0, 0.0)
            index_now = chips.index_set_at(translation + side)
            if index_now.x_index != index.x_index:
                index = chips.index_set_at(translation + info.move + side)
                rect = chips.rect_at(index.x_index, index.y_index)
                info.move.x = min(
                    0.0, rect.left - translation.x + (self.WIDTH / 2.0 + self.BLANK)
                )
                info.hit_wall = True

    def _check_left(self, info: CollisionMapInfo) -> None:
        if info.move.x >= 0:
            return
        chips = self._field()
        corners = self._corners_after(info.move)
        hit, index = self._wall_hit(corners, (Corner.LEFT_TOP, Corner.LEFT_BOTTOM), +1)
        if hit:
            translation = self.world_transform.translation
            side = Vector3(-self.WIDTH / 2.0, 0.0, 0.0)
            index_now = chips.index_set_at(translation + side)
            if index_now.x_index != index.x_index:
                index = chips.index_set_at(translation + info.move + side)
                rect = chips.rect_at(index.x_index, index.y_index)
                info.move.x = min(
                    0.0, rect.right - translation.x + (self.WIDTH / 2.0 + self.BLANK)
                )
                info.hit_wall = True

    def _update_on_ground(self, info: CollisionMapInfo) -> None:
        if self.on_ground:
            if self.velocity.y > 0.0:
                self.on_ground = False
                return
            chips = self._field()
            corners = self._corners_after(info.move)
            search = Vector3(0.0, -self.GROUND_SEARCH_HEIGHT, 0.0)
            ground = False
            for corner in (Corner.LEFT_BOTTOM, Corner.RIGHT_BOTTOM):
                index = chips.index_set_at(corners[corner] + search)
                if chips.type_at(index.x_index, index.y_index) is MapChipType.BLOCK:
                    ground = True
            if not ground:
                self.on_ground = False
        elif info.landing:
            self.velocity.x *= 1.0 - self.ATTENUATION_LANDING
            self.velocity.y = 0.0
            self.on_ground = True

    # ---------------------------------------------------------------- events

    def on_collision(self, enemy: Any) -> None:
        """Touching an enemy kills the player."""
        del enemy
        self.is_dead = True

    def respawn(self, position: Vector3) -> None:
        """Bring the player back to life at ``position``, at rest."""
        self.is_dead = False
        self.world_transform.translation = position.copy()
        self.velocity = Vector3()
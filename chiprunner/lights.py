"""Light sources and the group that holds them for a scene."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar, List, Sequence, TypeVar

from chiprunner.vecmath import Vector2, Vector3

_T = TypeVar("_T")


@dataclass
class DirectionalLight:
    """Parallel light coming from one direction."""

    direction: Vector3 = field(default_factory=lambda: Vector3(1.0, 0.0, 0.0))
    color: Vector3 = field(default_factory=lambda: Vector3(1.0, 1.0, 1.0))
    active: bool = False


@dataclass
class PointLight:
    """Light radiating from a point with distance attenuation."""

    position: Vector3 = field(default_factory=lambda: Vector3(0.0, 0.0, 0.0))
    color: Vector3 = field(default_factory=lambda: Vector3(1.0, 1.0, 1.0))
    atten: Vector3 = field(default_factory=lambda: Vector3(1.0, 1.0, 1.0))
    active: bool = False


@dataclass
class SpotLight:
    """Cone of light with angular fall-off."""

    direction: Vector3 = field(default_factory=lambda: Vector3(1.0, 0.0, 0.0))
    position: Vector3 = field(default_factory=lambda: Vector3(0.0, 0.0, 0.0))
    color: Vector3 = field(default_factory=lambda: Vector3(1.0, 1.0, 1.0))
    atten: Vector3 = field(default_factory=lambda: Vector3(1.0, 1.0, 1.0))
    factor_angle_cos: Vector2 = field(default_factory=lambda: Vector2(0.2, 0.5))
    active: bool = False

    def set_factor_angle(self, factor_angle: Vector2) -> None:
        """Set the fall-off start (x) and end (y) angles, in radians."""
        self.factor_angle_cos = Vector2(math.cos(factor_angle.x), math.cos(factor_angle.y))


@dataclass
class CircleShadow:
    """Round shadow cast by an object under a virtual light."""

    direction: Vector3 = field(default_factory=lambda: Vector3(1.0, 0.0, 0.0))
    distance_caster_light: float = 100.0
    caster_pos: Vector3 = field(default_factory=lambda: Vector3(0.0, 0.0, 0.0))
    atten: Vector3 = field(default_factory=lambda: Vector3(0.5, 0.6, 0.0))
    factor_angle_cos: Vector2 = field(default_factory=lambda: Vector2(0.2, 0.5))
    active: bool = False

    def set_factor_angle(self, factor_angle: Vector2) -> None:
        """Set the fall-off start (x) and end (y) angles, in radians."""
        self.factor_angle_cos = Vector2(math.cos(factor_angle.x), math.cos(factor_angle.y))


@dataclass
class LightGroup:
    """Fixed set of lights plus an ambient colour.

    Every change marks the group dirty so that a renderer knows to upload it.
    """

    DIR_LIGHT_NUM: ClassVar[int] = 3
    POINT_LIGHT_NUM: ClassVar[int] = 3
    SPOT_LIGHT_NUM: ClassVar[int] = 3
    CIRCLE_SHADOW_NUM: ClassVar[int] = 1

    ambient_color: Vector3 = field(default_factory=lambda: Vector3(1.0, 1.0, 1.0))
    dir_lights: List[DirectionalLight] = field(
        default_factory=lambda: [DirectionalLight() for _ in range(LightGroup.DIR_LIGHT_NUM)]
    )
    point_lights: List[PointLight] = field(
        default_factory=lambda: [PointLight() for _ in range(LightGroup.POINT_LIGHT_NUM)]
    )
    spot_lights: List[SpotLight] = field(
        default_factory=lambda: [SpotLight() for _ in range(LightGroup.SPOT_LIGHT_NUM)]
    )
    circle_shadows: List[CircleShadow] = field(
        default_factory=lambda: [CircleShadow() for _ in range(LightGroup.CIRCLE_SHADOW_NUM)]
    )
    dirty: bool = False

    @staticmethod
    def _pick(items: Sequence[_T], index: int, kind: str) -> _T:
        if not 0 <= index < len(items):
            raise IndexError(f"{kind} index {index} out of range 0..{len(items) - 1}")
        return items[index]

    def set_ambient_color(self, color: Vector3) -> None:
        self.ambient_color = color.copy()
        self.dirty = True

    def set_dir_light_active(self, index: int, active: bool) -> None:
        self._pick(self.dir_lights, index, "directional light").active = active
        self.dirty = True

    def set_dir_light_dir(self, index: int, direction: Vector3) -> None:
        self._pick(self.dir_lights, index, "directional light").direction = direction.copy()
        self.dirty = True

    def set_dir_light_color(self, index: int, color: Vector3) -> None:
        self._pick(self.dir_lights, index, "directional light").color = color.copy()
        self.dirty = True

    def set_point_light_active(self, index: int, active: bool) -> None:
        self._pick(self.point_lights, index, "point light").active = active
        self.dirty = True

    def set_point_light_pos(self, index: int, position: Vector3) -> None:
        self._pick(self.point_lights, index, "point light").position = position.copy()
        self.dirty = True

    def set_point_light_color(self, index: int, color: Vector3) -> None:
        self._pick(self.point_lights, index, "point light").color = color.copy()
        self.dirty = True

    def set_point_light_atten(self, index: int, atten: Vector3) -> None:
        self._pick(self.point_lights, index, "point light").atten = atten.copy()
        self.dirty = True

    def set_spot_light_active(self, index: int, active: bool) -> None:
        self._pick(self.spot_lights, index, "spot light").active = active
        self.dirty = True

    def set_spot_light_dir(self, index: int, direction: Vector3) -> None:
        self._pick(self.spot_lights, index, "spot light").direction = direction.copy()
        self.dirty = True

    def set_spot_light_pos(self, index: int, position: Vector3) -> None:
        self._pick(self.spot_lights, index, "spot light").position = position.copy()
        self.dirty = True

    def set_spot_light_color(self, index: int, color: Vector3) -> None:
        self._pick(self.spot_lights, index, "spot light").color = color.copy()
        self.dirty = True

    def set_spot_light_atten(self, index: int, atten: Vector3) -> None:
        self._pick(self.spot_lights, index, "spot light").atten = atten.copy()
        self.dirty = True

    def set_spot_light_factor_angle(self, index: int, factor_angle: Vector2) -> None:
        self._pick(self.spot_lights, index, "spot light").set_factor_angle(factor_angle)
        self.dirty = True

    def set_circle_shadow_active(self, index: int, active: bool) -> None:
        self._pick(self.circle_shadows, index, "circle shadow").active = active
        self.dirty = True

    def set_circle_shadow_caster_pos(self, index: int, position: Vector3) -> None:
        self._pick(self.circle_shadows, index, "circle shadow").caster_pos = position.copy()
        self.dirty = True

    def set_circle_shadow_dir(self, index: int, direction: Vector3) -> None:
        self._pick(self.circle_shadows, index, "circle shadow").direction = direction.copy()
        self.dirty = True

    def set_circle_shadow_distance_caster_light(self, index: int, distance: float) -> None:
        self._pick(self.circle_shadows, index, "circle shadow").distance_caster_light = distance
        self.dirty = True

    def set_circle_shadow_atten(self, index: int, atten: Vector3) -> None:
        self._pick(self.circle_shadows, index, "circle shadow").atten = atten.copy()
        self.dirty = True

    def set_circle_shadow_factor_angle(self, index: int, factor_angle: Vector2) -> None:
        self._pick(self.circle_shadows, index, "circle shadow").set_factor_angle(factor_angle)
        self.dirty = True
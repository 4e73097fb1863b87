"""Light sources and the group that holds a fixed set of them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar

from guardian_sky.affine import Vector3


def _unit_x() -> Vector3:
    return Vector3(1.0, 0.0, 0.0)


def _white() -> Vector3:
    return Vector3(1.0, 1.0, 1.0)


def _cosines(start: float, end: float) -> tuple[float, float]:
    return (math.cos(start), math.cos(end))


@dataclass
class DirectionalLight:
    """A parallel light shining along a direction."""

    light_dir: Vector3 = field(default_factory=_unit_x)
    light_color: Vector3 = field(default_factory=_white)
    active: bool = False


@dataclass
class PointLight:
    """A light radiating from a point with distance attenuation."""

    light_pos: Vector3 = field(default_factory=Vector3)
    light_color: Vector3 = field(default_factory=_white)
    light_atten: Vector3 = field(default_factory=_white)
    active: bool = False


@dataclass
class SpotLight:
    """A positioned, directed light with angular falloff."""

    light_dir: Vector3 = field(default_factory=_unit_x)
    light_pos: Vector3 = field(default_factory=Vector3)
    light_color: Vector3 = field(default_factory=_white)
    light_atten: Vector3 = field(default_factory=_white)
    factor_angle_cos: tuple[float, float] = (0.2, 0.5)
    active: bool = False

    def set_factor_angle(self, start: float, end: float) -> None:
        """Set the falloff start and end angles in radians; their cosines are stored."""
        self.factor_angle_cos = _cosines(start, end)


@dataclass
class CircleShadow:
    """A round shadow cast by an object along a direction."""

    dir: Vector3 = field(default_factory=_unit_x)
    distance_caster_light: float = 100.0
    caster_pos: Vector3 = field(default_factory=Vector3)
    atten: Vector3 = field(default_factory=lambda: Vector3(0.5, 0.6, 0.0))
    factor_angle_cos: tuple[float, float] = (0.2, 0.5)
    active: bool = False

    def set_factor_angle(self, start: float, end: float) -> None:
        """Set the falloff start and end angles in radians; their cosines are stored."""
        self.factor_angle_cos = _cosines(start, end)


@dataclass
class LightGroup:
    """Ambient colour plus fixed-size sets of every kind of light."""

    DIR_LIGHT_NUM: ClassVar[int] = 3
    POINT_LIGHT_NUM: ClassVar[int] = 3
    SPOT_LIGHT_NUM: ClassVar[int] = 3
    CIRCLE_SHADOW_NUM: ClassVar[int] = 1

    ambient_color: Vector3 = field(default_factory=_white)
    dir_lights: list[DirectionalLight] = field(
        default_factory=lambda: [DirectionalLight() for _ in range(LightGroup.DIR_LIGHT_NUM)]
    )
    point_lights: list[PointLight] = field(
        default_factory=lambda: [PointLight() for _ in range(LightGroup.POINT_LIGHT_NUM)]
    )
    spot_lights: list[SpotLight] = field(
        default_factory=lambda: [SpotLight() for _ in range(LightGroup.SPOT_LIGHT_NUM)]
    )
    circle_shadows: list[CircleShadow] = field(
        default_factory=lambda: [CircleShadow() for _ in range(LightGroup.CIRCLE_SHADOW_NUM)]
    )
    dirty: bool = False
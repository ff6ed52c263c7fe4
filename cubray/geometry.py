"""Vectors, angles and the fixed screen and minimap dimensions."""

from __future__ import annotations

import math
from dataclasses import dataclass

FOV = 90
WIDTH_WIN = 2200
HEIGHT_WIN = 1000
HALF_HEIGHT = HEIGHT_WIN // 2
HALF_FOV = FOV // 2
SIZE = 64
MINIMAP_SIZE = SIZE // 2
ROTATION_ANGLE = 1
PI_ = 3.14159265
PROJECTION_DISTANCE = 0.5
SIZE_MULTIPL_HEIGHT = MINIMAP_SIZE * HEIGHT_WIN

_RADIUS_PI = 3.14159265359

_LOOKING_ANGLES = {"N": 90.0, "E": 360.0, "S": 270.0, "W": 180.0}


@dataclass(frozen=True)
class Vec2:
    """A 2D point or direction."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)


def looking_angle_for(direction: str) -> float:
    """Spawn angle in degrees for a compass letter N, E, S or W."""
    try:
        return _LOOKING_ANGLES[direction]
    except KeyError:
        raise ValueError(f"invalid player direction: {direction!r}") from None


def to_radians(angle: float) -> float:
    """Convert degrees to radians."""
    return (angle * _RADIUS_PI) / 180.0


def normalize_angle(angle: float) -> float:
    """Bring an angle that has just left 0..359 back by one turn."""
    if angle > 359.0:
        return angle - 360.0
    if angle < 0.0:
        return angle + 360.0
    return angle


def direction_vector(angle: float) -> Vec2:
    """Unit vector for ``angle`` degrees, with y pointing down the screen."""
    rad = angle * PI_ / 180.0
    return Vec2(math.cos(rad), -math.sin(rad))


def scaled_pos(pos: Vec2) -> Vec2:
    """Map grid coordinates to minimap pixels, past the border."""
    return Vec2(pos.x * MINIMAP_SIZE + MINIMAP_SIZE, pos.y * MINIMAP_SIZE + MINIMAP_SIZE)
"""The player: a camera that turns and walks through the map."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum, auto

from cubray.geometry import (
    FOV,
    HEIGHT_WIN,
    WIDTH_WIN,
    Vec2,
    direction_vector,
    looking_angle_for,
    normalize_angle,
    to_radians,
)
from cubray.mapfile import CubMap

DEFAULT_SPEED = 0.05
DEFAULT_ROTATION_SPEED = 1.0
DEFAULT_LOOKING_ANGLE = 90.0


class Action(Enum):
    """Inputs the player reacts to on each frame."""

    QUIT = auto()
    FORWARD = auto()
    BACK = auto()
    STRAFE_LEFT = auto()
    STRAFE_RIGHT = auto()
    TURN_LEFT = auto()
    TURN_RIGHT = auto()


def _initial_rotation() -> Vec2:
    rad = to_radians(DEFAULT_LOOKING_ANGLE)
    return Vec2(math.cos(rad), -math.sin(rad))


@dataclass
class Player:
    """Position, facing and view settings of the player.

    ``rotation`` is the unit vector the player walks along; it is refreshed
    from ``looking_angle`` whenever the player turns.
    """

    cub_map: CubMap
    position: Vec2 = field(default_factory=Vec2)
    rotation: Vec2 = field(default_factory=_initial_rotation)
    speed: float = DEFAULT_SPEED
    rotation_speed: float = DEFAULT_ROTATION_SPEED
    looking_angle: float = DEFAULT_LOOKING_ANGLE
    fov: int = FOV
    ray_angle: float = 90.0 / 2200.0
    width_win: int = WIDTH_WIN
    height_win: int = HEIGHT_WIN

    @classmethod
    def spawn(cls, cub_map: CubMap) -> Player:
        """Create a player at the map's spawn cell, facing its spawn direction."""
        return cls(
            cub_map=cub_map,
            position=cub_map.spawn_position,
            looking_angle=looking_angle_for(cub_map.spawn_dir),
        )

    def rotate(self, clockwise: bool) -> None:
        """Turn by ``rotation_speed`` degrees; clockwise lowers the angle."""
        if clockwise:
            self.looking_angle -= self.rotation_speed
        else:
            self.looking_angle += self.rotation_speed
        self.looking_angle = normalize_angle(self.looking_angle)
        self.rotation = direction_vector(self.looking_angle)

    def try_move(self, offset: Vec2) -> bool:
        """Move by ``offset`` unless that lands in a wall; return whether it moved."""
        target = self.position + offset
        if self.cub_map.is_wall(target):
            return False
        self.position = target
        return True

    def step_forward(self) -> bool:
        """Walk one step along the facing direction."""
        return self.try_move(self.rotation * self.speed)

    def step_back(self) -> bool:
        """Walk one step against the facing direction."""
        return self.try_move(self.rotation * -self.speed)

    def strafe_right(self) -> bool:
        """Side-step to the right of the facing direction."""
        return self.try_move(Vec2(-self.rotation.y, self.rotation.x) * self.speed)

    def strafe_left(self) -> bool:
        """Side-step to the left of the facing direction."""
        return self.try_move(Vec2(self.rotation.y, -self.rotation.x) * self.speed)

    def apply_input(self, actions: Iterable[Action]) -> bool:
        """Apply one frame of held actions.

        Movement is applied in a fixed order (forward, right, back, left,
        turn left, turn right). Returns False if QUIT was among the actions,
        True otherwise.
        """
        held = set(actions)
        keep_running = Action.QUIT not in held
        if Action.FORWARD in held:
            self.step_forward()
        if Action.STRAFE_RIGHT in held:
            self.strafe_right()
        if Action.BACK in held:
            self.step_back()
        if Action.STRAFE_LEFT in held:
            self.strafe_left()
        if Action.TURN_LEFT in held:
            self.rotate(clockwise=False)
        if Action.TURN_RIGHT in held:
            self.rotate(clockwise=True)
        return keep_running
"""Stepping rays through the grid and turning hits into wall columns."""

from __future__ import annotations

from dataclasses import dataclass

from cubray.colors import distance_color
from cubray.geometry import Vec2, direction_vector
from cubray.mapfile import CubMap
from cubray.player import Player

DEFAULT_STEP = 90.0 / 2200.0
MAX_STEPS = 300


@dataclass(frozen=True)
class RayHit:
    """Outcome of one ray.

    ``hit`` is True when the ray stopped in a non-floor cell. ``in_bounds``
    is False when the ray left the map before hitting anything. ``end`` is
    where the ray stopped.
    """

    start: Vec2
    end: Vec2
    hit: bool
    in_bounds: bool

    @property
    def distance(self) -> int:
        """Whole-unit distance to the wall, or -1 when nothing was hit."""
        if not self.hit:
            return -1
        return int((self.end - self.start).length())


@dataclass(frozen=True)
class WallSlice:
    """Vertical span of screen rows covered by one wall column, and its colour."""

    top: int
    bottom: int
    color: int


def trace_ray(
    position: Vec2,
    angle: float,
    cub_map: CubMap,
    step: float = DEFAULT_STEP,
    max_steps: int = MAX_STEPS,
) -> RayHit:
    """March a ray from ``position`` at ``angle`` degrees in fixed steps."""
    direction = direction_vector(angle)
    ray = position
    for _ in range(max_steps):
        ray = Vec2(ray.x + direction.x * step, ray.y + direction.y * step)
        map_x = int(ray.x)
        map_y = int(ray.y)
        if map_x < 0 or map_y < 0 or map_x >= cub_map.width or map_y >= cub_map.height:
            return RayHit(position, ray, hit=False, in_bounds=False)
        if cub_map.grid[map_y][map_x] != 0:
            return RayHit(position, ray, hit=True, in_bounds=True)
    return RayHit(position, ray, hit=False, in_bounds=True)


def wall_slice(distance: float, screen_height: int) -> WallSlice:
    """Screen span of a wall seen at ``distance``, clamped to the screen."""
    if distance <= 0:
        raise ValueError("distance must be positive")
    line_height = int(screen_height / distance)
    half = screen_height // 2
    top = max(half - line_height // 2, 0)
    bottom = min(half + line_height // 2, screen_height - 1)
    return WallSlice(top=top, bottom=bottom, color=distance_color(distance))


def cast_rays(player: Player) -> list[tuple[RayHit, WallSlice | None]]:
    """Cast one ray per screen column, left edge of the view first.

    Each entry holds the ray and the wall column to draw, or None when the
    ray hit nothing at a positive distance.
    """
    angle = player.looking_angle - (player.fov // 2)
    columns: list[tuple[RayHit, WallSlice | None]] = []
    for _ in range(player.width_win):
        hit = trace_ray(player.position, angle, player.cub_map, player.ray_angle)
        dist = hit.distance
        columns.append((hit, wall_slice(dist, player.height_win) if dist > 0 else None))
        angle += player.ray_angle
    return columns
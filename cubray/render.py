"""Drawing the scene, the minimap and the player onto a pygame surface."""

from __future__ import annotations

import pygame

from cubray.colors import get_rgba, int_to_rgba, to_pygame_color
from cubray.geometry import MINIMAP_SIZE, Vec2, scaled_pos
from cubray.mapfile import CubMap
from cubray.player import Player
from cubray.raycast import cast_rays

SKY_COLOR = 0x87CEEBFF
GROUND_COLOR = 0x8B4513FF
BORDER_COLOR = 6771586
WALL_CELL_COLOR = get_rgba(120, 80, 120, 255)
FLOOR_CELL_COLOR = get_rgba(55, 55, 55, 255)
EMPTY_CELL_COLOR = get_rgba(20, 20, 20, 150)
PLAYER_COLOR = get_rgba(255, 0, 0, 255)
RAY_HIT_COLOR = get_rgba(10, 10, 10, 150)
RAY_MISS_COLOR = get_rgba(200, 10, 10, 150)

_CELL_COLORS = {1: WALL_CELL_COLOR, 0: FLOOR_CELL_COLOR, -1: EMPTY_CELL_COLOR}


def _fill_inclusive(surface: pygame.Surface, x0: int, y0: int, x1: int, y1: int, rgba) -> None:
    """Fill the rectangle whose corners (x0, y0) and (x1, y1) are both included."""
    if x1 < x0 or y1 < y0:
        return
    surface.fill(rgba, pygame.Rect(x0, y0, x1 - x0 + 1, y1 - y0 + 1))


def draw_line(surface: pygame.Surface, start: Vec2, end: Vec2, color: int) -> None:
    """Draw a straight line one pixel per unit of length, skipping off-surface pixels."""
    delta = end - start
    pixels = int(delta.length())
    if pixels <= 0:
        return
    step = Vec2(delta.x / pixels, delta.y / pixels)
    rgba = to_pygame_color(color)
    width, height = surface.get_size()
    point = start
    for _ in range(pixels):
        x, y = int(point.x), int(point.y)
        if 0 <= x < width and 0 <= y < height:
            surface.set_at((x, y), rgba)
        point = point + step


def draw_cube(surface: pygame.Surface, pos: Vec2, color: int) -> None:
    """Fill one minimap cell, ``MINIMAP_SIZE`` pixels square, at ``pos``."""
    rect = pygame.Rect(int(pos.x), int(pos.y), MINIMAP_SIZE, MINIMAP_SIZE)
    surface.fill(to_pygame_color(color), rect)


def _fill_halves(surface: pygame.Surface, top: int, bottom: int) -> None:
    width, height = surface.get_size()
    half = height // 2
    surface.fill(to_pygame_color(top), pygame.Rect(0, 0, width, half))
    surface.fill(to_pygame_color(bottom), pygame.Rect(0, half, width, height - half))


def draw_simple_background(surface: pygame.Surface) -> None:
    """Paint sky over the top half and ground over the bottom half."""
    _fill_halves(surface, SKY_COLOR, GROUND_COLOR)


def draw_colored_background(surface: pygame.Surface, ceiling: int, floor: int) -> None:
    """Paint the scene's 24-bit ceiling and floor colours, fully opaque."""
    _fill_halves(surface, int_to_rgba(ceiling), int_to_rgba(floor))


def _draw_border(surface: pygame.Surface, cub_map: CubMap) -> None:
    rgba = to_pygame_color(BORDER_COLOR)
    size = MINIMAP_SIZE
    height = cub_map.height * size
    width = cub_map.width * size
    _fill_inclusive(surface, 0, 0, width + size * 2, size, rgba)
    _fill_inclusive(surface, 0, size, size, height + size * 2, rgba)
    _fill_inclusive(surface, width + size + 1, size, width + size * 2, height + size * 2, rgba)
    _fill_inclusive(surface, 0, height + 1, width + size * 2, height + size * 2, rgba)


def draw_minimap(surface: pygame.Surface, cub_map: CubMap) -> None:
    """Draw the bordered top-down map, one cube per grid cell."""
    _draw_border(surface, cub_map)
    for row_index, row in enumerate(cub_map.grid):
        y = MINIMAP_SIZE + 1 + row_index * MINIMAP_SIZE
        for col_index, value in enumerate(row):
            color = _CELL_COLORS.get(value)
            if color is None:
                continue
            x = MINIMAP_SIZE + 1 + col_index * MINIMAP_SIZE
            draw_cube(surface, Vec2(x, y), color)


def draw_player_marker(surface: pygame.Surface, player: Player) -> None:
    """Draw the player as a small red square on the minimap."""
    size = MINIMAP_SIZE // 2
    x = player.position.x * MINIMAP_SIZE + size + size // 2
    y = player.position.y * MINIMAP_SIZE + size + size // 2
    surface.fill(to_pygame_color(PLAYER_COLOR), pygame.Rect(int(x), int(y), size, size))


def draw_frame(surface: pygame.Surface, player: Player) -> None:
    """Render one full frame: background, minimap, rays, walls and the player."""
    draw_simple_background(surface)
    draw_minimap(surface, player.cub_map)
    width, height = surface.get_size()
    for column, (ray, wall) in enumerate(cast_rays(player)):
        if ray.hit:
            draw_line(surface, scaled_pos(ray.start), scaled_pos(ray.end), RAY_HIT_COLOR)
        elif ray.in_bounds:
            draw_line(surface, scaled_pos(ray.start), scaled_pos(ray.end), RAY_MISS_COLOR)
        if wall is None or column >= width:
            continue
        bottom = min(wall.bottom, height)
        if bottom > wall.top:
            surface.fill(
                to_pygame_color(wall.color),
                pygame.Rect(column, wall.top, 1, bottom - wall.top),
            )
    draw_player_marker(surface, player)
"""Reading and validating ``.cub`` scene files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from cubray.colors import color_to_int
from cubray.geometry import Vec2
from cubray.textutil import atoi, is_blank, split_words

TEXTURE_KEYS = ("NO", "SO", "EA", "WE")
COLOR_KEYS = ("C", "F")
ELEMENT_COUNT = len(TEXTURE_KEYS) + len(COLOR_KEYS)
PLAYER_CHARS = frozenset("NSEW")
_MAP_CHARS = frozenset("01 ")
_COVER = frozenset("10.")


class MapError(ValueError):
    """Raised when a scene file cannot be read or is not a valid map."""


@dataclass
class CubMap:
    """A parsed scene: textures, colours, the map rows and their integer grid.

    In ``grid`` a wall is 1, floor is 0 and anything else (spaces, cells past
    the end of a short row) is -1. The player's spawn cell counts as floor.
    """

    rows: list[str]
    grid: list[list[int]]
    height: int
    width: int
    textures: dict[str, Path] = field(default_factory=dict)
    ceiling_color: int = 0
    floor_color: int = 0
    spawn_x: int = 0
    spawn_y: int = 0
    spawn_dir: str = "N"

    @property
    def spawn_position(self) -> Vec2:
        """Spawn point in grid coordinates."""
        return Vec2(float(self.spawn_x), float(self.spawn_y))

    def cell(self, x: int, y: int) -> int:
        """Grid value at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) is outside the map")
        return self.grid[y][x]

    def is_wall(self, pos: Vec2) -> bool:
        """True if ``pos`` lies outside the map or in a non-floor cell."""
        x = int(pos.x)
        y = int(pos.y)
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            return True
        return self.grid[y][x] != 0


def check_file_name(name: str) -> bool:
    """True if ``name`` has the ``.cub`` extension."""
    return len(name) >= 4 and name.endswith(".cub")


def parse_color(text: str) -> int:
    """Parse ``R,G,B`` into a 24-bit colour, clamping each channel to 0..255."""
    parts = split_words(text, ",")
    if len(parts) != 3:
        raise MapError("element map: ceiling or floor")
    red, green, blue = (atoi(part) for part in parts)
    return color_to_int(red, green, blue)


def _char_at(rows: list[str], x: int, y: int) -> str:
    if 0 <= y < len(rows) and 0 <= x < len(rows[y]):
        return rows[y][x]
    return ""


def _flood(rows: list[str], x: int, y: int, seen: set[tuple[int, int]]) -> bool:
    """Walk the floor reachable from (x, y); False if it leaks."""
    height = len(rows)
    seen.add((x, y))
    stack = [(x, y)]
    while stack:
        cx, cy = stack.pop()
        if cx == 0 or cy == 0 or cy == height - 1:
            return False
        for nx, ny in ((cx, cy - 1), (cx, cy + 1), (cx - 1, cy), (cx + 1, cy)):
            if (nx, ny) in seen:
                continue
            ch = _char_at(rows, nx, ny)
            if ch not in _COVER:
                return False
            if ch == "0":
                seen.add((nx, ny))
                stack.append((nx, ny))
    return True


def map_closed(rows: list[str], x: int, y: int) -> bool:
    """True if the floor reachable from (x, y) is fully enclosed by walls."""
    return _flood(rows, x, y, set())


def check_valid_map(rows: list[str]) -> bool:
    """True if every floor cell in ``rows`` is enclosed by walls."""
    seen: set[tuple[int, int]] = set()
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            if ch == "0" and (x, y) not in seen:
                if not _flood(rows, x, y, seen):
                    return False
    return True


def map_to_grid(rows: list[str], height: int, width: int) -> list[list[int]]:
    """Convert map rows into a ``height`` x ``width`` grid of 1, 0 and -1."""

    def value(ch: str) -> int:
        if ch == "1":
            return 1
        if ch in ("0", "."):
            return 0
        return -1

    return [[value(_char_at(rows, x, y)) for x in range(width)] for y in range(height)]


def find_player(rows: list[str]) -> tuple[int, int, str]:
    """Return ``(x, y, direction)`` of the single player in ``rows``."""
    found: list[tuple[int, int, str]] = []
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            if ch in _MAP_CHARS:
                continue
            if ch not in PLAYER_CHARS:
                raise MapError("invalid map: bad character")
            found.append((x, y, ch))
    if len(found) != 1:
        raise MapError("set a valid player")
    return found[0]


def _texture_path(words: list[str], base_dir: Path | None) -> Path:
    if len(words) < 2:
        raise MapError("map: missing element route")
    path = Path(words[1])
    if base_dir is not None and not path.is_absolute():
        path = Path(base_dir) / path
    if not path.is_file():
        raise MapError(f"map: invalid element route: {words[1]}")
    return path


def parse_lines(lines: Iterable[str], base_dir: str | Path | None = None) -> CubMap:
    """Build a :class:`CubMap` from the lines of a scene file.

    The first four non-blank lines name the NO, SO, EA and WE textures, the
    next two give the C and F colours, and the remaining non-blank lines form
    the map. Relative texture paths are resolved against ``base_dir``, or the
    working directory when it is None.
    """
    base = Path(base_dir) if base_dir is not None else None
    textures: dict[str, Path] = {}
    colors: dict[str, int] = {}
    count = 0
    rows: list[str] = []

    for raw in lines:
        if is_blank(raw):
            continue
        line = raw.rstrip("\n")
        if count >= ELEMENT_COUNT:
            rows.append(line)
            continue
        words = split_words(line, " ")
        if not words:
            raise MapError("map: invalid elements")
        if count < len(TEXTURE_KEYS):
            key = next((k for k in TEXTURE_KEYS if words[0].startswith(k)), None)
            if key is None:
                raise MapError("map: invalid elements")
            textures[key] = _texture_path(words, base)
        else:
            if words[0] not in COLOR_KEYS:
                raise MapError("map: invalid elements")
            if len(words) < 2:
                raise MapError("element map: ceiling or floor")
            colors[words[0]] = parse_color(words[1])
        count += 1

    spawn_x, spawn_y, spawn_dir = find_player(rows)
    if count != ELEMENT_COUNT:
        raise MapError("map: invalid elements count")
    for key in TEXTURE_KEYS:
        if key not in textures:
            raise MapError(f"map: missing texture {key}")
    for key in COLOR_KEYS:
        if key not in colors:
            raise MapError(f"map: missing colour {key}")

    floor_rows = list(rows)
    spawn_row = floor_rows[spawn_y]
    floor_rows[spawn_y] = spawn_row[:spawn_x] + "0" + spawn_row[spawn_x + 1 :]
    if not map_closed(rows, spawn_x, spawn_y) or not check_valid_map(floor_rows):
        raise MapError("map is not closed")

    height = len(rows)
    width = max(len(row) for row in rows)
    return CubMap(
        rows=rows,
        grid=map_to_grid(floor_rows, height, width),
        height=height,
        width=width,
        textures=textures,
        ceiling_color=colors["C"],
        floor_color=colors["F"],
        spawn_x=spawn_x,
        spawn_y=spawn_y,
        spawn_dir=spawn_dir,
    )


def load_map(path: str | Path) -> CubMap:
    """Read and validate the scene file at ``path``."""
    try:
        with open(path, encoding="utf-8") as handle:
            return parse_lines(handle)
    except OSError as exc:
        raise MapError(f"cannot open {path}: {exc.strerror or exc}") from exc
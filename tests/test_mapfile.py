import pytest

from cubray.colors import color_to_int
from cubray.geometry import Vec2
from cubray.mapfile import (
    CubMap,
    MapError,
    check_file_name,
    check_valid_map,
    find_player,
    load_map,
    map_closed,
    map_to_grid,
    parse_color,
    parse_lines,
)

ROOM = [
    "111111",
    "100001",
    "10N001",
    "100001",
    "111111",
]


def _header(tmp_path):
    lines = []
    for key in ("NO", "SO", "EA", "WE"):
        tex = tmp_path / f"{key.lower()}.png"
        tex.write_bytes(b"")
        lines.append(f"{key} {tex}\n")
    lines.append("F 220,100,0\n")
    lines.append("C 225,30,0\n")
    return lines


def _scene(tmp_path, rows=ROOM):
    return _header(tmp_path) + ["\n"] + [row + "\n" for row in rows]


def test_check_file_name():
    assert check_file_name("maps/level.cub") is True
    assert check_file_name(".cub") is True
    assert check_file_name("level.cu") is False
    assert check_file_name("cub") is False
    assert check_file_name("level.cubx") is False


def test_parse_color_matches_packing():
    assert parse_color("220,100,0") == color_to_int(220, 100, 0)


def test_parse_color_clamps():
    assert parse_color("300,-5,10") == color_to_int(255, 0, 10)


@pytest.mark.parametrize("text", ["1,2", "1,2,3,4", ""])
def test_parse_color_wrong_count(text):
    with pytest.raises(MapError):
        parse_color(text)


def test_map_closed_room():
    assert map_closed(ROOM, 2, 2) is True


def test_map_closed_leak_at_edge():
    rows = ["111111", "100000", "10N001", "111111"]
    assert map_closed(rows, 2, 2) is False


def test_map_closed_player_on_border():
    rows = ["N1", "11"]
    assert map_closed(rows, 0, 0) is False


def test_map_closed_does_not_modify_rows():
    rows = list(ROOM)
    map_closed(rows, 2, 2)
    assert rows == ROOM


def test_check_valid_map_closed():
    assert check_valid_map(["1111", "1001", "1111"]) is True


def test_check_valid_map_space_next_to_floor():
    assert check_valid_map(["11111", "10 01", "11111"]) is False


def test_check_valid_map_short_row_below():
    assert check_valid_map(["1111", "1001", "11"]) is False


def test_map_to_grid_values():
    grid = map_to_grid(["1 ", "0."], 2, 3)
    assert grid == [[1, -1, -1], [0, 0, -1]]


def test_find_player():
    assert find_player(ROOM) == (2, 2, "N")


def test_find_player_bad_character():
    with pytest.raises(MapError):
        find_player(["111", "1X1", "111"])


@pytest.mark.parametrize("rows", [["111", "101", "111"], ["1111", "1NS1", "1111"]])
def test_find_player_needs_exactly_one(rows):
    with pytest.raises(MapError):
        find_player(rows)


def test_parse_lines_builds_map(tmp_path):
    cub = parse_lines(_scene(tmp_path))
    assert isinstance(cub, CubMap)
    assert cub.height == len(ROOM)
    assert cub.width == len(ROOM[0])
    assert (cub.spawn_x, cub.spawn_y, cub.spawn_dir) == (2, 2, "N")
    assert cub.spawn_position == Vec2(2.0, 2.0)
    assert cub.floor_color == color_to_int(220, 100, 0)
    assert cub.ceiling_color == color_to_int(225, 30, 0)
    assert cub.textures["NO"] == tmp_path / "no.png"
    assert set(cub.textures) == {"NO", "SO", "EA", "WE"}
    assert cub.rows == ROOM


def test_spawn_cell_is_floor(tmp_path):
    cub = parse_lines(_scene(tmp_path))
    assert cub.cell(2, 2) == 0
    assert cub.cell(0, 0) == 1
    assert cub.is_wall(Vec2(2.5, 2.5)) is False
    assert cub.is_wall(Vec2(0.5, 0.5)) is True
    assert cub.is_wall(Vec2(-1.0, 2.0)) is True
    assert cub.is_wall(Vec2(10.0, 1.0)) is True


def test_cell_out_of_range(tmp_path):
    cub = parse_lines(_scene(tmp_path))
    with pytest.raises(IndexError):
        cub.cell(cub.width, 0)
    with pytest.raises(IndexError):
        cub.cell(0, -1)


def test_relative_textures_use_base_dir(tmp_path):
    lines = []
    for key in ("NO", "SO", "EA", "WE"):
        (tmp_path / f"{key}.png").write_bytes(b"")
        lines.append(f"{key} {key}.png\n")
    lines += ["F 1,2,3\n", "C 4,5,6\n"] + [row + "\n" for row in ROOM]
    cub = parse_lines(lines, tmp_path)
    assert cub.textures["WE"] == tmp_path / "WE.png"


def test_blank_lines_in_map_are_skipped(tmp_path):
    lines = _header(tmp_path) + ["111111\n", "100001\n", "   \n", "10N001\n", "100001\n", "111111\n"]
    cub = parse_lines(lines)
    assert cub.height == len(ROOM)
    assert cub.rows == ROOM


def test_missing_texture_file(tmp_path):
    lines = _scene(tmp_path)
    lines[0] = f"NO {tmp_path / 'absent.png'}\n"
    with pytest.raises(MapError):
        parse_lines(lines)


def test_bad_element_name(tmp_path):
    lines = _scene(tmp_path)
    lines[0] = "XX something\n"
    with pytest.raises(MapError):
        parse_lines(lines)


def test_color_before_textures_rejected(tmp_path):
    lines = _scene(tmp_path)
    lines[0], lines[4] = lines[4], lines[0]
    with pytest.raises(MapError):
        parse_lines(lines)


def test_too_few_elements(tmp_path):
    lines = _header(tmp_path)[:5]
    with pytest.raises(MapError):
        parse_lines(lines)


def test_open_map_rejected(tmp_path):
    rows = ["111111", "100000", "10N001", "111111"]
    with pytest.raises(MapError):
        parse_lines(_scene(tmp_path, rows))


def test_unreachable_leak_rejected(tmp_path):
    rows = ["1111111", "1N1 001", "1111111"]
    with pytest.raises(MapError):
        parse_lines(_scene(tmp_path, rows))


def test_load_map_round_trip(tmp_path):
    scene = tmp_path / "level.cub"
    scene.write_text("".join(_scene(tmp_path)), encoding="utf-8")
    cub = load_map(scene)
    assert cub.rows == ROOM
    assert cub.spawn_dir == "N"


def test_load_map_missing_file(tmp_path):
    with pytest.raises(MapError):
        load_map(tmp_path / "nothing.cub")
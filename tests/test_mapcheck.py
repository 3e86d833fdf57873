import pytest

from sogame.mapcheck import (
    IMPOSSIBLE_MAP,
    INVALID_MAP,
    WRONG_MAP,
    GameMap,
    MapError,
    check_walls,
    flood_fill,
    load_map,
    parse_map,
    validate_layout,
)

VALID = "1111111\n1P0C0E1\n1111111"


def test_validate_layout_returns_rows():
    assert validate_layout(VALID) == VALID.split("\n")


@pytest.mark.parametrize(
    "text",
    [
        "",
        "\n1111111\n1P0C0E1\n1111111",
        VALID + "\n",
        "1111111\n\n1P0C0E1\n1111111",
        "1111111\n1P0X0E1\n1111111",
        "1111111\n1P0C0E11\n1111111",
        "1111111\n1P0P0E1\n1111111",
        "1111111\n1P0C0C1\n1111111",
        "1111111\n1PEC0E1\n1111111",
        "1111111\n1PCCCE1",
    ],
)
def test_validate_layout_rejects(text):
    with pytest.raises(MapError) as exc:
        validate_layout(text)
    assert str(exc.value) == INVALID_MAP


def test_row_limit():
    inner = ["1000001"] * 12
    inner[0] = "1P0C0E1"
    rows = ["1111111", *inner, "1111111"]
    assert len(parse_map("\n".join(rows)).rows) == len(rows)
    too_many = ["1111111", *inner, "1000001", "1111111"]
    with pytest.raises(MapError):
        validate_layout("\n".join(too_many))


def test_check_walls_accepts_closed_map():
    rows = VALID.split("\n")
    check_walls(rows)
    assert parse_map(VALID).rows == tuple(rows)


@pytest.mark.parametrize(
    "rows",
    [
        ["1111111", "0P0C0E1", "1111111"],
        ["1111111", "1P0C0E0", "1111111"],
        ["1110111", "1P0C0E1", "1111111"],
        ["1111111", "1P0C0E1", "1111101"],
        [],
    ],
)
def test_check_walls_rejects(rows):
    with pytest.raises(MapError):
        check_walls(rows)


def test_flood_fill_stops_at_walls_and_exit():
    rows = ["11111", "1PE01", "11111"]
    reached = flood_fill(rows, (1, 1))
    assert (1, 1) in reached
    assert (2, 1) in reached
    assert (3, 1) not in reached
    assert all(rows[y][x] != "1" for x, y in reached)


def test_parse_map_properties():
    game_map = parse_map(VALID)
    px, py = game_map.player
    ex, ey = game_map.exit
    assert game_map.rows[py][px] == "P"
    assert game_map.rows[ey][ex] == "E"
    assert game_map.collectibles == VALID.count("C")
    assert game_map.width == len(VALID.split("\n")[0])
    assert game_map.height == VALID.count("\n") + 1


def test_find_in_row_major_order():
    game_map = GameMap(("11111", "1CPC1", "1CE01", "11111"))
    found = game_map.find("C")
    assert len(found) == 3
    assert list(found) == sorted(found, key=lambda pos: (pos[1], pos[0]))
    assert all(game_map.rows[y][x] == "C" for x, y in found)


def test_map_without_collectibles_is_allowed():
    game_map = parse_map("11111\n1P0E1\n11111")
    assert game_map.collectibles == 0


def test_unreachable_collectible():
    with pytest.raises(MapError) as exc:
        parse_map("1111111\n1P01CE1\n1111111")
    assert str(exc.value) == IMPOSSIBLE_MAP


def test_exit_blocks_path():
    with pytest.raises(MapError) as exc:
        parse_map("1111111\n1PE0C01\n1111111")
    assert str(exc.value) == IMPOSSIBLE_MAP


def test_open_wall_is_invalid():
    with pytest.raises(MapError) as exc:
        parse_map("1111111\n0P0C0E1\n1111111")
    assert str(exc.value) == INVALID_MAP


def test_load_map_round_trip(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text(VALID, encoding="latin-1")
    assert load_map(path) == parse_map(VALID)


def test_load_missing_map(tmp_path):
    with pytest.raises(MapError) as exc:
        load_map(tmp_path / "missing.ber")
    assert str(exc.value) == WRONG_MAP


def test_load_empty_map(tmp_path):
    path = tmp_path / "empty.ber"
    path.write_text("", encoding="latin-1")
    with pytest.raises(MapError) as exc:
        load_map(path)
    assert str(exc.value) == WRONG_MAP
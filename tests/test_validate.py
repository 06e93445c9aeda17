import pytest

from solong.errors import ErrorKind, SoLongError
from solong.validate import (
    MapInfo,
    check_walls,
    count_elements,
    find_elements,
    flood_fill,
    has_only_known_tiles,
    has_valid_path,
    is_rectangular,
    validate_map,
)

VALID = ["11111", "1P0C1", "100E1", "11111"]


def test_validate_valid_map():
    info = validate_map(VALID)
    assert isinstance(info, MapInfo)
    assert info.rows == tuple(VALID)
    assert info.player == (VALID[1].index("P"), 1)
    assert info.exit == (VALID[2].index("E"), 2)
    assert info.width == len(VALID[0])
    assert info.height == len(VALID)
    assert info.collectibles == 1


def test_is_rectangular():
    assert is_rectangular(VALID)
    assert not is_rectangular(["111", "11"])
    assert not is_rectangular([])


def test_check_walls():
    assert check_walls(VALID)
    assert not check_walls(["11111", "1P0C0", "100E1", "11111"])
    assert not check_walls(["11111", "1P0C1", "100E1", "11011"])


def test_known_tiles():
    assert has_only_known_tiles(VALID)
    assert not has_only_known_tiles(["111", "1X1", "111"])


def test_count_and_find_elements():
    rows = ["1111111", "1PCCCE1", "1111111"]
    assert count_elements(rows) == (1, 1, rows[1].count("C"))
    assert find_elements(rows) == ((1, 1), (rows[1].index("E"), 1))
    assert find_elements(["111", "111"]) == (None, None)


def test_flood_fill_invariants():
    rows = ["111111", "1P1C01", "101111", "1E0001", "111111"]
    reached = flood_fill(rows, (1, 1))
    assert (1, 1) in reached
    assert all(rows[y][x] != "1" for x, y in reached)
    assert (rows[3].index("E"), 3) in reached
    assert (3, 1) not in reached


def test_flood_fill_from_wall_is_empty():
    assert flood_fill(VALID, (0, 0)) == set()


def test_has_valid_path():
    assert has_valid_path(VALID, (1, 1))
    blocked = ["111111", "1P1C01", "111111"]
    assert not has_valid_path(blocked, (1, 1))


@pytest.mark.parametrize(
    "rows, kind",
    [
        ([], ErrorKind.EMPTY_MAP),
        (["11111", "1P0C1", "1E11"], ErrorKind.NOT_RECTANGULAR),
        (["11111", "1P0C0", "100E1", "11111"], ErrorKind.NOT_WALLED),
        (["11111", "1PPC1", "100E1", "11111"], ErrorKind.BAD_ELEMENTS),
        (["11111", "1P001", "100E1", "11111"], ErrorKind.BAD_ELEMENTS),
        (["11111", "1PXC1", "100E1", "11111"], ErrorKind.BAD_ELEMENTS),
        (["11111", "1P0C1", "10EE1", "11111"], ErrorKind.BAD_ELEMENTS),
        (["111111", "1P1C01", "1111E1", "111111"], ErrorKind.INVALID_PATH),
    ],
)
def test_validate_errors(rows, kind):
    with pytest.raises(SoLongError) as excinfo:
        validate_map(rows)
    assert excinfo.value.kind is kind
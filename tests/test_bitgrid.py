import pytest

from codelessons.bitgrid import BitGrid

PICTURE = [0x00, 0x3C, 0x44, 0x42, 0x24, 0x18]


def picture() -> BitGrid:
    return BitGrid.from_rows(PICTURE, 8)


def test_from_rows_reads_most_significant_bit_first():
    grid = picture()
    assert (grid.width, grid.height) == (8, 6)
    for y, row in enumerate(PICTURE):
        for x in range(8):
            assert grid.get(x, y) == (row >> (7 - x)) & 1


def test_render_matches_rows():
    expected = "".join(f"{row:08b}\n" for row in PICTURE)
    assert picture().render() == expected


def test_flood_fill_inside_shape():
    grid = picture()
    grid.flood_fill(2, 2, 1)
    assert grid.render() == (
        "00000000\n"
        "00111100\n"
        "01111100\n"
        "01111110\n"
        "00111100\n"
        "00011000\n"
    )


def test_flood_fill_outside_leaves_interior():
    grid = picture()
    grid.flood_fill(0, 0, 1)
    assert grid.get(0, 0) == 1
    assert grid.get(7, 5) == 1
    assert grid.get(3, 3) == 0
    assert grid.get(2, 2) == 0


def test_flood_fill_with_same_value_is_noop():
    grid = picture()
    before = grid.to_bytes()
    grid.flood_fill(1, 2, 1)
    assert grid.to_bytes() == before


def test_flood_fill_whole_grid_and_back():
    grid = BitGrid(5, 4)
    grid.flood_fill(2, 2, 1)
    assert set(grid.render()) == {"1", "\n"}
    grid.flood_fill(0, 0, 0)
    assert set(grid.render()) == {"0", "\n"}


def test_large_fill_does_not_recurse_too_deeply():
    grid = BitGrid(200, 200)
    grid.flood_fill(0, 0, 1)
    assert all(byte == 0xFF for byte in grid.to_bytes())
    assert "0" not in grid.render()


def test_set_and_clear():
    grid = BitGrid(3, 3)
    grid.set(1, 2)
    assert grid.get(1, 2) == 1
    grid.clear(1, 2)
    assert grid.get(1, 2) == 0


@pytest.mark.parametrize("x,y", [(0, 0), (7, 0), (2, 1), (4, 2)])
def test_storage_layout(x, y):
    grid = BitGrid(5, 3)
    grid.set(x % 5, y)
    offset = x % 5 + y * 5
    assert int.from_bytes(grid.to_bytes(), "little") == 1 << offset


def test_single_bit_bytes():
    grid = BitGrid(8, 1)
    grid.set(0, 0)
    assert grid.to_bytes() == b"\x01"


@pytest.mark.parametrize("x,y", [(-1, 0), (8, 0), (0, 6), (0, -1)])
def test_out_of_bounds(x, y):
    with pytest.raises(IndexError):
        picture().get(x, y)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        BitGrid(-1, 2)
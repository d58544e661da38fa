from algonotes.grids import (
    capture_surrounded,
    max_area_of_island,
    num_islands,
    oranges_rotting,
    pacific_atlantic,
)

ISLANDS = [
    ["1", "1", "0", "0", "0"],
    ["1", "1", "0", "0", "0"],
    ["0", "0", "1", "0", "0"],
    ["0", "0", "0", "1", "1"],
]


def test_num_islands_example():
    assert num_islands(ISLANDS) == 3


def test_num_islands_transpose_invariant():
    transposed = [list(col) for col in zip(*ISLANDS)]
    assert num_islands(transposed) == num_islands(ISLANDS)


def test_num_islands_checkerboard_counts_every_land_cell():
    board = [["1" if (i + j) % 2 == 0 else "0" for j in range(5)] for i in range(4)]
    assert num_islands(board) == sum(row.count("1") for row in board)


def test_num_islands_accepts_strings_and_all_land():
    assert num_islands(["111", "111"]) == 1
    assert num_islands(["000"]) == 0


def test_max_area_all_land():
    grid = [[1] * 4 for _ in range(3)]
    assert max_area_of_island(grid) == 3 * 4


def test_max_area_no_land():
    assert max_area_of_island([[0, 0], [0, 0]]) == 0


def test_max_area_bounded_by_land_and_checkerboard():
    grid = [[(i + j) % 2 for j in range(4)] for i in range(4)]
    assert max_area_of_island(grid) == 1
    mixed = [[1, 1, 0], [0, 1, 0], [1, 0, 1]]
    assert max_area_of_island(mixed) <= sum(map(sum, mixed))
    assert max_area_of_island(mixed) == 3


def test_pacific_atlantic_flat_grid_is_everything():
    heights = [[5] * 3 for _ in range(2)]
    assert pacific_atlantic(heights) == [(i, j) for i in range(2) for j in range(3)]


def test_pacific_atlantic_single_cell():
    assert pacific_atlantic([[4]]) == [(0, 0)]


def test_pacific_atlantic_corners_and_order():
    heights = [
        [1, 2, 2, 3, 5],
        [3, 2, 3, 4, 4],
        [2, 4, 5, 3, 1],
        [6, 7, 1, 4, 5],
        [5, 1, 1, 2, 4],
    ]
    cells = pacific_atlantic(heights)
    assert cells == sorted(cells)
    assert (0, 4) in cells
    assert (4, 0) in cells
    assert (2, 2) in cells


def test_pacific_atlantic_pit_excluded():
    heights = [[3, 3, 3], [3, 1, 3], [3, 3, 3]]
    cells = pacific_atlantic(heights)
    assert (1, 1) not in cells
    assert len(cells) == 8


def test_oranges_no_fresh():
    assert oranges_rotting([[2, 0], [0, 2]]) == 0


def test_oranges_unreachable_fresh():
    assert oranges_rotting([[2, 0, 1]]) == -1


def test_oranges_row_spread_takes_distance():
    row = [2, 1, 1, 1]
    assert oranges_rotting([row]) == len(row) - 1


def test_oranges_two_sources_meet_in_middle():
    row = [2, 1, 1, 1, 2]
    assert oranges_rotting([row]) < len(row) - 1


def test_capture_surrounded_interior_region():
    board = [
        list("XXXX"),
        list("XOOX"),
        list("XXOX"),
        list("XOXX"),
    ]
    capture_surrounded(board)
    assert board == [
        list("XXXX"),
        list("XXXX"),
        list("XXXX"),
        list("XOXX"),
    ]


def test_capture_surrounded_keeps_border_connected_region():
    board = [list("OXX"), list("OOX"), list("XXX")]
    before = [row[:] for row in board]
    capture_surrounded(board)
    assert board == before


def test_capture_surrounded_all_x_unchanged():
    board = [list("XX"), list("XX")]
    capture_surrounded(board)
    assert board == [list("XX"), list("XX")]
from types import SimpleNamespace

from tetris_board import (
    LockedCell, EMPTY_BOARD, add_cells, row_cell_counts, full_rows, remove_row,
    shift_board_up, insert_difficulty_row, clear_full_rows, collides, overlaps,
)


def row(y, color="red", skip=()):
    return tuple(LockedCell(x, y, color) for x in range(10) if x not in skip)


def state_with(board, cells):
    return SimpleNamespace(board=board, active=SimpleNamespace(cells=tuple(cells)))


def test_row_counts_and_full_rows():
    board = row(19) + row(18, skip=(3,)) + (LockedCell(0, 2, "blue"),)
    assert row_cell_counts(board) == {19: 10, 18: 9, 2: 1}
    assert full_rows(board) == {19}
    assert full_rows(EMPTY_BOARD) == set()


def test_remove_row_shifts_only_cells_above():
    board = (LockedCell(1, 5, "a"), LockedCell(3, 12, "c")) + row(10)
    out = remove_row(board, 10)
    assert LockedCell(1, 6, "a") in out
    assert LockedCell(3, 12, "c") in out
    assert len(out) == 2
    coords = [(c.x, c.y) for c in out]
    assert len(coords) == len(set(coords))


def test_remove_row_does_not_touch_input():
    board = row(19) + (LockedCell(0, 18, "x"),)
    remove_row(board, 19)
    assert board[-1] == LockedCell(0, 18, "x")


def test_shift_board_up():
    assert shift_board_up((LockedCell(4, 19, "red"),)) == (LockedCell(4, 18, "red"),)


def test_insert_difficulty_row():
    board = (LockedCell(0, 19, "red"),)
    out = insert_difficulty_row(board, gap=3)
    assert LockedCell(0, 18, "red") in out
    bottom = [c for c in out if c.y == 19]
    assert len(bottom) == 9
    assert 3 not in {c.x for c in bottom}
    assert {c.color for c in bottom} == {"grey"}


def test_clear_full_rows_handles_stacked_rows():
    board = row(17, skip=(0,)) + row(18) + row(19) + (LockedCell(5, 16, "blue"),)
    out, cleared = clear_full_rows(board)
    assert cleared == 2
    assert LockedCell(5, 18, "blue") in out
    assert row_cell_counts(out) == {19: 9, 18: 1}


def test_add_cells():
    out = add_cells(EMPTY_BOARD, [(1, 2), (3, 4)], "green")
    assert out == (LockedCell(1, 2, "green"), LockedCell(3, 4, "green"))


def test_collides_ignores_walls():
    s = state_with((LockedCell(5, 10, "r"),), [(5, 9)])
    assert collides(s, 0, 1)
    assert not collides(s, 1, 0)
    assert not collides(state_with(EMPTY_BOARD, [(0, 5)]), -1, 0)


def test_overlaps_live_piece_ignores_bounds():
    assert not overlaps(state_with(EMPTY_BOARD, [(-1, 25)]))
    assert overlaps(state_with((LockedCell(2, 2, "r"),), [(2, 2)]))


def test_overlaps_candidate_checks_bounds():
    s = state_with(EMPTY_BOARD, [(4, 0)])
    assert overlaps(s, [(-1, 5)])
    assert overlaps(s, [(10, 5)])
    assert overlaps(s, [(4, 20)])
    # above the board is fine
    assert not overlaps(s, [(4, -2), (4, 0)])
    assert overlaps(state_with((LockedCell(4, 6, "r"),), []), [(4, 6)])

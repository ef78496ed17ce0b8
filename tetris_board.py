"""Board helpers: locked cells, row counts, row removal, collision"""
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Set, Tuple

from tetris_config import COLS, ROWS, DIFFICULTY_COLOR


@dataclass(frozen=True)
class LockedCell:
    x: int
    y: int
    color: str


# Insertion-ordered; no two cells share (x, y)
Board = Tuple[LockedCell, ...]

EMPTY_BOARD: Board = ()


def occupied(board: Board) -> Set[Tuple[int, int]]:
    return {(c.x, c.y) for c in board}


def add_cells(board: Board, cells: Iterable[Tuple[int, int]], color: str) -> Board:
    return board + tuple(LockedCell(x, y, color) for x, y in cells)


def row_cell_counts(board: Board) -> Dict[int, int]:
    return dict(Counter(c.y for c in board))


def full_rows(board: Board) -> Set[int]:
    return {row for row, n in row_cell_counts(board).items() if n == COLS}


def remove_row(board: Board, row: int) -> Board:
    """Drop `row`; everything above it moves down one, below stays put."""
    return tuple(
        LockedCell(c.x, c.y + 1, c.color) if c.y < row else c
        for c in board if c.y != row
    )


def shift_board_up(board: Board) -> Board:
    return tuple(LockedCell(c.x, c.y - 1, c.color) for c in board)


def insert_difficulty_row(board: Board, gap: int) -> Board:
    """Shift up and fill the bottom row except column `gap`."""
    bottom = ((x, ROWS - 1) for x in range(COLS) if x != gap)
    return add_cells(shift_board_up(board), bottom, DIFFICULTY_COLOR)


def clear_full_rows(board: Board) -> Tuple[Board, int]:
    """Remove every full row, top-down, and return (board, rows_cleared)."""
    cleared = 0
    # Removing a row shifts the ones above it onto their old index + 1,
    # so rescan until nothing is full.
    rows = full_rows(board)
    while rows:
        board = remove_row(board, min(rows))
        cleared += 1
        rows = full_rows(board)
    return board, cleared


def out_of_bounds(cells) -> bool:
    return any(x < 0 or x >= COLS or y >= ROWS for x, y in cells)


def collides(state, dx: int, dy: int) -> bool:
    """True if the active piece moved by (dx, dy) hits a locked cell.

    Walls and floor are not checked here; movement pre-checks reach first.
    """
    taken = occupied(state.board)
    return any((x + dx, y + dy) in taken for x, y in state.active.cells)


def overlaps(state, cells: Optional[Iterable[Tuple[int, int]]] = None) -> bool:
    """Without `cells`: is the live piece already stuck in the board.
    With `cells`: would this hypothetical placement hit the board or leave it.
    """
    taken = occupied(state.board)
    if cells is None:
        return any(c in taken for c in state.active.cells)
    cells = tuple(cells)
    return out_of_bounds(cells) or any(c in taken for c in cells)

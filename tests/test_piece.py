import pytest

from tetris_piece import (
    PieceType, PIECE_TYPES, ROTATIONS, BOUNDS, COLORS,
    rotation_count, get_rotation, get_bounds, derive_bounds, piece_cells,
)


def test_rotation_state_counts():
    assert rotation_count(PieceType.O) == 1
    for t in (PieceType.I, PieceType.S, PieceType.Z):
        assert rotation_count(t) == 2
    for t in (PieceType.T, PieceType.L, PieceType.J):
        assert rotation_count(t) == 4


@pytest.mark.parametrize("t", list(PieceType))
def test_every_state_has_four_distinct_cells(t):
    for offsets in ROTATIONS[t]:
        assert len(offsets) == 4
        assert len(set(offsets)) == 4


@pytest.mark.parametrize("t", list(PieceType))
def test_authored_bounds_match_geometry(t):
    assert len(BOUNDS[t]) == len(ROTATIONS[t])
    for offsets, authored in zip(ROTATIONS[t], BOUNDS[t]):
        assert derive_bounds(offsets) == authored


def test_rotation_index_wraps():
    assert get_rotation(PieceType.T, 5) == get_rotation(PieceType.T, 1)
    assert get_rotation(PieceType.I, 3) == get_rotation(PieceType.I, 1)
    assert get_rotation(PieceType.O, 7) == get_rotation(PieceType.O, 0)
    assert get_bounds(PieceType.S, 2) == BOUNDS[PieceType.S][0]


def test_piece_cells_translate_offsets():
    assert piece_cells(PieceType.O, 0, 4, -1) == ((4, 0), (5, 0), (4, 1), (5, 1))


def test_catalog_is_complete():
    assert set(PIECE_TYPES) == set(PieceType)
    assert len(PIECE_TYPES) == 7
    assert set(COLORS) == set(PieceType)
    assert COLORS[PieceType.I] == "cyan"

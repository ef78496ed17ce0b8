"""Time-seeded piece randomizer

There is no carried generator state: every draw is seeded from the elapsed
game time at the moment of the draw, so the piece sequence is a pure function
of when draws happen.
"""
from tetris_config import GAP_COLUMNS
from tetris_piece import PIECE_TYPES, PieceType

LCG_A = 1103515245
LCG_C = 12345
LCG_M = 2 ** 31


def next_seed(seed) -> int:
    """One LCG step. `seed` may be a float (elapsed seconds, in half steps)."""
    return int((LCG_A * seed + LCG_C) % LCG_M)


def piece_from_seed(seed: int) -> PieceType:
    return PIECE_TYPES[int(seed % len(PIECE_TYPES))]


def draw_piece(elapsed) -> PieceType:
    return piece_from_seed(next_seed(elapsed))


def gap_column(elapsed) -> int:
    """Column left empty in an inserted difficulty row."""
    return next_seed(elapsed) % GAP_COLUMNS

"""Piece catalog: shapes, rotation states, reach tables, colors"""
from enum import Enum
from typing import Dict, List, Tuple

Offset = Tuple[int, int]


class PieceType(Enum):
    L = "L"
    T = "T"
    I = "I"
    O = "O"
    J = "J"
    S = "S"
    Z = "Z"


# Order used by the randomizer: PIECE_TYPES[seed % 7]
PIECE_TYPES: List[PieceType] = [
    PieceType.L, PieceType.T, PieceType.I, PieceType.O,
    PieceType.J, PieceType.S, PieceType.Z,
]

# Four (dx, dy) offsets per rotation state, relative to the piece anchor
ROTATIONS: Dict[PieceType, Tuple[Tuple[Offset, ...], ...]] = {
    PieceType.L: (
        ((0,1),(1,1),(2,1),(2,2)),
        ((1,0),(1,1),(1,2),(0,2)),
        ((0,0),(0,1),(1,1),(2,1)),
        ((1,0),(1,1),(1,2),(2,0)),
    ),
    PieceType.T: (
        ((0,1),(1,1),(2,1),(1,2)),
        ((1,0),(1,1),(1,2),(0,1)),
        ((0,1),(1,1),(2,1),(1,0)),
        ((1,0),(1,1),(1,2),(2,1)),
    ),
    PieceType.I: (
        ((0,1),(1,1),(2,1),(3,1)),
        ((1,0),(1,1),(1,2),(1,3)),
    ),
    PieceType.O: (
        ((0,1),(1,1),(0,2),(1,2)),
    ),
    PieceType.J: (
        ((0,1),(1,1),(0,2),(2,1)),
        ((1,0),(1,1),(1,2),(0,0)),
        ((0,1),(1,1),(2,1),(2,0)),
        ((1,0),(1,1),(1,2),(2,2)),
    ),
    PieceType.S: (
        ((0,2),(1,2),(1,1),(2,1)),
        ((1,1),(2,1),(2,2),(1,0)),
    ),
    PieceType.Z: (
        ((0,1),(1,1),(1,2),(2,2)),
        ((1,1),(2,1),(1,2),(2,0)),
    ),
}

# (height, left_reach, right_reach) per rotation state. Movement pre-checks:
# left is legal while x - left_reach >= -1, right while x + right_reach <= 8,
# and the piece lands once y + height >= 19.
BOUNDS: Dict[PieceType, Tuple[Tuple[int, int, int], ...]] = {
    PieceType.L: ((2,2,2), (2,2,1), (1,2,2), (2,1,2)),
    PieceType.T: ((2,2,2), (2,2,1), (1,2,2), (2,1,2)),
    PieceType.I: ((1,2,3), (3,1,1)),
    PieceType.O: ((2,2,1),),
    PieceType.J: ((2,2,2), (2,2,1), (1,2,2), (2,1,2)),
    PieceType.S: ((2,2,2), (2,1,2)),
    PieceType.Z: ((2,2,2), (2,1,2)),
}

COLORS: Dict[PieceType, str] = {
    PieceType.L: "orange",
    PieceType.T: "purple",
    PieceType.I: "cyan",
    PieceType.O: "yellow",
    PieceType.J: "blue",
    PieceType.S: "green",
    PieceType.Z: "red",
}


def rotation_count(t: PieceType) -> int:
    return len(ROTATIONS[t])


def get_rotation(t: PieceType, rotation: int) -> Tuple[Offset, ...]:
    """Offsets for `rotation`, wrapped onto the type's rotation states."""
    states = ROTATIONS[t]
    return states[rotation % len(states)]


def get_bounds(t: PieceType, rotation: int) -> Tuple[int, int, int]:
    table = BOUNDS[t]
    assert len(table) == len(ROTATIONS[t]), f"bounds table out of sync for {t}"
    return table[rotation % len(table)]


def derive_bounds(offsets) -> Tuple[int, int, int]:
    """Compute (height, left_reach, right_reach) from raw offsets.

    The authored BOUNDS table must agree with this for every state.
    """
    xs = [dx for dx, _ in offsets]
    ys = [dy for _, dy in offsets]
    return max(ys), 2 - min(xs), max(xs)


def piece_cells(t: PieceType, rotation: int, x: int, y: int) -> Tuple[Offset, ...]:
    return tuple((x + dx, y + dy) for dx, dy in get_rotation(t, rotation))

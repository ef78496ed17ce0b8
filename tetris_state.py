"""Game state, actions and the reducer

Every action is a small frozen dataclass; `reduce(state, action)` looks up the
handler for its type and returns a new GameState. States are never mutated.
"""
import logging
from dataclasses import dataclass, replace
from typing import Iterable, Iterator, Optional, Tuple, Union

from tetris_config import (
    COLS, ROWS, TICK_TIME_STEP, CLEAR_BONUS, DIFFICULTY_ROWS,
    MIN_DIFFICULTY_INTERVAL, LEVEL_SCORE_STEP, START_LEVEL, SPAWN_X, SPAWN_Y,
)
from tetris_piece import PieceType, COLORS, get_bounds, piece_cells
from tetris_rng import draw_piece, gap_column
from tetris_board import (
    Board, EMPTY_BOARD, add_cells, insert_difficulty_row, clear_full_rows,
    collides, overlaps,
)

log = logging.getLogger(__name__)

FLOOR = ROWS - 1
RIGHT_LIMIT = COLS - 2


@dataclass(frozen=True)
class ActivePiece:
    type: PieceType
    x: int
    y: int
    rotation: int
    height: int
    left_reach: int
    right_reach: int
    color: str
    cells: Tuple[Tuple[int, int], ...]


def make_piece(t: PieceType, x: int = SPAWN_X, y: int = SPAWN_Y, rotation: int = 0) -> ActivePiece:
    height, left, right = get_bounds(t, rotation)
    return ActivePiece(
        type=t, x=x, y=y, rotation=rotation,
        height=height, left_reach=left, right_reach=right,
        color=COLORS[t], cells=piece_cells(t, rotation, x, y),
    )


def preview_piece(t: PieceType) -> ActivePiece:
    """Static rotation-0 instance at the origin, for next/hold previews."""
    return make_piece(t, 0, 0, 0)


@dataclass(frozen=True)
class GameState:
    ended: bool
    pieces_locked: int
    board: Board
    active: ActivePiece
    next_type: PieceType
    hold_type: PieceType
    elapsed: float
    score: int
    level: int
    high_score: int


def level_for(score: int) -> int:
    return START_LEVEL + score // LEVEL_SCORE_STEP


def difficulty_interval(level: int) -> int:
    return max(DIFFICULTY_ROWS - level, MIN_DIFFICULTY_INTERVAL)


def rows_until_difficulty(s: GameState) -> int:
    """Locks left before a difficulty row goes in; 0 means the next lock."""
    n = difficulty_interval(s.level)
    if s.pieces_locked > 0 and s.pieces_locked % n == 0:
        return 0
    return n - s.pieces_locked % n


def initial_state(high_score: int = 0) -> GameState:
    return GameState(
        ended=False,
        pieces_locked=0,
        board=EMPTY_BOARD,
        active=make_piece(draw_piece(0)),
        next_type=draw_piece(4),
        hold_type=draw_piece(2),
        elapsed=0.0,
        score=0,
        level=START_LEVEL,
        high_score=high_score,
    )


# ---------- Actions ----------

@dataclass(frozen=True)
class Tick:
    pass


@dataclass(frozen=True)
class MoveLeft:
    pass


@dataclass(frozen=True)
class MoveRight:
    pass


@dataclass(frozen=True)
class MoveDown:
    pass


@dataclass(frozen=True)
class Rotate:
    pass


@dataclass(frozen=True)
class HoldBlock:
    pass


@dataclass(frozen=True)
class Lock:
    pass


@dataclass(frozen=True)
class ResetBoard:
    pass


@dataclass(frozen=True)
class GameEnd:
    pass


Action = Union[Tick, MoveLeft, MoveRight, MoveDown, Rotate, HoldBlock, Lock, ResetBoard, GameEnd]


# ---------- Transitions ----------

def _moved(s: GameState, dx: int, dy: int) -> GameState:
    a = s.active
    return replace(s, active=make_piece(a.type, a.x + dx, a.y + dy, a.rotation))


def landing(s: GameState) -> bool:
    return s.active.y + s.active.height >= FLOOR or collides(s, 0, 1)


def _tick(s: GameState, action: Tick) -> GameState:
    if landing(s):
        return _lock(s, Lock())
    s = _moved(s, 0, 1)
    return replace(s, elapsed=s.elapsed + TICK_TIME_STEP, level=level_for(s.score))


def _move_left(s: GameState, action: MoveLeft) -> GameState:
    if s.active.x - s.active.left_reach < -1 or collides(s, -1, 0):
        return s
    return _moved(s, -1, 0)


def _move_right(s: GameState, action: MoveRight) -> GameState:
    if s.active.x + s.active.right_reach > RIGHT_LIMIT or collides(s, 1, 0):
        return s
    return _moved(s, 1, 0)


def _move_down(s: GameState, action: MoveDown) -> GameState:
    if landing(s):
        return _lock(s, Lock())
    return _moved(s, 0, 1)


def _rotate(s: GameState, action: Rotate) -> GameState:
    a = s.active
    turned = make_piece(a.type, a.x, a.y, a.rotation + 1)
    if overlaps(s, turned.cells):
        return s
    return replace(s, active=turned)


def _hold(s: GameState, action: HoldBlock) -> GameState:
    a = s.active
    swapped = make_piece(s.hold_type, a.x, a.y, 0)
    if overlaps(s, swapped.cells):
        return s
    return replace(s, active=swapped, hold_type=a.type)


def _lock(s: GameState, action: Lock) -> GameState:
    a = s.active
    if any(y < 0 for _, y in a.cells):
        log.info("piece %s locked above the board, game over (score %d)", a.type.value, s.score)
        return replace(s, ended=True, pieces_locked=s.pieces_locked + 1,
                       high_score=max(s.score, s.high_score))

    board = add_cells(s.board, a.cells, a.color)
    if s.pieces_locked > 0 and s.pieces_locked % difficulty_interval(s.level) == 0:
        gap = gap_column(s.elapsed)
        log.debug("difficulty row inserted, gap at column %d", gap)
        board = insert_difficulty_row(board, gap)

    board, cleared = clear_full_rows(board)
    score = s.score + cleared * CLEAR_BONUS
    if cleared:
        log.debug("cleared %d row(s), score %d", cleared, score)

    s = replace(
        s,
        board=board,
        score=score,
        level=max(s.level, level_for(score)),
        pieces_locked=s.pieces_locked + 1,
        active=make_piece(s.next_type),
        next_type=draw_piece(s.elapsed),
        high_score=max(score, s.high_score),
    )
    if overlaps(s):
        log.info("spawn blocked, game over (score %d)", s.score)
        s = replace(s, ended=True)
    return s


def _reset(s: GameState, action: ResetBoard) -> GameState:
    t = s.elapsed
    log.info("board reset")
    return replace(
        initial_state(high_score=s.high_score),
        active=make_piece(draw_piece(t)),
        next_type=draw_piece(t + 1),
        hold_type=draw_piece(t + 2),
    )


def _game_end(s: GameState, action: GameEnd) -> GameState:
    return replace(s, ended=True)


_HANDLERS = {
    Tick: _tick,
    MoveLeft: _move_left,
    MoveRight: _move_right,
    MoveDown: _move_down,
    Rotate: _rotate,
    HoldBlock: _hold,
    Lock: _lock,
    ResetBoard: _reset,
    GameEnd: _game_end,
}


def reduce(s: GameState, action: Action) -> GameState:
    """Apply one action. Once the game has ended only ResetBoard does anything."""
    handler = _HANDLERS.get(type(action))
    if handler is None:
        raise TypeError(f"unknown action: {action!r}")
    if s.ended and not isinstance(action, ResetBoard):
        return s
    return handler(s, action)


def run(actions: Iterable[Action], state: Optional[GameState] = None) -> Iterator[GameState]:
    """Fold `actions` through the reducer, yielding every intermediate state."""
    s = initial_state() if state is None else state
    for action in actions:
        s = reduce(s, action)
        yield s


def final_state(actions: Iterable[Action], state: Optional[GameState] = None) -> GameState:
    s = initial_state() if state is None else state
    for s in run(actions, s):
        pass
    return s

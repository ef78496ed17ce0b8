"""Keyboard -> action tokens, plus DAS/ARR auto-repeat for held moves"""
from typing import Optional
import pygame
from tetris_config import CONFIG
from tetris_state import (
    Action, MoveLeft, MoveRight, MoveDown, Rotate, HoldBlock, ResetBoard, GameEnd,
)

KEY_ACTIONS = {
    pygame.K_a: MoveLeft,
    pygame.K_LEFT: MoveLeft,
    pygame.K_d: MoveRight,
    pygame.K_RIGHT: MoveRight,
    pygame.K_s: MoveDown,
    pygame.K_DOWN: MoveDown,
    pygame.K_w: Rotate,
    pygame.K_UP: Rotate,
    pygame.K_h: HoldBlock,
    pygame.K_r: ResetBoard,
    pygame.K_ESCAPE: GameEnd,
}

# Keys whose press is handled by ShiftRepeat instead of KEYDOWN
REPEAT_KEYS = {pygame.K_a, pygame.K_LEFT, pygame.K_d, pygame.K_RIGHT}


def action_for_key(key: int) -> Optional[Action]:
    cls = KEY_ACTIONS.get(key)
    return cls() if cls else None


class ShiftRepeat:
    """Turns a held left/right key into a stream of move tokens.

    The first frame of a press moves at once; after DAS_MS the move repeats
    every ARR_MS (every frame when ARR_MS is 0). A direction change restarts.
    """

    def __init__(self):
        self.action: Optional[Action] = None
        self.held_ms = 0
        self.since_step = 0

    def update(self, dt: int, left: bool, right: bool) -> Optional[Action]:
        if left == right:
            wanted = None
        else:
            wanted = MoveLeft() if left else MoveRight()

        if wanted != self.action:
            self.action = wanted
            self.held_ms = 0
            self.since_step = 0
            return wanted

        if wanted is None:
            return None
        self.held_ms += dt
        if self.held_ms < CONFIG["DAS_MS"]:
            return None
        if CONFIG["ARR_MS"] == 0:
            return wanted
        self.since_step += dt
        if self.since_step < CONFIG["ARR_MS"]:
            return None
        self.since_step = 0
        return wanted

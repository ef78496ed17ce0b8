import pygame

from tetris_config import CONFIG
from tetris_input import ShiftRepeat, action_for_key, REPEAT_KEYS
from tetris_state import MoveLeft, MoveRight, MoveDown, Rotate, HoldBlock, ResetBoard, GameEnd


def test_keys_map_to_action_tokens():
    assert action_for_key(pygame.K_a) == MoveLeft()
    assert action_for_key(pygame.K_RIGHT) == MoveRight()
    assert action_for_key(pygame.K_s) == MoveDown()
    assert action_for_key(pygame.K_w) == Rotate()
    assert action_for_key(pygame.K_h) == HoldBlock()
    assert action_for_key(pygame.K_r) == ResetBoard()
    assert action_for_key(pygame.K_ESCAPE) == GameEnd()
    assert action_for_key(pygame.K_q) is None


def test_repeat_keys_are_horizontal_only():
    assert {action_for_key(k) for k in REPEAT_KEYS} == {MoveLeft(), MoveRight()}


def test_shift_repeat_first_press_then_das_then_arr():
    sr = ShiftRepeat()
    assert sr.update(16, True, False) == MoveLeft()
    # held but still inside the DAS window
    assert sr.update(CONFIG["DAS_MS"] - 32, True, False) is None
    assert sr.update(16, True, False) is None
    steps = [sr.update(CONFIG["ARR_MS"], True, False) for _ in range(3)]
    assert steps == [MoveLeft()] * 3


def test_shift_repeat_resets_on_direction_change():
    sr = ShiftRepeat()
    assert sr.update(16, True, False) == MoveLeft()
    assert sr.update(16, False, True) == MoveRight()
    assert sr.update(16, False, False) is None
    assert sr.update(16, True, True) is None


def test_shift_repeat_zero_arr_steps_every_frame(monkeypatch):
    monkeypatch.setitem(CONFIG, "ARR_MS", 0)
    sr = ShiftRepeat()
    assert sr.update(16, False, True) == MoveRight()
    assert sr.update(CONFIG["DAS_MS"], False, True) == MoveRight()
    assert sr.update(16, False, True) == MoveRight()

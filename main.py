import logging
import sys
import pygame
from tetris_config import CONFIG
from tetris_state import Tick, initial_state, reduce
from tetris_input import ShiftRepeat, REPEAT_KEYS, action_for_key
from tetris_layout import compute_dims
from tetris_render import RenderAssets

log = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    logging.basicConfig(
        level=CONFIG["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP, TICK_EVENT])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 30)

    render = RenderAssets(dims, font)
    clock = pygame.time.Clock()

    # The clock source: one Tick token per TICK_RATE_MS
    pygame.time.set_timer(TICK_EVENT, CONFIG["TICK_RATE_MS"])

    state = initial_state()
    shift = ShiftRepeat()
    log.info("game started, first piece %s", state.active.type.value)

    while True:
        dt = clock.tick(60)

        # Actions are applied strictly in arrival order, one at a time
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == TICK_EVENT:
                state = reduce(state, Tick())
            elif e.type == pygame.KEYDOWN and e.key not in REPEAT_KEYS:
                action = action_for_key(e.key)
                if action is not None:
                    state = reduce(state, action)

        keys = pygame.key.get_pressed()
        left = keys[pygame.K_LEFT] or keys[pygame.K_a]
        right = keys[pygame.K_RIGHT] or keys[pygame.K_d]
        step = shift.update(dt, left, right)
        if step is not None:
            state = reduce(state, step)

        render.draw(screen, state, big_font)
        pygame.display.flip()


if __name__ == '__main__':
    main()

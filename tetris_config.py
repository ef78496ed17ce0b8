
# Front-end tunables, read at call time
CONFIG = {
    "CELL_SIZE": 20,
    "TICK_RATE_MS": 500,
    "DAS_MS": 170,
    "ARR_MS": 50,
    "LOG_LEVEL": "INFO",
}

# Fixed game rules
COLS, ROWS = 10, 20
TICK_TIME_STEP = 0.5        # seconds of elapsed time per gravity tick
CLEAR_BONUS = 100           # score per cleared row
DIFFICULTY_ROWS = 15        # base lock interval between difficulty rows
MIN_DIFFICULTY_INTERVAL = 2
LEVEL_SCORE_STEP = 1000
START_LEVEL = 1
SPAWN_X, SPAWN_Y = 4, -1
DIFFICULTY_COLOR = "grey"
GAP_COLUMNS = 8             # difficulty-row gap is drawn from columns 0..7

"""
config.py - Shared constants for the entire application.
No logic, no imports from internal modules.
"""

# ── Window & Grid ─────────────────────────────────────────────────
CELL            = 20
COLS, ROWS      = 20, 20
BOARD_W         = COLS * CELL
BOARD_H         = ROWS * CELL
PANEL_H         = 56
MARGIN          = 10
OFFSET_X        = MARGIN
OFFSET_Y        = PANEL_H + MARGIN
WIDTH           = BOARD_W + 2 * MARGIN
HEIGHT          = OFFSET_Y + BOARD_H + MARGIN
FPS             = 60
START_LENGTH    = 3

# ── Speed curve (milliseconds between ticks) ──────────────────────
BASE_INTERVAL   = 150
MIN_INTERVAL    = 60
SPEED_STEP      = 2      # ms shaved off per point scored

# Random probes before food placement scans the free cells directly
SPAWN_ATTEMPTS  = 64

# ── Colors ────────────────────────────────────────────────────────
BG          = (15,  52,  96)
GRID_COL    = (24,  60,  103)
HEAD_COL    = (34,  197, 94)
BODY_COL    = (74,  222, 128)
FOOD_COL    = (248, 113, 113)
PAUSE_SHADE = (0,   0,   0,   115)
TEXT_COL    = (255, 255, 255)
UI_COL      = (148, 163, 184)
ACCENT_COL  = (250, 204, 21)
PANEL_BG    = (22,  33,  62)
BORDER_COL  = (26,  26,  62)
WINDOW_BG   = (26,  26,  46)

# ── Session phases ────────────────────────────────────────────────
STATE_MENU    = "menu"
STATE_RUNNING = "running"
STATE_PAUSED  = "paused"
STATE_OVER    = "over"

# ── Tick results / terminal outcomes ──────────────────────────────
TICK_MOVED        = "moved"
TICK_ATE          = "ate"
TICK_PAUSED       = "paused"
OUTCOME_WALL      = "wall"
OUTCOME_SELF      = "self"
OUTCOME_BOARD_FULL = "board_full"

# ── Input commands ────────────────────────────────────────────────
CMD_DIRECTION = "direction"
CMD_PAUSE     = "pause"
CMD_START     = "start"
CMD_RESTART   = "restart"
CMD_QUIT      = "quit"

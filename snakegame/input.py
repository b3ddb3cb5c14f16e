"""
input.py - Keyboard mapping.

Turns pygame key codes into (command, argument) pairs for the controller.
Knows nothing about game state; the controller decides which commands
apply in the current phase.
"""

import pygame

from .config import CMD_DIRECTION, CMD_PAUSE, CMD_START, CMD_RESTART, CMD_QUIT
from .model import Direction

# pygame key codes are case-free, so "w" covers both W and w.
DIRECTION_KEYS = {
    pygame.K_UP:    Direction.UP,
    pygame.K_DOWN:  Direction.DOWN,
    pygame.K_LEFT:  Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_w:     Direction.UP,
    pygame.K_s:     Direction.DOWN,
    pygame.K_a:     Direction.LEFT,
    pygame.K_d:     Direction.RIGHT,
}

PAUSE_KEYS   = (pygame.K_p,)
START_KEYS   = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE)
RESTART_KEYS = (pygame.K_r,)
QUIT_KEYS    = (pygame.K_ESCAPE, pygame.K_q)


def map_key(key: int):
    """Return (command, argument) for a key, or None if it is not bound."""
    if key in DIRECTION_KEYS:
        return CMD_DIRECTION, DIRECTION_KEYS[key]
    if key in PAUSE_KEYS:
        return CMD_PAUSE, None
    if key in START_KEYS:
        return CMD_START, None
    if key in RESTART_KEYS:
        return CMD_RESTART, None
    if key in QUIT_KEYS:
        return CMD_QUIT, None
    return None

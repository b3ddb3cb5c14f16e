import pygame
import pytest

from snakegame.config import CMD_DIRECTION, CMD_PAUSE, CMD_START, CMD_RESTART, CMD_QUIT
from snakegame.input import map_key
from snakegame.model import Direction


@pytest.mark.parametrize("key, direction", [
    (pygame.K_UP, Direction.UP),
    (pygame.K_DOWN, Direction.DOWN),
    (pygame.K_LEFT, Direction.LEFT),
    (pygame.K_RIGHT, Direction.RIGHT),
    (pygame.K_w, Direction.UP),
    (pygame.K_s, Direction.DOWN),
    (pygame.K_a, Direction.LEFT),
    (pygame.K_d, Direction.RIGHT),
])
def test_direction_keys(key, direction):
    assert map_key(key) == (CMD_DIRECTION, direction)


def test_control_keys():
    assert map_key(pygame.K_p) == (CMD_PAUSE, None)
    assert map_key(pygame.K_RETURN) == (CMD_START, None)
    assert map_key(pygame.K_SPACE) == (CMD_START, None)
    assert map_key(pygame.K_r) == (CMD_RESTART, None)
    assert map_key(pygame.K_ESCAPE) == (CMD_QUIT, None)


@pytest.mark.parametrize("key", [pygame.K_x, pygame.K_1, pygame.K_TAB, pygame.K_F1])
def test_unbound_keys_are_ignored(key):
    assert map_key(key) is None

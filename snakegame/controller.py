"""
controller.py - Controller layer.

Responsibilities:
  - Own the pygame event loop.
  - Translate keyboard commands into model calls, per game phase.
  - Own the tick scheduler: start it with a session, reschedule after
    every tick at the session's current interval, cancel it on game over
    and before a restart.
  - Ask the view to render once per frame.
  - Know nothing about rendering details (that's the View's job).
  - Know nothing about game rules (that's the Model's job).

The controller is the only layer that reads pygame events.
"""

import random
from typing import Callable, Optional

import pygame

from .config import (
    WIDTH, HEIGHT, FPS,
    STATE_MENU, STATE_RUNNING, STATE_PAUSED, STATE_OVER,
    CMD_DIRECTION, CMD_PAUSE, CMD_START, CMD_RESTART, CMD_QUIT,
)
from .input import map_key
from .model import GameModel, GameSession
from .scheduler import TickScheduler
from .view import GameView


class GameController:
    """
    Owns the main loop.
    Glues Model <-> View without them knowing about each other.
    Also owns the tick scheduler so there is only ever one tick stream.
    """

    def __init__(
        self,
        fps: int = FPS,
        seed: Optional[int] = None,
        clock: Optional[Callable[[], int]] = None,
    ):
        pygame.init()
        self.screen  = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("SNAKE")
        self.clock   = pygame.time.Clock()
        self.fps     = fps
        self.model   = GameModel(rng=random.Random(seed))
        self.view    = GameView(self.screen)
        self.scheduler = TickScheduler(clock or pygame.time.get_ticks)
        self.running = False

    # ── Public entry point ────────────────────────────────────────
    def run(self) -> None:
        """Start and run the game loop until the player quits."""
        self.running = True
        while self.running:
            self.clock.tick(self.fps)
            self._handle_events()
            self.scheduler.update()
            if self.running:
                self.view.render(self.model)
        pygame.quit()

    # ── Session lifecycle ─────────────────────────────────────────
    def start_game(self) -> GameSession:
        """Replace the current session and start ticking it."""
        self.scheduler.cancel()
        session = self.model.start()
        self.scheduler.schedule(session.current_interval(), self._on_tick)
        return session

    def _on_tick(self) -> None:
        session = self.model.session
        result = session.tick()
        if session.over:
            self.scheduler.cancel()
            self._report_game_over(session, result)
            return
        # Paused ticks still reschedule so resuming keeps its rhythm
        self.scheduler.reschedule(session.current_interval(), self._on_tick)

    def _report_game_over(self, session: GameSession, outcome: str) -> None:
        best = self.model.high_score.best
        print(f"[game] over ({outcome}): score {session.score}, best {best}")
        if session.new_best:
            print(f"[game] new high score: {best}")

    # ── Event dispatch ────────────────────────────────────────────
    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.quit()
            elif event.type == pygame.KEYDOWN:
                self.handle_key(event.key)

    def handle_key(self, key: int) -> bool:
        """Apply one key press. Returns True if the key was consumed."""
        mapped = map_key(key)
        if mapped is None:
            return False
        command, arg = mapped

        # Quit works from any state
        if command == CMD_QUIT:
            self.quit()
            return True

        state = self.model.state
        if state in (STATE_MENU, STATE_OVER):
            return self._handle_idle_command(command)
        if state in (STATE_RUNNING, STATE_PAUSED):
            return self._handle_playing_command(command, arg)
        return False

    # ── Per-state command handlers ────────────────────────────────
    def _handle_idle_command(self, command: str) -> bool:
        if command in (CMD_START, CMD_RESTART):
            self.start_game()
            return True
        return False

    def _handle_playing_command(self, command: str, arg) -> bool:
        if command == CMD_DIRECTION:
            self.model.request_direction(arg)
        elif command == CMD_PAUSE:
            self.model.toggle_pause()
        elif command == CMD_RESTART:
            self.start_game()
        else:
            return False
        return True

    # ── Utilities ─────────────────────────────────────────────────
    def quit(self) -> None:
        self.scheduler.cancel()
        self.running = False

import random

import pytest

from snakegame.config import (
    BASE_INTERVAL, MIN_INTERVAL,
    STATE_MENU, STATE_RUNNING, STATE_PAUSED, STATE_OVER,
    TICK_MOVED, TICK_ATE, TICK_PAUSED,
    OUTCOME_WALL, OUTCOME_SELF, OUTCOME_BOARD_FULL,
)
from snakegame.model import (
    Direction, GameModel, GameSession, HighScore, Snake,
    initial_body, interval_for,
)

ALL_DIRS = [Direction.RIGHT, Direction.LEFT, Direction.DOWN, Direction.UP]


@pytest.fixture
def session():
    return GameSession(rng=random.Random(7))


# ── Direction ─────────────────────────────────────────────────────
def test_opposite_directions():
    assert Direction.LEFT.is_opposite(Direction.RIGHT)
    assert Direction.UP.is_opposite(Direction.DOWN)
    assert not Direction.UP.is_opposite(Direction.LEFT)
    assert not Direction.UP.is_opposite(Direction.UP)


def test_directions_compare_by_value():
    assert Direction(1, 0) == Direction.RIGHT
    assert len(set(ALL_DIRS)) == 4


# ── Initial state ─────────────────────────────────────────────────
def test_new_session_layout(session):
    assert list(session.snake.body) == [(10, 10), (9, 10), (8, 10)]
    assert session.snake.dir == Direction.RIGHT
    assert session.snake.next_dir == Direction.RIGHT
    assert session.score == 0
    assert session.state == STATE_RUNNING
    assert session.outcome is None
    assert not session.snake.occupies(session.food)
    assert session.in_bounds(session.food)


def test_initial_body_rejects_tiny_grid():
    with pytest.raises(ValueError):
        initial_body(2, 5)
    with pytest.raises(ValueError):
        GameSession(cols=5, rows=0)


def test_snake_needs_a_cell():
    with pytest.raises(ValueError):
        Snake([], Direction.RIGHT)


def test_only_the_tail_cell_is_free_to_enter():
    snake = Snake([(5, 5), (5, 4), (6, 4), (6, 5)], Direction.RIGHT)
    assert snake.tail == (6, 5)
    assert not snake.blocks((6, 5))
    assert snake.blocks((5, 4))
    assert snake.blocks((6, 4))
    assert not snake.blocks((7, 7))


def test_single_cell_snake_never_blocks_itself():
    assert not Snake([(3, 3)], Direction.UP).blocks((3, 3))


# ── Tick: movement, food, collisions ──────────────────────────────
def test_tick_moves_without_growing(session):
    session.food = (0, 0)
    assert session.tick() == TICK_MOVED
    assert list(session.snake.body) == [(11, 10), (10, 10), (9, 10)]
    assert session.score == 0


def test_tick_eats_and_grows(session):
    session.food = (11, 10)
    assert session.tick() == TICK_ATE
    assert list(session.snake.body) == [(11, 10), (10, 10), (9, 10), (8, 10)]
    assert session.score == 1
    assert session.food is not None
    assert not session.snake.occupies(session.food)
    assert session.high_score.best == 1
    assert session.new_best


def test_wall_collision_ends_game():
    session = GameSession(rng=random.Random(1))
    session.snake = Snake([(0, 10), (1, 10), (2, 10)], Direction.LEFT)
    session.food = (5, 5)

    assert session.tick() == OUTCOME_WALL
    assert session.state == STATE_OVER
    assert session.over
    assert session.score == 0
    assert list(session.snake.body) == [(0, 10), (1, 10), (2, 10)]


def test_self_collision_ends_game(session):
    session.snake = Snake([(5, 5), (6, 5), (6, 4), (5, 4), (4, 4)], Direction.UP)
    session.food = (0, 0)
    assert session.tick() == OUTCOME_SELF
    assert session.outcome == OUTCOME_SELF


def test_head_may_enter_the_cell_the_tail_leaves(session):
    session.snake = Snake([(5, 5), (5, 4), (6, 4), (6, 5)], Direction.RIGHT)
    session.food = (0, 0)
    assert session.tick() == TICK_MOVED
    assert list(session.snake.body) == [(6, 5), (5, 5), (5, 4), (6, 4)]


def test_ticks_after_game_over_do_nothing():
    session = GameSession(rng=random.Random(1))
    session.snake = Snake([(19, 0), (18, 0), (17, 0)], Direction.RIGHT)
    assert session.tick() == OUTCOME_WALL
    body = list(session.snake.body)
    assert session.tick() == OUTCOME_WALL
    assert list(session.snake.body) == body


def test_filling_the_board_is_a_win():
    session = GameSession(cols=4, rows=1, rng=random.Random(3))
    assert list(session.snake.body) == [(2, 0), (1, 0), (0, 0)]
    assert session.food == (3, 0)

    assert session.tick() == OUTCOME_BOARD_FULL
    assert session.state == STATE_OVER
    assert session.score == 1
    assert session.food is None
    assert len(session.snake) == 4
    assert session.high_score.best == 1


# ── Pause ─────────────────────────────────────────────────────────
def test_paused_tick_changes_nothing(session):
    body, food = list(session.snake.body), session.food
    assert session.toggle_pause() is True
    assert session.state == STATE_PAUSED

    assert session.tick() == TICK_PAUSED
    assert list(session.snake.body) == body
    assert session.food == food
    assert session.score == 0

    assert session.toggle_pause() is False
    assert session.state == STATE_RUNNING


def test_pause_is_ignored_after_game_over(session):
    session.snake = Snake([(19, 3)], Direction.RIGHT)
    session.tick()
    session.toggle_pause()
    assert session.state == STATE_OVER


# ── Input intent ──────────────────────────────────────────────────
def test_reversal_is_rejected(session):
    assert session.request_direction(Direction.LEFT) is False
    assert session.snake.next_dir == Direction.RIGHT


def test_reversal_checks_current_not_pending_direction(session):
    assert session.request_direction(Direction.UP)
    # LEFT is not opposite to UP, but it is opposite to the current heading
    assert session.request_direction(Direction.LEFT) is False
    assert session.snake.next_dir == Direction.UP


def test_latest_input_before_tick_wins(session):
    session.food = (0, 0)
    session.request_direction(Direction.UP)
    session.request_direction(Direction.DOWN)
    session.tick()
    assert session.snake.dir == Direction.DOWN
    assert session.snake.head == (10, 11)


def test_direction_ignored_once_over(session):
    session.snake = Snake([(19, 3)], Direction.RIGHT)
    session.tick()
    assert session.request_direction(Direction.UP) is False


# ── Food placement ────────────────────────────────────────────────
def test_spawn_food_finds_the_last_free_cell():
    session = GameSession(cols=4, rows=4, rng=random.Random(11))
    cells = [(x, y) for y in range(4) for x in range(4) if (x, y) != (3, 3)]
    session.snake = Snake(cells, Direction.RIGHT)
    for _ in range(20):
        assert session.spawn_food() == (3, 3)


def test_spawn_food_never_lands_on_snake(session):
    for _ in range(200):
        food = session.spawn_food()
        assert session.in_bounds(food)
        assert not session.snake.occupies(food)


# ── Speed curve ───────────────────────────────────────────────────
def test_interval_curve():
    assert interval_for(0) == BASE_INTERVAL
    assert interval_for(10) == 130
    assert interval_for(45) == 60
    assert interval_for(1000) == MIN_INTERVAL


def test_interval_is_non_increasing_and_floored():
    values = [interval_for(score) for score in range(300)]
    assert all(a >= b for a, b in zip(values, values[1:]))
    assert min(values) == MIN_INTERVAL


def test_session_interval_follows_score(session):
    session.score = 45
    assert session.current_interval() == 60


# ── Whole-game properties ─────────────────────────────────────────
def test_random_play_keeps_invariants():
    rng = random.Random(2024)
    for game in range(20):
        session = GameSession(rng=random.Random(game))
        previous_dir = session.snake.dir
        for _ in range(5000):
            session.request_direction(rng.choice(ALL_DIRS))
            before = len(session.snake)
            result = session.tick()
            if session.over:
                break
            grew = len(session.snake) - before
            assert grew in (0, 1)
            assert (grew == 1) == (result == TICK_ATE)
            assert all(session.in_bounds(cell) for cell in session.snake.body)
            assert len(set(session.snake.body)) == len(session.snake)
            assert not session.snake.dir.is_opposite(previous_dir)
            previous_dir = session.snake.dir


# ── HighScore / GameModel ─────────────────────────────────────────
def test_high_score_only_rises():
    best = HighScore()
    assert best.submit(3)
    assert not best.submit(2)
    assert not best.submit(3)
    assert best.best == 3


def test_model_lifecycle():
    model = GameModel(rng=random.Random(5))
    assert model.state == STATE_MENU
    assert model.toggle_pause() is False
    assert model.request_direction(Direction.UP) is False

    first = model.start()
    assert model.state == STATE_RUNNING
    first.food = (11, 10)
    first.tick()
    assert model.high_score.best == 1

    second = model.start()
    assert second is not first
    assert second.score == 0
    assert model.high_score.best == 1
    assert second.high_score is model.high_score


def test_model_pause_and_steer():
    model = GameModel(rng=random.Random(5))
    model.start()
    assert model.request_direction(Direction.DOWN)
    assert model.toggle_pause() is True
    assert model.state == STATE_PAUSED

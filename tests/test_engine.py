import dataclasses

import pytest

from snake_game.config import GameConfig
from snake_game.direction import Direction
from snake_game.engine import BOARD_FULL, SELF, WALL, EngineState, advance, initial_snake, new_state
from snake_game.grid import Cell


def make_state(snake, food=Cell(0, 0), direction=Direction.RIGHT, score=0, speed=150):
    return EngineState(
        snake=tuple(Cell(*c) for c in snake),
        food=Cell(*food) if food is not None else None,
        direction=direction,
        score=score,
        speed=speed,
    )


def test_initial_state(config, rng):
    state = new_state(config, rng)
    assert state.snake == (Cell(10, 10), Cell(9, 10), Cell(8, 10))
    assert state.direction is Direction.RIGHT
    assert state.score == 0
    assert state.speed == 150
    assert state.food not in state.snake


def test_initial_snake_follows_config():
    config = GameConfig(cols=8, rows=4, initial_head=(4, 1), initial_length=5)
    assert initial_snake(config) == tuple(Cell(x, 1) for x in (4, 3, 2, 1, 0))


def test_config_rejects_snake_that_does_not_fit():
    with pytest.raises(ValueError):
        GameConfig(cols=8, rows=4, initial_head=(2, 1), initial_length=5)


def test_plain_move_keeps_length(config):
    state = make_state([(10, 10), (9, 10), (8, 10)])
    result = advance(state, Direction.UP, config)
    assert not result.terminal and not result.ate_food
    assert result.state.snake == (Cell(10, 9), Cell(10, 10), Cell(9, 10))
    assert result.state.direction is Direction.UP
    assert len(result.state.snake) == len(state.snake)


def test_boundary_collision_is_terminal(config):
    state = make_state([(19, 10), (18, 10), (17, 10)])
    result = advance(state, Direction.RIGHT, config)
    assert result.terminal
    assert result.reason == WALL
    assert result.state is state


@pytest.mark.parametrize(
    "head, direction",
    [((0, 5), Direction.LEFT), ((5, 0), Direction.UP), ((5, 19), Direction.DOWN)],
)
def test_every_wall_is_terminal(config, head, direction):
    state = make_state([head])
    assert advance(state, direction, config).reason == WALL


def test_self_collision_is_terminal(config):
    state = make_state([(10, 10), (9, 10), (9, 11), (10, 11)], food=(0, 0))
    result = advance(state, Direction.LEFT, config)
    assert result.terminal
    assert result.reason == SELF
    assert result.state.snake == state.snake


def test_moving_into_the_tail_cell_is_a_collision(config):
    # The tail would be vacated this tick, but the check uses the body as it
    # stood before the move.
    state = make_state([(10, 10), (10, 11), (9, 11), (9, 10)], food=(0, 0))
    result = advance(state, Direction.LEFT, config)
    assert result.terminal
    assert result.reason == SELF


def test_eating_food_grows_and_scores(config, rng):
    state = make_state([(10, 10), (9, 10), (8, 10)], food=(11, 10), score=20, speed=150)
    result = advance(state, Direction.RIGHT, config, rng)
    assert result.ate_food and not result.terminal
    new = result.state
    assert new.score == 30
    assert len(new.snake) == 4
    assert new.snake[0] == Cell(11, 10)
    assert new.snake[-1] == Cell(8, 10)
    assert new.speed == 147
    assert new.food is not None
    assert new.food not in new.snake


def test_speed_stays_at_floor_when_eating(config, rng):
    state = make_state([(10, 10), (9, 10)], food=(11, 10), speed=70)
    assert advance(state, Direction.RIGHT, config, rng).state.speed == 70


def test_filling_the_board_ends_the_game(rng):
    config = GameConfig(cols=2, rows=2, initial_head=(1, 0), initial_length=2)
    state = make_state([(0, 1), (0, 0), (1, 0)], food=(1, 1))
    result = advance(state, Direction.RIGHT, config, rng)
    assert result.ate_food
    assert result.terminal
    assert result.reason == BOARD_FULL
    assert result.state.food is None
    assert len(result.state.snake) == 4


def test_advance_does_not_mutate_input(config, rng):
    state = make_state([(10, 10), (9, 10), (8, 10)], food=(11, 10))
    before = dataclasses.replace(state)
    advance(state, Direction.RIGHT, config, rng)
    assert state == before


def test_length_invariant_over_random_walk(config, rng):
    state = new_state(config, rng)
    directions = [Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.RIGHT]
    for step in range(200):
        result = advance(state, directions[step % len(directions)], config, rng)
        if result.terminal:
            break
        expected = len(state.snake) + (1 if result.ate_food else 0)
        assert len(result.state.snake) == expected
        assert result.state.food not in result.state.snake
        assert len(set(result.state.snake)) == len(result.state.snake)
        state = result.state

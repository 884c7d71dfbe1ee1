import pytest

from snake_game.direction import Direction, DirectionArbiter


@pytest.mark.parametrize(
    "direction, opposite",
    [
        (Direction.UP, Direction.DOWN),
        (Direction.DOWN, Direction.UP),
        (Direction.LEFT, Direction.RIGHT),
        (Direction.RIGHT, Direction.LEFT),
    ],
)
def test_opposites(direction, opposite):
    assert direction.opposite is opposite
    assert (direction.dx + opposite.dx, direction.dy + opposite.dy) == (0, 0)


def test_reversal_is_ignored():
    arbiter = DirectionArbiter(Direction.RIGHT)
    assert arbiter.request(Direction.LEFT) is False
    assert arbiter.queued is None
    assert arbiter.commit() is Direction.RIGHT


def test_latest_request_wins():
    arbiter = DirectionArbiter(Direction.RIGHT)
    assert arbiter.request(Direction.UP)
    assert arbiter.request(Direction.DOWN)
    assert arbiter.queued is Direction.DOWN
    assert arbiter.commit() is Direction.DOWN
    assert arbiter.queued is None


def test_reversal_is_checked_against_committed_not_queued():
    arbiter = DirectionArbiter(Direction.RIGHT)
    arbiter.request(Direction.UP)
    # DOWN reverses the queued UP but not the committed RIGHT.
    assert arbiter.request(Direction.DOWN)
    assert arbiter.request(Direction.LEFT) is False
    assert arbiter.commit() is Direction.DOWN


def test_last_direction_rolls_over_when_nothing_is_queued():
    arbiter = DirectionArbiter(Direction.RIGHT)
    arbiter.request(Direction.UP)
    arbiter.commit()
    assert arbiter.commit() is Direction.UP
    assert arbiter.commit() is Direction.UP


def test_reversal_after_commit_is_rejected():
    arbiter = DirectionArbiter(Direction.RIGHT)
    arbiter.request(Direction.UP)
    arbiter.commit()
    assert arbiter.request(Direction.DOWN) is False
    assert arbiter.commit() is Direction.UP

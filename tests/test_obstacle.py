import pytest

from flybird.console.base import RED
from flybird.game.bird import Bird
from flybird.game.obstacle import Obstacle

from .conftest import SequenceRandom


@pytest.mark.parametrize("score", range(0, 18))
def test_gap_narrows_with_score(score, world):
    obstacle = Obstacle.spawn(80, score, SequenceRandom([15]), world)
    assert obstacle.size == 20 - score


@pytest.mark.parametrize("score", [18, 19, 25, 100, 10_000])
def test_gap_size_floor(score, world):
    obstacle = Obstacle.spawn(80, score, SequenceRandom([15]), world)
    assert obstacle.size == 2


def test_spawn_draws_gap_from_range(world):
    rng = SequenceRandom([33])
    obstacle = Obstacle.spawn(120, 0, rng, world)
    assert obstacle.x == 120
    assert obstacle.gap_y == 33
    assert rng.calls == [(10, 40)]


@pytest.mark.parametrize(
    "bird_y, expected",
    [
        (14, True),   # 14 + 5 < 20, above the gap
        (15, False),
        (20, False),
        (25, False),
        (26, True),   # 26 - 5 > 20, below the gap
    ],
)
def test_hit_obstacle_at_matching_column(bird_y, expected):
    obstacle = Obstacle(x=50, gap_y=20, size=10)
    assert obstacle.hit_obstacle(Bird(x=50, y=bird_y)) is expected


def test_no_hit_on_other_columns():
    obstacle = Obstacle(x=50, gap_y=20, size=10)
    assert not obstacle.hit_obstacle(Bird(x=49, y=0))
    assert not obstacle.hit_obstacle(Bird(x=51, y=59))


def test_half_size_truncates():
    assert Obstacle(x=0, gap_y=20, size=5).half_size == 2
    assert Obstacle(x=0, gap_y=20, size=2).half_size == 1


def test_render_leaves_gap_open(console, world):
    obstacle = Obstacle(x=30, gap_y=20, size=10)
    obstacle.render(console, bird_x=10, world_height=world.screen_height)

    column = console.column(20)
    assert column[:15] == "|" * 15
    assert column[15:25] == " " * 10
    assert column[25:] == "|" * 35
    assert len(console.find("|")) == 50
    assert tuple(console.fg[0, 20]) == RED


def test_render_odd_size(console, world):
    obstacle = Obstacle(x=3, gap_y=20, size=5)
    obstacle.render(console, bird_x=0, world_height=world.screen_height)

    column = console.column(3)
    assert column[:18] == "|" * 18
    assert column[18:22] == "    "
    assert column[22:] == "|" * 38


def test_render_off_screen_draws_nothing(console, world):
    obstacle = Obstacle(x=200, gap_y=20, size=10)
    obstacle.render(console, bird_x=5, world_height=world.screen_height)
    assert console.find("|") == []

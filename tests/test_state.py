import pytest

from game.state import AnimationState, Direction, GameState, clamp_position, in_bounds


@pytest.mark.parametrize(
    "direction,animation",
    [
        (Direction.NONE, AnimationState.IDLE),
        (Direction.LEFT, AnimationState.RUN_LEFT),
        (Direction.UP, AnimationState.RUN_UP),
        (Direction.RIGHT, AnimationState.RUN_RIGHT),
        (Direction.DOWN, AnimationState.RUN_DOWN),
    ],
)
def test_animation_follows_direction(direction, animation):
    assert GameState(direction=direction).animation is animation


def test_idle_has_seven_frames_runs_have_eight():
    assert AnimationState.IDLE.frame_count == 7
    for state in (AnimationState.RUN_LEFT, AnimationState.RUN_UP,
                  AnimationState.RUN_RIGHT, AnimationState.RUN_DOWN):
        assert state.frame_count == 8


def test_run_right_mirrors_run_left_row():
    assert AnimationState.RUN_RIGHT.mirrored
    assert AnimationState.RUN_RIGHT.row == AnimationState.RUN_LEFT.row
    assert not any(
        s.mirrored for s in AnimationState if s is not AnimationState.RUN_RIGHT
    )


def test_directions_use_one_axis():
    for d in Direction:
        dx, dy = d.vector
        assert abs(dx) + abs(dy) <= 1


def test_clamp_and_bounds():
    assert clamp_position(-5, 600) == (0, 448)
    assert in_bounds(0, 448)
    assert not in_bounds(449, 0)


def test_character_box_and_restore():
    state = GameState(position=(10, 20))
    assert state.character_box == (10, 20, 64, 64)
    state.restore((30, 40), 5, [[1, 2]])
    assert state.position == (30, 40)
    assert state.score == 5
    assert state.power_ups == [(1, 2)]

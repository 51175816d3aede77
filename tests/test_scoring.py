import math
import random

import pytest

import pong_core
from pong_state import AI, HUMAN, MatchState, Settings

from conftest import FixedRng


def _send_past_left_edge(state):
    state.ai_y = 100
    state.ball_x, state.ball_y = 5, 500
    state.ball_vx, state.ball_vy = -5, 0


def _send_past_right_edge(state):
    state.human_y = 100
    state.ball_x, state.ball_y = 795, 500
    state.ball_vx, state.ball_vy = 5, 0


def test_left_edge_credits_human_and_serves_to_ai(state):
    _send_past_left_edge(state)
    events = pong_core.check_collisions(state)
    assert events == ["score"]
    assert state.scores() == (0, 1)
    assert state.ball_position() == (400, 300)
    assert state.ball_vx == pytest.approx(-5)
    assert state.is_running()


def test_right_edge_credits_ai_and_serves_to_human(state):
    _send_past_right_edge(state)
    events = pong_core.check_collisions(state)
    assert events == ["score"]
    assert state.scores() == (1, 0)
    assert state.ball_vx == pytest.approx(5)


@pytest.mark.parametrize("human_score", [0, 4, 8])
def test_human_point_below_threshold_keeps_playing(state, human_score):
    state.score_ai, state.score_human = 9, human_score
    _send_past_left_edge(state)
    pong_core.check_collisions(state)
    assert state.scores() == (9, human_score + 1)
    assert state.is_running()


def test_winning_point_ends_match_and_freezes_ball(state):
    state.score_ai, state.score_human = 9, 9
    _send_past_left_edge(state)
    events = pong_core.check_collisions(state)
    assert events == ["score", "match_over"]
    assert state.scores() == (9, 10)
    assert not state.is_running()
    assert state.winner() == "PLAYER"
    assert state.ball_position() == (5, 500)

    frozen = (state.ball_position(), state.ball_vx, state.ball_vy)
    assert pong_core.tick(state) == []
    assert (state.ball_position(), state.ball_vx, state.ball_vy) == frozen


def test_ai_can_win(state):
    state.score_ai = 9
    _send_past_right_edge(state)
    pong_core.check_collisions(state)
    assert not state.is_running()
    assert state.winner() == "AI"


def test_custom_winning_score():
    state = MatchState(Settings(winning_score=1), FixedRng(45))
    _send_past_right_edge(state)
    pong_core.check_collisions(state)
    assert not state.is_running()


@pytest.mark.parametrize("scores", [(10, 0), (3, 10), (10, 9)])
def test_restart_after_match(state, scores):
    state.score_ai, state.score_human = scores
    state.running = False
    assert pong_core.restart(state) is True
    assert state.scores() == (0, 0)
    assert state.is_running()
    assert state.ball_position() == (400, 300)
    assert math.hypot(state.ball_vx, state.ball_vy) == pytest.approx(5)


@pytest.mark.parametrize("draw,toward_human", [(0, True), (1, False)])
def test_restart_serves_to_either_side(draw, toward_human):
    state = MatchState(rng=FixedRng(draw))
    state.score_ai = 10
    state.running = False
    pong_core.restart(state)
    assert (state.ball_vx > 0) == toward_human


def test_restart_ignored_mid_match(state):
    state.score_ai, state.score_human = 4, 2
    assert pong_core.restart(state) is False
    assert state.scores() == (4, 2)


def test_serve_after_ai_scores_goes_to_human(state):
    pong_core.reset_ball(state, AI)
    assert state.ball_vx > 0


def test_serve_after_human_scores_goes_to_ai(state):
    pong_core.reset_ball(state, HUMAN)
    assert state.ball_vx < 0


@pytest.mark.parametrize("draw,degrees", [(0, -45), (45, 0), (89, 44)])
def test_serve_angle_from_injected_rng(draw, degrees):
    state = MatchState(rng=FixedRng(draw))
    pong_core.reset_ball(state, AI)
    angle = math.radians(degrees)
    assert state.ball_vx == pytest.approx(math.cos(angle) * 5)
    assert state.ball_vy == pytest.approx(math.sin(angle) * 5)


def test_serve_keeps_direction_at_steepest_angle():
    state = MatchState(rng=FixedRng(0))
    pong_core.reset_ball(state, HUMAN)
    assert state.ball_vx == pytest.approx(-5 * math.cos(math.radians(45)))
    assert state.ball_vy == pytest.approx(-5 * math.sin(math.radians(45)))


def test_serve_angles_stay_in_range():
    state = MatchState(rng=random.Random(7))
    for _ in range(500):
        assert -45 <= pong_core.serve_angle(state) <= 44


def test_new_match_serves_from_center():
    state = pong_core.new_match(rng=FixedRng(45))
    assert state.ball_position() == (400, 300)
    assert state.ball_vx == pytest.approx(-5)
    assert state.scores() == (0, 0)


def test_unreturned_serve_scores_for_ai(state):
    pong_core.reset_ball(state, AI)
    state.human_y = 60
    events = []
    for _ in range(200):
        events.extend(pong_core.tick(state))
        if "score" in events:
            break
    assert state.scores() == (1, 0)
    assert state.ball_position() == (400, 300)
    assert state.ball_vx > 0

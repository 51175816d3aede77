"""
Simulation for GLUT Pong.

Every function takes the MatchState explicitly and mutates it in place.
One call to tick() is one fixed timestep; there is no dt, the timer rate
is the timestep.

Events returned by tick() / check_collisions():
    "paddle_hit", "wall_hit", "score", "match_over"
"""

import logging
import math

from pong_state import AI, HUMAN, MatchState

logger = logging.getLogger(__name__)


def new_match(settings=None, rng=None):
    """Fresh state with the ball served toward a random side."""
    state = MatchState(settings, rng)
    reset_ball(state, state.rng.randrange(2) + 1)
    return state


# ============================================================================
# PADDLES
# ============================================================================

def update_human_paddle(state):
    s = state.settings
    # Up is checked before down; with both held the down clamp is the one that sticks.
    if state.move_up:
        state.human_y = min(state.human_y + s.paddle_speed, s.paddle_max_y)
    if state.move_down:
        state.human_y = max(state.human_y - s.paddle_speed, s.paddle_min_y)


def ai_target(state):
    s = state.settings
    return state.ball_y * s.ai_lag + s.center_y * (1.0 - s.ai_lag)


def update_ai_paddle(state):
    """
    Move the AI paddle toward ai_target(), at most ai_speed per tick.

    The AI only reacts while the ball is coming toward it (ball_vx < 0);
    otherwise it holds where it is.
    """
    s = state.settings
    if state.ball_vx < 0:
        diff = ai_target(state) - state.ai_y
        if abs(diff) > s.ai_dead_zone:
            step = min(s.ai_speed, abs(diff))
            if diff > 0:
                state.ai_y += step
            else:
                state.ai_y -= step

    state.ai_y = min(state.ai_y, s.paddle_max_y)
    state.ai_y = max(state.ai_y, s.paddle_min_y)


def update_paddles(state):
    update_human_paddle(state)
    update_ai_paddle(state)


# ============================================================================
# BALL
# ============================================================================

def move_ball(state):
    state.ball_x += state.ball_vx
    state.ball_y += state.ball_vy


def bounce_off_paddle(state, paddle_y, direction):
    """
    Reflect the ball off a paddle centered at paddle_y.

    The hit offset from the paddle center picks the outgoing angle (up to
    max_bounce_deg at the tips) and the speed goes up by a fixed step.
    direction is +1 to send the ball right, -1 to send it left.
    """
    s = state.settings
    half = s.paddle_height / 2.0
    offset = (state.ball_y - paddle_y) / half

    speed = math.hypot(state.ball_vx, state.ball_vy) + s.ball_speed_increase
    angle = offset * math.radians(s.max_bounce_deg)

    state.ball_vx = direction * abs(math.cos(angle) * speed)
    state.ball_vy = math.sin(angle) * speed


def _within_paddle(state, paddle_y):
    half = state.settings.paddle_height / 2.0
    return paddle_y - half < state.ball_y < paddle_y + half


def check_collisions(state):
    """Walls, then AI paddle, then human paddle, then both goals."""
    s = state.settings
    r = s.ball_radius
    events = []

    # Top / bottom walls
    if state.ball_y + r > s.court_height or state.ball_y - r < 0:
        state.ball_vy = -state.ball_vy
        state.ball_y = max(r, min(state.ball_y, s.court_height - r))
        events.append("wall_hit")

    # AI paddle (left)
    if state.ball_x - r < s.ai_paddle_x + s.paddle_width and state.ball_vx < 0:
        if _within_paddle(state, state.ai_y):
            bounce_off_paddle(state, state.ai_y, 1)
            events.append("paddle_hit")

    # Human paddle (right)
    if state.ball_x + r > s.human_paddle_x and state.ball_vx > 0:
        if _within_paddle(state, state.human_y):
            bounce_off_paddle(state, state.human_y, -1)
            events.append("paddle_hit")

    # Goals
    if state.ball_x - r < 0:
        events.extend(award_point(state, HUMAN))
    if state.ball_x + r > s.court_width:
        events.extend(award_point(state, AI))

    return events


# ============================================================================
# SCORING & SERVE
# ============================================================================

def serve_angle(state):
    """Random serve angle in whole degrees, within +-serve_spread_deg."""
    spread = state.settings.serve_spread_deg
    return state.rng.randrange(spread * 2) - spread


def reset_ball(state, scoring_side):
    """
    Center the ball and serve it at base speed toward the side that
    conceded: AI scored -> toward the human (vx > 0), human scored ->
    toward the AI (vx < 0).
    """
    s = state.settings
    state.ball_x = s.center_x
    state.ball_y = s.center_y

    direction = 1 if scoring_side == AI else -1
    angle = math.radians(serve_angle(state))
    state.ball_vx = math.cos(angle) * direction * s.ball_base_speed
    state.ball_vy = math.sin(angle) * s.ball_base_speed


def award_point(state, scoring_side):
    if scoring_side == HUMAN:
        state.score_human += 1
        total = state.score_human
    else:
        state.score_ai += 1
        total = state.score_ai

    name = "PLAYER" if scoring_side == HUMAN else "AI"
    logger.info("%s scores (%d - %d)", name, state.score_ai, state.score_human)

    if total >= state.settings.winning_score:
        # Ball stays where it went out
        state.running = False
        logger.info("%s wins the match %d - %d", name, state.score_ai, state.score_human)
        return ["score", "match_over"]

    reset_ball(state, scoring_side)
    return ["score"]


def restart(state):
    """
    Start a new match after the previous one ended. Ignored while a match
    is still running. Returns True when a new match was started.
    """
    if state.running:
        return False

    state.score_ai = 0
    state.score_human = 0
    state.running = True
    reset_ball(state, state.rng.randrange(2) + 1)
    logger.info("Match restarted")
    return True


# ============================================================================
# TICK
# ============================================================================

def tick(state):
    """One fixed timestep. Returns the events it produced."""
    if not state.running:
        return []

    update_paddles(state)
    move_ball(state)
    events = check_collisions(state)
    if events:
        logger.debug("tick events %s -> %r", events, state)
    return events

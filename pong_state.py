"""
Match state for GLUT Pong.

Holds the tunable constants, the Settings built from them and the single
MatchState record the simulation mutates once per tick. Nothing in here
touches OpenGL, so it can be used headless.
"""

import random

# ============================================================================
# CONSTANTS & CONFIG
# ============================================================================

COURT_WIDTH = 800
COURT_HEIGHT = 600

PADDLE_WIDTH = 15.0
PADDLE_HEIGHT = 100.0
PADDLE_SPEED = 10.0         # Human paddle, units per tick

# AI difficulty
AI_LAG_FACTOR = 0.75        # 0 = stays centered, 1 = tracks the ball exactly
AI_SPEED = 8.0
AI_DEAD_ZONE = 0.1          # Smaller moves are skipped (stops jitter)

BALL_RADIUS = 10.0
BALL_BASE_SPEED = 5.0
BALL_SPEED_INCREASE = 0.5   # Added on every paddle bounce, uncapped
MAX_BOUNCE_DEG = 45.0
SERVE_SPREAD_DEG = 45

TICK_MS = 16
WINNING_SCORE = 10

# Sides (also used as the "scoring player" argument)
AI = 1
HUMAN = 2


class Settings:
    """Court geometry and tuning. Any constant can be overridden by keyword."""

    def __init__(self, **overrides):
        self.court_width = COURT_WIDTH
        self.court_height = COURT_HEIGHT
        self.paddle_width = PADDLE_WIDTH
        self.paddle_height = PADDLE_HEIGHT
        self.paddle_speed = PADDLE_SPEED
        self.ai_lag = AI_LAG_FACTOR
        self.ai_speed = AI_SPEED
        self.ai_dead_zone = AI_DEAD_ZONE
        self.ball_radius = BALL_RADIUS
        self.ball_base_speed = BALL_BASE_SPEED
        self.ball_speed_increase = BALL_SPEED_INCREASE
        self.max_bounce_deg = MAX_BOUNCE_DEG
        self.serve_spread_deg = SERVE_SPREAD_DEG
        self.tick_ms = TICK_MS
        self.winning_score = WINNING_SCORE

        for name, value in overrides.items():
            if not hasattr(self, name):
                raise TypeError(f"Unknown setting: {name}")
            setattr(self, name, value)

        self.validate()

    def validate(self):
        assert self.court_width > 0 and self.court_height > 0, "court must have an area"
        assert 0 < self.paddle_height <= self.court_height, "paddle must fit in the court"
        assert self.paddle_width > 0
        assert self.paddle_width * 3 < self.court_width / 2, "paddles must sit on their own half"
        assert 0 < self.ai_lag < 1, "AI lag factor must be in (0, 1)"
        assert self.ai_speed > 0 and self.paddle_speed > 0
        assert self.ai_dead_zone >= 0
        assert 0 < self.ball_radius * 2 < self.court_height
        assert self.ball_base_speed > 0
        assert self.ball_speed_increase >= 0
        assert 0 < self.serve_spread_deg <= 90
        assert self.tick_ms > 0
        assert self.winning_score >= 1

    # Derived geometry

    @property
    def center_x(self):
        return self.court_width / 2.0

    @property
    def center_y(self):
        return self.court_height / 2.0

    @property
    def paddle_min_y(self):
        return self.paddle_height / 2.0

    @property
    def paddle_max_y(self):
        return self.court_height - self.paddle_height / 2.0

    @property
    def ai_paddle_x(self):
        # Left edge of the AI paddle
        return self.paddle_width * 2.0

    @property
    def human_paddle_x(self):
        # Left edge (the face) of the human paddle
        return self.court_width - self.paddle_width * 3.0


class MatchState:
    """
    Everything that changes during a match.

    The latches (move_up / move_down) are written by the input callbacks and
    read once per tick. The renderer only uses the read-only accessors.
    """

    def __init__(self, settings=None, rng=None):
        self.settings = settings or Settings()
        self.rng = rng or random.Random()

        self.ai_y = self.settings.center_y
        self.human_y = self.settings.center_y

        self.ball_x = self.settings.center_x
        self.ball_y = self.settings.center_y
        self.ball_vx = self.settings.ball_base_speed
        self.ball_vy = 0.0

        self.score_ai = 0
        self.score_human = 0
        self.running = True

        self.move_up = False
        self.move_down = False

    # --- Input latches ---

    def press_up(self):
        self.move_up = True

    def release_up(self):
        self.move_up = False

    def press_down(self):
        self.move_down = True

    def release_down(self):
        self.move_down = False

    # --- Read-only accessors for the renderer ---

    def paddle_positions(self):
        """(ai_y, human_y)"""
        return self.ai_y, self.human_y

    def ball_position(self):
        return self.ball_x, self.ball_y

    def ball_speed(self):
        return (self.ball_vx ** 2 + self.ball_vy ** 2) ** 0.5

    def scores(self):
        """(ai, human)"""
        return self.score_ai, self.score_human

    def is_running(self):
        return self.running

    def winner(self):
        if self.running:
            return None
        return "PLAYER" if self.score_human > self.score_ai else "AI"

    def __repr__(self):
        return (f"MatchState(score={self.score_ai}-{self.score_human}, "
                f"ball=({self.ball_x:.1f}, {self.ball_y:.1f}), "
                f"vel=({self.ball_vx:.2f}, {self.ball_vy:.2f}), running={self.running})")

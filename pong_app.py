"""
GLUT Pong
=========
Single player Pong: you on the right, the AI on the left. First to the
winning score takes the match.

Controls:
    Up / Down arrows: Move your paddle
    SPACE: Restart once the match is over
    Esc: Quit
"""

import argparse
import logging
import math
import random
import sys

from OpenGL.GL import *
from OpenGL.GLU import *
from OpenGL.GLUT import *

import pong_core
from pong_state import Settings
from sound_gen import SoundGenerator

logger = logging.getLogger(__name__)

# --- Global State Variables ---
# Filled in by main(); the GLUT callbacks only read these.
game = {
    "state": None,
    "sound": None,
}

BALL_SEGMENTS = 20


# ============================================================================
# DRAWING
# ============================================================================

def draw_paddle(x, y, settings):
    half = settings.paddle_height / 2.0
    glColor3f(1.0, 1.0, 1.0)
    glBegin(GL_QUADS)
    glVertex2f(x, y + half)
    glVertex2f(x + settings.paddle_width, y + half)
    glVertex2f(x + settings.paddle_width, y - half)
    glVertex2f(x, y - half)
    glEnd()


def draw_ball(x, y, radius):
    glColor3f(1.0, 1.0, 1.0)
    glBegin(GL_TRIANGLE_FAN)
    glVertex2f(x, y)
    for i in range(BALL_SEGMENTS + 1):
        angle = i * 2.0 * math.pi / BALL_SEGMENTS
        glVertex2f(x + math.cos(angle) * radius, y + math.sin(angle) * radius)
    glEnd()


def draw_text(text, x, y):
    glColor3f(1.0, 1.0, 1.0)
    glRasterPos2f(x, y)
    for ch in text:
        glutBitmapCharacter(GLUT_BITMAP_HELVETICA_18, ord(ch))


def draw_center_line(settings):
    glColor3f(0.5, 0.5, 0.5)
    glLineStipple(5, 0xAAAA)
    glEnable(GL_LINE_STIPPLE)
    glBegin(GL_LINES)
    glVertex2f(settings.center_x, 0)
    glVertex2f(settings.center_x, settings.court_height)
    glEnd()
    glDisable(GL_LINE_STIPPLE)


def display():
    state = game["state"]
    s = state.settings

    glClear(GL_COLOR_BUFFER_BIT)
    glLoadIdentity()

    draw_center_line(s)

    if state.is_running():
        ai_y, human_y = state.paddle_positions()
        draw_paddle(s.ai_paddle_x, ai_y, s)
        draw_paddle(s.human_paddle_x, human_y, s)
        draw_ball(*state.ball_position(), s.ball_radius)

    score_ai, score_human = state.scores()
    draw_text(f"{score_ai} - {score_human}", s.center_x - 40, s.court_height - 30)

    if state.is_running():
        draw_text("AI", 50, 20)
        draw_text("PLAYER: Up/Down Arrows", s.court_width - 200, 20)
    else:
        if state.winner() == "PLAYER":
            banner = f"PLAYER WINS! (Score: {score_human}-{score_ai})"
        else:
            banner = f"AI WINS! (Score: {score_ai}-{score_human})"
        draw_text(banner, s.center_x - 180, s.center_y)
        draw_text("Press SPACE to restart.", s.center_x - 110, s.center_y - 30)

    glutSwapBuffers()


def reshape(w, h):
    s = game["state"].settings
    glViewport(0, 0, w, h)
    glMatrixMode(GL_PROJECTION)
    glLoadIdentity()
    gluOrtho2D(0, s.court_width, 0, s.court_height)
    glMatrixMode(GL_MODELVIEW)


# ============================================================================
# LOOP & INPUT
# ============================================================================

def on_timer(value):
    state = game["state"]
    events = pong_core.tick(state)
    if events and game["sound"]:
        game["sound"].play_events(events)

    glutPostRedisplay()
    glutTimerFunc(state.settings.tick_ms, on_timer, 0)


def keyboard_down(key, x, y):
    if key == b' ':
        pong_core.restart(game["state"])
    elif key == b'\x1b':
        if game["sound"]:
            game["sound"].close()
        sys.exit(0)


def special_down(key, x, y):
    if key == GLUT_KEY_UP:
        game["state"].press_up()
    elif key == GLUT_KEY_DOWN:
        game["state"].press_down()


def special_up(key, x, y):
    if key == GLUT_KEY_UP:
        game["state"].release_up()
    elif key == GLUT_KEY_DOWN:
        game["state"].release_down()


# ============================================================================
# SETUP
# ============================================================================

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Single player Pong against an AI paddle.")
    parser.add_argument("--winning-score", type=int, default=None, help="points needed to win the match")
    parser.add_argument("--ai-lag", type=float, default=None, help="AI tracking factor in (0, 1)")
    parser.add_argument("--ai-speed", type=float, default=None, help="AI paddle speed per tick")
    parser.add_argument("--seed", type=int, default=None, help="seed for the serve angles")
    parser.add_argument("--mute", action="store_true", help="disable sound effects")
    parser.add_argument("--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def build_settings(args):
    overrides = {}
    if args.winning_score is not None:
        overrides["winning_score"] = args.winning_score
    if args.ai_lag is not None:
        overrides["ai_lag"] = args.ai_lag
    if args.ai_speed is not None:
        overrides["ai_speed"] = args.ai_speed
    return Settings(**overrides)


def init_gl():
    glClearColor(0.0, 0.0, 0.0, 1.0)
    glShadeModel(GL_FLAT)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = build_settings(args)
    game["state"] = pong_core.new_match(settings, random.Random(args.seed))
    game["sound"] = SoundGenerator(enabled=not args.mute)

    glutInit(sys.argv[:1])
    glutInitDisplayMode(GLUT_DOUBLE | GLUT_RGB)
    glutInitWindowSize(settings.court_width, settings.court_height)
    glutCreateWindow(b"OpenGL Single-Player Pong (Human on Right vs AI)")

    init_gl()

    glutDisplayFunc(display)
    glutReshapeFunc(reshape)
    glutKeyboardFunc(keyboard_down)
    glutSpecialFunc(special_down)
    glutSpecialUpFunc(special_up)
    glutTimerFunc(settings.tick_ms, on_timer, 0)

    print("Controls:")
    print("Move      Up / Down Arrows")
    print("Restart   SPACE (after the match)")
    print("Exit      ESC")
    logger.info("First to %d wins", settings.winning_score)

    glutMainLoop()


if __name__ == "__main__":
    main()

"""
Tests for input translation and routing.
"""

import pygame
import pytest

from models import Point2D, RunState
from games.ArcheryPop.input import InputAction, InputEvent, PygameInputSource, apply_input, clamp


@pytest.fixture
def source():
    return PygameInputSource(960, 600)


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k, mod=0, unicode='', scancode=0)


# ============================================================================
# Translation
# ============================================================================


class TestTranslate:

    def test_click_fires_at_point(self, source):
        event = source.translate(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(100, 200), button=1))
        assert event.action == InputAction.FIRE
        assert event.position == Point2D(x=100, y=200)

    def test_click_is_clamped(self, source):
        event = source.translate(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(1200, -30), button=1))
        assert event.position == Point2D(x=960, y=0)

    def test_right_click_ignored(self, source):
        assert source.translate(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(1, 1), button=3)) is None

    def test_motion_updates_aim(self, source):
        event = source.translate(pygame.event.Event(pygame.MOUSEMOTION, pos=(-5, 700), rel=(0, 0), buttons=(0, 0, 0)))
        assert event.action == InputAction.AIM
        assert source.aim == (0, 600)

    @pytest.mark.parametrize('k, action', [
        (pygame.K_SPACE, InputAction.TOGGLE_PAUSE),
        (pygame.K_RETURN, InputAction.START),
        (pygame.K_q, InputAction.QUIT),
        (pygame.K_r, InputAction.RESET_HIGHSCORE),
        (pygame.K_ESCAPE, InputAction.EXIT),
    ])
    def test_key_bindings(self, source, k, action):
        event = source.translate(key(k))
        assert event.action == action
        assert event.position is None

    def test_unbound_key(self, source):
        assert source.translate(key(pygame.K_a)) is None

    def test_window_close_exits(self, source):
        assert source.translate(pygame.event.Event(pygame.QUIT)).action == InputAction.EXIT

    def test_clamp(self):
        assert clamp(5, 0, 10) == 5
        assert clamp(-1, 0, 10) == 0
        assert clamp(11, 0, 10) == 10


# ============================================================================
# Routing
# ============================================================================


def action(kind, x=None, y=None):
    position = Point2D(x=x, y=y) if x is not None else None
    return InputEvent(action=kind, position=position)


class TestApplyInput:

    def test_start_and_fire(self, session):
        assert apply_input(session, action(InputAction.START), "Robin")
        session.pool.clear()
        session.pool.spawn(x=0, y=0)
        assert apply_input(session, action(InputAction.FIRE, 40, 40))
        assert session.get_score() == 10

    def test_start_without_name_refused(self, session):
        assert apply_input(session, action(InputAction.START), "") is False

    def test_toggle_and_quit(self, session):
        session.start("Robin")
        assert apply_input(session, action(InputAction.TOGGLE_PAUSE))
        assert session.get_run_state() == RunState.PAUSED
        assert apply_input(session, action(InputAction.QUIT))
        assert session.get_run_state() == RunState.MENU

    def test_reset_only_on_menu(self, session, store):
        store.save(40)
        session.start("Robin")
        assert apply_input(session, action(InputAction.RESET_HIGHSCORE)) is False
        assert store.load() == 40
        session.pause()
        session.quit()
        assert apply_input(session, action(InputAction.RESET_HIGHSCORE))
        assert store.load() == 0

    def test_aim_and_exit_left_to_caller(self, session):
        assert apply_input(session, action(InputAction.AIM, 1, 1)) is False
        assert apply_input(session, action(InputAction.EXIT)) is False

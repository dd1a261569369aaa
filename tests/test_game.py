import random

import pygame

import swipesnake.game as game
from swipesnake.game import Session, board_width
from swipesnake.state import DOWN, LEFT, RIGHT, UP
from swipesnake.ticker import TICK_EVENT, Ticker


def make_session(seed=3):
    return Session((400, 400), random.Random(seed))


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k, mod=0, unicode="", scancode=0)


def test_tick_event_advances_snake():
    session = make_session()
    session.state = session.state._replace(food=(0, 0))
    session.handle_event(pygame.event.Event(TICK_EVENT))
    assert session.state.snake[0] == (6, 5)


def test_latest_direction_wins_at_tick():
    session = make_session()
    session.state = session.state._replace(food=(0, 0))
    session.handle_event(key(pygame.K_UP))
    session.handle_event(key(pygame.K_DOWN))
    session.handle_event(pygame.event.Event(TICK_EVENT))
    assert session.state.snake[0] == (5, 6)


def test_swipe_steers():
    session = make_session()
    session.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(200, 200)))
    session.handle_event(pygame.event.Event(pygame.MOUSEMOTION, buttons=(1, 0, 0), pos=(200, 150), rel=(0, -50)))
    assert session.state.direction == UP


def test_reverse_swipe_ends_game_next_tick():
    session = make_session()
    session.handle_event(key(pygame.K_LEFT))
    assert session.state.direction == LEFT
    assert not session.state.game_over
    session.handle_event(pygame.event.Event(TICK_EVENT))
    assert session.state.game_over


def test_ticks_after_game_over_do_nothing():
    session = make_session()
    session.state = session.state._replace(game_over=True)
    frozen = session.state
    session.handle_event(pygame.event.Event(TICK_EVENT))
    assert session.state is frozen


def test_tap_on_reset_button_resets():
    session = make_session()
    session.state = session.state._replace(game_over=True, score=5, direction=DOWN)
    session.reset_button = pygame.Rect(150, 200, 100, 40)
    session.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(170, 210)))
    session.handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=(170, 210)))
    assert not session.state.game_over
    assert session.state.score == 0
    assert session.state.direction == RIGHT
    assert session.state.snake == [(5, 5), (4, 5), (3, 5)]


def test_tap_outside_button_does_not_reset():
    session = make_session()
    session.state = session.state._replace(game_over=True)
    session.reset_button = pygame.Rect(150, 200, 100, 40)
    session.tap((10, 10))
    assert session.state.game_over


def test_r_key_resets_only_after_game_over():
    session = make_session()
    session.state = session.state._replace(score=3)
    session.handle_event(key(pygame.K_r))
    assert session.state.score == 3
    session.state = session.state._replace(game_over=True)
    session.handle_event(key(pygame.K_r))
    assert session.state.score == 0
    assert not session.state.game_over


def test_quit_events_stop_session():
    session = make_session()
    session.handle_event(pygame.event.Event(pygame.QUIT))
    assert not session.running
    session = make_session()
    session.handle_event(key(pygame.K_ESCAPE))
    assert not session.running


def test_board_width_rounds_down_to_whole_cells():
    assert board_width(400) == 400
    assert board_width(410) == 400
    assert board_width(439) == 420


def test_main_runs_until_quit_and_stops_timer(monkeypatch):
    tickers = []
    sizes = []

    class RecordingTicker(Ticker):
        def __init__(self, *args, **kwargs):
            super().__init__(*args, **kwargs)
            tickers.append(self)

    real_set_mode = pygame.display.set_mode

    def set_mode(size, *args, **kwargs):
        sizes.append(tuple(size))
        return real_set_mode(size, *args, **kwargs)

    monkeypatch.setattr(game, "Ticker", RecordingTicker)
    monkeypatch.setattr(pygame.display, "set_mode", set_mode)
    monkeypatch.setattr(pygame.event, "get", lambda: [pygame.event.Event(pygame.QUIT)])

    assert game.main(width=410, tick_ms=200, seed=1) == 0
    assert sizes == [(400, 400)]
    assert len(tickers) == 1
    assert not tickers[0].running
    assert not pygame.get_init()

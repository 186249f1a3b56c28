import logging
import threading
from types import SimpleNamespace

import desksnake.controls as controls
from desksnake.config import UP, DOWN, LEFT, RIGHT
from desksnake.controls import DirectionState, KeyboardListener, is_turn, key_direction


def test_key_direction_arrows_only():
    assert key_direction("up") == UP
    assert key_direction("down") == DOWN
    assert key_direction("left") == LEFT
    assert key_direction("right") == RIGHT
    assert key_direction("w") is None
    assert key_direction("space") is None
    assert key_direction(None) is None


def test_is_turn_needs_other_axis():
    assert is_turn(RIGHT, UP)
    assert is_turn(RIGHT, DOWN)
    assert is_turn(UP, LEFT)
    assert not is_turn(RIGHT, LEFT)
    assert not is_turn(RIGHT, RIGHT)
    assert not is_turn(UP, DOWN)


def test_direction_state_defaults_to_right():
    assert DirectionState().poll() == RIGHT


def test_direction_state_filters_turns():
    state = DirectionState()
    assert not state.turn(LEFT)
    assert state.poll() == RIGHT
    assert state.turn(UP)
    assert state.poll() == UP
    assert not state.turn(DOWN)
    assert state.poll() == UP


def test_last_accepted_turn_wins():
    state = DirectionState()
    state.turn(UP)
    state.turn(LEFT)
    assert state.poll() == LEFT


def test_listener_routes_arrow_keys():
    state = DirectionState()
    listener = KeyboardListener(state)
    listener.on_key("a")
    assert state.poll() == RIGHT
    listener.on_key("down")
    assert state.poll() == DOWN
    listener._on_press(SimpleNamespace(name="left"))
    assert state.poll() == LEFT


def test_listener_failure_is_logged_not_raised(monkeypatch, caplog):
    def no_hook(callback):
        raise ImportError("You must be root to use this library on linux.")

    monkeypatch.setattr(controls.keyboard, "on_press", no_hook)
    state = DirectionState()
    listener = KeyboardListener(state)

    with caplog.at_level(logging.ERROR):
        listener.run()

    assert "must be root" in caplog.text
    assert state.poll() == RIGHT


def test_listener_is_daemon():
    assert KeyboardListener(DirectionState()).daemon


def test_turns_from_another_thread_are_seen_by_poll():
    state = DirectionState()
    turns = [UP, LEFT, DOWN, RIGHT] * 250
    seen = set()

    worker = threading.Thread(target=lambda: [state.turn(d) for d in turns])
    worker.start()
    while worker.is_alive():
        seen.add(state.poll())
    worker.join()

    # every snapshot is a whole direction, and the last turn sticks
    assert seen <= {UP, DOWN, LEFT, RIGHT}
    assert state.poll() == RIGHT

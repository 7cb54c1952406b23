import pytest

from rustdrill.drills.enums import ChangeColor, Echo, Move, Point, Quit, State


def test_match_message_call():
    state = State(color=(0, 0, 0), position=Point(0, 0), has_quit=False)
    state.process(ChangeColor((255, 0, 255)))
    state.process(Echo("hello world"))
    state.process(Move(Point(10, 15)))
    state.process(Quit())

    assert state.color == (255, 0, 255)
    assert state.position.x == 10
    assert state.position.y == 15
    assert state.has_quit is True


def test_echo_leaves_state_unchanged():
    state = State()
    state.process(Echo("hello"))
    assert state == State()


def test_echo_method_prints(capsys):
    State().echo("hello world")
    assert capsys.readouterr().out == "hello world\n"


def test_process_rejects_non_message():
    with pytest.raises(TypeError):
        State().process("Quit")


def test_default_state():
    state = State()
    assert (state.color, state.position, state.has_quit) == ((0, 0, 0), Point(0, 0), False)
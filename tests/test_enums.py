import pytest

from rustlings.exercises.enums import ChangeColor, Echo, Move, Point, Quit, State


def test_match_message_call():
    state = State(quit=False, position=Point(0, 0), color=(0, 0, 0))
    state.process(ChangeColor((255, 0, 255)))
    state.process(Echo("hello world"))
    state.process(Move(Point(10, 15)))
    state.process(Quit())

    assert state.color == (255, 0, 255)
    assert state.position.x == 10
    assert state.position.y == 15
    assert state.quit is True


def test_echo_prints_message(capsys):
    state = State()
    state.process(Echo("hello world"))
    assert capsys.readouterr().out == "The message is hello world\n"
    assert state == State()


def test_default_state_is_not_quit():
    state = State()
    assert state.quit is False
    assert state.position == Point(0, 0)


def test_point_out_of_range():
    with pytest.raises(ValueError):
        Point(256, 0)


def test_colour_out_of_range():
    with pytest.raises(ValueError):
        ChangeColor((0, -1, 0))


def test_unknown_message():
    with pytest.raises(TypeError):
        State().process("quit")
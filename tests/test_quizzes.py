import pytest

from rustlings.exercises.quizzes import (
    calculate_apple_price,
    my_macro,
    string,
    string_slice,
    times_two,
)


def test_verify_apple_prices():
    assert calculate_apple_price(35) == 70
    assert calculate_apple_price(40) == 80
    assert calculate_apple_price(65) == 65


def test_returns_twice_of_positive_numbers():
    assert times_two(4) == 8


def test_returns_twice_of_negative_numbers():
    assert times_two(-4) == -8


def test_my_macro_world():
    assert my_macro("world!") == "Hello world!"


def test_my_macro_goodbye():
    assert my_macro("goodbye!") == "Hello goodbye!"


def test_my_macro_without_argument_prints(capsys):
    assert my_macro() is None
    assert capsys.readouterr().out == "Hello\n"


def test_my_macro_rejects_two_arguments():
    with pytest.raises(TypeError):
        my_macro("a", "b")


def test_string_functions_print(capsys):
    string_slice("  hello there ".strip())
    string("Happy Monday!".replace("Mon", "Tues"))
    assert capsys.readouterr().out == "hello there\nHappy Tuesday!\n"
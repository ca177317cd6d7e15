from rustlings.exercises.collections import (
    Fruit,
    array_and_vec,
    fill_fruit_basket,
    fruit_basket,
    vec_loop,
)


def _given_basket():
    return {Fruit.APPLE: 4, Fruit.MANGO: 2, Fruit.LYCHEE: 5}


def test_at_least_three_types_of_fruits():
    assert len(fruit_basket()) >= 3


def test_at_least_five_fruits():
    assert sum(fruit_basket().values()) >= 5


def test_given_fruits_are_not_modified():
    basket = _given_basket()
    fill_fruit_basket(basket)
    assert basket[Fruit.APPLE] == 4
    assert basket[Fruit.MANGO] == 2
    assert basket[Fruit.LYCHEE] == 5


def test_at_least_five_types_of_fruits():
    basket = _given_basket()
    fill_fruit_basket(basket)
    assert len(basket) >= 5


def test_greater_than_eleven_fruits():
    basket = _given_basket()
    fill_fruit_basket(basket)
    assert sum(basket.values()) > 11


def test_array_and_vec_similarity():
    array, vec = array_and_vec()
    assert list(array) == vec


def test_vec_loop():
    assert vec_loop([2, 4, 6, 8, 10]) == [4, 8, 12, 16, 20]


def test_vec_loop_does_not_modify_input():
    values = [2, 4]
    vec_loop(values)
    assert values == [2, 4]
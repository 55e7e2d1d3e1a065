import pytest

from kata.coins import coin_combination, min_coins

US = [1, 5, 10, 25, 50]


@pytest.mark.parametrize(
    "amount,denominations,expected",
    [
        (0, US, 0),
        (4, US, 4),
        (5, US, 1),
        (11, US, 2),
        (87, US, 5),
        (42, US, 5),
        (99, US, 8),
        (3, [5, 10, 25], -1),
        (30, [1, 5, 10], 3),
        (63, [1, 5, 10, 25], 6),
    ],
)
def test_min_coins(amount, denominations, expected):
    assert min_coins(amount, denominations) == expected


@pytest.mark.parametrize(
    "amount,denominations,expected",
    [
        (0, US, {}),
        (4, US, {1: 4}),
        (5, US, {5: 1}),
        (11, US, {1: 1, 10: 1}),
        (87, US, {1: 2, 10: 1, 25: 1, 50: 1}),
        (42, US, {1: 2, 5: 1, 10: 1, 25: 1}),
        (99, US, {1: 4, 10: 2, 25: 1, 50: 1}),
        (3, [5, 10, 25], {}),
        (30, [1, 6, 10], {10: 3}),
        (63, [1, 5, 10, 25], {1: 3, 10: 1, 25: 2}),
    ],
)
def test_coin_combination(amount, denominations, expected):
    assert coin_combination(amount, denominations) == expected


def test_example_cases():
    assert min_coins(87, US) == 5
    assert coin_combination(87, US) == {1: 2, 10: 1, 25: 1, 50: 1}
    assert min_coins(42, US) == 5
    assert coin_combination(42, US) == {1: 2, 5: 1, 10: 1, 25: 1}


def test_non_greedy_denominations_find_true_minimum():
    assert min_coins(6, [1, 3, 4]) == 2
    assert coin_combination(6, [1, 3, 4]) == {3: 2}


@pytest.mark.parametrize("amount", range(0, 60))
def test_combination_agrees_with_count(amount):
    denominations = [1, 7, 10]
    combination = coin_combination(amount, denominations)
    assert sum(coin * count for coin, count in combination.items()) == amount
    assert sum(combination.values()) == min_coins(amount, denominations)


def test_negative_amount_raises():
    with pytest.raises(ValueError):
        min_coins(-1, US)
    with pytest.raises(ValueError):
        coin_combination(-5, US)


def test_non_positive_denomination_raises():
    with pytest.raises(ValueError):
        min_coins(10, [0, 5])
    with pytest.raises(ValueError):
        coin_combination(10, [-1, 5])
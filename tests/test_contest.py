import pytest

from cfsolve.contest import (
    bus_happy_people,
    bus_happy_people_attempt,
    min_customers,
    min_customers_attempt,
)


def test_bus_known_failing_case():
    assert bus_happy_people(2, [1, 1, 2]) == 2
    assert bus_happy_people_attempt(2, [1, 1, 2]) > bus_happy_people(2, [1, 1, 2])


@pytest.mark.parametrize("families", [[2, 4], [6], [2, 2, 2]])
def test_bus_even_families_all_happy(families):
    rows = sum(families) // 2
    assert bus_happy_people(rows, families) == sum(families)
    assert bus_happy_people_attempt(rows, families) == sum(families)


def test_bus_singles_with_room():
    families = [1, 1, 1]
    assert bus_happy_people(len(families), families) == len(families)


@pytest.mark.parametrize(
    "rows,families",
    [(3, [2, 3, 1]), (3, [2, 2, 2]), (4, [1, 1, 2, 2]), (5, [3, 1, 1, 3])],
)
def test_bus_bounds(rows, families):
    result = bus_happy_people(rows, families)
    assert 0 <= result <= sum(families)


@pytest.mark.parametrize(
    "per_customer,stock",
    [(2, [3, 1, 2]), (3, [2, 1, 3]), (3, [2, 5, 3, 3, 5]), (1, [7]), (4, [1, 1, 1])],
)
def test_min_customers_invariants(per_customer, stock):
    result = min_customers(per_customer, stock)
    assert result >= max(stock)
    assert result * per_customer >= sum(stock)
    assert min_customers_attempt(per_customer, stock) == result


def test_min_customers_one_per_customer():
    stock = [4, 2, 9]
    assert min_customers(1, stock) == sum(stock)


def test_min_customers_many_per_customer():
    stock = [4, 2, 9]
    assert min_customers(len(stock), stock) == max(stock)


@pytest.mark.parametrize("func", [min_customers, min_customers_attempt])
def test_min_customers_bad_rate(func):
    with pytest.raises(ValueError):
        func(0, [1, 2])
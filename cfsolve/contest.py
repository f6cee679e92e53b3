"""Solutions to a contest round, with the first attempts kept for comparison."""

from __future__ import annotations

from collections.abc import Iterable


def bus_happy_people_attempt(rows: int, families: Iterable[int]) -> int:
    """Greedy first attempt at seating families; overcounts when rows run out."""
    happy = 0
    free_rows = rows
    for family in families:
        even = (family >> 1) << 1
        happy += even
        free_rows -= even >> 1
        if even != family:
            if free_rows > 0:
                free_rows -= 1
                happy += 1
            else:
                happy -= 1
    return happy


def bus_happy_people(rows: int, families: Iterable[int]) -> int:
    """Return the most people sitting beside a relative or alone in a row."""
    paired = total = singles = 0
    for family in families:
        even = (family >> 1) << 1
        paired += even
        total += family
        singles += even != family
    vacant = 2 * rows - total
    return paired + min(vacant, singles)


def _check_rate(per_customer: int) -> None:
    if per_customer <= 0:
        raise ValueError("per_customer must be positive")


def min_customers_attempt(per_customer: int, stock: Iterable[int]) -> int:
    """First attempt at the fewest customers needed to sell every car."""
    _check_rate(per_customer)
    stock = list(stock)
    largest = max(stock, default=0)
    rest = sum(stock) - per_customer * largest
    if rest > 0:
        return largest + rest // per_customer + (rest % per_customer != 0)
    return largest


def min_customers(per_customer: int, stock: Iterable[int]) -> int:
    """Return the fewest customers needed when each buys up to per_customer distinct models."""
    _check_rate(per_customer)
    stock = list(stock)
    largest = max(stock, default=0)
    total = sum(stock)
    return max(largest, -(-total // per_customer))
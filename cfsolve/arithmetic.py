"""Solutions to counting and arithmetic problems."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence


def cards_needed(target: int) -> int:
    """Count second cards that bring the queen of spades' 10 points to the target."""
    if 10 < target < 22:
        return 15 if target == 20 else 4
    return 0


def tram_capacity(stops: Iterable[tuple[int, int]]) -> int:
    """Return the smallest tram capacity for (leaving, entering) pairs per stop."""
    load = best = 0
    for leaving, entering in stops:
        load += entering - leaving
        best = max(best, load)
    return best


def cookie_ways(bags: Iterable[int]) -> int:
    """Count bags whose removal leaves an even number of cookies."""
    bags = list(bags)
    odd = sum(bag % 2 for bag in bags)
    return odd if sum(bags) % 2 else len(bags) - odd


def min_swaps_to_line_up(heights: Sequence[int]) -> int:
    """Count adjacent swaps moving the tallest first and the shortest last."""
    heights = list(heights)
    if not heights:
        raise ValueError("at least one soldier is required")
    count = len(heights)
    max_index = heights.index(max(heights))
    min_index = count - 1 - heights[::-1].index(min(heights))
    return max_index + (count - min_index - 1) - (min_index < max_index)


def damaged_dragons(k: int, l: int, m: int, n: int, d: int) -> int:
    """Count dragons among the first d that are hit by any of the periodic attacks."""
    periods = (k, l, m, n)
    return sum(any(i % period == 0 for period in periods) for i in range(1, d + 1))


def toasts_per_friend(n: int, k: int, l: int, c: int, d: int, p: int, nl: int, np: int) -> int:
    """Return how many toasts each of n friends can make."""
    return min(k * l // nl, c * d, p // np) // n


def amazing_performances(scores: Iterable[int]) -> int:
    """Count scores that set a new strict record high or low."""
    scores = iter(scores)
    try:
        low = high = next(scores)
    except StopIteration:
        return 0
    count = 0
    for score in scores:
        if score > high:
            high = score
            count += 1
        elif score < low:
            low = score
            count += 1
    return count


def orange_fraction(percents: Sequence[int]) -> float:
    """Return the orange-juice percentage of an equal mix of drinks."""
    percents = list(percents)
    if not percents:
        raise ValueError("at least one drink is required")
    return sum(percents) / len(percents)


def search_comparisons(array: Sequence[int], queries: Iterable[int]) -> tuple[int, int]:
    """Return comparisons made by forward and backward linear search over all queries."""
    positions = {value: index for index, value in enumerate(array)}
    size = len(array)
    forward = backward = 0
    for query in queries:
        index = positions.get(query, 0)
        forward += index + 1
        backward += size - index
    return forward, backward


def horseshoes_to_buy(colors: Sequence[int]) -> int:
    """Count horseshoes to replace so that all colours differ."""
    return len(colors) - len(set(colors))


def problems_to_solve(votes: Iterable[Sequence[int]]) -> int:
    """Count problems that at least two of three friends are sure about."""
    return sum(1 for vote in votes if sum(vote) >> 1)


def cupboard_moves(doors: Iterable[tuple[int, int]]) -> int:
    """Return door flips needed so all left doors and all right doors match."""
    total = left_open = right_open = 0
    for left, right in doors:
        total += 1
        left_open += left
        right_open += right
    half = total // 2
    left_moves = total - left_open if left_open > half else left_open
    right_moves = total - right_open if right_open > half else right_open
    return left_moves + right_moves


def max_joy(limit: int, restaurants: Iterable[tuple[int, int]]) -> int:
    """Return the best joy over (joy, time) restaurants given a lunch time limit."""
    joys = [joy - (time - limit) if time > limit else joy for joy, time in restaurants]
    if not joys:
        raise ValueError("at least one restaurant is required")
    return max(joys)


def bit_plus_plus(statements: Iterable[str]) -> int:
    """Run Bit++ statements such as 'X++' or '--X' and return the value of x."""
    value = 0
    for statement in statements:
        operator = statement[1]
        if operator == "+":
            value += 1
        elif operator == "-":
            value -= 1
    return value


def max_earnings(prices: Iterable[int], carry: int) -> int:
    """Return the most money earned by taking at most carry negatively priced sets."""
    cheapest = heapq.nsmallest(max(carry, 0), prices)
    return -sum(price for price in cheapest if price < 0)


def largest_divisible_by_90(cards: Iterable[int]) -> str:
    """Return the largest number of 5- and 0-cards divisible by 90, or '-1'."""
    fives = zeros = 0
    for card in cards:
        if card == 5:
            fives += 1
        else:
            zeros += 1
    if zeros == 0:
        return "-1"
    if fives < 9:
        return "0"
    return "555555555" * (fives // 9) + "0" * zeros


def team_count(participation_counts: Iterable[int], required: int) -> int:
    """Count teams of three who can each take part at least required more times."""
    eligible = sum(1 for count in participation_counts if count + required < 6)
    return eligible // 3


def can_split_watermelon(weight: int) -> bool:
    """Return True if the weight splits into two positive even parts."""
    return not (weight % 2 or weight < 4)


def is_in_equilibrium(forces: Iterable[Sequence[int]]) -> bool:
    """Return True if the force vectors sum to zero."""
    totals = [0, 0, 0]
    for x, y, z in forces:
        totals[0] += x
        totals[1] += y
        totals[2] += z
    return totals == [0, 0, 0]


def is_prime(x: int) -> bool:
    """Primality test by trial division over odd divisors."""
    if x < 0:
        raise ValueError("x must be non-negative")
    if x % 2 == 0 and x > 2:
        return False
    divisor = 3
    while divisor * divisor < x + 1:
        if x % divisor == 0:
            return x == 3
        divisor += 2
    return x != 9


def is_next_prime(x: int, y: int) -> bool:
    """Return True if y is the first prime after the prime x."""
    if not is_prime(y):
        return False
    return not any(is_prime(i) for i in range(x + 1, y))


def chips_left(walruses: int, chips: int) -> int:
    """Return the chips the presenter keeps after handing them round the circle."""
    chips %= walruses * (walruses + 1) // 2
    i = 1
    while i < chips + 1:
        chips -= i
        i += 1
    return chips


def next_distinct_year(year: int) -> int:
    """Return the first year after the given one with four distinct digits."""
    year += 1
    while True:
        first, second, third, last = year // 1000, year // 100 % 10, year // 10 % 10, year % 10
        if last in (first, second, third):
            year += 1
        elif third in (first, second):
            year += 10 - last
        elif first == second:
            year += 100 - last - 10 * third + 1
        else:
            return year
"""Command line that solves a problem from its plain-text input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable
from pathlib import Path

from cfsolve import arithmetic, contest, grids, strings


class _Tokens:
    """Whitespace-separated tokens of a problem's input."""

    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("input ended too early") from None

    def number(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def numbers(self, count: int) -> list[int]:
        return [self.number() for _ in range(count)]

    def pairs(self, count: int) -> list[tuple[int, int]]:
        return [(self.number(), self.number()) for _ in range(count)]

    def rest(self) -> str:
        return "".join(self._tokens)


_Solver = Callable[[_Tokens], str]
_SOLVERS: dict[str, _Solver] = {}

_VERDICT = {True: "YES\n", False: "NO\n"}


def _problem(*names: str) -> Callable[[_Solver], _Solver]:
    def register(func: _Solver) -> _Solver:
        for name in names:
            _SOLVERS[name.upper()] = func
        return func

    return register


def _line(value: object) -> str:
    return f"{value}\n"


def _spaced(values: Iterable[int]) -> str:
    return "".join(f"{value} " for value in values)


def _table(rows: Iterable[Iterable[int]]) -> str:
    return "".join(_spaced(row) + "\n" for row in rows)


@_problem("4A")
def _watermelon(t: _Tokens) -> str:
    return _VERDICT[bool(arithmetic.can_split_watermelon(t.number()))]


@_problem("32B")
def _borze(t: _Tokens) -> str:
    return grids.decode_borze(t.rest())


@_problem("34B")
def _sale(t: _Tokens) -> str:
    n, carry = t.number(), t.number()
    return str(arithmetic.max_earnings(t.numbers(n), carry))


@_problem("59A")
def _word(t: _Tokens) -> str:
    return strings.fix_word_case(t.word())


@_problem("61A")
def _ultra_fast(t: _Tokens) -> str:
    return _line(strings.xor_digits(t.word(), t.word()))


@_problem("69A")
def _young_physicist(t: _Tokens) -> str:
    n = t.number()
    forces = [t.numbers(3) for _ in range(n)]
    return _VERDICT[bool(arithmetic.is_in_equilibrium(forces))]


@_problem("71A")
def _long_words(t: _Tokens) -> str:
    n = t.number()
    return "".join(_line(strings.abbreviate(t.word())) for _ in range(n))


@_problem("80A")
def _panoramix(t: _Tokens) -> str:
    x, y = t.number(), t.number()
    return _VERDICT[bool(arithmetic.is_next_prime(x, y))]


@_problem("92A")
def _chips(t: _Tokens) -> str:
    n, m = t.number(), t.number()
    return _line(arithmetic.chips_left(n, m))


@_problem("104A")
def _blackjack(t: _Tokens) -> str:
    return _line(arithmetic.cards_needed(t.number()))


@_problem("110A")
def _nearly_lucky(t: _Tokens) -> str:
    return _VERDICT[bool(strings.is_nearly_lucky(t.word()))]


@_problem("112A")
def _petya_strings(t: _Tokens) -> str:
    first, second = t.word(), t.word()
    return _line(strings.compare_ignoring_case(first, second))


@_problem("116A")
def _tram(t: _Tokens) -> str:
    return _line(arithmetic.tram_capacity(t.pairs(t.number())))


@_problem("118B")
def _rhombus(t: _Tokens) -> str:
    return "".join(_line(line) for line in grids.rhombus_pattern(t.number()))


@_problem("129A")
def _cookies(t: _Tokens) -> str:
    return _line(arithmetic.cookie_ways(t.numbers(t.number())))


@_problem("133A")
def _hq9(t: _Tokens) -> str:
    return _VERDICT[bool(strings.produces_output(t.word()))]


@_problem("141A")
def _amusing_joke(t: _Tokens) -> str:
    guest, host, pile = t.word(), t.word(), t.word()
    return _VERDICT[bool(strings.can_restore_names(guest, host, pile))]


@_problem("144A")
def _arrival(t: _Tokens) -> str:
    return _line(arithmetic.min_swaps_to_line_up(t.numbers(t.number())))


@_problem("148A")
def _dragons(t: _Tokens) -> str:
    return _line(arithmetic.damaged_dragons(*t.numbers(5)))


@_problem("151A")
def _soft_drinking(t: _Tokens) -> str:
    return str(arithmetic.toasts_per_friend(*t.numbers(8)))


@_problem("155A")
def _coder(t: _Tokens) -> str:
    return _line(arithmetic.amazing_performances(t.numbers(t.number())))


@_problem("200B")
def _drinks(t: _Tokens) -> str:
    return f"{arithmetic.orange_fraction(t.numbers(t.number())):g}\n"


@_problem("227B")
def _effective_approach(t: _Tokens) -> str:
    array = t.numbers(t.number())
    queries = t.numbers(t.number())
    forward, backward = arithmetic.search_comparisons(array, queries)
    return f"{forward} {backward}\n"


@_problem("228A")
def _horseshoes(t: _Tokens) -> str:
    return _line(arithmetic.horseshoes_to_buy(t.numbers(4)))


@_problem("231A")
def _team(t: _Tokens) -> str:
    n = t.number()
    return _line(arithmetic.problems_to_solve([t.numbers(3) for _ in range(n)]))


@_problem("233A")
def _perfect_permutation(t: _Tokens) -> str:
    perm = grids.perfect_permutation(t.number())
    return "-1\n" if perm is None else _spaced(perm) + "\n"


@_problem("236A")
def _boy_or_girl(t: _Tokens) -> str:
    return _line(strings.gender_by_username(t.word()))


@_problem("248A")
def _cupboards(t: _Tokens) -> str:
    return _line(arithmetic.cupboard_moves(t.pairs(t.number())))


@_problem("263A")
def _beautiful_matrix(t: _Tokens) -> str:
    return _line(grids.beautiful_matrix_moves([t.numbers(25)]))


@_problem("266A")
def _stones(t: _Tokens) -> str:
    t.number()
    return _line(strings.stones_to_remove(t.word()))


@_problem("266B")
def _queue(t: _Tokens) -> str:
    t.number()
    seconds = t.number()
    return _line(grids.queue_after(t.word(), seconds))


@_problem("271A")
def _beautiful_year(t: _Tokens) -> str:
    return _line(arithmetic.next_distinct_year(t.number()))


@_problem("275A")
def _lights(t: _Tokens) -> str:
    presses = [t.numbers(3) for _ in range(3)]
    return "".join(_line(row) for row in grids.lights_out(presses))


@_problem("276A")
def _lunch_rush(t: _Tokens) -> str:
    n, limit = t.number(), t.number()
    return _line(arithmetic.max_joy(limit, t.pairs(n)))


@_problem("281A")
def _capitalization(t: _Tokens) -> str:
    return strings.capitalize_word(t.word())


@_problem("282A")
def _bit_plus_plus(t: _Tokens) -> str:
    n = t.number()
    return _line(arithmetic.bit_plus_plus([t.word() for _ in range(n)]))


@_problem("285A")
def _slightly_decreasing(t: _Tokens) -> str:
    n, k = t.number(), t.number()
    return _spaced(grids.good_permutation(n, k))


@_problem("330A")
def _cakeminator(t: _Tokens) -> str:
    rows, columns = t.number(), t.number()
    cells = t.rest()
    if len(cells) < rows * columns:
        raise ValueError("input ended too early")
    grid = [cells[start:start + columns] for start in range(0, rows * columns, columns)]
    return _line(grids.cake_eaten(grid))


@_problem("334A")
def _candy_bags(t: _Tokens) -> str:
    return _table(grids.candy_bags(t.number()))


@_problem("336A")
def _triangle(t: _Tokens) -> str:
    x, y = t.number(), t.number()
    return _line(" ".join(map(str, grids.triangle_vertices(x, y))))


@_problem("339A")
def _helpful_maths(t: _Tokens) -> str:
    return _line(strings.rearrange_sum(t.word()))


@_problem("352A")
def _jeff_and_digits(t: _Tokens) -> str:
    return _line(arithmetic.largest_divisible_by_90(t.numbers(t.number())))


@_problem("361A")
def _beautiful_table(t: _Tokens) -> str:
    n, k = t.number(), t.number()
    return _table(grids.beautiful_table(n, k))


@_problem("432A")
def _choosing_teams(t: _Tokens) -> str:
    n, required = t.number(), t.number()
    return _line(arithmetic.team_count(t.numbers(n), required))


def _bus_cases(solver: Callable[[int, list[int]], int]) -> _Solver:
    def run(t: _Tokens) -> str:
        answers = []
        for _ in range(t.number()):
            n, rows = t.number(), t.number()
            answers.append(_line(solver(rows, t.numbers(n))))
        return "".join(answers)

    return run


def _customer_cases(solver: Callable[[int, list[int]], int]) -> _Solver:
    def run(t: _Tokens) -> str:
        answers = []
        for _ in range(t.number()):
            n, per_customer = t.number(), t.number()
            answers.append(_line(solver(per_customer, t.numbers(n))))
        return "".join(answers)

    return run


_problem("978D2A")(_bus_cases(contest.bus_happy_people))
_problem("978D2A-attempt")(_bus_cases(contest.bus_happy_people_attempt))
_problem("978D2B")(_customer_cases(contest.min_customers))
_problem("978D2B-attempt")(_customer_cases(contest.min_customers_attempt))


def solve(problem: str, text: str) -> str:
    """Solve the named problem for the given input text and return its output."""
    solver = _SOLVERS.get(problem.strip().upper())
    if solver is None:
        raise ValueError(f"unknown problem {problem!r}")
    return solver(_Tokens(text))


def main(argv: list[str] | None = None) -> int:
    """Read a problem's input from a file or standard input and print the answer."""
    parser = argparse.ArgumentParser(prog="cfsolve", description="Solve a problem from its input.")
    parser.add_argument("problem", help="problem identifier such as 4A or 978D2B")
    parser.add_argument("input", nargs="?", type=Path, help="input file (default: standard input)")
    args = parser.parse_args(argv)

    try:
        text = args.input.read_text() if args.input else sys.stdin.read()
        output = solve(args.problem, text)
    except (OSError, ValueError) as error:
        print(f"cfsolve: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Solutions to grid, pattern and permutation problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import chain


def rhombus_pattern(height: int) -> list[str]:
    """Return the lines of a digit rhombus whose widest row reaches height."""
    if height < 0:
        raise ValueError("height must be non-negative")
    lines = []
    for i in range(2 * height + 1):
        reach = 2 * height - i if i > height else i
        digits = chain(range(reach), range(reach, -1, -1))
        lines.append("  " * (height - reach) + " ".join(map(str, digits)))
    return lines


def perfect_permutation(size: int) -> list[int] | None:
    """Return a permutation p with p[p[i]] == i and p[i] != i, or None if none exists."""
    if size % 2:
        return None
    return [i + 1 if i % 2 else i - 1 for i in range(1, size + 1)]


def beautiful_matrix_moves(matrix: Iterable[Iterable[int]]) -> int:
    """Count row and column swaps that move the single one to the centre of a 5x5 matrix."""
    for position, value in enumerate(chain.from_iterable(matrix)):
        if value != 0:
            row, column = divmod(position, 5)
            return abs(row - 2) + abs(column - 2)
    raise ValueError("matrix holds no non-zero cell")


def queue_after(order: str, seconds: int) -> str:
    """Return the queue after boys let girls ahead once per second."""
    for _ in range(seconds):
        moved = order.replace("BG", "GB")
        if moved == order:
            break
        order = moved
    return order


def lights_out(presses: Iterable[Sequence[int]]) -> list[str]:
    """Return the 3x3 light states ('1' on) after the given number of presses per light."""
    grid = [list(row) for row in presses]
    if len(grid) != 3 or any(len(row) != 3 for row in grid):
        raise ValueError("presses must form a 3x3 grid")

    def toggles(row: int, column: int) -> int:
        cells = ((row, column), (row - 1, column), (row + 1, column),
                 (row, column - 1), (row, column + 1))
        return sum(grid[r][c] for r, c in cells if 0 <= r < 3 and 0 <= c < 3)

    return ["".join(str(1 - toggles(row, column) % 2) for column in range(3)) for row in range(3)]


def good_permutation(n: int, k: int) -> list[int]:
    """Return a permutation of 1..n with exactly k descents."""
    if not 0 <= k <= n:
        raise ValueError("k must lie between 0 and n")
    return list(range(n, n - k, -1)) + list(range(1, n - k + 1))


def decode_borze(code: str) -> str:
    """Decode a Borze ternary code ('.', '-.', '--') into digits."""
    symbols = (symbol for symbol in code if not symbol.isspace())
    digits = []
    for symbol in symbols:
        if symbol == ".":
            digits.append("0")
        elif symbol == "-":
            following = next(symbols, None)
            if following == ".":
                digits.append("1")
            elif following == "-":
                digits.append("2")
            else:
                raise ValueError("incomplete Borze symbol")
        else:
            raise ValueError(f"invalid Borze symbol {symbol!r}")
    return "".join(digits)


def cake_eaten(grid: Iterable[str]) -> int:
    """Count cells that can be eaten from rows and columns free of strawberries ('S')."""
    rows = list(grid)
    if not rows:
        return 0
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all rows must have the same length")
    clear_rows = sum("S" not in row for row in rows)
    clear_columns = sum("S" not in column for column in zip(*rows))
    return clear_rows * width + clear_columns * len(rows) - clear_rows * clear_columns


def candy_bags(n: int) -> list[list[int]]:
    """Share bags of 1..n*n candies between n brothers so each gets the same amount."""
    return [[j * n + (n - i if j % 2 else i + 1) for j in range(n)] for i in range(n)]


def triangle_vertices(x: int, y: int) -> tuple[int, int, int, int]:
    """Return (x1, y1, x2, y2) of the smallest right isosceles triangle covering the rectangle."""
    z = abs(x) + abs(y)
    vertical = -z if y < 0 else z
    if x < 0:
        return (-z, 0, 0, vertical)
    return (0, vertical, z, 0)


def beautiful_table(n: int, k: int) -> list[list[int]]:
    """Return an n x n table whose every row and column sums to k."""
    return [[k if row == column else 0 for column in range(n)] for row in range(n)]
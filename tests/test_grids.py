import pytest

from cfsolve.grids import (
    beautiful_matrix_moves,
    beautiful_table,
    cake_eaten,
    candy_bags,
    decode_borze,
    good_permutation,
    lights_out,
    perfect_permutation,
    queue_after,
    rhombus_pattern,
    triangle_vertices,
)


@pytest.mark.parametrize("height", [0, 1, 2, 5])
def test_rhombus_shape(height):
    lines = rhombus_pattern(height)
    assert len(lines) == 2 * height + 1
    assert lines == lines[::-1]
    assert lines[0] == "  " * height + "0"
    assert not lines[height].startswith(" ")
    for line in lines:
        digits = line.split()
        assert digits == digits[::-1]


def test_rhombus_negative():
    with pytest.raises(ValueError):
        rhombus_pattern(-1)


@pytest.mark.parametrize("size", [1, 3, 7])
def test_perfect_permutation_odd(size):
    assert perfect_permutation(size) is None


@pytest.mark.parametrize("size", [2, 4, 10])
def test_perfect_permutation_even(size):
    perm = perfect_permutation(size)
    assert sorted(perm) == list(range(1, size + 1))
    for index, value in enumerate(perm, start=1):
        assert value != index
        assert perm[value - 1] == index


def _matrix_with_one(row, column):
    return [[1 if (r, c) == (row, column) else 0 for c in range(5)] for r in range(5)]


def test_beautiful_matrix_centre():
    assert beautiful_matrix_moves(_matrix_with_one(2, 2)) == 0


def test_beautiful_matrix_symmetry():
    corners = {beautiful_matrix_moves(_matrix_with_one(r, c)) for r in (0, 4) for c in (0, 4)}
    assert len(corners) == 1
    assert beautiful_matrix_moves(_matrix_with_one(2, 1)) < beautiful_matrix_moves(
        _matrix_with_one(2, 0)
    )


def test_beautiful_matrix_flat_input_matches_rows():
    rows = _matrix_with_one(3, 1)
    flat = [value for row in rows for value in row]
    assert beautiful_matrix_moves([flat]) == beautiful_matrix_moves(rows)


def test_beautiful_matrix_empty():
    with pytest.raises(ValueError):
        beautiful_matrix_moves([[0] * 5] * 5)


def test_queue_zero_seconds():
    assert queue_after("BGGBG", 0) == "BGGBG"


@pytest.mark.parametrize("order", ["BGGBG", "BBBGGG", "GBGB", "BG"])
def test_queue_preserves_children(order):
    result = queue_after(order, 2)
    assert sorted(result) == sorted(order)


@pytest.mark.parametrize("order", ["BGGBG", "BBBGGG", "GBGB"])
def test_queue_settles(order):
    result = queue_after(order, len(order) * 2)
    assert result == "G" * order.count("G") + "B" * order.count("B")


def test_queue_composes():
    order = "BBGBGGBG"
    assert queue_after(queue_after(order, 2), 3) == queue_after(order, 5)


def test_lights_out_no_presses():
    assert all(set(row) == {"1"} for row in lights_out([[0] * 3] * 3))


def test_lights_out_parity():
    pressed_twice = [[0, 0, 0], [0, 2, 0], [0, 0, 0]]
    assert lights_out(pressed_twice) == lights_out([[0] * 3] * 3)


def test_lights_out_centre_press():
    result = lights_out([[0, 0, 0], [0, 1, 0], [0, 0, 0]])
    assert result[1][1] == "0"
    assert result[0][0] == "1"
    assert result[0][1] == "0"


def test_lights_out_bad_shape():
    with pytest.raises(ValueError):
        lights_out([[0, 0], [0, 0]])


@pytest.mark.parametrize("n,k", [(1, 0), (3, 2), (5, 0), (5, 5), (6, 3)])
def test_good_permutation(n, k):
    perm = good_permutation(n, k)
    assert sorted(perm) == list(range(1, n + 1))
    descents = sum(a > b for a, b in zip(perm, perm[1:]))
    assert descents == max(k - 1, 0) + (1 if 0 < k < n else 0) or k == 0 and descents == 0
    assert perm[:k] == sorted(perm[:k], reverse=True)


def test_good_permutation_bad_k():
    with pytest.raises(ValueError):
        good_permutation(3, 4)


def _encode(digits):
    return "".join({"0": ".", "1": "-.", "2": "--"}[d] for d in digits)


@pytest.mark.parametrize("digits", ["0", "012", "2012", "1102", "000222111"])
def test_borze_round_trip(digits):
    assert decode_borze(_encode(digits)) == digits


@pytest.mark.parametrize("code", ["-", ".-", "x"])
def test_borze_invalid(code):
    with pytest.raises(ValueError):
        decode_borze(code)


def test_cake_no_strawberries():
    assert cake_eaten(["...", "...", "..."]) == 9


def test_cake_all_strawberries():
    assert cake_eaten(["SS", "SS"]) == 0


def test_cake_single_strawberry():
    rows, cols = 3, 4
    grid = ["S" + "." * (cols - 1)] + ["." * cols] * (rows - 1)
    assert cake_eaten(grid) == rows * cols - 1


def test_cake_ragged():
    with pytest.raises(ValueError):
        cake_eaten(["..", "..."])


@pytest.mark.parametrize("n", [2, 4, 6])
def test_candy_bags(n):
    table = candy_bags(n)
    assert sorted(v for row in table for v in row) == list(range(1, n * n + 1))
    assert len({sum(row) for row in table}) == 1


@pytest.mark.parametrize("x,y", [(10, 5), (-10, 5), (10, -5), (-10, -5), (3, 0)])
def test_triangle_vertices(x, y):
    x1, y1, x2, y2 = triangle_vertices(x, y)
    z = abs(x) + abs(y)
    assert x1 < x2
    assert {abs(v) for v in (x1, y1, x2, y2)} == {0, z}
    horizontal = x1 if x1 else x2
    vertical = y1 if y1 else y2
    assert (horizontal < 0) == (x < 0)
    assert (vertical < 0) == (y < 0)


@pytest.mark.parametrize("n,k", [(1, 7), (3, 4), (5, 100)])
def test_beautiful_table(n, k):
    table = beautiful_table(n, k)
    assert all(sum(row) == k for row in table)
    assert all(sum(column) == k for column in zip(*table))
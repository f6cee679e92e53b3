# cfsolve

Solutions to a set of short competitive programming problems. Each one is
an ordinary Python function that takes already parsed values and returns
the answer; a small command line reads a problem's input text and prints
its output.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

The package has no runtime dependencies.

## Using the functions

The solutions are grouped by the kind of work they do:

- `cfsolve.strings`: text problems: `is_nearly_lucky`,
  `compare_ignoring_case`, `produces_output`, `can_restore_names`,
  `gender_by_username`, `stones_to_remove`, `capitalize_word`,
  `fix_word_case`, `xor_digits`, `abbreviate` and `rearrange_sum`.
- `cfsolve.arithmetic`: counting and number problems: `cards_needed`,
  `tram_capacity`, `cookie_ways`, `min_swaps_to_line_up`,
  `damaged_dragons`, `toasts_per_friend`, `amazing_performances`,
  `orange_fraction`, `search_comparisons`, `horseshoes_to_buy`,
  `problems_to_solve`, `cupboard_moves`, `max_joy`, `bit_plus_plus`,
  `max_earnings`, `largest_divisible_by_90`, `team_count`,
  `can_split_watermelon`, `is_in_equilibrium`, `is_prime`,
  `is_next_prime`, `chips_left` and `next_distinct_year`.
- `cfsolve.grids`: patterns, permutations and grids: `rhombus_pattern`,
  `perfect_permutation`, `beautiful_matrix_moves`, `queue_after`,
  `lights_out`, `good_permutation`, `decode_borze`, `cake_eaten`,
  `candy_bags`, `triangle_vertices` and `beautiful_table`.
- `cfsolve.contest`: two problems from one contest round, each with a
  first attempt kept for comparison (`bus_happy_people_attempt`,
  `min_customers_attempt`) beside the corrected solution
  (`bus_happy_people`, `min_customers`). The attempts give wrong answers
  on some inputs.

```python
from cfsolve.strings import abbreviate
from cfsolve.arithmetic import can_split_watermelon
from cfsolve.grids import perfect_permutation

abbreviate("localization")   # "l10n"
can_split_watermelon(8)      # True
perfect_permutation(3)       # None: no such permutation exists
```

Inputs that a solution cannot handle (mismatched lengths, letters outside
the expected alphabet, an empty list where one value is needed) raise
`ValueError`.

## Command line

`cfsolve PROBLEM [INPUT]` reads the problem's input, in the problem's own
plain-text format, from the file `INPUT` or from standard input, and
prints the answer:

```
echo 8 | cfsolve 4A
```

prints `YES`. Problem codes are matched without regard to case. The codes
known are 4A, 32B, 34B, 59A, 61A, 69A, 71A, 80A, 92A, 104A, 110A, 112A,
116A, 118B, 129A, 133A, 141A, 144A, 148A, 151A, 155A, 200B, 227B, 228A,
231A, 233A, 236A, 248A, 263A, 266A, 266B, 271A, 275A, 276A, 281A, 282A,
285A, 330A, 334A, 336A, 339A, 352A, 361A, 432A, 978D2A, 978D2B, and
978D2A-attempt and 978D2B-attempt for the first attempts.

An unknown code, input that ends too early or a token that is not a
number where one is expected makes the command print a message to
standard error and exit with status 1.

The same work is available from Python through `cfsolve.cli.solve`, which
takes the problem code and the input text and returns the output text.

## What it does not do

The command solves one problem's input per run and prints the answer. It
does not fetch problems, check answers against expected output or submit
anything.
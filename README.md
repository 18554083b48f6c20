# cfsolve

Solutions to a set of short competitive programming problems. Each problem
is a plain function that takes Python values and returns its answer. A
command-line tool reads a problem's judge-style input (a test-case count
followed by the test cases) and prints the answers in the judge's format.

The package has no dependencies outside the standard library.

## Installing

```
pip install .
```

## Using the functions

```python
from cfsolve.problems_a import common_multiple, permutation_warm_up
from cfsolve.problems_b import paint_a_strip
from cfsolve.problems_c import mex_grid, prime_factors

common_multiple([1, 2, 2, 3])   # number of distinct values: 3
permutation_warm_up(4)          # 5
paint_a_strip(20)               # 4
mex_grid(2)                     # [[3, 2], [0, 1]]
prime_factors(12)               # {2: 2, 3: 1}
```

Yes/no problems return `bool`. Problems whose answer may not exist return
`None` in that case (`game_of_division`, `lrc_and_vip`,
`sumdamental_decomposition`). Inputs that the problems cannot handle, such
as empty sequences or a zero divisor, raise `ValueError`.

The modules group the problems by their letter:

- `cfsolve.problems_a`: `common_multiple`, `dinner_time`, `game_of_division`,
  `time_to_duel`, `lrc_and_vip`, `milya_two_arrays`, `permutation_warm_up`
- `cfsolve.problems_b`: `apples_in_boxes` (returns `"Tom"` or `"Jerry"`),
  `binary_typewriter`, `cost_of_array`, `gardener_and_array`,
  `paint_a_strip`, `sumdamental_decomposition`, `apartment_purchase`,
  `slice_to_survive`, `picky_cat`
- `cfsolve.problems_c`: `hacking_numbers_easy`, `hacking_numbers_medium`
  (each returns the list of commands to send), `fanum_tax_easy`,
  `fanum_tax_hard`, `mex_grid`, `prime_factors`

## Command line

Give the problem name, which is the function's name, and feed the input on
standard input or name an input file:

```
printf '2\n4\n1 2 2 3\n1\n5\n' | cfsolve common_multiple
cfsolve prime_factors input.txt
```

`cfsolve --help` lists every problem name. Answers are printed one line at
a time and flushed. For `hacking_numbers_easy` and `hacking_numbers_medium`
the tool prints each command and then reads one integer reply before the
next. On malformed input or an unreadable file the tool prints a message to
standard error and exits with status 1.

From Python, `cfsolve.cli.run(problem, text)` takes the same input as a
string and returns the printed output; `cfsolve.cli.main(argv)` is the
command's entry point and returns its exit code.

## What it does not do

The tool does not check answers against expected output, and it has no
judge of its own for the interactive problems: the replies to their
commands must come from the input.

## Running the tests

```
pip install .[test]
pytest
```
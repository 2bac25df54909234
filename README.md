# cfsolve

Solvers for twelve competitive programming problems. There is one module for
each problem, and each module can be used in two ways:

* as a plain Python function that takes the problem's values and returns the
  answer, or
* as a command that reads judge-style input from standard input and writes
  one answer line per case to standard output. The input is a case count
  followed by the cases, with values separated by whitespace.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Problems

| Module                    | Function                         | Returns                         | Command          |
|---------------------------|----------------------------------|---------------------------------|------------------|
| `cfsolve.problem_2078b`   | `arrange(n, k)`                  | list of n values (n or n - 1)   | `cfsolve-2078b`  |
| `cfsolve.problem_2084b`   | `can_reach(values)`              | bool, printed `Yes`/`No`        | `cfsolve-2084b`  |
| `cfsolve.problem_2086b`   | `count_positions(values, k, x)`  | int                             | `cfsolve-2086b`  |
| `cfsolve.problem_2091c`   | `build_permutation(n)`           | list, or `None` (printed `-1`)  | `cfsolve-2091c`  |
| `cfsolve.problem_2091d`   | `min_max_bench(n, m, k)`         | int                             | `cfsolve-2091d`  |
| `cfsolve.problem_2092b`   | `can_swap(a, b)`                 | bool, printed `YES`/`NO`        | `cfsolve-2092b`  |
| `cfsolve.problem_2093c`   | `is_repeated_prime(x, k)`        | bool, printed `YES`/`NO`        | `cfsolve-2093c`  |
| `cfsolve.problem_2094d`   | `could_be_typed(p, s)`           | bool, printed `YES`/`NO`        | `cfsolve-2094d`  |
| `cfsolve.problem_2096b`   | `min_attempts(a, b, k)`          | int                             | `cfsolve-2096b`  |
| `cfsolve.problem_2106a`   | `total_ones(s)`                  | int                             | `cfsolve-2106a`  |
| `cfsolve.problem_2106b`   | `build_sequence(n, x)`           | list of 0..n-1                  | `cfsolve-2106b`  |
| `cfsolve.problem_2106c`   | `count_arrays(a, b, k)`          | int                             | `cfsolve-2106c`  |

`cfsolve.problem_2093c` also provides `is_prime(t)`, a trial-division
primality check.

Some functions check their arguments and raise `ValueError`. `can_reach`
rejects an empty list. `can_swap`, `min_attempts` and `count_arrays` reject
sequences of different lengths. `min_attempts` also requires
`1 <= k <= len(a)`, and `count_arrays` rejects empty arrays. In `count_arrays`,
an entry of `-1` in `b` marks an unknown value.

## Using a solver from Python

```python
from cfsolve.problem_2091d import min_max_bench
from cfsolve.problem_2094d import could_be_typed

print(min_max_bench(3, 4, 7))
print(could_be_typed("LR", "LLRR"))
```

## Using a solver from the command line

Every command reads judge-style input from standard input:

```
printf '2\n3 1\n3 2\n' | cfsolve-2078b
```

```
cfsolve-2091c < input.txt
```

The commands take no options other than `-h`/`--help`. Each command's `main`
function also accepts an optional argument list, so it can be called from
Python as `main()`. It reads standard input and returns `0`.
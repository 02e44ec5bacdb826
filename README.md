# affinelp

Two small solvers for linear programs, side by side, both printing their
progress as they go. They are meant for teaching and for comparing how the
two methods approach the same problem.

## Installation

```
pip install .
```

NumPy is the only dependency.

## The solvers

### `affinelp.affine_scale.AffineScaling`

The affine scaling interior-point method for minimising `c @ x` subject to
`A @ x <= b` or `A @ x = b`.

- `AffineScaling(gamma=0.5, epsilon=1e-6, max_iter=1000)` sets the fixed step
  size, the tolerance and the iteration limit.
- `setup_problem(A, b, c, constraint_types)` adds one slack variable for each
  constraint marked `'<'` or `'L'`; any other mark is taken as an equality.
  It raises `ValueError` when the sizes of `A`, `b`, `c` and
  `constraint_types` do not agree, then calls `init_feasible_point()`, which
  picks a starting point from the bounds and prints the initial constraint
  values.
- `solve()` moves the point along the projected steepest-descent direction
  (`compute_descent_direction(x_k)`) with step `gamma`, keeping every
  coordinate at least `1e-8`. It returns `True` when the direction norm, or
  (after the first ten iterations) the change in objective, drops below
  `epsilon`, and `False` when `max_iter` iterations have run. It raises
  `RuntimeError` if no problem has been set up. Progress goes to standard
  output.
- `solution()` returns the current point, slack variables included;
  `objective_value()` returns `c @ x` there.
- `print_solution(file=None)` writes the point, the objective value and a
  check of each constraint with its violation.

### `affinelp.simplex.Simplex`

A tableau simplex method for minimising `c @ x` subject to `A @ x <= b`,
`x >= 0`, starting from the basis of one slack variable per row.

- `Simplex(objective, A, b)` builds the tableau; it raises `ValueError` when
  `A` does not have one row per entry of `b` and one column per entry of
  `objective`.
- `calculate(file=None)` pivots until no reduced cost is positive, writing
  the tableau after every pivot (`format_matrix()`) and the final result. It
  returns `True` on success and `False`, after printing
  `Sprendinys nerastas.`, when no entering or leaving variable can be found.
  Its output labels are in Lithuanian.
- The steps are also available on their own: `is_optimal()`,
  `entering_variable()`, `leaving_variable(entering)` and
  `pivot(leaving, entering)`.
- `solution()`, `objective_value()` and `basis_names()` give the values of
  the original variables, the objective row's result and the names of the
  basic variables (`x_1`, …, `s_1`, …); `print_solution(file=None)` writes
  them out.

### Example

```python
import numpy as np
from affinelp.affine_scale import AffineScaling
from affinelp.simplex import Simplex

A = np.array([[1.0, 1.0, 1.0],
              [2.0, 2.0, 1.0]])
b = np.array([100.0, 150.0])
c = np.array([-100.0, -10.0, -1.0])

solver = AffineScaling(0.5, 1e-6, 1000)
solver.setup_problem(A, b, c, ["L", "L"])
converged = solver.solve()
solver.print_solution()

tableau = Simplex(c, A, b)
tableau.calculate()
print(tableau.solution(), tableau.objective_value(), tableau.basis_names())
```

## Sample problems

`affinelp.cases` holds eight sample problems in `CASES`, numbered 0 to 7, as
`Problem` records: Original, 2D Matrix, Degeneracy, Unbounded, Simplex
Favoring, Interior Point, Multiple Optima and Diet Problem.
`run_case(number, file=None)` runs one through both solvers (raising
`ValueError` for an unknown number); `run_affine_scale` and
`run_simplex_test` run a single solver on any problem and return the solver
with its result.

From the command line:

```
affinelp-cases 5
```

Without an argument the number is read from standard input; input that is
not a number counts as 0, and a number with no sample problem does nothing.

## What it does not do

- `Simplex` handles only `<=` constraints with its slack starting basis; it
  has no phase for finding a first feasible basis, so equality marks in the
  sample problems are ignored by it and infeasible problems are not detected
  as such.
- `AffineScaling` does not check feasibility while it iterates, and it has
  no test for unboundedness or infeasibility; it stops only on its
  convergence tests or its iteration limit.
- Neither solver reads problems from files; problems are given as arrays.

## Running the tests

```
pip install ".[test]"
pytest
```
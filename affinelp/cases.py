"""Sample linear programs run through both solvers, with a small command line."""

from __future__ import annotations

import argparse
import sys
from contextlib import redirect_stdout
from dataclasses import dataclass
from typing import Sequence, TextIO

import numpy as np

from .affine_scale import AffineScaling
from .simplex import Simplex

_RULE = "=============================="


@dataclass(frozen=True)
class Problem:
    """A linear program ``min c @ x`` with ``A @ x (<=|=) b``."""

    name: str
    A: np.ndarray
    b: np.ndarray
    c: np.ndarray
    constraints: tuple[str, ...]


def _problem(name, A, b, c, constraints) -> Problem:
    return Problem(
        name=name,
        A=np.array(A, dtype=float),
        b=np.array(b, dtype=float),
        c=np.array(c, dtype=float),
        constraints=tuple(constraints),
    )


CASES: dict[int, Problem] = {
    0: _problem(
        "Original",
        [[-1, 1, -1, -1], [2, 4, 0, 0], [0, 0, 1, 1]],
        [8, 10, 3],
        [2, -3, 0, -5],
        "LLL",
    ),
    1: _problem("2D Matrix", [[-1, -2], [-4, -1]], [-4, -4], [-1, -1], "LL"),
    2: _problem("Degeneracy", [[1, 1, 1], [1, 1, 0]], [1, 1], [10, 0, 0], "EE"),
    3: _problem("Unbounded", [[-1, 1]], [-2], [1, 1], "L"),
    4: _problem(
        "Simplex Favoring", [[1, 1, 1], [2, 2, 1]], [100, 150], [-100, -10, -1], "LL"
    ),
    5: _problem("Interior Point", [[1, 1, 1]], [1], [2, 3, 1], "E"),
    6: _problem("Multiple Optima", [[1, 1, 0], [1, 0, 1]], [1, 1], [0, 0, 1], "EE"),
    7: _problem("Diet Problem", [[-400, -200], [-3, -1]], [-500, -6], [50, 20], "LL"),
}


def run_affine_scale(
    name: str,
    A,
    b,
    c,
    constraints: Sequence[str],
    file: TextIO | None = None,
) -> tuple[AffineScaling, bool]:
    """Solve a problem by affine scaling and report it; return the solver and whether it converged."""
    out = file if file is not None else sys.stdout
    with redirect_stdout(out):
        print()
        print(_RULE)
        print(f"Running test: {name}")
        print(_RULE)

        solver = AffineScaling(0.5, 1e-6, 1000)
        solver.setup_problem(A, b, c, constraints)
        converged = solver.solve()
        if not converged:
            print("No Optimal,")
            print("Reached feasible solution:")
        solver.print_solution(file=out)
    return solver, converged


def run_simplex_test(
    name: str, A, b, c, file: TextIO | None = None
) -> tuple[Simplex, bool]:
    """Solve a problem with the simplex tableau and report it; return the solver and whether it succeeded."""
    out = file if file is not None else sys.stdout
    print(file=out)
    print(_RULE, file=out)
    print(f"Running Simplex test: {name}", file=out)
    print(_RULE, file=out)

    solver = Simplex(c, A, b)
    found = solver.calculate(file=out)
    return solver, found


def run_case(
    number: int, file: TextIO | None = None
) -> tuple[tuple[AffineScaling, bool], tuple[Simplex, bool]]:
    """Run sample problem ``number`` through both solvers."""
    try:
        problem = CASES[number]
    except KeyError:
        raise ValueError(f"no sample problem numbered {number}") from None
    affine = run_affine_scale(
        problem.name, problem.A, problem.b, problem.c, problem.constraints, file
    )
    simplex = run_simplex_test(problem.name, problem.A, problem.b, problem.c, file)
    return affine, simplex


def _read_number(stream: TextIO) -> int:
    tokens = stream.read().split()
    if not tokens:
        return 0
    try:
        return int(tokens[0])
    except ValueError:
        return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the sample problem chosen on the command line or read from standard input."""
    parser = argparse.ArgumentParser(
        description="Solve a sample linear program with affine scaling and simplex."
    )
    parser.add_argument(
        "number",
        nargs="?",
        type=int,
        help="sample problem number (read from standard input if omitted)",
    )
    args = parser.parse_args(argv)
    number = args.number if args.number is not None else _read_number(sys.stdin)
    if number in CASES:
        run_case(number)
    return 0
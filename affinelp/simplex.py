"""Tableau simplex method for ``min c @ x`` with ``A @ x <= b``."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

import numpy as np

_TOLERANCE = 1e-4


class Simplex:
    """Simplex tableau with one slack variable per constraint."""

    def __init__(self, objective: Sequence[float], A, b: Sequence[float]):
        c = np.asarray(objective, dtype=float).ravel()
        rhs = np.asarray(b, dtype=float).ravel()
        n = len(c)
        m = len(rhs)
        a = np.asarray(A, dtype=float)
        if a.size == 0 and m * n == 0:
            a = a.reshape(m, n)
        if a.shape != (m, n):
            raise ValueError(f"A has shape {a.shape}, expected {(m, n)}")

        self.rows = m + 1
        self.cols = n + m + 1
        self.matrix = np.zeros((self.rows, self.cols))
        self.matrix[0, :n] = -c
        self.matrix[1:, :n] = a
        self.matrix[1:, n:n + m] = np.eye(m)
        self.matrix[1:, -1] = rhs
        self.base = [n + i for i in range(m)]

    @property
    def _vars(self) -> int:
        return self.cols - 1 - len(self.base)

    def _name(self, column: int) -> str:
        if column < self._vars:
            return f"x_{column + 1}"
        return f"s_{column - self._vars + 1}"

    def is_optimal(self) -> bool:
        """True when no reduced cost in the objective row is positive."""
        return bool(np.all(self.matrix[0, :-1] <= _TOLERANCE))

    def entering_variable(self) -> int | None:
        """Column with the largest positive reduced cost, or None."""
        costs = self.matrix[0, :-1]
        if costs.size == 0:
            return None
        best = int(np.argmax(costs))
        return best if costs[best] > 0 else None

    def leaving_variable(self, entering: int) -> int | None:
        """Tableau row chosen by the minimum-ratio test, or None if unbounded."""
        leaving = None
        min_ratio = float("inf")
        for i, row in enumerate(self.matrix[1:], start=1):
            if row[entering] > _TOLERANCE:
                ratio = row[-1] / row[entering]
                if ratio < min_ratio:
                    min_ratio = ratio
                    leaving = i
        return leaving

    def pivot(self, leaving: int, entering: int) -> None:
        """Pivot on the given tableau cell and update the basis."""
        self.matrix[leaving] /= self.matrix[leaving, entering]
        pivot_row = self.matrix[leaving].copy()
        for i, row in enumerate(self.matrix):
            if i != leaving:
                row -= row[entering] * pivot_row
        self.base[leaving - 1] = entering

    def calculate(self, file: TextIO | None = None) -> bool:
        """Run the method, logging each step; return False if no solution is found."""
        out = file if file is not None else sys.stdout
        print("Pradine simplekso matrica:", file=out)
        out.write(self.format_matrix())

        iteration = 0
        while not self.is_optimal():
            entering = self.entering_variable()
            leaving = None if entering is None else self.leaving_variable(entering)
            if entering is None or leaving is None:
                print("Sprendinys nerastas.", file=out)
                return False

            print(f"\nIteracija {iteration}:", file=out)
            iteration += 1
            print(
                f"Ieinantis kintamasis: {self._name(entering)}, "
                f"Iseinantis kintamasis: {self._name(self.base[leaving - 1])}",
                file=out,
            )
            self.pivot(leaving, entering)
            out.write(self.format_matrix())

        self.print_solution(file=out)
        return True

    def format_matrix(self) -> str:
        """Render the tableau as text, one line per row."""
        headers = [f"x_{j + 1}" for j in range(self._vars)]
        headers += [f"s_{j + 1}" for j in range(len(self.base))]
        lines = ["Baze".ljust(8) + " |" + "".join(h.ljust(8) for h in headers) + "Rez"]

        def cells(row: np.ndarray) -> str:
            return "".join(f"{v:<8.3f}" for v in row)

        lines.append("f".ljust(8) + " |" + cells(self.matrix[0]))
        for basic, row in zip(self.base, self.matrix[1:]):
            lines.append(self._name(basic).ljust(8) + " |" + cells(row))
        return "\n".join(lines) + "\n"

    def solution(self) -> list[float]:
        """Values of the original variables at the current basis."""
        values = [0.0] * self._vars
        for basic, row in zip(self.base, self.matrix[1:]):
            if basic < self._vars:
                values[basic] = float(row[-1])
        return values

    def objective_value(self) -> float:
        """Objective value at the current basis."""
        return float(self.matrix[0, -1])

    def basis_names(self) -> list[str]:
        """Names of the basic variables, in tableau row order."""
        return [self._name(basic) for basic in self.base]

    def print_solution(self, file: TextIO | None = None) -> None:
        """Write the objective value, solution and basis to ``file``."""
        out = file if file is not None else sys.stdout
        print(f"Minimali funkcijos reiksme: {self.objective_value():.3f}", file=out)
        print("Optimalus sprendinys:", file=out)
        for i, value in enumerate(self.solution()):
            print(f"x_{i + 1} = {value:.3f}", file=out)
        print(
            "Optimalus baziniai kintamieji: {" + ", ".join(self.basis_names()) + "}",
            file=out,
        )
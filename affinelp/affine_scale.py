"""Affine scaling interior-point method for linear programs."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

import numpy as np

_MIN_COORDINATE = 1e-8


def _fmt_vector(values: np.ndarray) -> str:
    return " ".join(f"{v:g}" for v in values)


class AffineScaling:
    """Minimise ``c @ x`` subject to ``A @ x (<=|=) b`` by affine scaling."""

    def __init__(self, gamma: float = 0.5, epsilon: float = 1e-6, max_iter: int = 1000):
        self.gamma = gamma
        self.epsilon = epsilon
        self.max_iterations = max_iter
        self.A = np.zeros((0, 0))
        self.b = np.zeros(0)
        self.c = np.zeros(0)
        self.x = np.zeros(0)
        self._ready = False

    def setup_problem(
        self,
        A,
        b,
        c,
        constraint_types: Sequence[str],
    ) -> None:
        """Build the slack-extended problem and choose a starting point.

        Constraints marked ``'<'`` or ``'L'`` receive a slack variable;
        any other mark is treated as an equality.
        """
        a_orig = np.atleast_2d(np.asarray(A, dtype=float))
        b_orig = np.asarray(b, dtype=float).ravel()
        c_orig = np.asarray(c, dtype=float).ravel()
        rows, cols = a_orig.shape

        if len(b_orig) != rows:
            raise ValueError(f"b has {len(b_orig)} entries, expected {rows}")
        if len(c_orig) != cols:
            raise ValueError(f"c has {len(c_orig)} entries, expected {cols}")
        if len(constraint_types) != rows:
            raise ValueError(
                f"{len(constraint_types)} constraint types given for {rows} constraints"
            )

        slack_rows = [i for i, kind in enumerate(constraint_types) if kind in ("<", "L")]
        slack_count = len(slack_rows)

        self.A = np.zeros((rows, cols + slack_count))
        self.A[:, :cols] = a_orig
        for slack_id, row in enumerate(slack_rows):
            self.A[row, cols + slack_id] = 1.0

        self.b = b_orig.copy()
        self.c = np.zeros(cols + slack_count)
        self.c[:cols] = c_orig
        self.init_feasible_point()

    def init_feasible_point(self) -> None:
        """Pick an interior starting point from the constraint bounds."""
        n = self.A.shape[1]
        rows = self.A.shape[0]
        orig_vars = len(self.c) - rows
        if orig_vars < 0:
            raise ValueError(
                "problem has more constraints than variables and slacks together"
            )

        x = np.zeros(n)
        if orig_vars and rows:
            x[:orig_vars] = min(10.0, float(self.b.min()) * 0.1)
        ax = self.A[:, :orig_vars] @ x[:orig_vars]
        x[orig_vars:orig_vars + rows] = np.maximum(1.0, self.b - ax)
        self.x = x
        self._ready = True

        print("Initial feasible point found.")
        print("Initial constraint satisfaction:")
        for lhs, rhs in zip(self.A @ self.x, self.b):
            print(f"  {lhs:g} <= {rhs:g}")

    def compute_descent_direction(self, x_k) -> np.ndarray:
        """Return the projected steepest-descent direction in scaled space."""
        x_k = np.asarray(x_k, dtype=float)
        n = len(x_k)
        d = np.diag(x_k)
        a_tilde = self.A @ d
        c_tilde = d @ self.c

        aat_inv = np.linalg.pinv(a_tilde @ a_tilde.T)
        projection = np.eye(n) - a_tilde.T @ aat_inv @ a_tilde
        grad_proj = projection @ c_tilde

        norm = float(np.linalg.norm(grad_proj))
        if norm > self.epsilon:
            grad_proj = -grad_proj / norm
        return grad_proj

    def solve(self) -> bool:
        """Iterate until convergence; return False if the iteration limit is hit."""
        if not self._ready:
            raise RuntimeError("setup_problem must be called before solve")

        print("Starting Affinine Algorithm...")
        print(f"Initial point: {_fmt_vector(self.x)}")
        print(f"Initial objective value: {self.objective_value():g}")
        print()

        prev_obj = self.objective_value()
        for k in range(self.max_iterations):
            direction = self.compute_descent_direction(self.x)

            if np.linalg.norm(direction) < self.epsilon:
                print(f"Converged due to small direction norm after {k} iterations.")
                print(f"Final objective value: {self.objective_value():g}")
                return True

            alpha = self.gamma
            x_new = self.x + alpha * self.x * direction
            x_new[x_new <= _MIN_COORDINATE] = _MIN_COORDINATE

            self.x = x_new
            current_obj = self.objective_value()

            if abs(current_obj - prev_obj) < self.epsilon and k > 10:
                print(f"Converged due to small objective change after {k} iterations.")
                print(f"Final objective value: {current_obj:.6f}")
                return True

            prev_obj = current_obj

            if k % 10 == 0:
                print(
                    f"Iteration {k}: Objective = {current_obj:.6f}, "
                    f"Step size = {alpha:.6f}"
                )

        print("Maximum iterations reached.")
        return False

    def solution(self) -> np.ndarray:
        """Return a copy of the current point, slack variables included."""
        return self.x.copy()

    def objective_value(self) -> float:
        """Return the objective at the current point."""
        return float(self.c @ self.x)

    def print_solution(self, file: TextIO | None = None) -> None:
        """Write the current point and constraint check to ``file``."""
        out = file if file is not None else sys.stdout
        print("\n=== SOLUTION ===", file=out)
        print("Optimal point:", file=out)
        for i, value in enumerate(self.x):
            print(f"x[{i}] = {value:.6f}", file=out)
        print(f"Optimal objective value: {self.objective_value():.6f}", file=out)

        print("\nConstraint verification:", file=out)
        for i, (lhs, rhs) in enumerate(zip(self.A @ self.x, self.b)):
            violation = max(0.0, lhs - rhs)
            print(
                f"Constraint {i}: {lhs:.6f} \u2264 {rhs:.6f} (violation: {violation:.6f})",
                file=out,
            )
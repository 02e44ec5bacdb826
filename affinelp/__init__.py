"""Affine scaling and tableau simplex solvers for small linear programs, with sample problems."""

__version__ = "0.1.0"
__all__ = ["affine_scale", "simplex", "cases"]
"""Vectors, matrices, linear system solvers and least-squares regression."""

__version__ = "0.1.0"
__all__ = ["vector", "matrix", "linear_system", "linear_regression", "cli"]
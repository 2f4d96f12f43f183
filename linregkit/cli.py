"""Command-line demonstration of the solvers and the regression model."""

from __future__ import annotations

import argparse
import random
import sys

from .linear_regression import LinearRegression
from .linear_system import LinearSystem, PosSymLinSystem
from .matrix import Matrix
from .vector import Vector


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linregkit",
        description="Solve two sample linear systems and fit a regression model.",
    )
    parser.add_argument(
        "data", nargs="?", default="machine.data", help="CSV data file (default: machine.data)"
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the train/test shuffle")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    print("Testing LinearSystem")
    a1 = Matrix.from_rows([[5, 2, -3], [-1, 4, 1], [3, -2, 6]])
    b1 = Vector([7, 2, 13])
    x1 = LinearSystem(a1, b1).solve()
    print(f"Solution x (Gaussian): {x1}")
    print()

    print("Testing PosSymLinSystem")
    a2 = Matrix.from_rows([[6, 2, 1], [2, 5, 0], [1, 0, 3]])
    b2 = Vector([9, 8, 5])
    if not a2.is_symmetric():
        print("Error: Matrix is not symmetric", file=sys.stderr)
    else:
        x2 = PosSymLinSystem(a2, b2).solve()
        print(f"Solution x (Conjugate Gradient): {x2}")
        print()

    model = LinearRegression()
    try:
        model.load_data(args.data, rng=random.Random(args.seed))
    except OSError:
        print("Cannot open data file!")
        return 1
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    model.fit()
    print(model.format_weights())
    print(f"Test RMSE: {model.evaluate():g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
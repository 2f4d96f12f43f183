# linregkit

A small dense linear algebra toolkit in pure Python with no dependencies.

## Modules

- `linregkit.vector`: `Vector`, a fixed-size vector of floats.
  - `Vector([1, 2, 3])` builds one from values, and `Vector.zeros(n)` builds a
    vector of `n` zeros.
  - `v[i]` reads and writes with 0-based indices. `v(i)` reads with 1-based
    indices. An index out of range raises `IndexError`.
  - Supports `+` and `-` between vectors of equal size (otherwise
    `ValueError`), `*` by a scalar on either side, unary `-`, `==`, `len()`,
    iteration and `copy()`. `str(v)` gives the elements separated by `", "`.
- `linregkit.matrix`: `Matrix` and `SingularMatrixError`.
  - `Matrix(rows, cols)` creates a zero matrix. Both sizes must be positive,
    otherwise `ValueError`. `Matrix.from_rows([[...], ...])` builds a matrix
    from equally long rows.
  - Entries are accessed 1-based, as in `m[1, 1]`. The `num_rows` and
    `num_cols` properties give the size. `rows()` returns a copy of the
    entries as a list of rows.
  - Supports `+` and `-`, and `*` by a matrix, a `Vector` or a scalar.
    Mismatched shapes raise `ValueError`. Also `transpose()`, `copy()` and
    `==`.
  - `determinant()` uses Gaussian elimination with partial pivoting.
    `inverse()` uses Gauss-Jordan elimination and raises `SingularMatrixError`
    for a singular matrix. Both need a square matrix.
  - `pseudo_inverse()` handles full-rank matrices. It inverts a square matrix
    directly, uses `(AᵀA)⁻¹Aᵀ` for a tall matrix and `Aᵀ(AAᵀ)⁻¹` for a wide
    one.
  - `is_symmetric(tol=1e-10)` checks that the matrix is square and equal to
    its transpose within `tol`.
- `linregkit.linear_system`: square systems `A x = b`.
  - `LinearSystem(a, b).solve()` uses Gaussian elimination with partial
    pivoting. It raises `SingularMatrixError` on a zero pivot. The `size`
    property gives the number of unknowns.
  - `PosSymLinSystem(a, b).solve()` uses the conjugate gradient method,
    starting from zero. The constructor raises `ValueError` if `a` is not
    symmetric.
  - Both constructors raise `ValueError` if `a` is not square or `b` has the
    wrong size. Both copy their arguments.
- `linregkit.linear_regression`: least-squares regression.
  - `read_dataset(path)` reads a CSV file. It takes columns 2–7 (0-based) as
    the six features and column 8 as the target. It skips empty lines and
    lines with fewer than nine fields.
  - `LinearRegression` has these methods:
    - `load_data(filename, train_ratio=0.8, rng=None)` shuffles the rows and
      splits them into a training set and a test set. It raises `ValueError`
      if either set would be empty.
    - `fit()` solves the normal equations `(XᵀX) w = Xᵀy`.
    - `predict(x)` returns one prediction per row of `x`.
    - `rmse(y_true, y_pred)` returns the root mean squared error.
    - `evaluate()` returns the RMSE on the test set.
    - `format_weights()` returns the weights as a printable line.

## Installation

```
pip install .
```

## Usage

```python
from linregkit.matrix import Matrix
from linregkit.vector import Vector
from linregkit.linear_system import LinearSystem, PosSymLinSystem

a = Matrix.from_rows([[5, 2, -3], [-1, 4, 1], [3, -2, 6]])
b = Vector([7, 2, 13])
print(LinearSystem(a, b).solve())

spd = Matrix.from_rows([[6, 2, 1], [2, 5, 0], [1, 0, 3]])
print(PosSymLinSystem(spd, Vector([9, 8, 5])).solve())
```

Regression on a CSV file:

```python
import random
from linregkit.linear_regression import LinearRegression

model = LinearRegression()
model.load_data("machine.data", 0.8, rng=random.Random(42))
model.fit()
print(model.format_weights())
print("Test RMSE:", model.evaluate())
```

Without `rng`, the split changes from run to run. A seeded `random.Random`
gives the same split each time.

## Command line

```
linregkit [DATA] [--seed N]
```

The command solves two sample 3×3 systems, one by Gaussian elimination and
one by conjugate gradient, and prints both solutions. It then fits a
regression model to `DATA` (default: `machine.data` in the current
directory) and prints the weights and the test RMSE. `--seed` fixes the
train/test shuffle.

It exits with status 1 in two cases:

- The data file cannot be opened. It then prints `Cannot open data file!`.
- The data cannot be split into non-empty training and test sets.

## What it does not do

- The regression model has no intercept term. It always uses exactly six
  feature columns.
- Fitted models cannot be saved or loaded.
- There are no sparse matrices. There is no pseudo-inverse for
  rank-deficient matrices: the `tol` argument of `pseudo_inverse` is not
  used.

## Running the tests

```
pip install .[test]
pytest
```
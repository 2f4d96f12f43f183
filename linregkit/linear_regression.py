"""Ordinary least-squares regression on six-feature CSV data."""

from __future__ import annotations

import math
import random
from pathlib import Path

from .linear_system import LinearSystem
from .matrix import Matrix
from .vector import Vector

_FEATURE_COLUMNS = slice(2, 8)
_TARGET_COLUMN = 8
_MIN_FIELDS = 9
_NUM_FEATURES = 6


def read_dataset(path: str | Path) -> tuple[list[list[float]], list[float]]:
    """Read features (columns 2-7) and targets (column 8) from a CSV file.

    Empty lines and lines with fewer than nine fields are skipped.
    """
    features: list[list[float]] = []
    targets: list[float] = []
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            line = line.rstrip("\r\n")
            if not line:
                continue
            fields = line.split(",")
            if len(fields) < _MIN_FIELDS:
                continue
            features.append([float(field) for field in fields[_FEATURE_COLUMNS]])
            targets.append(float(fields[_TARGET_COLUMN]))
    return features, targets


class LinearRegression:
    """A linear model without intercept fitted by the normal equations."""

    def __init__(self) -> None:
        self._x_train: Matrix | None = None
        self._y_train: Vector | None = None
        self._x_test: Matrix | None = None
        self._y_test: Vector | None = None
        self._weights: Vector | None = None

    def load_data(
        self,
        filename: str | Path,
        train_ratio: float = 0.8,
        rng: random.Random | None = None,
    ) -> None:
        """Read ``filename``, shuffle the rows and split them into train and test sets."""
        features, targets = read_dataset(filename)
        order = list(range(len(features)))
        (rng or random.Random()).shuffle(order)

        n_train = int(train_ratio * len(features))
        n_test = len(features) - n_train
        if n_train <= 0 or n_test <= 0:
            raise ValueError(
                f"cannot split {len(features)} rows into {n_train} training "
                f"and {n_test} test rows"
            )

        train, test = order[:n_train], order[n_train:]
        self._x_train = Matrix.from_rows(features[i] for i in train)
        self._y_train = Vector(targets[i] for i in train)
        self._x_test = Matrix.from_rows(features[i] for i in test)
        self._y_test = Vector(targets[i] for i in test)
        self._weights = None

    def fit(self) -> None:
        """Solve ``(XᵀX) w = Xᵀy`` on the training set."""
        if self._x_train is None or self._y_train is None:
            raise RuntimeError("no data loaded; call load_data first")
        xt = self._x_train.transpose()
        self._weights = LinearSystem(xt * self._x_train, xt * self._y_train).solve()

    def predict(self, x: Matrix) -> Vector:
        """Predict one value per row of ``x``."""
        if self._weights is None:
            raise RuntimeError("model is not fitted; call fit first")
        return x * self._weights

    def rmse(self, y_true: Vector, y_pred: Vector) -> float:
        """Root mean squared error between two equally long vectors."""
        if len(y_true) != len(y_pred):
            raise ValueError(
                f"vectors have different sizes {len(y_true)} and {len(y_pred)}"
            )
        if not len(y_true):
            raise ValueError("cannot compute the error of empty vectors")
        total = sum((t - p) * (t - p) for t, p in zip(y_true, y_pred))
        return math.sqrt(total / len(y_true))

    def format_weights(self) -> str:
        """Return the learned weights as a printable line."""
        if self._weights is None:
            raise RuntimeError("model is not fitted; call fit first")
        return "Model weights: " + " ".join(f"{w:g}" for w in self._weights)

    def evaluate(self) -> float:
        """RMSE of the model on the test set."""
        if self._x_test is None or self._y_test is None:
            raise RuntimeError("no data loaded; call load_data first")
        return self.rmse(self._y_test, self.predict(self._x_test))
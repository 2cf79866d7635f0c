"""Helpers for preparing small tabular datasets."""

from __future__ import annotations

import random
import statistics
from collections.abc import Sequence


def normalize_dataset(
    samples: Sequence[Sequence[float]], n_train_samples: int
) -> list[list[float]]:
    """Standardise every feature with mean and deviation of the training rows.

    The first ``n_train_samples`` rows are the training rows; all rows are
    transformed. A feature with zero deviation is only centred.
    """
    rows = [[float(x) for x in row] for row in samples]
    if not 0 < n_train_samples <= len(rows):
        raise ValueError(
            f"n_train_samples must be between 1 and {len(rows)}, got {n_train_samples}"
        )
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all samples must have the same number of features")

    columns = list(zip(*rows[:n_train_samples]))
    means = [statistics.fmean(column) for column in columns]
    stds = [
        statistics.pstdev(column, mean) or 1.0 for column, mean in zip(columns, means)
    ]
    return [
        [(x - mean) / std for x, mean, std in zip(row, means, stds)] for row in rows
    ]


def shuffle_dataset(
    samples: Sequence[Sequence[float]],
    labels: Sequence[int],
    rng: random.Random | None = None,
) -> tuple[list[list[float]], list[int]]:
    """Shuffle samples and labels with the same random permutation."""
    if len(samples) != len(labels):
        raise ValueError("samples and labels must have the same length")
    rng = rng if rng is not None else random.Random()
    order = list(range(len(samples)))
    rng.shuffle(order)
    return [list(samples[i]) for i in order], [labels[i] for i in order]
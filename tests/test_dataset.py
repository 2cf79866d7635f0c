import random
import statistics

import pytest

from minitensor.dataset import normalize_dataset, shuffle_dataset

SAMPLES = [
    [5.1, 3.5, 1.4, 0.2],
    [4.9, 3.0, 1.4, 0.2],
    [7.0, 3.2, 4.7, 1.4],
    [6.4, 3.2, 4.5, 1.5],
    [6.3, 3.3, 6.0, 2.5],
    [5.8, 2.7, 5.1, 1.9],
]
LABELS = [0, 0, 1, 1, 2, 2]


def test_training_rows_are_standardised():
    normalized = normalize_dataset(SAMPLES, 4)
    for column in zip(*normalized[:4]):
        assert statistics.fmean(column) == pytest.approx(0.0, abs=1e-12)
        assert statistics.pstdev(column) == pytest.approx(1.0)


def test_all_rows_are_transformed_with_training_statistics():
    samples = SAMPLES[:4] + [SAMPLES[1]]
    normalized = normalize_dataset(samples, 4)
    assert len(normalized) == len(samples)
    assert normalized[4] == pytest.approx(normalized[1])


def test_constant_feature_is_only_centred():
    normalized = normalize_dataset([[2.0, 1.0], [2.0, 3.0]], 2)
    assert [row[0] for row in normalized] == [0.0, 0.0]


@pytest.mark.parametrize("n_train", [0, 7])
def test_invalid_training_count_raises(n_train):
    with pytest.raises(ValueError):
        normalize_dataset(SAMPLES, n_train)


def test_ragged_rows_raise():
    with pytest.raises(ValueError):
        normalize_dataset([[1.0, 2.0], [1.0]], 2)


def test_shuffle_is_a_permutation_that_keeps_pairs():
    shuffled, labels = shuffle_dataset(SAMPLES, LABELS, random.Random(3))
    assert sorted(shuffled) == sorted(SAMPLES)
    pairs = {(tuple(s), label) for s, label in zip(SAMPLES, LABELS)}
    assert {(tuple(s), label) for s, label in zip(shuffled, labels)} == pairs


def test_shuffle_is_reproducible_with_seeded_rng():
    first = shuffle_dataset(SAMPLES, LABELS, random.Random(7))
    second = shuffle_dataset(SAMPLES, LABELS, random.Random(7))
    assert first == second


def test_shuffle_copies_rows():
    snapshot = [list(row) for row in SAMPLES]
    shuffled, labels = shuffle_dataset(SAMPLES, LABELS, random.Random(1))
    assert len(shuffled) == len(SAMPLES)
    assert len(labels) == len(LABELS)
    for row in shuffled:
        row[0] = -100.0
    assert [row[0] for row in shuffled] == [-100.0] * len(SAMPLES)
    assert SAMPLES == snapshot


def test_shuffle_rejects_length_mismatch():
    with pytest.raises(ValueError):
        shuffle_dataset(SAMPLES, LABELS[:-1])
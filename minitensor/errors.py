"""Exceptions and shape assertion helpers used across the package."""

from __future__ import annotations

from collections.abc import Sequence


class TensorError(Exception):
    """Base class for errors raised by tensor operations."""


class ShapeMismatchError(TensorError, ValueError):
    """Raised when shapes or dimensions that must agree do not."""


def assert_shape(title: str, a: Sequence[int], b: Sequence[int]) -> None:
    """Raise ShapeMismatchError unless the two shapes are identical."""
    shape_a, shape_b = tuple(a), tuple(b)
    if shape_a != shape_b:
        raise ShapeMismatchError(f"{title}: {shape_a} != {shape_b}")


def assert_dim(title: str, a: int, b: int) -> None:
    """Raise ShapeMismatchError unless the two dimension sizes are equal."""
    if a != b:
        raise ShapeMismatchError(f"{title}: {a} != {b}")
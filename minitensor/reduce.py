"""Reductions over whole tensors or along one dimension."""

from __future__ import annotations

import math
import operator
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from minitensor.tensor import Tensor, normalize_dim, numel_of


@dataclass(frozen=True)
class MaxMinResult:
    """Values and positions of the extremes found along a dimension."""

    values: Tensor
    indices: Tensor

    def __iter__(self) -> Iterator[Tensor]:
        yield self.values
        yield self.indices


def _record(result: Tensor, op: str, *inputs: Tensor) -> Tensor:
    if result.requires_grad:
        result.op = op
        result.inputs = inputs
    return result


def _lanes(tensor: Tensor, dim: int) -> Iterator[list[float]]:
    """Yield the values along ``dim`` for each output position, row-major."""
    shape = tensor.shape
    size = shape[dim]
    inner = numel_of(shape[dim + 1 :])
    outer = numel_of(shape[:dim])
    for o in range(outer):
        base = o * size * inner
        for i in range(inner):
            yield tensor.data[base + i : base + size * inner : inner]


def _reduced_shape(shape: tuple[int, ...], dim: int) -> tuple[int, ...]:
    return shape[:dim] + shape[dim + 1 :]


def reduce_dim(tensor: Tensor, dim: int, operation: str) -> Tensor:
    """Sum or average ``tensor`` along ``dim``, dropping that dimension."""
    if operation not in ("sum", "mean"):
        raise ValueError(f"unknown reduction {operation!r}")
    dim = normalize_dim(tensor.shape, dim)
    size = tensor.shape[dim]
    totals = [math.fsum(lane) for lane in _lanes(tensor, dim)]
    if operation == "mean":
        totals = [t / size for t in totals]
    return Tensor(_reduced_shape(tensor.shape, dim), totals, tensor.requires_grad)


def sum_all(tensor: Tensor) -> Tensor:
    result = Tensor((1,), [math.fsum(tensor.data)], tensor.requires_grad)
    return _record(result, "Sum", tensor)


def sum_dim(tensor: Tensor, dim: int) -> Tensor:
    return _record(reduce_dim(tensor, dim, "sum"), "Sum", tensor)


def mean_all(tensor: Tensor) -> Tensor:
    result = Tensor((1,), [math.fsum(tensor.data) / tensor.numel], tensor.requires_grad)
    return _record(result, "Mean", tensor)


def mean_dim(tensor: Tensor, dim: int) -> Tensor:
    return _record(reduce_dim(tensor, dim, "mean"), "Mean", tensor)


def max_all(tensor: Tensor) -> Tensor:
    result = Tensor((1,), [max(tensor.data)], tensor.requires_grad)
    return _record(result, "MaxAll", tensor)


def min_all(tensor: Tensor) -> Tensor:
    result = Tensor((1,), [min(tensor.data)], tensor.requires_grad)
    return _record(result, "MinAll", tensor)


def _extreme_dim(
    tensor: Tensor,
    dim: int,
    better: Callable[[float, float], bool],
    start: float,
    op: str,
) -> MaxMinResult:
    dim = normalize_dim(tensor.shape, dim)
    out_shape = _reduced_shape(tensor.shape, dim)
    best_values: list[float] = []
    best_indices: list[float] = []
    for lane in _lanes(tensor, dim):
        best_val, best_idx = start, -1
        for j, value in enumerate(lane):
            if better(value, best_val):
                best_val, best_idx = value, j
        best_values.append(best_val)
        best_indices.append(float(best_idx))
    values = Tensor(out_shape, best_values, tensor.requires_grad)
    indices = Tensor(out_shape, best_indices, False)
    _record(values, op, tensor, indices)
    return MaxMinResult(values, indices)


def max_dim(tensor: Tensor, dim: int) -> MaxMinResult:
    """Largest value along ``dim`` and the first position where it occurs."""
    return _extreme_dim(tensor, dim, operator.gt, -math.inf, "MaxDim")


def min_dim(tensor: Tensor, dim: int) -> MaxMinResult:
    """Smallest value along ``dim`` and the first position where it occurs."""
    return _extreme_dim(tensor, dim, operator.lt, math.inf, "MinDim")
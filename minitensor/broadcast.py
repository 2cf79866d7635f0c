"""Broadcasting of tensor pairs and the matching gradient reduction."""

from __future__ import annotations

import itertools
from collections.abc import Sequence

from minitensor.errors import ShapeMismatchError, assert_shape
from minitensor.reduce import reduce_dim
from minitensor.tensor import MAX_DIMS, Tensor


def broadcast_shapes(a_shape: Sequence[int], b_shape: Sequence[int]) -> tuple[int, ...]:
    """Shape that two tensors broadcast to, aligning dimensions from the right."""
    a, b = tuple(a_shape), tuple(b_shape)
    ndim = max(len(a), len(b))
    if ndim > MAX_DIMS:
        raise ShapeMismatchError(f"cannot broadcast beyond {MAX_DIMS} dimensions")
    padded_a = (1,) * (ndim - len(a)) + a
    padded_b = (1,) * (ndim - len(b)) + b
    result = []
    for x, y in zip(padded_a, padded_b):
        if x != y and x != 1 and y != 1:
            raise ShapeMismatchError(f"shapes {a} and {b} cannot be broadcast together")
        result.append(max(x, y))
    return tuple(result)


def _strides(shape: tuple[int, ...]) -> tuple[int, ...]:
    strides = []
    step = 1
    for size in reversed(shape):
        strides.append(step)
        step *= size
    return tuple(reversed(strides))


def _expand(tensor: Tensor, shape: tuple[int, ...]) -> Tensor:
    pad = len(shape) - tensor.ndim
    effective = (0,) * pad + tuple(
        0 if size == 1 else stride for size, stride in zip(tensor.shape, _strides(tensor.shape))
    )
    source = tensor.data
    values = [
        source[sum(i * s for i, s in zip(index, effective))]
        for index in itertools.product(*(range(d) for d in shape))
    ]
    return Tensor(shape, values, tensor.requires_grad)


def broadcast_pair(a: Tensor, b: Tensor) -> tuple[Tensor, Tensor]:
    """Expand both tensors to their common shape.

    A tensor that already has that shape is returned unchanged.
    """
    shape = broadcast_shapes(a.shape, b.shape)
    expanded_a = a if a.shape == shape else _expand(a, shape)
    expanded_b = b if b.shape == shape else _expand(b, shape)
    return expanded_a, expanded_b


def reduce_gradient_for_broadcasting(
    grad: Tensor,
    original_shape: Sequence[int],
    broadcasted_shape: Sequence[int],
) -> Tensor:
    """Sum a gradient of the broadcast shape back down to the original shape."""
    original = tuple(original_shape)
    broadcasted = tuple(broadcasted_shape)
    assert_shape("reduce_gradient_for_broadcasting", grad.shape, broadcasted)
    if len(original) > len(broadcasted) or broadcast_shapes(original, broadcasted) != broadcasted:
        raise ShapeMismatchError(
            f"unexpected broadcasting pattern: {original} -> {broadcasted}"
        )

    result = grad
    for _ in range(len(broadcasted) - len(original)):
        result = reduce_dim(result, 0, "sum")
    for dim in reversed(range(len(original))):
        if original[dim] == 1 and result.shape[dim] > 1:
            result = reduce_dim(result, dim, "sum").unsqueeze(dim)

    if result is grad:
        return grad
    return Tensor(result.shape, result.data, requires_grad=False)
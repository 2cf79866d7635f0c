"""A small dense float tensor of up to four dimensions, stored row-major."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Any

from minitensor.errors import ShapeMismatchError, TensorError

MAX_DIMS = 4


def numel_of(shape: Sequence[int]) -> int:
    """Number of elements held by a tensor of the given shape."""
    return math.prod(shape)


def normalize_dim(shape: Sequence[int], dim: int) -> int:
    """Turn a possibly negative dimension index into a valid positive one."""
    ndim = len(shape)
    if not -ndim <= dim < ndim:
        raise TensorError(f"dim {dim} out of range for {ndim}-dimensional shape")
    return dim + ndim if dim < 0 else dim


def _check_shape(shape: Iterable[int]) -> tuple[int, ...]:
    result = tuple(int(d) for d in shape)
    if len(result) > MAX_DIMS:
        raise TensorError(f"at most {MAX_DIMS} dimensions are supported, got {len(result)}")
    if any(d <= 0 for d in result):
        raise TensorError(f"dimensions must be positive, got {result}")
    return result


class Tensor:
    """Dense float tensor with an optional gradient and graph record."""

    def __init__(
        self,
        shape: Iterable[int],
        data: Iterable[float] | None = None,
        requires_grad: bool = False,
    ) -> None:
        self.shape = _check_shape(shape)
        count = numel_of(self.shape)
        if data is None:
            values = [0.0] * count
        else:
            values = [float(v) for v in data]
            if len(values) != count:
                raise ShapeMismatchError(
                    f"shape {self.shape} needs {count} values, got {len(values)}"
                )
        self.data: list[float] = values
        self.requires_grad = bool(requires_grad)
        self.grad: Tensor | None = None
        self.op: str | None = None
        self.inputs: tuple[Tensor, ...] = ()

    @classmethod
    def zeros(cls, shape: Iterable[int], requires_grad: bool = False) -> Tensor:
        return cls.full(shape, 0.0, requires_grad)

    @classmethod
    def ones(cls, shape: Iterable[int], requires_grad: bool = False) -> Tensor:
        return cls.full(shape, 1.0, requires_grad)

    @classmethod
    def full(cls, shape: Iterable[int], value: float, requires_grad: bool = False) -> Tensor:
        checked = _check_shape(shape)
        return cls(checked, [float(value)] * numel_of(checked), requires_grad)

    @property
    def ndim(self) -> int:
        return len(self.shape)

    @property
    def numel(self) -> int:
        return len(self.data)

    def unsqueeze(self, dim: int) -> Tensor:
        """Return a view with a size-one dimension inserted at ``dim``.

        The view shares its data list with this tensor.
        """
        if not 0 <= dim <= self.ndim:
            raise TensorError(f"unsqueeze dim {dim} out of bounds for {self.ndim} dimensions")
        new_shape = _check_shape(self.shape[:dim] + (1,) + self.shape[dim:])
        view = Tensor.__new__(Tensor)
        view.shape = new_shape
        view.data = self.data
        view.requires_grad = self.requires_grad
        view.grad = self.grad
        view.op = self.op
        view.inputs = self.inputs
        return view

    def tolist(self) -> Any:
        """Nested lists of the values, or a float for a scalar tensor."""
        if not self.shape:
            return self.data[0]

        def build(offset: int, dims: tuple[int, ...]) -> list[Any]:
            if len(dims) == 1:
                return self.data[offset : offset + dims[0]]
            step = numel_of(dims[1:])
            return [build(offset + k * step, dims[1:]) for k in range(dims[0])]

        return build(0, self.shape)

    def __repr__(self) -> str:
        return (
            f"Tensor(shape={self.shape}, data={self.tolist()!r}, "
            f"requires_grad={self.requires_grad})"
        )
"""Gradient clipping for collections of parameter tensors."""

from __future__ import annotations

import math
from collections.abc import Iterable

from minitensor.tensor import Tensor


def _grads(params: Iterable[Tensor]) -> list[Tensor]:
    return [p.grad for p in params if p.grad is not None]


def _clip_all(params: Iterable[Tensor], min_value: float, max_value: float) -> int:
    clipped = 0
    for grad in _grads(params):
        new_values = []
        for g in grad.data:
            if g > max_value:
                new_values.append(max_value)
                clipped += 1
            elif g < min_value:
                new_values.append(min_value)
                clipped += 1
            else:
                new_values.append(g)
        grad.data[:] = new_values
    return clipped


def clip_grad_norm(params: Iterable[Tensor], max_norm: float) -> float:
    """Scale all gradients so their joint L2 norm is at most ``max_norm``.

    Returns the norm before scaling. A non-positive ``max_norm`` leaves the
    gradients untouched.
    """
    grads = _grads(params)
    total = math.sqrt(math.fsum(g * g for grad in grads for g in grad.data))
    if max_norm > 0 and total > max_norm:
        scale = max_norm / total
        for grad in grads:
            grad.data[:] = [g * scale for g in grad.data]
    return total


def clip_grad_value(params: Iterable[Tensor], max_value: float) -> int:
    """Clamp gradients into [-max_value, max_value]; returns how many changed."""
    return clip_grad_value_range(params, -max_value, max_value)


def clip_grad_value_range(params: Iterable[Tensor], min_value: float, max_value: float) -> int:
    """Clamp gradients into [min_value, max_value]; returns how many changed."""
    if min_value > max_value:
        raise ValueError("min_value must be less than or equal to max_value")
    return _clip_all(params, min_value, max_value)


def clip_grad_positive(params: Iterable[Tensor], max_value: float) -> int:
    """Cap gradients above at ``max_value``; returns how many changed."""
    return _clip_all(params, -math.inf, max_value)


def clip_grad_negative(params: Iterable[Tensor], min_value: float) -> int:
    """Cap gradients below at ``min_value``; returns how many changed."""
    return _clip_all(params, min_value, math.inf)
# minitensor

A small pure-Python tensor library with no dependencies. A `Tensor` holds
float values in row-major order in a plain list and has at most four
dimensions, each of positive size.

## Modules

- `minitensor.tensor`
  - `Tensor(shape, data=None, requires_grad=False)`: builds a tensor; `data`
    must hold exactly as many values as the shape needs, and defaults to
    zeros. Each tensor carries `shape`, `data`, `requires_grad`, `grad`, `op`
    and `inputs`.
  - `Tensor.zeros`, `Tensor.ones`, `Tensor.full(shape, value, requires_grad)`.
  - `ndim` and `numel` properties, `unsqueeze(dim)` (a view that shares the
    data list) and `tolist()` (nested lists).
  - `normalize_dim(shape, dim)` turns a negative dimension into a positive
    one; `numel_of(shape)` gives the element count of a shape.
- `minitensor.reduce`
  - `sum_all`, `mean_all`, `max_all`, `min_all` return a tensor of shape `(1,)`.
  - `sum_dim`, `mean_dim` and the general `reduce_dim(tensor, dim, operation)`
    (`operation` is `"sum"` or `"mean"`) drop the reduced dimension.
  - `max_dim` and `min_dim` return a `MaxMinResult` with `values` and
    `indices` (the first position of the extreme, stored as floats); it can
    be unpacked as `values, indices = max_dim(t, 1)`.
  - When the input has `requires_grad`, the result records the operation
    name in `op` and its operands in `inputs`.
- `minitensor.broadcast`
  - `broadcast_shapes(a_shape, b_shape)` gives the common shape, aligning
    dimensions from the right.
  - `broadcast_pair(a, b)` expands both tensors to that shape; a tensor that
    already has it is returned unchanged.
  - `reduce_gradient_for_broadcasting(grad, original_shape, broadcasted_shape)`
    sums a gradient of the broadcast shape back down to the original shape.
- `minitensor.clip` (each changes the `grad` of the given tensors in place;
  tensors without a `grad` are skipped)
  - `clip_grad_norm(params, max_norm)` scales the gradients so their joint L2
    norm is at most `max_norm` and returns the norm before scaling; a
    non-positive `max_norm` changes nothing.
  - `clip_grad_value`, `clip_grad_value_range`, `clip_grad_positive` and
    `clip_grad_negative` clamp values and return how many were changed.
- `minitensor.dataset`
  - `normalize_dataset(samples, n_train_samples)` standardises every feature
    with the mean and population deviation of the first `n_train_samples`
    rows and returns new rows; a feature with zero deviation is only centred.
  - `shuffle_dataset(samples, labels, rng=None)` applies one random
    permutation to both, using the given `random.Random` if any.
- `minitensor.errors`: `TensorError`, `ShapeMismatchError` (also a
  `ValueError`), `assert_shape` and `assert_dim`.

## Install

```
pip install .
```

## Example

```python
from minitensor.tensor import Tensor
from minitensor.reduce import sum_dim, max_dim
from minitensor.broadcast import broadcast_pair

t = Tensor((2, 3), [1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
print(sum_dim(t, 0).tolist())      # [5.0, 7.0, 9.0]

result = max_dim(t, 1)
print(result.values.tolist())      # [3.0, 6.0]
print(result.indices.tolist())     # [2.0, 2.0]

row = Tensor((1, 3), [10.0, 20.0, 30.0])
a, b = broadcast_pair(t, row)
print(b.shape)                     # (2, 3)
```

An out-of-range dimension raises `TensorError`; shapes that disagree or
cannot be broadcast raise `ShapeMismatchError`. `reduce_dim` with an unknown
operation, `clip_grad_value_range` with `min_value > max_value` and the
dataset helpers with inconsistent input raise `ValueError`.

## What it does not do

There are no element-wise arithmetic operations, no matrix multiplication,
no neural-network layers or optimisers, and no backward pass: results only
record `op` and `inputs`, and `grad` is set by the caller. There is no
command-line program.

## Tests

```
pip install .[test]
pytest
```
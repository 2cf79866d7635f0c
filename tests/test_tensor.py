import pytest

from minitensor.errors import ShapeMismatchError, TensorError
from minitensor.tensor import Tensor, normalize_dim, numel_of


def test_zeros_has_one_zero_per_element():
    t = Tensor.zeros((2, 3, 4))
    assert t.shape == (2, 3, 4)
    assert t.numel == numel_of((2, 3, 4))
    assert set(t.data) == {0.0}


def test_ones_and_full():
    assert set(Tensor.ones((3, 2)).data) == {1.0}
    t = Tensor.full((2, 2), 2.5, requires_grad=True)
    assert t.data == [2.5] * t.numel
    assert t.requires_grad


def test_numel_of_matches_source_test_sizes():
    assert numel_of((2, 3, 4)) == 24
    assert numel_of(()) == 1


def test_scalar_shape_holds_one_value():
    t = Tensor((), [7.0])
    assert t.ndim == 0
    assert t.numel == 1
    assert t.tolist() == 7.0


def test_wrong_data_length_raises():
    with pytest.raises(ShapeMismatchError):
        Tensor((2, 2), [1.0, 2.0, 3.0])


def test_too_many_dimensions_raises():
    with pytest.raises(TensorError):
        Tensor.zeros((1, 1, 1, 1, 1))


def test_non_positive_dimension_raises():
    with pytest.raises(TensorError):
        Tensor.zeros((2, 0))


def test_normalize_dim_handles_negative_values():
    assert normalize_dim((2, 3, 4), -1) == 2
    assert normalize_dim((2, 3, 4), 1) == 1
    assert normalize_dim((2, 3, 4), -3) == 0


@pytest.mark.parametrize("dim", [3, -4])
def test_normalize_dim_out_of_range(dim):
    with pytest.raises(TensorError):
        normalize_dim((2, 3, 4), dim)


def test_unsqueeze_inserts_size_one_dimension():
    t = Tensor((2, 3), range(6))
    assert t.unsqueeze(0).shape == (1, 2, 3)
    assert t.unsqueeze(1).shape == (2, 1, 3)
    assert t.unsqueeze(2).shape == (2, 3, 1)


def test_unsqueeze_shares_data():
    t = Tensor((2,), [1.0, 2.0])
    view = t.unsqueeze(0)
    t.data[0] = 9.0
    assert view.data[0] == 9.0
    assert view.tolist() == [[9.0, 2.0]]


def test_unsqueeze_rejects_bad_dim():
    t = Tensor.zeros((2, 3))
    with pytest.raises(TensorError):
        t.unsqueeze(3)
    with pytest.raises(TensorError):
        t.unsqueeze(-1)


def test_unsqueeze_beyond_four_dimensions_raises():
    with pytest.raises(TensorError):
        Tensor.zeros((1, 2, 3, 4)).unsqueeze(0)


def test_tolist_nests_row_major():
    t = Tensor((2, 3), [1, 2, 3, 4, 5, 6])
    assert t.tolist() == [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]


def test_new_tensor_has_no_grad_or_graph():
    t = Tensor.ones((2,), requires_grad=True)
    assert t.grad is None
    assert t.op is None
    assert t.inputs == ()
from dataclasses import dataclass

import pytest
import torch

from gravfield.utils import as_position_tensor


@dataclass
class CartesianState:
    position: torch.Tensor
    velocity: torch.Tensor


def test_as_position_tensor_from_sequence():
    position = as_position_tensor([1., 2., 3.])
    assert position.dtype == torch.float64
    assert torch.equal(position,
                       torch.tensor([1., 2., 3.], dtype=torch.float64))


def test_as_position_tensor_from_state():
    state = CartesianState(
        position=torch.tensor([7000e3, 0., 0.], dtype=torch.float64),
        velocity=torch.tensor([0., 7.5e3, 0.], dtype=torch.float64),
    )
    position = as_position_tensor(state)
    assert torch.equal(position, state.position)


def test_as_position_tensor_keeps_batch_shape():
    position = as_position_tensor(torch.rand(4, 5, 3))
    assert position.shape == (4, 5, 3)


@pytest.mark.parametrize('point', [
    [1., 2.],
    1.,
    torch.zeros(3, 2),
])
def test_as_position_tensor_rejects_bad_shape(point):
    with pytest.raises(ValueError):
        as_position_tensor(point)

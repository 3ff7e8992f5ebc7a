__all__ = ['PositionLike', 'as_position_tensor']
from typing import Sequence

import torch
from torch import Tensor

# Objects exposing a ``position`` attribute are accepted as well.
PositionLike = Tensor | Sequence[float]


def as_position_tensor(
    point: PositionLike,
    *,
    dtype: torch.dtype = torch.float64,
    device: torch.device | str | None = None,
) -> Tensor:
    """
    Convert a query point into a position tensor.

    Args:
        point: A tensor of shape [..., 3], a nested sequence convertible by
            ``torch.as_tensor``, or a state object exposing a ``position``
            attribute holding one of those.
        dtype: Target dtype of the returned tensor.
        device: Target device of the returned tensor.

    Returns:
        Tensor: Position tensor with shape [..., 3].

    Raises:
        ValueError: If the last dimension is not of size 3.
    """
    position = getattr(point, 'position', point)
    position = torch.as_tensor(position, dtype=dtype, device=device)
    if position.dim() == 0 or position.shape[-1] != 3:
        raise ValueError(
            f"Position last dim must be of shape [3], got {position.shape}")
    return position

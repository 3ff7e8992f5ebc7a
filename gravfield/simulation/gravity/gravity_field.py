__all__ = [
    'DegenerateGeometryError',
    'GravityFieldModel',
    'CentralGravityField',
    'CentralGravityFieldConfig',
]
import logging
from abc import ABC, abstractmethod
from typing import Self, Sequence

import torch
from torch import Tensor, nn
from typing_extensions import TypedDict

from gravfield.utils import PositionLike, as_position_tensor

from .predefined_gravity_fields import (PREDEFINED_CENTRAL_GRAVITY_FIELDS,
                                        PredefinedCentralGravityField,
                                        PredefinedFieldResult,
                                        resolve_identifier)

logger = logging.getLogger(__name__)


class DegenerateGeometryError(ValueError):
    """Raised when a query point coincides with the origin of the field."""


class CentralGravityFieldConfig(TypedDict):
    gravitational_parameter: float
    origin: list[float]
    raise_on_degenerate: bool


class GravityFieldModel(nn.Module, ABC):
    """
    Base class of gravity field models.

    Holds the gravitational parameter and the origin of the field. The origin
    is kept as a non-persistent float64 buffer so that ``model.to(device)``
    moves it along with the model.
    """

    def __init__(
        self,
        *args,
        gravitational_parameter: float = 0.0,
        origin: Tensor | Sequence[float] | None = None,
        raise_on_degenerate: bool = False,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.register_buffer(
            '_origin',
            torch.zeros(3, dtype=torch.float64),
            persistent=False,
        )
        self.gravitational_parameter = gravitational_parameter
        if origin is not None:
            self.origin = origin
        self._raise_on_degenerate = bool(raise_on_degenerate)

    @property
    def gravitational_parameter(self) -> float:
        return self._gravitational_parameter

    @gravitational_parameter.setter
    def gravitational_parameter(self, value: float) -> None:
        self._gravitational_parameter = float(value)

    @property
    def origin(self) -> Tensor:
        return self.get_buffer('_origin').detach().clone()

    @origin.setter
    def origin(self, value: Tensor | Sequence[float]) -> None:
        origin = self.get_buffer('_origin')
        value = torch.as_tensor(value,
                                dtype=origin.dtype,
                                device=origin.device)
        if value.shape != (3, ):
            raise ValueError(
                f"Origin must be of shape [3], got {value.shape}")
        self._origin = value.clone()

    @property
    def raise_on_degenerate(self) -> bool:
        return self._raise_on_degenerate

    def relative_position(self, point: PositionLike) -> Tensor:
        """Position of ``point`` with respect to the origin, shape [..., 3]."""
        origin = self.get_buffer('_origin')
        position = as_position_tensor(point,
                                      dtype=origin.dtype,
                                      device=origin.device)
        relative_position = position - origin
        if self._raise_on_degenerate:
            distance = torch.norm(relative_position, dim=-1)
            if bool((distance == 0.).any()):
                raise DegenerateGeometryError(
                    "Query point coincides with the origin of the gravity field"
                )
        return relative_position

    @abstractmethod
    def get_potential(self, point: PositionLike) -> Tensor:
        """
        Args:
            point: Query position with shape [..., 3].

        Returns:
            Tensor: Gravitational potential with shape [...].
        """
        pass

    @abstractmethod
    def get_gradient_of_potential(self, point: PositionLike) -> Tensor:
        """
        Args:
            point: Query position with shape [..., 3].

        Returns:
            Tensor: Gradient of the potential (gravitational acceleration)
                with shape [..., 3].
        """
        pass

    @abstractmethod
    def get_gradient_tensor_of_potential(self, point: PositionLike) -> Tensor:
        """
        Args:
            point: Query position with shape [..., 3].

        Returns:
            Tensor: Gradient tensor of the potential with shape [..., 3, 3].
        """
        pass

    def forward(self, point: PositionLike) -> Tensor:
        """Gravitational acceleration at ``point``, for use by integrators."""
        return self.get_gradient_of_potential(point)


class CentralGravityField(GravityFieldModel):
    """
    Point mass gravity field.

    The potential follows the sign convention U = mu / r, so that the
    gradient of the potential is the gravitational acceleration.
    """

    def set_predefined_gravity_field(
        self,
        identifier: PredefinedCentralGravityField | str,
    ) -> PredefinedFieldResult:
        body = resolve_identifier(PredefinedCentralGravityField, identifier)
        if body is None:
            logger.error(
                "Desired predefined central gravity field %r does not exist.",
                identifier,
            )
            return PredefinedFieldResult.UNKNOWN_IDENTIFIER

        settings = PREDEFINED_CENTRAL_GRAVITY_FIELDS[body]
        self.gravitational_parameter = settings['gravitational_parameter']
        logger.debug("Applied predefined central gravity field %s",
                     body.value)
        return PredefinedFieldResult.OK

    @classmethod
    def from_predefined(
        cls,
        identifier: PredefinedCentralGravityField | str,
        **kwargs,
    ) -> Self:
        model = cls(**kwargs)
        result = model.set_predefined_gravity_field(identifier)
        if result is PredefinedFieldResult.UNKNOWN_IDENTIFIER:
            raise ValueError(
                f"Unknown predefined gravity field: {identifier!r}")
        return model

    @property
    def config(self) -> CentralGravityFieldConfig:
        return CentralGravityFieldConfig(
            gravitational_parameter=self.gravitational_parameter,
            origin=self.origin.tolist(),
            raise_on_degenerate=self.raise_on_degenerate,
        )

    @classmethod
    def from_config(cls, config: CentralGravityFieldConfig, **kwargs) -> Self:
        return cls(**config, **kwargs)

    def get_potential(self, point: PositionLike) -> Tensor:
        relative_position = self.relative_position(point)
        return self.gravitational_parameter / torch.norm(relative_position,
                                                         dim=-1)

    def get_gradient_of_potential(self, point: PositionLike) -> Tensor:
        relative_position = self.relative_position(point)
        r = torch.norm(relative_position, dim=-1, keepdim=True)
        return -self.gravitational_parameter * relative_position / (r**3)

    def get_gradient_tensor_of_potential(self, point: PositionLike) -> Tensor:
        relative_position = self.relative_position(point)
        r = torch.norm(relative_position, dim=-1, keepdim=True).unsqueeze(-1)
        squared_norm = torch.sum(relative_position**2, dim=-1,
                                 keepdim=True).unsqueeze(-1)
        outer = torch.einsum('... i, ... j -> ... i j', relative_position,
                             relative_position)
        identity = torch.eye(3,
                             dtype=relative_position.dtype,
                             device=relative_position.device)
        return self.gravitational_parameter / (r**5) * (
            3.0 * outer - squared_norm * identity)

    def __str__(self) -> str:
        return '\n'.join([
            f"This is a {type(self).__name__} object.",
            f"The gravitational parameter is set to: "
            f"{self.gravitational_parameter}",
            f"The origin of the gravity field is set to: "
            f"{self.origin.tolist()}",
        ])

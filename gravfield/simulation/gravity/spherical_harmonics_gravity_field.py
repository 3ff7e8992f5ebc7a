__all__ = [
    'SphericalHarmonicsGravityField',
    'SphericalHarmonicsGravityFieldConfig',
]
import logging
import operator

from .gravity_field import CentralGravityField, CentralGravityFieldConfig
from .predefined_gravity_fields import (
    PREDEFINED_SPHERICAL_HARMONICS_GRAVITY_FIELDS,
    PredefinedFieldResult, PredefinedSphericalHarmonicsGravityField,
    resolve_identifier)

logger = logging.getLogger(__name__)


class SphericalHarmonicsGravityFieldConfig(CentralGravityFieldConfig):
    reference_radius: float
    degree_of_expansion: int
    order_of_expansion: int
    j2_coefficient: float
    j3_coefficient: float
    j4_coefficient: float


class SphericalHarmonicsGravityField(CentralGravityField):
    """
    Spherical harmonics gravity field.

    Stores the reference radius, the degree and order of the expansion and
    the J2, J3 and J4 zonal coefficients, but the potential, its gradient and
    its gradient tensor are evaluated with the point mass (degree 0) terms
    only. The higher degree settings are carried along for models that
    extend the expansion.

    Predefined Earth fields (WGS-72, WGS-84) are taken from Vallado et al.,
    Revisiting Spacetrack Report #3 (2006).
    """

    def __init__(
        self,
        *args,
        reference_radius: float = 0.0,
        degree_of_expansion: int = 0,
        order_of_expansion: int = 0,
        j2_coefficient: float = 0.0,
        j3_coefficient: float = 0.0,
        j4_coefficient: float = 0.0,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.reference_radius = reference_radius
        self.degree_of_expansion = degree_of_expansion
        self.order_of_expansion = order_of_expansion
        self._set_zonal_coefficients(j2_coefficient, j3_coefficient,
                                     j4_coefficient)

    @property
    def reference_radius(self) -> float:
        return self._reference_radius

    @reference_radius.setter
    def reference_radius(self, value: float) -> None:
        self._reference_radius = float(value)

    @property
    def degree_of_expansion(self) -> int:
        return self._degree_of_expansion

    @degree_of_expansion.setter
    def degree_of_expansion(self, value: int) -> None:
        self._degree_of_expansion = _non_negative_int(value,
                                                      'degree_of_expansion')

    @property
    def order_of_expansion(self) -> int:
        return self._order_of_expansion

    @order_of_expansion.setter
    def order_of_expansion(self, value: int) -> None:
        self._order_of_expansion = _non_negative_int(value,
                                                     'order_of_expansion')

    @property
    def j2_coefficient(self) -> float:
        return self._j2_coefficient

    @property
    def j3_coefficient(self) -> float:
        return self._j3_coefficient

    @property
    def j4_coefficient(self) -> float:
        return self._j4_coefficient

    def _set_zonal_coefficients(self, j2: float, j3: float, j4: float) -> None:
        self._j2_coefficient = float(j2)
        self._j3_coefficient = float(j3)
        self._j4_coefficient = float(j4)

    def set_predefined_gravity_field(
        self,
        identifier: PredefinedSphericalHarmonicsGravityField | str,
    ) -> PredefinedFieldResult:
        """
        Overwrite the gravitational parameter, reference radius and J2, J3, J4
        coefficients with the values of a predefined body.

        Degree, order and origin are left as they are. An unknown identifier
        is logged and leaves every field unchanged.

        Returns:
            PredefinedFieldResult: ``OK`` when the field was applied,
                ``UNKNOWN_IDENTIFIER`` otherwise.
        """
        body = resolve_identifier(PredefinedSphericalHarmonicsGravityField,
                                  identifier)
        if body is None:
            logger.error(
                "Desired predefined spherical harmonics gravity field %r "
                "does not exist.",
                identifier,
            )
            return PredefinedFieldResult.UNKNOWN_IDENTIFIER

        settings = PREDEFINED_SPHERICAL_HARMONICS_GRAVITY_FIELDS[body]
        self.gravitational_parameter = settings['gravitational_parameter']
        self.reference_radius = settings['reference_radius']
        self._set_zonal_coefficients(
            settings['j2_coefficient'],
            settings['j3_coefficient'],
            settings['j4_coefficient'],
        )
        logger.debug("Applied predefined spherical harmonics gravity field %s",
                     body.value)
        return PredefinedFieldResult.OK

    @property
    def config(self) -> SphericalHarmonicsGravityFieldConfig:
        return SphericalHarmonicsGravityFieldConfig(
            **super().config,
            reference_radius=self.reference_radius,
            degree_of_expansion=self.degree_of_expansion,
            order_of_expansion=self.order_of_expansion,
            j2_coefficient=self.j2_coefficient,
            j3_coefficient=self.j3_coefficient,
            j4_coefficient=self.j4_coefficient,
        )

    def __str__(self) -> str:
        return '\n'.join([
            super().__str__(),
            f"The degree of expansion of the spherical harmonics series is "
            f"set to: {self.degree_of_expansion}",
            f"The order of expansion of the spherical harmonics series is "
            f"set to: {self.order_of_expansion}",
            f"The reference radius is set to: {self.reference_radius}",
        ])


def _non_negative_int(value: int, name: str) -> int:
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value

__all__ = [
    'PredefinedFieldResult',
    'PredefinedCentralGravityField',
    'PredefinedSphericalHarmonicsGravityField',
    'CentralGravityFieldSettings',
    'SphericalHarmonicsGravityFieldSettings',
    'PREDEFINED_CENTRAL_GRAVITY_FIELDS',
    'PREDEFINED_SPHERICAL_HARMONICS_GRAVITY_FIELDS',
    'resolve_identifier',
]
from enum import Enum
from typing import TypeVar

from typing_extensions import TypedDict

from gravfield.architecture import constants


class PredefinedFieldResult(Enum):
    OK = 'ok'
    UNKNOWN_IDENTIFIER = 'unknown-identifier'


class PredefinedCentralGravityField(str, Enum):
    SUN = 'sun'
    EARTH = 'earth'
    MOON = 'moon'


class PredefinedSphericalHarmonicsGravityField(str, Enum):
    EARTH_WGS72 = 'earth-wgs72'
    EARTH_WGS84 = 'earth-wgs84'


class CentralGravityFieldSettings(TypedDict):
    gravitational_parameter: float  # [m^3 s^-2]


class SphericalHarmonicsGravityFieldSettings(CentralGravityFieldSettings):
    reference_radius: float  # [m]
    j2_coefficient: float
    j3_coefficient: float
    j4_coefficient: float


PREDEFINED_CENTRAL_GRAVITY_FIELDS: dict[PredefinedCentralGravityField,
                                        CentralGravityFieldSettings] = {
    PredefinedCentralGravityField.SUN:
    CentralGravityFieldSettings(
        gravitational_parameter=constants.MU_SUN * constants.KM3_TO_M3),
    PredefinedCentralGravityField.EARTH:
    CentralGravityFieldSettings(
        gravitational_parameter=constants.MU_EARTH * constants.KM3_TO_M3),
    PredefinedCentralGravityField.MOON:
    CentralGravityFieldSettings(
        gravitational_parameter=constants.MU_MOON * constants.KM3_TO_M3),
}

# Vallado, D. A., Crawford, P., Hujsak, R., & Kelso, T. Revisiting Spacetrack
# Report #3: Rev 1, AIAA/AAS Astrodynamics Specialist Conference, 2006.
PREDEFINED_SPHERICAL_HARMONICS_GRAVITY_FIELDS: dict[
    PredefinedSphericalHarmonicsGravityField,
    SphericalHarmonicsGravityFieldSettings] = {
        # Table 2
        PredefinedSphericalHarmonicsGravityField.EARTH_WGS72:
        SphericalHarmonicsGravityFieldSettings(
            gravitational_parameter=398600.8e9,
            reference_radius=6378.135e3,
            j2_coefficient=0.001082616,
            j3_coefficient=-0.00000253881,
            j4_coefficient=-0.00000165597,
        ),
        # Table 3
        PredefinedSphericalHarmonicsGravityField.EARTH_WGS84:
        SphericalHarmonicsGravityFieldSettings(
            gravitational_parameter=398600.4418e9,
            reference_radius=6378.137e3,
            j2_coefficient=0.00108262998905,
            j3_coefficient=-0.00000253215306,
            j4_coefficient=-0.00000161098761,
        ),
    }

E = TypeVar('E', bound=Enum)


def resolve_identifier(enum_type: type[E], identifier: E | str) -> E | None:
    """Return the enum member named by ``identifier``, or None if unknown."""
    try:
        return enum_type(identifier)
    except ValueError:
        return None

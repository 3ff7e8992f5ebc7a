__all__ = [
    'KM3_TO_M3',
    'MU_SUN',
    'MU_EARTH',
    'MU_MOON',
]

# Unit conversion
KM3_TO_M3 = 1e9

# Celestial Body
# Gm. All units are km^3/s^2.

MU_SUN = 132712440023.310
MU_EARTH = 398600.436
MU_MOON = 4902.800066

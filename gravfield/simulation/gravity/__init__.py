from .predefined_gravity_fields import *
from .gravity_field import *
from .spherical_harmonics_gravity_field import *

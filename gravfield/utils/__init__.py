from .position_support import *

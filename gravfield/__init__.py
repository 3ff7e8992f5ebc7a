from .logging_config import setup_logging
from .simulation.gravity import *

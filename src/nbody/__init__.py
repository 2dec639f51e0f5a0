from nbody.errors import NBodyError, InvalidArgument
from nbody.helpers import Vec3, Body, sum_squares, magnitude
from nbody.backends import Backend, cpu
from nbody.frontends import Frontend, SimulationResult, headless

__version__ = '0.1.0'

from nbody.backends.backend import Backend
from nbody.backends import cpu

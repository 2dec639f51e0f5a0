from nbody.frontends.frontend import Frontend, SimulationResult
from nbody.frontends import headless

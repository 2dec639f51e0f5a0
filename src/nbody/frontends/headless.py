import sys

from loguru import logger
from tqdm import tqdm

from nbody.backends import Backend
from nbody.frontends.frontend import Frontend as BaseFrontend, SimulationResult


class Frontend(BaseFrontend):

    def __init__(self, backend: Backend, progress: bool = False):
        super().__init__(backend)
        self.progress = progress

    def simulate(self, steps: int) -> SimulationResult:
        initial_energy = self.backend.energy()
        logger.info(f'Starting simulation: {steps} steps, dt = {self.backend.config["dt"]}')

        for _ in tqdm(range(steps), disable=not self.progress, file=sys.stderr, unit='step'):
            self.backend.step()

        final_energy = self.backend.energy()
        logger.info(f'Simulation finished, energy drift {final_energy - initial_energy:.3e}')
        return SimulationResult(steps, initial_energy, final_energy)

from abc import ABC, abstractmethod
from typing import NamedTuple

from prettytable import PrettyTable

from nbody.backends import Backend


class SimulationResult(NamedTuple):
    steps: int
    initial_energy: float
    final_energy: float

    @property
    def drift(self) -> float:
        return self.final_energy - self.initial_energy


class Frontend(ABC):

    def __init__(self, backend: Backend):
        super().__init__()
        self.backend = backend

    @abstractmethod
    def simulate(self, steps: int) -> SimulationResult:
        raise NotImplementedError

    def summary_table(self) -> PrettyTable:
        table = PrettyTable()
        table.field_names = ["Body", "Mass", "Position", "Velocity"]
        table.align = "l"
        names = getattr(self.backend, 'names', None) or [str(i) for i in range(len(self.backend.bodies))]
        for name, body in zip(names, self.backend.bodies):
            table.add_row([
                name,
                f"{body.mass:.6e}",
                " ".join(f"{c: .6f}" for c in body.position),
                " ".join(f"{c: .6f}" for c in body.velocity),
            ])
        return table

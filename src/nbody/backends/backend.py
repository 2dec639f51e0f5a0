from abc import ABC, abstractmethod
from typing import List

from nbody.config import validate_config
from nbody.helpers import Body, Vec3


class Backend(ABC):

    def __init__(self, device: str, config: dict):
        super().__init__()

        self.device = device
        self.config = validate_config(config)

    @property
    @abstractmethod
    def bodies(self) -> List[Body]:
        raise NotImplementedError

    @abstractmethod
    def advance(self, dt: float) -> None:
        raise NotImplementedError

    @abstractmethod
    def energy(self) -> float:
        raise NotImplementedError

    def momentum(self) -> Vec3:
        p = Vec3()
        for body in self.bodies:
            p += body.momentum()
        return p

    def step(self) -> None:
        self.advance(self.config['dt'])

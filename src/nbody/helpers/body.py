from typing import Iterable
from nbody.helpers.vector import Vec3


class Body:
    def __init__(self, mass: float, position: Iterable[float], velocity: Iterable[float]):
        self.mass = float(mass)
        self.position = Vec3.from_iterable(position)
        self.velocity = Vec3.from_iterable(velocity)

    def momentum(self) -> Vec3:
        return self.velocity * self.mass

    def offset_momentum(self, p: Vec3) -> None:
        # cancels p so the system momentum sums to zero
        self.velocity = p * (-1.0 / self.mass)

    def __repr__(self):
        return f'M:{self.mass} P:{list(self.position)}  V: {list(self.velocity)}'

"""
Five body system integrated on the CPU, one pair at a time.

``advance`` runs in separate phases over the 10 unordered pairs: all
displacements are taken from the pre-step positions, then one coefficient is
computed per pair, then velocities are updated symmetrically, and only after
that are positions moved. No body ever sees a partially updated neighbour within
a step.

Scalar evaluation order follows the reference kernel exactly; changing it
changes the last bits of the reported energies.
"""
import math
from typing import List, Optional, Tuple

from loguru import logger

from nbody.backends.backend import Backend as BaseBackend
from nbody.config import default_config
from nbody.constants import BODIES_COUNT, CANONICAL_BODIES, INTERACTIONS
from nbody.helpers import Body, Vec3, magnitude, sum_squares

PAIRS: Tuple[Tuple[int, int], ...] = tuple(
    (i, j) for i in range(BODIES_COUNT) for j in range(i + 1, BODIES_COUNT)
)
assert len(PAIRS) == INTERACTIONS


class Backend(BaseBackend):

    def __init__(self, config: Optional[dict] = None):
        super().__init__(device='cpu', config=config if config is not None else default_config())

        self._bodies = [Body(r.mass, r.position, r.velocity) for r in CANONICAL_BODIES]
        self.names = [r.name for r in CANONICAL_BODIES]

        p = Vec3()
        for body in self._bodies:
            p += body.velocity * body.mass
        self._bodies[0].offset_momentum(p)

        logger.debug(f'{self.device} backend ready with {len(self._bodies)} bodies, {len(PAIRS)} pairs')

    @property
    def bodies(self) -> List[Body]:
        return self._bodies

    @property
    def pairs(self) -> Tuple[Tuple[int, int], ...]:
        return PAIRS

    def advance(self, dt: float) -> None:
        bodies = self._bodies

        d_positions = [bodies[i].position - bodies[j].position for i, j in PAIRS]
        magnitudes = [magnitude(d, dt) for d in d_positions]

        for (i, j), d_pos, mag in zip(PAIRS, d_positions, magnitudes):
            bodies[i].velocity -= d_pos * (bodies[j].mass * mag)
            bodies[j].velocity += d_pos * (bodies[i].mass * mag)

        for body in bodies:
            body.position += body.velocity * dt

    def energy(self) -> float:
        bodies = self._bodies
        e = 0.0
        for i, ibody in enumerate(bodies):
            e += 0.5 * ibody.mass * sum_squares(ibody.velocity)
            for jbody in bodies[i + 1:]:
                d = ibody.position - jbody.position
                e -= (ibody.mass * jbody.mass) / math.sqrt(sum_squares(d))
        return e

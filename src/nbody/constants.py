"""
Fixed initial data for the five body system.

Positions are in AU, velocities in AU/day scaled to AU/year by DAYS_PER_YEAR and
masses in units where G == 1 (hence SOLAR_MASS = 4 * PI^2).
"""
from typing import NamedTuple, Tuple

PI = 3.141592653589793
SOLAR_MASS = 4 * PI * PI
DAYS_PER_YEAR = 365.24

BODIES_COUNT = 5
INTERACTIONS = BODIES_COUNT * (BODIES_COUNT - 1) // 2

DEFAULT_DT = 0.01


class BodyRecord(NamedTuple):
    name: str
    mass: float
    position: Tuple[float, float, float]
    velocity: Tuple[float, float, float]


SUN = BodyRecord(
    name='sun',
    mass=SOLAR_MASS,
    position=(0.0, 0.0, 0.0),
    velocity=(0.0, 0.0, 0.0),
)

JUPITER = BodyRecord(
    name='jupiter',
    mass=9.54791938424326609e-04 * SOLAR_MASS,
    position=(4.84143144246472090e+00, -1.16032004402742839e+00, -1.03622044471123109e-01),
    velocity=(1.66007664274403694e-03 * DAYS_PER_YEAR,
              7.69901118419740425e-03 * DAYS_PER_YEAR,
              -6.90460016972063023e-05 * DAYS_PER_YEAR),
)

SATURN = BodyRecord(
    name='saturn',
    mass=2.85885980666130812e-04 * SOLAR_MASS,
    position=(8.34336671824457987e+00, 4.12479856412430479e+00, -4.03523417114321381e-01),
    velocity=(-2.76742510726862411e-03 * DAYS_PER_YEAR,
              4.99852801234917238e-03 * DAYS_PER_YEAR,
              2.30417297573763929e-05 * DAYS_PER_YEAR),
)

URANUS = BodyRecord(
    name='uranus',
    mass=4.36624404335156298e-05 * SOLAR_MASS,
    position=(1.28943695621391310e+01, -1.51111514016986312e+01, -2.23307578892655734e-01),
    velocity=(2.96460137564761618e-03 * DAYS_PER_YEAR,
              2.37847173959480950e-03 * DAYS_PER_YEAR,
              -2.96589568540237556e-05 * DAYS_PER_YEAR),
)

NEPTUNE = BodyRecord(
    name='neptune',
    mass=5.15138902046611451e-05 * SOLAR_MASS,
    position=(1.53796971148509165e+01, -2.59193146099879641e+01, 1.79258772950371181e-01),
    velocity=(2.68067772490389322e-03 * DAYS_PER_YEAR,
              1.62824170038242295e-03 * DAYS_PER_YEAR,
              -9.51592254519715870e-05 * DAYS_PER_YEAR),
)

# Order matters: it fixes the pair enumeration used by the integrator.
CANONICAL_BODIES: Tuple[BodyRecord, ...] = (SUN, JUPITER, SATURN, URANUS, NEPTUNE)

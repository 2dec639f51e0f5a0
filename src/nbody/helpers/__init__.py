from nbody.helpers.vector import Vec3, sum_squares, magnitude
from nbody.helpers.body import Body

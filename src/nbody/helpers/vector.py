import math
import numpy as np
from typing import Iterable


class Vec3:
    """Three component vector backed by a float64 array.

    Arithmetic is exposed as named methods; the operators are aliases so that
    ``a + b`` and ``a.add(b)`` are the same call.
    """

    __slots__ = ('xyz',)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.xyz = np.array((x, y, z), dtype=float)

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> 'Vec3':
        x, y, z = values
        return cls(x, y, z)

    @classmethod
    def _wrap(cls, xyz: np.ndarray) -> 'Vec3':
        v = cls.__new__(cls)
        v.xyz = xyz
        return v

    @property
    def x(self) -> float:
        return float(self.xyz[0])

    @property
    def y(self) -> float:
        return float(self.xyz[1])

    @property
    def z(self) -> float:
        return float(self.xyz[2])

    def add(self, other: 'Vec3') -> 'Vec3':
        return Vec3._wrap(self.xyz + other.xyz)

    def sub(self, other: 'Vec3') -> 'Vec3':
        return Vec3._wrap(self.xyz - other.xyz)

    def scale(self, s: float) -> 'Vec3':
        return Vec3._wrap(self.xyz * s)

    def accumulate(self, other: 'Vec3') -> 'Vec3':
        self.xyz += other.xyz
        return self

    def decrement(self, other: 'Vec3') -> 'Vec3':
        self.xyz -= other.xyz
        return self

    def copy(self) -> 'Vec3':
        return Vec3._wrap(self.xyz.copy())

    __add__ = add
    __sub__ = sub
    __mul__ = scale
    __iadd__ = accumulate
    __isub__ = decrement

    def __iter__(self):
        return iter(self.xyz.tolist())

    def __eq__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.array_equal(self.xyz, other.xyz))

    __hash__ = None

    def __repr__(self):
        return f'Vec3({self.x!r}, {self.y!r}, {self.z!r})'


def sum_squares(v: Vec3) -> float:
    x, y, z = v.xyz.tolist()
    return x * x + y * y + z * z


def magnitude(d: Vec3, dt: float) -> float:
    """Velocity coefficient ``dt / |d|^3`` shared by both bodies of a pair."""
    s = sum_squares(d)
    return dt / (s * math.sqrt(s))

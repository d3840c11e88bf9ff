# homogeneous_vector.py

from dataclasses import dataclass
from numbers import Real
from typing import Iterable, Iterator, Union

import numpy as np
from numpy import ndarray

from ostomachion.interfaces import Vector
from ostomachion.numerics import as_scalar, coerce_array, pack_vector4, scalar32


@dataclass(frozen=True, slots=True, eq=False)
class HomogeneousVector4R3(Vector[float]):
    """
    A point or direction in real projective 3-space, written (X : Y : Z : W).

    When W is nonzero the vector denotes the affine point (X/W, Y/W, Z/W); when W is
    zero it denotes a direction (a point at infinity). Any nonzero multiple of the four
    components denotes the same entity, so equality and hashing go through
    :meth:`canonicalize`. The all-zero tuple is the ``undefined`` sentinel.

    Components are stored in single precision.

    Attributes:
        x (float): first numerator component.
        y (float): second numerator component.
        z (float): third numerator component.
        w (float): denominator component, 1 by default.
    """

    x: float
    y: float
    z: float
    w: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, "x", as_scalar(self.x))
        object.__setattr__(self, "y", as_scalar(self.y))
        object.__setattr__(self, "z", as_scalar(self.z))
        object.__setattr__(self, "w", as_scalar(self.w))

    @classmethod
    def undefined(cls) -> "HomogeneousVector4R3":
        """The all-zero tuple, which represents no geometric entity."""
        return cls(0.0, 0.0, 0.0, 0.0)

    @classmethod
    def additive_identity(cls) -> "HomogeneousVector4R3":
        """The affine origin (0 : 0 : 0 : 1)."""
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def multiplicative_identity(cls) -> float:
        return 1.0

    @classmethod
    def from_vector3(cls, vector: Union[ndarray, Iterable[float]]) -> "HomogeneousVector4R3":
        """
        Create the affine point (x, y, z) with W = 1.

        Args:
            vector: length-3 array-like.

        Raises:
            ValueError: if ``vector`` is not of shape (3,).
        """
        x, y, z = coerce_array(vector, (3,), "vector")
        return cls(x, y, z, 1.0)

    @classmethod
    def from_array(cls, values: Union[ndarray, Iterable[float]]) -> "HomogeneousVector4R3":
        """
        Create a vector from a length-4 array-like laid out as (x, y, z, w).

        Raises:
            ValueError: if ``values`` is not of shape (4,).
        """
        x, y, z, w = coerce_array(values, (4,), "values")
        return cls(x, y, z, w)

    def to_array(self) -> ndarray:
        """The raw components as a new float32 array (x, y, z, w)."""
        return pack_vector4(self)

    @property
    def is_undefined(self) -> bool:
        return self.x == 0 and self.y == 0 and self.z == 0 and self.w == 0

    @property
    def is_at_infinity(self) -> bool:
        """True for directions: W is zero but the vector is not undefined."""
        return self.w == 0 and not self.is_undefined

    def canonicalize(self) -> "HomogeneousVector4R3":
        """
        Return the unique representative of this vector's equivalence class.

        The last nonzero component among W, Z, Y (scanned in that order) is scaled
        to 1 and every component after it is 0. The undefined vector is returned
        unchanged.
        """
        x, y, z, w = self.x, self.y, self.z, self.w
        cls = self.__class__
        if w != 0:
            return cls(x / w, y / w, z / w, 1.0)
        if z != 0:
            return cls(x / z, y / z, 1.0, 0.0)
        if y != 0:
            return cls(x / y, 1.0, 0.0, 0.0)
        if x != 0:
            return cls(1.0, 0.0, 0.0, 0.0)
        return self

    #########
    # Arithmetic. (x, y, z) is a numerator over the denominator w.
    #

    def __pos__(self) -> "HomogeneousVector4R3":
        return self

    def __neg__(self) -> "HomogeneousVector4R3":
        return self.__class__(self.x, self.y, self.z, -self.w)

    def __add__(self, other: "HomogeneousVector4R3") -> "HomogeneousVector4R3":
        if not isinstance(other, HomogeneousVector4R3):
            return NotImplemented
        a = self.to_array()
        b = other.to_array()
        with np.errstate(over="ignore", invalid="ignore"):
            x, y, z = a[:3] * b[3] + b[:3] * a[3]
            w = a[3] * b[3]
        return self.__class__(x, y, z, w)

    def __sub__(self, other: "HomogeneousVector4R3") -> "HomogeneousVector4R3":
        if not isinstance(other, HomogeneousVector4R3):
            return NotImplemented
        a = self.to_array()
        b = other.to_array()
        with np.errstate(over="ignore", invalid="ignore"):
            x, y, z = a[:3] * b[3] - b[:3] * a[3]
            w = a[3] * b[3]
        return self.__class__(x, y, z, w)

    def __mul__(self, scalar: Real) -> "HomogeneousVector4R3":
        if not isinstance(scalar, Real):
            return NotImplemented
        with np.errstate(over="ignore", invalid="ignore"):
            x, y, z = self.to_array()[:3] * scalar32(scalar)
        return self.__class__(x, y, z, self.w)

    def __rmul__(self, scalar: Real) -> "HomogeneousVector4R3":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: Real) -> "HomogeneousVector4R3":
        # scales the denominator, so dividing by zero yields a point at infinity
        if not isinstance(scalar, Real):
            return NotImplemented
        with np.errstate(over="ignore", invalid="ignore"):
            w = scalar32(self.w) * scalar32(scalar)
        return self.__class__(self.x, self.y, self.z, w)

    #########
    # Dunder methods
    #

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HomogeneousVector4R3):
            return NotImplemented
        return tuple(self.canonicalize()) == tuple(other.canonicalize())

    def __hash__(self) -> int:
        return hash(tuple(self.canonicalize()))

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    def __str__(self) -> str:
        x, y, z, w = (str(c) for c in self.to_array())
        return f"[{x} : {y} : {z} : {w}]"

    def __reduce__(self):
        return (self.__class__, (self.x, self.y, self.z, self.w))

# projective_transform.py

from dataclasses import dataclass
from typing import ClassVar, Iterable, Optional, Tuple, Union

import numpy as np
from numpy import array2string as np_array2string
from numpy import ndarray

from ostomachion.geometry import affine_rows, axis_rotation
from ostomachion.homogeneous_vector import HomogeneousVector4R3
from ostomachion.interfaces import ProjectiveTransform
from ostomachion.math import SCALAR_DTYPE, multiply4, transform4
from ostomachion.numerics import coerce_array, pack_matrix4x4, unpack_matrix4x4

# preallocate the identity matrix
_EYE4 = np.eye(4, dtype=SCALAR_DTYPE)
_EYE3 = np.eye(3, dtype=SCALAR_DTYPE)
_ZERO3 = np.zeros(3, dtype=SCALAR_DTYPE)
_ONE3 = np.ones(3, dtype=SCALAR_DTYPE)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class _ProjectiveTransform4R3Base(ProjectiveTransform[HomogeneousVector4R3, HomogeneousVector4R3, float]):
    """
    Shared storage and constructors of the two 4x4 projective transform forms.

    The four stored vectors are the images of the basis vectors e_x, e_y, e_z and
    e_w. Subclasses decide whether they are read as the rows or the columns of the
    dense matrix, and so how composition and application are ordered.
    """

    x: HomogeneousVector4R3
    y: HomogeneousVector4R3
    z: HomogeneousVector4R3
    w: HomogeneousVector4R3

    _column_major: ClassVar[bool] = False

    def __post_init__(self):
        for name in ("x", "y", "z", "w"):
            value = getattr(self, name)
            if not isinstance(value, HomogeneousVector4R3):
                object.__setattr__(self, name, HomogeneousVector4R3.from_array(value))

    @classmethod
    def identity(cls):
        """
        Create the identity transform.

        Returns:
            A new transform whose stored vectors are the canonical basis.
        """
        return cls._from_rows(_EYE4)

    @classmethod
    def from_matrix(cls, matrix: Union[ndarray, Iterable[Iterable[float]]]):
        """
        Create a transform from a dense 4x4 matrix laid out in this form's major order.

        Args:
            matrix: 4x4 array-like.

        Raises:
            ValueError: if ``matrix`` is not 4x4.
        """
        m = coerce_array(matrix, (4, 4), "matrix")
        return cls(*(HomogeneousVector4R3(*v) for v in unpack_matrix4x4(m, cls._column_major)))

    @classmethod
    def from_values(
        cls,
        translation: Optional[Union[ndarray, Iterable[float]]] = None,
        rotation: Optional[Union[ndarray, Iterable[Iterable[float]]]] = None,
        scale: Optional[Union[float, ndarray, Iterable[float]]] = None,
    ):
        """
        Create an affine transform. Order of application is: scale → rotate → translate.

        Args:
            translation: length-3 translation.
            rotation: 3x3 rotation acting on column vectors (v' = R @ v).
            scale: a single factor or length-3 per-axis factors.

        Returns:
            A new transform encoding the provided values.
        """
        t = _ZERO3 if translation is None else coerce_array(translation, (3,), "translation")
        r = _EYE3 if rotation is None else coerce_array(rotation, (3, 3), "rotation")
        s = _ONE3 if scale is None else _coerce_scale(scale)
        return cls._from_rows(affine_rows(t, r, s))

    @classmethod
    def from_translation(cls, translation: Union[ndarray, Iterable[float]]):
        """Create a pure translation by ``translation``."""
        return cls.from_values(translation=translation)

    @classmethod
    def from_scale(cls, scale: Union[float, ndarray, Iterable[float]]):
        """Create a pure scale, uniform or per axis."""
        return cls.from_values(scale=scale)

    @classmethod
    def from_euler_angles(cls, roll: float, pitch: float, yaw: float, degrees: bool = True):
        """
        Create a pure rotation from Euler angles: roll first, then pitch, then yaw.

        Args:
            roll: rotation around x-axis.
            pitch: rotation around y-axis.
            yaw: rotation around z-axis.
            degrees: if True, angles are in degrees, else radians.
        """
        angles = (float(roll), float(pitch), float(yaw))
        if degrees:
            angles = tuple(np.deg2rad(a) for a in angles)
        rx, ry, rz = (axis_rotation(axis, angle) for axis, angle in enumerate(angles))
        # basis images compose as row matrices whatever the storage form
        return cls._from_rows(multiply4(multiply4(rx, ry), rz))

    @classmethod
    def _from_rows(cls, matrix: ndarray):
        # row i of ``matrix`` is the image of basis vector i
        return cls(*(HomogeneousVector4R3(*row) for row in matrix))

    def _vectors(self) -> Tuple[HomogeneousVector4R3, HomogeneousVector4R3, HomogeneousVector4R3, HomogeneousVector4R3]:
        return (self.x, self.y, self.z, self.w)

    def to_matrix(self) -> ndarray:
        """The dense 4x4 float32 matrix in this form's major order."""
        return pack_matrix4x4(self._vectors(), self._column_major)

    def _from_product(self, product: ndarray):
        return self.__class__(*(HomogeneousVector4R3(*v) for v in unpack_matrix4x4(product, self._column_major)))

    #########
    # Dunder methods
    #

    def __matmul__(self, other):
        """Alias for ``*``: composition."""
        return self.__mul__(other)

    def __rmatmul__(self, vector):
        """Alias for ``*``: application."""
        return self.__rmul__(vector)

    def __eq__(self, other: object) -> bool:
        """
        Structural equality: the same form and field-wise identical raw components.
        """
        if not isinstance(other, _ProjectiveTransform4R3Base):
            return NotImplemented
        if self.__class__ is not other.__class__:
            return False
        return self._components() == other._components()

    def __hash__(self) -> int:
        return hash(self._components())

    def _components(self) -> Tuple[Tuple[float, ...], ...]:
        return tuple(tuple(v) for v in self._vectors())

    def __repr__(self) -> str:
        cls = self.__class__.__name__
        mat = np_array2string(self.to_matrix(), precision=6, separator=', ')
        return f"{cls}(matrix=\n{mat}\n)"

    def __str__(self) -> str:
        return self.__repr__()

    def __reduce__(self):
        return (self.__class__, self._vectors())


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class ProjectiveTransform4R3(_ProjectiveTransform4R3Base):
    """
    A projective (line-preserving) transformation of 3D space in homogeneous coordinates,
    stored row by row.

    The transform is the 4x4 matrix M whose rows are ``x``, ``y``, ``z`` and ``w``,
    applied to row vectors: ``v * t`` computes v · M, and ``a * b`` is A · B, so
    ``v * (a * b) == (v * a) * b``.

    Attributes:
        x (HomogeneousVector4R3): the first row of the transformation matrix.
        y (HomogeneousVector4R3): the second row of the transformation matrix.
        z (HomogeneousVector4R3): the third row of the transformation matrix.
        w (HomogeneousVector4R3): the fourth row of the transformation matrix.
    """

    _column_major: ClassVar[bool] = False

    @property
    def rows(self) -> Tuple[HomogeneousVector4R3, HomogeneousVector4R3, HomogeneousVector4R3, HomogeneousVector4R3]:
        return self._vectors()

    def to_column_form(self) -> "ProjectiveColumnTransform4R3":
        """The same transformation stored column by column."""
        return ProjectiveColumnTransform4R3(*self._vectors())

    def __mul__(self, other: "ProjectiveTransform4R3") -> "ProjectiveTransform4R3":
        if not isinstance(other, ProjectiveTransform4R3):
            return NotImplemented
        return self._from_product(multiply4(self.to_matrix(), other.to_matrix()))

    def __rmul__(self, vector: HomogeneousVector4R3) -> HomogeneousVector4R3:
        if not isinstance(vector, HomogeneousVector4R3):
            return NotImplemented
        return HomogeneousVector4R3.from_array(transform4(vector.to_array(), self.to_matrix()))


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class ProjectiveColumnTransform4R3(_ProjectiveTransform4R3Base):
    """
    A projective (line-preserving) transformation of 3D space in homogeneous coordinates,
    stored column by column.

    The transform is the 4x4 matrix C whose columns are ``x``, ``y``, ``z`` and ``w``,
    applied to column vectors: ``v * t`` computes C · v. ``a * b`` still means "apply
    ``a``, then ``b``", which is B · A on the column matrices.

    Holding the same four vectors, a column transform and a row transform map every
    vector to the same result.

    Attributes:
        x (HomogeneousVector4R3): the first column of the transformation matrix.
        y (HomogeneousVector4R3): the second column of the transformation matrix.
        z (HomogeneousVector4R3): the third column of the transformation matrix.
        w (HomogeneousVector4R3): the fourth column of the transformation matrix.
    """

    _column_major: ClassVar[bool] = True

    @property
    def columns(self) -> Tuple[HomogeneousVector4R3, HomogeneousVector4R3, HomogeneousVector4R3, HomogeneousVector4R3]:
        return self._vectors()

    def to_row_form(self) -> ProjectiveTransform4R3:
        """The same transformation stored row by row."""
        return ProjectiveTransform4R3(*self._vectors())

    def __mul__(self, other: "ProjectiveColumnTransform4R3") -> "ProjectiveColumnTransform4R3":
        if not isinstance(other, ProjectiveColumnTransform4R3):
            return NotImplemented
        return self._from_product(multiply4(other.to_matrix(), self.to_matrix()))

    def __rmul__(self, vector: HomogeneousVector4R3) -> HomogeneousVector4R3:
        if not isinstance(vector, HomogeneousVector4R3):
            return NotImplemented
        # C @ v == v @ C.T
        return HomogeneousVector4R3.from_array(transform4(vector.to_array(), self.to_matrix().T))


def _coerce_scale(scale) -> ndarray:
    s = np.asarray(scale, dtype=SCALAR_DTYPE)
    if s.shape == ():
        return np.full(3, s, dtype=SCALAR_DTYPE)
    if s.shape != (3,):
        raise ValueError(f"Scale must be a scalar or a 3D vector, got {s.shape}")
    return s

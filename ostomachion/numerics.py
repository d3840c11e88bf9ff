# numerics.py

import logging
from typing import Iterable, Tuple

import numpy as np
from numpy import asarray as np_asarray
from numpy import ndarray

from ostomachion.math import SCALAR_DTYPE

logger = logging.getLogger(__name__)

Scalars4 = Tuple[float, float, float, float]


def scalar32(value) -> np.float32:
    """
    Round a real number to single precision.

    Magnitudes beyond the float32 range, including integers too large for a
    double, become signed infinity.
    """
    try:
        value = float(value)
    except OverflowError:
        value = np.inf if value > 0 else -np.inf
    with np.errstate(over="ignore"):
        return SCALAR_DTYPE(value)


def as_scalar(value) -> float:
    """Round a real number to single precision, returned as a Python float."""
    return float(scalar32(value))


def pack_vector4(components: Iterable[float]) -> ndarray:
    """Lay out (x, y, z, w) as a packed float32 4-vector."""
    return np.array(tuple(components), dtype=SCALAR_DTYPE)


def coerce_array(values, shape: Tuple[int, ...], name: str) -> ndarray:
    """
    Convert an array-like to a float32 array of the given shape.

    Raises:
        ValueError: if ``values`` does not have ``shape``.
    """
    arr = np_asarray(values)
    if arr.shape != shape:
        raise ValueError(f"{name} must have shape {shape}, got {arr.shape}")
    if arr.dtype != SCALAR_DTYPE:
        logger.debug("casting %s from %s to %s", name, arr.dtype, np.dtype(SCALAR_DTYPE))
        arr = arr.astype(SCALAR_DTYPE)
    return arr


def pack_matrix4x4(vectors: Iterable[Iterable[float]], column_major: bool = False) -> ndarray:
    """
    Lay out four stored 4-vectors as a dense 4x4 float32 matrix.

    With ``column_major`` the vectors become the columns of the result. The
    column-major matrix is a transposed view of the row-major buffer, no copy
    is made.
    """
    m = np.array([tuple(v) for v in vectors], dtype=SCALAR_DTYPE)
    return m.T if column_major else m


def unpack_matrix4x4(matrix: ndarray, column_major: bool = False) -> Tuple[Scalars4, Scalars4, Scalars4, Scalars4]:
    """Split a dense 4x4 matrix back into its four stored 4-vectors (rows, or columns if ``column_major``)."""
    m = matrix.T if column_major else matrix
    return tuple(tuple(float(c) for c in row) for row in m)

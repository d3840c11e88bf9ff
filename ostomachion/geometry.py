# geometry.py
from numpy import ndarray
import numpy as np
from numba import njit

from numba.core.errors import NumbaPerformanceWarning
import warnings
warnings.filterwarnings("ignore", category=NumbaPerformanceWarning)

# Every builder here returns the four images of e_x, e_y, e_z and e_w as the rows
# of a float32 4x4 matrix, which is exactly what both transform forms store.


@njit(cache=True)
def axis_rotation(axis: int, angle: float) -> ndarray:
    """
    Right-handed rotation by ``angle`` radians about the coordinate axis ``axis`` (0, 1 or 2).

    Returns:
        ndarray: 4x4 float32, row i is the image of basis vector i.
    """
    out = np.eye(4, dtype=np.float32)
    c, s = np.cos(angle), np.sin(angle)
    # the two basis vectors spanning the plane of rotation, in cyclic order
    i = (axis + 1) % 3
    j = (axis + 2) % 3
    out[i, i] = c
    out[i, j] = s
    out[j, i] = -s
    out[j, j] = c
    return out


@njit(cache=True)
def affine_rows(translation: ndarray, rotation: ndarray, scale: ndarray) -> ndarray:
    """
    Images of the basis under scale, then ``rotation`` (acting on column vectors), then translation.

    Parameters:
        translation (ndarray): (3,) float32 offset, becomes the image of e_w.
        rotation (ndarray): (3, 3) float32, column i is the image of e_i before scaling.
        scale (ndarray): (3,) float32 per-axis factors.

    Returns:
        ndarray: 4x4 float32, row i is the image of basis vector i.
    """
    out = np.zeros((4, 4), dtype=np.float32)
    for i in range(3):
        for k in range(3):
            out[i, k] = rotation[k, i] * scale[i]
        out[3, i] = translation[i]
    out[3, 3] = 1.0
    return out

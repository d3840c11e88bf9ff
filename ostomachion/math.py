from numba import njit, float32
import numpy as np
from numba.core.errors import NumbaPerformanceWarning
import warnings
warnings.filterwarnings("ignore", category=NumbaPerformanceWarning)

SCALAR_DTYPE = np.float32


@njit(float32[:, :](float32[:, :], float32[:, :]), cache=True)
def multiply4(a, b):
    """
    Product of two 4x4 matrices.

    Parameters
    ----------
    a : (4,4) float32 array
    b : (4,4) float32 array

    Returns
    -------
    (4,4) float32 array
        a @ b
    """
    out = np.empty((4, 4), dtype=np.float32)
    for i in range(4):
        for j in range(4):
            out[i, j] = (a[i, 0]*b[0, j] + a[i, 1]*b[1, j]
                         + a[i, 2]*b[2, j] + a[i, 3]*b[3, j])
    return out


@njit(float32[:](float32[:], float32[:, :]), cache=True)
def transform4(v, m):
    """
    Row vector times a 4x4 matrix (v · m).

    Parameters
    ----------
    v : (4,) float32 array
    m : (4,4) float32 array (any layout, transposed views are fine)

    Returns
    -------
    (4,) float32 array
    """
    out = np.empty(4, dtype=np.float32)
    for j in range(4):
        out[j] = v[0]*m[0, j] + v[1]*m[1, j] + v[2]*m[2, j] + v[3]*m[3, j]
    return out

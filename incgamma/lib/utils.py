import numpy as np

__author__ = 'The incgamma developers'
__date__ = "2026-10-18"
__maintainer__ = 'The incgamma developers'
__licence__ = "LGPL v3"


def cartesian(arrays, out=None):
    """Generate a cartesian product of input arrays.

    Args:
        arrays (list of array-like): 1-D arrays to form the cartesian product of.
        out (ndarray): Array to place the cartesian product in.

    Returns:
        ndarray: 2-D array of shape (M, len(arrays)) containing cartesian products formed of input arrays.

    Examples:
        >>> cartesian(([1, 2], [4, 5]))
        array([[1, 4],
               [1, 5],
               [2, 4],
               [2, 5]])
    """
    arrays = [np.asarray(x) for x in arrays]
    dtype = arrays[0].dtype

    nmr_elements = np.prod([x.size for x in arrays])
    if out is None:
        out = np.zeros([nmr_elements, len(arrays)], dtype=dtype)

    m = nmr_elements // arrays[0].size
    out[:, 0] = np.repeat(arrays[0], m)
    if arrays[1:]:
        cartesian(arrays[1:], out=out[0:m, 1:])
        for j in range(1, arrays[0].size):
            out[j*m:(j+1)*m, 1:] = out[0:m, 1:]
    return out


def is_nan(*values):
    """Check if any of the given values is NaN.

    Args:
        *values (float): the scalar values to check

    Returns:
        boolean: True if at least one of the values is NaN
    """
    return any(np.isnan(value) for value in values)

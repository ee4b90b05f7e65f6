"""
Elementary rotation matrices about the coordinate axes.

The matrices rotate a vector by the given angle in the right-handed sense. A
rotation of the reference frame by the same angle is the transpose of the matrix,
which is how the frame definitions in :py:mod:`skyframes.frames` and
:py:mod:`skyframes.precession` use them.

All matrices are returned as read-only ``(3, 3)`` numpy arrays, they are combined
with ``@`` where the rightmost matrix is applied to the vector first.
"""

from __future__ import annotations
import numpy as np

__all__ = [
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "frozen",
    "is_rotation_matrix",
]


def frozen(mat) -> np.ndarray:
    """
    Return a read-only float copy of the matrix.
    """
    mat = np.array(mat, dtype=float)
    mat.flags.writeable = False
    return mat


def rotation_x(angle: float) -> np.ndarray:
    """
    Rotation matrix about the x axis.

    Parameters
    ----------
    angle:
        Angle of rotation in radians.
    """
    s, c = np.sin(angle), np.cos(angle)
    return frozen([[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]])


def rotation_y(angle: float) -> np.ndarray:
    """
    Rotation matrix about the y axis.

    Parameters
    ----------
    angle:
        Angle of rotation in radians.
    """
    s, c = np.sin(angle), np.cos(angle)
    return frozen([[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]])


def rotation_z(angle: float) -> np.ndarray:
    """
    Rotation matrix about the z axis.

    Parameters
    ----------
    angle:
        Angle of rotation in radians.
    """
    s, c = np.sin(angle), np.cos(angle)
    return frozen([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


def is_rotation_matrix(mat, atol: float = 1e-12) -> bool:
    """
    Check that a matrix is a proper rotation, orthonormal with a determinant of 1.

    Parameters
    ----------
    mat:
        A ``(3, 3)`` matrix.
    atol:
        Absolute tolerance used for both checks.
    """
    mat = np.asarray(mat, dtype=float)
    if mat.shape != (3, 3):
        return False
    return bool(
        np.allclose(mat.T @ mat, np.eye(3), rtol=0, atol=atol)
        and np.isclose(np.linalg.det(mat), 1.0, rtol=0, atol=atol)
    )

"""
Precession of the FK5 equator and equinox away from J2000.
"""

from __future__ import annotations
import logging
import numpy as np
from . import constants
from .rotation import frozen, rotation_y, rotation_z

__all__ = ["precession_angles", "precess_from_j2000"]

logger = logging.getLogger(__name__)

_IDENTITY = frozen(np.eye(3))


def precession_angles(equinox: float) -> tuple[float, float, float]:
    """
    Compute the precession angles ``(zeta, z, theta)`` in radians for the equinox.

    Expression from Capitaine et al. 2003 as expressed in the USNO Circular 179, this
    should match the IAU 2006 standard from SOFA.

    Parameters
    ----------
    equinox:
        Equinox as a Julian year, for example ``2000.0``.
    """
    t = (equinox - constants.J2000_EPOCH) / constants.JULIAN_CENTURY_YEARS
    zeta = constants.PRECESSION_ZETA[0]
    z = constants.PRECESSION_Z[0]
    theta = constants.PRECESSION_THETA[0]
    tn = 1.0
    for c_zeta, c_z, c_theta in zip(
        constants.PRECESSION_ZETA[1:],
        constants.PRECESSION_Z[1:],
        constants.PRECESSION_THETA[1:],
    ):
        tn *= t
        zeta += c_zeta * tn
        z += c_z * tn
        theta += c_theta * tn
    return (
        np.radians(zeta / constants.ARCSEC_PER_DEGREE),
        np.radians(z / constants.ARCSEC_PER_DEGREE),
        np.radians(theta / constants.ARCSEC_PER_DEGREE),
    )


def precess_from_j2000(equinox: float) -> np.ndarray:
    """
    Rotation matrix taking FK5 J2000 vectors to the FK5 frame of the given equinox.

    Its transpose precesses back to J2000.

    >>> skyframes.precess_from_j2000(2000.0)
    array([[1., 0., 0.],
           [0., 1., 0.],
           [0., 0., 1.]])

    Parameters
    ----------
    equinox:
        Equinox as a Julian year.
    """
    # zeta and z cancel exactly at J2000, skip the rounding of the product.
    if equinox == constants.J2000_EPOCH:
        return _IDENTITY
    zeta, z, theta = precession_angles(equinox)
    logger.debug(
        "Precession to %s: zeta=%s z=%s theta=%s rad", equinox, zeta, z, theta
    )
    # Frame rotations, the transposes of the vector rotations.
    return frozen(rotation_z(-z).T @ rotation_y(theta).T @ rotation_z(-zeta).T)

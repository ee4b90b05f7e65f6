"""
Angular separation and position angle between sky coordinates.
"""

from __future__ import annotations
import numpy as np
from .coords import SkyCoords, convert

__all__ = ["separation", "position_angle"]


def _align(c1: SkyCoords, c2: SkyCoords) -> SkyCoords:
    if c2.frame != c1.frame:
        return convert(c1.frame, c2)
    return c2


def _separation(lon1, lat1, lon2, lat2):
    sin_dlon, cos_dlon = np.sin(lon2 - lon1), np.cos(lon2 - lon1)
    sin_lat1, cos_lat1 = np.sin(lat1), np.cos(lat1)
    sin_lat2, cos_lat2 = np.sin(lat2), np.cos(lat2)
    return np.arctan2(
        np.hypot(
            cos_lat2 * sin_dlon, cos_lat1 * sin_lat2 - sin_lat1 * cos_lat2 * cos_dlon
        ),
        sin_lat1 * sin_lat2 + cos_lat1 * cos_lat2 * cos_dlon,
    )


def _position_angle(lon1, lat1, lon2, lat2):
    sin_dlon, cos_dlon = np.sin(lon2 - lon1), np.cos(lon2 - lon1)
    sin_lat1, cos_lat1 = np.sin(lat1), np.cos(lat1)
    sin_lat2, cos_lat2 = np.sin(lat2), np.cos(lat2)
    x = sin_lat2 * cos_lat1 - cos_lat2 * sin_lat1 * cos_dlon
    y = sin_dlon * cos_lat2
    angle = np.mod(np.arctan2(y, x), 2 * np.pi)
    # Tiny negative angles round up to exactly 2 pi.
    return np.where(angle >= 2 * np.pi, 0.0, angle)


def separation(c1: SkyCoords, c2: SkyCoords):
    """
    Angular separation between two sky coordinates, in radians.

    The separation is computed with the
    `Vincenty formula <http://en.wikipedia.org/wiki/Great-circle_distance>`_, which is
    slightly more expensive than some alternatives but is stable at all distances,
    including the poles and antipodes.

    If the coordinates are in different frames, ``c2`` is first converted to the frame
    of ``c1``.

    Parameters
    ----------
    c1:
        First coordinate.
    c2:
        Second coordinate.
    """
    c2 = _align(c1, c2)
    sep = _separation(c1.lon, c1.lat, c2.lon, c2.lat)
    return float(sep) if np.ndim(sep) == 0 else sep


def position_angle(c1: SkyCoords, c2: SkyCoords):
    """
    Position angle of ``c2`` as seen from ``c1``, in radians within ``[0, 2 pi)``.

    The angle is measured from north towards east.

    >>> c1 = skyframes.ICRSCoords(0, 0)
    >>> c2 = skyframes.ICRSCoords(np.radians(1), 0)
    >>> float(np.degrees(skyframes.position_angle(c1, c2)))
    90.0

    Parameters
    ----------
    c1:
        Coordinate the angle is measured at.
    c2:
        Coordinate the angle points to.
    """
    c2 = _align(c1, c2)
    angle = _position_angle(c1.lon, c1.lat, c2.lon, c2.lat)
    return float(angle) if np.ndim(angle) == 0 else angle

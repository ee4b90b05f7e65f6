"""
Coordinates on the sky, and conversion of coordinates between reference frames.

Angles are stored in radians exactly as given, they are neither wrapped nor range
checked. Angles may also be numpy arrays of matching shape, in which case every
operation is applied elementwise. Equality and hashing of coordinates are only
defined for scalar angles.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Union
import numpy as np
from numpy.typing import ArrayLike, NDArray
from .frames import FK5, GALACTIC, ICRS, Frame, FrameKind, rotation_matrix

__all__ = [
    "SkyCoords",
    "ICRSCoords",
    "GalCoords",
    "FK5Coords",
    "to_cartesian",
    "from_cartesian",
    "coord_class",
    "from_lon_lat",
    "convert",
]

logger = logging.getLogger(__name__)


class SkyCoords:
    """
    Base class of all sky coordinates.

    Subclasses expose their angles under the names conventional for their frame, the
    generic :py:attr:`lon` and :py:attr:`lat` properties give access to either.

    Coordinates compare equal when their class and angles match. With array valued
    angles use ``np.allclose`` on the angles instead, such coordinates cannot be
    hashed or compared with ``==``.
    """

    @property
    def frame(self) -> Frame:
        """The reference frame of the coordinate."""
        raise NotImplementedError

    @property
    def lon(self) -> Union[float, NDArray]:
        """Longitude like angle in radians."""
        raise NotImplementedError

    @property
    def lat(self) -> Union[float, NDArray]:
        """Latitude like angle in radians."""
        raise NotImplementedError

    def to_cartesian(self) -> np.ndarray:
        """
        Unit vector pointing at this coordinate, in the coordinate's own frame.
        """
        return to_cartesian(self.lon, self.lat)

    def convert(self, frame: Frame) -> SkyCoords:
        """
        Convert this coordinate to another frame, see :py:func:`convert`.
        """
        return convert(frame, self)


@dataclass(frozen=True)
class ICRSCoords(SkyCoords):
    """
    Coordinate in the ICRS frame.

    Parameters
    ----------
    ra:
        Right ascension in radians.
    dec:
        Declination in radians.
    """

    ra: Union[float, NDArray]
    dec: Union[float, NDArray]

    @property
    def frame(self) -> Frame:
        return ICRS

    @property
    def lon(self):
        return self.ra

    @property
    def lat(self):
        return self.dec


@dataclass(frozen=True)
class GalCoords(SkyCoords):
    """
    Coordinate in the Galactic frame.

    Parameters
    ----------
    l:
        Galactic longitude in radians.
    b:
        Galactic latitude in radians.
    """

    l: Union[float, NDArray]  # noqa: E741
    b: Union[float, NDArray]

    @property
    def frame(self) -> Frame:
        return GALACTIC

    @property
    def lon(self):
        return self.l

    @property
    def lat(self):
        return self.b


@dataclass(frozen=True)
class FK5Coords(SkyCoords):
    """
    Coordinate in the FK5 frame of the given equinox.

    Parameters
    ----------
    epoch:
        Equinox of the frame as a Julian year, for example ``2000.0``.
    ra:
        Right ascension in radians.
    dec:
        Declination in radians.
    """

    epoch: float
    ra: Union[float, NDArray]
    dec: Union[float, NDArray]

    @property
    def frame(self) -> Frame:
        return FK5(self.epoch)

    @property
    def lon(self):
        return self.ra

    @property
    def lat(self):
        return self.dec


def to_cartesian(lon: ArrayLike, lat: ArrayLike) -> np.ndarray:
    """
    Unit vector for the given longitude and latitude.

    The first axis of the result is ``(x, y, z)``, any further axes follow the shape
    of the inputs.

    Parameters
    ----------
    lon:
        Longitude in radians.
    lat:
        Latitude in radians.
    """
    cos_lat = np.cos(lat)
    return np.array([cos_lat * np.cos(lon), cos_lat * np.sin(lon), np.sin(lat)])


def from_cartesian(vec: ArrayLike) -> tuple:
    """
    Longitude and latitude in radians of a vector.

    The longitude is in ``[-pi, pi]`` and the latitude in ``[-pi/2, pi/2]``, the vector
    does not need to be unit length.

    Parameters
    ----------
    vec:
        Vector with ``(x, y, z)`` along its first axis.
    """
    x, y, z = np.asarray(vec, dtype=float)
    return np.arctan2(y, x), np.arctan2(z, np.hypot(x, y))


def coord_class(frame: Frame) -> type:
    """
    The coordinate class which represents coordinates in the given frame.

    Parameters
    ----------
    frame:
        A reference frame.
    """
    return {
        FrameKind.ICRS: ICRSCoords,
        FrameKind.GALACTIC: GalCoords,
        FrameKind.FK5: FK5Coords,
    }[frame.kind]


def from_lon_lat(frame: Frame, lon, lat) -> SkyCoords:
    """
    Construct a coordinate in the given frame from a longitude and latitude.

    Parameters
    ----------
    frame:
        The reference frame of the coordinate.
    lon:
        Longitude in radians.
    lat:
        Latitude in radians.
    """
    if frame.kind is FrameKind.FK5:
        return FK5Coords(frame.epoch, lon, lat)
    return coord_class(frame)(lon, lat)


def _unwrap(value):
    # Scalar inputs give 0-d results, return them as plain floats.
    if np.ndim(value) == 0:
        return float(value)
    return value


def convert(frame: Frame, coord: SkyCoords) -> SkyCoords:
    """
    Convert a coordinate to another reference frame.

    If the coordinate is already in the requested frame it is returned unchanged.

    Parameters
    ----------
    frame:
        The destination frame.
    coord:
        The coordinate to convert.
    """
    if not isinstance(coord, SkyCoords):
        raise TypeError(f"Expected a sky coordinate, got {coord!r}")
    if coord.frame == frame:
        return coord
    logger.debug("Converting coordinate from %s to %s", coord.frame, frame)
    mat = rotation_matrix(frame, coord.frame)
    vec = np.tensordot(mat, coord.to_cartesian(), axes=1)
    lon, lat = from_cartesian(vec)
    return from_lon_lat(frame, _unwrap(lon), _unwrap(lat))

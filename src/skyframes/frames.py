"""
Reference frame descriptors, and the rotation matrices between the frames.

Three kinds of frames are supported, ICRS, Galactic, and FK5 at an arbitrary
equinox. Vectors are rotated between frames with :py:func:`rotation_matrix`.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional
import numpy as np
from . import constants
from .precession import precess_from_j2000
from .rotation import frozen, rotation_x, rotation_y, rotation_z

__all__ = [
    "FrameKind",
    "Frame",
    "ICRS",
    "GALACTIC",
    "FK5",
    "ICRS_TO_FK5J2000",
    "FK5J2000_TO_ICRS",
    "FK5J2000_TO_GAL",
    "GAL_TO_FK5J2000",
    "GAL_TO_ICRS",
    "ICRS_TO_GAL",
    "rotation_matrix",
]

logger = logging.getLogger(__name__)


class FrameKind(Enum):
    """
    The kinds of supported reference frames.
    """

    ICRS = "ICRS"
    GALACTIC = "Galactic"
    FK5 = "FK5"


@dataclass(frozen=True)
class Frame:
    """
    A concrete reference frame.

    FK5 frames are parameterized by their equinox, two FK5 frames with different
    equinoxes are different frames.

    Parameters
    ----------
    kind:
        Which kind of frame this is.
    epoch:
        Equinox of an FK5 frame as a Julian year, this must be ``None`` for the other
        kinds of frames.
    """

    kind: FrameKind
    epoch: Optional[float] = None

    def __post_init__(self):
        if not isinstance(self.kind, FrameKind):
            raise TypeError(f"Frame kind must be a FrameKind, got {self.kind!r}")
        if self.kind is FrameKind.FK5:
            if self.epoch is None:
                raise ValueError("FK5 frames require an epoch.")
            object.__setattr__(self, "epoch", float(self.epoch))
        elif self.epoch is not None:
            raise ValueError(f"{self.kind.value} frames do not take an epoch.")

    def __str__(self):
        if self.kind is FrameKind.FK5:
            return f"FK5(J{self.epoch})"
        return self.kind.value


ICRS = Frame(FrameKind.ICRS)
"""The International Celestial Reference System."""

GALACTIC = Frame(FrameKind.GALACTIC)
"""The Galactic frame."""


def FK5(epoch: float) -> Frame:
    """
    The FK5 frame at the specified equinox.

    Parameters
    ----------
    epoch:
        Equinox as a Julian year, for example ``2000.0``.
    """
    return Frame(FrameKind.FK5, epoch)


# Frame rotations are the transposes of the vector rotations in skyframes.rotation.
_ETA0 = np.radians(constants.ICRS_ETA0_MAS / constants.MAS_PER_DEGREE)
_XI0 = np.radians(constants.ICRS_XI0_MAS / constants.MAS_PER_DEGREE)
_DA0 = np.radians(constants.ICRS_DA0_MAS / constants.MAS_PER_DEGREE)

ICRS_TO_FK5J2000 = frozen(
    rotation_x(-_ETA0).T @ rotation_y(_XI0).T @ rotation_z(_DA0).T
)
FK5J2000_TO_ICRS = ICRS_TO_FK5J2000.T

_NGP_RA = np.radians(constants.NGP_FK5J2000_RA_DEG)
_NGP_DEC = np.radians(constants.NGP_FK5J2000_DEC_DEG)
_LON0 = np.radians(constants.LON0_FK5J2000_DEG)

FK5J2000_TO_GAL = frozen(
    rotation_z(np.pi - _LON0).T
    @ rotation_y(np.pi / 2.0 - _NGP_DEC).T
    @ rotation_z(_NGP_RA).T
)
GAL_TO_FK5J2000 = FK5J2000_TO_GAL.T

# Galactic <-> ICRS chains through FK5 J2000.
GAL_TO_ICRS = frozen(FK5J2000_TO_ICRS @ GAL_TO_FK5J2000)
ICRS_TO_GAL = GAL_TO_ICRS.T

_IDENTITY = frozen(np.eye(3))

_FIXED = {
    (FrameKind.GALACTIC, FrameKind.ICRS): ICRS_TO_GAL,
    (FrameKind.ICRS, FrameKind.GALACTIC): GAL_TO_ICRS,
}


def rotation_matrix(to_frame: Frame, from_frame: Frame) -> np.ndarray:
    """
    Rotation matrix which maps a vector in ``from_frame`` to ``to_frame``.

    Matrices between ICRS and Galactic are constant, anything involving an FK5 frame
    is computed on each call.

    Parameters
    ----------
    to_frame:
        The destination frame.
    from_frame:
        The frame the vector is currently in.
    """
    if not isinstance(to_frame, Frame) or not isinstance(from_frame, Frame):
        raise TypeError(
            f"Frames must be Frame instances, got {to_frame!r} and {from_frame!r}"
        )
    if to_frame == from_frame:
        return _IDENTITY

    to_kind, from_kind = to_frame.kind, from_frame.kind
    logger.debug("Resolving rotation %s <- %s", to_frame, from_frame)

    if (to_kind, from_kind) in _FIXED:
        return _FIXED[(to_kind, from_kind)]

    if to_kind is FrameKind.FK5:
        precess = precess_from_j2000(to_frame.epoch)
        if from_kind is FrameKind.ICRS:
            return frozen(precess @ ICRS_TO_FK5J2000)
        if from_kind is FrameKind.GALACTIC:
            return frozen(precess @ GAL_TO_FK5J2000)
        return frozen(precess @ precess_from_j2000(from_frame.epoch).T)

    # Only FK5 sources remain.
    unprecess = precess_from_j2000(from_frame.epoch).T
    if to_kind is FrameKind.ICRS:
        return frozen(FK5J2000_TO_ICRS @ unprecess)
    return frozen(FK5J2000_TO_GAL @ unprecess)

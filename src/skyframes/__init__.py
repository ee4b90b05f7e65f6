from .frames import (
    Frame,
    FrameKind,
    ICRS,
    GALACTIC,
    FK5,
    rotation_matrix,
)
from .coords import (
    SkyCoords,
    ICRSCoords,
    GalCoords,
    FK5Coords,
    convert,
    to_cartesian,
    from_cartesian,
)
from .geometry import separation, position_angle
from .conversion import parse_angle
from .precession import precess_from_j2000
from .exceptions import ParseError
from . import (
    constants,
    conversion,
    rotation,
)

import logging
import os


__all__ = [
    "constants",
    "conversion",
    "convert",
    "rotation",
    "Frame",
    "FrameKind",
    "ICRS",
    "GALACTIC",
    "FK5",
    "SkyCoords",
    "ICRSCoords",
    "GalCoords",
    "FK5Coords",
    "ParseError",
    "parse_angle",
    "position_angle",
    "precess_from_j2000",
    "rotation_matrix",
    "separation",
    "set_logging",
    "to_cartesian",
    "from_cartesian",
]


LOG_LEVEL = os.getenv("SKYFRAMES_LOG_LEVEL", "INFO")
"""
Logging level used when skyframes is imported.

This may be set by the environment variable `SKYFRAMES_LOG_LEVEL`, either as a level
name such as "DEBUG" or as a number.
"""


def set_logging(level=logging.INFO, fmt="%(asctime)s - %(message)s"):
    """
    Output logging information to the console.

    Parameters
    ----------
    level:
        The logging level to output, if this is set to 0 logging is disabled.
    fmt:
        Format of the logging messages, see the ``logging`` package for format string
        details. Here is a more verbose output example:
        "%(asctime)s %(name)s:%(lineno)s - %(message)s"
    """
    if isinstance(level, str):
        level = int(level) if level.isdigit() else level.upper()
    logger = logging.getLogger(__name__)
    logger.setLevel(level)

    # If there is already a handler in the logger, dont add another
    logger.handlers.clear()

    ch = logging.StreamHandler()
    ch.setLevel(logging.DEBUG)
    ch.setFormatter(logging.Formatter(fmt))
    logger.addHandler(ch)
    return logger


set_logging(LOG_LEVEL)

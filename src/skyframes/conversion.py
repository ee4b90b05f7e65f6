"""
Parsing of sexagesimal angle strings into radians.
"""

from __future__ import annotations
import logging
import re
import numpy as np
from .exceptions import ParseError

__all__ = ["hours_to_radians", "parse_angle"]

logger = logging.getLogger(__name__)

_NUM = r"(\d+\.?\d*)"
_SIGNED_NUM = r"([+-]?\d+\.?\d*)"
_MIN_UNIT = "['′m:]"
_SEC_UNIT = '["″s]?'

# ASCII digits only.
_HOUR_ANGLE = re.compile(
    _SIGNED_NUM + "h" + _NUM + _MIN_UNIT + _NUM + _SEC_UNIT, re.ASCII
)
_HOUR_ANGLE_LOOSE = re.compile(
    _SIGNED_NUM + "[h:]" + _NUM + _MIN_UNIT + _NUM + _SEC_UNIT, re.ASCII
)
_DEGREE = re.compile(
    _SIGNED_NUM + "[°d:]" + _NUM + _MIN_UNIT + _NUM + _SEC_UNIT, re.ASCII
)


def hours_to_radians(hours: float) -> float:
    """
    Convert an hour angle to radians, 24 hours is a full circle.

    >>> skyframes.conversion.hours_to_radians(12.0)
    3.141592653589793

    Parameters
    ----------
    hours:
        Hour angle in hours.
    """
    return np.pi * hours / 12


def _sum_fields(match, to_radians):
    # The sign belongs to the leading field only.
    first, minutes, seconds = (float(v) for v in match.groups())
    rad = to_radians(first)
    rad += to_radians(minutes / 60)
    rad += to_radians(seconds / 3600)
    return rad


def parse_angle(text: str, force_hour_angle: bool = False) -> float:
    """
    Parse a sexagesimal angle string into radians.

    Whitespace is ignored. Two forms are accepted:

    * hour angle - ``"xx h xx ['′m:] xx [\\"″s]?"``
    * degree - ``"xx [°d:] xx ['′m:] xx [\\"″s]?"``

    An hour angle is parsed if the leading unit is an ``h``, otherwise a degree is
    parsed if the leading unit is a ``°``, ``d`` or ``:``. The final unit may be left
    off. A leading sign belongs to the first field, minutes and seconds are always
    added.

    If ``force_hour_angle`` is set the input is always parsed as an hour angle, and the
    leading unit may also be a ``:``.

    >>> skyframes.parse_angle("12h52m64.300s")
    3.3731614843033575

    >>> skyframes.parse_angle("0°12'5\\"")
    0.003514899188044136

    >>> skyframes.parse_angle("12:0:0", True)
    3.141592653589793

    Parameters
    ----------
    text:
        The angle string.
    force_hour_angle:
        Interpret the string as an hour angle.
    """
    stripped = re.sub(r"\s", "", text)
    if force_hour_angle:
        match = _HOUR_ANGLE_LOOSE.search(stripped)
        if match is None:
            logger.debug("Failed to parse %r as an hour angle", text)
            raise ParseError(text, f"Could not parse {text!r} as an hour angle.")
        return float(_sum_fields(match, hours_to_radians))

    match = _HOUR_ANGLE.search(stripped)
    if match is not None:
        return float(_sum_fields(match, hours_to_radians))

    match = _DEGREE.search(stripped)
    if match is not None:
        return float(_sum_fields(match, np.radians))

    logger.debug("Failed to parse %r as an hour angle or degrees", text)
    raise ParseError(text)

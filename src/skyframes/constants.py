"""
Defining constants of the supported reference frames.

Angles are given in the units they are published in, conversion to radians happens
where the matrices are built.
"""

J2000_EPOCH = 2000.0
"""Julian year of the J2000 equinox."""

JULIAN_CENTURY_YEARS = 100.0
"""Number of Julian years in a Julian century."""

ARCSEC_PER_DEGREE = 3600.0
"""Arcseconds in one degree."""

MAS_PER_DEGREE = 3_600_000.0
"""Milliarcseconds in one degree."""

# ICRS -> FK5 J2000, USNO Circular 179, section 3.5
ICRS_ETA0_MAS = -19.9
"""Offset of the FK5 J2000 pole from the ICRS pole along y, in mas."""

ICRS_XI0_MAS = 9.1
"""Offset of the FK5 J2000 pole from the ICRS pole along x, in mas."""

ICRS_DA0_MAS = -22.9
"""Offset of the FK5 J2000 equinox from the ICRS origin of right ascension, in mas."""

# The Galactic pole and longitude zero point have no official FK5 definition, these
# match astropy.coordinates which tuned lon0 for self consistency between
# FK5 -> Galactic and FK5 -> FK4 -> Galactic.
NGP_FK5J2000_RA_DEG = 192.8594812065348
"""Right ascension of the north Galactic pole in FK5 J2000, in degrees."""

NGP_FK5J2000_DEC_DEG = 27.12825118085622
"""Declination of the north Galactic pole in FK5 J2000, in degrees."""

LON0_FK5J2000_DEG = 122.9319185680026
"""Galactic longitude of the north celestial pole of FK5 J2000, in degrees."""

# Precession from J2000 to an arbitrary equinox, Capitaine et al. 2003 as given in
# USNO Circular 179. Coefficients of t**0 .. t**5 with t in Julian centuries.
PRECESSION_ZETA = (
    2.650545,
    2306.083227,
    0.2988499,
    0.01801828,
    -0.000005971,
    -0.0000003173,
)
"""Polynomial coefficients of the zeta precession angle, in arcseconds."""

PRECESSION_Z = (
    -2.650545,
    2306.077181,
    1.0927348,
    0.01826837,
    -0.000028596,
    -0.0000002904,
)
"""Polynomial coefficients of the z precession angle, in arcseconds."""

PRECESSION_THETA = (
    0.0,
    2004.191903,
    -0.4294934,
    -0.04182264,
    -0.000007089,
    -0.0000001274,
)
"""Polynomial coefficients of the theta precession angle, in arcseconds."""

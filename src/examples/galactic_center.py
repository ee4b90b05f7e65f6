"""
The Galactic Plane on the Sky
=============================

Trace the Galactic plane in ICRS right ascension and declination, mark the Galactic
center, and show how far the J2000 and J1950 positions of the center differ.
"""

import matplotlib.pyplot as plt
import numpy as np
import skyframes

galactic_center = skyframes.convert(skyframes.ICRS, skyframes.GalCoords(0.0, 0.0))
center_b1950 = skyframes.convert(skyframes.FK5(1950.0), galactic_center)

print(
    f"Galactic center: RA {np.degrees(galactic_center.ra) % 360:0.4f} deg, "
    f"Dec {np.degrees(galactic_center.dec):0.4f} deg"
)
# The same direction, but its coordinates shift with the equinox.
shift = skyframes.separation(
    skyframes.ICRSCoords(center_b1950.ra, center_b1950.dec), galactic_center
)
print(f"J1950 coordinates differ by {np.degrees(shift) * 60:0.2f} arcmin")

# %%
# Convert the whole plane in one call, coordinates accept arrays of angles.
lons = np.radians(np.arange(0, 360, 1.0))
plane = skyframes.GalCoords(lons, np.zeros_like(lons)).convert(skyframes.ICRS)


def offset(ra):
    return (np.degrees(ra) + 180) % 360 - 180


plt.figure(dpi=200, figsize=(8, 4))
plt.scatter(offset(plane.ra), np.degrees(plane.dec), s=1, c="black", label="Plane")
plt.scatter(
    offset(galactic_center.ra),
    np.degrees(galactic_center.dec),
    s=10,
    c="red",
    label="Galactic Center",
)
plt.gca().invert_xaxis()
plt.legend(framealpha=1)
plt.xlabel("RA (Deg)")
plt.ylabel("DEC (Deg)")
plt.title("Galactic Plane in ICRS")
plt.show()

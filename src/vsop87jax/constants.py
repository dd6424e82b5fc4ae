"""
The `constants` module defines the mathematical, time and physical constants used by the VSOP87 solutions.
"""

from jax.numpy import pi as PI

# Mathematical Constants
"""
Constant to convert degrees to radians. Equal to 2pi/360. Units: *rad/deg*
"""
DEG2RAD = 2.0 * PI / 360.0

"""
Constant to convert radians to degrees. Equal to 360/2pi. Units: *deg/rad*
"""
RAD2DEG = 360.0 / (PI * 2.0)

"""
One full turn. Units: *rad*
"""
TWO_PI = 2.0 * PI

# Time Constants

"""
Julian Date of the J2000.0 epoch (2000-01-01 12:00:00 TT). Units: *days*
"""
JD_J2000 = 2451545.0

"""
Length of a Julian millennium, the time unit of the VSOP87 series. Units: *days*
"""
DAYS_PER_JULIAN_MILLENNIUM = 365250.0

# Physical Constants
"""
Astronomical Unit. VSOP87 radius vectors are expressed in this unit.
TDB-compatible value. Units: *m*

References:

1. P. Gérard and B. Luzum, *IERS Technical Note 36*, 2010
"""
AU = 1.49597870700e11  # [m] Astronomical Unit IAU 2010

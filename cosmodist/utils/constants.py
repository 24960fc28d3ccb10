"""
Physical and astronomical constants used in cosmodist.

Distances are in Mpc, times in Gyr and the Hubble constant in km/s/Mpc
unless otherwise specified. Values follow astropy so that results can be
compared against its cosmology module.
"""

# Speed of light
c_km_s = 299792.458  # km/s

# Parsec
km_per_Mpc = 3.0856775814913673e19  # km

# Year (Julian)
yr = 365.25 * 24 * 3600  # s
s_per_Gyr = 1e9 * yr  # s


def hubble_distance(H0):
    """Hubble distance c/H0 in Mpc for H0 in km/s/Mpc."""
    return c_km_s / H0


def hubble_time(H0):
    """Hubble time 1/H0 in Gyr for H0 in km/s/Mpc."""
    t_H = 1.0 / H0  # Mpc s / km
    t_H *= km_per_Mpc  # s
    return t_H / s_per_Gyr


def z_to_a(z):
    """Convert redshift to scale factor."""
    return 1.0 / (1.0 + z)

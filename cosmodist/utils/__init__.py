"""
cosmodist Utilities Package
===========================

Constants and unit helpers for cosmological calculations.
"""

from .constants import (
    c_km_s,
    km_per_Mpc,
    s_per_Gyr,
    hubble_distance,
    hubble_time,
    z_to_a,
)

__all__ = [
    'c_km_s',
    'km_per_Mpc',
    's_per_Gyr',
    'hubble_distance',
    'hubble_time',
    'z_to_a',
]

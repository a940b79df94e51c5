# -*- coding: utf-8 -*-
"""
Created on Mon Jan 19 09:12:40 2026

@author: bboyg
"""

import numpy as np

from errors import NumericDomainError


# ============================================================
# Physical constants
# ============================================================

C_LIGHT_MPS = 299792458.0      # speed of light [m/s]
K_BOLTZMANN = 1.380649e-23     # Boltzmann constant [J/K]


# ============================================================
# Angle utilities
# ============================================================

def deg2rad(deg: float) -> float:
    """
    Converts angle from degrees to radians.

    """
    return deg * np.pi / 180.0


def rad2deg(rad: float) -> float:
    """
    Converts angle from radians to degrees.

    """
    return rad * 180.0 / np.pi


def angle_wrap(ang: float) -> float:
    """
    Wrap angle to [-pi, +pi).
    """
    return (ang + np.pi) % (2.0 * np.pi) - np.pi


def angle_grid(start: float, stop: float, step: float) -> np.ndarray:
    """
    Inclusive, increasing grid start, start+step, ... <= stop.

    Built as start + k*step so the same inputs always give the same values
    (np.arange can drop or add the end point on float steps).
    """
    if not (np.isfinite(start) and np.isfinite(stop) and np.isfinite(step)):
        raise ValueError("angle grid bounds and step must be finite")
    if step <= 0:
        raise ValueError(f"angle grid step must be > 0, got {step}")
    if stop < start:
        raise ValueError(f"angle grid stop ({stop}) is below start ({start})")

    n = int(np.floor((stop - start) / step + 1e-9)) + 1
    return start + step * np.arange(n, dtype=float)


# ============================================================
# dB <-> linear
# ============================================================

def db_to_lin(x_dB: float) -> float:
    return 10.0 ** (x_dB / 10.0)


def lin_to_db(x_lin: float) -> float:
    """
    10*log10(x). Non-positive input has no dB value and raises
    NumericDomainError instead of returning -inf / nan.
    """
    if not np.isfinite(x_lin) or x_lin <= 0.0:
        raise NumericDomainError(f"cannot take dB of non-positive value {x_lin!r}")
    return float(10.0 * np.log10(x_lin))


# ============================================================
# Beam shape helper
# ============================================================

def gaussian_beam_gain(off_boresight_rad: float, bw3dB_rad: float) -> float:
    """
    Gaussian approximation of mainlobe gain roll-off (linear, 1.0 on boresight).

    bw3dB_rad is FULL 3dB beamwidth (FWHM) in radians.
    """
    if bw3dB_rad <= 0:
        return 0.0
    return float(np.exp(-4.0 * np.log(2.0) * (off_boresight_rad / bw3dB_rad) ** 2))

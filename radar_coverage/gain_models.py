# -*- coding: utf-8 -*-
"""
Created on Mon Jan 19 10:02:55 2026

@author: bboyg

Antenna gain models.

The link model only ever calls `gain(query) -> dB`, so any object with that
method can be plugged in. The classes here are closed-form or tabulated
stand-ins; pattern-file loading lives elsewhere.
"""

from dataclasses import dataclass
from enum import Enum
import numpy as np
from scipy.interpolate import RegularGridInterpolator

from errors import GainQueryFailure
from utils_units import angle_wrap, gaussian_beam_gain, rad2deg


class Polarization(Enum):
    UNKNOWN = "unknown"
    HORIZONTAL = "H"
    VERTICAL = "V"
    CIRCULAR = "C"
    HORZVERT = "HV"
    VERTHORZ = "VH"
    LEFTCIRC = "LC"
    RIGHTCIRC = "RC"


@dataclass(frozen=True)
class GainQuery:
    """
    Everything a gain model may need for one direction.

    az_rad, el_rad          : direction relative to boresight [rad]
    f_hz                    : frequency [Hz]
    g_ref_dB                : reference (boresight) gain [dB]
    polarization            : Polarization
    bw3dB_az_rad/el_rad     : full 3 dB beamwidths [rad]
    """
    az_rad: float
    el_rad: float
    f_hz: float
    g_ref_dB: float
    polarization: Polarization = Polarization.VERTICAL
    bw3dB_az_rad: float = 0.0
    bw3dB_el_rad: float = 0.0


class GainModel:
    """
    Base class for gain models.

    gain(query) -> dB
    """
    def gain(self, query: GainQuery) -> float:
        raise NotImplementedError


# ------------------------------------------------------------
# Constant gain (isotropic about the reference, handy for tests)
# ------------------------------------------------------------
@dataclass
class ConstantGain(GainModel):
    gain_dB: float

    def gain(self, query: GainQuery) -> float:
        return float(self.gain_dB)


# ------------------------------------------------------------
# Wrap a plain function
# ------------------------------------------------------------
class FunctionGain(GainModel):
    def __init__(self, func):
        self.func = func

    def gain(self, query: GainQuery) -> float:
        return float(self.func(query))


# ------------------------------------------------------------
# Gaussian main lobe
# ------------------------------------------------------------
@dataclass
class GaussianGain(GainModel):
    """
    Separable Gaussian roll-off around boresight.

    floor_dB : lowest gain relative to the reference gain, stands in for
               the side-lobe / back-lobe level
    """
    floor_dB: float = -60.0

    def gain(self, query: GainQuery) -> float:
        if query.bw3dB_az_rad <= 0 or query.bw3dB_el_rad <= 0:
            raise GainQueryFailure("Gaussian pattern needs positive beamwidths")

        gaz = gaussian_beam_gain(abs(angle_wrap(query.az_rad)), query.bw3dB_az_rad)
        gel = gaussian_beam_gain(abs(angle_wrap(query.el_rad)), query.bw3dB_el_rad)

        g_lin = gaz * gel
        rel_dB = 10.0 * np.log10(g_lin) if g_lin > 0 else -np.inf
        return float(query.g_ref_dB + max(rel_dB, self.floor_dB))


# ------------------------------------------------------------
# sin(x)/x main lobe with side lobes
# ------------------------------------------------------------
# |sin(x)/x|^2 = 0.5 at x = 1.39156
_SINC_HALF_POWER_X = 1.39156


@dataclass
class SincGain(GainModel):
    """
    Separable sin(x)/x voltage pattern in az and el, -3 dB at half the 3 dB
    beamwidth off boresight. First side lobe sits near -13.26 dB.

    floor_dB : lowest gain relative to the reference gain
    """
    floor_dB: float = -50.0

    @staticmethod
    def _voltage(angle_rad: float, bw3dB_rad: float) -> float:
        x = 2.0 * _SINC_HALF_POWER_X * angle_rad / bw3dB_rad
        # np.sinc is the normalised sin(pi x)/(pi x)
        return float(np.sinc(x / np.pi))

    def gain(self, query: GainQuery) -> float:
        if query.bw3dB_az_rad <= 0 or query.bw3dB_el_rad <= 0:
            raise GainQueryFailure("sin(x)/x pattern needs positive beamwidths")

        v = (self._voltage(angle_wrap(query.az_rad), query.bw3dB_az_rad) *
             self._voltage(angle_wrap(query.el_rad), query.bw3dB_el_rad))

        rel_dB = 20.0 * np.log10(abs(v)) if v != 0.0 else -np.inf
        return float(query.g_ref_dB + max(rel_dB, self.floor_dB))


# ------------------------------------------------------------
# Tabulated gain on an (az, el) grid
# ------------------------------------------------------------
class GainGrid(GainModel):
    """
    Gain lookup table on an az/el grid.

    az_deg   : azimuth grid [deg], increasing, typically [-180..180]
    el_deg   : elevation grid [deg], increasing, typically [-90..90]
    gain_dB  : 2D array shape (len(az_deg), len(el_deg))
    relative : if True the table is relative to the query reference gain

    Directions outside the table raise GainQueryFailure; there is no
    extrapolation.
    """

    def __init__(self, az_deg, el_deg, gain_dB, relative=True):
        self.az_deg = np.asarray(az_deg, dtype=float)
        self.el_deg = np.asarray(el_deg, dtype=float)
        self.gain_dB = np.asarray(gain_dB, dtype=float)
        self.relative = relative

        if self.gain_dB.ndim != 2:
            raise ValueError("gain_dB must be a 2D array.")

        expected = (len(self.az_deg), len(self.el_deg))
        if self.gain_dB.shape != expected:
            raise ValueError(
                f"gain_dB shape {self.gain_dB.shape} does not match "
                f"(len(az_deg), len(el_deg)) = {expected}."
            )

        self._interp = RegularGridInterpolator(
            (self.az_deg, self.el_deg),
            self.gain_dB,
            bounds_error=False,
            fill_value=np.nan
        )

    @staticmethod
    def from_cuts(az_deg, az_gain_dB, el_deg, el_gain_dB, relative=True):
        """
        Build a separable table from a principal-plane azimuth cut and
        elevation cut (both in dB): G(az, el) = G_az(az) + G_el(el).
        """
        az_gain_dB = np.asarray(az_gain_dB, dtype=float)
        el_gain_dB = np.asarray(el_gain_dB, dtype=float)
        table = az_gain_dB[:, None] + el_gain_dB[None, :]
        return GainGrid(az_deg, el_deg, table, relative=relative)

    def gain(self, query: GainQuery) -> float:
        az = rad2deg(angle_wrap(query.az_rad))
        el = rad2deg(query.el_rad)

        val = float(np.asarray(self._interp((az, el))).item())
        if not np.isfinite(val):
            raise GainQueryFailure(
                f"direction az={az:.2f} deg, el={el:.2f} deg is outside the gain table"
            )

        if self.relative:
            return float(query.g_ref_dB + val)
        return val

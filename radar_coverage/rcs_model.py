# -*- coding: utf-8 -*-
"""
Created on Tue Jan 20 11:20:06 2026

@author: bboyg
"""

from dataclasses import dataclass
import numpy as np
from scipy.interpolate import RegularGridInterpolator

from utils_units import angle_wrap, rad2deg


@dataclass
class RCSGrid:
    """
    RCS lookup table over the radar's az/el grid.

    az_deg   : azimuth grid in degrees, increasing, typically [-180..180]
    el_deg   : elevation grid in degrees, increasing, typically [-90..90]
    sigma_m2 : 2D array shape (len(az_deg), len(el_deg)) in m² (linear), > 0

    Notes:
      - sigma is stored linear so interpolation never has to undo a log.
      - Use `from_sigma_dBsm(...)` if your data is in dBsm.
    """
    az_deg: np.ndarray
    el_deg: np.ndarray
    sigma_m2: np.ndarray

    def __post_init__(self):
        self.az_deg = np.asarray(self.az_deg, dtype=float)
        self.el_deg = np.asarray(self.el_deg, dtype=float)
        self.sigma_m2 = np.asarray(self.sigma_m2, dtype=float)

        if self.sigma_m2.ndim != 2:
            raise ValueError("sigma_m2 must be a 2D array.")

        expected = (len(self.az_deg), len(self.el_deg))
        if self.sigma_m2.shape != expected:
            raise ValueError(
                f"sigma_m2 shape {self.sigma_m2.shape} does not match "
                f"(len(az_deg), len(el_deg)) = {expected}."
            )

        if not np.all(np.isfinite(self.sigma_m2)) or np.any(self.sigma_m2 <= 0):
            raise ValueError("sigma_m2 must be finite and > 0 everywhere.")

        self._interp = RegularGridInterpolator(
            (self.az_deg, self.el_deg),
            self.sigma_m2,
            bounds_error=False,
            fill_value=None
        )

    @staticmethod
    def from_sigma_dBsm(az_deg, el_deg, sigma_dBsm):
        """
        Create an RCSGrid from dBsm values.
        """
        sigma_dBsm = np.asarray(sigma_dBsm, dtype=float)
        sigma_m2 = 10.0 ** (sigma_dBsm / 10.0)
        return RCSGrid(np.asarray(az_deg, float), np.asarray(el_deg, float), sigma_m2)


class RCSModel:
    """
    Direction-dependent RCS for coverage sweeps: (az, el) [rad] -> sigma [m²].

    Elevation is clamped to the table's span; azimuth is wrapped to
    [-180, 180) degrees before lookup.
    """

    def __init__(self, grid: RCSGrid):
        self.grid = grid

    def sigma(self, az_rad: float, el_rad: float) -> float:
        az = rad2deg(angle_wrap(az_rad))
        el = float(np.clip(rad2deg(el_rad), self.grid.el_deg[0], self.grid.el_deg[-1]))
        az = float(np.clip(az, self.grid.az_deg[0], self.grid.az_deg[-1]))

        val = self.grid._interp((az, el))
        return float(np.asarray(val).item())

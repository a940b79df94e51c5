# -*- coding: utf-8 -*-
"""
Created on Mon Jan 19 09:44:17 2026

@author: bboyg
"""

from dataclasses import dataclass, replace
import numpy as np

from errors import InvalidGeometry
from utils_units import deg2rad


@dataclass(frozen=True)
class TargetGeometry:
    """
    One point target as seen from the radar.

    range_m : slant range [m]
    az_rad  : azimuth [rad]
    el_rad  : elevation [rad]
    rcs_m2  : radar cross-section [m^2] (linear)
    """
    range_m: float
    az_rad: float
    el_rad: float
    rcs_m2: float

    @staticmethod
    def from_degrees(range_m: float, az_deg: float, el_deg: float, rcs_m2: float):
        return TargetGeometry(range_m, deg2rad(az_deg), deg2rad(el_deg), rcs_m2)

    def at_range(self, range_m: float) -> "TargetGeometry":
        return replace(self, range_m=range_m)

    def validate(self):
        if not np.isfinite(self.range_m) or self.range_m <= 0:
            raise InvalidGeometry(f"target range must be > 0 m, got {self.range_m!r}")
        if not np.isfinite(self.rcs_m2) or self.rcs_m2 <= 0:
            raise InvalidGeometry(f"target RCS must be > 0 m^2, got {self.rcs_m2!r}")
        if not (np.isfinite(self.az_rad) and np.isfinite(self.el_rad)):
            raise InvalidGeometry(
                f"target angles must be finite, got az={self.az_rad!r} el={self.el_rad!r}"
            )

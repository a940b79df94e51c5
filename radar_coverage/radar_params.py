# -*- coding: utf-8 -*-
"""
Created on Mon Jan 19 09:31:02 2026

@author: bboyg
"""

from dataclasses import dataclass
import numpy as np

from errors import InvalidRadarConfig
from gain_models import Polarization
from utils_units import C_LIGHT_MPS, K_BOLTZMANN, db_to_lin


@dataclass(frozen=True)
class RadarSystemConfig:
    """
    Radar parameter container (read-only once built).

    p_tx_w       : transmit power [W]
    f_hz         : carrier frequency [Hz]
    g_ref_dB     : nominal antenna reference gain [dB], handed to the gain model
    l_sys_dB     : system losses [dB]
    t_noise_k    : noise temperature [K]
    snr_min_dB   : detection threshold [dB]
    bw_hz        : receiver noise bandwidth [Hz], only used for noise power

    polarization : polarization passed through to the gain model
    bw3dB_az_deg : azimuth 3 dB beamwidth [deg] passed to the gain model
    bw3dB_el_deg : elevation 3 dB beamwidth [deg] passed to the gain model
    """

    p_tx_w: float
    f_hz: float
    g_ref_dB: float
    l_sys_dB: float
    t_noise_k: float
    snr_min_dB: float
    bw_hz: float = 1e6

    polarization: Polarization = Polarization.VERTICAL
    bw3dB_az_deg: float = 3.0
    bw3dB_el_deg: float = 5.0

    def __post_init__(self):
        numeric = {
            "p_tx_w": self.p_tx_w,
            "f_hz": self.f_hz,
            "g_ref_dB": self.g_ref_dB,
            "l_sys_dB": self.l_sys_dB,
            "t_noise_k": self.t_noise_k,
            "snr_min_dB": self.snr_min_dB,
            "bw_hz": self.bw_hz,
            "bw3dB_az_deg": self.bw3dB_az_deg,
            "bw3dB_el_deg": self.bw3dB_el_deg,
        }
        for name, value in numeric.items():
            if not np.isfinite(value):
                raise InvalidRadarConfig(f"{name} must be finite, got {value!r}")

        for name in ("p_tx_w", "f_hz", "t_noise_k", "bw_hz", "bw3dB_az_deg", "bw3dB_el_deg"):
            if numeric[name] <= 0:
                raise InvalidRadarConfig(f"{name} must be > 0, got {numeric[name]!r}")

        if self.l_sys_dB < 0:
            raise InvalidRadarConfig(f"l_sys_dB must be >= 0, got {self.l_sys_dB!r}")

        if not isinstance(self.polarization, Polarization):
            raise InvalidRadarConfig(f"unknown polarization {self.polarization!r}")

    # ---------------------------------------------------------
    # Derived quantities
    # ---------------------------------------------------------
    @property
    def wavelength_m(self) -> float:
        return C_LIGHT_MPS / self.f_hz

    @property
    def l_sys_lin(self) -> float:
        return db_to_lin(self.l_sys_dB)

    @property
    def noise_power_w(self) -> float:
        """k_B * T * B [W]"""
        return K_BOLTZMANN * self.t_noise_k * self.bw_hz

# -*- coding: utf-8 -*-
"""
Created on Mon Jan 19 10:47:30 2026

@author: bboyg
"""

import logging
import numpy as np

from errors import CoverageError, GainQueryFailure, InvalidGeometry, NumericDomainError
from gain_models import GainQuery
from radar_params import RadarSystemConfig
from target import TargetGeometry
from utils_units import db_to_lin, deg2rad, lin_to_db

logger = logging.getLogger(__name__)


class RadarLinkModel:
    """
    Monostatic radar link budget for one point target.

    The antenna gain comes from an injected gain model at the target's
    az/el; the same gain is used for transmit and receive.

    Conventions:
        - angles in radians, relative to antenna boresight
        - ranges in meters, powers in watts, RCS in m^2
    """

    def __init__(self, params: RadarSystemConfig, gain_model):
        self.p = params
        self.gain_model = gain_model

    # ---------------------------------------------------------
    # Antenna gain
    # ---------------------------------------------------------
    def antenna_gain(self, az_rad: float, el_rad: float) -> float:
        """
        Gain [dB] toward (az, el). Every call goes to the gain model; nothing
        is cached here.
        """
        query = GainQuery(
            az_rad=az_rad,
            el_rad=el_rad,
            f_hz=self.p.f_hz,
            g_ref_dB=self.p.g_ref_dB,
            polarization=self.p.polarization,
            bw3dB_az_rad=deg2rad(self.p.bw3dB_az_deg),
            bw3dB_el_rad=deg2rad(self.p.bw3dB_el_deg),
        )
        try:
            g_dB = float(self.gain_model.gain(query))
        except CoverageError:
            raise
        except Exception as exc:
            # file-backed or third-party models fail in their own ways
            raise GainQueryFailure(
                f"gain model failed at az={az_rad:.4f} rad, el={el_rad:.4f} rad: {exc!r}"
            ) from exc

        # -inf is a legal (if useless) answer: zero linear gain. NaN / +inf are not.
        if np.isnan(g_dB) or g_dB == np.inf:
            raise GainQueryFailure(
                f"gain model returned {g_dB!r} dB at az={az_rad:.4f} rad, el={el_rad:.4f} rad"
            )
        return g_dB

    # ---------------------------------------------------------
    # Radar equation
    # ---------------------------------------------------------
    def received_power(self, target: TargetGeometry, gain_dB=None) -> float:
        """
        Pr = Pt * Gt * Gr * lam^2 * sigma / ((4 pi)^3 * R^4 * L)   [W]

        gain_dB : optional pre-computed gain toward the target; queried from
                  the gain model when omitted
        """
        target.validate()

        if gain_dB is None:
            gain_dB = self.antenna_gain(target.az_rad, target.el_rad)

        g_lin = db_to_lin(gain_dB)
        lam = self.p.wavelength_m

        num = (
            self.p.p_tx_w *
            g_lin *
            g_lin *
            lam**2 *
            target.rcs_m2
        )

        den = (
            (4*np.pi)**3 *
            target.range_m**4 *
            self.p.l_sys_lin
        )

        return num / den

    def received_power_dBm(self, target: TargetGeometry, gain_dB=None) -> float:
        return lin_to_db(self.received_power(target, gain_dB) * 1000.0)

    def snr_dB(self, target: TargetGeometry, gain_dB=None) -> float:
        pr = self.received_power(target, gain_dB)
        noise = self.p.noise_power_w

        if not pr > 0.0:
            raise NumericDomainError(
                f"received power {pr!r} W is not positive "
                f"(az={target.az_rad:.4f} rad, el={target.el_rad:.4f} rad)"
            )
        if not noise > 0.0:
            raise NumericDomainError(f"noise power {noise!r} W is not positive")

        return lin_to_db(pr / noise)

    def is_detectable(self, target: TargetGeometry, gain_dB=None) -> bool:
        return self.snr_dB(target, gain_dB) >= self.p.snr_min_dB

    # ---------------------------------------------------------
    # Closed-form inversion (cross-check for the range search)
    # ---------------------------------------------------------
    def max_range_closed_form(self, gain_dB: float, rcs_m2: float) -> float:
        """
        Range at which SNR equals the detection threshold for a fixed gain:

            R^4 = Pt G^2 lam^2 sigma / ((4 pi)^3 L k T B SNR_min)
        """
        if not np.isfinite(rcs_m2) or rcs_m2 <= 0:
            raise InvalidGeometry(f"RCS must be > 0 m^2, got {rcs_m2!r}")

        g_lin = db_to_lin(gain_dB)
        r4 = (
            self.p.p_tx_w * g_lin**2 * self.p.wavelength_m**2 * rcs_m2
        ) / (
            (4*np.pi)**3 * self.p.l_sys_lin * self.p.noise_power_w *
            db_to_lin(self.p.snr_min_dB)
        )
        return float(r4 ** 0.25)

    # ---------------------------------------------------------
    # Single evaluation record
    # ---------------------------------------------------------
    def evaluate(self, target: TargetGeometry) -> dict:
        """
        Runs the full link budget for one target.

        Returns:
            dict with measurement fields
        """
        g_dB = self.antenna_gain(target.az_rad, target.el_rad)
        pr = self.received_power(target, g_dB)
        snr = self.snr_dB(target, g_dB)
        detected = snr >= self.p.snr_min_dB

        logger.debug(
            "R=%.1f m az=%.4f el=%.4f G=%.2f dB SNR=%.2f dB detected=%s",
            target.range_m, target.az_rad, target.el_rad, g_dB, snr, detected
        )

        return {
            "range_m": target.range_m,
            "az_rad": target.az_rad,
            "el_rad": target.el_rad,
            "rcs_m2": target.rcs_m2,
            "gain_dB": g_dB,
            "pr_w": pr,
            "pr_dBm": lin_to_db(pr * 1000.0),
            "snr_dB": snr,
            "detected": bool(detected)
        }

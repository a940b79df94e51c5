# -*- coding: utf-8 -*-
"""
Created on Wed Jan 21 09:15:27 2026

@author: bboyg
"""

import logging
import numpy as np
import pandas as pd

from coverage_sweep import CoverageSweepEngine, samples_to_frame
from errors import GainQueryFailure, NumericDomainError
from radar_params import RadarSystemConfig
from range_search import SearchOutcome
from target import TargetGeometry
from utils_units import deg2rad, rad2deg

logger = logging.getLogger(__name__)


def x_band_reference_config() -> RadarSystemConfig:
    # 1 MW X-band search radar, 1 MHz receiver
    return RadarSystemConfig(
        p_tx_w=1e6,
        f_hz=10e9,
        g_ref_dB=30.0,
        l_sys_dB=6.0,
        t_noise_k=290.0,
        snr_min_dB=13.0,
        bw_hz=1e6,
        bw3dB_az_deg=3.0,
        bw3dB_el_deg=5.0
    )


def reference_targets():
    # (range_m, az_deg, el_deg, rcs_m2)
    rows = [
        (50e3,    0.0,  0.0, 1.0),
        (100e3,  30.0,  5.0, 0.5),
        (200e3,  45.0, 10.0, 2.0),
        (150e3,  90.0,  0.0, 1.5),
        (80e3,  180.0,  0.0, 0.8),
        (120e3, -45.0, 15.0, 1.2),
    ]
    return [TargetGeometry.from_degrees(*r) for r in rows]


def analyze_targets(link, targets) -> pd.DataFrame:
    """
    Link budget for a list of specific targets, one row each.

    A target whose gain query fails gets NaN powers and detected=False with
    the failure in the "error" column.
    """
    rows = []
    for k, tgt in enumerate(targets):
        row = {
            "target": f"T{k + 1}",
            "range_km": tgt.range_m / 1000.0,
            "az_deg": rad2deg(tgt.az_rad),
            "el_deg": rad2deg(tgt.el_rad),
            "rcs_m2": tgt.rcs_m2,
        }
        try:
            meas = link.evaluate(tgt)
        except (GainQueryFailure, NumericDomainError) as exc:
            logger.warning("target %s could not be evaluated: %s", row["target"], exc)
            row.update({"gain_dB": np.nan, "pr_dBm": np.nan, "snr_dB": np.nan,
                        "detected": False, "error": str(exc)})
        else:
            row.update({"gain_dB": meas["gain_dB"], "pr_dBm": meas["pr_dBm"],
                        "snr_dB": meas["snr_dB"], "detected": meas["detected"],
                        "error": None})
        rows.append(row)

    return pd.DataFrame(rows)


DEFAULT_DIRECTIONS_DEG = {
    "main_lobe": (0.0, 0.0),
    "side": (90.0, 0.0),
    "back": (180.0, 0.0),
}


def rcs_comparison(engine: CoverageSweepEngine,
                   rcs_values=(0.1, 0.5, 1.0, 2.0, 5.0, 10.0),
                   directions_deg=None) -> pd.DataFrame:
    """
    Max detectable range [km] per RCS value (rows) and direction (columns).

    NaN marks a direction whose evaluation failed; 0 marks "not detectable".
    """
    if directions_deg is None:
        directions_deg = DEFAULT_DIRECTIONS_DEG

    rows = []
    for rcs in rcs_values:
        row = {"rcs_m2": float(rcs)}
        for name, (az_deg, el_deg) in directions_deg.items():
            s = engine.evaluate_point(deg2rad(az_deg), deg2rad(el_deg), rcs)
            row[f"{name}_km"] = s.max_range_km
            row[f"{name}_capped"] = s.outcome is SearchOutcome.EXCEEDS_CEILING
        rows.append(row)

    return pd.DataFrame(rows)


def reference_coverage(engine: CoverageSweepEngine, rcs=1.0) -> dict:
    """
    Azimuth cut, elevation cut and 2D map on the default grids, as DataFrames.
    """
    return {
        "azimuth": samples_to_frame(engine.sweep_azimuth(rcs=rcs)),
        "elevation": samples_to_frame(engine.sweep_elevation(rcs=rcs)),
        "map_2d": samples_to_frame(engine.sweep_2d(rcs=rcs)),
    }

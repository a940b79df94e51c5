# -*- coding: utf-8 -*-
"""
Created on Tue Jan 20 13:41:52 2026

@author: bboyg

Coverage sweeps: maximum detectable range over az / el grids.

Iteration order is part of the contract:
    - sweep_azimuth   : increasing azimuth
    - sweep_elevation : increasing elevation
    - sweep_2d        : azimuth outer loop, elevation inner loop

A gain query or search that fails at one grid point only invalidates that
point. A sweep where every point fails raises SweepFailure.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional
import logging
import threading
import numpy as np
import pandas as pd

from errors import GainQueryFailure, NumericDomainError, SweepFailure
from range_search import SearchBounds, SearchOutcome, max_detectable_range
from utils_units import angle_grid, deg2rad, rad2deg

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CoverageSample:
    """
    One grid point.

    az_rad, el_rad : direction [rad]
    gain_dB        : antenna gain toward (az, el), NaN if the point is invalid
    max_range_m    : DETECTED        -> max detectable range
                     EXCEEDS_CEILING -> search ceiling (lower bound)
                     NOT_DETECTABLE  -> 0.0
                     invalid point   -> NaN
    outcome        : SearchOutcome, None for an invalid point
    error          : failure message for an invalid point
    """
    az_rad: float
    el_rad: float
    gain_dB: float
    max_range_m: float
    outcome: Optional[SearchOutcome]
    error: Optional[str] = None

    @staticmethod
    def invalid(az_rad: float, el_rad: float, error: str):
        return CoverageSample(az_rad, el_rad, np.nan, np.nan, None, error)

    @property
    def valid(self) -> bool:
        return self.outcome is not None

    @property
    def max_range_km(self) -> float:
        return self.max_range_m / 1000.0

    def to_record(self) -> dict:
        return {
            "az_deg": rad2deg(self.az_rad),
            "el_deg": rad2deg(self.el_rad),
            "gain_dB": self.gain_dB,
            "max_range_km": self.max_range_km,
            "outcome": self.outcome.value if self.outcome is not None else "invalid",
            "valid": self.valid,
            "error": self.error,
        }


@dataclass(frozen=True)
class CoverageSummary:
    n_total: int
    n_valid: int
    n_invalid: int
    best: Optional[CoverageSample]
    worst: Optional[CoverageSample]
    mean_range_m: float


def _rcs_at(rcs, az_rad: float, el_rad: float) -> float:
    # float, or an RCS model exposing sigma(az, el)
    if hasattr(rcs, "sigma"):
        return float(rcs.sigma(az_rad, el_rad))
    return float(rcs)


class CoverageSweepEngine:
    """
    Runs the max-range search over angular grids.

    link               : RadarLinkModel
    bounds             : SearchBounds used at every grid point
    max_workers        : evaluate grid points on a thread pool when > 1;
                         the gain model must then be safe for concurrent reads
    progress_callback  : optional f(completed, total), called after every point
    progress_log_every : INFO log cadence in points

    Progress counters belong to the engine, so one engine runs one sweep at a
    time; starting a sweep resets them. Use one engine per concurrent sweep.
    """

    def __init__(self, link, bounds: SearchBounds = SearchBounds(),
                 max_workers: Optional[int] = None,
                 progress_callback=None,
                 progress_log_every: int = 100):
        bounds.validate()

        self.link = link
        self.bounds = bounds
        self.max_workers = max_workers
        self.progress_callback = progress_callback
        self.progress_log_every = max(int(progress_log_every), 1)

        self._lock = threading.Lock()
        self.completed = 0
        self.total = 0

    # ---------------------------------------------------------
    # Progress accounting
    # ---------------------------------------------------------
    @property
    def progress(self) -> float:
        with self._lock:
            if self.total == 0:
                return 0.0
            return self.completed / self.total

    def _start(self, total: int):
        with self._lock:
            self.completed = 0
            self.total = total

    def _advance(self):
        with self._lock:
            self.completed += 1
            done, total = self.completed, self.total

        if done % self.progress_log_every == 0 or done == total:
            logger.info("coverage progress: %d/%d (%d%%)", done, total, 100 * done // total)

        if self.progress_callback is not None:
            self.progress_callback(done, total)

    # ---------------------------------------------------------
    # One grid point
    # ---------------------------------------------------------
    def evaluate_point(self, az_rad: float, el_rad: float, rcs=1.0) -> CoverageSample:
        """
        Gain and maximum detectable range toward (az, el).

        Gain query and numeric failures give an invalid sample; configuration
        errors (bad RCS, bad bounds) propagate.
        """
        try:
            g_dB = self.link.antenna_gain(az_rad, el_rad)
            sigma = _rcs_at(rcs, az_rad, el_rad)
            res = max_detectable_range(self.link, az_rad, el_rad, sigma,
                                       self.bounds, gain_dB=g_dB)
        except (GainQueryFailure, NumericDomainError) as exc:
            logger.warning(
                "invalid coverage point az=%.2f deg el=%.2f deg: %s",
                rad2deg(az_rad), rad2deg(el_rad), exc
            )
            return CoverageSample.invalid(az_rad, el_rad, str(exc))

        if res.outcome is SearchOutcome.NOT_DETECTABLE:
            r = 0.0
        else:
            r = float(res.range_m)

        return CoverageSample(az_rad, el_rad, g_dB, r, res.outcome)

    # ---------------------------------------------------------
    # Sweeps
    # ---------------------------------------------------------
    def iter_sweep(self, points, rcs=1.0):
        """
        Yields one CoverageSample per (az, el) point, in input order.

        Closing the generator abandons the sweep between points; samples
        already yielded stay valid.
        """
        points = [(float(az), float(el)) for az, el in points]
        self._start(len(points))

        if self.max_workers is None or self.max_workers <= 1:
            for az, el in points:
                sample = self.evaluate_point(az, el, rcs)
                self._advance()
                yield sample
            return

        pool = ThreadPoolExecutor(max_workers=self.max_workers)
        try:
            for sample in pool.map(lambda p: self.evaluate_point(p[0], p[1], rcs), points):
                self._advance()
                yield sample
        finally:
            pool.shutdown(wait=True, cancel_futures=True)

    def _collect(self, points, rcs) -> List[CoverageSample]:
        samples = list(self.iter_sweep(points, rcs))

        n_bad = sum(1 for s in samples if not s.valid)
        if samples and n_bad == len(samples):
            raise SweepFailure(
                f"all {len(samples)} coverage points failed; the gain model looks unusable",
                samples
            )
        if n_bad:
            logger.warning("%d of %d coverage points invalid", n_bad, len(samples))

        return samples

    def sweep_azimuth(self, el_rad: float = 0.0,
                      az_range_rad=(deg2rad(-180.0), deg2rad(180.0)),
                      az_step_rad: float = deg2rad(5.0),
                      rcs=1.0) -> List[CoverageSample]:
        """
        Azimuth cut at fixed elevation, increasing azimuth.
        """
        az_grid = angle_grid(az_range_rad[0], az_range_rad[1], az_step_rad)
        return self._collect([(az, el_rad) for az in az_grid], rcs)

    def sweep_elevation(self, az_rad: float = 0.0,
                        el_range_rad=(deg2rad(-30.0), deg2rad(90.0)),
                        el_step_rad: float = deg2rad(5.0),
                        rcs=1.0) -> List[CoverageSample]:
        """
        Elevation cut at fixed azimuth, increasing elevation.
        """
        el_grid = angle_grid(el_range_rad[0], el_range_rad[1], el_step_rad)
        return self._collect([(az_rad, el) for el in el_grid], rcs)

    @staticmethod
    def grid_points_2d(az_range_rad, az_step_rad, el_range_rad, el_step_rad):
        az_grid = angle_grid(az_range_rad[0], az_range_rad[1], az_step_rad)
        el_grid = angle_grid(el_range_rad[0], el_range_rad[1], el_step_rad)
        return [(az, el) for az in az_grid for el in el_grid]

    def sweep_2d(self,
                 az_range_rad=(deg2rad(-180.0), deg2rad(180.0)),
                 az_step_rad: float = deg2rad(10.0),
                 el_range_rad=(deg2rad(-30.0), deg2rad(90.0)),
                 el_step_rad: float = deg2rad(5.0),
                 rcs=1.0) -> List[CoverageSample]:
        """
        az/el grid: azimuth outer loop, elevation inner loop.
        """
        points = self.grid_points_2d(az_range_rad, az_step_rad, el_range_rad, el_step_rad)
        return self._collect(points, rcs)


# ============================================================
# Aggregates / tabular view
# ============================================================

def summarize(samples) -> CoverageSummary:
    """
    Best / worst coverage over the valid samples of a sweep.
    """
    samples = list(samples)
    good = [s for s in samples if s.valid]

    if not good:
        return CoverageSummary(len(samples), 0, len(samples), None, None, np.nan)

    best = max(good, key=lambda s: s.max_range_m)
    worst = min(good, key=lambda s: s.max_range_m)
    mean_r = float(np.mean([s.max_range_m for s in good]))

    return CoverageSummary(len(samples), len(good), len(samples) - len(good),
                           best, worst, mean_r)


def samples_to_frame(samples) -> pd.DataFrame:
    """
    One row per sample, in sweep order.
    """
    columns = ["az_deg", "el_deg", "gain_dB", "max_range_km", "outcome", "valid", "error"]
    return pd.DataFrame([s.to_record() for s in samples], columns=columns)

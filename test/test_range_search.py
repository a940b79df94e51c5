# -*- coding: utf-8 -*-
"""
Created on Tue Jan 20 10:12:31 2026

@author: bboyg
"""

import numpy as np
import pytest

from errors import InvalidSearchBounds
from gain_models import ConstantGain, FunctionGain
from radar import RadarLinkModel
from range_search import (
    SearchBounds, SearchOutcome, bisect_max_range, max_detectable_range, max_iterations
)
from scenarios import x_band_reference_config

# Reference X-band system, constant 30 dB antenna, 1 m^2 target,
# default bracket [1 km, 500 km], 100 m tolerance.
GOLDEN_MAX_RANGE_M = 34502.197265625


def test_bisection_converges_to_threshold_range():
    rng = np.random.default_rng(20260120)

    for _ in range(25):
        eps = float(rng.uniform(1.0, 500.0))
        r_star = float(rng.uniform(2e3, 499e3))
        bounds = SearchBounds(1e3, 500e3, eps)

        res = bisect_max_range(lambda r, r_star=r_star: r <= r_star, bounds)

        assert res.outcome is SearchOutcome.DETECTED
        assert res.range_m <= r_star
        assert r_star - res.range_m <= eps
        assert res.iterations <= max_iterations(bounds)

def test_not_detectable_at_min_range():
    res = bisect_max_range(lambda r: False, SearchBounds(1e3, 500e3, 100.0))
    assert res.outcome is SearchOutcome.NOT_DETECTABLE
    assert res.range_m is None
    assert res.detectable is False

def test_detectable_at_max_range_is_flagged():
    res = bisect_max_range(lambda r: True, SearchBounds(1e3, 500e3, 100.0))
    assert res.outcome is SearchOutcome.EXCEEDS_CEILING
    assert res.range_m == 500e3
    assert res.detectable is True

def test_bad_bounds_rejected():
    for b in (SearchBounds(5e3, 5e3, 100.0),
              SearchBounds(10e3, 1e3, 100.0),
              SearchBounds(1e3, 500e3, 0.0),
              SearchBounds(0.0, 500e3, 100.0),
              SearchBounds(1e3, np.inf, 100.0)):
        with pytest.raises(InvalidSearchBounds):
            bisect_max_range(lambda r: r < 2e3, b)

    with pytest.raises(ValueError):
        SearchBounds(2e3, 1e3).validate()

def test_iteration_cap():
    assert max_iterations(SearchBounds()) == 13
    assert max_iterations(SearchBounds(1e3, 1.05e3, 100.0)) == 0

def test_iteration_cap_stops_unreachable_tolerance():
    # 1e-20 m is finer than float spacing near 1 km; only the cap ends the loop
    bounds = SearchBounds(1e3, 2e3, 1e-20)
    res = bisect_max_range(lambda r: r <= 1234.5, bounds)
    assert res.iterations == max_iterations(bounds) == 77
    assert abs(res.range_m - 1234.5) < 1e-9

def test_reference_scenario_golden_value():
    link = RadarLinkModel(x_band_reference_config(), ConstantGain(30.0))
    res = max_detectable_range(link, 0.0, 0.0, 1.0)

    assert res.outcome is SearchOutcome.DETECTED
    assert res.iterations == 13
    assert res.gain_dB == 30.0
    assert abs(res.range_m - GOLDEN_MAX_RANGE_M) < 1e-6

    # bisection lower bound sits within one tolerance of the analytic answer
    r_true = link.max_range_closed_form(30.0, 1.0)
    assert 0.0 <= r_true - res.range_m <= 100.0

def test_golden_value_same_in_every_direction_for_constant_gain():
    link = RadarLinkModel(x_band_reference_config(), ConstantGain(30.0))
    for az, el in ((0.5, 0.1), (-2.0, 1.2), (np.pi, -0.3)):
        res = max_detectable_range(link, az, el, 1.0)
        assert abs(res.range_m - GOLDEN_MAX_RANGE_M) < 1e-6

def test_gain_queried_once_per_search():
    calls = []

    def gain(q):
        calls.append((q.az_rad, q.el_rad))
        return 30.0

    link = RadarLinkModel(x_band_reference_config(), FunctionGain(gain))
    max_detectable_range(link, 0.2, 0.1, 1.0)
    assert calls == [(0.2, 0.1)]

def test_weak_target_reports_not_detectable():
    link = RadarLinkModel(x_band_reference_config(), ConstantGain(-20.0))
    res = max_detectable_range(link, 0.0, 0.0, 0.01)
    assert res.outcome is SearchOutcome.NOT_DETECTABLE
    assert res.range_m is None

def test_huge_target_exceeds_ceiling():
    link = RadarLinkModel(x_band_reference_config(), ConstantGain(50.0))
    res = max_detectable_range(link, 0.0, 0.0, 1e4)
    assert res.outcome is SearchOutcome.EXCEEDS_CEILING
    assert res.range_m == 500e3

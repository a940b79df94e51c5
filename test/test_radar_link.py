# -*- coding: utf-8 -*-
"""
Created on Mon Jan 19 11:26:44 2026

@author: bboyg
"""

import dataclasses
import numpy as np
import pytest

from errors import GainQueryFailure, InvalidGeometry, InvalidRadarConfig, NumericDomainError
from gain_models import ConstantGain, FunctionGain, GaussianGain
from radar import RadarLinkModel
from radar_params import RadarSystemConfig
from scenarios import x_band_reference_config
from target import TargetGeometry


def make_link(gain_dB=30.0):
    return RadarLinkModel(x_band_reference_config(), ConstantGain(gain_dB))

def test_received_power_drops_16x_when_range_doubles():
    link = make_link()
    p1 = link.received_power(TargetGeometry(10e3, 0.0, 0.0, 1.0))
    p2 = link.received_power(TargetGeometry(20e3, 0.0, 0.0, 1.0))
    assert abs(p1 / p2 - 16.0) < 1e-9

def test_received_power_doubles_with_rcs():
    link = make_link()
    p1 = link.received_power(TargetGeometry(30e3, 0.1, 0.0, 1.0))
    p2 = link.received_power(TargetGeometry(30e3, 0.1, 0.0, 2.0))
    assert p2 == 2.0 * p1

def test_received_power_matches_hand_calculation():
    link = make_link()
    lam = 299792458.0 / 10e9
    expected = 1e6 * 1e3 * 1e3 * lam**2 * 1.0 / ((4*np.pi)**3 * (50e3)**4 * 10**(6/10))
    got = link.received_power(TargetGeometry(50e3, 0.0, 0.0, 1.0))
    assert abs(got - expected) / expected < 1e-12

def test_noise_power_is_ktb():
    cfg = x_band_reference_config()
    assert abs(cfg.noise_power_w - 1.380649e-23 * 290.0 * 1e6) < 1e-30

def test_detectability_non_increasing_with_range():
    link = make_link()
    ranges = np.linspace(1e3, 200e3, 400)
    det = [link.is_detectable(TargetGeometry(r, 0.3, 0.1, 1.0)) for r in ranges]
    assert det[0] is True
    assert det[-1] is False
    for a, b in zip(det[:-1], det[1:]):
        assert a or not b

def test_snr_at_closed_form_range_equals_threshold():
    link = make_link()
    r_max = link.max_range_closed_form(30.0, 1.0)
    snr = link.snr_dB(TargetGeometry(r_max, 0.0, 0.0, 1.0))
    assert abs(snr - 13.0) < 1e-9

def test_invalid_geometry_is_rejected():
    link = make_link()
    for tgt in (TargetGeometry(0.0, 0.0, 0.0, 1.0),
                TargetGeometry(-5.0, 0.0, 0.0, 1.0),
                TargetGeometry(1e3, 0.0, 0.0, 0.0),
                TargetGeometry(1e3, 0.0, 0.0, -1.0)):
        with pytest.raises(InvalidGeometry):
            link.received_power(tgt)

def test_minus_inf_gain_is_numeric_domain_error():
    link = make_link(-np.inf)
    tgt = TargetGeometry(10e3, 0.0, 0.0, 1.0)
    assert link.received_power(tgt) == 0.0
    with pytest.raises(NumericDomainError):
        link.snr_dB(tgt)

def test_nan_gain_is_gain_query_failure():
    link = make_link(np.nan)
    with pytest.raises(GainQueryFailure):
        link.antenna_gain(0.0, 0.0)
    with pytest.raises(GainQueryFailure):
        link.is_detectable(TargetGeometry(10e3, 0.0, 0.0, 1.0))

def test_gain_model_sees_config_values():
    link = RadarLinkModel(x_band_reference_config(), GaussianGain())
    assert abs(link.antenna_gain(0.0, 0.0) - 30.0) < 1e-12
    assert link.antenna_gain(0.05, 0.0) < 30.0

def test_evaluate_record():
    link = make_link()
    meas = link.evaluate(TargetGeometry.from_degrees(20e3, 10.0, 2.0, 1.0))
    assert meas["gain_dB"] == 30.0
    assert meas["detected"] is True
    assert abs(meas["pr_dBm"] - 10*np.log10(meas["pr_w"] * 1000.0)) < 1e-12
    assert meas["snr_dB"] > 13.0

def test_config_validation():
    with pytest.raises(InvalidRadarConfig):
        RadarSystemConfig(p_tx_w=0.0, f_hz=10e9, g_ref_dB=30.0, l_sys_dB=6.0,
                          t_noise_k=290.0, snr_min_dB=13.0)
    with pytest.raises(InvalidRadarConfig):
        RadarSystemConfig(p_tx_w=1e6, f_hz=10e9, g_ref_dB=30.0, l_sys_dB=-1.0,
                          t_noise_k=290.0, snr_min_dB=13.0)
    with pytest.raises(ValueError):
        RadarSystemConfig(p_tx_w=1e6, f_hz=10e9, g_ref_dB=30.0, l_sys_dB=6.0,
                          t_noise_k=290.0, snr_min_dB=np.nan)

def test_config_is_read_only():
    cfg = x_band_reference_config()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.p_tx_w = 2e6

def test_closed_form_rejects_bad_rcs():
    link = make_link()
    for bad in (0.0, -1.0, np.nan):
        try:
            link.max_range_closed_form(30.0, bad)
            assert False, "Expected InvalidGeometry"
        except InvalidGeometry:
            assert True

def test_foreign_gain_model_errors_become_gain_query_failure():
    def gain(q):
        raise OSError("pattern file went away")

    link = RadarLinkModel(x_band_reference_config(), FunctionGain(gain))
    try:
        link.antenna_gain(0.0, 0.0)
        assert False, "Expected GainQueryFailure"
    except GainQueryFailure as exc:
        assert isinstance(exc.__cause__, OSError)

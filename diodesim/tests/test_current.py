# -*- coding: utf-8 -*-
"""
Current laws: ideal Shockley, non-ideal forward (series R) and reverse
(leakage + Shockley + soft breakdown).
"""
import math

import numpy as np
import pytest

from diodesim.models.diode import DopingLevel, SimulationMode, get_params
from diodesim.physics.current import diode_current

IDEAL = SimulationMode.IDEAL
NON_IDEAL = SimulationMode.NON_IDEAL
VT = 0.026


@pytest.mark.parametrize("doping", list(DopingLevel))
@pytest.mark.parametrize("v", [0.0, 0.1, 0.45, 0.7, 1.3, 5.0])
def test_ideal_forward_matches_shockley(doping, v):
    p = get_params(doping)
    expected = p.Is * (math.exp(v / (p.n * VT)) - 1.0)
    assert math.isclose(diode_current(v, p, IDEAL), expected, rel_tol=1e-12, abs_tol=0.0)


@pytest.mark.parametrize("v", [-1e-9, -0.3, -4.6, -5.0, -60.0])
def test_ideal_reverse_is_flat(v):
    for d in DopingLevel:
        p = get_params(d)
        assert diode_current(v, p, IDEAL) == -p.Is


@pytest.mark.parametrize("mode", [IDEAL, NON_IDEAL])
def test_zero_bias_is_exactly_zero(mode):
    for d in DopingLevel:
        assert diode_current(0.0, get_params(d), mode) == 0.0


def test_series_resistance_limits_forward_current():
    p = get_params(DopingLevel.MODERATE)
    i_ideal = diode_current(0.7, p, IDEAL)
    i_non = diode_current(0.7, p, NON_IDEAL)
    assert math.isclose(i_ideal, 1e-11 * (math.exp(0.7 / (1.2 * VT)) - 1.0), rel_tol=1e-12)
    assert 0.0 < i_non < i_ideal


def test_non_ideal_forward_satisfies_kvl():
    # V = Vd + I*Rs with I = Is(exp(Vd/nVt) - 1)
    p = get_params(DopingLevel.MODERATE)
    for v in (0.2, 0.5, 0.7):
        i = diode_current(v, p, NON_IDEAL)
        vd = p.n * VT * math.log(i / p.Is + 1.0)
        assert abs(vd + i * p.Rs - v) < 1e-6


@pytest.mark.parametrize("doping", list(DopingLevel))
def test_non_ideal_forward_is_monotonic(doping):
    p = get_params(doping)
    v = np.linspace(0.0, 5.0, 201)
    i = diode_current(v, p, NON_IDEAL)
    assert np.all(np.diff(i) >= 0.0)


def test_non_ideal_reverse_components():
    p = get_params(DopingLevel.MODERATE)
    v = -1.0
    expected = v * 1e-8 + p.Is * (math.exp(v / (p.n * VT)) - 1.0)
    assert math.isclose(diode_current(v, p, NON_IDEAL), expected, rel_tol=1e-12)

    v = -21.0   # one volt past the -20 V knee
    bd = -p.Is * (math.exp(2.0 * 1.0) - 1.0) * 1000.0
    expected = v * 1e-8 + p.Is * (math.exp(v / (p.n * VT)) - 1.0) + bd
    assert math.isclose(diode_current(v, p, NON_IDEAL), expected, rel_tol=1e-12)


def test_no_breakdown_term_at_the_knee():
    p = get_params(DopingLevel.HEAVY)
    v = p.breakdown_voltage
    expected = v * 1e-8 + p.Is * (math.exp(v / (p.n * VT)) - 1.0)
    assert math.isclose(diode_current(v, p, NON_IDEAL), expected, rel_tol=1e-12)


def test_heavy_doping_soft_knee():
    p = get_params(DopingLevel.HEAVY)
    before = diode_current(-4.4, p, NON_IDEAL)
    after = diode_current(-4.6, p, NON_IDEAL)
    assert before < 0.0 and after < 0.0
    assert abs(after) > 3.0 * abs(before)


@pytest.mark.parametrize("mode", [IDEAL, NON_IDEAL])
@pytest.mark.parametrize("v", [-1e6, -500.0, 200.0, 1e6])
def test_outputs_finite_for_extreme_voltages(mode, v):
    for d in DopingLevel:
        assert math.isfinite(diode_current(v, get_params(d), mode))


@pytest.mark.parametrize("mode", [IDEAL, NON_IDEAL])
def test_array_call_matches_scalar_calls(mode):
    p = get_params(DopingLevel.HEAVY)
    v = np.round(np.arange(-50, 51) * 0.1, 2)
    arr = diode_current(v, p, mode)
    assert isinstance(arr, np.ndarray) and arr.shape == v.shape
    scal = np.array([diode_current(float(x), p, mode) for x in v])
    np.testing.assert_allclose(arr, scal, rtol=1e-9, atol=0.0)
    assert isinstance(diode_current(0.3, p, mode), float)


def test_repeated_calls_are_identical():
    p = get_params(DopingLevel.LIGHT)
    first = [diode_current(0.8, p, NON_IDEAL) for _ in range(5)]
    assert len(set(first)) == 1


def test_mode_given_by_name():
    p = get_params(DopingLevel.MODERATE)
    assert diode_current(0.7, p, "ideal") == diode_current(0.7, p, SimulationMode.IDEAL)
    assert diode_current(0.7, p, "Non-Ideal Diode") == diode_current(0.7, p, SimulationMode.NON_IDEAL)
    assert diode_current(0.7, p, "ideal") > diode_current(0.7, p, "non_ideal")
    with pytest.raises(ValueError):
        diode_current(0.7, p, "shockley")

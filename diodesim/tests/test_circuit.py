# -*- coding: utf-8 -*-
"""
Circuit readout: loop current, flow direction and animation period.
"""
import math

import pytest

from diodesim.models.diode import DopingLevel, SimulationMode, get_params
from diodesim.physics.circuit import FlowDirection, circuit_readout, flow_period
from diodesim.physics.current import diode_current


def test_flow_period():
    assert flow_period(0.0) == 0.0
    assert flow_period(0.009) == 0.0
    assert flow_period(-0.009) == 0.0
    assert math.isclose(flow_period(1.0), 3.0 - math.log10(2.0))
    assert math.isclose(flow_period(-9.0), 2.0)
    assert flow_period(1e6) == 0.5


def test_forward_readout():
    p = get_params(DopingLevel.MODERATE)
    r = circuit_readout(0.7, p, SimulationMode.NON_IDEAL)
    assert math.isclose(r.current_mA, diode_current(0.7, p, SimulationMode.NON_IDEAL) * 1e3)
    assert r.direction is FlowDirection.CLOCKWISE
    assert r.flowing and 0.5 <= r.period_s < 3.0
    assert 3.0 < r.marker_radius <= 6.0
    assert "clockwise" in r.summary()


def test_reverse_leakage_is_static():
    p = get_params(DopingLevel.MODERATE)
    r = circuit_readout(-1.0, p, SimulationMode.NON_IDEAL)
    assert r.direction is FlowDirection.COUNTER_CLOCKWISE
    assert r.current_mA < 0.0
    assert not r.flowing
    assert r.marker_radius == 0.0
    assert "static" in r.summary()


def test_breakdown_current_shows_marker():
    p = get_params(DopingLevel.HEAVY)
    r = circuit_readout(-5.0, p, SimulationMode.NON_IDEAL)
    # about -1.8 uA: past the marker threshold, below the flow threshold
    assert r.direction is FlowDirection.COUNTER_CLOCKWISE
    assert r.marker_radius > 0.0
    assert not r.flowing


@pytest.mark.parametrize("mode", list(SimulationMode))
def test_zero_bias(mode):
    r = circuit_readout(0.0, get_params(DopingLevel.LIGHT), mode)
    assert r.current_mA == 0.0 and not r.flowing

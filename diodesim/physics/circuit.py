# diodesim/physics/circuit.py
"""
Macroscopic circuit readout: source, diode and load in one loop.

The source polarity follows the sign of the applied voltage. Conventional
current runs clockwise (source + → P → N → load) in forward bias and
counter-clockwise in reverse bias. The flow animation period shrinks
logarithmically with |I|:

    period = 0                          if |I| < 0.01 mA  (static)
    period = max(0.5, 3 − log10(|I| + 1))  otherwise       [s, I in mA]

A marker is drawn once |I| exceeds 0.001 mA; its size grows with |I| and is
capped at twice the base radius.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import math

from diodesim.models.diode import DiodeParams, SimulationMode
from diodesim.physics.current import diode_current

__all__ = ["FlowDirection", "CircuitReadout", "flow_period", "circuit_readout"]

STATIC_BELOW_MA = 0.01
MARKER_BELOW_MA = 0.001
MIN_PERIOD_S = 0.5
BASE_PERIOD_S = 3.0
MARKER_RADIUS = 3.0


class FlowDirection(Enum):
    CLOCKWISE = "clockwise"
    COUNTER_CLOCKWISE = "counter-clockwise"


@dataclass(frozen=True, slots=True)
class CircuitReadout:
    voltage: float
    current_mA: float
    direction: FlowDirection
    period_s: float        # 0 → no flow animation
    marker_radius: float   # 0 → no marker

    @property
    def flowing(self) -> bool:
        return self.period_s > 0.0

    def summary(self) -> str:
        flow = f"{self.direction.value}, period {self.period_s:.2f} s" if self.flowing else "static"
        return f"V_source = {self.voltage:+.2f} V | I = {self.current_mA:+.2f} mA | flow: {flow}"


def flow_period(current_mA: float) -> float:
    """Animation period [s] of the loop current; 0 below the display threshold."""
    mag = abs(current_mA)
    if mag < STATIC_BELOW_MA:
        return 0.0
    return max(MIN_PERIOD_S, BASE_PERIOD_S - math.log10(mag + 1.0))


def circuit_readout(voltage: float, params: DiodeParams, mode: SimulationMode) -> CircuitReadout:
    i_mA = diode_current(float(voltage), params, mode) * 1e3
    mag = abs(i_mA)
    radius = MARKER_RADIUS + min(MARKER_RADIUS, mag / 50.0) if mag > MARKER_BELOW_MA else 0.0
    direction = FlowDirection.COUNTER_CLOCKWISE if voltage < 0.0 else FlowDirection.CLOCKWISE
    return CircuitReadout(
        voltage=float(voltage),
        current_mA=i_mA,
        direction=direction,
        period_s=flow_period(i_mA),
        marker_radius=radius,
    )

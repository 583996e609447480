# diodesim/physics/bias.py
"""
Bias-regime bookkeeping for readouts: regime label, barrier height, band step,
depletion description and a short explanation text.
"""
from __future__ import annotations

from enum import Enum

from diodesim.models.diode import DiodeParams, SimulationMode
from diodesim.physics.depletion import depletion_factor

__all__ = [
    "BiasRegime",
    "classify_bias",
    "barrier_height",
    "band_step",
    "describe_depletion",
    "explain",
]

FORWARD_THRESHOLD_V = 0.05
REVERSE_THRESHOLD_V = -0.05
BREAKDOWN_LEAD_V = 0.5   # regime switches to "breakdown" this far before the knee


class BiasRegime(Enum):
    UNBIASED = "Unbiased"
    FORWARD = "Forward Bias"
    REVERSE = "Reverse Bias"
    BREAKDOWN = "Breakdown Region"


def classify_bias(voltage: float, params: DiodeParams) -> BiasRegime:
    if voltage > FORWARD_THRESHOLD_V:
        return BiasRegime.FORWARD
    if voltage < params.breakdown_voltage + BREAKDOWN_LEAD_V:
        return BiasRegime.BREAKDOWN
    if voltage < REVERSE_THRESHOLD_V:
        return BiasRegime.REVERSE
    return BiasRegime.UNBIASED


def barrier_height(voltage: float, Vbi: float) -> float:
    """Approximate potential barrier Vbi − V; reverse bias is reported as Vbi."""
    return Vbi - max(voltage, 0.0)


def band_step(voltage: float, Vbi: float) -> float:
    """Conduction-band step q(Vbi − V) in eV, floored at 0.1 for drawing."""
    return max(0.1, Vbi - voltage)


def describe_depletion(factor: float) -> str:
    if factor > 1.2:
        return "Wide (Reverse Bias)"
    if factor < 0.8:
        return "Narrow (Forward Bias)"
    return "Medium (Equilibrium)"


_TEXT = {
    BiasRegime.UNBIASED: (
        "Equilibrium: the Fermi levels of the P and N sides align. Diffusion of "
        "majority carriers is balanced by drift of minority carriers in the "
        "built-in field, so no net current flows."
    ),
    BiasRegime.FORWARD: (
        "Forward bias: the applied voltage opposes the built-in potential and the "
        "barrier drops to Vbi - V. Majority carriers diffuse across the junction "
        "and the current grows as exp(qV/nkT)."
    ),
    BiasRegime.REVERSE: (
        "Reverse bias: the applied voltage adds to the built-in potential. "
        "Majority diffusion is blocked; only the small saturation current of "
        "thermally generated minority carriers flows."
    ),
    BiasRegime.BREAKDOWN: (
        "Breakdown: the junction field is strong enough for avalanche "
        "multiplication or Zener tunnelling, and the reverse current rises sharply."
    ),
}

_SERIES_RESISTANCE_NOTE = (
    "Non-ideal effect: at higher currents the drop across the series resistance "
    "Rs becomes significant and the I-V curve turns linear rather than exponential."
)


def explain(voltage: float, params: DiodeParams, mode: SimulationMode) -> str:
    """Multi-line readout for the operating point."""
    regime = classify_bias(voltage, params)
    factor = depletion_factor(voltage, params.Vbi)
    lines = [
        regime.value,
        f"Depletion width: {describe_depletion(factor)}",
        f"Potential barrier: {barrier_height(voltage, params.Vbi):.2f} V (approx)",
        _TEXT[regime],
    ]
    if regime is BiasRegime.FORWARD and mode is SimulationMode.NON_IDEAL:
        lines.append(_SERIES_RESISTANCE_NOTE)
    return "\n".join(lines)

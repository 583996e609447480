# diodesim/physics/current.py
"""
Diode current laws (SI units, vectorized).

Ideal (Shockley):
  • V ≥ 0:  I = Is (exp(V / n Vt) − 1)
  • V < 0:  I = −Is   (flat; no breakdown in the ideal picture)

Non-ideal:
  • V ≥ 0:  series resistance, V = Vd + I(Vd) Rs solved for Vd by Newton
            (see solver/newton.py), then I = Is (exp(Vd / n Vt) − 1).
  • V < 0:  I = G_leak V + Is (exp(V / n Vt) − 1) + I_bd, with the soft knee
            I_bd = −Is (exp(2 (V_bd − V)) − 1) · 1000 past V_bd, else 0.

Every call is a pure function of (voltage, params, mode). Scalars in give a
float out; arrays give an ndarray of the same shape.

Public API (stable):
    diode_current(voltage, params, mode) -> float | np.ndarray
    ideal_current(voltage, params) -> np.ndarray
    non_ideal_current(voltage, params, options=None) -> np.ndarray
"""
from __future__ import annotations

from typing import Any, Dict

import numpy as np

from diodesim.models.diode import DiodeParams, SimulationMode
from diodesim.solver.newton import safe_exp, solve_junction_voltage
from diodesim.utils.constants import (
    VT,
    LEAKAGE_CONDUCTANCE,
    BREAKDOWN_SLOPE,
    BREAKDOWN_GAIN,
)

__all__ = [
    "shockley",
    "ideal_current",
    "non_ideal_current",
    "diode_current",
]


def _c64(x) -> np.ndarray:
    return np.asarray(x, dtype=np.float64)


def shockley(v, params: DiodeParams) -> np.ndarray:
    """Is (exp(V / n Vt) − 1) with a clipped exponent."""
    return params.Is * (safe_exp(_c64(v) / (params.n * VT)) - 1.0)


def ideal_current(voltage, params: DiodeParams) -> np.ndarray:
    v = _c64(voltage)
    return np.where(v >= 0.0, shockley(np.maximum(v, 0.0), params), -params.Is)


def _breakdown(v: np.ndarray, params: DiodeParams) -> np.ndarray:
    over = np.maximum(params.breakdown_voltage - v, 0.0)
    soft = -params.Is * (safe_exp(over * BREAKDOWN_SLOPE) - 1.0) * BREAKDOWN_GAIN
    return np.where(v < params.breakdown_voltage, soft, 0.0)


def non_ideal_current(
    voltage,
    params: DiodeParams,
    options: Dict[str, Any] | None = None,
) -> np.ndarray:
    """Non-ideal law; ``options`` go to the forward Newton solve (default 10 iterations, 1e-5 V)."""
    shape = np.shape(voltage)
    v = _c64(voltage).ravel()
    out = np.empty(v.shape, dtype=np.float64)

    fwd = v >= 0.0
    if np.any(fwd):
        sol = solve_junction_voltage(v[fwd], params, options)
        out[fwd] = shockley(sol.x, params)

    rev = ~fwd
    if np.any(rev):
        vr = v[rev]
        leakage = vr * LEAKAGE_CONDUCTANCE
        out[rev] = leakage + shockley(vr, params) + _breakdown(vr, params)
    return out.reshape(shape)


def diode_current(voltage, params: DiodeParams, mode: SimulationMode):
    """Terminal current [A] at the applied voltage(s) for the given mode.

    ``mode`` may be a SimulationMode or anything ``SimulationMode.parse`` accepts;
    unknown modes raise ValueError.
    """
    mode = SimulationMode.parse(mode)
    if mode is SimulationMode.IDEAL:
        i = ideal_current(voltage, params)
    else:
        i = non_ideal_current(voltage, params)
    if np.ndim(voltage) == 0:
        return float(i)
    return i

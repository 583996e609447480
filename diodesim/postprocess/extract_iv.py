# -*- coding: utf-8 -*-
"""
DC I–V metrics.
"""
from __future__ import annotations

from typing import Any, Dict

import numpy as np

from diodesim.models.diode import DiodeParams, SimulationMode
from diodesim.solver.newton import solve_junction_voltage
from diodesim.workflows.sweep import CurveData


def ron(v: np.ndarray, i: np.ndarray, v_window: tuple[float, float] | None = None) -> float:
    """
    Extract R_on as the inverse slope around a window (or entire range).
    """
    v = np.asarray(v, dtype=np.float64)
    i = np.asarray(i, dtype=np.float64)
    if v_window:
        mask = (v >= v_window[0]) & (v <= v_window[1])
        v, i = v[mask], i[mask]
    if v.size < 2:
        raise ValueError("ron() needs at least two points in the window")
    p = np.polyfit(v, i, 1)
    slope = p[0]
    return 1.0 / max(slope, 1e-30)


def turn_on_voltage(v: np.ndarray, i: np.ndarray, threshold: float) -> float:
    """First swept voltage at which the current exceeds ``threshold`` (NaN if never)."""
    v = np.asarray(v, dtype=np.float64)
    i = np.asarray(i, dtype=np.float64)
    above = np.flatnonzero(i > threshold)
    return float(v[above[0]]) if above.size else float("nan")


def current_at(v: np.ndarray, i: np.ndarray, v_query: float) -> float:
    """Linear interpolation of the sampled series at ``v_query`` (NaN outside the sweep)."""
    v = np.asarray(v, dtype=np.float64)
    if v.size == 0 or not v[0] <= v_query <= v[-1]:
        return float("nan")
    return float(np.interp(v_query, v, i))


def curve_metrics(
    curves: CurveData,
    params: DiodeParams,
    options: Dict[str, Any] | None = None,
    *,
    converged: np.ndarray | None = None,
) -> Dict[str, float]:
    """
    Headline numbers for a sampled curve pair (currents in the curve's display unit).

    ``forward_unconverged_frac`` is the share of forward points whose Newton solve
    hit the iteration cap; those points carry the last iterate's current. Pass
    per-point ``converged`` flags (same length as the sweep) to reuse an earlier
    solve instead of running Newton again.
    """
    v = curves.voltages()
    i_id = curves.currents(SimulationMode.IDEAL)
    i_ni = curves.currents(SimulationMode.NON_IDEAL)
    one_mA = 1e-3 * curves.scale

    fwd = v >= 0.0
    if converged is None:
        ok = solve_junction_voltage(v[fwd], params, options).converged
    else:
        converged = np.asarray(converged, dtype=bool)
        if converged.shape != v.shape:
            raise ValueError(f"converged has shape {converged.shape}, sweep has {v.shape}")
        ok = converged[fwd]
    unconverged = float(np.mean(~ok)) if ok.size else 0.0

    return {
        "I_ideal_0p7V": current_at(v, i_id, 0.7),
        "I_non_ideal_0p7V": current_at(v, i_ni, 0.7),
        "V_on_ideal_1mA": turn_on_voltage(v, i_id, one_mA),
        "V_on_non_ideal_1mA": turn_on_voltage(v, i_ni, one_mA),
        "I_reverse_m1V": current_at(v, i_ni, -1.0),
        "I_non_ideal_vmin": float(i_ni[0]),
        "forward_unconverged_frac": unconverged,
        "scale": float(curves.scale),
    }

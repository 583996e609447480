# diodesim/physics/depletion.py
"""
Normalized depletion-region width.

    W(V) / W_ref = sqrt(Vbi − V_eff) / sqrt(Vbi),   V_eff = min(V, Vbi − 0.05)

The radicand is kept ≥ 0.05 V so forward bias past Vbi stays defined, and the
result is clipped to [0.1, 3.0] so renderers get a sane width for any input.
"""
from __future__ import annotations

import numpy as np

__all__ = ["FORWARD_MARGIN_V", "FACTOR_MIN", "FACTOR_MAX", "depletion_factor"]

FORWARD_MARGIN_V = 0.05
FACTOR_MIN = 0.1
FACTOR_MAX = 3.0


def depletion_factor(voltage, Vbi: float):
    """Dimensionless depletion width scale in [0.1, 3.0] (float in, float out)."""
    Vbi = float(Vbi)
    if not Vbi > 0.0:
        raise ValueError(f"Vbi must be > 0 (got {Vbi})")
    v_eff = np.minimum(np.asarray(voltage, dtype=np.float64), Vbi - FORWARD_MARGIN_V)
    w = np.sqrt(Vbi - v_eff) / np.sqrt(Vbi)
    w = np.clip(w, FACTOR_MIN, FACTOR_MAX)
    if np.ndim(voltage) == 0:
        return float(w)
    return w

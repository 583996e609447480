# -*- coding: utf-8 -*-
"""
I–V curve sampling.

One sweep gives both the ideal and the non-ideal series on the same voltage
grid. Voltages are rounded to 2 decimals before evaluation so the grid does not
drift with the step accumulation. Currents are scaled for display (×1000 → mA).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

import numpy as np

from diodesim.models.diode import DiodeParams, DopingLevel, SimulationMode, get_params
from diodesim.physics.current import ideal_current, non_ideal_current

__all__ = [
    "CurvePoint",
    "CurveData",
    "SweepSpec",
    "sample_curve",
    "sweep_dopings",
]

DISPLAY_SCALE_MA = 1000.0
GRID_RESOLUTION_V = 0.01


@dataclass(frozen=True, slots=True)
class CurvePoint:
    voltage: float
    current: float


@dataclass(frozen=True, slots=True)
class SweepSpec:
    v_min: float = -5.0
    v_max: float = 5.0
    step: float = 0.1

    def __post_init__(self) -> None:
        if not self.step > 0.0:
            raise ValueError(f"sweep step must be > 0 (got {self.step})")
        if self.step < GRID_RESOLUTION_V or round(self.step, 2) != self.step:
            raise ValueError(
                f"sweep step must be a multiple of {GRID_RESOLUTION_V} V (got {self.step}); "
                "voltages are rounded to 2 decimals"
            )
        if round(self.v_min, 2) != self.v_min:
            raise ValueError(f"sweep v_min must lie on the {GRID_RESOLUTION_V} V grid (got {self.v_min})")
        if self.v_max < self.v_min:
            raise ValueError(f"sweep range is inverted: v_min={self.v_min} > v_max={self.v_max}")

    @property
    def n_points(self) -> int:
        return int(round((self.v_max - self.v_min) / self.step)) + 1

    def voltages(self) -> np.ndarray:
        k = np.arange(self.n_points, dtype=np.float64)
        return np.round(self.v_min + k * self.step, 2)


@dataclass(frozen=True, slots=True)
class CurveData:
    ideal_points: List[CurvePoint]
    non_ideal_points: List[CurvePoint]
    scale: float = DISPLAY_SCALE_MA

    def voltages(self) -> np.ndarray:
        return np.array([p.voltage for p in self.ideal_points], dtype=np.float64)

    def currents(self, mode: SimulationMode) -> np.ndarray:
        pts = self.ideal_points if mode is SimulationMode.IDEAL else self.non_ideal_points
        return np.array([p.current for p in pts], dtype=np.float64)


def sample_curve(
    params: DiodeParams,
    sweep: SweepSpec | None = None,
    options: Dict[str, Any] | None = None,
    scale: float = DISPLAY_SCALE_MA,
) -> CurveData:
    """Ideal and non-ideal I–V series over the sweep grid (default −5…5 V, 0.1 V, mA).

    ``options`` override the forward Newton settings (max_iters, tol_step);
    leave it None for the standard model.
    """
    v = (sweep or SweepSpec()).voltages()
    i_ideal = ideal_current(v, params) * scale
    i_non = non_ideal_current(v, params, options) * scale
    return CurveData(
        ideal_points=[CurvePoint(float(a), float(b)) for a, b in zip(v, i_ideal)],
        non_ideal_points=[CurvePoint(float(a), float(b)) for a, b in zip(v, i_non)],
        scale=float(scale),
    )


def sweep_dopings(
    sweep: SweepSpec | None = None,
    scale: float = DISPLAY_SCALE_MA,
) -> Dict[DopingLevel, CurveData]:
    """One CurveData per doping level, in enum order."""
    return {d: sample_curve(get_params(d), sweep, scale=scale) for d in DopingLevel}

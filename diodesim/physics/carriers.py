# diodesim/physics/carriers.py
"""
Cosmetic carrier animation for the junction view (pixel units).

Holes start on the p side (left), electrons on the n side (right). Each tick:
thermal motion, a bias drift of 0.15·V px (holes → right, electrons → left),
reflection at top/bottom, a probabilistic bounce at the depletion edge with
P = min(1, (Vbi − V)/2), and wrap-around at the left/right edges.

State lives in flat arrays indexed by particle; ``step_carriers`` returns a
new state and never touches its input. Randomness comes only from the
``np.random.Generator`` passed in, so a fixed seed replays exactly.
No physics is derived from this module.
"""
from __future__ import annotations

from dataclasses import dataclass, replace

import numpy as np

from diodesim.models.diode import DiodeParams
from diodesim.physics.depletion import depletion_factor

__all__ = [
    "CANVAS_WIDTH",
    "CANVAS_HEIGHT",
    "BASE_DEPLETION_WIDTH",
    "CarrierState",
    "depletion_edges",
    "init_carriers",
    "step_carriers",
]

CANVAS_WIDTH = 800.0
CANVAS_HEIGHT = 300.0
BASE_DEPLETION_WIDTH = 120.0   # px at equilibrium
DRIFT_PER_VOLT = 0.15          # px/tick per applied volt
THERMAL_SPEED = 0.8            # full width of the initial velocity spread [px/tick]


@dataclass(slots=True)
class CarrierState:
    x: np.ndarray
    y: np.ndarray
    vx: np.ndarray
    vy: np.ndarray
    is_hole: np.ndarray    # bool; False → electron
    width: float = CANVAS_WIDTH
    height: float = CANVAS_HEIGHT

    @property
    def size(self) -> int:
        return int(self.x.size)


def depletion_edges(voltage: float, params: DiodeParams, width: float = CANVAS_WIDTH) -> tuple[float, float]:
    """Left/right depletion boundaries [px] around the canvas centre."""
    w = BASE_DEPLETION_WIDTH * depletion_factor(voltage, params.Vbi)
    centre = 0.5 * width
    return centre - 0.5 * w, centre + 0.5 * w


def init_carriers(
    n_per_type: int = 120,
    seed: int = 0,
    *,
    width: float = CANVAS_WIDTH,
    height: float = CANVAS_HEIGHT,
) -> CarrierState:
    """Deterministic initial placement: holes left of centre, electrons right."""
    rng = np.random.default_rng(seed)
    centre = 0.5 * width
    xh = rng.random(n_per_type) * (centre - 10.0)
    xe = centre + 10.0 + rng.random(n_per_type) * (centre - 20.0)
    y = rng.random(2 * n_per_type) * height
    v = (rng.random((2, 2 * n_per_type)) - 0.5) * THERMAL_SPEED
    is_hole = np.concatenate([np.ones(n_per_type, bool), np.zeros(n_per_type, bool)])
    return CarrierState(
        x=np.concatenate([xh, xe]), y=y, vx=v[0], vy=v[1],
        is_hole=is_hole, width=float(width), height=float(height),
    )


def step_carriers(
    state: CarrierState,
    voltage: float,
    params: DiodeParams,
    rng: np.random.Generator,
    speed: float = 1.0,
) -> CarrierState:
    """Advance every carrier by one animation tick."""
    W, H = state.width, state.height
    centre = 0.5 * W
    dep_left, dep_right = depletion_edges(voltage, params, W)
    p_bounce = min(1.0, max(0.0, params.Vbi - voltage) / 2.0)
    drift = DRIFT_PER_VOLT * voltage * speed

    x = state.x + state.vx * speed
    y = state.y + state.vy * speed
    vx = state.vx.copy()
    vy = state.vy.copy()

    # top/bottom reflection
    off = (y < 0.0) | (y > H)
    vy[off] *= -1.0
    y = np.clip(y, 0.0, H)

    hole = state.is_hole
    x = np.where(hole, x + drift, x - drift)

    # barrier: carriers entering the depletion zone from their majority side
    roll = rng.random(x.size) < p_bounce
    hit_h = hole & (x > dep_left) & (x < centre) & roll
    hit_e = ~hole & (x < dep_right) & (x > centre) & roll
    vx[hit_h] = -np.abs(vx[hit_h])
    x[hit_h] = dep_left - 1.0
    vx[hit_e] = np.abs(vx[hit_e])
    x[hit_e] = dep_right + 1.0

    # wrap-around: carriers leaving on the far side re-enter at a fresh height
    fresh_y = rng.random(x.size) * H
    exit_far = (hole & (x > W)) | (~hole & (x < 0.0))
    exit_near = (hole & (x < 0.0)) | (~hole & (x > W))
    y = np.where(exit_far, fresh_y, y)
    x = np.where(hole & (x > W), 0.0, x)
    x = np.where(~hole & (x < 0.0), W, x)
    x = np.where(exit_near & hole, W, x)
    x = np.where(exit_near & ~hole, 0.0, x)

    return replace(state, x=x, y=y, vx=vx, vy=vy)

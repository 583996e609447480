# diodesim/solver/newton.py
# Newton–Raphson solve for the junction voltage of a diode with series resistance.
# Element-wise over an array of applied voltages; each element keeps its own
# early exit, so the array call is identical to a loop of scalar calls.

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

import numpy as np

from diodesim.models.diode import DiodeParams
from diodesim.utils import diagnostics as diag
from diodesim.utils.constants import VT, EXP_ARG_MAX

__all__ = ["SolveResult", "DEFAULT_OPTIONS", "safe_exp", "solve_junction_voltage"]


@dataclass
class SolveResult:
    x: np.ndarray           # junction voltage Vd after the clamp [V]
    residual: np.ndarray    # f(Vd) before the clamp
    iters: np.ndarray       # Newton updates applied per element
    converged: np.ndarray   # |ΔVd| < tol_step reached within max_iters
    clamped: np.ndarray     # Vd was clipped down to the applied voltage

    @property
    def all_converged(self) -> bool:
        return bool(np.all(self.converged))


DEFAULT_OPTIONS: Dict[str, Any] = dict(
    max_iters=10,
    tol_step=1e-5,
    print_every=1,
)


# ---- numerics ---------------------------------------------------------------


def safe_exp(arg):
    """exp() with the argument clipped to EXP_ARG_MAX so the result stays finite."""
    return np.exp(np.minimum(arg, EXP_ARG_MAX))


def _inf_norm(x: np.ndarray) -> float:
    return float(np.max(np.abs(x))) if x.size else 0.0


# ---- solver -----------------------------------------------------------------


def solve_junction_voltage(
    voltage,
    params: DiodeParams,
    options: Dict[str, Any] | None = None,
    *,
    debug: bool = False,
) -> SolveResult:
    """Solve V = Vd + Is·Rs·(exp(Vd/(n·Vt)) − 1) for Vd.

    Parameters
    ----------
    voltage : float or array-like
        Applied terminal voltage(s) [V]. Intended for forward bias (V ≥ 0).
    params : DiodeParams
    options : dict
        Keys (all optional):
          - max_iters (int, default 10)
          - tol_step (float, default 1e-5), early exit on |Vd_{k+1} − Vd_k|
          - print_every (int, default 1)
    debug : bool
        Print per-iteration diagnostics.

    Notes
    -----
    The start point is Vd0 = V. From above the root each Newton step removes
    roughly n·Vt, so with the default cap the solve stalls for V ≳ 1 V and
    the last iterate is returned as is (``converged`` is False there).
    After the loop Vd is clipped to V.
    """
    opts = dict(DEFAULT_OPTIONS)
    if options:
        opts.update(options)
    max_iters = int(opts["max_iters"])
    tol = float(opts["tol_step"])

    v = np.atleast_1d(np.asarray(voltage, dtype=np.float64))
    nvt = params.n * VT
    isrs = params.Is * params.Rs

    vd = v.copy()
    iters = np.zeros(v.shape, dtype=np.int64)
    active = np.ones(v.shape, dtype=bool)

    if debug:
        diag.log_solver_start(solver="Newton", n_points=v.size, v_applied=v,
                              max_iters=max_iters, tol_step=tol)

    it = 0
    for it in range(1, max_iters + 1):
        if not np.any(active):
            it -= 1
            break
        x = vd[active]
        e = safe_exp(x / nvt)
        f = x + isrs * (e - 1.0) - v[active]
        df = 1.0 + isrs * e / nvt
        x_next = x - f / df

        step = np.abs(x_next - x)
        vd[active] = x_next
        iters[active] += 1

        done = step < tol
        idx = np.flatnonzero(active)
        active[idx[done]] = False

        if debug and (it % int(opts["print_every"]) == 0):
            diag.log_solver_iter(solver="Newton", it=it, active=int(np.count_nonzero(active)),
                                 max_step=_inf_norm(step), res_inf=_inf_norm(f))

    converged = ~active
    residual = vd + isrs * (safe_exp(vd / nvt) - 1.0) - v

    clamped = vd > v
    vd = np.where(clamped, v, vd)

    if debug:
        diag.log_convergence_summary(
            solver="Newton", converged=int(np.count_nonzero(converged)), total=v.size,
            clamped=int(np.count_nonzero(clamped)), iters=int(it), res_inf=_inf_norm(residual),
        )

    return SolveResult(x=vd, residual=residual, iters=iters, converged=converged, clamped=clamped)

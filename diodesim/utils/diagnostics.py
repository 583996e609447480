"""
diodesim/utils/diagnostics.py

Targeted, low-noise diagnostics to understand why a junction solve stalls.
Import and call these from solvers/workflows when debug=True.
"""

from __future__ import annotations

import numpy as np


def _fmt_range(x: np.ndarray, name: str) -> str:
    if x.size == 0:
        return f"{name}: (empty)"
    return f"{name}∈[{np.min(x):+.3e},{np.max(x):+.3e}]"


def log_solver_start(
    *,
    solver: str,
    n_points: int,
    v_applied: np.ndarray,
    max_iters: int,
    tol_step: float,
    prefix: str = "[sol]",
) -> None:
    print(
        f"{prefix} {solver} start | points={n_points} | "
        f"{_fmt_range(v_applied, 'V')} V | max_iters={max_iters} tol={tol_step:.1e}"
    )


def log_solver_iter(
    *,
    solver: str,
    it: int,
    active: int,
    max_step: float,
    res_inf: float,
    prefix: str = "[sol]",
) -> None:
    print(
        f"{prefix} {solver} iter {it:02d} | active={active} | "
        f"max|ΔVd|={max_step:.3e} V | ||f||_inf={res_inf:.3e}"
    )


def log_convergence_summary(
    *,
    solver: str,
    converged: int,
    total: int,
    clamped: int,
    iters: int,
    res_inf: float,
    prefix: str = "[sol]",
) -> None:
    print(
        f"{prefix} {solver} done | converged={converged}/{total} | clamped={clamped} | "
        f"iters={iters} | ||f||_inf={res_inf:.3e}"
    )


def log_curve_summary(
    *,
    label: str,
    v: np.ndarray,
    i: np.ndarray,
    prefix: str = "[diag]",
) -> None:
    """Print compact ranges for a sampled I–V series."""
    finite = int(np.count_nonzero(np.isfinite(i)))
    print(f"{prefix} {label} | {_fmt_range(v, 'V')} | {_fmt_range(i, 'I')} | finite={finite}/{i.size}")

# -*- coding: utf-8 -*-
"""
Single-run workflow wiring config → parameters → I–V sweep → files + metrics.
"""
from __future__ import annotations
from pathlib import Path
from typing import Dict, Sequence

import numpy as np

from diodesim.io.config import (
    load_config, apply_overrides, build_device, build_sweep,
    build_solver_options, sweep_scale, output_dir,
)
from diodesim.io.results import write_metrics, save_fields_npz, write_curve_csv
from diodesim.models.diode import SimulationMode
from diodesim.postprocess.extract_iv import curve_metrics
from diodesim.solver.newton import solve_junction_voltage
from diodesim.utils import diagnostics as diag
from diodesim.utils import logger
from diodesim.workflows.sweep import sample_curve

def run_from_config(
    cfg_path: Path,
    out_dir: Path | None = None,
    overrides: Sequence[str] = (),
    *,
    debug: bool = False,
) -> Dict[str, float]:
    cfg = load_config(cfg_path)
    if overrides:
        apply_overrides(cfg, overrides)
    dev = build_device(cfg)
    sweep = build_sweep(cfg)
    options = build_solver_options(cfg)
    out_dir = Path(out_dir) if out_dir is not None else output_dir(cfg)

    curves = sample_curve(dev.params, sweep, options, scale=sweep_scale(cfg))
    v = curves.voltages()
    i_id = curves.currents(SimulationMode.IDEAL)
    i_ni = curves.currents(SimulationMode.NON_IDEAL)

    # per-point convergence flag (reverse-bias points have no solve)
    converged = np.ones(v.shape, dtype=bool)
    fwd = v >= 0.0
    converged[fwd] = solve_junction_voltage(v[fwd], dev.params, options, debug=debug).converged

    if debug:
        diag.log_curve_summary(label="ideal", v=v, i=i_id)
        diag.log_curve_summary(label="non-ideal", v=v, i=i_ni)

    metrics = curve_metrics(curves, dev.params, options, converged=converged)
    metrics.update(doping=dev.doping.name.lower(), mode=dev.mode.name.lower())

    write_curve_csv(out_dir / "iv_curve.csv", curves)
    save_fields_npz(out_dir, V=v, I_ideal=i_id, I_non_ideal=i_ni, converged=converged)
    write_metrics(out_dir, metrics)
    if metrics["forward_unconverged_frac"] > 0.0:
        logger.warn(
            f"{metrics['forward_unconverged_frac']:.0%} of forward points hit the Newton cap "
            "(last iterate kept)"
        )
    logger.info(f"[run] wrote results to: {out_dir}")
    return metrics

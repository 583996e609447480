# -*- coding: utf-8 -*-
"""
Results IO helpers.

Write:
  * metrics.json  (curve-level KPIs)
  * fields.npz    (sampled series for the viewer)
  * iv_curve.csv  (V, I_ideal, I_non_ideal)

This keeps on-disk layout stable for post-processing and reports.
"""
from __future__ import annotations
import json
from pathlib import Path
from typing import Any, Dict

import numpy as np

from diodesim.models.diode import SimulationMode
from diodesim.workflows.sweep import CurveData

def write_metrics(run_dir: Path, metrics: Dict[str, Any]) -> Path:
    run_dir.mkdir(parents=True, exist_ok=True)
    out = run_dir / "metrics.json"
    with open(out, "w") as f:
        json.dump(metrics, f, indent=2, sort_keys=True)
    return out

def save_fields_npz(run_dir: Path, **arrays) -> Path:
    """
    Save arrays for viz (e.g., V, I_ideal, I_non_ideal, converged).
    """
    run_dir.mkdir(parents=True, exist_ok=True)
    out = run_dir / "fields.npz"
    np.savez_compressed(out, **arrays)
    return out

def write_curve_csv(path: Path, curves: CurveData) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    arr = np.column_stack([
        curves.voltages(),
        curves.currents(SimulationMode.IDEAL),
        curves.currents(SimulationMode.NON_IDEAL),
    ])
    header = "V,I_ideal,I_non_ideal"
    np.savetxt(path, arr, delimiter=",", header=header, comments="")
    return path

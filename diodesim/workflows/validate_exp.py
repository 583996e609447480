# -*- coding: utf-8 -*-
"""
Compare a simulated I–V series against a reference table and summarize errors.
"""
from pathlib import Path
import numpy as np
from diodesim.io.experimental_csv import load_iv
from diodesim.io.results import write_metrics
from diodesim.models.diode import SimulationMode
from diodesim.workflows.sweep import CurveData

def validate_iv(curves: CurveData, mode: SimulationMode, exp_csv: Path, out_dir: Path):
    """RMSE/MAE of the model on the reference V grid (same current unit as the CSV)."""
    exp = load_iv(exp_csv)
    v_exp = exp["V"].to_numpy(dtype=float)
    i_exp = exp["I"].to_numpy(dtype=float)
    # Interpolate sim → exp V grid
    i_sim = np.interp(v_exp, curves.voltages(), curves.currents(mode))
    err = i_sim - i_exp
    rmse = float(np.sqrt(np.mean(err**2)))
    mae  = float(np.mean(np.abs(err)))
    write_metrics(Path(out_dir), {"IV_RMSE": rmse, "IV_MAE": mae, "mode": mode.name.lower()})
    return rmse, mae

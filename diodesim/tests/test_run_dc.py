# -*- coding: utf-8 -*-
"""
Config-driven run writes CSV, fields and metrics; reference-table validation.
"""
import json

import numpy as np
import pytest

from diodesim.io.experimental_csv import load_iv
from diodesim.models.diode import DopingLevel, SimulationMode, get_params
from diodesim.workflows.run_dc import run_from_config
from diodesim.workflows.sweep import sample_curve
from diodesim.workflows.validate_exp import validate_iv


def test_run_from_config(tmp_path):
    cfg = tmp_path / "moderate.yaml"
    cfg.write_text("device:\n  doping: moderate\n  mode: non_ideal\n")
    out = tmp_path / "out"
    metrics = run_from_config(cfg, out)

    for name in ("iv_curve.csv", "fields.npz", "metrics.json"):
        assert (out / name).exists()
    saved = json.loads((out / "metrics.json").read_text())
    assert saved["doping"] == "moderate"
    assert saved["forward_unconverged_frac"] == metrics["forward_unconverged_frac"] > 0.0

    data = np.load(out / "fields.npz")
    assert data["V"].shape == (101,)
    assert data["converged"][data["V"] < 0].all()

    table = np.loadtxt(out / "iv_curve.csv", delimiter=",", skiprows=1)
    assert table.shape == (101, 3)
    assert (out / "iv_curve.csv").read_text().splitlines()[0] == "V,I_ideal,I_non_ideal"


def test_run_with_overrides_and_raised_cap(tmp_path, capsys):
    cfg = tmp_path / "heavy.yaml"
    cfg.write_text("device: {doping: heavy}\nsolver: {max_iters: 500}\n")
    metrics = run_from_config(cfg, tmp_path / "o", ["sweep.step=0.5"], debug=True)
    assert metrics["forward_unconverged_frac"] == 0.0
    data = np.load(tmp_path / "o" / "fields.npz")
    assert data["V"].shape == (21,)
    assert "[diag] non-ideal" in capsys.readouterr().out


def test_validate_against_own_curve(tmp_path):
    p = get_params(DopingLevel.MODERATE)
    curves = sample_curve(p)
    v = np.array([-3.0, -1.0, 0.0, 0.4, 0.6])
    i = np.interp(v, curves.voltages(), curves.currents(SimulationMode.IDEAL))
    ref = tmp_path / "ref.csv"
    ref.write_text("V,I\n" + "\n".join(f"{a!r},{b!r}" for a, b in zip(v[::-1], i[::-1])) + "\n")

    assert list(load_iv(ref)["V"]) == sorted(v)
    rmse, mae = validate_iv(curves, SimulationMode.IDEAL, ref, tmp_path / "val")
    assert rmse < 1e-12 and mae < 1e-12
    assert json.loads((tmp_path / "val" / "metrics.json").read_text())["mode"] == "ideal"


def test_reference_table_needs_columns(tmp_path):
    ref = tmp_path / "bad.csv"
    ref.write_text("Volts,Amps\n0,0\n")
    with pytest.raises(ValueError):
        load_iv(ref)


def test_run_metrics_reuse_convergence_flags(tmp_path, monkeypatch):
    import diodesim.physics.current as current
    import diodesim.postprocess.extract_iv as extract_iv
    import diodesim.workflows.run_dc as run_dc
    from diodesim.solver.newton import solve_junction_voltage

    calls = []

    def _counting(*args, **kwargs):
        calls.append(1)
        return solve_junction_voltage(*args, **kwargs)

    for mod in (current, extract_iv, run_dc):
        monkeypatch.setattr(mod, "solve_junction_voltage", _counting)
    cfg = tmp_path / "m.yaml"
    cfg.write_text("device: {doping: moderate}\n")
    run_from_config(cfg, tmp_path / "out")
    # one solve for the sampled currents, one for the per-point flags
    assert len(calls) == 2

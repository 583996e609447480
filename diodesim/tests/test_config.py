# -*- coding: utf-8 -*-
"""
YAML run files: parsing, defaults, overrides, validation.
"""
from pathlib import Path

import pytest

from diodesim.io.config import (
    apply_overrides, build_device, build_solver_options, build_sweep,
    load_config, output_dir, sweep_scale,
)
from diodesim.models.diode import DopingLevel, SimulationMode, get_params

FULL = """
device:
  doping: heavy
  mode: ideal
sweep:
  v_min: -2.0
  v_max: 2.0
  step: 0.5
  scale: 1.0
solver:
  max_iters: 50
  tol_step: 1.0e-7
output:
  dir: {out}
"""


def _write(tmp_path: Path, text: str, name: str = "run.yaml") -> Path:
    path = tmp_path / name
    path.write_text(text)
    return path


def test_full_config(tmp_path):
    cfg = load_config(_write(tmp_path, FULL.format(out=tmp_path / "out")))
    dev = build_device(cfg)
    assert dev.doping is DopingLevel.HEAVY and dev.mode is SimulationMode.IDEAL
    assert dev.params == get_params(DopingLevel.HEAVY)
    sw = build_sweep(cfg)
    assert (sw.v_min, sw.v_max, sw.step, sw.n_points) == (-2.0, 2.0, 0.5, 9)
    assert sweep_scale(cfg) == 1.0
    assert build_solver_options(cfg) == {"max_iters": 50, "tol_step": 1e-7}
    assert output_dir(cfg) == tmp_path / "out"


def test_defaults(tmp_path):
    cfg = load_config(_write(tmp_path, "device: {doping: light}\n", "light.yaml"))
    dev = build_device(cfg)
    assert dev.mode is SimulationMode.NON_IDEAL
    sw = build_sweep(cfg)
    assert sw.n_points == 101
    assert sweep_scale(cfg) == 1000.0
    assert build_solver_options(cfg) is None
    assert output_dir(cfg) == Path("runs") / "light"


def test_overrides(tmp_path):
    cfg = load_config(_write(tmp_path, "device: {doping: light}\n"))
    apply_overrides(cfg, ["sweep.step=0.05", "device.doping=Heavily Doped", "solver.max_iters=20"])
    assert build_sweep(cfg).step == 0.05
    assert build_device(cfg).doping is DopingLevel.HEAVY
    assert build_solver_options(cfg) == {"max_iters": 20}


@pytest.mark.parametrize("bad", ["sweep.step", "=3", "device.doping.x=1"])
def test_bad_overrides(tmp_path, bad):
    cfg = load_config(_write(tmp_path, "device: {doping: light}\n"))
    with pytest.raises(ValueError):
        apply_overrides(cfg, [bad])


@pytest.mark.parametrize("text", ["- 1\n- 2\n", "sweep: {step: 0.1}\n", "device: {}\nsweep: 3\n"])
def test_invalid_files(tmp_path, text):
    with pytest.raises(ValueError):
        load_config(_write(tmp_path, text))


def test_unknown_doping(tmp_path):
    cfg = load_config(_write(tmp_path, "device: {doping: extreme}\n"))
    with pytest.raises(ValueError):
        build_device(cfg)


def test_off_grid_step_override_rejected(tmp_path):
    cfg = load_config(_write(tmp_path, "device: {doping: light}\n"))
    apply_overrides(cfg, ["sweep.step=0.005"])
    with pytest.raises(ValueError):
        build_sweep(cfg)

# diodesim/io/config.py
# -*- coding: utf-8 -*-
"""
YAML → device / sweep / solver helpers.

Schema (minimal, example):

device:
  doping: moderate          # light | moderate | heavy
  mode: non_ideal           # ideal | non_ideal

sweep:                      # optional, defaults shown
  v_min: -5.0
  v_max: 5.0
  step: 0.1
  scale: 1000.0             # A → display unit (mA)

solver:                     # optional, forward Newton settings
  max_iters: 10
  tol_step: 1.0e-5

output:                     # optional
  dir: runs/moderate
"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Sequence

import yaml

from diodesim.models.diode import DiodeParams, DopingLevel, SimulationMode, get_params
from diodesim.workflows.sweep import DISPLAY_SCALE_MA, SweepSpec

@dataclass
class RunConfig:
    raw: dict
    path: Path

@dataclass
class DeviceSpec:
    doping: DopingLevel
    mode: SimulationMode
    params: DiodeParams

def load_config(path: Path) -> RunConfig:
    data = yaml.safe_load(Path(path).read_text())
    if not isinstance(data, dict):
        raise ValueError("Top-level YAML must be a mapping")
    _validate_minimum(data)
    return RunConfig(raw=data, path=Path(path))

def build_device(cfg: RunConfig) -> DeviceSpec:
    d = cfg.raw["device"]
    doping = DopingLevel.parse(d.get("doping", "moderate"))
    mode = SimulationMode.parse(d.get("mode", "non_ideal"))
    return DeviceSpec(doping=doping, mode=mode, params=get_params(doping))

def build_sweep(cfg: RunConfig) -> SweepSpec:
    s = cfg.raw.get("sweep") or {}
    return SweepSpec(
        v_min=float(s.get("v_min", -5.0)),
        v_max=float(s.get("v_max", 5.0)),
        step=float(s.get("step", 0.1)),
    )

def sweep_scale(cfg: RunConfig) -> float:
    s = cfg.raw.get("sweep") or {}
    return float(s.get("scale", DISPLAY_SCALE_MA))

def build_solver_options(cfg: RunConfig) -> Dict[str, Any] | None:
    """Forward-solve overrides, or None when the section is absent (standard model)."""
    s = cfg.raw.get("solver")
    if not s:
        return None
    opts: Dict[str, Any] = {}
    if "max_iters" in s:
        opts["max_iters"] = int(s["max_iters"])
    if "tol_step" in s:
        opts["tol_step"] = float(s["tol_step"])
    return opts or None

def output_dir(cfg: RunConfig) -> Path:
    out = (cfg.raw.get("output") or {}).get("dir")
    return Path(out) if out else Path("runs") / cfg.path.stem

def apply_overrides(cfg: RunConfig, overrides: Sequence[str]) -> RunConfig:
    """
    Apply ``dotted.key=value`` overrides in place; values are parsed as YAML
    scalars (``sweep.step=0.05``, ``device.doping=heavy``).
    """
    for item in overrides:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"Override must look like key.path=value (got {item!r})")
        parts = key.strip().split(".")
        node = cfg.raw
        for part in parts[:-1]:
            nxt = node.get(part)
            if nxt is None:
                nxt = node[part] = {}
            elif not isinstance(nxt, dict):
                raise ValueError(f"Override {item!r}: {part!r} is not a mapping")
            node = nxt
        node[parts[-1]] = yaml.safe_load(value)
    _validate_minimum(cfg.raw)
    return cfg

def _validate_minimum(cfg: dict) -> None:
    if not isinstance(cfg.get("device"), dict):
        raise ValueError("Missing top-level key: device")
    for key in ("sweep", "solver", "output"):
        if cfg.get(key) is not None and not isinstance(cfg[key], dict):
            raise ValueError(f"Top-level key {key!r} must be a mapping")

# diodesim/__init__.py
from __future__ import annotations
from .models.diode import AnimationSpeed, DopingLevel, SimulationMode, DiodeParams, get_params
from .physics.current import diode_current
from .physics.depletion import depletion_factor
from .workflows.sweep import CurvePoint, CurveData, sample_curve

__all__ = [
    "AnimationSpeed", "DopingLevel", "SimulationMode", "DiodeParams", "get_params",
    "diode_current", "depletion_factor",
    "CurvePoint", "CurveData", "sample_curve",
]

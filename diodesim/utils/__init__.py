# diodesim/utils/__init__.py
from __future__ import annotations
from .constants import VT, EXP_ARG_MAX, LEAKAGE_CONDUCTANCE, BREAKDOWN_SLOPE, BREAKDOWN_GAIN

__all__ = ["VT", "EXP_ARG_MAX", "LEAKAGE_CONDUCTANCE", "BREAKDOWN_SLOPE", "BREAKDOWN_GAIN"]

# diodesim/utils/constants.py
from __future__ import annotations

__all__ = ["VT", "EXP_ARG_MAX", "LEAKAGE_CONDUCTANCE", "BREAKDOWN_GAIN", "BREAKDOWN_SLOPE"]

# Diode model constants (SI)
VT                  = 0.026   # thermal voltage at ~300 K [V], fixed (no T dependence)
EXP_ARG_MAX         = 700.0   # exp() argument clip; exp(709.8) overflows float64
LEAKAGE_CONDUCTANCE = 1e-8    # reverse surface leakage [S]
BREAKDOWN_SLOPE     = 2.0     # soft-knee steepness past breakdown [1/V]
BREAKDOWN_GAIN      = 1000.0  # soft-breakdown exaggeration for display

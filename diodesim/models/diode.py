# -*- coding: utf-8 -*-
"""
Diode parameter sets keyed by doping level.

Fields (DiodeParams):
  - Is:                saturation current [A], > 0
  - n:                 ideality factor, >= 1
  - Vbi:               built-in potential [V], > 0
  - Rs:                series resistance [Ω], >= 0
  - breakdown_voltage: reverse breakdown knee [V], < 0

Lighter doping → wider junction: higher Rs and a deeper, gentler breakdown.
Heavier doping → lower Rs and a Zener-like knee close to 0 V.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import math

__all__ = [
    "DopingLevel",
    "SimulationMode",
    "AnimationSpeed",
    "DiodeParams",
    "get_params",
]


class _LabelledEnum(Enum):
    @classmethod
    def parse(cls, text):
        """Accept a member, its value, its name (any case, '-'/' ' as '_') or its display label."""
        if isinstance(text, cls):
            return text
        try:
            return cls(text)
        except ValueError:
            pass
        key = str(text).strip()
        for member in cls:
            if key == member.value or key.upper().replace("-", "_").replace(" ", "_") == member.name:
                return member
        choices = ", ".join(m.name.lower() for m in cls)
        raise ValueError(f"Unknown {cls.__name__} {text!r} (choices: {choices})")


class DopingLevel(_LabelledEnum):
    LIGHT = "Lightly Doped"
    MODERATE = "Moderately Doped"
    HEAVY = "Heavily Doped"


class SimulationMode(_LabelledEnum):
    IDEAL = "Ideal Diode"
    NON_IDEAL = "Non-Ideal Diode"


class AnimationSpeed(_LabelledEnum):
    """Carrier animation presets; the value multiplies every per-tick displacement."""
    VERY_SLOW = 0.2
    SLOW = 0.5
    NORMAL = 1.0
    FAST = 2.5

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()


@dataclass(frozen=True, slots=True)
class DiodeParams:
    Is: float
    n: float
    Vbi: float
    Rs: float
    breakdown_voltage: float

    def __post_init__(self) -> None:
        for name in ("Is", "n", "Vbi", "Rs", "breakdown_voltage"):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"DiodeParams.{name} must be finite")
        if self.Is <= 0.0:
            raise ValueError("DiodeParams.Is must be > 0")
        if self.n < 1.0:
            raise ValueError("DiodeParams.n must be >= 1")
        if self.Vbi <= 0.0:
            raise ValueError("DiodeParams.Vbi must be > 0")
        if self.Rs < 0.0:
            raise ValueError("DiodeParams.Rs must be >= 0")
        if self.breakdown_voltage >= 0.0:
            raise ValueError("DiodeParams.breakdown_voltage must be < 0")


_TABLE = {
    DopingLevel.LIGHT:    DiodeParams(Is=1e-12, n=1.1, Vbi=0.60, Rs=25.0, breakdown_voltage=-50.0),
    DopingLevel.MODERATE: DiodeParams(Is=1e-11, n=1.2, Vbi=0.70, Rs=10.0, breakdown_voltage=-20.0),
    DopingLevel.HEAVY:    DiodeParams(Is=1e-9,  n=1.5, Vbi=0.85, Rs=2.0,  breakdown_voltage=-4.5),
}


def get_params(doping: DopingLevel) -> DiodeParams:
    """Fixed parameter set for a doping level (MODERATE for anything else)."""
    return _TABLE.get(doping, _TABLE[DopingLevel.MODERATE])

# diodesim/postprocess/visualization.py
"""
Lightweight plotting helpers for the diode views (I–V, band sketch, junction).
"""

from __future__ import annotations

from typing import Tuple

import numpy as np
import matplotlib.pyplot as plt

from diodesim.models.diode import DiodeParams, SimulationMode
from diodesim.physics.bias import band_step
from diodesim.physics.carriers import CarrierState, depletion_edges
from diodesim.physics.circuit import CircuitReadout, FlowDirection
from diodesim.physics.current import diode_current
from diodesim.workflows.sweep import CurveData

__all__ = ["plot_iv_curves", "plot_band_sketch", "plot_carriers", "plot_circuit"]

_HOLE = "#dc2626"
_ELECTRON = "#2563eb"


def plot_iv_curves(
    curves: CurveData,
    mode: SimulationMode,
    *,
    operating_voltage: float | None = None,
    params: DiodeParams | None = None,
    ylim: Tuple[float, float] | None = None,
    ax: plt.Axes | None = None,
    title: str | None = "I–V Characteristic Curve",
) -> Tuple[plt.Figure, plt.Axes]:
    """
    Plot the I–V curve for ``mode``; in non-ideal mode the ideal curve is drawn
    underneath as a dashed reference.

    Parameters
    ----------
    curves : CurveData
        Output of ``sample_curve``; currents in ``curves.scale`` units.
    mode : SimulationMode
    operating_voltage : float, optional
        Marks the operating point (requires ``params``).
    ylim : (float, float), optional
        Display clip; the non-ideal curve past ~1 V and the breakdown tail
        are far outside a useful range.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(6.0, 3.6), constrained_layout=True)
    else:
        fig = ax.figure

    v = curves.voltages()
    unit = "mA" if curves.scale == 1000.0 else f"A×{curves.scale:g}"

    if mode is SimulationMode.NON_IDEAL:
        ax.plot(v, curves.currents(SimulationMode.IDEAL), color="#94a3b8",
                linestyle="--", linewidth=1.6, label=SimulationMode.IDEAL.value)
    ax.plot(v, curves.currents(mode), color=_ELECTRON, linewidth=2.2, label=mode.value)

    if operating_voltage is not None and params is not None:
        i_op = diode_current(operating_voltage, params, mode) * curves.scale
        ax.plot([operating_voltage], [i_op], "o", color=_HOLE, markeredgecolor="white",
                markersize=7, zorder=5)

    ax.axhline(0.0, color="#cbd5e1", linewidth=1.0)
    ax.axvline(0.0, color="#cbd5e1", linewidth=1.0)
    ax.set_xlim(float(v[0]), float(v[-1]))
    if ylim is not None:
        ax.set_ylim(*ylim)
    ax.set_xlabel("Voltage (V)")
    ax.set_ylabel(f"Current ({unit})")
    if title:
        ax.set_title(title)
    ax.grid(True, linestyle=":", linewidth=0.6)
    ax.legend(frameon=False, loc="upper left")
    return fig, ax


def plot_band_sketch(
    voltage: float,
    Vbi: float,
    *,
    ax: plt.Axes | None = None,
    title: str | None = "Band Diagram (qualitative)",
) -> Tuple[plt.Figure, plt.Axes]:
    """
    Qualitative EC/EV across the junction: p side raised by q(Vbi − V),
    smooth step across the depletion region.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(4.0, 2.6), constrained_layout=True)
    else:
        fig = ax.figure

    step = band_step(voltage, Vbi)
    x = np.linspace(0.0, 1.0, 201)
    s = 0.5 * (1.0 - np.tanh((x - 0.5) / 0.05))   # 1 on p side → 0 on n side
    EC = 1.0 + step * s
    EV = EC - 1.1

    ax.plot(x, EC, color=_ELECTRON, linewidth=2.0, label=r"$E_C$")
    ax.plot(x, EV, color=_HOLE, linewidth=2.0, label=r"$E_V$")
    ax.annotate("", xy=(0.5, 1.0), xytext=(0.5, 1.0 + step),
                arrowprops=dict(arrowstyle="<->", color="#475569"))
    ax.text(0.53, 1.0 + 0.5 * step, f"q(Vbi−V) ≈ {step:.2f} eV", fontsize=8, color="#475569")

    ax.set_xticks([0.15, 0.85], ["P", "N"])
    ax.set_ylabel("Energy (eV, arb.)")
    if title:
        ax.set_title(title)
    ax.legend(frameon=False, ncol=2, loc="lower left")
    return fig, ax


def plot_carriers(
    state: CarrierState,
    voltage: float,
    params: DiodeParams,
    *,
    ax: plt.Axes | None = None,
    title: str | None = "Junction Visualization",
) -> Tuple[plt.Figure, plt.Axes]:
    """Snapshot of the carrier animation with p/n regions and the depletion band."""
    if ax is None:
        fig, ax = plt.subplots(figsize=(8.0, 3.0), constrained_layout=True)
    else:
        fig = ax.figure

    W, H = state.width, state.height
    left, right = depletion_edges(voltage, params, W)

    ax.axvspan(0.0, 0.5 * W, color="#fecdd3", alpha=0.8)
    ax.axvspan(0.5 * W, W, color="#bfdbfe", alpha=0.8)
    ax.axvspan(left, right, color="white", alpha=0.7)
    for edge in (left, right):
        ax.axvline(edge, color="#64748b", linestyle="--", linewidth=1.0)

    h = state.is_hole
    ax.scatter(state.x[h], state.y[h], s=9, color=_HOLE, label="holes")
    ax.scatter(state.x[~h], state.y[~h], s=9, color=_ELECTRON, label="electrons")

    ax.text(20.0, H - 30.0, "P-Type (Holes)", color="#991b1b", fontweight="bold")
    ax.text(W - 20.0, H - 30.0, "N-Type (Electrons)", color="#1e40af",
            fontweight="bold", ha="right")
    ax.set_xlim(0.0, W)
    ax.set_ylim(0.0, H)
    ax.set_xticks([])
    ax.set_yticks([])
    if title:
        ax.set_title(title)
    return fig, ax


def plot_circuit(
    readout: CircuitReadout,
    *,
    ax: plt.Axes | None = None,
    title: str | None = "Circuit View (Macroscopic)",
) -> Tuple[plt.Figure, plt.Axes]:
    """
    Source, diode and load in one loop. Battery polarity follows the bias sign;
    arrows mark the conventional current direction when the loop current flows.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(4.0, 2.0), constrained_layout=True)
    else:
        fig = ax.figure

    x0, x1, y0, y1 = 30.0, 270.0, 20.0, 100.0
    ax.plot([x0, x1, x1, x0, x0], [y0, y0, y1, y1, y0], color="#64748b", linewidth=2.0)

    # diode on the top wire, P (anode) left
    ax.fill([140.0, 140.0, 160.0], [y1 - 10.0, y1 + 10.0, y1], color="#1e293b")
    ax.plot([160.0, 160.0], [y1 - 10.0, y1 + 10.0], color="#1e293b", linewidth=2.5)
    ax.text(130.0, y1 + 14.0, "P", color=_HOLE, fontweight="bold", fontsize=8)
    ax.text(164.0, y1 + 14.0, "N", color=_ELECTRON, fontweight="bold", fontsize=8)

    # battery on the bottom wire: long bar is +
    reverse = readout.voltage < 0.0
    long_x, short_x = (160.0, 140.0) if reverse else (140.0, 160.0)
    ax.plot([long_x, long_x], [y0 - 14.0, y0 + 14.0], color=_HOLE, linewidth=3.0)
    ax.plot([short_x, short_x], [y0 - 7.0, y0 + 7.0], color=_ELECTRON, linewidth=3.0)

    # load on the right wire
    ax.add_patch(plt.Rectangle((x1 - 5.0, 45.0), 10.0, 30.0, facecolor="#e2e8f0", edgecolor="#64748b"))
    ax.text(x1 + 8.0, 58.0, "R", color="#64748b", fontsize=8)

    if readout.flowing:
        sign = 1.0 if readout.direction is FlowDirection.CLOCKWISE else -1.0
        for (x, y, dx, dy) in ((90.0, y1, 20.0, 0.0), (x1, 80.0, 0.0, -20.0),
                               (210.0, y0, -20.0, 0.0), (x0, 40.0, 0.0, 20.0)):
            ax.annotate("", xy=(x + sign * dx / 2, y + sign * dy / 2),
                        xytext=(x - sign * dx / 2, y - sign * dy / 2),
                        arrowprops=dict(arrowstyle="->", color="#16a34a", linewidth=1.5))

    ax.text(x0, -6.0, f"V_source: {readout.voltage:.2f} V", fontsize=8, family="monospace")
    ax.text(x1, -6.0, f"I: {readout.current_mA:.2f} mA", fontsize=8, family="monospace", ha="right")
    ax.set_xlim(0.0, 300.0)
    ax.set_ylim(-15.0, 125.0)
    ax.set_aspect("equal")
    ax.axis("off")
    if title:
        ax.set_title(title, fontsize=9)
    return fig, ax

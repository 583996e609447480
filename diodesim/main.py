# diodesim/main.py
"""
DiodeSim main entrypoint.

Default subcommand: curve
Usage examples:
    python -m diodesim
    python -m diodesim curve --doping heavy --mode ideal --png iv.png
    python -m diodesim point --voltage 0.7 --doping moderate --mode non_ideal
    python -m diodesim run configs/moderate.yaml --set sweep.step=0.05
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import argparse
import sys

from .models.diode import DopingLevel, SimulationMode, get_params
from .physics.bias import explain
from .physics.circuit import circuit_readout
from .physics.current import diode_current
from .physics.depletion import depletion_factor
from .utils import logger

__all__ = ["main"]

_DOPING_CHOICES = [d.name.lower() for d in DopingLevel]
_MODE_CHOICES = [m.name.lower() for m in SimulationMode]


# ------------------------------ curve subcommand ----------------------------


@dataclass(slots=True)
class _CurveArgs:
    doping: DopingLevel
    mode: SimulationMode
    voltage: float | None
    csv_out: str
    png_out: str
    no_png: bool
    ylim: float


def _add_device_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--doping", choices=_DOPING_CHOICES, default="moderate", help="Doping level")
    p.add_argument("--mode", choices=_MODE_CHOICES, default="non_ideal", help="Current law")


def _add_curve_subparser(
    subparsers: argparse._SubParsersAction,
) -> argparse.ArgumentParser:
    p = subparsers.add_parser("curve", help="Sample the I–V curve (−5…5 V) and write CSV/PNG")
    _add_device_args(p)
    p.add_argument("--voltage", type=float, default=None, help="Mark this operating point [V]")
    p.add_argument("--csv", default="iv_curve.csv", help="CSV output path")
    p.add_argument("--png", default="iv_curve.png", help="PNG plot output path")
    p.add_argument("--no-png", action="store_true", help="Skip writing the plot")
    p.add_argument("--ylim", type=float, default=50.0, help="Plot current range ±ylim [mA]")
    p.set_defaults(cmd="curve")
    return p


def _curve_args(ns: argparse.Namespace) -> _CurveArgs:
    return _CurveArgs(
        doping=DopingLevel.parse(ns.doping),
        mode=SimulationMode.parse(ns.mode),
        voltage=ns.voltage,
        csv_out=str(ns.csv),
        png_out=str(ns.png),
        no_png=bool(ns.no_png),
        ylim=float(ns.ylim),
    )


def _run_curve(args: _CurveArgs) -> None:
    from .io.results import write_curve_csv
    from .workflows.sweep import sample_curve

    params = get_params(args.doping)
    curves = sample_curve(params)
    write_curve_csv(Path(args.csv_out), curves)
    logger.info(f"[ok] wrote {args.csv_out}  ({len(curves.ideal_points)} points, mA)")

    if args.no_png:
        return
    from .postprocess.visualization import plot_iv_curves

    fig, _ax = plot_iv_curves(
        curves, args.mode,
        operating_voltage=args.voltage, params=params,
        ylim=(-args.ylim, args.ylim),
        title=f"I–V ({args.doping.value}, {args.mode.value})",
    )
    fig.savefig(args.png_out, dpi=180)
    logger.info(f"[ok] wrote {args.png_out}")


# ------------------------------ point subcommand ----------------------------


def _add_point_subparser(subparsers: argparse._SubParsersAction) -> argparse.ArgumentParser:
    p = subparsers.add_parser("point", help="Current, depletion factor and regime at one voltage")
    _add_device_args(p)
    p.add_argument("--voltage", type=float, required=True, help="Applied voltage [V]")
    p.set_defaults(cmd="point")
    return p


def _run_point(ns: argparse.Namespace) -> None:
    doping = DopingLevel.parse(ns.doping)
    mode = SimulationMode.parse(ns.mode)
    params = get_params(doping)
    v = float(ns.voltage)
    i = diode_current(v, params, mode)
    print(f"V = {v:+.3f} V | I = {i:+.6e} A ({i * 1e3:+.3f} mA)")
    print(f"depletion factor = {depletion_factor(v, params.Vbi):.3f}")
    print(f"circuit: {circuit_readout(v, params, mode).summary()}")
    print(explain(v, params, mode))


# ------------------------------- run subcommand -----------------------------


def _add_run_subparser(subparsers: argparse._SubParsersAction) -> argparse.ArgumentParser:
    p = subparsers.add_parser("run", help="Run a YAML configuration")
    p.add_argument("config", type=Path, help="YAML run file")
    p.add_argument("--out", type=Path, default=None, help="Output directory (overrides output.dir)")
    p.add_argument("--set", dest="overrides", action="append", default=[],
                   metavar="KEY=VALUE", help="Config override, e.g. sweep.step=0.05")
    p.add_argument("--debug", action="store_true", help="Verbose solver prints")
    p.set_defaults(cmd="run")
    return p


def _run_config(ns: argparse.Namespace) -> None:
    from .workflows.run_dc import run_from_config

    run_from_config(ns.config, ns.out, ns.overrides, debug=bool(ns.debug))


# --------------------------------- main() ------------------------------------


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else list(argv)
    parser = argparse.ArgumentParser(description="DiodeSim — PN-junction diode demos")
    parser.add_argument("--quiet", action="store_true", help="Only print warnings and errors")
    sub = parser.add_subparsers(dest="cmd")

    curve_parser = _add_curve_subparser(sub)
    _add_point_subparser(sub)
    _add_run_subparser(sub)

    # If no subcommand given, default to 'curve' with defaults
    if not argv:
        logger.set_level("info")
        _run_curve(_curve_args(curve_parser.parse_args([])))
        return

    ns = parser.parse_args(argv)
    logger.set_level("warn" if ns.quiet else "info")
    try:
        if ns.cmd == "curve":
            _run_curve(_curve_args(ns))
        elif ns.cmd == "point":
            _run_point(ns)
        elif ns.cmd == "run":
            _run_config(ns)
        else:
            parser.error("Unknown command (try: curve, point, run)")
    except (ValueError, FileNotFoundError) as exc:
        logger.error(str(exc))
        parser.exit(2)


if __name__ == "__main__":
    main()

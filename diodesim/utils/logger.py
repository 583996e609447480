# -*- coding: utf-8 -*-
"""
Minimal logger for workflows and the CLI; the physics core never calls it.

Messages below the current threshold are dropped (``set_level("warn")`` silences
the ``[ok] wrote ...`` chatter of the CLI).
"""
import sys, time

_LEVELS = {"info": 10, "warn": 20, "error": 30}
_threshold = _LEVELS["info"]

def set_level(name: str) -> None:
    global _threshold
    try:
        _threshold = _LEVELS[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown log level {name!r} (expected one of {sorted(_LEVELS)})") from None

def _emit(level: str, msg: str, stream) -> None:
    if _LEVELS[level] < _threshold:
        return
    tag = {"info": "", "warn": "WARNING: ", "error": "ERROR: "}[level]
    print(f"[{time.strftime('%H:%M:%S')}] {tag}{msg}", file=stream)

def info(msg: str):  _emit("info", msg, sys.stdout)
def warn(msg: str):  _emit("warn", msg, sys.stderr)
def error(msg: str): _emit("error", msg, sys.stderr)

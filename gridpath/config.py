# gridpath/config.py
#!/usr/bin/env python3
"""
Runtime settings for the viewer and the search engine.

Precedence (last wins):
- module defaults below
- ENV: GRIDPATH_SIZE, GRIDPATH_CELL_SIZE, GRIDPATH_DELAY_MS,
       GRIDPATH_TOLERANCE, GRIDPATH_LOG_LEVEL
- CLI: --size=, --cell-size=, --delay-ms=, --tolerance=, --log-level=
"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional, Sequence, Tuple

# ---------- Defaults ----------
GRID_SIZE = 20
CELL_SIZE = 25            # pixels per cell
MARGIN = 10               # around grid and panel
PANEL_WIDTH = 200         # extra width for the button panel
ANIMATION_DELAY_MS = 20   # one trace event per tick
DEFAULT_TOLERANCE = 1e-6  # stale-entry slack; sqrt(2) sums drift on long paths
LOG_LEVEL = "INFO"

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    grid_size: int = GRID_SIZE
    cell_size: int = CELL_SIZE
    delay_ms: int = ANIMATION_DELAY_MS
    tolerance: float = DEFAULT_TOLERANCE
    log_level: str = LOG_LEVEL

    @property
    def numeric_log_level(self) -> int:
        return getattr(logging, self.log_level, logging.INFO)


def _int_at_least(minimum: int) -> Callable[[str], int]:
    def parse(raw: str) -> int:
        value = int(raw)
        if value < minimum:
            raise ValueError(f"must be >= {minimum}, got {value}")
        return value
    return parse


def _tolerance(raw: str) -> float:
    value = float(raw)
    if not value >= 0.0:
        raise ValueError(f"must be a non-negative number, got {raw!r}")
    return value


def _level(raw: str) -> str:
    value = raw.strip().upper()
    if value not in _LEVELS:
        raise ValueError(f"must be one of {', '.join(_LEVELS)}, got {raw!r}")
    return value


# field -> (env var, cli flag, parser)
_FIELDS: Dict[str, Tuple[str, str, Callable[[str], object]]] = {
    "grid_size": ("GRIDPATH_SIZE",      "--size",      _int_at_least(2)),
    "cell_size": ("GRIDPATH_CELL_SIZE", "--cell-size", _int_at_least(4)),
    "delay_ms":  ("GRIDPATH_DELAY_MS",  "--delay-ms",  _int_at_least(0)),
    "tolerance": ("GRIDPATH_TOLERANCE", "--tolerance", _tolerance),
    "log_level": ("GRIDPATH_LOG_LEVEL", "--log-level", _level),
}


def _parse(field_name: str, source: str, raw: str) -> object:
    parser = _FIELDS[field_name][2]
    try:
        return parser(raw)
    except ValueError as ex:
        raise ValueError(f"invalid {source}: {ex}") from ex


def resolve_settings(argv: Optional[Sequence[str]] = None,
                     environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build :class:`Settings` from defaults, environment and ``--key=value`` flags."""
    if argv is None:
        argv = sys.argv[1:]
    if environ is None:
        environ = os.environ

    values: Dict[str, object] = {}
    for name, (env_key, _, _) in _FIELDS.items():
        if env_key in environ:
            values[name] = _parse(name, env_key, environ[env_key])

    flags = {flag: name for name, (_, flag, _) in _FIELDS.items()}
    for arg in argv:
        if not arg.startswith("--") or "=" not in arg:
            continue
        flag, raw = arg.split("=", 1)
        if flag in flags:
            values[flags[flag]] = _parse(flags[flag], flag, raw)

    return Settings(**values)

"""Load config.toml into typed settings."""

import logging
import os
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path

from glyphseed import variables
from glyphseed.params import PALETTE_MODES
from glyphseed.surface import RenderTiming

logger = logging.getLogger(__name__)


@dataclass
class StyleConfig:
    palette_mode: str = "auto"


@dataclass
class TimingConfig:
    """Total duration / per-piece stagger (ms) for each kind of render."""

    grow: RenderTiming = RenderTiming(3000, 30)
    first_growth: RenderTiming = RenderTiming(2200, 22)
    typing: RenderTiming = RenderTiming(700, 25)
    pruning: RenderTiming = RenderTiming(550, 18)
    regrow: RenderTiming = RenderTiming(2000, 25)


@dataclass
class LiveConfig:
    debounce_ms: int = 140
    keystroke_ms: int = 60


@dataclass
class ExportConfig:
    output: str = variables.OUTPUT
    svg_size: int = 1000
    png_size: int = 1024


@dataclass
class AppConfig:
    style: StyleConfig = field(default_factory=StyleConfig)
    timing: TimingConfig = field(default_factory=TimingConfig)
    live: LiveConfig = field(default_factory=LiveConfig)
    export: ExportConfig = field(default_factory=ExportConfig)


def _table(data: dict, name: str) -> dict:
    table = data.get(name, {})
    if not isinstance(table, dict):
        raise TypeError(f"[{name}] must be a table in config.toml")
    return table


def _ints(table: dict, section: str, target) -> None:
    for f in fields(target):
        if f.name not in table:
            continue
        value = table[f.name]
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"[{section}].{f.name} must be an integer")
        if value <= 0:
            raise ValueError(f"[{section}].{f.name} must be positive")
        setattr(target, f.name, value)


def _timing(table: dict) -> TimingConfig:
    timing = TimingConfig()
    for f in fields(timing):
        if f.name not in table:
            continue
        pair = table[f.name]
        if not isinstance(pair, list) or len(pair) != 2:
            raise ValueError(
                f"[timing].{f.name} must be [total_duration, piece_stagger]"
            )
        total, step = (int(v) for v in pair)
        setattr(timing, f.name, RenderTiming(total, step))
    return timing


def _resolve_palette_mode(style: dict) -> str:
    env_mode = os.getenv(variables.PALETTE_ENV)
    mode = env_mode or style.get("palette_mode", "auto")
    if mode not in PALETTE_MODES:
        raise ValueError(
            f"Unknown palette_mode {mode!r}. Expected one of {sorted(PALETTE_MODES)}"
        )
    return mode


def config_from_toml(data: dict) -> AppConfig:
    cfg = AppConfig()
    cfg.style.palette_mode = _resolve_palette_mode(_table(data, "style"))
    cfg.timing = _timing(_table(data, "timing"))
    _ints(_table(data, "live"), "live", cfg.live)

    export = _table(data, "export")
    if "output" in export:
        if not isinstance(export["output"], str) or not export["output"]:
            raise ValueError("[export].output must be a non-empty string")
        cfg.export.output = export["output"]
    _ints({k: v for k, v in export.items() if k != "output"}, "export", cfg.export)
    return cfg


def load_config(path: Path | None = None) -> AppConfig:
    """
    Read settings from config.toml. A missing default file yields the
    defaults; an explicitly given path must exist.
    """
    if path is None:
        path = Path.cwd() / variables.CONFIG
        if not path.exists():
            logger.debug("No %s found, using defaults", path)
            return config_from_toml({})
    elif not path.exists():
        raise FileNotFoundError(path)

    with path.open("rb") as f:
        data = tomllib.load(f)
    return config_from_toml(data)

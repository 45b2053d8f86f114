"""Configuration helpers for slider settings and track definitions."""
from __future__ import annotations

from configparser import ConfigParser, Error
from dataclasses import dataclass
import logging
import os
from pathlib import Path
import sys
from typing import Any, Optional, Sequence

from circular_slider.common.constants import DEFAULT_READOUT_SYMBOL

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "circular_slider.ini"
_SECTION = "slider"
_LIVE_READOUT_KEY = "live_readout"
_SYMBOL_KEY = "readout_symbol"
_TRACK_PREFIX = "track:"
_NUMERIC_KEYS = ("min", "max", "step", "radius")

DEFAULT_TRACK_SPECS: list[dict[str, Any]] = [
    {
        "color": "#6f3ba3",
        "range": {"min": 0, "max": 1000},
        "step": 50,
        "radius": 170,
        "description": "Transportation",
    },
    {
        "color": "#2f8bc8",
        "range": {"min": 0, "max": 500},
        "step": 25,
        "radius": 135,
        "description": "Food",
    },
    {
        "color": "#5ea832",
        "range": {"min": 0, "max": 100},
        "step": 5,
        "radius": 100,
        "description": "Insurance",
    },
    {
        "color": "#e58a2e",
        "range": {"min": 0, "max": 10},
        "step": 1,
        "radius": 65,
        "description": "Entertainment",
    },
    {
        "color": "#d9453b",
        "range": {"min": 0, "max": 10},
        "step": 3,
        "radius": 30,
        "description": "Health care",
    },
]


@dataclass(frozen=True)
class SliderSettings:
    live_readout: bool = False
    readout_symbol: str = DEFAULT_READOUT_SYMBOL


def _config_dir(main_script_path: Optional[Path]) -> Path:
    if getattr(sys, "frozen", False):
        return Path(sys.executable).parent
    if main_script_path is not None:
        return main_script_path.resolve().parent
    main_module = sys.modules.get("__main__")
    if main_module and getattr(main_module, "__file__", None):
        return Path(main_module.__file__).resolve().parent
    return Path.cwd()


def config_path(main_script_path: Optional[Path]) -> Path:
    return _config_dir(main_script_path) / CONFIG_FILENAME


def _read_parser(ini_path: Path) -> Optional[ConfigParser]:
    if not ini_path.exists():
        return None
    parser = ConfigParser(interpolation=None)
    parser.optionxform = str
    try:
        with ini_path.open("r", encoding="utf-8") as handle:
            parser.read_file(handle)
    except (OSError, Error):
        logger.warning("Could not read slider config: path=%s", ini_path)
        return None
    return parser


def load_slider_settings(ini_path: Path) -> SliderSettings:
    parser = _read_parser(ini_path)
    if parser is None or not parser.has_section(_SECTION):
        return SliderSettings()
    try:
        live_readout = parser.getboolean(_SECTION, _LIVE_READOUT_KEY, fallback=False)
    except ValueError:
        logger.warning(
            "Ignoring invalid %s value: path=%s value=%r",
            _LIVE_READOUT_KEY,
            ini_path,
            parser.get(_SECTION, _LIVE_READOUT_KEY),
        )
        live_readout = False
    symbol = parser.get(_SECTION, _SYMBOL_KEY, fallback=DEFAULT_READOUT_SYMBOL)
    return SliderSettings(live_readout=live_readout, readout_symbol=symbol)


def _parse_number(text: str) -> int | float:
    try:
        return int(text)
    except ValueError:
        return float(text)


def _track_spec_from_section(
    parser: ConfigParser, section: str
) -> dict[str, Any]:
    values = dict(parser.items(section))
    numbers: dict[str, int | float] = {}
    for key in _NUMERIC_KEYS:
        raw = values.get(key)
        if raw is None or not raw.strip():
            continue
        try:
            numbers[key] = _parse_number(raw.strip())
        except ValueError:
            logger.warning(
                "Ignoring non-numeric track field: section=%s key=%s value=%r",
                section,
                key,
                raw,
            )
    spec: dict[str, Any] = {
        "color": values.get("color", ""),
        "range": {k: numbers[k] for k in ("min", "max") if k in numbers},
        "description": values.get("description", ""),
    }
    for key in ("step", "radius"):
        if key in numbers:
            spec[key] = numbers[key]
    return spec


def load_track_specs(ini_path: Path) -> list[dict[str, Any]]:
    """Return the ``[track:*]`` sections as construction mappings, in file order."""
    parser = _read_parser(ini_path)
    if parser is None:
        return []
    return [
        _track_spec_from_section(parser, section)
        for section in parser.sections()
        if section.startswith(_TRACK_PREFIX)
    ]


def _section_name(index: int, spec: dict[str, Any]) -> str:
    label = str(spec.get("description") or "").strip().lower().replace(" ", "_")
    return f"{_TRACK_PREFIX}{index}" + (f"_{label}" if label else "")


def save_track_specs(specs: Sequence[dict[str, Any]], ini_path: Path) -> bool:
    """Replace the ``[track:*]`` sections of *ini_path*, keeping other sections.

    Returns False, after logging the error, when the existing file cannot be
    read or the new one cannot be written.
    """
    config = ConfigParser(interpolation=None)
    config.optionxform = str
    if ini_path.exists():
        try:
            with ini_path.open("r", encoding="utf-8") as handle:
                config.read_file(handle)
        except (OSError, Error):
            logger.exception("Could not read slider config: path=%s", ini_path)
            return False
    for section in list(config.sections()):
        if section.startswith(_TRACK_PREFIX):
            config.remove_section(section)
    if not config.has_section(_SECTION):
        config[_SECTION] = {
            _LIVE_READOUT_KEY: "false",
            _SYMBOL_KEY: DEFAULT_READOUT_SYMBOL,
        }
    for index, spec in enumerate(specs):
        value_range = spec.get("range") or {}
        entry = {"color": str(spec.get("color", ""))}
        for key in ("min", "max"):
            if value_range.get(key) is not None:
                entry[key] = str(value_range[key])
        for key in ("step", "radius"):
            if spec.get(key) is not None:
                entry[key] = str(spec[key])
        entry["description"] = str(spec.get("description", ""))
        config[_section_name(index, spec)] = entry
    try:
        with ini_path.open("w", encoding="utf-8") as handle:
            config.write(handle)
            handle.flush()
            os.fsync(handle.fileno())
    except OSError:
        logger.exception("Could not write slider config: path=%s", ini_path)
        return False
    return True


def load_track_specs_or_default(ini_path: Path) -> list[dict[str, Any]]:
    specs = load_track_specs(ini_path)
    if specs:
        return specs
    logger.info("No tracks configured, using built-in tracks: path=%s", ini_path)
    return [dict(spec) for spec in DEFAULT_TRACK_SPECS]

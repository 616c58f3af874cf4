"""Configuration for stacklog.

Layered settings resolution (highest priority wins):
  1. Explicit overrides — keyword arguments or CLI flags
  2. Environment — STACKLOG_VERBOSITY, STACKLOG_USER_AGENT
  3. Project config — .stacklog.json in the working directory or a parent
  4. Global config — ~/.stacklog/config.json

Recognized keys:
  verbosity   "off" | "debug" | "trace" | "default" (or 0, 1, 2)
  user_agent  browser user-agent string used to pick the frame format
  trim_begin  base number of innermost stack lines to drop
  trim_end    base number of outermost stack lines to drop
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .levels import parse_verbosity

PROJECT_CONFIG_NAME = ".stacklog.json"
ENV_VERBOSITY = "STACKLOG_VERBOSITY"
ENV_USER_AGENT = "STACKLOG_USER_AGENT"

KEYS = ("verbosity", "user_agent", "trim_begin", "trim_end")


@dataclass
class Settings:
    verbosity: Optional[int] = None
    user_agent: Optional[str] = None
    trim_begin: int = 0
    trim_end: int = 0


# ---------------------------------------------------------------------------
# Config file locations
# ---------------------------------------------------------------------------
def get_global_config_dir():
    """Return the global config directory (~/.stacklog/)."""
    return Path.home() / ".stacklog"


def get_global_config_path():
    """Return path to the global config file."""
    return get_global_config_dir() / "config.json"


def find_project_config(start_dir=None):
    """Walk up from start_dir looking for .stacklog.json.

    Returns the path if found, None otherwise.
    """
    current = Path(start_dir or os.getcwd()).resolve()
    for _ in range(20):  # safety limit
        candidate = current / PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------
def load_json(path):
    """Load a JSON object from a file, returning empty dict on error."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def load_environment():
    """Read settings from STACKLOG_* environment variables."""
    env = {}
    if os.environ.get(ENV_VERBOSITY):
        env["verbosity"] = os.environ[ENV_VERBOSITY]
    if os.environ.get(ENV_USER_AGENT):
        env["user_agent"] = os.environ[ENV_USER_AGENT]
    return env


# ---------------------------------------------------------------------------
# Value parsing
# ---------------------------------------------------------------------------
def _parse_trim(key, value):
    try:
        level = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid {key}: {value!r}") from None
    if level < 0:
        raise ValueError(f"Invalid {key}: {value!r} (must be >= 0)")
    return level


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------
def resolve_settings(overrides=None, start_dir=None, config_path=None):
    """Resolve Settings using layered precedence.

    Args:
        overrides: Mapping of explicit values; None entries are ignored.
        start_dir: Where to start looking for .stacklog.json.
        config_path: Explicit config file, used instead of the project config.

    Returns:
        A Settings instance.
    """
    overrides = {k: v for k, v in (overrides or {}).items() if v is not None}
    if config_path is not None:
        project_cfg = load_json(config_path)
    else:
        path = find_project_config(start_dir)
        project_cfg = load_json(path) if path else {}
    layers = [overrides, load_environment(), project_cfg, load_json(get_global_config_path())]

    resolved = {}
    for key in KEYS:
        for layer in layers:
            if layer.get(key) is not None:
                resolved[key] = layer[key]
                break

    settings = Settings()
    if "verbosity" in resolved:
        settings.verbosity = parse_verbosity(resolved["verbosity"])
    if "user_agent" in resolved:
        settings.user_agent = str(resolved["user_agent"])
    for key in ("trim_begin", "trim_end"):
        if key in resolved:
            setattr(settings, key, _parse_trim(key, resolved[key]))
    return settings

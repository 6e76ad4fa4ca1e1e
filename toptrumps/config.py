"""
Top Trumps — Runtime Configuration
Settings come from the environment (and a .env file, if present).
Command-line flags in play.py override them.
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv


_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass
class Settings:
    seed: Optional[int] = None
    """Seed for dealing. None deals differently every run."""

    log_level: str = "WARNING"

    clear_screen: bool = True
    """Clear the terminal between rounds"""

    banner_delay: float = 1.0
    """Seconds to leave the startup banner up"""

    color: bool = True


def load_settings(env: Optional[dict] = None) -> Settings:
    """
    Build Settings from TOPTRUMPS_* variables.
    Pass `env` to bypass os.environ and .env loading.
    """
    if env is None:
        load_dotenv(find_dotenv(usecwd=True))
        env = os.environ

    defaults = Settings()
    return Settings(
        seed=_parse_int(env, "TOPTRUMPS_SEED", defaults.seed),
        log_level=env.get("TOPTRUMPS_LOG_LEVEL", defaults.log_level).upper(),
        clear_screen=_parse_bool(env, "TOPTRUMPS_CLEAR_SCREEN", defaults.clear_screen),
        banner_delay=_parse_float(env, "TOPTRUMPS_BANNER_DELAY", defaults.banner_delay),
        color=_parse_bool(env, "TOPTRUMPS_COLOR", defaults.color),
    )


def _parse_int(env, key: str, default):
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None


def _parse_float(env, key: str, default: float) -> float:
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{key} must be a number, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{key} cannot be negative, got {raw!r}")
    return value


def _parse_bool(env, key: str, default: bool) -> bool:
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    lowered = raw.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"{key} must be a boolean, got {raw!r}")

"""Analysis settings, overridable through the environment or a .env file."""

import os
from typing import Optional

from dotenv import load_dotenv
from typing_extensions import TypedDict

from .types import DEFAULT_WINDOW


class Settings(TypedDict):
    window_size: int  # Player form window
    league_window: int  # League baseline window
    h2h_window: Optional[int]  # None = every meeting
    min_ranking_games: Optional[int]  # None = derived from window_size
    include_profile_patterns: bool


DEFAULT_SETTINGS: Settings = {
    "window_size": DEFAULT_WINDOW,
    "league_window": 50,
    "h2h_window": None,
    "min_ranking_games": None,
    "include_profile_patterns": False,
}

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


def _get_positive_int(name: str, default: Optional[int]) -> Optional[int]:
    """Read a positive int from the environment."""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be a positive integer, got {raw!r}")
    if value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {raw!r}")
    return value


def _get_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


def load_settings() -> Settings:
    """
    Load settings from the environment.

    Reads .env first (without overriding variables already set), then:
    ESOCCER_WINDOW_SIZE, ESOCCER_LEAGUE_WINDOW, ESOCCER_H2H_WINDOW,
    ESOCCER_MIN_GAMES, ESOCCER_PROFILE_PATTERNS.
    Raises ValueError for malformed values.
    """
    load_dotenv()
    return {
        "window_size": _get_positive_int("ESOCCER_WINDOW_SIZE", DEFAULT_SETTINGS["window_size"]),
        "league_window": _get_positive_int("ESOCCER_LEAGUE_WINDOW", DEFAULT_SETTINGS["league_window"]),
        "h2h_window": _get_positive_int("ESOCCER_H2H_WINDOW", DEFAULT_SETTINGS["h2h_window"]),
        "min_ranking_games": _get_positive_int("ESOCCER_MIN_GAMES", DEFAULT_SETTINGS["min_ranking_games"]),
        "include_profile_patterns": _get_bool(
            "ESOCCER_PROFILE_PATTERNS", DEFAULT_SETTINGS["include_profile_patterns"]
        ),
    }

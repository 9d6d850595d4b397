from .environment import parse_env_bool, parse_env_choice, parse_env_int, parse_env_path, parse_env_str
from .settings import (
    DEFAULT_DATA_DIR,
    FIXED_LOCATION,
    FIXED_WEIGHTING,
    MAX_SERIES,
    PROJECT_ROOT,
    DashboardSettings,
)

__all__ = [
    "DashboardSettings",
    "parse_env_bool",
    "parse_env_choice",
    "parse_env_int",
    "parse_env_path",
    "parse_env_str",
    "DEFAULT_DATA_DIR",
    "FIXED_LOCATION",
    "FIXED_WEIGHTING",
    "MAX_SERIES",
    "PROJECT_ROOT",
]

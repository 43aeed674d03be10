"""
Environment configuration for TopoJSON feature decoding.

Settings are read from environment variables. A ``.env`` file matching the
current environment (``ENV`` or ``PYTHON_ENV``) is loaded first:

- production: .env.production → .env
- demo: .env.demo → .env
- development (default): .env.development → .env

Variables:
    TOPOJSON_DEBUG: "true" enables decoder diagnostics (default: false)
    TOPOJSON_SIMPLIFY_TOLERANCE: polygon ring simplification tolerance
    TOPOJSON_ENCODING: encoding used by the default transcoder (default: utf-8)
    TOPOJSON_LOG_PATH: file receiving decoder diagnostics during iteration (default: unset)
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

from .core.constants import DEFAULT_ENCODING as _FALLBACK_ENCODING
from .core.constants import DEFAULT_SIMPLIFY_TOLERANCE


ENV = os.getenv("ENV", os.getenv("PYTHON_ENV", "development"))

ENV_FILE_CANDIDATES = {
    "production": [".env.production", ".env"],
    "demo": [".env.demo", ".env"],
    "development": [".env.development", ".env"],
}


def _select_env_file(env: str):
    for candidate in ENV_FILE_CANDIDATES.get(env, ENV_FILE_CANDIDATES["development"]):
        if os.path.exists(candidate):
            return candidate
    return None


ENV_FILE = _select_env_file(ENV)
if ENV_FILE:
    load_dotenv(ENV_FILE)


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


# Settings
DEBUG = _env_flag("TOPOJSON_DEBUG")
SIMPLIFY_TOLERANCE = _env_float("TOPOJSON_SIMPLIFY_TOLERANCE", DEFAULT_SIMPLIFY_TOLERANCE)
DEFAULT_ENCODING = os.getenv("TOPOJSON_ENCODING", _FALLBACK_ENCODING)
LOG_PATH = os.getenv("TOPOJSON_LOG_PATH") or None


@dataclass
class FeaturesetConfig:
    """Per-featureset settings, defaulting to the environment configuration."""

    debug: bool = field(default_factory=lambda: DEBUG)
    """Log recovered decode errors (skipped rings, out-of-range indices)"""

    simplify_tolerance: float = field(default_factory=lambda: SIMPLIFY_TOLERANCE)
    """Douglas-Peucker tolerance for polygon rings"""

    encoding: str = field(default_factory=lambda: DEFAULT_ENCODING)
    """Encoding used by the default transcoder for byte strings"""

    log_path: Optional[str] = field(default_factory=lambda: LOG_PATH)
    """Append this featureset's diagnostics to a file while it is iterated"""

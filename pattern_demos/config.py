"""Configuration management with environment variable and .env loading."""

import os
from typing import Optional
from pathlib import Path

from pattern_demos.exceptions import ConfigurationError


def load_env_file(env_file: Optional[Path] = None):
    """Load environment variables from .env file if it exists."""
    if env_file is None:
        env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        with open(env_file, "r") as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, value = line.split("=", 1)
                    if key not in os.environ:  # Don't override existing env vars
                        os.environ[key] = value


def get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    """Get environment variable with optional default."""
    return os.environ.get(name, default)


def get_timeout() -> Optional[float]:
    """Per-example timeout in seconds from PATTERN_DEMOS_TIMEOUT.

    ``0`` or a negative value disables the timeout.
    """
    raw = get_env(ENV_TIMEOUT)
    if raw is None or raw.strip() == "":
        return DEFAULT_TIMEOUT_SECONDS
    try:
        value = float(raw)
    except ValueError:
        raise ConfigurationError(f"{ENV_TIMEOUT} must be a number, got {raw!r}")
    return value if value > 0 else None


# Load .env file on import
load_env_file()

# Core Configuration Constants
DEFAULT_OUT_DIR = get_env("PATTERN_DEMOS_OUT_DIR", "./demo_runs")
"""str: Default directory for exported run results."""

ENV_TIMEOUT = "PATTERN_DEMOS_TIMEOUT"
"""str: Environment variable name for the per-example timeout in seconds."""

DEFAULT_TIMEOUT_SECONDS = 30.0
"""float: Generous wall-clock limit; demonstrations finish in microseconds."""

INDENT = "    "
"""str: Indentation for example output lines in the rendered report."""

"""
Environment utilities
"""

import os


def is_local_development() -> bool:
    """
    Check if the console is running in local development environment.

    Local development serves over plain http, so auth cookies are not
    marked Secure.

    Returns:
        bool: True if running in local development, False otherwise.
    """
    environment = os.getenv("ENVIRONMENT", "").lower()
    return environment == "development"


def get_int_env(name: str, default: int) -> int:
    """Read an integer environment variable, falling back to default."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}")

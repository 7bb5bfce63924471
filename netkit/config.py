"""
Service configuration management.

Handles loading and validating settings from environment variables.
"""

import logging
import os
import re

DEFAULT_ALLOWED_ORIGINS = [
    "https://jerryleonturner3.com",
    "https://www.jerryleonturner3.com",
    "https://jlt-3-tools.vercel.app",
    "https://jacybersecurity.com",
    "https://www.jacybersecurity.com",
]

VALID_LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]

_LIST_SEPARATOR_RE = re.compile(r"[,\s]+")


def _split_env_list(name: str) -> list[str]:
    """Split a comma and/or whitespace separated environment variable."""
    raw = os.getenv(name, "").strip()
    return [item for item in _LIST_SEPARATOR_RE.split(raw) if item]


def get_cors_origins() -> list[str]:
    """
    Get allowed CORS origins from environment.

    Returns:
        List[str]: Origins from ALLOWED_ORIGINS, or the public toolset sites
        when the variable is unset or empty
    """
    origins = _split_env_list("ALLOWED_ORIGINS")
    return origins or list(DEFAULT_ALLOWED_ORIGINS)


def get_cors_origin_suffixes() -> list[str]:
    """
    Get allowed origin host suffixes (e.g. ".lovable.dev") from environment.

    Each suffix is normalised to start with exactly one dot.

    Returns:
        List[str]: Normalised suffixes (empty list if not configured)
    """
    return ["." + suffix.lower().lstrip(".") for suffix in _split_env_list("ALLOWED_ORIGIN_SUFFIXES")]


def get_cors_origin_regex() -> str | None:
    """
    Build an origin regex matching any configured suffix.

    A suffix of ".lovable.dev" allows "https://lovable.dev" and any
    "https://<sub>.lovable.dev", over http or https, with an optional port.

    Returns:
        str | None: Regex for CORSMiddleware, or None if no suffixes are set
    """
    suffixes = get_cors_origin_suffixes()
    if not suffixes:
        return None

    hosts = "|".join(re.escape(suffix[1:]) for suffix in suffixes)
    return rf"https?://([A-Za-z0-9-]+\.)*({hosts})(:\d+)?"


def get_log_level() -> int:
    """
    Get the logging level from environment.

    Returns:
        int: Logging level (default: INFO)

    Raises:
        ValueError: If LOG_LEVEL is not a standard level name
    """
    level = os.getenv("LOG_LEVEL", "INFO").strip().upper()

    if level not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid LOG_LEVEL: '{level}'. Valid options: {', '.join(VALID_LOG_LEVELS)}")

    return getattr(logging, level)

# backend/app/utils/config.py

"""
Environment variable helpers shared by the Notion, Gemini, mail and
pipeline configuration modules.
"""

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)


class EnvVarMissingError(RuntimeError):
    """Raised when a required environment variable is not set."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Required environment variable '{name}' is not set.")
        self.name = name


def get_env(
    name: str,
    default: Optional[str] = None,
    *,
    required: bool = True,
) -> str:
    """
    Read an environment variable.

    :param name: variable name
    :param default: value returned when unset (only with required=False)
    :param required: raise EnvVarMissingError when unset
    :return: the string value
    """
    value = os.getenv(name)

    if value is None or value == "":
        if required:
            raise EnvVarMissingError(name)
        return default

    return value


def get_env_int(name: str, default: int) -> int:
    """
    Read an integer environment variable.

    Unset or unparsable values fall back to ``default``.
    """
    raw = get_env(name, default=None, required=False)
    if raw is None:
        return default

    try:
        return int(raw)
    except (TypeError, ValueError):
        logger.warning("Invalid integer for %s=%r; using default %s", name, raw, default)
        return default

# awg_warp_service/common/utils.py
import json
import logging
import os
import sys
from collections.abc import Mapping
from typing import cast

from .exceptions import ConfigurationError

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Sets up root logging the same way for the server and the CLI."""
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ConfigurationError(f"Unknown log level '{level}'.")
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, stream=sys.stderr)


def get_env_or_none(var_name: str, environ: Mapping[str, str] | None = None) -> str | None:
    """Gets an environment variable, treating an empty value as unset."""
    env = os.environ if environ is None else environ
    value = env.get(var_name)
    if not value:
        return None
    return value


def get_int_env(var_name: str, default: int, environ: Mapping[str, str] | None = None) -> int:
    """Gets an integer environment variable or raises if it cannot be parsed."""
    value = get_env_or_none(var_name, environ)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as e:
        raise ConfigurationError(f"Environment variable '{var_name}' must be an integer, got '{value}'.") from e


def parse_password_list(raw: str) -> tuple[str, ...]:
    """
    Parses the PASSWORDS allow-list.

    A JSON array yields its members, any other JSON value is wrapped into a
    single-element list, and text that is not JSON at all is taken verbatim
    as the only password.
    """
    try:
        parsed = cast(object, json.loads(raw))
    except json.JSONDecodeError:
        return (raw,)

    if isinstance(parsed, list):
        return tuple(str(item) for item in cast(list[object], parsed))
    if isinstance(parsed, str):
        return (parsed,)
    # Numbers and booleans must still compare against the submitted text.
    return (raw,)

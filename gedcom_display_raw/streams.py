"""Input stream and environment helpers for gedcom-display-raw."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator

INDENTATION_ENV_VAR = "GEDCOM_DISPLAY_RAW_INDENTATION"
MAX_INDENTATION_ENV_VAR = "GEDCOM_DISPLAY_RAW_MAX_INDENTATION"


def _read_int_env(name: str, default: int | None, minimum: int) -> int | None:
    env_value = os.environ.get(name)
    if env_value is None:
        return default

    try:
        value = int(env_value)
    except ValueError as error:
        error_message = f"Invalid value for {name}: {env_value} (expected integer >= {minimum})"
        raise ValueError(error_message) from error

    if value < minimum:
        raise ValueError(f"{name} must be an integer >= {minimum}, got {value}.")

    return value


def get_indentation(default: int | None = None) -> int | None:
    """Resolve the per-level indentation from the environment.

    Args:
        default: Value returned when the environment variable is unset.

    Returns:
        int | None: Indent characters per depth level.

    Raises:
        ValueError: If the environment value is not a positive integer.

    Examples:
        os.environ["GEDCOM_DISPLAY_RAW_INDENTATION"] = "2"
        width = get_indentation(default=4)
    """
    return _read_int_env(INDENTATION_ENV_VAR, default, minimum=1)


def get_max_indentation(default: int | None = None) -> int | None:
    """Resolve the indentation ceiling from the environment.

    Args:
        default: Value returned when the environment variable is unset.

    Returns:
        int | None: Maximum indent characters for one line.

    Raises:
        ValueError: If the environment value is not a non-negative integer.
    """
    return _read_int_env(MAX_INDENTATION_ENV_VAR, default, minimum=0)


def strip_terminator(line: str) -> str:
    """Remove one trailing ``\\n``, ``\\r\\n`` or ``\\r`` from a line."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith(("\n", "\r")):
        return line[:-1]
    return line


def iter_lines(stream: Iterable[str]) -> Iterator[str]:
    """Yield the lines of a text stream without their terminators.

    Decoding is left to the stream; the CLI opens its source with
    ``errors="replace"`` so undecodable bytes arrive as U+FFFD.

    Args:
        stream: Text stream (or any iterable of strings) to read.

    Yields:
        str: Each line with its terminator removed and everything else kept.

    Examples:
        with open("tree.ged", encoding="utf-8", errors="replace") as handle:
            for line in iter_lines(handle):
                ...
    """
    for line in stream:
        yield strip_terminator(line)

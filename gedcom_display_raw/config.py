"""Configuration loading and management."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
import tomllib

TOOL_NAME = "gedcom-display-raw"


@dataclass
class DisplayConfig:
    """Configuration for rendering GEDCOM lines.

    Attributes:
        indentation: Number of indent characters emitted per depth level.
        max_indentation: Ceiling on the total indent characters for one line.
        indent_char: Single character repeated to build the indentation.

    Examples:
        DisplayConfig(indentation=2, max_indentation=40)
    """

    indentation: int = 4
    max_indentation: int = 20
    indent_char: str = " "


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`indentation` must be a positive integer")
    """


def load_config(search_path: Path) -> DisplayConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.gedcom-display-raw]`` table from `pyproject.toml` and the
    ``[gedcom-display-raw]`` or ``[tool.gedcom-display-raw]`` table from
    `.gedcom-display-raw.toml` when present. Returns default values when no
    configuration is found. TOML files that cannot be read or decoded are
    skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        DisplayConfig: Loaded configuration with defaults applied when necessary.

    Raises:
        ConfigError: If the table is present but not a mapping or contains
            unsupported keys.

    Examples:
        load_config(Path.cwd())
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", TOOL_NAME)]
        )
        if pyproject_config is not None:
            return pyproject_config

        dotfile_config = _load_from_file(
            current / f".{TOOL_NAME}.toml",
            table_paths=[(TOOL_NAME,), ("tool", TOOL_NAME)],
        )
        if dotfile_config is not None:
            return dotfile_config

        parent = current.parent
        if parent == current:
            break
        current = parent

    return DisplayConfig()


_MISSING = object()


def _load_from_file(
    config_file: Path, table_paths: list[tuple[str, ...]]
) -> DisplayConfig | None:
    if not config_file.exists():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> DisplayConfig:
    table_display = ".".join(table_path)

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    if not raw_config:
        return DisplayConfig()

    try:
        return DisplayConfig(**raw_config)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def validate_config(config: DisplayConfig) -> None:
    """Validate a `DisplayConfig` instance.

    Args:
        config: Configuration to validate.

    Raises:
        ConfigError: If a numeric field is not an integer or out of range, or
            `indent_char` is not exactly one character.

    Examples:
        validate_config(DisplayConfig(indentation=2))
    """
    _ensure_integers(
        {
            "indentation": config.indentation,
            "max_indentation": config.max_indentation,
        }
    )

    if config.indentation <= 0:
        raise ConfigError("`indentation` must be a positive integer")
    if config.max_indentation < 0:
        raise ConfigError("`max_indentation` must be >= 0")

    if not isinstance(config.indent_char, str) or len(config.indent_char) != 1:
        raise ConfigError("`indent_char` must be exactly one character")


def apply_overrides(config: DisplayConfig, **overrides: object) -> DisplayConfig:
    """Apply override values to a `DisplayConfig`.

    Args:
        config: Base configuration to update.
        overrides: Override values keyed by configuration field name; values set
            to None are ignored.

    Returns:
        DisplayConfig: New configuration with the overrides applied, or the
        original configuration when nothing changes.

    Raises:
        TypeError: If an override name is not defined on `DisplayConfig`.
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> DisplayConfig:
    """Load, override, and validate configuration.

    Args:
        search_path: Directory where configuration files are resolved.
        overrides: Override values keyed by configuration attributes; None
            values are ignored.

    Returns:
        DisplayConfig: Validated configuration ready for rendering.

    Raises:
        ConfigError: If configuration loading or validation fails.

    Examples:
        config = build_config(Path.cwd(), indentation=2)
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    validate_config(config)
    return config


def _ensure_integers(values: dict[str, object]) -> None:
    for key, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"`{key}` must be an integer")

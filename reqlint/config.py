"""Configuration file loader for reqlint.

Handles discovery, loading, parsing, and validation of configuration files.
Supports two formats:

- ``reqlint.toml``: settings under a ``[reqlint]`` table
- ``pyproject.toml``: settings under a ``[tool.reqlint]`` table

Discovery order:

1. Explicit path from ``--config`` or ``REQLINT_CONFIG``
2. ``reqlint.toml`` in current directory
3. ``pyproject.toml`` with ``[tool.reqlint]`` section

Configuration precedence: defaults < config file < CLI flags.

Example (``reqlint.toml``)::

    [reqlint]
    bypass = ["setuptools"]

    [reqlint.severity]
    duplicate = "error"
    unsorted = "disabled"
"""

from __future__ import annotations

import tomli as tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Tuple
from dataclasses import dataclass, field

from reqlint.exceptions import ConfigError
from reqlint.utils.logger import get_logger
from reqlint.models.finding import FindingKind, Severity
from reqlint.constants import CONFIG_FILE_NAME

logger = get_logger("config")


@dataclass
class ReqLintConfig:
    """Parsed and validated reqlint configuration.

    All fields have defaults, so empty config files are valid.

    Attributes:
        severity: Per-kind severity overrides. Kinds not listed keep the
            linter's default severity.
        bypass: Bypass tokens (normalized package names) whose findings
            are suppressed.
        source_path: Path to loaded config file, or ``None`` if using defaults.
    """

    severity: Dict[FindingKind, Severity] = field(default_factory=dict)
    bypass: Tuple[str, ...] = ()

    # Metadata (not a user-facing option)
    source_path: Optional[Path] = field(default=None, repr=False)

    def to_log_dict(self) -> Dict[str, Any]:
        """Return configuration as dictionary for debug logging."""
        return {
            "severity": {
                kind.label: level.value for kind, level in self.severity.items()
            },
            "bypass": list(self.bypass),
        }


def discover_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file to load.

    Args:
        explicit_path: Explicit config path. If provided, must exist.

    Returns:
        Resolved path to config file, or ``None`` if not found.

    Raises:
        ConfigError: Explicit path provided but does not exist.
    """
    if explicit_path is not None:
        resolved = explicit_path.resolve()
        if not resolved.is_file():
            raise ConfigError(
                f"Configuration file not found: {explicit_path}",
                config_path=str(explicit_path),
            )
        logger.debug("Using explicit config: %s", resolved)
        return resolved

    cwd = Path.cwd()

    reqlint_toml = cwd / CONFIG_FILE_NAME
    if reqlint_toml.is_file():
        logger.debug("Found %s: %s", CONFIG_FILE_NAME, reqlint_toml)
        return reqlint_toml

    pyproject_toml = cwd / "pyproject.toml"
    if pyproject_toml.is_file() and _pyproject_has_reqlint_section(pyproject_toml):
        logger.debug("Found [tool.reqlint] in pyproject.toml: %s", pyproject_toml)
        return pyproject_toml

    logger.debug("No configuration file found")
    return None


def _pyproject_has_reqlint_section(path: Path) -> bool:
    """Check if pyproject.toml contains a [tool.reqlint] section.

    An unreadable or invalid pyproject.toml is treated as having no
    section; it may belong to a project that never configured reqlint.
    """
    try:
        raw = _read_toml(path)
    except ConfigError as exc:
        logger.debug("Ignoring unreadable %s: %s", path, exc)
        return False
    return "reqlint" in raw.get("tool", {})


def load_config(config_path: Optional[Path] = None) -> ReqLintConfig:
    """Load and validate reqlint configuration.

    Args:
        config_path: Explicit path to config file. If ``None``, uses
            auto-discovery (see :func:`discover_config_file`).

    Returns:
        Validated :class:`ReqLintConfig` with values from file or defaults.

    Raises:
        ConfigError: File cannot be parsed, has unknown keys, or invalid values.
    """
    resolved = discover_config_file(config_path)

    if resolved is None:
        logger.debug("No config file found, using defaults")
        return ReqLintConfig()

    logger.info("Loading configuration from %s", resolved)
    raw = _read_toml(resolved)

    if resolved.name == "pyproject.toml":
        section = raw.get("tool", {}).get("reqlint", {})
    else:
        section = raw.get("reqlint", {})

    if not section:
        logger.debug("Config file found but no reqlint section, using defaults")
        return ReqLintConfig(source_path=resolved)

    config = _parse_section(section, config_path=str(resolved))
    config.source_path = resolved

    logger.debug("Loaded configuration: %s", config.to_log_dict())
    return config


def _read_toml(path: Path) -> Dict[str, Any]:
    """Read and parse a TOML file.

    Raises:
        ConfigError: File cannot be read or is not valid TOML.
    """
    try:
        with open(path, "rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(
            f"Invalid TOML in {path.name}: {exc}",
            config_path=str(path),
        ) from exc
    except OSError as exc:
        raise ConfigError(
            f"Cannot read configuration file {path}: {exc}",
            config_path=str(path),
        ) from exc


def _parse_section(
    section: Dict[str, Any],
    *,
    config_path: str,
) -> ReqLintConfig:
    """Parse and validate a ``[reqlint]`` or ``[tool.reqlint]`` table.

    Raises:
        ConfigError: Unknown keys, unknown severities or wrong types.
    """
    config = ReqLintConfig()

    known_top = {"severity", "bypass"}
    unknown_top = set(section.keys()) - known_top
    if unknown_top:
        raise ConfigError(
            f"Unknown configuration keys: {', '.join(sorted(unknown_top))}",
            config_path=config_path,
        )

    if "severity" in section:
        config.severity = _parse_severity(section["severity"], config_path=config_path)

    if "bypass" in section:
        val = section["bypass"]
        if not isinstance(val, list) or not all(isinstance(v, str) for v in val):
            raise ConfigError(
                "bypass must be a list of strings",
                config_path=config_path,
                option="bypass",
            )
        config.bypass = tuple(v.strip().lower() for v in val)

    return config


def _parse_severity(
    value: Any,
    *,
    config_path: str,
) -> Dict[FindingKind, Severity]:
    """Validate the ``severity`` table, e.g. ``{"unsorted": "advice"}``."""
    if not isinstance(value, dict):
        raise ConfigError(
            f"severity must be a table, got {type(value).__name__}",
            config_path=config_path,
            option="severity",
        )

    unknown = set(value.keys()) - {kind.label for kind in FindingKind}
    if unknown:
        raise ConfigError(
            f"Unknown finding kinds in severity: {', '.join(sorted(unknown))}",
            config_path=config_path,
            option="severity",
        )

    overrides: Dict[FindingKind, Severity] = {}
    for key, level in value.items():
        option = f"severity.{key}"
        if not isinstance(level, str):
            raise ConfigError(
                f"{option} must be a string, got {type(level).__name__}",
                config_path=config_path,
                option=option,
            )
        try:
            overrides[FindingKind.from_label(key)] = Severity.parse(level)
        except ValueError as exc:
            raise ConfigError(
                str(exc),
                config_path=config_path,
                option=option,
            ) from exc

    return overrides

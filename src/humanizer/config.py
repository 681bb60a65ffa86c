"""YAML configuration loader for humanizer defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from humanizer.casing import LetterCasing, UnsupportedCasingError
from humanizer.culture import Culture
from humanizer.logging import get_logger

_log = get_logger("config")

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class ConfigError(Exception):
    """Raised when humanizer.yaml is invalid."""


@dataclass
class HumanizerConfig:
    culture: str | None = None  # None = resolve from HUMANIZER_CULTURE / process locale
    default_casing: LetterCasing | None = None  # casing applied when none is requested
    log_level: str = "WARNING"
    log_file: str | None = None
    source_path: str | None = None

    def resolved_culture(self) -> Culture | None:
        if self.culture is None:
            return None
        return Culture.from_locale(self.culture)

    def validate(self) -> list[str]:
        """Validate config, returning a list of error messages (empty = valid)."""
        errors: list[str] = []

        if self.log_level.upper() not in _LOG_LEVELS:
            errors.append(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}, got '{self.log_level}'"
            )

        if self.log_file:
            log_parent = Path(self.log_file).expanduser().parent
            if not log_parent.exists():
                errors.append(f"Log file parent directory does not exist: {log_parent}")

        return errors

    def apply_env_overrides(self) -> None:
        """Apply environment variable overrides."""
        if val := os.environ.get("HUMANIZER_CULTURE"):
            self.culture = val
        if val := os.environ.get("HUMANIZER_DEFAULT_CASING"):
            try:
                self.default_casing = LetterCasing.parse(val)
            except UnsupportedCasingError:
                _log.warning("ignoring HUMANIZER_DEFAULT_CASING=%r: unknown casing", val)


def load_config(path: str | None = None) -> HumanizerConfig:
    """Load config from explicit path, humanizer.yaml in CWD, or ~/.config/humanizer/config.yaml."""
    candidates = []
    if path:
        candidates.append(Path(path))
    else:
        candidates.append(Path.cwd() / "humanizer.yaml")
        candidates.append(Path.home() / ".config" / "humanizer" / "config.yaml")

    cfg = None
    for candidate in candidates:
        if candidate.exists():
            _log.info("loading config from %s", candidate)
            cfg = _parse_config(candidate)
            break
    if cfg is None:
        if path:
            raise ConfigError(f"Config file not found: {path}")
        cfg = HumanizerConfig()

    cfg.apply_env_overrides()
    return cfg


def _parse_config(path: Path) -> HumanizerConfig:
    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Could not parse {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be a mapping, got {type(data).__name__}")

    default_casing = None
    raw_casing = data.get("default_casing")
    if raw_casing is not None:
        try:
            default_casing = LetterCasing.parse(str(raw_casing))
        except UnsupportedCasingError as exc:
            raise ConfigError(
                f"default_casing must be one of {', '.join(LetterCasing.names())}, "
                f"got '{raw_casing}'"
            ) from exc

    culture = data.get("culture")
    if culture is not None and not isinstance(culture, str):
        raise ConfigError(f"culture must be a string, got {type(culture).__name__}")

    log_level = data.get("log_level")
    if log_level is None:
        log_level = "WARNING"
    elif not isinstance(log_level, str):
        raise ConfigError(f"log_level must be a string, got {type(log_level).__name__}")

    log_file = data.get("log_file")
    if log_file is not None and not isinstance(log_file, str):
        raise ConfigError(f"log_file must be a string, got {type(log_file).__name__}")

    return HumanizerConfig(
        culture=culture,
        default_casing=default_casing,
        log_level=log_level,
        log_file=log_file,
        source_path=str(path),
    )

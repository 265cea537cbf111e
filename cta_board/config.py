"""Configuration loader for the CTA arrivals board."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from typing import Any

from dotenv import load_dotenv
import yaml

CTA_API_BASE = "http://lapi.transitchicago.com/api/1.0/ttarrivals.aspx"
API_KEY_ENV_VAR = "TRAIN_API_KEY"


class ConfigError(ValueError):
    """Raised when the configuration is missing or invalid."""


@dataclass(frozen=True)
class Stop:
    """A transit stop to poll."""

    name: str
    id: int


@dataclass(frozen=True)
class CTAConfig:
    """Train Tracker API configuration."""

    api_key: str
    stops: tuple[Stop, ...]
    interval_seconds: int
    base_url: str = CTA_API_BASE
    request_timeout_seconds: float | None = None


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str
    log_dir: str | None = None


@dataclass(frozen=True)
class AppConfig:
    """Top-level application configuration."""

    cta: CTAConfig
    log: LoggingConfig


def _require_key(mapping: dict[str, Any], key: str, context: str) -> Any:
    if key not in mapping:
        raise ConfigError(f"Missing required key '{key}' in {context} config")
    return mapping[key]


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _parse_stop(entry: Any, index: int) -> Stop:
    if not isinstance(entry, dict):
        raise ConfigError(f"Stop #{index} must be a mapping with 'name' and 'id'")
    name = _require_key(entry, "name", f"stop #{index}")
    stop_id = _require_key(entry, "id", f"stop #{index}")
    if not isinstance(name, str) or not name.strip():
        raise ConfigError(f"Stop #{index} 'name' must be a non-empty string")
    if not _is_int(stop_id) or stop_id <= 0:
        raise ConfigError(f"Stop #{index} 'id' must be a positive integer, got {stop_id!r}")
    return Stop(name=name, id=stop_id)


def parse_stops(raw: Any) -> tuple[Stop, ...]:
    """Validate the stop list; an empty list is rejected."""
    if not isinstance(raw, list):
        raise ConfigError("'stops' must be a list")
    if not raw:
        raise ConfigError("'stops' must contain at least one stop")
    return tuple(_parse_stop(entry, index) for index, entry in enumerate(raw))


def _parse_interval(raw: Any) -> int:
    if not _is_int(raw) or raw <= 0:
        raise ConfigError(f"'interval_seconds' must be a positive integer, got {raw!r}")
    return raw


def _parse_timeout(raw: Any) -> float | None:
    if raw is None:
        return None
    if isinstance(raw, bool) or not isinstance(raw, (int, float)) or raw <= 0:
        raise ConfigError(f"'request_timeout_seconds' must be a positive number, got {raw!r}")
    return float(raw)


def _parse_logging(section: dict[str, Any]) -> LoggingConfig:
    level = str(section.get("level", "INFO")).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"Unknown logging level '{level}'")
    log_dir = section.get("log_dir")
    if log_dir is not None and not isinstance(log_dir, str):
        raise ConfigError("'log_dir' must be a string path")
    return LoggingConfig(level=level, log_dir=log_dir or None)


def load_api_key() -> str:
    """Read the Train Tracker API key from the environment (or a .env file)."""
    load_dotenv()
    api_key = os.environ.get(API_KEY_ENV_VAR, "").strip()
    if not api_key:
        raise ConfigError(f"{API_KEY_ENV_VAR} missing in environment")
    return api_key


def load_config(path: str = "config/config.yaml") -> AppConfig:
    """Load application configuration from a YAML file."""
    api_key = load_api_key()
    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except FileNotFoundError as exc:
        raise ConfigError(f"Config file not found: {path}") from exc
    except OSError as exc:
        raise ConfigError(f"Config file could not be read: {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Config file is not valid YAML: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError("Config file must contain a mapping at the top level")

    cta_section = _require_key(data, "cta", "cta")
    logging_section = data.get("logging", {})

    if not isinstance(cta_section, dict):
        raise ConfigError("'cta' config must be a mapping")
    if not isinstance(logging_section, dict):
        raise ConfigError("'logging' config must be a mapping")

    base_url = cta_section.get("base_url", CTA_API_BASE)
    if not isinstance(base_url, str) or not base_url:
        raise ConfigError("'base_url' must be a non-empty string")

    cta = CTAConfig(
        api_key=api_key,
        stops=parse_stops(_require_key(cta_section, "stops", "cta")),
        interval_seconds=_parse_interval(_require_key(cta_section, "interval_seconds", "cta")),
        base_url=base_url,
        request_timeout_seconds=_parse_timeout(cta_section.get("request_timeout_seconds")),
    )

    return AppConfig(cta=cta, log=_parse_logging(logging_section))

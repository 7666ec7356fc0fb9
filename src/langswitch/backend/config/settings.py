"""Runtime settings loaded from packaged YAML defaults and environment overrides."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from typing_extensions import Self

logger = logging.getLogger(__name__)

CONFIG_DIRECTORY = Path(__file__).resolve().parent / "data"
SETTINGS_FILE = CONFIG_DIRECTORY / "settings.yaml"
ENV_PREFIX = "LANGSWITCH_"


class ConfigurationError(ValueError):
    """Raised when configuration values violate schema expectations."""


class Settings(BaseModel):
    """Frozen view over the effective runtime settings."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    default_locale: str = "en"
    fallback_locale: str = "en"
    bundle_base_url: str = "http://127.0.0.1:5000"
    bundle_path_template: str = "/mock/{lang}.json"
    request_timeout: float = Field(default=5.0, gt=0)
    page_size: int = Field(default=2, ge=1)

    @model_validator(mode="after")
    def _validate_template(self) -> Self:
        if "{lang}" not in self.bundle_path_template:
            raise ConfigurationError("bundle_path_template must contain a {lang} placeholder")
        return self


# Environment variable suffix -> settings field, with the parser applied to raw values.
_ENV_FIELDS: dict[str, tuple[str, type]] = {
    "DEFAULT_LOCALE": ("default_locale", str),
    "FALLBACK_LOCALE": ("fallback_locale", str),
    "BUNDLE_BASE_URL": ("bundle_base_url", str),
    "REQUEST_TIMEOUT": ("request_timeout", float),
    "PAGE_SIZE": ("page_size", int),
}


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must define a mapping at the top level")
    return data


def _environment_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for suffix, (field, parser) in _ENV_FIELDS.items():
        env = f"{ENV_PREFIX}{suffix}"
        raw = environ.get(env)
        if raw is None or not raw.strip():
            continue
        try:
            value = parser(raw.strip())
        except ValueError:
            logger.warning("Ignoring invalid value for %s: %s", env, raw)
            continue
        if parser is not str and value <= 0:
            logger.warning("Ignoring non-positive value for %s: %s", env, raw)
            continue
        overrides[field] = value
    return overrides


def build_settings(
    path: Path | None = None, environ: Mapping[str, str] | None = None
) -> Settings:
    """Merge YAML defaults at ``path`` with ``environ`` overrides."""

    raw: dict[str, Any] = _load_yaml(path or SETTINGS_FILE)
    raw.update(_environment_overrides(os.environ if environ is None else environ))

    try:
        return Settings.model_validate(raw)
    except ValidationError as error:
        raise ConfigurationError(f"Settings validation failed: {error}") from error


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load and cache the process settings."""

    return build_settings()


__all__ = [
    "CONFIG_DIRECTORY",
    "ConfigurationError",
    "ENV_PREFIX",
    "SETTINGS_FILE",
    "Settings",
    "build_settings",
    "load_settings",
]

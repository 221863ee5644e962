"""Server settings: the Deepgram credential and output defaults.

Settings are resolved once at startup and handed explicitly to the client and
the tools; nothing reads the environment after that.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

API_KEY_ENV = "DEEPGRAM_API_KEY"

# Environment variable -> settings field
_ENV_OVERRIDES = {
    API_KEY_ENV: "api_key",
    "DEEPGRAM_MODEL": "model",
    "DEEPGRAM_BASE_URL": "base_url",
    "DEEPGRAM_OUTPUT_DIR": "output_dir",
}


class ConfigError(Exception):
    """Raised when settings are missing or invalid; fatal at startup."""


class Settings(BaseModel):
    """Configuration for the Deepgram text-to-speech server."""

    model_config = {"frozen": True}

    api_key: str = Field(min_length=1, repr=False)
    model: str = "aura-asteria-en"
    base_url: str = "https://api.deepgram.com"
    default_filename: str = "output.mp3"
    output_dir: Path = Path(".")
    request_timeout: float | None = None


def load_settings(
    config_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Build :class:`Settings` from an optional YAML file and the environment.

    Environment variables in the file (``${VAR}`` or ``$VAR``) are expanded
    before parsing. ``DEEPGRAM_*`` variables override values from the file.

    Raises:
        ConfigError: If the file cannot be read or parsed, the API key is
            missing, or a value fails validation.
    """
    env = os.environ if environ is None else environ
    data: dict[str, Any] = {}

    if config_path is not None:
        data.update(_read_yaml(config_path))

    for var, field in _ENV_OVERRIDES.items():
        value = env.get(var)
        if value:
            data[field] = value

    if not data.get("api_key"):
        raise ConfigError(f"{API_KEY_ENV} environment variable not set")

    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc

    try:
        loaded: Any = yaml.safe_load(os.path.expandvars(raw))
    except yaml.YAMLError as exc:
        raise ConfigError(f"YAML parse error: {exc}") from exc

    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ConfigError("Settings YAML must be a mapping")
    return loaded

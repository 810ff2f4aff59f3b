"""Settings loader for the formula cache.

Settings come from a JSON or YAML document, given as a filesystem path or an
``http(s)://`` URL. The document is validated against
``data/settings.schema.json`` before use. When no source is given and the
``NPM_RANGE_CONFIG`` environment variable is unset, defaults apply.

Example ``settings.yaml``::

    cache:
      enabled: true
      size: 1024
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import requests
import yaml
from jsonschema import Draft202012Validator, ValidationError
from requests import Response
from tenacity import retry, stop_after_attempt, wait_fixed

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV_VAR = "NPM_RANGE_CONFIG"
SCHEMA_PATH = Path(__file__).resolve().parent / "data" / "settings.schema.json"

DEFAULT_CACHE_SIZE = 512


class ConfigError(RuntimeError):
    """Raised when the settings document cannot be loaded or is invalid."""


@dataclass(slots=True, frozen=True)
class Settings:
    """Top-level settings container."""

    cache_enabled: bool = True
    cache_size: int = DEFAULT_CACHE_SIZE

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        cache = data.get("cache") or {}
        return cls(
            cache_enabled=cache.get("enabled", True),
            cache_size=cache.get("size", DEFAULT_CACHE_SIZE),
        )


@retry(reraise=True, stop=stop_after_attempt(3), wait=wait_fixed(2))
def _http_get(url: str) -> Response:
    return requests.get(url, timeout=10)


def _fetch(url: str) -> str:
    try:
        response = _http_get(url)
    except requests.RequestException as exc:
        raise ConfigError(f"Failed to fetch settings from {url}: {exc}") from exc
    if response.status_code != 200:
        raise ConfigError(f"Unexpected status code {response.status_code} fetching {url}")
    return response.text


def _is_url(source: str) -> bool:
    return source.startswith("http://") or source.startswith("https://")


def _resolve_source(source: Path | str | None) -> str | None:
    """Resolve the settings source.

    Priority:
    1. Explicit argument
    2. NPM_RANGE_CONFIG environment variable
    3. None (built-in defaults)
    """
    if source is not None:
        return str(source)
    env_source = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_source:
        return env_source
    return None


def _decode(text: str, name: str) -> Any:
    if name.endswith((".yaml", ".yml")):
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in settings {name}: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in settings {name}: {exc}") from exc


def _format_errors(errors: Iterable[ValidationError]) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def validate_settings(document: Any) -> None:
    """Validate a decoded settings document against the bundled schema.

    Raises:
        ConfigError: listing every schema violation.
    """
    schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(document), key=lambda e: list(e.path))
    if errors:
        raise ConfigError("Invalid settings:\n" + _format_errors(errors))


def load_settings(source: Path | str | None = None) -> Settings:
    """Load and validate settings.

    Args:
        source: Optional path or URL of a JSON/YAML settings document. If not
            provided, uses the NPM_RANGE_CONFIG env var or falls back to
            defaults.

    Raises:
        ConfigError: If the document cannot be read or contains invalid data.
    """
    resolved = _resolve_source(source)
    if resolved is None:
        logger.debug("No settings source configured; using defaults")
        return Settings()

    logger.debug("Loading settings from %s", resolved)
    if _is_url(resolved):
        text = _fetch(resolved)
    else:
        path = Path(resolved)
        if not path.exists():
            raise ConfigError(f"Settings file not found: {path}")
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Failed to read settings file: {exc}") from exc

    document = _decode(text, resolved)
    if document is None:
        # Empty YAML document.
        document = {}
    validate_settings(document)
    return Settings.from_dict(document)

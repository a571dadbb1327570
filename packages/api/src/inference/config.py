# This project was developed with assistance from AI tools.
"""Provider endpoint configuration loader.

Reads config/providers.yaml, substitutes ${ENV_VAR:-default} placeholders,
validates that every provider has an endpoint, and supports mtime-based
hot-reload so config changes take effect without restarting the server.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml
from db.enums import ModelProvider
from dotenv import load_dotenv

# Load .env into os.environ so YAML ${VAR} placeholders resolve correctly.
# pydantic-settings reads .env into its Settings object but doesn't set
# os.environ; the YAML config loader needs actual env vars.
load_dotenv()

logger = logging.getLogger(__name__)

_CONFIG_PATH = Path(__file__).resolve().parents[4] / "config" / "providers.yaml"
_cached_config: dict[str, Any] | None = None
_cached_mtime: float = 0.0

_ENV_VAR_PATTERN = re.compile(r"\$\{(\w+)(?::-(.*?))?\}")

REQUIRED_PROVIDER_FIELDS = {"base_url", "api_key"}


def _substitute_env_vars(value: str) -> str:
    """Replace ${VAR:-default} patterns with environment values."""

    def _replace(match: re.Match) -> str:
        var_name = match.group(1)
        default = match.group(2) or ""
        return os.environ.get(var_name, default)

    return _ENV_VAR_PATTERN.sub(_replace, value)


def _resolve_env_vars(obj: Any) -> Any:
    """Recursively resolve env var placeholders in a config tree."""
    if isinstance(obj, str):
        return _substitute_env_vars(obj)
    if isinstance(obj, dict):
        return {k: _resolve_env_vars(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_resolve_env_vars(item) for item in obj]
    return obj


def _validate_config(config: dict[str, Any]) -> None:
    """Every known provider must be configured with the required fields."""
    providers = config.get("providers") if isinstance(config, dict) else None
    if not providers or not isinstance(providers, dict):
        raise ValueError("providers.yaml must contain a 'providers' section")

    missing_providers = {p.value for p in ModelProvider} - set(providers.keys())
    if missing_providers:
        raise ValueError(f"providers.yaml is missing providers: {sorted(missing_providers)}")

    for name, provider in providers.items():
        if not isinstance(provider, dict):
            raise ValueError(f"Provider '{name}' must be a mapping")
        missing = REQUIRED_PROVIDER_FIELDS - set(provider.keys())
        if missing:
            raise ValueError(f"Provider '{name}' is missing required fields: {missing}")
        aliases = provider.get("model_aliases", {})
        if not isinstance(aliases, dict):
            raise ValueError(f"Provider '{name}' model_aliases must be a mapping")


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load and validate providers.yaml from disk."""
    config_path = path or _CONFIG_PATH
    if not config_path.exists():
        raise FileNotFoundError(f"Provider config not found: {config_path}")

    raw = config_path.read_text()
    config = yaml.safe_load(raw)
    config = _resolve_env_vars(config)
    _validate_config(config)
    return config


def get_config(path: Path | None = None) -> dict[str, Any]:
    """Return cached config, reloading if the file's mtime has changed."""
    global _cached_config, _cached_mtime  # noqa: PLW0603
    config_path = path or _CONFIG_PATH

    try:
        current_mtime = config_path.stat().st_mtime
    except FileNotFoundError:
        if _cached_config is not None:
            logger.warning("Config file disappeared, using cached config")
            return _cached_config
        raise

    if _cached_config is None or current_mtime > _cached_mtime:
        logger.info("Loading provider config from %s", config_path)
        _cached_config = load_config(config_path)
        _cached_mtime = current_mtime

        # Invalidate cached HTTP clients so they pick up new endpoints/keys
        from .client import clear_client_cache

        clear_client_cache()

    return _cached_config


def get_provider_config(provider: ModelProvider, path: Path | None = None) -> dict[str, Any]:
    """Return endpoint config for one provider."""
    return get_config(path)["providers"][provider.value]


def resolve_model_id(provider: ModelProvider, model: str, path: Path | None = None) -> str:
    """Map a public model name to the identifier the provider endpoint expects."""
    aliases = get_provider_config(provider, path).get("model_aliases") or {}
    return aliases.get(model, model)

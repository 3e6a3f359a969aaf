# This project was developed with assistance from AI tools.
"""Provider configuration loader and selection.

Reads config/models.yaml, substitutes ${ENV_VAR:-default} placeholders,
validates required fields, and supports mtime-based hot-reload so a new key
takes effect without restarting the server.

``resolve_provider`` turns the loaded config into one ``ProviderConfig``.
Credentials are looked up here and nowhere else; the chat service and the
prompt/gate functions only ever see the resolved value.
"""

import enum
import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from .errors import LLMConfigurationError

# Load .env into os.environ so YAML ${VAR} placeholders resolve correctly.
# pydantic-settings reads .env into its Settings object but doesn't set
# os.environ; the YAML config loader needs actual env vars.
load_dotenv()

logger = logging.getLogger(__name__)

_CONFIG_PATH = Path(__file__).resolve().parents[4] / "config" / "models.yaml"
_cached_config: dict[str, Any] | None = None
_cached_mtime: float = 0.0

_ENV_VAR_PATTERN = re.compile(r"\$\{(\w+)(?::-(.*?))?\}")

REQUIRED_PROVIDER_FIELDS = {"api_key", "model_name", "endpoint"}

_GENERATION_DEFAULTS = {"temperature": 0.4, "max_tokens": 500, "timeout_seconds": 30}


class ProviderKind(str, enum.Enum):
    OPENAI = "openai"
    GEMINI = "gemini"
    SIMULATED = "simulated"


@dataclass(frozen=True)
class ProviderConfig:
    """Everything the transport needs for one call, resolved up front."""

    kind: ProviderKind
    model_name: str = ""
    endpoint: str = ""
    api_key: str = ""
    temperature: float = 0.4
    max_tokens: int = 500
    timeout_seconds: float = 30


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
    """Validate the providers section and the selection order."""
    providers = config.get("providers")
    if not providers or not isinstance(providers, dict):
        raise ValueError("models.yaml must contain a 'providers' section")

    for name, provider in providers.items():
        if name not in {k.value for k in ProviderKind} - {ProviderKind.SIMULATED.value}:
            raise ValueError(f"Unknown provider '{name}' in models.yaml")
        if not isinstance(provider, dict):
            raise ValueError(f"Provider '{name}' must be a mapping")
        missing = REQUIRED_PROVIDER_FIELDS - set(provider.keys())
        if missing:
            raise ValueError(f"Provider '{name}' is missing required fields: {missing}")

    order = (config.get("selection") or {}).get("order", list(providers.keys()))
    unknown = [name for name in order if name not in providers]
    if unknown:
        raise ValueError(f"selection.order references undefined providers: {unknown}")


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load and validate models.yaml from disk."""
    config_path = path or _CONFIG_PATH
    if not config_path.exists():
        raise FileNotFoundError(f"Model config not found: {config_path}")

    try:
        config = yaml.safe_load(config_path.read_text()) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"models.yaml is not valid YAML: {exc}") from exc
    if not isinstance(config, dict):
        raise ValueError("models.yaml must be a mapping at the top level")
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
        logger.info("Loading model config from %s", config_path)
        _cached_config = load_config(config_path)
        _cached_mtime = current_mtime

        # Invalidate cached HTTP clients so they pick up new endpoints/keys
        from .client import clear_client_cache

        clear_client_cache()

    return _cached_config


def resolve_provider(config: dict[str, Any], *, demo_mode: bool = False) -> ProviderConfig:
    """Pick the first provider in selection order whose api_key is set.

    Falls back to the simulated responder only when ``demo_mode`` is on.

    Raises:
        LLMConfigurationError: No credential is configured and demo mode is off.
    """
    providers = config["providers"]
    generation = {**_GENERATION_DEFAULTS, **(config.get("generation") or {})}
    order = (config.get("selection") or {}).get("order", list(providers.keys()))

    for name in order:
        provider = providers[name]
        api_key = (provider.get("api_key") or "").strip()
        if not api_key:
            continue
        return ProviderConfig(
            kind=ProviderKind(name),
            model_name=provider["model_name"],
            endpoint=provider["endpoint"].rstrip("/"),
            api_key=api_key,
            temperature=float(generation["temperature"]),
            max_tokens=int(generation["max_tokens"]),
            timeout_seconds=float(generation["timeout_seconds"]),
        )

    if demo_mode:
        return ProviderConfig(kind=ProviderKind.SIMULATED)

    raise LLMConfigurationError("LLM API not configured. Set OPENAI_API_KEY or GEMINI_API_KEY.")


def get_provider(path: Path | None = None) -> ProviderConfig:
    """FastAPI dependency: resolve the active provider from current config."""
    from ..core.config import settings

    return resolve_provider(get_config(path), demo_mode=settings.LLM_DEMO_MODE)


def log_llm_status() -> None:
    """Log which provider answers chat questions. Call at startup."""
    try:
        provider = get_provider()
    except LLMConfigurationError:
        logger.warning("LLM provider: UNCONFIGURED (set OPENAI_API_KEY or GEMINI_API_KEY)")
        return
    except (FileNotFoundError, ValueError):
        logger.warning("LLM provider: INVALID CONFIG", exc_info=True)
        return

    if provider.kind is ProviderKind.SIMULATED:
        logger.warning("LLM provider: DEMO MODE (keyword simulator, no API key set)")
    else:
        logger.warning(
            "LLM provider: ACTIVE (provider=%s, model=%s)",
            provider.kind.value,
            provider.model_name,
        )

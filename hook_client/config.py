from __future__ import annotations

import logging
import os
from typing import Any, Dict

from dotenv import load_dotenv

from hook_shared.protocol.constants import (
    DEFAULT_HOOK_TYPE,
    DEFAULT_VERSION,
    ENCODING,
    HOOK_PORT,
    HOOK_TYPE_WIDTH,
    VERSION_WIDTH,
)

DEFAULT_CONFIG: Dict[str, Any] = {
    "server_host": "127.0.0.1",
    "server_port": HOOK_PORT,
    "connect_timeout": 5.0,
    "version": DEFAULT_VERSION,
    "hook_type": DEFAULT_HOOK_TYPE,
    "log_level": "INFO",
}

CLIENT_CONFIG: Dict[str, Any] = DEFAULT_CONFIG.copy()


class ConfigError(Exception):
    """Raised when configuration values are invalid."""

    pass


def load_config(env_path: str = ".env") -> Dict[str, Any]:
    """Load hook client configuration from env file/environment variables."""
    if os.path.exists(env_path):
        load_dotenv(env_path)

    for key, default_value in DEFAULT_CONFIG.items():
        env_key = f"HOOK_CLIENT_{key.upper()}"
        value = os.getenv(env_key, default_value)
        CLIENT_CONFIG[key] = _coerce_type(value, type(default_value))

    _validate_config()
    logging.getLogger().setLevel(CLIENT_CONFIG["log_level"])
    return CLIENT_CONFIG


def _coerce_type(value: Any, target_type: type) -> Any:
    if isinstance(value, target_type):
        return value
    try:
        if target_type is bool:
            return str(value).lower() in ("1", "true", "yes", "on")
        return target_type(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Cannot convert {value} to {target_type}") from exc


def _validate_config() -> None:
    if not (1 <= int(CLIENT_CONFIG["server_port"]) <= 65535):
        raise ConfigError("server_port must be between 1 and 65535")
    if CLIENT_CONFIG["connect_timeout"] <= 0:
        raise ConfigError("connect_timeout must be positive")
    if len(CLIENT_CONFIG["version"].encode(ENCODING)) > VERSION_WIDTH:
        raise ConfigError(f"version must fit in {VERSION_WIDTH} bytes")
    if len(CLIENT_CONFIG["hook_type"].encode(ENCODING)) > HOOK_TYPE_WIDTH:
        raise ConfigError(f"hook_type must fit in {HOOK_TYPE_WIDTH} bytes")
    if not isinstance(logging.getLevelName(CLIENT_CONFIG["log_level"].upper()), int):
        raise ConfigError(f"Unknown log_level {CLIENT_CONFIG['log_level']}")
    CLIENT_CONFIG["log_level"] = CLIENT_CONFIG["log_level"].upper()


def get(key: str, default: Any = None) -> Any:
    return CLIENT_CONFIG.get(key, default)


__all__ = ["CLIENT_CONFIG", "DEFAULT_CONFIG", "ConfigError", "get", "load_config"]

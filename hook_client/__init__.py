"""Hook sender: configuration and the TCP transport client."""

from .config import CLIENT_CONFIG, ConfigError, load_config
from .core import HookClient

__all__ = ["CLIENT_CONFIG", "ConfigError", "HookClient", "load_config"]

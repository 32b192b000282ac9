from .network import HookClient

__all__ = ["HookClient"]

from .plugin import ComponentPlugin, PluginInfo
from .registry import DuplicatePluginError, PluginNotFoundError, PluginRegistry

__all__ = [
    "ComponentPlugin",
    "PluginInfo",
    "PluginRegistry",
    "PluginNotFoundError",
    "DuplicatePluginError",
]

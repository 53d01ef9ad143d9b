from .plugin_contracts import (
    ComponentPlugin,
    DuplicatePluginError,
    PluginInfo,
    PluginNotFoundError,
    PluginRegistry,
)
from .render_contracts import ManifestGroup, ParamsSource, RenderParams

__all__ = [
    "ComponentPlugin",
    "PluginInfo",
    "PluginRegistry",
    "PluginNotFoundError",
    "DuplicatePluginError",
    "ManifestGroup",
    "ParamsSource",
    "RenderParams",
]

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from core.contracts import (
    ComponentPlugin,
    DuplicatePluginError,
    PluginInfo,
    PluginNotFoundError,
    PluginRegistry,
)


@dataclass
class DictPluginRegistry(PluginRegistry):
    plugins: dict[str, ComponentPlugin] = field(default_factory=dict)

    def register(self, plugin: ComponentPlugin) -> None:
        if plugin.name in self.plugins:
            raise DuplicatePluginError(f"Plugin already registered: {plugin.name}")
        self.plugins[plugin.name] = plugin

    def get(self, name: str) -> ComponentPlugin:
        try:
            return self.plugins[name]
        except KeyError as e:
            raise PluginNotFoundError(name) from e

    def list(self) -> Iterable[PluginInfo]:
        return [p.info for p in self.plugins.values()]

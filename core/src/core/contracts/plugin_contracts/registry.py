from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from core.contracts.plugin_contracts.plugin import ComponentPlugin, PluginInfo


class PluginNotFoundError(KeyError):
    pass


class DuplicatePluginError(ValueError):
    pass


@runtime_checkable
class PluginRegistry(Protocol):
    def register(self, plugin: ComponentPlugin) -> None:
        """Add a constructed plugin; raise DuplicatePluginError on a name clash."""
        ...

    def get(self, name: str) -> ComponentPlugin:
        """Return plugin for name or raise PluginNotFoundError."""
        ...

    def list(self) -> Iterable[PluginInfo]:
        """List registered plugins (for CLI / debugging)."""
        ...
